"""User interfaces for slnic."""
