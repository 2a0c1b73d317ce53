"""
Sekvap Errors
"""


class InvalidArgument(ValueError):
    """Raised for a missing document or text, or an empty key."""
