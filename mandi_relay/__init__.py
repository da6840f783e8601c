"""Multilingual real-time chat relay for marketplace negotiation rooms."""

__version__ = "1.0.0"
