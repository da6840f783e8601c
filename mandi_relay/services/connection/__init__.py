"""
Connection Management Module

Exports the transport-level ConnectionHub and ClientConnection.
"""
from .models import ClientConnection
from .hub import ConnectionHub

__all__ = [
    "ClientConnection",
    "ConnectionHub",
]
