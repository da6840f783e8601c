"""
Relay Exceptions

Custom exceptions for caller misuse detected by the relay engine.
"""


class RelayError(Exception):
    """Base exception for relay errors reported back to the caller"""
    pass


class InvalidPayloadError(RelayError):
    """Raised when an inbound event is missing required fields"""
    pass


class SessionNotFoundError(RelayError):
    """Raised when a connection acts before joining a room"""
    pass
