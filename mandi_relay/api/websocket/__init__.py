"""
WebSocket API module.

Provides the WebSocket router for real-time chat.
"""
from .router import router

__all__ = ["router"]
