"""
Session management module.

Provides the ChatOrchestrator for managing chat WebSocket sessions.
"""
from .orchestrator import ChatOrchestrator

__all__ = ["ChatOrchestrator"]
