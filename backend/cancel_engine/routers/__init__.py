"""Cancellation Engine - API Routers"""
from .letters import router as letters_router
from .suggestions import router as suggestions_router
from .tones import router as tones_router

__all__ = [
    "letters_router",
    "suggestions_router",
    "tones_router",
]
