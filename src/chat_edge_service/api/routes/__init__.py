"""API route modules, in registration order."""

from . import pages
from . import chat
from . import fallback

__all__ = ["pages", "chat", "fallback"]
