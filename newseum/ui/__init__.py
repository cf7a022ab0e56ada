"""Interactive terminal browser."""

from .browser import Browser
from .session import BrowserSession

__all__ = ["Browser", "BrowserSession"]
