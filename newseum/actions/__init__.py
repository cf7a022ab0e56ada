"""Item-to-action resolution and external launchers."""

from .launchers import ActionDispatcher, GenericLauncher, LaunchError, Launcher, MediaLauncher
from .resolver import LaunchMode, ResolvedAction, classify_url, resolve

__all__ = [
    "ActionDispatcher",
    "GenericLauncher",
    "LaunchError",
    "LaunchMode",
    "Launcher",
    "MediaLauncher",
    "ResolvedAction",
    "classify_url",
    "resolve",
]
