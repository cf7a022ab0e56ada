"""Hand resolved URLs to external programs."""

import logging
import shutil
import subprocess
import sys
from abc import ABC, abstractmethod
from typing import List, Optional

from .resolver import LaunchMode, ResolvedAction

logger = logging.getLogger(__name__)


class LaunchError(Exception):
    """Raised when an external program cannot be started."""


def _spawn(cmd: List[str]) -> None:
    """Start ``cmd`` detached from the terminal session."""
    logger.debug("Launching: %s", cmd)
    kwargs = {
        "stdin": subprocess.DEVNULL,
        "stdout": subprocess.DEVNULL,
        "stderr": subprocess.DEVNULL,
    }
    if sys.platform != "win32":
        kwargs["start_new_session"] = True
    try:
        subprocess.Popen(cmd, **kwargs)
    except OSError as e:
        raise LaunchError(f"Failed to start {cmd[0]}: {e}") from e


class Launcher(ABC):
    """Abstract base class for external openers."""

    @abstractmethod
    def available(self) -> bool:
        """Whether this launcher can run on the current platform."""
        pass

    @abstractmethod
    def launch(self, action: ResolvedAction) -> None:
        """
        Open the action's target URL.

        Raises:
            LaunchError: If the external program could not be started
        """
        pass


class MediaLauncher(Launcher):
    """Play audio/video in a dedicated media player."""

    def __init__(self, command: str = "mpv", enabled: bool = True) -> None:
        self.command = command
        self.enabled = enabled

    def available(self) -> bool:
        if not self.enabled:
            return False
        if sys.platform not in ("linux", "darwin"):
            return False
        return shutil.which(self.command) is not None

    def launch(self, action: ResolvedAction) -> None:
        _spawn([self.command, f"--force-media-title={action.label}", action.target_url])


class GenericLauncher(Launcher):
    """Open URLs with the platform's default handler."""

    def __init__(self, platform: Optional[str] = None) -> None:
        self.platform = platform or sys.platform

    def available(self) -> bool:
        return True

    def command_for(self, url: str) -> List[str]:
        if self.platform == "win32":
            return ["cmd", "/c", "start", "", url]
        if self.platform == "darwin":
            return ["open", url]
        return ["xdg-open", url]

    def launch(self, action: ResolvedAction) -> None:
        _spawn(self.command_for(action.target_url))


class ActionDispatcher:
    """Pick the launcher for a resolved action."""

    def __init__(self, media: Optional[Launcher] = None, generic: Optional[Launcher] = None) -> None:
        self.media = media or MediaLauncher()
        self.generic = generic or GenericLauncher()

    def launcher_for(self, action: ResolvedAction) -> Launcher:
        if action.mode == LaunchMode.MEDIA and self.media.available():
            return self.media
        return self.generic

    def dispatch(self, action: ResolvedAction) -> Launcher:
        """Launch ``action`` and return the launcher that was used."""
        if not action.target_url:
            raise LaunchError("Item has no link to open")
        launcher = self.launcher_for(action)
        launcher.launch(action)
        return launcher
