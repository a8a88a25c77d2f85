"""Real BrowserLauncher implementation using the platform open command."""

import logging
import subprocess

from gitnav.core.errors import BrowserLaunchError
from gitnav.core.platform import select_open_command
from gitnav.integrations.browser.abc import BrowserLauncher

logger = logging.getLogger(__name__)


class SubprocessBrowserLauncher(BrowserLauncher):
    """Production implementation that spawns open, start or xdg-open."""

    def __init__(self, platform: str) -> None:
        self._command = select_open_command(platform)

    def launch(self, url: str) -> None:
        """Spawn the open command for the URL and return without waiting.

        The child process is not tracked afterwards; only a failure to start
        it is reported.

        Args:
            url: The URL to open in the browser

        Raises:
            BrowserLaunchError: If the open command could not be executed
        """
        argv = self._command.argv(url)
        logger.debug("Spawning browser opener: %s", argv)
        try:
            subprocess.Popen(
                argv,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
            )
        except OSError as e:
            raise BrowserLaunchError(f"Failed to run {self._command.name}: {e}") from e
