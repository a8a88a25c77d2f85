"""Browser launcher abstraction for testability.

This module provides an ABC for launching URLs in a browser to enable
testing without actually opening browser windows.
"""

from abc import ABC, abstractmethod


class BrowserLauncher(ABC):
    """Abstract interface for launching URLs in a browser."""

    @abstractmethod
    def launch(self, url: str) -> None:
        """Start opening a URL in the default web browser.

        Returns once the opener has been started; does not wait for it.

        Args:
            url: The URL to open in the browser

        Raises:
            BrowserLaunchError: If the opener could not be started
        """
        ...
