"""Application context with dependency injection."""

import os
import sys
from dataclasses import dataclass

from gitnav.core.config import REPO_URL_ENV_VAR
from gitnav.integrations.browser.abc import BrowserLauncher
from gitnav.integrations.browser.real import SubprocessBrowserLauncher


@dataclass(frozen=True)
class NavContext:
    """Immutable context holding all dependencies for a gitnav run.

    Created at CLI entry point and threaded through the command.
    base_url may be None here; it is validated only once a link is built.
    """

    browser: BrowserLauncher
    base_url: str | None
    platform: str

    @staticmethod
    def for_test(
        browser: BrowserLauncher | None = None,
        base_url: str | None = "https://github.com/org/repo",
        platform: str = "linux",
    ) -> "NavContext":
        """Create a context with test defaults.

        Args:
            browser: Launcher to use. If None, a FakeBrowserLauncher is created.
            base_url: Base repository URL, None to simulate missing config
            platform: sys.platform style string

        Example:
            >>> browser = FakeBrowserLauncher()
            >>> ctx = NavContext.for_test(browser=browser)
        """
        from gitnav.integrations.browser.fake import FakeBrowserLauncher

        if browser is None:
            browser = FakeBrowserLauncher()
        return NavContext(browser=browser, base_url=base_url, platform=platform)


def create_context() -> NavContext:
    """Create production context from the process environment and platform."""
    platform = sys.platform
    return NavContext(
        browser=SubprocessBrowserLauncher(platform),
        base_url=os.environ.get(REPO_URL_ENV_VAR),
        platform=platform,
    )
