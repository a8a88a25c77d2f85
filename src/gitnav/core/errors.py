"""Error types raised while resolving and opening a repository link.

The core raises these; the CLI layer decides how each one is reported.
"""


class NavigationError(Exception):
    """Base class for user-facing gitnav failures."""

    @property
    def message(self) -> str:
        return str(self)


class UnrecognizedTypeError(NavigationError):
    """An explicit --type value did not match any known alias."""

    def __init__(self, type_text: str) -> None:
        super().__init__("Unknown type. Please use 'branch' or 'pr'.")
        self.type_text = type_text


class MissingConfigurationError(NavigationError):
    """No base repository URL was configured."""

    def __init__(self) -> None:
        super().__init__(
            "No repository URL configured. Set REPO_URL or pass --repo-url."
        )


class BrowserLaunchError(NavigationError):
    """The platform open command could not be started."""
