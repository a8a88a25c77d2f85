from dataclasses import dataclass

from gitnav.core.errors import MissingConfigurationError

# Environment variable holding the base repository URL
REPO_URL_ENV_VAR = "REPO_URL"


@dataclass(frozen=True)
class NavigatorConfig:
    """Validated navigator configuration.

    base_url prefixes every generated link, e.g. "https://github.com/org/repo".
    """

    base_url: str


def require_config(base_url: str | None) -> NavigatorConfig:
    """Validate the configured base URL.

    Args:
        base_url: Value from REPO_URL or --repo-url, None if neither was given

    Returns:
        NavigatorConfig holding the base URL unchanged

    Raises:
        MissingConfigurationError: If base_url is None, empty or whitespace
    """
    if base_url is None or not base_url.strip():
        raise MissingConfigurationError()
    return NavigatorConfig(base_url=base_url)
