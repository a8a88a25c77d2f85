"""Tests for base URL configuration validation."""

import pytest

from gitnav.core.config import NavigatorConfig, require_config
from gitnav.core.errors import MissingConfigurationError


def test_require_config_returns_base_url_unchanged() -> None:
    config = require_config("https://github.com/org/repo")

    assert config == NavigatorConfig(base_url="https://github.com/org/repo")


@pytest.mark.parametrize("base_url", [None, "", "   "])
def test_require_config_missing_raises(base_url: str | None) -> None:
    with pytest.raises(MissingConfigurationError) as exc_info:
        require_config(base_url)

    assert "REPO_URL" in exc_info.value.message
    assert "--repo-url" in exc_info.value.message
