"""Tests for open command selection."""

import pytest

from gitnav.core.platform import OpenCommand, escape_for_cmd, select_open_command


def test_darwin_uses_open() -> None:
    assert select_open_command("darwin") == OpenCommand(name="open")


@pytest.mark.parametrize("platform", ["win32", "cygwin", "msys"])
def test_windows_family_uses_start(platform: str) -> None:
    assert select_open_command(platform) == OpenCommand(name="start")


@pytest.mark.parametrize("platform", ["linux", "freebsd14", "sunos5", "emscripten"])
def test_other_platforms_use_xdg_open(platform: str) -> None:
    assert select_open_command(platform) == OpenCommand(name="xdg-open")


def test_argv_passes_url_as_single_argument() -> None:
    url = "https://github.com/org/repo/tree/a b;rm -rf"

    assert OpenCommand(name="xdg-open").argv(url) == ["xdg-open", url]
    assert OpenCommand(name="open").argv(url) == ["open", url]


def test_start_argv_runs_through_cmd_with_empty_title() -> None:
    url = "https://github.com/org/repo/pull/1"

    assert OpenCommand(name="start").argv(url) == ["cmd", "/c", "start", "", url]


def test_start_argv_caret_escapes_cmd_metacharacters() -> None:
    """A branch name with & must not split the cmd.exe command line."""
    url = "https://github.com/org/repo/tree/a&calc"

    assert OpenCommand(name="start").argv(url) == [
        "cmd",
        "/c",
        "start",
        "",
        "https://github.com/org/repo/tree/a^&calc",
    ]


def test_escape_for_cmd_handles_every_metacharacter() -> None:
    assert escape_for_cmd("a^b&c|d<e>f") == "a^^b^&c^|d^<e^>f"


def test_escape_for_cmd_percent_encodes_quoting_characters() -> None:
    """Spaces, tabs and quotes would make subprocess quote the argument."""
    assert escape_for_cmd('a b\tc"d') == "a%20b%09c%22d"


def test_escape_for_cmd_leaves_plain_url_unchanged() -> None:
    url = "https://github.com/org/repo/pull/4521?x=1#y"

    assert escape_for_cmd(url) == url


def test_unix_argv_is_not_escaped() -> None:
    url = "https://github.com/org/repo/tree/a&calc"

    assert OpenCommand(name="xdg-open").argv(url) == ["xdg-open", url]
