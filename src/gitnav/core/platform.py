"""Selection of the platform command that opens a URL in the default browser."""

from dataclasses import dataclass

WINDOWS_PLATFORMS = frozenset({"win32", "cygwin", "msys"})

# cmd.exe metacharacters, neutralized with a caret
_CMD_CARET_ESCAPED = "^&|<>"

# Characters that would make subprocess quote the argument (or escape it with
# backslashes); inside quotes cmd.exe keeps carets literally, so these are
# percent-encoded instead
_CMD_PERCENT_ENCODED = {" ": "%20", "\t": "%09", '"': "%22"}


def escape_for_cmd(url: str) -> str:
    """Make a URL safe to pass through `cmd /c start`.

    Examples:
        >>> escape_for_cmd("https://x/tree/a&calc")
        'https://x/tree/a^&calc'
        >>> escape_for_cmd('https://x/tree/a b"c')
        'https://x/tree/a%20b%22c'
    """
    escaped: list[str] = []
    for ch in url:
        if ch in _CMD_CARET_ESCAPED:
            escaped.append("^" + ch)
        else:
            escaped.append(_CMD_PERCENT_ENCODED.get(ch, ch))
    return "".join(escaped)


@dataclass(frozen=True)
class OpenCommand:
    """Program used to hand a URL to the desktop environment."""

    name: str

    def argv(self, url: str) -> list[str]:
        """Build the argument vector with the URL as a discrete argument.

        `start` is a cmd.exe builtin, so it is run through cmd with an empty
        window title ahead of the URL, and the URL is escaped for cmd.
        """
        if self.name == "start":
            return ["cmd", "/c", "start", "", escape_for_cmd(url)]
        return [self.name, url]


def select_open_command(platform: str) -> OpenCommand:
    """Choose the open command for a sys.platform style string.

    Examples:
        >>> select_open_command("darwin").name
        'open'
        >>> select_open_command("win32").name
        'start'
        >>> select_open_command("linux").name
        'xdg-open'
    """
    if platform == "darwin":
        return OpenCommand(name="open")
    if platform in WINDOWS_PLATFORMS:
        return OpenCommand(name="start")
    return OpenCommand(name="xdg-open")
