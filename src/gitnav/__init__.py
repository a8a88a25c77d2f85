"""gitnav CLI entry point.

This package provides a Click-based CLI that turns a branch name or pull
request number into a repository URL and opens it in the browser. See
`gitnav --help` for details.
"""

from gitnav.cli.cli import cli


def main() -> None:
    """CLI entry point used by the `gitnav` console script."""
    cli()
