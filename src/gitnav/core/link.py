"""Link classification and URL construction.

An identifier is either a branch name or a pull request number. The type can
be given explicitly through an alias, otherwise it is guessed: digits-only
identifiers are pull requests, everything else is a branch.
"""

import logging
import re
from collections.abc import Sequence
from enum import Enum

from gitnav.core.errors import UnrecognizedTypeError

logger = logging.getLogger(__name__)

# ASCII digits only; str.isdigit() would also accept other Unicode digits
_PR_NUMBER_PATTERN = re.compile(r"[0-9]+")


class LinkType(Enum):
    """Kind of page an identifier points at."""

    BRANCH = "branch"
    PULL_REQUEST = "pr"

    @property
    def path_segment(self) -> str:
        if self is LinkType.BRANCH:
            return "tree"
        return "pull"

    @staticmethod
    def from_alias(text: str) -> "LinkType":
        """Resolve a user-supplied type alias, ignoring case.

        Args:
            text: Alias such as "branch", "br", "pr" or "pull"

        Returns:
            The matching LinkType

        Raises:
            UnrecognizedTypeError: If the alias is not known
        """
        link_type = _ALIASES.get(text.lower())
        if link_type is None:
            raise UnrecognizedTypeError(text)
        return link_type


_ALIASES: dict[str, LinkType] = {
    "branch": LinkType.BRANCH,
    "br": LinkType.BRANCH,
    "pr": LinkType.PULL_REQUEST,
    "pull": LinkType.PULL_REQUEST,
}


TYPE_FLAGS = ("--type", "-t")


def explicit_type_from_args(args: Sequence[str]) -> str | None:
    """Extract the type given as `--type TYPE` or `-t TYPE` directly after the identifier.

    Args:
        args: Arguments following the identifier, in order

    Returns:
        TYPE when args start with a type flag followed by a value, else None.
        A type flag anywhere else, or without a value, is ignored.
    """
    if len(args) >= 2 and args[0] in TYPE_FLAGS:
        return args[1]
    return None


def infer_link_type(identifier: str) -> LinkType:
    """Guess the link type: digits-only identifiers are pull requests."""
    if _PR_NUMBER_PATTERN.fullmatch(identifier) is not None:
        return LinkType.PULL_REQUEST
    return LinkType.BRANCH


def resolve_link_type(identifier: str, explicit: str | None) -> LinkType:
    """Pick the link type, preferring an explicit alias over the heuristic.

    An empty explicit value counts as absent.
    """
    if not explicit:
        link_type = infer_link_type(identifier)
        logger.debug("Inferred link type %s for %r", link_type.name, identifier)
        return link_type
    return LinkType.from_alias(explicit)


def build_target_url(base_url: str, identifier: str, link_type: LinkType) -> str:
    """Join base URL, path segment and identifier.

    Neither the base URL nor the identifier is escaped or normalized.
    """
    return f"{base_url}/{link_type.path_segment}/{identifier}"
