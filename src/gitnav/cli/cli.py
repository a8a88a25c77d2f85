import logging

import click

from gitnav.core.config import require_config
from gitnav.core.context import NavContext, create_context
from gitnav.core.errors import BrowserLaunchError, NavigationError
from gitnav.core.link import build_target_url, explicit_type_from_args, resolve_link_type
from gitnav.output.output import machine_output, user_output

logger = logging.getLogger(__name__)

CONTEXT_SETTINGS = dict(
    help_option_names=["-h", "--help"],  # terse help flags
    ignore_unknown_options=True,  # unrecognized tokens end up in EXTRA
)

USAGE = "Usage: gitnav <value> [--type branch|pr]"

GENERATED_LABEL = "Generated GitHub link:"
NAVIGATING_NOTICE = "Navigating to the link..."
LAUNCH_FAILED_WARNING = "Error opening the browser. Please open the URL manually."


@click.command("gitnav", context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="gitnav")
@click.argument("value", required=False)
@click.argument("extra", nargs=-1, type=click.UNPROCESSED)
@click.option(
    "--repo-url",
    default=None,
    help="Base repository URL. Overrides the REPO_URL environment variable.",
)
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(
    ctx: click.Context,
    value: str | None,
    extra: tuple[str, ...],
    repo_url: str | None,
    debug: bool,
) -> None:
    """Open a branch or pull request page of the configured repository.

    VALUE is a branch name or a pull request number. Passing `--type TYPE`
    (or `-t TYPE`) directly after VALUE sets the link type explicitly; TYPE
    is one of branch, br, pr or pull. Otherwise digits mean a pull request.
    The link is printed, then opened in the default browser:

    \b
      gitnav feature-x          # <REPO_URL>/tree/feature-x
      gitnav 4521               # <REPO_URL>/pull/4521
      gitnav 4521 --type br     # <REPO_URL>/tree/4521
    """
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s - %(levelname)s - %(message)s")

    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = create_context()
    nav_ctx: NavContext = ctx.obj

    if value is None:
        user_output(USAGE)
        raise SystemExit(1)

    explicit_type = explicit_type_from_args(extra)
    if extra:
        logger.debug("Trailing arguments: %s (explicit type: %r)", list(extra), explicit_type)

    try:
        resolved_type = resolve_link_type(value, explicit_type)
        config = require_config(repo_url if repo_url is not None else nav_ctx.base_url)
    except NavigationError as e:
        user_output(click.style("Error: ", fg="red") + e.message)
        raise SystemExit(1) from None

    url = build_target_url(config.base_url, value, resolved_type)

    machine_output(GENERATED_LABEL)
    machine_output(url)
    machine_output(NAVIGATING_NOTICE)

    try:
        nav_ctx.browser.launch(url)
    except BrowserLaunchError as e:
        # The link was already reported, so a failed launch stays a warning
        logger.debug("Browser launch failed: %s", e.message)
        user_output(click.style(LAUNCH_FAILED_WARNING, fg="yellow"))
