"""Command line entry point: `nc-quota <quota> [-d]`.

Validates the quota, asks for confirmation, then applies it to every
Nextcloud user through occ. Messages go to stdout; diagnostics go through
`logging` to stderr.
"""

from __future__ import annotations

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from adapters.occ_client import OccQuotaService, OccUnavailableError, OccUserDirectory
from cli.ui_components import print_input_error, say
from core.config import AppSettings
from core.domain.errors import QuotaInputError
from core.services.confirmation import confirm_quota
from core.services.quota_batch import BatchHooks, apply_quota
from core.services.quota_validator import is_dry_run, validate_quota

PROGRAM_NAME = "nc-quota"

# Exit status used by shells when a command cannot be found.
EXIT_OCC_UNAVAILABLE = 127

app = typer.Typer(
    add_completion=False,
    help="Apply one storage quota to every Nextcloud user via occ.",
)

_console = Console(highlight=False)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def _say(message: str) -> None:
    say(_console, message)


@app.command(context_settings={"ignore_unknown_options": True, "allow_extra_args": True})
def apply(
    quota: str | None = typer.Argument(
        None,
        help="Quota to apply: 'default', 'unlimited' or a size such as 10GB / 500MB.",
        show_default=False,
    ),
    mode: str | None = typer.Argument(
        None,
        help="Pass -d for a dry run (report only, change nothing).",
        show_default=False,
    ),
) -> None:
    """Set the files quota of ALL users to QUOTA."""

    settings = AppSettings()
    configure_logging(settings.log_level)

    try:
        spec = validate_quota(quota)
    except QuotaInputError as exc:
        print_input_error(_console, exc, PROGRAM_NAME)
        raise typer.Exit(code=exc.exit_code)

    if not confirm_quota(spec, ask=_console.input, say=_say):
        raise typer.Exit(code=0)

    dry_run = is_dry_run(mode)
    hooks = BatchHooks(outcome=lambda outcome: _say(outcome.message()))
    try:
        apply_quota(
            spec,
            dry_run=dry_run,
            directory=OccUserDirectory(settings),
            service=OccQuotaService(settings),
            hooks=hooks,
        )
    except OccUnavailableError as exc:
        _say(f"ERROR: {exc}")
        raise typer.Exit(code=EXIT_OCC_UNAVAILABLE)


def run() -> None:
    app()
