"""Doctor command for environment diagnostics."""

from __future__ import annotations

import pwd
import shutil
import subprocess

import typer
from rich.console import Console

from adapters.occ_client import OccUnavailableError, run_occ
from cli.ui_components import build_checks_table
from core.config import AppSettings

app = typer.Typer(add_completion=False, help="Environment diagnostics and configuration checks.")

_console = Console()


def _check_binary(name: str) -> tuple[bool, str]:
    path = shutil.which(name)
    if path:
        return True, path
    return False, f"{name!r} not found on PATH"


def _check_account(name: str) -> tuple[bool, str]:
    try:
        entry = pwd.getpwnam(name)
    except KeyError:
        return False, f"No such account: {name}"
    return True, f"uid {entry.pw_uid}"


def _check_occ_status(settings: AppSettings) -> tuple[bool, str]:
    """Run `occ status` (best-effort)."""

    try:
        result = run_occ(
            settings,
            "status",
            "--no-ansi",
            "--no-interaction",
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
        )
    except OccUnavailableError as exc:
        return False, str(exc)
    if result.returncode != 0:
        return False, f"exit status {result.returncode}"
    return True, "OK"


@app.command()
def run() -> None:
    """Check that occ can be reached with the current configuration."""

    settings = AppSettings()

    table = build_checks_table("nc-quota Doctor")

    # Config
    table.add_row("occ path", "OK" if settings.occ_path.is_file() else "FAIL", str(settings.occ_path))
    ok_php, detail_php = _check_binary(settings.php_binary)
    table.add_row("php", "OK" if ok_php else "FAIL", detail_php)

    if settings.run_as_user:
        ok_sudo, detail_sudo = _check_binary(settings.sudo_binary)
        table.add_row("sudo", "OK" if ok_sudo else "FAIL", detail_sudo)
        ok_account, detail_account = _check_account(settings.run_as_user)
        table.add_row("service account", "OK" if ok_account else "FAIL", detail_account)
    else:
        table.add_row("service account", "SKIPPED", "run_as_user is empty, occ runs without sudo")

    ok_status, detail_status = _check_occ_status(settings)
    table.add_row("occ status", "OK" if ok_status else "FAIL", detail_status)

    _console.print(table)

    if not ok_status:
        _console.print(
            "\n[yellow]Note:[/yellow] set NC_QUOTA_RUN_AS_USER (e.g. `apache`) or NC_QUOTA_OCC_PATH "
            "if your distro uses a different web server account or install path."
        )
