"""occ subprocess adapters.

Every call goes through `build_occ_command` so all invocations share the
same impersonation (`sudo -u <account>`), interpreter and occ path.
"""

from __future__ import annotations

import logging
import subprocess
from typing import Any

from adapters.occ_listing import parse_user_listing
from core.config import AppSettings
from core.domain.models import QuotaSpec, UserRecord
from core.interfaces.occ import QuotaService, UserDirectory

logger = logging.getLogger(__name__)

LIST_USERS_ARGS: tuple[str, ...] = ("user:list", "--no-ansi", "--no-interaction")


class OccUnavailableError(RuntimeError):
    """occ (or sudo/php) could not be started at all."""


def build_occ_command(settings: AppSettings, *args: str) -> list[str]:
    """Build the argv for one occ call.

    An empty `run_as_user` runs php directly, for hosts where the tool
    already runs as the web server account.
    """

    command: list[str] = []
    if settings.run_as_user:
        command += [settings.sudo_binary, "-u", settings.run_as_user]
    command += [settings.php_binary, str(settings.occ_path), *args]
    return command


def run_occ(settings: AppSettings, *args: str, **kwargs: Any) -> subprocess.CompletedProcess:
    """Run occ synchronously, without a timeout and without checking the status."""

    command = build_occ_command(settings, *args)
    logger.debug("Running %s", " ".join(command))
    try:
        return subprocess.run(command, check=False, **kwargs)
    except OSError as exc:
        raise OccUnavailableError(f"Could not run {command[0]!r}: {exc}") from exc


class OccUserDirectory(UserDirectory):
    """Lists users with `occ user:list`."""

    def __init__(self, settings: AppSettings | None = None) -> None:
        self._settings = settings or AppSettings()

    def list_users(self) -> list[UserRecord]:
        result = run_occ(self._settings, *LIST_USERS_ARGS, capture_output=True, text=True)
        if result.returncode != 0:
            logger.warning(
                "occ user:list exited with status %s: %s",
                result.returncode,
                (result.stderr or "").strip(),
            )
        return parse_user_listing(result.stdout or "")


class OccQuotaService(QuotaService):
    """Sets quotas with `occ user:setting <uid> files quota <value>`."""

    def __init__(self, settings: AppSettings | None = None) -> None:
        self._settings = settings or AppSettings()

    def set_quota(self, user: UserRecord, quota: QuotaSpec) -> int:
        result = run_occ(
            self._settings,
            "user:setting",
            user.uid,
            "files",
            "quota",
            quota.literal,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
        )
        return result.returncode
