"""Batch application of one quota to every user.

The loop is strictly sequential and reports every user the same way whether
or not the quota-set command succeeded; exit statuses are only kept on the
returned outcomes and logged at DEBUG level.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from core.domain.models import QuotaOutcome, QuotaSpec
from core.interfaces.occ import QuotaService, UserDirectory

logger = logging.getLogger(__name__)


@dataclass
class BatchHooks:
    """Optional callbacks for UI layers."""

    outcome: Callable[[QuotaOutcome], None] | None = None


def apply_quota(
    quota: QuotaSpec,
    *,
    dry_run: bool,
    directory: UserDirectory,
    service: QuotaService,
    hooks: BatchHooks | None = None,
) -> list[QuotaOutcome]:
    """Apply `quota` to every user listed by `directory`, in listing order.

    In dry-run mode `service` is never called.
    """

    hooks = hooks or BatchHooks()
    users = directory.list_users()
    logger.debug("Applying quota %s to %d users (dry_run=%s)", quota.literal, len(users), dry_run)

    outcomes: list[QuotaOutcome] = []
    for user in users:
        if dry_run:
            outcome = QuotaOutcome(user=user, quota=quota)
        else:
            status = service.set_quota(user, quota)
            if status != 0:
                logger.debug("Quota command for %r exited with status %s", user.uid, status)
            outcome = QuotaOutcome(user=user, quota=quota, invoked=True, exit_status=status)

        if hooks.outcome:
            hooks.outcome(outcome)
        outcomes.append(outcome)

    return outcomes
