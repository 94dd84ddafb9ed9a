"""Quota argument validation.

The checks mirror the long-standing behaviour of the shell tool this CLI
replaced: only the first character and the last three characters of a sized
quota are inspected, so `100XY5GB` is accepted while `5XX` is not.
"""

from __future__ import annotations

import re

from core.domain.errors import InvalidFormat, MissingQuota, MissingUnit
from core.domain.models import QuotaKind, QuotaSpec

SENTINELS: tuple[str, ...] = (QuotaKind.DEFAULT.value, QuotaKind.UNLIMITED.value)

DRY_RUN_FLAG = "-d"

_LEADING_DIGIT = re.compile(r"[0-9]")
_UNIT_SUFFIX = re.compile(r"[0-9](GB|MB)")


def validate_quota(raw: str | None) -> QuotaSpec:
    """Turn the raw quota argument into a `QuotaSpec`.

    Raises `MissingQuota`, `InvalidFormat` or `MissingUnit` (exit codes 1, 2
    and 3), checked in that order.
    """

    if not raw:
        raise MissingQuota(raw)

    if raw in SENTINELS:
        return QuotaSpec.sentinel(raw)

    if not _LEADING_DIGIT.match(raw[:1]):
        raise InvalidFormat(raw)

    if not _UNIT_SUFFIX.fullmatch(raw[-3:]):
        raise MissingUnit(raw)

    return QuotaSpec.sized(raw[:-2], raw[-2:])


def is_dry_run(flag: str | None) -> bool:
    """Only the exact token `-d` selects a dry run."""

    return flag == DRY_RUN_FLAG
