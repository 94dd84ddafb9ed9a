"""Parsing of `occ user:list` output.

occ prints one decorated line per user:

    - alice: Alice Liddell
    - bob: bob

The user id is the text between the `- ` decoration and the first `:`.
"""

from __future__ import annotations

from typing import Iterable

from core.domain.models import UserRecord


def parse_user_line(line: str) -> UserRecord:
    """Extract the bare user id from one listing line.

    The line is cut at the first `:`, that part is split on `- ` and the
    second piece is kept. Lines without that shape give an empty id, which is
    returned as-is.
    """

    head = line.split(":")[0]
    parts = head.split("- ")
    uid = parts[1] if len(parts) > 1 else ""
    return UserRecord(uid=uid.strip())


def parse_user_listing(lines: str | Iterable[str]) -> list[UserRecord]:
    if isinstance(lines, str):
        lines = lines.splitlines()
    return [parse_user_line(line) for line in lines]
