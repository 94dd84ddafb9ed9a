"""Contracts for the Nextcloud collaborators.

Structural Protocols: the occ-backed adapters satisfy them, and so does any
in-memory fake used in tests.
"""

from __future__ import annotations

from typing import Protocol, Sequence, runtime_checkable

from core.domain.models import QuotaSpec, UserRecord


@runtime_checkable
class UserDirectory(Protocol):
    """Source of the user accounts a quota is applied to."""

    def list_users(self) -> Sequence[UserRecord]:
        """Return every user, in listing order."""

        ...


@runtime_checkable
class QuotaService(Protocol):
    """Sink for per-user quota changes."""

    def set_quota(self, user: UserRecord, quota: QuotaSpec) -> int:
        """Apply `quota` to `user` and return the command's exit status."""

        ...
