"""Domain models (Pydantic v2).

Notes:
- These models describe *what* a quota or a user is, not *how* they are read
  from or written to Nextcloud.
- All of them are frozen: a value is built once and passed around as-is.
"""

from __future__ import annotations

import re
from enum import Enum

from pydantic import BaseModel, Field, model_validator
from pydantic.config import ConfigDict

_DIGIT = re.compile(r"[0-9]")

ZERO_QUOTAS: frozenset[str] = frozenset({"0GB", "0MB"})


class QuotaKind(str, Enum):
    """The three accepted quota shapes."""

    DEFAULT = "default"
    UNLIMITED = "unlimited"
    SIZED = "sized"


class QuotaUnit(str, Enum):
    MB = "MB"
    GB = "GB"


class QuotaSpec(BaseModel):
    """A validated quota value.

    `literal` is exactly what the operator typed and what gets handed to occ.
    For sized quotas `magnitude` is everything before the unit; only its first
    and last characters are known to be digits.
    """

    model_config = ConfigDict(frozen=True)

    literal: str = Field(
        ...,
        min_length=1,
        description="Quota string passed verbatim to occ (e.g. '10GB', 'default').",
    )
    kind: QuotaKind = Field(
        ...,
        description="Sentinel (default/unlimited) or sized quota.",
    )
    magnitude: str | None = Field(
        default=None,
        description="Numeric prefix of a sized quota.",
    )
    unit: QuotaUnit | None = Field(
        default=None,
        description="Unit of a sized quota.",
    )

    @model_validator(mode="after")
    def _check_shape(self) -> "QuotaSpec":
        if self.kind is QuotaKind.SIZED:
            if self.magnitude is None or self.unit is None:
                raise ValueError("sized quota needs a magnitude and a unit")
            if not (_DIGIT.match(self.magnitude[:1]) and _DIGIT.match(self.magnitude[-1:])):
                raise ValueError(f"magnitude must start and end with a digit: {self.magnitude!r}")
            if self.literal != f"{self.magnitude}{self.unit.value}":
                raise ValueError("literal does not match magnitude and unit")
        else:
            if self.magnitude is not None or self.unit is not None:
                raise ValueError(f"{self.kind.value!r} quota takes no magnitude or unit")
            if self.literal != self.kind.value:
                raise ValueError(f"literal must be {self.kind.value!r}")
        return self

    @classmethod
    def sentinel(cls, literal: str) -> "QuotaSpec":
        """Build a `default` or `unlimited` quota."""

        kind = QuotaKind(literal)
        if kind is QuotaKind.SIZED:
            raise ValueError("'sized' is not a sentinel quota")
        return cls(literal=literal, kind=kind)

    @classmethod
    def sized(cls, magnitude: str, unit: QuotaUnit | str) -> "QuotaSpec":
        unit = QuotaUnit(unit)
        return cls(
            literal=f"{magnitude}{unit.value}",
            kind=QuotaKind.SIZED,
            magnitude=magnitude,
            unit=unit,
        )

    @property
    def is_zero(self) -> bool:
        """True for the literal `0GB`/`0MB`, which blocks all uploads."""

        return self.literal in ZERO_QUOTAS

    def __str__(self) -> str:
        return self.literal


class UserRecord(BaseModel):
    """A single Nextcloud user id extracted from the occ listing.

    The id is not validated: a listing line with an unexpected layout yields
    an empty id and is still processed.
    """

    model_config = ConfigDict(frozen=True)

    uid: str = Field(
        default="",
        description="Bare user id, decorations and surrounding whitespace stripped.",
    )

    def __str__(self) -> str:
        return self.uid


class QuotaOutcome(BaseModel):
    """What happened to one user during a batch run."""

    model_config = ConfigDict(frozen=True)

    user: UserRecord
    quota: QuotaSpec
    invoked: bool = Field(
        default=False,
        description="Whether the quota-set command was actually run (False in dry-run).",
    )
    exit_status: int | None = Field(
        default=None,
        description="Exit status of the quota-set command; never acted upon.",
    )

    def message(self) -> str:
        """Confirmation line, identical in dry-run and real runs."""

        return f"Set quota for {self.user.uid} to {self.quota.literal}."
