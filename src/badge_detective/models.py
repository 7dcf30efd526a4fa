"""Domain models for badge-detective. All frozen dataclasses -- no mutation after creation."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

MIN_CONFIDENCE = 1
MAX_CONFIDENCE = 5

# ─── Enumerations ─────────────────────────────────────────────


class Status(StrEnum):
    MET = "Met"


# ─── Evidence Models ──────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class EvidenceItem:
    """A value for one criterion or metadata field, with how strongly it is backed."""

    value: str
    confidence: int
    explanation: str

    def __post_init__(self) -> None:
        if not MIN_CONFIDENCE <= self.confidence <= MAX_CONFIDENCE:
            msg = (
                f"confidence must be between {MIN_CONFIDENCE} and {MAX_CONFIDENCE}, "
                f"got {self.confidence}"
            )
            raise ValueError(msg)

    def to_dict(self) -> dict[str, object]:
        return {
            "value": self.value,
            "confidence": self.confidence,
            "explanation": self.explanation,
        }


# Keyed by criterion/field name. A missing key means "no determination".
EvidenceSet = dict[str, EvidenceItem]


# ─── Forge Metadata Models ────────────────────────────────────


def _optional_str(data: dict, key: str) -> str | None:
    value = data.get(key)
    return value if isinstance(value, str) else None


@dataclass(frozen=True, slots=True)
class LicenseInfo:
    """License block of a repository as reported by GitHub."""

    key: str | None = None
    spdx_id: str | None = None
    name: str | None = None

    @classmethod
    def from_api(cls, data: object) -> LicenseInfo | None:
        if not isinstance(data, dict):
            return None
        return cls(
            key=_optional_str(data, "key"),
            spdx_id=_optional_str(data, "spdx_id"),
            name=_optional_str(data, "name"),
        )


@dataclass(frozen=True, slots=True)
class RepositoryMetadata:
    """The subset of GitHub's repository payload the detectives read.

    Every field is optional: GitHub omits or nulls them freely.
    """

    full_name: str | None = None
    name: str | None = None
    description: str | None = None
    license: LicenseInfo | None = None

    @classmethod
    def from_api(cls, data: dict) -> RepositoryMetadata:
        return cls(
            full_name=_optional_str(data, "full_name"),
            name=_optional_str(data, "name"),
            description=_optional_str(data, "description"),
            license=LicenseInfo.from_api(data.get("license")),
        )
