"""Ports: forge API access and evidence detectives."""

from __future__ import annotations

from collections.abc import Mapping
from typing import ClassVar, Protocol

from badge_detective.models import EvidenceSet, RepositoryMetadata


class ForgeClientPort(Protocol):
    """Port for reading repository data from a forge's API."""

    async def fetch_repository(
        self,
        full_name: str,
        *,
        accept: str | None = None,
    ) -> RepositoryMetadata | None:
        """Fetch repository metadata for ``owner/name``, or None when unavailable."""
        ...

    async def fetch_languages(self, full_name: str) -> dict[str, int]:
        """Fetch per-language code weights for ``owner/name`` (empty when unavailable)."""
        ...


class DetectivePort(Protocol):
    """Port for a unit that derives criterion evidence from known project fields."""

    INPUTS: ClassVar[tuple[str, ...]]
    OUTPUTS: ClassVar[tuple[str, ...]]

    async def analyze(self, current: Mapping[str, object]) -> EvidenceSet:
        """Return evidence keyed by output field name."""
        ...
