"""Tests for domain models."""

from __future__ import annotations

import pytest

from badge_detective.models import EvidenceItem, LicenseInfo, RepositoryMetadata, Status


class TestEvidenceItem:
    def test_frozen(self) -> None:
        item = EvidenceItem(value=Status.MET, confidence=3, explanation="x")
        with pytest.raises(AttributeError):
            item.confidence = 4  # type: ignore[misc]

    def test_to_dict(self) -> None:
        item = EvidenceItem(value=Status.MET, confidence=4, explanation="git is distributed.")
        assert item.to_dict() == {
            "value": "Met",
            "confidence": 4,
            "explanation": "git is distributed.",
        }

    @pytest.mark.parametrize("confidence", [0, 6, -1])
    def test_confidence_out_of_range_rejected(self, confidence: int) -> None:
        with pytest.raises(ValueError, match="confidence"):
            EvidenceItem(value="x", confidence=confidence, explanation="")

    def test_status_is_plain_string(self) -> None:
        assert Status.MET == "Met"


class TestRepositoryMetadata:
    def test_from_full_payload(self) -> None:
        meta = RepositoryMetadata.from_api(
            {
                "full_name": "owner/repo",
                "name": "repo",
                "description": "A tool",
                "license": {"key": "mit", "spdx_id": "MIT", "name": "MIT License"},
                "stargazers_count": 10,
            }
        )
        assert meta.full_name == "owner/repo"
        assert meta.name == "repo"
        assert meta.description == "A tool"
        assert meta.license == LicenseInfo(key="mit", spdx_id="MIT", name="MIT License")

    def test_missing_and_null_fields(self) -> None:
        meta = RepositoryMetadata.from_api({"description": None, "license": None})
        assert meta.name is None
        assert meta.description is None
        assert meta.license is None

    def test_license_without_key(self) -> None:
        meta = RepositoryMetadata.from_api({"license": {"name": "Other"}})
        assert meta.license is not None
        assert meta.license.key is None

    def test_wrongly_typed_fields_ignored(self) -> None:
        meta = RepositoryMetadata.from_api({"name": 42, "license": "mit"})
        assert meta.name is None
        assert meta.license is None
