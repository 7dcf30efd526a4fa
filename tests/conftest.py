"""Shared test fixtures."""

from __future__ import annotations

from collections.abc import Iterator
from unittest.mock import patch

import pytest


@pytest.fixture(autouse=True)
def _no_gh_cli() -> Iterator[None]:
    """Keep token resolution from shelling out to a locally installed `gh`."""
    with patch(
        "badge_detective.detectives.github_client.subprocess.run",
        side_effect=FileNotFoundError("gh"),
    ):
        yield
