"""Evidence that follows from a project being hosted on GitHub.

Part comes from the hosting alone (GitHub means public git with issues and
pull requests); the rest is read from GitHub's API: name, description,
license and implementation languages.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Mapping
from typing import ClassVar

from badge_detective.detectives.base import ForgeClientPort
from badge_detective.detectives.normalize import (
    cleanup_description,
    cleanup_languages,
    cleanup_license,
)
from badge_detective.errors import ForgeClientError
from badge_detective.models import EvidenceItem, EvidenceSet, Status

logger = logging.getLogger(__name__)

# Only the plain form is accepted; anything needing URL escaping is rejected.
_GITHUB_REPO_RE = re.compile(r"https://github\.com/([A-Za-z0-9_.-]+)/([A-Za-z0-9_.-]+)/?")

# Required to get GitHub's (preview) license analysis in the repository payload.
LICENSE_PREVIEW_ACCEPT = "application/vnd.github.drax-preview+json"

_STATIC_EVIDENCE: tuple[tuple[str, int, str], ...] = (
    (
        "repo_public_status",
        3,
        "Repository on GitHub, which provides public git repositories with URLs.",
    ),
    (
        "repo_track_status",
        4,
        "Repository on GitHub, which uses git. git can track the changes, "
        "who made them, and when they were made.",
    ),
    (
        "repo_distributed_status",
        4,
        "Repository on GitHub, which uses git. git is distributed.",
    ),
    (
        "contribution_status",
        2,
        "Projects on GitHub by default use issues and pull requests, "
        "as encouraged by documentation such as "
        "<https://guides.github.com/activities/contributing-to-open-source/>.",
    ),
    (
        "discussion_status",
        3,
        "GitHub supports discussions on issues and pull requests.",
    ),
)


def parse_github_repo_url(repo_url: str | None) -> tuple[str, str] | None:
    """Extract (owner, repo) from ``https://github.com/owner/repo[/]``.

    Returns None for anything else, including None and "".
    """
    if not repo_url:
        return None
    m = _GITHUB_REPO_RE.fullmatch(repo_url)
    if m:
        return m.group(1), m.group(2)
    return None


def github_static_evidence() -> EvidenceSet:
    """Evidence that holds for every repository hosted on GitHub."""
    return {
        field: EvidenceItem(value=Status.MET, confidence=confidence, explanation=explanation)
        for field, confidence, explanation in _STATIC_EVIDENCE
    }


class GithubBasicDetective:
    """Adapter for DetectivePort — derives evidence from a GitHub ``repo_url``.

    ``client_factory`` is called once per analysis; it may raise
    ForgeClientError or return None when no client can be built, in which
    case only the hosting-derived evidence is returned. A lookup that raises
    counts as a lookup that found nothing.
    """

    INPUTS: ClassVar[tuple[str, ...]] = ("repo_url",)
    OUTPUTS: ClassVar[tuple[str, ...]] = (
        "name",
        "license",
        "discussion_status",
        "repo_public_status",
        "repo_track_status",
        "repo_distributed_status",
        "contribution_status",
        "implementation_languages",
    )

    def __init__(self, client_factory: Callable[[], ForgeClientPort | None]) -> None:
        self._client_factory = client_factory

    async def analyze(self, current: Mapping[str, object]) -> EvidenceSet:
        repo_url = current.get("repo_url")
        parsed = parse_github_repo_url(repo_url) if isinstance(repo_url, str) else None
        if parsed is None:
            return {}

        results = github_static_evidence()

        owner, repo = parsed
        full_name = f"{owner}/{repo}"
        try:
            client = self._client_factory()
        except ForgeClientError as exc:
            logger.debug("No GitHub client for %s: %s", full_name, exc)
            return results
        if client is None:
            return results

        try:
            repo_data = await client.fetch_repository(full_name, accept=LICENSE_PREVIEW_ACCEPT)
        except Exception as exc:
            logger.debug("GitHub metadata lookup for %s failed: %s", full_name, exc)
            repo_data = None
        if repo_data is None:
            logger.debug("No GitHub metadata for %s", full_name)
            return results

        if repo_data.name:
            results["name"] = EvidenceItem(
                value=repo_data.name, confidence=3, explanation="GitHub name"
            )
        if repo_data.description:
            results["description"] = EvidenceItem(
                value=cleanup_description(repo_data.description),
                confidence=3,
                explanation="GitHub description",
            )

        license_info = repo_data.license
        if license_info is not None and license_info.key:
            results["license"] = EvidenceItem(
                value=cleanup_license(license_info.key),
                confidence=3,
                explanation="GitHub API license analysis",
            )

        try:
            languages = await client.fetch_languages(full_name)
        except Exception as exc:
            logger.debug("GitHub language lookup for %s failed: %s", full_name, exc)
            languages = {}
        results["implementation_languages"] = EvidenceItem(
            value=cleanup_languages(languages),
            confidence=3,
            explanation="GitHub API implementation language analysis",
        )
        return results
