"""Read repository metadata and language statistics from the GitHub REST API."""

from __future__ import annotations

import logging
import os
import subprocess
import time
from dataclasses import dataclass

import httpx

from badge_detective.errors import ForgeClientError
from badge_detective.models import RepositoryMetadata

logger = logging.getLogger(__name__)

GITHUB_API_URL = "https://api.github.com"
DEFAULT_ACCEPT = "application/vnd.github+json"


# ─── Auth ──────────────────────────────────────────────────


def resolve_github_token() -> str | None:
    """Return a GitHub token from ``GITHUB_TOKEN``, else from ``gh auth token``.

    Blocking (may shell out); call once at startup, not per request.
    """
    token = os.environ.get("GITHUB_TOKEN", "").strip()
    if token:
        return token

    token = _gh_cli_token()
    if token:
        logger.info("Using GitHub token from `gh auth token`.")
    else:
        logger.info("No GitHub token found; API requests are unauthenticated.")
    return token


def _gh_cli_token() -> str | None:
    try:
        completed = subprocess.run(
            ["gh", "auth", "token"],
            capture_output=True,
            text=True,
            timeout=2,
            check=False,
        )
    except (OSError, subprocess.SubprocessError):
        return None

    if completed.returncode != 0:
        return None
    return completed.stdout.strip() or None


# ─── Rate limit ────────────────────────────────────────────


@dataclass
class RateLimitGate:
    """Remembers until when GitHub's quota is spent.

    One gate is shared by every client built from the same composition root,
    so a short-lived client still sees an exhaustion observed by an earlier one.
    """

    reset_at: float = 0.0  # time.monotonic() scale

    def blocked(self) -> bool:
        return time.monotonic() < self.reset_at

    def observe(self, resp: httpx.Response) -> None:
        """Close the gate when a response reports zero remaining requests."""
        if resp.headers.get("X-RateLimit-Remaining") != "0":
            return
        try:
            reset_epoch = int(resp.headers.get("X-RateLimit-Reset", "0"))
        except ValueError:
            reset_epoch = 0

        was_blocked = self.blocked()
        self.reset_at = time.monotonic() + max(0, reset_epoch - time.time())
        if not was_blocked and self.blocked():
            logger.warning(
                "GitHub API rate limit exhausted; skipping GitHub lookups for %ds.",
                int(self.reset_at - time.monotonic()),
            )


# ─── Client ────────────────────────────────────────────────


class DefaultGitHubClient:
    """Adapter for ForgeClientPort — holds httpx client.

    Every failure (transport error, non-200, unexpected JSON, closed rate-limit
    gate) is reported as "no data" rather than raised.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        *,
        token: str | None = None,
        rate_limit: RateLimitGate | None = None,
        base_url: str = GITHUB_API_URL,
    ) -> None:
        if http_client.is_closed:
            raise ForgeClientError("Cannot build GitHub client: HTTP client is closed.")
        self._http = http_client
        self._token = token
        self._rate_limit = rate_limit if rate_limit is not None else RateLimitGate()
        self._base_url = base_url.rstrip("/")

    def _headers(self, accept: str | None) -> dict[str, str]:
        headers = {"Accept": accept or DEFAULT_ACCEPT}
        if self._token:
            headers["Authorization"] = f"Bearer {self._token}"
        return headers

    async def _get_json(self, path: str, accept: str | None = None) -> object | None:
        if self._rate_limit.blocked():
            return None
        try:
            resp = await self._http.get(f"{self._base_url}{path}", headers=self._headers(accept))
            self._rate_limit.observe(resp)
            if resp.status_code != 200:
                logger.debug("GitHub GET %s returned %s", path, resp.status_code)
                return None
            return resp.json()
        except httpx.HTTPError as exc:
            logger.debug("GitHub GET %s failed: %s", path, exc)
            return None
        except ValueError:
            # Body was not JSON.
            return None

    async def fetch_repository(
        self,
        full_name: str,
        *,
        accept: str | None = None,
    ) -> RepositoryMetadata | None:
        """Fetch ``GET /repos/{owner}/{repo}``."""
        data = await self._get_json(f"/repos/{full_name}", accept)
        if not isinstance(data, dict) or not data:
            return None
        return RepositoryMetadata.from_api(data)

    async def fetch_languages(self, full_name: str) -> dict[str, int]:
        """Fetch ``GET /repos/{owner}/{repo}/languages`` as ``{language: bytes}``."""
        data = await self._get_json(f"/repos/{full_name}/languages")
        if not isinstance(data, dict):
            return {}
        return {
            language: weight
            for language, weight in data.items()
            if isinstance(weight, int) and not isinstance(weight, bool)
        }
