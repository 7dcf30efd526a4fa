"""MCP server that gathers best-practices badge evidence from a project's GitHub repository."""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import dataclass

import httpx
from mcp.server.fastmcp import FastMCP
from mcp.types import ToolAnnotations

from badge_detective.detectives.base import DetectivePort
from badge_detective.detectives.github_basic import GithubBasicDetective
from badge_detective.detectives.github_client import (
    DefaultGitHubClient,
    RateLimitGate,
    resolve_github_token,
)
from badge_detective.tools.detect import detect_github_evidence


@dataclass(frozen=True, slots=True)
class AppContext:
    """Shared state across all tool invocations."""

    http_client: httpx.AsyncClient
    github_detective: DetectivePort


@asynccontextmanager
async def app_lifespan(server: FastMCP) -> AsyncIterator[AppContext]:
    """Manage shared adapter lifecycle — the composition root."""
    async with httpx.AsyncClient(
        timeout=httpx.Timeout(30.0, connect=10.0),
        follow_redirects=True,
        limits=httpx.Limits(max_connections=10, max_keepalive_connections=5),
        transport=httpx.AsyncHTTPTransport(retries=3),
    ) as http_client:
        token = await asyncio.to_thread(resolve_github_token)
        rate_limit = RateLimitGate()
        github_detective = GithubBasicDetective(
            lambda: DefaultGitHubClient(http_client, token=token, rate_limit=rate_limit)
        )

        yield AppContext(
            http_client=http_client,
            github_detective=github_detective,
        )


mcp = FastMCP(
    "badge-detective",
    instructions=(
        "badge-detective fills in best-practices badge criteria for open-source "
        "projects hosted on GitHub.\n\n"
        "Call detect_github_evidence with the project's repository URL "
        "(https://github.com/<owner>/<repo>). Each returned field carries a value, "
        "a confidence (higher is stronger) and an explanation. Fields that are "
        "missing were not determined; do not treat them as failures."
    ),
    lifespan=app_lifespan,
)

# ─── Read-only tools ──────────────────────────────────────────
mcp.tool(annotations=ToolAnnotations(readOnlyHint=True))(detect_github_evidence)
