"""detect_github_evidence tool -- badge criteria evidence for a GitHub-hosted project."""

from __future__ import annotations

from mcp.server.fastmcp import Context

from badge_detective.tools._helpers import get_context


async def detect_github_evidence(
    repo_url: str,
    ctx: Context,
) -> dict[str, object]:
    """Gather best-practices badge evidence for a project hosted on GitHub.

    Only plain repository URLs are recognized
    (e.g. "https://github.com/coreinfrastructure/best-practices-badge").
    For those, hosting on GitHub alone satisfies the public repository,
    change tracking, distributed repository, contribution and discussion
    criteria. The GitHub API then supplies name, description, license
    (SPDX display case) and implementation languages when available.

    Args:
        repo_url: The project's repository URL.

    Returns:
        Dict with: applicable (whether the URL is a GitHub repository) and
        evidence, mapping each determined field to its value, confidence
        and explanation. Missing fields were not determined.
    """
    try:
        app_ctx = get_context(ctx)
        evidence = await app_ctx.github_detective.analyze({"repo_url": repo_url})

        return {
            "success": True,
            "repo_url": repo_url,
            "applicable": bool(evidence),
            "evidence": {field: item.to_dict() for field, item in evidence.items()},
        }

    except Exception as exc:
        await ctx.error(f"Unexpected error in detect_github_evidence: {exc}")
        return {"success": False, "error": f"Internal error: {type(exc).__name__}"}
