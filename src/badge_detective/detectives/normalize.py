"""Clean up GitHub-reported license keys, language statistics and descriptions."""

from __future__ import annotations

import re
from collections.abc import Mapping
from types import MappingProxyType

# SPDX display case for OSI-approved licenses that are not simply uppercase.
# GitHub reports lowercase keys (see benbalter/licensee#72), so we upcase
# and then fix the exceptions listed here.
LICENSE_CORRECT_CASE: Mapping[str, str] = MappingProxyType(
    {
        "APACHE-2.0": "Apache-2.0",
        "ARTISTIC-2.0": "Artistic-2.0",
        "BSD-3-CLAUSE": "BSD-3-Clause",
        "BSD-2-CLAUSE": "BSD-2-Clause",
        "EUDATAGRID": "EUDatagrid",
        "ENTESSA": "Entessa",
        "FAIR": "Fair",
        "FRAMEWORX-1.0": "Frameworx-1.0",
        "MIROS": "MirOS",
        "MOTOSOTO": "Motosoto",
        "MULTICS": "Multics",
        "NAUMEN": "Naumen",
        "NOKIA": "Nokia",
        "POSTGRESQL": "PostgreSQL",
        "PYTHON-2.0": "Python-2.0",
        "CNRI-PYTHON": "CNRI-Python",
        "SIMPL-2.0": "SimPL-2.0",
        "SLEEPYCAT": "Sleepycat",
        "WATCOM-1.0": "Watcom-1.0",
        "WXWINDOWS": "WXwindows",
        "XNET": "Xnet",
        "ZLIB": "Zlib",
    }
)

# Languages most people would not list as an implementation language.
EXCLUDED_IMPLEMENTATION_LANGUAGES: frozenset[str] = frozenset(
    {"HTML", "CSS", "Roff", "DIGITAL Command Language"}
)

_SHORTCODE_RE = re.compile(r"(\A|\s):[a-zA-Z]+:(\s|\Z)")


def cleanup_license(license_key: str) -> str:
    """Return the SPDX display form of a license key, e.g. ``bsd-3-clause`` -> ``BSD-3-Clause``.

    Not a validity check: unknown keys come back uppercased.
    """
    upper = license_key.upper()
    return LICENSE_CORRECT_CASE.get(upper, upper)


def cleanup_languages(raw_language_data: Mapping[str, int] | None) -> str:
    """Turn ``{language: lines_of_code}`` into ``"Lang1, Lang2"``.

    Sorted by weight, largest first (GitHub already does this but does not
    promise it). Equal weights keep their input order. Every language is
    kept apart from the excluded ones; there is no reliable cutoff for
    the long tail.
    """
    if not raw_language_data:
        return ""

    ranked = sorted(raw_language_data.items(), key=lambda item: item[1], reverse=True)
    return ", ".join(
        language for language, _ in ranked if language not in EXCLUDED_IMPLEMENTATION_LANGUAGES
    )


def cleanup_description(description: str) -> str:
    """Drop standalone ``:emoji:`` shortcodes and surrounding whitespace."""
    return _SHORTCODE_RE.sub(" ", description).strip()
