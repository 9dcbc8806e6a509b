"""Named extractors for quantified achievements.

Profiles refer to extractors by name instead of embedding regular
expressions, so a profile stays plain JSON.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from typing import Literal

from .candidates import MetricMatch

MetricPattern = Literal["percentage", "multiplier", "currency", "count"]

METRIC_PATTERN_NAMES: tuple[MetricPattern, ...] = ("percentage", "multiplier", "currency", "count")

_MAGNITUDE = {"": 1.0, "k": 1_000.0, "m": 1_000_000.0}

_PATTERNS: dict[MetricPattern, re.Pattern[str]] = {
    "percentage": re.compile(r"(\d+(?:\.\d+)?)\s*%"),
    "multiplier": re.compile(r"(\d+(?:\.\d+)?)x\b", re.IGNORECASE),
    "currency": re.compile(r"\$(\d+(?:\.\d+)?)([km]?)", re.IGNORECASE),
    "count": re.compile(r"(\d+(?:\.\d+)?)([km]?)\+?\s*(users?|customers?)", re.IGNORECASE),
}

_UNITS: dict[MetricPattern, str] = {
    "percentage": "%",
    "multiplier": "x",
    "currency": "$",
    "count": "users",
}


def is_metric_pattern(name: str) -> bool:
    return name in _PATTERNS


def _value(match: re.Match[str], pattern: MetricPattern) -> float:
    number = float(match.group(1))
    if pattern in ("currency", "count"):
        number *= _MAGNITUDE[match.group(2).lower()]
    return number


def extract_metrics(
    text: str,
    patterns: Sequence[MetricPattern] = METRIC_PATTERN_NAMES,
) -> tuple[MetricMatch, ...]:
    """Extract quantified metrics line by line.

    Each line yields at most one match per pattern; the matched line (stripped)
    is kept as context.
    """
    found: list[MetricMatch] = []
    for line in text.split("\n"):
        context = line.strip()
        if not context:
            continue
        for pattern in patterns:
            match = _PATTERNS[pattern].search(line)
            if match is None:
                continue
            found.append(
                MetricMatch(
                    text=match.group(0).strip(),
                    value=_value(match, pattern),
                    unit=_UNITS[pattern],
                    context=context,
                )
            )
    return tuple(found)
