"""Extraction of line-anchored findings from free-text model output.

The prompt asks the model for bullets of the form ``- Line <n>: <finding>``.
Models drift from that format, so parsing is best effort: anything that does
not match exactly is treated as prose and ignored.
"""

from __future__ import annotations

import re

from prcritic_core.models import LineFinding

CLEAN_REVIEW_MARKER = "Looks good"

_LINE_FINDING_RE = re.compile(r"^- Line ([0-9]+):\s*(.+)$")


def parse_line_findings(review_text: str) -> list[LineFinding]:
    """Return every well-formed line finding in ``review_text``, in order.

    Total over strings: malformed input yields an empty list, never an error.
    """
    if not isinstance(review_text, str):
        return []

    findings: list[LineFinding] = []
    for raw_line in review_text.splitlines():
        match = _LINE_FINDING_RE.match(raw_line)
        if not match:
            continue
        line_number = int(match.group(1))
        comment = match.group(2).strip()
        if line_number > 0 and comment:
            findings.append(LineFinding(line=line_number, comment=comment))
    return findings


def is_clean_review(review_text: str) -> bool:
    return CLEAN_REVIEW_MARKER in review_text


def format_general_comment(filename: str, review_text: str) -> str:
    return f"**Code Review: {filename}**\n\n{review_text}"
