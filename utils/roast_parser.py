"""
Best-effort parser for free-text roast completions.

The model is asked for a fixed layout but nothing enforces it, so the reply is
scanned line by line with a small state machine. Headers switch the active
section; lines inside a bucket section become items. The parser never raises:
unrecognizable text yields empty buckets with the raw text kept intact.
"""

import logging
import re
from enum import Enum
from typing import Optional, Tuple

from models import RoastResult

logger = logging.getLogger(__name__)

SCORE_PATTERN = re.compile(r"score[ \t]*[:\-][ \t]*(.*)", re.IGNORECASE)
BULLET_PATTERN = re.compile(r"^[\-•]\s*")
LINE_SPLIT = re.compile(r"\r?\n")


class Section(Enum):
    NONE = "none"
    SCORE = "score"
    GOOD = "good"
    CONFUSING = "confusing"
    IMPROVEMENTS = "improvements"


BUCKET_SECTIONS = (Section.GOOD, Section.CONFUSING, Section.IMPROVEMENTS)


def classify_header(line: str) -> Optional[Section]:
    """
    Return the section a header line opens, or None for content.

    Checks run in a fixed order (score, good, confusing, improvements) and the
    first match wins.
    """
    normalized = line.lower()
    if normalized.startswith("score"):
        return Section.SCORE
    if "what" in normalized and "good" in normalized:
        return Section.GOOD
    if "what" in normalized and "confusing" in normalized:
        return Section.CONFUSING
    if "improve" in normalized:
        return Section.IMPROVEMENTS
    return None


def strip_bullet(line: str) -> str:
    """Remove one leading '-' or '•' marker and the whitespace after it."""
    return BULLET_PATTERN.sub("", line, count=1)


def extract_score(text: str) -> str:
    match = SCORE_PATTERN.search(text)
    if not match:
        return ""
    return match.group(1).strip()


def advance(state: Section, line: str) -> Tuple[Section, Optional[str]]:
    """
    Transition for one trimmed, non-empty line.

    Returns the next state and the content the line contributes to the
    current section (None for headers and ignored lines).
    """
    header = classify_header(line)
    if header is not None:
        return header, None
    if state is Section.NONE:
        return state, None
    if state is Section.SCORE:
        return state, line
    return state, strip_bullet(line)


def parse_roast(text: Optional[str]) -> RoastResult:
    """
    Partition a roast completion into score, good, confusing and improvements.

    Args:
        text: Completion text as returned by the upstream model

    Returns:
        RoastResult; all buckets are empty when no structure was found
    """
    text = text or ""
    score = extract_score(text)
    buckets = {section: [] for section in BUCKET_SECTIONS}
    state = Section.NONE

    for raw_line in LINE_SPLIT.split(text):
        line = raw_line.strip()
        if not line:
            continue

        state, content = advance(state, line)
        if content is None:
            continue

        if state is Section.SCORE:
            # Score header without a value; first line after it is the score
            if not score:
                score = content
            continue

        buckets[state].append(content)

    result = RoastResult(
        score=score,
        good=tuple(buckets[Section.GOOD]),
        confusing=tuple(buckets[Section.CONFUSING]),
        improvements=tuple(buckets[Section.IMPROVEMENTS]),
        raw=text,
    )

    if not result.is_structured:
        logger.debug(f"No sections detected in roast reply ({len(text)} chars)")

    return result
