"""Resolve "Repeat" lines against the lines already parsed."""

import re
from collections.abc import Sequence

from swimtally.models.session import ParsedLine
from swimtally.parser.outcome import LineOutcome

RULE = "repeat"

REPEAT_PATTERN = re.compile(r"repeat")
SEPARATOR_PATTERN = re.compile(r"^[_\-=]+$")


def is_repeat(text: str) -> bool:
    return REPEAT_PATTERN.search(text) is not None


def is_separator(text: str) -> bool:
    """Line made only of dashes, underscores or equals signs."""
    return SEPARATOR_PATTERN.match(text.strip()) is not None


def resolve_repeat(previous: Sequence[ParsedLine], max_lines: int = 2) -> LineOutcome:
    """Replay the contributions of the most recent parsed lines.

    Walks backwards over `previous`, collecting parsed lines with
    contributions until `max_lines` are found or a blank or separator line
    ends the set. Unparsed lines in between (headers, notes) are passed over.

    Args:
        previous: Lines parsed so far, in order. Not modified.
        max_lines: Most lines to replay

    Returns:
        Outcome with the replayed contributions in original order, or an
        unsupported outcome when there is nothing to repeat.
    """
    replayed: list[ParsedLine] = []
    for line in reversed(previous):
        if line.is_blank or is_separator(line.original_text):
            break
        if line.parsed and line.contributions:
            replayed.insert(0, line)
            if len(replayed) >= max_lines:
                break

    if not replayed:
        return LineOutcome.unsupported(RULE, "Nothing to repeat")

    return LineOutcome(
        rule=RULE,
        contributions=tuple(c for line in replayed for c in line.contributions),
        warning=f"Repeated {len(replayed)} previous line(s)",
    )
