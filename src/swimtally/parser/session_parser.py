"""Line orchestrator: turns session text into per-line outcomes and totals."""

import re
from collections.abc import Sequence

from swimtally.logging import get_logger
from swimtally.models.session import Contribution, ParsedLine, ParseResult, SessionTotals
from swimtally.parser.breakdown import parse_breakdown
from swimtally.parser.detectors import detect_activity, detect_stroke, normalize_text
from swimtally.parser.distance import extract_distance
from swimtally.parser.options import ParserOptions
from swimtally.parser.outcome import LineOutcome
from swimtally.parser.patterns import SPECIAL_PATTERNS, LineContext, default_contribution
from swimtally.parser.repeat import is_repeat, is_separator, resolve_repeat

logger = get_logger(__name__)

# Lines shorter than this are labels ("A1", "b)") rather than sets
MIN_LINE_LENGTH = 3

# Notations recognized but not supported, checked before distance extraction
UNSUPPORTED_NOTATIONS: tuple[tuple[re.Pattern[str], str], ...] = (
    (
        re.compile(r"\bodds?\b.*\bevens?\b|\bevens?\b.*\bodds?\b|\b(?:odd|even)\s+lanes?\b"),
        "Odd/even lane assignments are not supported",
    ),
    (
        re.compile(r"(?<![\d.])\d+\s*[x×*]\s*\("),
        "Repeat count on a bracketed group is not supported",
    ),
)


def _unparsed(line_number: int, text: str, reason: str | None = None) -> ParsedLine:
    return ParsedLine(line_number=line_number, original_text=text, parsed=False, reason=reason)


def _from_outcome(line_number: int, text: str, outcome: LineOutcome) -> ParsedLine:
    if not outcome.parsed:
        return ParsedLine(
            line_number=line_number,
            original_text=text,
            parsed=False,
            rule=outcome.rule,
            reason=outcome.reason,
        )
    return ParsedLine(
        line_number=line_number,
        original_text=text,
        parsed=True,
        contributions=outcome.contributions,
        warning=outcome.warning,
        rule=outcome.rule,
    )


def parse_line(
    text: str,
    line_number: int,
    previous: Sequence[ParsedLine] = (),
    options: ParserOptions | None = None,
) -> ParsedLine:
    """Analyse one line of session text.

    Order: skip blanks and separators, unsupported notations, repeat lines,
    distance extraction, breakdown, special patterns, then the default
    single contribution.

    Args:
        text: Raw line text, kept verbatim on the result
        line_number: 1-based line number
        previous: Lines already parsed in this session (read only)
        options: Parser options; defaults when omitted

    Returns:
        The ParsedLine. Never raises for line content.
    """
    options = options or ParserOptions()
    stripped = text.strip()

    if len(stripped) < MIN_LINE_LENGTH or is_separator(stripped):
        return _unparsed(line_number, text)

    normalized = normalize_text(stripped)

    for pattern, reason in UNSUPPORTED_NOTATIONS:
        if pattern.search(normalized):
            return _unparsed(line_number, text, reason)

    if is_repeat(normalized):
        outcome = resolve_repeat(tuple(previous), max_lines=options.repeat_max_lines)
        return _from_outcome(line_number, text, outcome)

    distance = extract_distance(normalized)
    if distance is None:
        return _unparsed(line_number, text, "No distance found")

    breakdown = parse_breakdown(normalized, distance)
    if breakdown is not None:
        return _from_outcome(line_number, text, breakdown)

    ctx = LineContext(
        text=normalized,
        distance=distance,
        stroke=detect_stroke(normalized),
        activity=detect_activity(normalized),
        options=options,
    )
    for rule in SPECIAL_PATTERNS:
        outcome = rule(ctx)
        if outcome is not None:
            return _from_outcome(line_number, text, outcome)

    return _from_outcome(line_number, text, default_contribution(ctx))


def parse_session(text: str, options: ParserOptions | None = None) -> ParseResult:
    """Parse a session's text into distance totals by stroke and activity.

    Every line is analysed top to bottom; a line that cannot be parsed is
    recorded and skipped, never fatal. Parsing the same text with the same
    options always gives the same result.

    Args:
        text: Newline-delimited session text as written by the coach
        options: Parser options; defaults when omitted

    Returns:
        ParseResult with totals, per-line outcomes and counters

    Raises:
        TypeError: If text is not a string
    """
    if not isinstance(text, str):
        raise TypeError(f"Session text must be a string, got {type(text).__name__}")

    options = options or ParserOptions()
    parsed_lines: list[ParsedLine] = []
    contributions: list[Contribution] = []
    success_count = 0
    warning_count = 0
    error_count = 0

    for line_number, line_text in enumerate(text.splitlines(), start=1):
        parsed_line = parse_line(line_text, line_number, tuple(parsed_lines), options)
        parsed_lines.append(parsed_line)

        if parsed_line.parsed:
            success_count += 1
            if parsed_line.warning:
                warning_count += 1
            contributions.extend(parsed_line.contributions)
        if parsed_line.error:
            error_count += 1

        logger.debug(
            "line_parsed",
            line_number=line_number,
            parsed=parsed_line.parsed,
            rule=parsed_line.rule,
            contributions=len(parsed_line.contributions),
            warning=parsed_line.warning,
            reason=parsed_line.reason,
        )

    totals = SessionTotals.from_contributions(contributions)
    logger.info(
        "session_parsed",
        lines=len(parsed_lines),
        success_count=success_count,
        warning_count=warning_count,
        error_count=error_count,
        total_distance=totals.total_distance,
    )

    return ParseResult(
        totals=totals,
        parsed_lines=tuple(parsed_lines),
        success_count=success_count,
        warning_count=warning_count,
        error_count=error_count,
    )
