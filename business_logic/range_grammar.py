"""Range phrase splitting for natural language time expressions."""
import re
from dataclasses import dataclass
from typing import List, Optional, Tuple

_CLOCK = r"\d{1,2}(?::\d{2})?(?:\s*[ap]\.?m\.?)?"
_CONNECTORS = r"to|until|till|through|thru"

_KEYWORD_RANGE = re.compile(
    rf"^(?P<head>.*?)\b(?:from|between)\s+(?P<left>.+?)\s+(?:{_CONNECTORS}|and)\s+(?P<right>.+?)\s*$",
    re.IGNORECASE,
)
# Dashes inside ISO dates ("2024-01-05") must never split
_CLOCK_RANGE = re.compile(
    rf"^(?P<head>.*?)(?<![\w:/.\-])(?P<left>{_CLOCK})\s*[-–]\s*(?P<right>{_CLOCK})(?![\w:/\-])(?P<tail>.*)$",
    re.IGNORECASE,
)
_BARE_RANGE = re.compile(
    rf"^(?P<left>.+?)\s+(?:{_CONNECTORS})\s+(?P<right>.+?)\s*$",
    re.IGNORECASE,
)

_MERIDIEM = re.compile(r"([ap])\.?m\.?$", re.IGNORECASE)
_LEADING_HOUR = re.compile(r"\d+")
_YEAR = re.compile(r"\b\d{4}\b")
_CLOCK_ONLY = re.compile(rf"^{_CLOCK}$", re.IGNORECASE)
_DATEISH = re.compile(r"[a-z]|\d[-/.:]\d", re.IGNORECASE)
_NEXT_WEEKDAY = re.compile(
    r"\bnext\s+(?P<weekday>(?:mon|tues?|wed(?:nes)?|thu(?:rs)?|fri|sat(?:ur)?|sun)(?:day)?)\b\.?",
    re.IGNORECASE,
)


@dataclass(frozen=True)
class RangeSplit:
    """The two sides of a range phrase plus the text around it."""
    left: str
    right: str
    head: str = ""
    tail: str = ""

    @property
    def qualifier(self) -> str:
        """Text outside the range that qualifies both sides (e.g. "tomorrow")."""
        parts = [part.strip(" ,") for part in (self.head, self.tail)]
        return " ".join(part for part in parts if part)


def split_range(expression: str) -> Optional[RangeSplit]:
    """
    Split a range phrase into its sides.

    Supports:
    - Keyword ranges: "from Jan 1 to Jan 5", "between 2pm and 4pm"
    - Clock dash ranges: "9am-5pm", "tomorrow 10:00-11:30"
    - Bare ranges: "Monday to Friday", "noon until 3pm"

    Args:
        expression: Natural language expression

    Returns:
        RangeSplit, or None if the expression is not a range phrase
    """
    text = expression.strip()
    if not text:
        return None

    match = _KEYWORD_RANGE.match(text)
    if match and _is_plausible_pair(match.group("left"), match.group("right")):
        left, right = _normalize_sides(match.group("left"), match.group("right"))
        return RangeSplit(left=left, right=right, head=match.group("head"))

    match = _CLOCK_RANGE.match(text)
    if match and _is_clock_range(match.group("left"), match.group("right")):
        left, right = _share_meridiem(match.group("left"), match.group("right"))
        return RangeSplit(
            left=left, right=right, head=match.group("head"), tail=match.group("tail")
        )

    match = _BARE_RANGE.match(text)
    if match and _is_plausible_pair(match.group("left"), match.group("right")):
        left, right = _normalize_sides(match.group("left"), match.group("right"))
        return RangeSplit(left=left, right=right)

    return None


def _has_clock_marker(value: str) -> bool:
    return ":" in value or _MERIDIEM.search(value.strip()) is not None


def _is_clock_range(left: str, right: str) -> bool:
    # "3-4" alone is too ambiguous to read as times
    return _has_clock_marker(left) or _has_clock_marker(right)


def _share_meridiem(left: str, right: str) -> Tuple[str, str]:
    """Give a bare left hour the meridiem implied by the right side ("2-4pm")."""
    left, right = left.strip(), right.strip()
    right_meridiem = _MERIDIEM.search(right)
    if right_meridiem and not _has_clock_marker(left):
        letter = right_meridiem.group(1).lower()
        offset = 12 if letter == "p" else 0
        left_hour = int(_LEADING_HOUR.match(left).group()) % 12 + offset
        right_hour = int(_LEADING_HOUR.match(right).group()) % 12 + offset
        # The left side must not come after the right: "11-1pm" is 11am
        if left_hour > right_hour:
            letter = "a" if letter == "p" else "p"
        left = f"{left}{letter}m"

    if not _has_clock_marker(left):
        left = f"{left}:00"
    if not _has_clock_marker(right):
        right = f"{right}:00"
    return left, right


def _share_year(left: str, right: str) -> Tuple[str, str]:
    """Copy a year that only the right side names onto the left ("Jan 1 to Jan 5, 2024")."""
    left, right = left.strip(), right.strip()
    year = _YEAR.search(right)
    if year and not _YEAR.search(left):
        left = f"{left} {year.group()}"
    return left, right


def _normalize_sides(left: str, right: str) -> Tuple[str, str]:
    left, right = left.strip(), right.strip()
    if _CLOCK_ONLY.match(left) and _CLOCK_ONLY.match(right) and _is_clock_range(left, right):
        return _share_meridiem(left, right)
    return _share_year(left, right)


def _is_plausible_pair(left: str, right: str) -> bool:
    # "10 to 5" alone is two numbers, not a range
    left, right = left.strip(), right.strip()
    if _DATEISH.search(left) and _DATEISH.search(right):
        return True
    return is_clock_only(left) and is_clock_only(right) and _is_clock_range(left, right)


def find_next_weekday(text: str, whole: bool = False) -> Optional[str]:
    """
    Find a "next <weekday>" phrase.

    Args:
        text: Text to search
        whole: Require the phrase to be the entire text

    Returns:
        The weekday word (e.g. "Monday"), or None
    """
    match = _NEXT_WEEKDAY.search(text)
    if match is None:
        return None
    if whole and match.group(0) != text.strip():
        return None
    return match.group("weekday")


def is_clock_only(text: str) -> bool:
    """True if text names only a time of day ("5pm", "11:30")."""
    return _CLOCK_ONLY.match(text.strip()) is not None


def next_weekdays(text: str) -> List[str]:
    """Lowercased weekday words that "next" qualifies anywhere in text."""
    return [match.group("weekday").lower() for match in _NEXT_WEEKDAY.finditer(text)]
