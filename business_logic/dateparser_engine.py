"""dateparser-backed natural language expression engine."""
import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, tzinfo
from typing import Any, Dict, List, Optional, Protocol

import dateparser
from dateparser.search import search_dates

from business_logic.range_grammar import (
    RangeSplit,
    find_next_weekday,
    is_clock_only,
    next_weekdays,
    split_range,
)
from config import Config, config as default_config

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParsedMatch:
    """A date mention found by the engine.

    ``start`` and ``end`` are only set for range phrases.
    """
    text: str
    date: datetime
    start: Optional[datetime] = None
    end: Optional[datetime] = None


class ExpressionParser(Protocol):
    """Capability surface the resolver needs from a date expression parser."""

    def parse_date(self, expression: str, reference: datetime) -> Optional[datetime]:
        ...

    def parse(self, expression: str, reference: datetime) -> List[ParsedMatch]:
        ...


class DateparserEngine:
    """Resolve expressions with dateparser.

    dateparser works on naive wall-clock time, so the reference is handed over
    without its tzinfo and results are re-attached to it.
    """

    def __init__(self, settings: Optional[Config] = None):
        """
        Initialize DateparserEngine.

        Args:
            settings: Configuration to use (uses the global config if None)
        """
        self.config = settings or default_config

    def parse_date(self, expression: str, reference: datetime) -> Optional[datetime]:
        """
        Resolve an expression to a single point in time.

        A range phrase resolves to its start, so this always agrees with the
        date of the single match ``parse`` returns for it. Otherwise the whole
        expression is tried, then the first date mentioned anywhere in it.

        Args:
            expression: Natural language expression
            reference: "Now" for relative expressions

        Returns:
            Resolved datetime, or None if nothing could be resolved
        """
        if not expression.strip():
            return None

        result = None
        split = split_range(expression)
        if split is not None:
            match = self._resolve_range(expression, split, reference)
            result = match.date if match else None
        if result is None:
            result = self._parse_next_weekday(expression, reference, whole=True)
        if result is None:
            result = self._parse_fragment(expression, reference)
        if result is None:
            matches = self._search(expression, reference)
            result = matches[0].date if matches else None

        logger.debug("Resolved %r against %s to %s", expression, reference, result)
        return result

    def parse(self, expression: str, reference: datetime) -> List[ParsedMatch]:
        """
        Find every date mention in an expression.

        A range phrase whose sides both resolve yields a single match with
        start and end. Otherwise each date found in the text is one match,
        in the order it appears.

        Args:
            expression: Natural language expression
            reference: "Now" for relative expressions

        Returns:
            List of matches, empty if nothing was found
        """
        if not expression.strip():
            return []

        split = split_range(expression)
        if split is not None:
            match = self._resolve_range(expression, split, reference)
            if match is not None:
                return [match]
            logger.debug("Range phrase %r did not resolve, searching instead", expression)

        moment = self._parse_next_weekday(expression, reference, whole=True)
        if moment is not None:
            return [ParsedMatch(text=expression.strip(), date=moment)]

        matches = self._search(expression, reference)
        logger.debug("Found %d date(s) in %r", len(matches), expression)
        return matches

    def _search(self, expression: str, reference: datetime) -> List[ParsedMatch]:
        found = search_dates(
            expression,
            languages=self.config.languages,
            settings=self._settings(reference),
        )
        upcoming_days = next_weekdays(expression)
        matches = []
        for text, moment in found or []:
            # search_dates reads "next Monday" as the most recent Monday
            upcoming = self._parse_next_weekday(text, reference, whole=True)
            if upcoming is None and text.strip().lower() in upcoming_days:
                upcoming = self._parse_fragment(text, reference, prefer="future")
            moment = upcoming or self._restore_tz(moment, reference.tzinfo)
            matches.append(ParsedMatch(text=text, date=moment))
        return matches

    def _resolve_range(
        self, expression: str, split: RangeSplit, reference: datetime
    ) -> Optional[ParsedMatch]:
        anchor = reference
        if split.qualifier:
            anchor = self._resolve_anchor(split.qualifier, reference)
            if anchor is None:
                logger.debug("Qualifier %r names no date, using the reference", split.qualifier)
                anchor = reference

        start = self._parse_fragment(split.left, anchor)
        if start is None:
            return None
        # A dated end ("Friday", "Jan 5") follows the start; a bare clock time
        # stays on the start's day
        prefer = None if is_clock_only(split.right) else "future"
        end = self._parse_fragment(split.right, start, prefer=prefer)
        if end is None:
            return None

        if end < start:
            if end.date() == start.date():
                # Clock range crossing midnight ("10pm-2am")
                end += timedelta(days=1)
            else:
                start, end = end, start

        return ParsedMatch(text=expression.strip(), date=start, start=start, end=end)

    def _resolve_anchor(self, qualifier: str, reference: datetime) -> Optional[datetime]:
        """
        Resolve the text around a range ("tomorrow", "next Monday", "Let's meet tomorrow").

        Returns:
            The moment both range sides are placed against, or None if the
            qualifier names no date at all
        """
        anchor = self._parse_next_weekday(qualifier, reference)
        if anchor is None:
            anchor = self._parse_fragment(qualifier, reference)
        if anchor is None:
            found = self._search(qualifier, reference)
            anchor = found[0].date if found else None
        return anchor

    def _parse_next_weekday(
        self, text: str, reference: datetime, whole: bool = False
    ) -> Optional[datetime]:
        weekday = find_next_weekday(text, whole=whole)
        if weekday is None:
            return None
        return self._parse_fragment(weekday, reference, prefer="future")

    def _parse_fragment(
        self, text: str, reference: datetime, prefer: Optional[str] = None
    ) -> Optional[datetime]:
        result = dateparser.parse(
            text,
            languages=self.config.languages,
            settings=self._settings(reference, prefer),
        )
        if result is None:
            return None
        return self._restore_tz(result, reference.tzinfo)

    def _settings(self, reference: datetime, prefer: Optional[str] = None) -> Dict[str, Any]:
        return {
            "RELATIVE_BASE": reference.replace(tzinfo=None),
            "PREFER_DATES_FROM": prefer or self.config.prefer_dates_from,
            "RETURN_AS_TIMEZONE_AWARE": False,
        }

    @staticmethod
    def _restore_tz(moment: datetime, tz: Optional[tzinfo]) -> datetime:
        if tz is None or moment.tzinfo is not None:
            return moment
        return moment.replace(tzinfo=tz)
