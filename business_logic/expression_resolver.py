"""Natural language date expression resolution."""
import logging
from datetime import datetime
from typing import Callable, List, Optional

from business_logic.dateparser_engine import DateparserEngine, ExpressionParser, ParsedMatch
from models import MatchResult, TimeRange
from utils.time_utils import TimestampLike, to_reference_datetime

logger = logging.getLogger(__name__)


class RangeCountError(ValueError):
    """Raised when an expression does not resolve to exactly one range."""

    def __init__(self, expression: str, count: int):
        super().__init__(f"expected a single range from expression {expression!r}, got {count}")
        self.expression = expression
        self.count = count


class ExpressionResolver:
    """Resolve expressions to dates and match records.

    Stateless apart from the injected parser and clock; every call coerces
    the reference timestamp, delegates to the parser and projects the result.
    """

    def __init__(
        self,
        parser: Optional[ExpressionParser] = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        """
        Initialize ExpressionResolver.

        Args:
            parser: Expression parser to delegate to (uses DateparserEngine if None)
            clock: Callable returning "now" when no reference is given
        """
        self.parser = parser if parser is not None else DateparserEngine()
        self.clock = clock

    def resolve_single_date(
        self, expression: str, reference_timestamp: Optional[TimestampLike] = None
    ) -> Optional[datetime]:
        """
        Resolve an expression to its single best point in time.

        Args:
            expression: Natural language expression
            reference_timestamp: "Now" for relative expressions (uses the clock if None)

        Returns:
            Resolved datetime, or None if the expression holds no date
        """
        reference = to_reference_datetime(reference_timestamp, self.clock)
        return self.parser.parse_date(expression, reference)

    def resolve_date_ranges(
        self, expression: str, reference_timestamp: Optional[TimestampLike] = None
    ) -> List[MatchResult]:
        """
        Resolve every interpretation in an expression.

        Args:
            expression: Natural language expression
            reference_timestamp: "Now" for relative expressions (uses the clock if None)

        Returns:
            One MatchResult per match, in the order found; empty if none
        """
        reference = to_reference_datetime(reference_timestamp, self.clock)
        results = [_project(match) for match in self.parser.parse(expression, reference)]
        logger.debug("Resolved %r to %d match(es)", expression, len(results))
        return results

    def resolve_ranges(
        self, expression: str, reference_timestamp: Optional[TimestampLike] = None
    ) -> List[TimeRange]:
        """
        Resolve every interpretation in an expression as a TimeRange.

        Matches without boundaries become zero-duration ranges at their date.
        """
        ranges = []
        for result in self.resolve_date_ranges(expression, reference_timestamp):
            start = result.start or result.date
            end = result.end or start
            ranges.append(TimeRange.from_times(start, end))
        return ranges

    def resolve_range(
        self, expression: str, reference_timestamp: Optional[TimestampLike] = None
    ) -> TimeRange:
        """
        Resolve an expression that must describe exactly one range.

        Raises:
            RangeCountError: If the expression yields zero or several matches
        """
        ranges = self.resolve_ranges(expression, reference_timestamp)
        if len(ranges) != 1:
            raise RangeCountError(expression, len(ranges))
        return ranges[0]


def _project(match: ParsedMatch) -> MatchResult:
    return MatchResult(date=match.date, start=match.start, end=match.end)


_default_resolver: Optional[ExpressionResolver] = None


def _resolver() -> ExpressionResolver:
    global _default_resolver
    if _default_resolver is None:
        _default_resolver = ExpressionResolver()
    return _default_resolver


def parse_date(
    expression: str, reference_timestamp: Optional[TimestampLike] = None
) -> Optional[datetime]:
    """Resolve an expression to one datetime with the default resolver."""
    return _resolver().resolve_single_date(expression, reference_timestamp)


def parse_range(
    expression: str, reference_timestamp: Optional[TimestampLike] = None
) -> List[MatchResult]:
    """Resolve an expression to match records with the default resolver."""
    return _resolver().resolve_date_ranges(expression, reference_timestamp)
