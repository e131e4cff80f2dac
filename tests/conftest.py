"""Pytest configuration and shared fixtures."""
import pytest
from datetime import datetime, timedelta, timezone
from business_logic.dateparser_engine import DateparserEngine, ParsedMatch
from business_logic.expression_resolver import ExpressionResolver


class FakeParser:
    """Expression parser returning canned matches and recording calls."""

    def __init__(self, matches=None, best=None):
        self.matches = matches or {}
        self.best = best or {}
        self.calls = []

    def parse_date(self, expression, reference):
        self.calls.append(("parse_date", expression, reference))
        return self.best.get(expression)

    def parse(self, expression, reference):
        self.calls.append(("parse", expression, reference))
        return list(self.matches.get(expression, []))


@pytest.fixture
def reference():
    """Fixed reference time: Sunday, January 15, 2023 at noon."""
    return datetime(2023, 1, 15, 12, 0)


@pytest.fixture
def utc_reference():
    """Fixed UTC reference time at midnight, January 1, 2024."""
    return datetime(2024, 1, 1, tzinfo=timezone.utc)


@pytest.fixture
def fake_parser(reference):
    """Fake parser with a single date, a range and a two-match expression."""
    return FakeParser(
        matches={
            "tomorrow": [ParsedMatch(text="tomorrow", date=reference + timedelta(days=1))],
            "from 2pm to 4pm": [
                ParsedMatch(
                    text="from 2pm to 4pm",
                    date=reference.replace(hour=14),
                    start=reference.replace(hour=14),
                    end=reference.replace(hour=16),
                )
            ],
            "monday or tuesday": [
                ParsedMatch(text="monday", date=reference + timedelta(days=1)),
                ParsedMatch(text="tuesday", date=reference + timedelta(days=2)),
            ],
        },
        best={"tomorrow": reference + timedelta(days=1)},
    )


@pytest.fixture
def fake_resolver(fake_parser, reference):
    """Resolver over the fake parser with a frozen clock."""
    return ExpressionResolver(fake_parser, clock=lambda: reference)


@pytest.fixture(scope="module")
def engine():
    """Real dateparser-backed engine."""
    return DateparserEngine()


@pytest.fixture(scope="module")
def resolver(engine):
    """Resolver over the real engine."""
    return ExpressionResolver(engine)


@pytest.fixture
def make_parser():
    """Factory for fake parsers with custom canned matches."""
    return FakeParser
