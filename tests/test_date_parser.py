"""Tests for natural language date parsing against dateparser."""
import pytest
from datetime import date, datetime, timedelta, timezone
from business_logic.expression_resolver import ExpressionResolver, parse_date, parse_range


class TestParseDate:
    """Test suite for single date resolution."""

    @pytest.mark.parametrize("expression,expected", [
        ("today", datetime(2023, 1, 15, 12, 0)),
        ("tomorrow", datetime(2023, 1, 16, 12, 0)),
        ("yesterday", datetime(2023, 1, 14, 12, 0)),
        ("in 3 days", datetime(2023, 1, 18, 12, 0)),
        ("2 weeks ago", datetime(2023, 1, 1, 12, 0)),
        ("3pm", datetime(2023, 1, 15, 15, 0)),
    ])
    def test_relative_expressions(self, resolver, reference, expression, expected):
        """Test relative expressions against a fixed reference."""
        result = resolver.resolve_single_date(expression, reference)
        assert result.replace(second=0, microsecond=0) == expected

    def test_month_day(self, resolver, reference):
        """Test parsing 'January 20'."""
        result = resolver.resolve_single_date("January 20", reference)
        assert result is not None
        assert (result.month, result.day) == (1, 20)

    def test_iso_date(self, resolver, reference):
        """Test parsing an ISO date."""
        result = resolver.resolve_single_date("2024-12-25", reference)
        assert result.date() == date(2024, 12, 25)

    def test_tomorrow_from_utc_midnight(self):
        """Test 'tomorrow' from an ISO UTC reference."""
        result = parse_date("tomorrow", "2024-01-01T00:00:00Z")
        assert result == datetime(2024, 1, 2, tzinfo=timezone.utc)

    def test_reference_timezone_is_kept(self, resolver, utc_reference):
        """Results carry the reference's timezone."""
        result = resolver.resolve_single_date("tomorrow", utc_reference)
        assert result.tzinfo is not None
        assert result.utcoffset() == timedelta(0)

    def test_date_inside_sentence(self, resolver, reference):
        """A date mentioned inside a sentence is still found."""
        result = resolver.resolve_single_date("meet me tomorrow", reference)
        assert result.date() == date(2023, 1, 16)

    def test_next_weekday(self, resolver, reference):
        """'next Monday' from a Sunday is the following day."""
        result = resolver.resolve_single_date("next Monday", reference)
        assert result.date() == date(2023, 1, 16)

    def test_next_weekday_inside_sentence(self, resolver, reference):
        """'next <weekday>' inside a sentence still looks forward."""
        result = resolver.resolve_single_date("lunch next Friday please", reference)
        assert result.date() == date(2023, 1, 20)

    @pytest.mark.parametrize("expression", [
        "tomorrow 9am-5pm",
        "next Monday 10:00-11:30",
        "Monday to Friday",
        "10pm-2am",
    ])
    def test_agrees_with_range_date(self, resolver, reference, expression):
        """The single date of a range phrase is the date of its match."""
        [match] = resolver.resolve_date_ranges(expression, reference)
        assert resolver.resolve_single_date(expression, reference) == match.date

    def test_gibberish(self, resolver, reference):
        """Text without dates gives None."""
        assert resolver.resolve_single_date("gibberish text", reference) is None

    def test_empty_string(self, resolver, reference):
        """Empty and whitespace input gives None."""
        assert resolver.resolve_single_date("", reference) is None
        assert resolver.resolve_single_date("   ", reference) is None

    def test_deterministic(self, resolver, reference):
        """Same expression and reference give the same result."""
        assert resolver.resolve_single_date("in 2 hours", reference) == resolver.resolve_single_date("in 2 hours", reference)

    def test_now_follows_clock(self, engine):
        """'now' without a reference follows the clock."""
        ticks = iter([datetime(2024, 1, 1, 8, 0), datetime(2024, 6, 1, 9, 30)])
        resolver = ExpressionResolver(engine, clock=lambda: next(ticks))
        assert resolver.resolve_single_date("now") == datetime(2024, 1, 1, 8, 0)
        assert resolver.resolve_single_date("now") == datetime(2024, 6, 1, 9, 30)

    def test_now_tracks_wall_clock(self, resolver):
        """'now' without a reference is close to the real time."""
        result = resolver.resolve_single_date("now")
        assert abs(result - datetime.now()) < timedelta(minutes=1)


class TestParseRange:
    """Test suite for match record resolution."""

    def test_single_date_has_no_boundaries(self, resolver, reference):
        """A single moment has a date but no start or end."""
        [result] = resolver.resolve_date_ranges("tomorrow", reference)
        assert result.date.replace(second=0, microsecond=0) == datetime(2023, 1, 16, 12, 0)
        assert result.start is None
        assert result.end is None
        assert "start" not in result.to_dict()

    def test_date_range_with_shared_year(self):
        """Test 'from Jan 1 to Jan 5, 2024'."""
        [result] = parse_range("from Jan 1 to Jan 5, 2024", "2024-01-01T00:00:00Z")
        assert result.start.date() == date(2024, 1, 1)
        assert result.end.date() == date(2024, 1, 5)
        assert result.date == result.start

    @pytest.mark.parametrize("expression,start,end", [
        ("today from 2pm to 4pm", datetime(2023, 1, 15, 14, 0), datetime(2023, 1, 15, 16, 0)),
        ("tomorrow 9am-5pm", datetime(2023, 1, 16, 9, 0), datetime(2023, 1, 16, 17, 0)),
        ("from 3pm to 5pm", datetime(2023, 1, 15, 15, 0), datetime(2023, 1, 15, 17, 0)),
        ("between 10:00 and 11:30", datetime(2023, 1, 15, 10, 0), datetime(2023, 1, 15, 11, 30)),
        ("2-4pm", datetime(2023, 1, 15, 14, 0), datetime(2023, 1, 15, 16, 0)),
        ("next Monday 10:00-11:30", datetime(2023, 1, 16, 10, 0), datetime(2023, 1, 16, 11, 30)),
        ("Let's meet tomorrow from 2pm to 4pm", datetime(2023, 1, 16, 14, 0), datetime(2023, 1, 16, 16, 0)),
    ])
    def test_clock_ranges(self, resolver, reference, expression, start, end):
        """Test time ranges anchored on the reference day."""
        [result] = resolver.resolve_date_ranges(expression, reference)
        assert result.start.replace(second=0, microsecond=0) == start
        assert result.end.replace(second=0, microsecond=0) == end

    def test_range_crossing_midnight(self, resolver, reference):
        """An end earlier in the day moves to the next day."""
        [result] = resolver.resolve_date_ranges("10pm-2am", reference)
        assert result.start.replace(second=0, microsecond=0) == datetime(2023, 1, 15, 22, 0)
        assert result.end.replace(second=0, microsecond=0) == datetime(2023, 1, 16, 2, 0)

    @pytest.mark.parametrize("expression", [
        "from Jan 1 to Jan 5, 2024",
        "from Jan 5 2024 to Jan 1 2024",
        "Monday to Friday",
        "tomorrow 9am-5pm",
        "10pm-2am",
    ])
    def test_start_not_after_end(self, resolver, reference, expression):
        """Bounded ranges always have start <= end."""
        [result] = resolver.resolve_date_ranges(expression, reference)
        assert result.start is not None and result.end is not None
        assert result.start <= result.end

    def test_weekday_span(self, resolver, reference):
        """'Monday to Friday' runs from a Monday to the Friday after it."""
        [result] = resolver.resolve_date_ranges("Monday to Friday", reference)
        assert result.start.weekday() == 0
        assert result.end.weekday() == 4
        assert result.end - result.start < timedelta(days=7)
        assert result.end > result.start

    def test_next_weekday_qualifier(self, resolver, reference):
        """'next Monday' before a range places it on the upcoming Monday, not today."""
        [result] = resolver.resolve_date_ranges("next Monday from 2pm to 4pm", reference)
        assert result.start.replace(second=0, microsecond=0) == datetime(2023, 1, 16, 14, 0)
        assert result.end.replace(second=0, microsecond=0) == datetime(2023, 1, 16, 16, 0)

    def test_filler_qualifier_uses_reference_day(self, resolver, reference):
        """Words around a range that name no date leave it on the reference day."""
        [result] = resolver.resolve_date_ranges("meeting from 2pm to 4pm", reference)
        assert result.start.replace(second=0, microsecond=0) == datetime(2023, 1, 15, 14, 0)

    def test_several_dates_in_text_order(self, resolver, reference):
        """Each date mentioned gives its own record, in order."""
        results = resolver.resolve_date_ranges("meet Monday or Tuesday", reference)
        assert [result.date.weekday() for result in results] == [0, 1]
        assert all(result.start is None and result.end is None for result in results)

    def test_next_weekday_is_single_match(self, resolver, reference):
        """'next Monday' alone is one match on the upcoming Monday."""
        [result] = resolver.resolve_date_ranges("next Monday", reference)
        assert result.date.date() == date(2023, 1, 16)
        assert result.start is None

    def test_gibberish(self):
        """Text without dates gives no matches."""
        assert parse_range("gibberish text") == []

    def test_empty_string(self, resolver, reference):
        """Empty input gives no matches."""
        assert resolver.resolve_date_ranges("", reference) == []

    def test_resolve_range(self, resolver, reference):
        """A single range converts to a TimeRange."""
        time_range = resolver.resolve_range("tomorrow 9am-5pm", reference)
        assert time_range.duration == timedelta(hours=8)
        assert time_range.contains(datetime(2023, 1, 16, 12, 0))
