"""Expression resolution for naturaltime.

Modules:
    expression_resolver: Resolver entry points and range conversions
    dateparser_engine: dateparser-backed expression parser
    range_grammar: Range phrase splitting
"""
from business_logic.expression_resolver import (
    ExpressionResolver,
    RangeCountError,
    parse_date,
    parse_range,
)

__all__ = ["ExpressionResolver", "RangeCountError", "parse_date", "parse_range"]
