"""Utility functions for leaguebook."""

from leaguebook.utils.date_parser import parse_date, parse_month
from leaguebook.utils.amount_parser import parse_amount
from leaguebook.utils.entity_resolver import resolve_entity

__all__ = ["parse_date", "parse_month", "parse_amount", "resolve_entity"]
