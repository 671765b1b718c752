from typing import List, Optional, Tuple

from string_analyzer.database import StringStore
from string_analyzer.exceptions import ValidationError
from string_analyzer.models.filters import FilterSet
from string_analyzer.models.record import StringRecord
from string_analyzer.services.analyzer import analyze
from string_analyzer.services.nl_parser import translate


def create_string(store: StringStore, value: Optional[str]) -> StringRecord:
    """Analyze and store a new string"""
    if not value:
        raise ValidationError("Missing 'value' field")

    return store.create(analyze(value))


def get_string(store: StringStore, value: str) -> StringRecord:
    """Get string analysis by value"""
    return store.get(value)


def get_all_strings(store: StringStore, filters: Optional[FilterSet] = None) -> List[StringRecord]:
    """Get all strings with optional filters"""
    return store.list(filters or FilterSet())


def filter_by_natural_language(
    store: StringStore, query: Optional[str]
) -> Tuple[List[StringRecord], FilterSet]:
    """Translate a natural language query and list the strings it selects"""
    if not query or not query.strip():
        raise ValidationError("Missing 'query' parameter")

    filters = translate(query)
    return store.list(filters), filters


def delete_string(store: StringStore, value: str) -> None:
    """Delete string analysis by value"""
    store.delete(value)
