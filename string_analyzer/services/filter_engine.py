from typing import Any, Mapping, Union

from string_analyzer.models.filters import FilterSet
from string_analyzer.models.record import StringRecord


def _contains_character(value: str, char: str) -> bool:
    if not char:
        return True
    return char in value


def matches(record: StringRecord, filters: Union[FilterSet, Mapping[str, Any], None]) -> bool:
    """True when the record satisfies every filter that is set (logical AND)."""
    if filters is None:
        return True
    if not isinstance(filters, FilterSet):
        filters = FilterSet.from_mapping(filters)

    props = record.properties

    if filters.is_palindrome is not None and props.is_palindrome != filters.is_palindrome:
        return False

    if filters.min_length is not None and props.length < filters.min_length:
        return False

    if filters.max_length is not None and props.length > filters.max_length:
        return False

    if filters.word_count is not None and props.word_count != filters.word_count:
        return False

    if filters.contains_character is not None:
        if not _contains_character(record.value, filters.contains_character):
            return False

    return True
