from typing import Mapping, Optional

from string_analyzer.models.filters import FilterSet


def parse_bool(raw: Optional[str]) -> Optional[bool]:
    """'true' / 'false' only; anything else is treated as absent."""
    if raw == "true":
        return True
    if raw == "false":
        return False
    return None


def parse_non_negative_int(raw: Optional[str]) -> Optional[int]:
    if raw is None:
        return None
    raw = raw.strip()
    if not raw.isdigit() or not raw.isascii():
        return None
    return int(raw)


def parse_single_character(raw: Optional[str]) -> Optional[str]:
    if raw is None or len(raw) != 1:
        return None
    return raw


def filters_from_params(params: Mapping[str, Optional[str]]) -> FilterSet:
    """
    Build a FilterSet from raw query parameters.
    Values that do not parse are dropped instead of rejected.
    """
    return FilterSet(
        is_palindrome=parse_bool(params.get("is_palindrome")),
        min_length=parse_non_negative_int(params.get("min_length")),
        max_length=parse_non_negative_int(params.get("max_length")),
        word_count=parse_non_negative_int(params.get("word_count")),
        contains_character=parse_single_character(params.get("contains_character")),
    )
