"""
Natural language query parser.

Turns a handful of fixed phrases into the same FilterSet the listing
endpoint uses. Examples:
- "all single word palindromic strings" -> {word_count: 1, is_palindrome: true}
- "strings longer than 10 characters"   -> {min_length: 11}
- "strings containing the letter z"     -> {contains_character: "z"}

Rules run in order against the same lower-cased query; several may fire,
and a later rule overwrites a key set by an earlier one.
"""
import re
import logging
from typing import Callable, Optional, Tuple

from string_analyzer.models.filters import FilterSet

logger = logging.getLogger(__name__)

LEADING_INT = re.compile(r"[+-]?\d+")

PALINDROME_KEYWORDS = ("palindrome", "palindromic", "reads same")
WORD_COUNT_PHRASES = (
    (("single word",), 1),
    (("two word", "2 word"), 2),
    (("three word", "3 word"), 3),
)


def _token_after(query: str, phrase: str) -> Optional[str]:
    """First whitespace-delimited token following the first occurrence of phrase."""
    _, found, rest = query.partition(phrase)
    if not found:
        return None
    words = rest.split()
    return words[0] if words else None


def _number_after(query: str, phrase: str) -> Optional[int]:
    """Leading integer of the token after phrase, or None when absent or not positive."""
    token = _token_after(query, phrase)
    if token is None:
        return None
    match = LEADING_INT.match(token)
    if not match:
        return None
    number = int(match.group())
    return number if number > 0 else None


def palindrome_rule(query: str, filters: FilterSet) -> None:
    if any(keyword in query for keyword in PALINDROME_KEYWORDS):
        filters.is_palindrome = True


def word_count_rule(query: str, filters: FilterSet) -> None:
    for phrases, count in WORD_COUNT_PHRASES:
        if any(phrase in query for phrase in phrases):
            filters.word_count = count
            return


def longer_than_rule(query: str, filters: FilterSet) -> None:
    if "longer than" in query:
        number = _number_after(query, "longer than")
        if number is not None:
            filters.min_length = number + 1


def shorter_than_rule(query: str, filters: FilterSet) -> None:
    if "shorter than" in query:
        number = _number_after(query, "shorter than")
        if number is not None:
            filters.max_length = number - 1


def at_least_rule(query: str, filters: FilterSet) -> None:
    if "at least" in query:
        number = _number_after(query, "at least")
        if number is not None:
            filters.min_length = number


def contains_rule(query: str, filters: FilterSet) -> None:
    # "containing" is covered by "contain"
    if "contain" not in query:
        return

    keyword = "letter" if "letter" in query else "character" if "character" in query else None
    if keyword is None:
        return

    token = _token_after(query, keyword)
    if token is not None and len(token) == 1:
        filters.contains_character = token


def first_vowel_rule(query: str, filters: FilterSet) -> None:
    if "first vowel" in query:
        filters.contains_character = "a"


Rule = Callable[[str, FilterSet], None]

RULES: Tuple[Rule, ...] = (
    palindrome_rule,
    word_count_rule,
    longer_than_rule,
    shorter_than_rule,
    at_least_rule,
    contains_rule,
    first_vowel_rule,
)


def translate(phrase: str) -> FilterSet:
    """Parse a natural language query into a FilterSet. Never raises."""
    query = phrase.strip().lower()
    filters = FilterSet()

    for rule in RULES:
        rule(query, filters)

    logger.info(f"Interpreted query '{query}' as {filters.applied()}")
    return filters
