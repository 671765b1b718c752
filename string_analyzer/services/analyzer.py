import hashlib
from collections import Counter
from datetime import datetime, timezone
from typing import Dict

from string_analyzer.models.record import StringProperties, StringRecord


def compute_sha256(text: str) -> str:
    """Compute SHA-256 hash of a string"""
    return hashlib.sha256(text.encode("utf-8")).hexdigest()


def is_palindrome(text: str) -> bool:
    """
    Check if string reads the same forward and backward.
    Comparison is case-insensitive only; spaces and punctuation are kept.
    """
    text = text.lower()
    left, right = 0, len(text) - 1

    while left < right:
        if text[left] != text[right]:
            return False
        left += 1
        right -= 1

    return True


def count_unique_characters(text: str) -> int:
    """Count distinct characters in string"""
    return len(set(text))


def count_words(text: str) -> int:
    """Count words separated by whitespace"""
    return len(text.split())


def get_character_frequency(text: str) -> Dict[str, int]:
    """Get frequency map of each character"""
    return dict(Counter(text))


def analyze(value: str) -> StringRecord:
    """Analyze a string and return a record with all computed properties"""
    sha256_hash = compute_sha256(value)

    return StringRecord(
        value=value,
        identifier=sha256_hash,
        properties=StringProperties(
            length=len(value),
            is_palindrome=is_palindrome(value),
            unique_characters=count_unique_characters(value),
            word_count=count_words(value),
            sha256_hash=sha256_hash,
            character_frequency_map=get_character_frequency(value),
        ),
        created_at=datetime.now(timezone.utc),
    )
