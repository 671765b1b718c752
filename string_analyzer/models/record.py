from datetime import datetime
from typing import Dict

from pydantic import BaseModel, ConfigDict


class StringProperties(BaseModel):
    model_config = ConfigDict(frozen=True)

    length: int
    is_palindrome: bool
    unique_characters: int
    word_count: int
    sha256_hash: str
    character_frequency_map: Dict[str, int]


class StringRecord(BaseModel):
    """One analyzed string. Records are never mutated once created."""

    model_config = ConfigDict(frozen=True)

    value: str
    identifier: str
    properties: StringProperties
    created_at: datetime
