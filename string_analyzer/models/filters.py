from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError


class FilterSet(BaseModel):
    """
    Named listing criteria. A field left as None places no constraint on
    that dimension; an empty FilterSet matches every record.
    Unknown keys are ignored when built from a mapping.
    """

    model_config = ConfigDict(extra="ignore")

    is_palindrome: Optional[bool] = None
    min_length: Optional[int] = Field(None, ge=0)
    max_length: Optional[int] = Field(None, ge=0)
    word_count: Optional[int] = Field(None, ge=0)
    contains_character: Optional[str] = None

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> "FilterSet":
        """Build from a loose mapping, skipping unknown keys and ill-typed values."""
        valid = {}
        for key, value in raw.items():
            if key not in cls.model_fields:
                continue
            try:
                cls.model_validate({key: value})
            except ValidationError:
                continue
            valid[key] = value
        return cls.model_validate(valid)

    def applied(self) -> Dict[str, Any]:
        """Only the filters that were actually set, keyed by name."""
        return self.model_dump(exclude_none=True)
