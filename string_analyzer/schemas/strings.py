from pydantic import BaseModel, Field
from typing import Any, Dict, List
from datetime import datetime

from string_analyzer.models.record import StringProperties, StringRecord


class StringCreate(BaseModel):
    value: str = Field(..., description="String to analyze")


class StringResponse(BaseModel):
    id: str
    value: str
    properties: StringProperties
    created_at: datetime

    @classmethod
    def from_record(cls, record: StringRecord) -> "StringResponse":
        return cls(
            id=record.identifier,
            value=record.value,
            properties=record.properties,
            created_at=record.created_at,
        )


class StringListResponse(BaseModel):
    data: List[StringResponse]
    count: int
    filters_applied: Dict[str, Any] = {}


class InterpretedQuery(BaseModel):
    original: str
    parsed_filters: Dict[str, Any]


class NaturalLanguageResponse(BaseModel):
    data: List[StringResponse]
    count: int
    interpreted_query: InterpretedQuery
