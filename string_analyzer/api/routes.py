from fastapi import APIRouter, Depends, Query, Request, status
from typing import List, Optional
import logging

from string_analyzer.database import StringStore, get_store
from string_analyzer.crud import strings as crud
from string_analyzer.models.record import StringRecord
from string_analyzer.schemas.strings import (
    InterpretedQuery,
    NaturalLanguageResponse,
    StringCreate,
    StringListResponse,
    StringResponse,
)
from string_analyzer.utils import filters_from_params

router = APIRouter()
logger = logging.getLogger(__name__)


def _to_responses(records: List[StringRecord]) -> List[StringResponse]:
    return [StringResponse.from_record(record) for record in records]


@router.post("/strings", response_model=StringResponse, status_code=status.HTTP_201_CREATED)
def create_string(string_data: StringCreate, store: StringStore = Depends(get_store)):
    """
    Analyze and store a string.
    Returns 409 if string already exists.
    """
    record = crud.create_string(store, string_data.value)
    return StringResponse.from_record(record)


@router.get("/strings", response_model=StringListResponse)
@router.get("/strings/", response_model=StringListResponse, include_in_schema=False)
def get_all_strings(request: Request, store: StringStore = Depends(get_store)):
    """
    Get all strings with optional filtering.
    Query parameters that cannot be parsed are ignored.
    """
    filters = filters_from_params(request.query_params)
    records = crud.get_all_strings(store, filters)

    return StringListResponse(
        data=_to_responses(records),
        count=len(records),
        filters_applied=filters.applied(),
    )


# Must be registered before /strings/{value} so the literal path wins
@router.get("/strings/filter-by-natural-language", response_model=NaturalLanguageResponse)
def filter_by_natural_language(
    query: Optional[str] = Query(None, description="Natural language query"),
    store: StringStore = Depends(get_store),
):
    """
    Filter strings using natural language queries.
    Example: "all single word palindromic strings"
    """
    records, filters = crud.filter_by_natural_language(store, query)

    return NaturalLanguageResponse(
        data=_to_responses(records),
        count=len(records),
        interpreted_query=InterpretedQuery(original=query, parsed_filters=filters.applied()),
    )


@router.get("/strings/{value:path}", response_model=StringResponse)
def get_string(value: str, store: StringStore = Depends(get_store)):
    """
    Get analysis for a specific string.
    Returns 404 if string doesn't exist.
    """
    return StringResponse.from_record(crud.get_string(store, value))


@router.delete("/strings/{value:path}", status_code=status.HTTP_204_NO_CONTENT)
def delete_string(value: str, store: StringStore = Depends(get_store)):
    """
    Delete a string from the system.
    Returns 404 if string doesn't exist.
    """
    crud.delete_string(store, value)
    return None
