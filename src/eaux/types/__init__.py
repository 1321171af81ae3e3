"""Core types: Maybe, Something, Nothing, Result, Success, Failure."""

from eaux.types.maybe import (
    Maybe,
    Nothing,
    NothingType,
    Something,
    is_maybe,
    is_optional,
    nothing,
    something,
)
from eaux.types.result import (
    Failure,
    Result,
    Success,
    failure,
    is_outcome,
    is_result,
    success,
)

__all__ = [
    "Failure",
    "Maybe",
    "Nothing",
    "NothingType",
    "Result",
    "Something",
    "Success",
    "failure",
    "is_maybe",
    "is_optional",
    "is_outcome",
    "is_result",
    "nothing",
    "something",
    "success",
]
