"""eaux: immutable Maybe and Result types for Python 3.13+.

Flat imports (preferred):
    from eaux import something, nothing, success, failure
    from eaux import Maybe, Something, Nothing, Result, Success, Failure

Submodule imports (for organization):
    from eaux.types import Maybe, Result
    from eaux.errors import ExpectationError, ImproperUnwrapError
    from eaux.formatting import render
"""

__version__ = "1.0.0"
VERSION = __version__

# Errors
from eaux.errors import (
    ContractViolationError,
    EauxError,
    ExpectationError,
    ImproperUnwrapError,
    UnreachableCodeError,
)

# Types
from eaux.types import (
    Failure,
    Maybe,
    Nothing,
    NothingType,
    Result,
    Something,
    Success,
    failure,
    is_maybe,
    is_optional,
    is_outcome,
    is_result,
    nothing,
    something,
    success,
)

# Diagnostics
from eaux.formatting import render

# Configuration
from eaux._config import EauxConfig, Stringifier, get_config, init

__all__ = [
    "VERSION",
    "ContractViolationError",
    "EauxConfig",
    "EauxError",
    "ExpectationError",
    "Failure",
    "ImproperUnwrapError",
    "Maybe",
    "Nothing",
    "NothingType",
    "Result",
    "Something",
    "Stringifier",
    "Success",
    "UnreachableCodeError",
    "__version__",
    "failure",
    "get_config",
    "init",
    "is_maybe",
    "is_optional",
    "is_outcome",
    "is_result",
    "nothing",
    "render",
    "something",
    "success",
]
