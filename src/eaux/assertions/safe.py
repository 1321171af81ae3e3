"""safe_assert: precondition checks that survive ``python -O``.

Every public Maybe/Result entry point validates its arguments with
safe_assert, so a broken contract fails at the call site instead of leaving
an invalid container behind.
"""

from __future__ import annotations

from eaux._logging import get_logger
from eaux.errors import ContractViolationError

__all__ = ["safe_assert"]

logger = get_logger(__name__)


def safe_assert(condition: bool, message: str = "") -> None:
    """Assert that works even in optimized mode (-O flag).

    Unlike the built-in assert, this always executes regardless of __debug__.

    Args:
        condition: The condition to check.
        message: Optional error message if assertion fails.

    Raises:
        ContractViolationError: If condition is False.

    Example:
        ```python
        safe_assert(callable(f), "`f` must be callable")
        ```
    """
    if not condition:
        logger.debug("contract_violation", message=message)
        raise ContractViolationError(message)
