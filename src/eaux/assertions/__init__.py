"""Assertion utilities that always run, even with python -O."""

from eaux.assertions.safe import safe_assert

__all__ = ["safe_assert"]
