"""Human-readable rendering of Maybe and Result containers.

Output is a labeled block naming the component and the active variant:

    Result{
      Success{
        value: 42,
      }
    }

The payload is turned into text by a pluggable stringifier. When none is
passed, the configured default is used (pprint.pformat unless changed via
eaux.init() or EAUX_STRINGIFIER).
"""

from __future__ import annotations

from collections.abc import Callable

from eaux._config import get_config
from eaux._logging import get_logger
from eaux.errors import UnreachableCodeError
from eaux.types.maybe import NothingType, Something
from eaux.types.result import Failure, Success

__all__ = ["render"]

logger = get_logger(__name__)

type StringifierFn = Callable[[object], str]

_FIELD_INDENT = " " * 4


def _stringify(payload: object, stringifier: StringifierFn) -> str:
    try:
        return stringifier(payload)
    except Exception as exc:
        # degrade to plain str()
        logger.warning("stringifier_failed", stringifier=repr(stringifier), error=repr(exc))
        return str(payload)


def _block(component: str, variant: str, field: str, payload: object, stringifier: StringifierFn) -> str:
    text = _stringify(payload, stringifier)
    text = "\n".join(_FIELD_INDENT + line for line in text.split("\n")).lstrip()
    return f"{component}{{\n  {variant}{{\n    {field}: {text},\n  }}\n}}"


def render(container: object, stringifier: StringifierFn | None = None) -> str:
    """Render a Maybe or Result as an indented diagnostic block.

    Args:
        container: A Something, Nothing, Success or Failure.
        stringifier: Turns the payload into text. Defaults to the configured one.

    Returns:
        The rendered block.

    Raises:
        UnreachableCodeError: If container is not one of the four variants.

    Examples:
        >>> from eaux import nothing, something
        >>> print(render(something([1, 2])))
        Maybe{
          Something{
            value: [1, 2],
          }
        }
        >>> print(render(nothing()))
        Maybe{
          Nothing{}
        }
    """
    if stringifier is None:
        stringifier = get_config().make_stringifier()

    match container:
        case Something(value=value):
            return _block("Maybe", "Something", "value", value, stringifier)
        case NothingType():
            return "Maybe{\n  Nothing{}\n}"
        case Success(value=value):
            return _block("Result", "Success", "value", value, stringifier)
        case Failure(error=error):
            return _block("Result", "Failure", "error", error, stringifier)
        case _:
            raise UnreachableCodeError()
