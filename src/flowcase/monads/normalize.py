"""Classification of raw values into Results.

Rules, first match wins:

1. a Result is returned as-is
2. None becomes ``Failure("Nil returned")``
3. a two-element list/tuple with a None head, ``[None, err]``, becomes ``Failure(err)``
4. anything else becomes ``Success(raw)``

Rule 3 lets producers that follow the plain ``(value, error)`` pair
convention join a chain without wrapping their returns. A pair with a
non-None head is an ordinary value, and only pairs qualify: ``[None, a, b]``
is a Success.
"""

from __future__ import annotations

from typing import Any

from .result import Failure, Result, Success

NIL_RETURNED = "Nil returned"


def normalize(raw: Any) -> Result[Any, Any]:
    """Convert any value into a canonical Result.

    Examples:
        >>> normalize(10)
        Success(10)
        >>> normalize(None)
        Failure('Nil returned')
        >>> normalize((None, {"type": "planned"}))
        Failure({'type': 'planned'})
        >>> normalize([1, "ignored"])
        Success([1, 'ignored'])
    """
    match raw:
        case Result():
            return raw
        case None:
            return Failure(NIL_RETURNED)
        case [None, error] if isinstance(raw, (list, tuple)):
            return Failure(error)
        case _:
            return Success(raw)
