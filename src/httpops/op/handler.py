r"""Response handler capturing the outcome of an operation."""

from __future__ import annotations

__all__ = ["OperationResponseHandler"]

from typing import TYPE_CHECKING, Generic, TypeVar

from httpops.engine.base import HttpResponseHandler
from httpops.exceptions import HttpClientError

if TYPE_CHECKING:
    from collections.abc import Callable

    from httpops.engine.base import HttpResponse

R = TypeVar("R")


class OperationResponseHandler(HttpResponseHandler, Generic[R]):
    r"""One-shot response handler bridging a synchronous response
    interpretation function and the engine completion.

    The engine calls ``handle`` once with the received response. The
    result of the interpretation function, or the ``HttpClientError`` it
    raised, is kept until the operation retrieves it with ``get_result``
    after the engine completes.

    Args:
        handle_response: Function turning the response into the operation
            result.

    Example:
        ```pycon
        >>> from unittest.mock import Mock
        >>> from httpops.op import OperationResponseHandler
        >>> handler = OperationResponseHandler(lambda response: response.status_code)
        >>> handler.handle(Mock(status_code=204))
        >>> handler.get_result()
        204

        ```
    """

    def __init__(self, handle_response: Callable[[HttpResponse], R]) -> None:
        self._handle_response = handle_response
        self._result: R | None = None
        self._error: HttpClientError | None = None
        self._handled = False

    @property
    def handled(self) -> bool:
        """Whether the engine has called ``handle``."""
        return self._handled

    def handle(self, response: HttpResponse) -> None:
        try:
            self._result = self._handle_response(response)
        except HttpClientError as exc:
            self._error = exc
        finally:
            self._handled = True

    def get_result(self) -> R:
        """Return the captured result.

        Returns:
            The result of the response interpretation.

        Raises:
            HttpClientError: The exact error captured while handling the
                response.
        """
        if self._error is not None:
            raise self._error
        return self._result
