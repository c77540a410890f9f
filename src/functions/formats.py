# =============================================================================
# Invocation Formats
# =============================================================================
# An invocation format turns a raw request into the input of a typed
# function, and writes the function's result onto the raw response.
# Both operations may return an awaitable.
#
# Any object with matching decode/encode methods can be used as a format;
# JsonFormat is the default.
# =============================================================================

import json
import logging
from collections.abc import Mapping
from typing import Any, Awaitable, Optional, Protocol, Union

from src.functions.channel import Request, Response
from src.functions.config import Settings, get_settings
from src.functions.errors import RequestDecodeError, ResponseEncodeError

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json"


class InvocationFormat(Protocol):
    """Decodes requests for, and encodes results of, typed functions."""

    def decode(self, request: Request) -> Union[Any, Awaitable[Any]]:
        """Interpret the request. Raise if it has the wrong shape."""
        ...

    def encode(self, response: Response, result: Any) -> Optional[Awaitable[None]]:
        """Write result to the response, set its content type and end it."""
        ...


class JsonFormat:
    """
    Default invocation format.

    Expects the HTTP layer to have parsed a JSON body already, and writes
    results back as application/json. No schema validation is done on the
    decoded value.
    """

    def __init__(self, settings: Settings = None):
        self._settings = settings

    @property
    def settings(self) -> Settings:
        return self._settings or get_settings()

    def decode(self, request: Request) -> Any:
        body = request.body
        if not isinstance(body, (Mapping, list)):
            raise RequestDecodeError(
                "request is not valid JSON or Content-Type header is set incorrectly"
            )
        return body

    def encode(self, response: Response, result: Any) -> None:
        try:
            payload = json.dumps(
                result,
                ensure_ascii=self.settings.json_ensure_ascii,
                allow_nan=False,
            )
        except (TypeError, ValueError) as e:
            raise ResponseEncodeError(f"cannot serialize result as JSON: {e}") from e
        response.set_header("content-type", JSON_CONTENT_TYPE)
        response.end(payload)
