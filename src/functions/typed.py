# =============================================================================
# Typed Functions
# =============================================================================
# Adapts a typed function `(input) -> result` into a handler that works on
# the raw (request, response) pair:
#
#   format.decode(request) -> user function -> format.encode(response, result)
#
# Each step may return an awaitable; steps run strictly in that order.
# A decode failure ends the response with 400. Errors raised by the user
# function or by encode propagate to the invoking runtime.
# =============================================================================

import inspect
import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Mapping, Optional, Union

from src.functions.channel import Request, Response
from src.functions.formats import InvocationFormat, JsonFormat

logger = logging.getLogger(__name__)

TypedFunction = Callable[[Any], Union[Any, Awaitable[Any]]]
RawHandler = Callable[[Request, Response], Awaitable[None]]

BAD_REQUEST_BODY = "400 Bad Request"


@dataclass
class TypedFunctionOptions:
    """
    Options for registering a typed function.

    Attributes:
        handler: Function invoked with the decoded request
        format: Decodes the request and encodes the result (JsonFormat if unset)
    """
    handler: TypedFunction
    format: Optional[InvocationFormat] = None


def resolve_typed_options(handler_or_options: Any) -> TypedFunctionOptions:
    """Accept a bare handler, a TypedFunctionOptions, or a mapping with a 'handler' key."""
    if isinstance(handler_or_options, TypedFunctionOptions):
        options = handler_or_options
    elif isinstance(handler_or_options, Mapping):
        if "handler" not in handler_or_options:
            raise TypeError("typed function options require a 'handler'")
        options = TypedFunctionOptions(
            handler=handler_or_options["handler"],
            format=handler_or_options.get("format"),
        )
    elif callable(handler_or_options):
        options = TypedFunctionOptions(handler=handler_or_options)
    else:
        raise TypeError(
            f"expected a callable or typed function options, got {type(handler_or_options).__name__}"
        )

    if not callable(options.handler):
        raise TypeError("typed function handler must be callable")
    return options


async def _settle(value: Any) -> Any:
    if inspect.isawaitable(value):
        return await value
    return value


def make_typed_handler(options: TypedFunctionOptions) -> RawHandler:
    """Build the (request, response) handler stored for a typed function."""
    user_function = options.handler
    fmt = options.format or JsonFormat()

    async def handle(request: Request, response: Response) -> None:
        try:
            parsed = await _settle(fmt.decode(request))
        except Exception as e:
            logger.warning(f"Rejecting typed invocation of {_describe(user_function)}: {e}")
            response.status(400)
            response.set_header("content-type", "text/plain")
            response.end(BAD_REQUEST_BODY)
            return

        result = await _settle(user_function(parsed))

        await _settle(fmt.encode(response, result))

    handle.__name__ = getattr(user_function, "__name__", "typed_handler")
    handle.__doc__ = getattr(user_function, "__doc__", None)
    handle.__wrapped__ = user_function
    return handle


def _describe(func: Callable) -> str:
    return getattr(func, "__qualname__", None) or repr(func)
