# =============================================================================
# Function Registry
# =============================================================================
# Maps function names to (signature type, handler). Populated while user
# modules are imported, read by the invoking runtime afterwards.
#
# USAGE:
#     from src.functions import http, typed, get_registered_function
#
#     @http("hello")
#     def hello(request, response):
#         response.end("hi")
#
#     typed("add-one", lambda value: {"y": value["x"] + 1})
#
#     entry = get_registered_function("hello")
#     entry.signature_type   # SignatureType.HTTP
# =============================================================================

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from src.functions.errors import InvalidFunctionNameError
from src.functions.formats import InvocationFormat
from src.functions.naming import is_valid_function_name
from src.functions.signature import SignatureType
from src.functions.typed import TypedFunctionOptions, make_typed_handler, resolve_typed_options

logger = logging.getLogger(__name__)

HandlerFunc = Callable[..., Any]


@dataclass(frozen=True)
class RegisteredFunction:
    """A registered handler and the convention it is invoked with."""
    signature_type: SignatureType
    user_function: HandlerFunc


class FunctionRegistry:
    """
    Registration container.

    Create one per process before any invocation traffic. Registration is
    expected to finish before lookups start, so no locking is done.
    Registering a name twice replaces the earlier entry.
    """

    def __init__(self):
        self._functions: Dict[str, RegisteredFunction] = {}

    def __len__(self) -> int:
        return len(self._functions)

    def __contains__(self, function_name: str) -> bool:
        return function_name in self._functions

    # ==========================================================================
    # Registration
    # ==========================================================================

    def register(self, function_name: str, signature_type: SignatureType, user_function: HandlerFunc) -> None:
        """Store user_function under function_name. Raises InvalidFunctionNameError."""
        if not is_valid_function_name(function_name):
            raise InvalidFunctionNameError(function_name)

        signature_type = SignatureType(signature_type)
        if function_name in self._functions:
            logger.info(f"Replacing registered function: {function_name}")
        self._functions[function_name] = RegisteredFunction(
            signature_type=signature_type,
            user_function=user_function,
        )
        logger.debug(f"Registered function {function_name} signature={signature_type.value}")

    def http(self, function_name: str, handler: HandlerFunc = None):
        """
        Register a function that responds to HTTP requests.

        Called without a handler, returns a decorator.
        """
        if handler is None:
            return self._decorator(self.http, function_name)
        self.register(function_name, SignatureType.HTTP, handler)

    def cloud_event(self, function_name: str, handler: HandlerFunc = None):
        """
        Register a function that handles CloudEvents.

        Called without a handler, returns a decorator.
        """
        if handler is None:
            return self._decorator(self.cloud_event, function_name)
        self.register(function_name, SignatureType.CLOUDEVENT, handler)

    def typed(self, function_name: str, handler_or_options: Any = None, format: InvocationFormat = None):
        """
        Register a typed function.

        Args:
            function_name: Name of the function
            handler_or_options: The typed function, a TypedFunctionOptions,
                or a dict with 'handler' and optional 'format'. When omitted,
                returns a decorator.
            format: Format for a bare handler or for the decorator form
                (JsonFormat if unset)
        """
        if handler_or_options is None:
            return self._decorator(
                lambda name, func: self.typed(name, func, format=format), function_name
            )
        # Validate before building the adapter so a bad name never gets further.
        if not is_valid_function_name(function_name):
            raise InvalidFunctionNameError(function_name)
        options = resolve_typed_options(handler_or_options)
        if format is not None:
            if options.format is not None:
                raise TypeError("format given both in options and as a keyword")
            options = TypedFunctionOptions(handler=options.handler, format=format)
        self.register(function_name, SignatureType.TYPED, make_typed_handler(options))

    @staticmethod
    def _decorator(register_fn, function_name: str):
        if not is_valid_function_name(function_name):
            raise InvalidFunctionNameError(function_name)

        def decorator(func):
            register_fn(function_name, func)
            return func
        return decorator

    # ==========================================================================
    # Lookup
    # ==========================================================================

    def get_registered_function(self, function_name: str) -> Optional[RegisteredFunction]:
        """Get a registered function, or None if nothing is registered under that name."""
        return self._functions.get(function_name)

    def function_exists(self, function_name: str) -> bool:
        return function_name in self._functions

    def list_functions(self) -> Dict[str, str]:
        """List registered function names with their signature types."""
        return {name: entry.signature_type.value for name, entry in self._functions.items()}


def create_registry() -> FunctionRegistry:
    """Create a new, empty FunctionRegistry."""
    return FunctionRegistry()


# Process-wide registry used by the module-level functions below
_global_registry: Optional[FunctionRegistry] = None


def get_registry() -> FunctionRegistry:
    """Get or create the process-wide FunctionRegistry."""
    global _global_registry
    if _global_registry is None:
        _global_registry = create_registry()
    return _global_registry


def http(function_name: str, handler: HandlerFunc = None):
    """Register an HTTP function in the process-wide registry."""
    return get_registry().http(function_name, handler)


def cloud_event(function_name: str, handler: HandlerFunc = None):
    """Register a CloudEvent function in the process-wide registry."""
    return get_registry().cloud_event(function_name, handler)


def typed(function_name: str, handler_or_options: Any = None, format: InvocationFormat = None):
    """Register a typed function in the process-wide registry."""
    return get_registry().typed(function_name, handler_or_options, format=format)


def get_registered_function(function_name: str) -> Optional[RegisteredFunction]:
    """Look up a function in the process-wide registry."""
    return get_registry().get_registered_function(function_name)
