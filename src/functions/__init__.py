# =============================================================================
# Functions Package - Function Registry & Typed Invocation
# =============================================================================
# Registers named functions by invocation style and adapts typed functions
# to the raw request/response pair they are invoked with.
#
# ARCHITECTURE:
#   src/functions/
#   ├── registry.py    # FunctionRegistry, http/cloud_event/typed, lookup
#   ├── typed.py       # Typed dispatcher (decode -> handler -> encode)
#   ├── formats.py     # InvocationFormat protocol, JsonFormat
#   ├── channel.py     # Request / Response
#   ├── naming.py      # Function name validation
#   ├── signature.py   # SignatureType
#   ├── errors.py      # Error types
#   └── config.py      # Environment settings, logging
# =============================================================================

from src.functions.channel import Request, Response
from src.functions.config import Settings, configure_logging, get_settings, load_settings
from src.functions.errors import (
    FunctionRegistryError,
    InvalidFunctionNameError,
    RequestDecodeError,
    ResponseEncodeError,
)
from src.functions.formats import InvocationFormat, JsonFormat
from src.functions.naming import is_valid_function_name
from src.functions.registry import (
    FunctionRegistry,
    RegisteredFunction,
    cloud_event,
    create_registry,
    get_registered_function,
    get_registry,
    http,
    typed,
)
from src.functions.signature import SignatureType
from src.functions.typed import TypedFunctionOptions, make_typed_handler

__all__ = [
    # Registration
    "FunctionRegistry",
    "RegisteredFunction",
    "create_registry",
    "get_registry",
    "http",
    "cloud_event",
    "typed",
    "get_registered_function",
    "SignatureType",
    "is_valid_function_name",
    # Typed invocation
    "TypedFunctionOptions",
    "make_typed_handler",
    "InvocationFormat",
    "JsonFormat",
    "Request",
    "Response",
    # Errors
    "FunctionRegistryError",
    "InvalidFunctionNameError",
    "RequestDecodeError",
    "ResponseEncodeError",
    # Configuration
    "Settings",
    "load_settings",
    "get_settings",
    "configure_logging",
]

__version__ = "1.0.0"
