# =============================================================================
# Errors
# =============================================================================
# Errors raised by registration and the typed invocation pipeline.
# User handler errors are never wrapped in any of these.
# =============================================================================


class FunctionRegistryError(Exception):
    """Base class for registry errors."""


class InvalidFunctionNameError(FunctionRegistryError, ValueError):
    """Raised when registering a function under an invalid name."""

    def __init__(self, function_name):
        self.function_name = function_name
        super().__init__(f"Invalid function name: {function_name}")


class RequestDecodeError(FunctionRegistryError):
    """The request could not be interpreted by an invocation format."""


class ResponseEncodeError(FunctionRegistryError):
    """The result could not be written to the response."""
