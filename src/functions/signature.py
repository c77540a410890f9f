# =============================================================================
# Signature Types
# =============================================================================
# The invocation convention a registered function follows.
# =============================================================================

from enum import Enum


class SignatureType(str, Enum):
    """Invocation conventions supported by the registry."""
    HTTP = "http"              # (request, response)
    CLOUDEVENT = "cloudevent"  # (cloud_event)
    TYPED = "typed"            # (decoded_input) -> result
