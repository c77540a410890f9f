# =============================================================================
# Function Name Validation
# =============================================================================
# Function names must:
# - contain only letters, numbers, dashes or underscores
# - be at most 63 characters long
# - start with a letter
# - end with a letter or number
# =============================================================================

import re
from typing import Any

FUNCTION_NAME_PATTERN = re.compile(r"[A-Za-z](?:[-_A-Za-z0-9]{0,61}[A-Za-z0-9])?")


def is_valid_function_name(function_name: Any) -> bool:
    """Return True if function_name can be used to register a function."""
    if not isinstance(function_name, str):
        return False
    return FUNCTION_NAME_PATTERN.fullmatch(function_name) is not None
