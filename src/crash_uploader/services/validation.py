"""
Form field name validation.

Field names are written unescaped inside a quoted Content-Disposition
parameter, so they are restricted to printable ASCII without double quotes.
"""

import logging
from typing import Mapping


logger = logging.getLogger(__name__)

MIN_FIELD_NAME_CODEPOINT = 32
MAX_FIELD_NAME_CODEPOINT = 127


def is_valid_field_name(name: str) -> bool:
    """
    Check a single form field name.

    Args:
        name: Field name to check

    Returns:
        False if the name is empty or contains a character outside
        codepoints 32..127 or a double quote, True otherwise
    """
    if not name:
        return False

    for char in name:
        codepoint = ord(char)
        if codepoint < MIN_FIELD_NAME_CODEPOINT or codepoint > MAX_FIELD_NAME_CODEPOINT:
            return False
        if char == '"':
            return False

    return True


def check_parameters(parameters: Mapping[str, str]) -> bool:
    """
    Validate every field name of a parameter mapping.

    Values are not checked. Stops at the first invalid name.

    Args:
        parameters: Mapping of form field name to value

    Returns:
        True if all field names are acceptable
    """
    for name in parameters:
        if not is_valid_field_name(name):
            logger.debug(f"Rejected form field name: {name!r}")
            return False
    return True
