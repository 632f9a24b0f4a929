"""Coercion of raw environment strings into declared primitive types."""

import math
from typing import Any

from typed_config.errors import InvalidNumberConfigurationError, UnsupportedPrimitiveError
from typed_config.types import ConfigurationValue, Primitive


def resolve_primitive(key: str, primitive: Any) -> Primitive:
    """Normalize a schema tag to a Primitive.

    Args:
        key: Configuration key the tag was declared for.
        primitive: Tag from the schema, a Primitive member or its string value.

    Returns:
        The matching Primitive member.

    Raises:
        UnsupportedPrimitiveError: If the tag is not string, number or boolean.
    """
    try:
        return Primitive(primitive)
    except (ValueError, TypeError):
        raise UnsupportedPrimitiveError(key, primitive) from None


def parse_number(key: str, raw_value: str) -> int | float:
    """Parse a decimal or floating point literal.

    Integral literals such as ``"8080"`` come back as int; anything else that
    float() accepts comes back as float. Non-finite results are rejected.

    Raises:
        InvalidNumberConfigurationError: If the value is empty, not numeric,
            or not finite.
    """
    try:
        return int(raw_value)
    except ValueError:
        pass

    try:
        number = float(raw_value)
    except ValueError:
        raise InvalidNumberConfigurationError(key, raw_value) from None

    if not math.isfinite(number):
        raise InvalidNumberConfigurationError(key, raw_value)
    return number


def coerce(key: str, raw_value: str, primitive: Primitive | str) -> ConfigurationValue:
    """Convert a raw environment string to the type declared for it.

    Rules:
    - boolean: True only for the exact string ``"true"``; every other value,
      including ``"TRUE"``, ``"1"`` and ``""``, is False.
    - number: see parse_number.
    - string: returned unchanged, the empty string included.

    Args:
        key: Configuration key, used in error messages.
        raw_value: Value as read from the environment.
        primitive: Declared primitive tag.

    Returns:
        The value as bool, int, float or str.

    Raises:
        InvalidNumberConfigurationError: If a number cannot be parsed.
        UnsupportedPrimitiveError: If the tag is not a known primitive.
    """
    resolved = resolve_primitive(key, primitive)

    if resolved is Primitive.BOOLEAN:
        return raw_value == "true"
    if resolved is Primitive.NUMBER:
        return parse_number(key, raw_value)
    return raw_value
