"""
Enum conversion utilities.

Provides standardized methods for converting between enums and strings,
with support for case-insensitive parsing.
"""

from typing import Any, Type, TypeVar

from imfconv.constants import ErrorMessages

T = TypeVar("T")


def parse_enum(value: Any, enum_class: Type[T], normalize: bool = True) -> T:
    """
    Parse value to enum.

    Unifies selector parsing for image types and color profiles.

    Args:
        value: Value to parse (string or enum)
        enum_class: Enum class to parse to
        normalize: Whether to lowercase string before parsing
            (for case-insensitive matching)

    Returns:
        Parsed enum value

    Raises:
        ValueError: If value does not name a member of enum_class

    Example:
        >>> parse_enum("PNG", ImageType)
        >>> # Returns ImageType.PNG for "png", "Png", "PNG"
    """
    # Already an enum instance
    if isinstance(value, enum_class):
        return value

    try:
        str_value = value.lower() if normalize else value
        return enum_class(str_value)
    except (ValueError, AttributeError):
        raise ValueError(
            ErrorMessages.UNKNOWN_SELECTOR.format(kind=enum_class.__name__, value=value)
        ) from None
