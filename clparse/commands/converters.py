"""Value converters and validators used when binding parsed values."""

from typing import Any, Callable, Iterable, Optional

from clparse.core.config import settings
from clparse.commands.errors import OptionConverterError, OptionValidatorError

Converter = Callable[[str], Any]
Validator = Callable[[Any], None]


def convert_boolean(value: str) -> bool:
    """Convert a boolean spelling to bool.

    Raises:
        ValueError: If the spelling is not listed in TRUE_VALUES/FALSE_VALUES
    """
    lowered = value.lower()
    if lowered in settings.TRUE_VALUES:
        return True
    if lowered in settings.FALSE_VALUES:
        return False
    raise ValueError(f"Invalid boolean: {value}. Use true/false.")


def _identity(value: str) -> str:
    return value


def default_converter(value_type: Optional[type]) -> Converter:
    """Get the converter used when an option declares none.

    Args:
        value_type: Type of the bound attribute (or of its elements)

    Returns:
        Callable turning a raw string into ``value_type``
    """
    if value_type is None or value_type is str:
        return _identity
    if value_type is bool:
        return convert_boolean
    # int, float, Decimal, Path and friends all accept a single string
    return value_type


def convert_value(
    raw: str,
    converter: Optional[Converter],
    value_type: Optional[type],
    name: str,
) -> Any:
    """Convert one raw value.

    Args:
        raw: Raw string value from the command line
        converter: Converter declared by the option, if any
        value_type: Bound attribute type used to pick a default converter
        name: Option display name (for error messages)

    Returns:
        Converted value

    Raises:
        OptionConverterError: If conversion fails
    """
    convert = converter or default_converter(value_type)
    try:
        return convert(raw)
    except OptionConverterError:
        raise
    except Exception as e:
        type_name = getattr(value_type, "__name__", "value")
        raise OptionConverterError(
            f"Cannot convert {name}={raw} to {type_name}: {str(e)}"
        ) from e


def range_validator(
    minimum: Optional[float] = None, maximum: Optional[float] = None
) -> Validator:
    """Build a validator rejecting numbers outside ``[minimum, maximum]``.

    Example:
        ProcessedOption(name="level", validator=range_validator(0, 100))
    """

    def _validate(value: Any) -> None:
        if minimum is not None and value < minimum:
            raise OptionValidatorError(f"value must be at least {minimum}, got {value}")
        if maximum is not None and value > maximum:
            raise OptionValidatorError(f"value must be at most {maximum}, got {value}")

    return _validate


def choices_validator(choices: Iterable[Any]) -> Validator:
    """Build a validator accepting only the given values."""
    allowed = list(choices)

    def _validate(value: Any) -> None:
        if value not in allowed:
            choices_str = ", ".join(str(c) for c in allowed)
            raise OptionValidatorError(
                f"Invalid value: {value}. Choose from: {choices_str}"
            )

    return _validate
