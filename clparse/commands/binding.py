"""Attribute bindings: typed setter closures built once per grammar."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Iterable, Optional


class Cardinality(Enum):
    """How many values a bound attribute receives."""

    SINGLE = "single"
    MULTI = "multi"
    MAP = "map"


@dataclass(frozen=True)
class FieldBinding:
    """Binding descriptor for one option or positional argument.

    Attributes:
        attribute: Name of the target attribute
        value_type: Type of the attribute, or of its elements/map values for
            multi-valued bindings. Drives the default converter and the reset value.
        cardinality: SINGLE, MULTI or MAP. Derived from the option type when None.
        container: Callable building the collection assigned for MULTI/MAP
            bindings (e.g. ``set``, ``tuple``). Defaults to ``list``/``dict``.

    Example:
        FieldBinding("longs", value_type=int)
        FieldBinding("basic_set", container=set)
    """

    attribute: str
    value_type: Optional[type] = None
    cardinality: Optional[Cardinality] = None
    container: Optional[Callable[[Iterable[Any]], Any]] = None

    def __post_init__(self):
        """Validate binding configuration."""
        if not self.attribute or not self.attribute.isidentifier():
            raise ValueError(f"Invalid attribute name: {self.attribute!r}")


@dataclass(frozen=True)
class AttributeSetter:
    """Setter closures registered for a single bound attribute."""

    attribute: str
    cardinality: Cardinality
    value_type: Optional[type]
    assign: Callable[[Any, Any], None]
    reset: Callable[[Any], None]


def zero_value(value_type: Optional[type], cardinality: Cardinality) -> Any:
    """Value an attribute is reset to when nothing was supplied for it."""
    if cardinality is Cardinality.SINGLE:
        # bool first, it is a subclass of int
        if value_type is bool:
            return False
        if value_type is int:
            return 0
        if value_type is float:
            return 0.0
    return None


def make_setter(binding: FieldBinding, cardinality: Cardinality) -> AttributeSetter:
    """Build the setter closures for a binding.

    Args:
        binding: Binding descriptor
        cardinality: Effective cardinality (the binding's own, or the one
            derived from the option type)

    Returns:
        AttributeSetter whose ``assign`` wraps collections in the binding's
        container and whose ``reset`` writes the zero value
    """
    attribute = binding.attribute
    if binding.container is not None:
        container = binding.container
    elif cardinality is Cardinality.MAP:
        container = dict
    else:
        container = list
    zero = zero_value(binding.value_type, cardinality)

    def assign(instance: Any, value: Any) -> None:
        if cardinality is not Cardinality.SINGLE:
            value = container(value)
        setattr(instance, attribute, value)

    def reset(instance: Any) -> None:
        setattr(instance, attribute, zero)

    return AttributeSetter(
        attribute=attribute,
        cardinality=cardinality,
        value_type=binding.value_type,
        assign=assign,
        reset=reset,
    )
