"""Command grammar data models."""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Dict, Optional, Tuple

from clparse.core.config import settings
from clparse.commands.binding import (
    AttributeSetter,
    Cardinality,
    FieldBinding,
    make_setter,
)
from clparse.commands.converters import Converter, Validator

_FORBIDDEN_NAME_CHARS = ("=", " ", "\t")


class OptionType(Enum):
    """Supported option kinds."""

    NORMAL = "normal"
    BOOLEAN = "boolean"
    LIST = "list"
    GROUP = "group"


@dataclass(frozen=True)
class ProcessedOption:
    """Option definition.

    Attributes:
        name: Long name, used as ``--name``
        short_name: Optional single character, used as ``-x``
        option_type: NORMAL, BOOLEAN, LIST or GROUP
        has_value: False only for zero-value boolean flags
        required: Whether the option must be present
        value_separator: Character splitting list values (LIST only)
        default_values: Raw values bound when the option is absent
        converter: Converts one raw string value
        validator: Checks one converted value, raises OptionValidatorError
        binding: Target attribute descriptor
        description: Human-readable description

    Examples:
        Flag: ProcessedOption("verbose", "v", OptionType.BOOLEAN, has_value=False)
        List: ProcessedOption("longs", option_type=OptionType.LIST, value_separator=";")
        Property: ProcessedOption("define", "D", OptionType.GROUP)
    """

    name: str
    short_name: Optional[str] = None
    option_type: OptionType = OptionType.NORMAL
    has_value: bool = True
    required: bool = False
    value_separator: Optional[str] = None
    default_values: Tuple[str, ...] = ()
    converter: Optional[Converter] = None
    validator: Optional[Validator] = None
    binding: Optional[FieldBinding] = None
    description: str = ""

    def __post_init__(self):
        """Validate option configuration."""
        if not self.name or self.name.startswith("-"):
            raise ValueError(f"Invalid option name: {self.name!r}")
        if any(c in self.name for c in _FORBIDDEN_NAME_CHARS):
            raise ValueError(f"Option name can not contain '=' or spaces: {self.name}")
        if self.short_name is not None and (
            len(self.short_name) != 1
            or self.short_name in ("-", "=")
            or self.short_name.isspace()
        ):
            raise ValueError(
                f"Short name of {self.name} must be a single character: {self.short_name!r}"
            )
        if not self.has_value and self.option_type is not OptionType.BOOLEAN:
            raise ValueError(f"Only boolean options can be given without value: {self.name}")

        separator = self.value_separator or settings.DEFAULT_VALUE_SEPARATOR
        if len(separator) != 1:
            raise ValueError(f"Value separator of {self.name} must be a single character")
        object.__setattr__(self, "value_separator", separator)
        object.__setattr__(self, "default_values", tuple(self.default_values))

    @property
    def is_property(self) -> bool:
        return self.option_type is OptionType.GROUP

    @property
    def has_multiple_values(self) -> bool:
        return self.option_type is OptionType.LIST

    @property
    def display_name(self) -> str:
        """Name used in error messages, e.g. ``-c, --currency``."""
        if self.short_name:
            return f"-{self.short_name}, --{self.name}"
        return f"--{self.name}"

    @property
    def cardinality(self) -> Cardinality:
        if self.binding is not None and self.binding.cardinality is not None:
            return self.binding.cardinality
        match self.option_type:
            case OptionType.LIST:
                return Cardinality.MULTI
            case OptionType.GROUP:
                return Cardinality.MAP
            case _:
                return Cardinality.SINGLE


@dataclass(frozen=True)
class ProcessedArgument:
    """Positional argument definition, collecting every non-option token.

    Attributes:
        description: Human-readable description
        converter: Converts one raw string value
        validator: Checks one converted value
        binding: Target attribute descriptor
    """

    description: str = ""
    converter: Optional[Converter] = None
    validator: Optional[Validator] = None
    binding: Optional[FieldBinding] = None

    def __post_init__(self):
        """Validate argument configuration."""
        if self.binding is not None and self.binding.cardinality is Cardinality.MAP:
            raise ValueError("Positional arguments can not be bound to a map")

    @property
    def display_name(self) -> str:
        return "<argument>"

    @property
    def cardinality(self) -> Cardinality:
        if self.binding is not None and self.binding.cardinality is not None:
            return self.binding.cardinality
        return Cardinality.MULTI


@dataclass(frozen=True)
class ProcessedCommand:
    """Command grammar: name, options and optional positional argument.

    The grammar is immutable; parse state lives in ``ParseScratch`` so one
    grammar can serve any number of sequential parses.

    Attributes:
        name: Command name, must be the first word of a parsed line
        usage: Human-readable usage/description
        options: Ordered option definitions
        argument: Positional argument definition, if the command takes one
        setters: Option name -> setter closures for bound options
        argument_setter: Setter closures for the bound positional argument

    Example:
        command = ProcessedCommand(
            name="test",
            usage="a simple test",
            options=[
                ProcessedOption("bar", option_type=OptionType.BOOLEAN, has_value=False),
                ProcessedOption("define", "D", OptionType.GROUP),
            ],
            argument=ProcessedArgument(),
        )
    """

    name: str
    usage: str = ""
    options: Tuple[ProcessedOption, ...] = ()
    argument: Optional[ProcessedArgument] = None
    setters: Dict[str, AttributeSetter] = field(
        init=False, repr=False, compare=False, default_factory=dict
    )
    argument_setter: Optional[AttributeSetter] = field(
        init=False, repr=False, compare=False, default=None
    )
    _long_names: Dict[str, ProcessedOption] = field(
        init=False, repr=False, compare=False, default_factory=dict
    )
    _short_names: Dict[str, ProcessedOption] = field(
        init=False, repr=False, compare=False, default_factory=dict
    )

    def __post_init__(self):
        """Validate the grammar and register attribute setters."""
        if not self.name or any(c.isspace() for c in self.name):
            raise ValueError(f"Invalid command name: {self.name!r}")
        object.__setattr__(self, "options", tuple(self.options))

        for option in self.options:
            if option.name in self._long_names:
                raise ValueError(f"Duplicate option name in {self.name}: {option.name}")
            self._long_names[option.name] = option
            if option.short_name is not None:
                if option.short_name in self._short_names:
                    raise ValueError(
                        f"Duplicate short name in {self.name}: {option.short_name}"
                    )
                self._short_names[option.short_name] = option
            if option.binding is not None:
                binding = option.binding
                if option.option_type is OptionType.BOOLEAN and binding.value_type is None:
                    binding = replace(binding, value_type=bool)
                self.setters[option.name] = make_setter(binding, option.cardinality)

        if self.argument is not None and self.argument.binding is not None:
            object.__setattr__(
                self,
                "argument_setter",
                make_setter(self.argument.binding, self.argument.cardinality),
            )

    def has_argument(self) -> bool:
        return self.argument is not None

    def get_option(self, name: str) -> Optional[ProcessedOption]:
        """Get an option by long name or short name."""
        return self._long_names.get(name) or self._short_names.get(name)

    def find_option(self, short_name: str) -> Optional[ProcessedOption]:
        return self._short_names.get(short_name)

    def find_long_option(self, name: str) -> Optional[ProcessedOption]:
        return self._long_names.get(name)

    def starts_with_option(self, fragment: str) -> Optional[ProcessedOption]:
        """Get the option whose short name starts ``fragment``."""
        if not fragment:
            return None
        return self._short_names.get(fragment[0])

    def starts_with_long_option(self, fragment: str) -> Optional[ProcessedOption]:
        """Get the option with the longest name that prefixes ``fragment``."""
        best = None
        for name, option in self._long_names.items():
            if fragment.startswith(name) and (best is None or len(name) > len(best.name)):
                best = option
        return best

    def get_required_options(self) -> list[ProcessedOption]:
        return [option for option in self.options if option.required]
