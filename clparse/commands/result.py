"""Parse result models."""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from clparse.commands.errors import CommandLineParserError
from clparse.commands.models import ProcessedArgument, ProcessedOption


@dataclass
class ParsedOption:
    """An option found on the command line, with the values it was given.

    Attributes:
        option: The option definition that matched
        values: Raw values, in command line order
        properties: Raw key/value pairs (property options only)
        long_name_used: Whether the option was given as ``--name``
    """

    option: ProcessedOption
    values: List[str] = field(default_factory=list)
    properties: Dict[str, str] = field(default_factory=dict)
    long_name_used: bool = True

    @property
    def name(self) -> str:
        return self.option.name

    @property
    def short_name(self) -> Optional[str]:
        return self.option.short_name

    @property
    def value(self) -> Optional[str]:
        """First raw value, or None."""
        return self.values[0] if self.values else None


@dataclass
class ParsedArgument:
    """Positional values found on the command line."""

    argument: ProcessedArgument
    values: List[str] = field(default_factory=list)


@dataclass
class CommandLine:
    """Result of parsing a command line.

    Holds the matched options, the positional values and at most one parser
    error. Recording an error replaces the one recorded before it.

    Example:
        result = parser.parse("test --bar -Dkey=value")
        if result.has_parser_error():
            raise result.parser_error
        result.get_option("bar").value  # "true"
        result.get_option("D").properties  # {"key": "value"}
    """

    options: Dict[str, ParsedOption] = field(default_factory=dict)
    argument: Optional[ParsedArgument] = None
    parser_error: Optional[CommandLineParserError] = None

    def add_option(self, parsed: ParsedOption) -> None:
        self.options[parsed.name] = parsed

    def set_parser_error(self, error: CommandLineParserError) -> None:
        self.parser_error = error

    def has_parser_error(self) -> bool:
        return self.parser_error is not None

    def get_option(self, name: str) -> Optional[ParsedOption]:
        """Get a matched option by long name or short name.

        Args:
            name: Long name (``currency``) or short name (``c``)

        Returns:
            ParsedOption or None if the option was not on the command line
        """
        parsed = self.options.get(name)
        if parsed is not None:
            return parsed
        for parsed in self.options.values():
            if parsed.short_name == name:
                return parsed
        return None

    def has_option(self, name: str) -> bool:
        return self.get_option(name) is not None
