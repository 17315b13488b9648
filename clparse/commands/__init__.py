"""Command line grammar, parser and binder.

This package provides:
- ProcessedCommand / ProcessedOption / ProcessedArgument: command grammar
- CommandLineParser: scan a command line into a CommandLine result
- Binder: convert, validate and assign parsed values onto attributes
- CommandRegistry: register grammars for the classes they populate

Example:
    from clparse.commands import (
        CommandLineParser, FieldBinding, OptionType, ProcessedCommand, ProcessedOption
    )

    command = ProcessedCommand(
        name="test",
        options=[
            ProcessedOption(
                "longs",
                option_type=OptionType.LIST,
                value_separator=";",
                binding=FieldBinding("longs", value_type=int),
            ),
        ],
    )

    class Target:
        longs = None

    target = Target()
    CommandLineParser(command).populate_object(target, "test --longs 5;10;20")
    # target.longs == [5, 10, 20]
"""

from clparse.commands.binder import Binder
from clparse.commands.binding import Cardinality, FieldBinding
from clparse.commands.converters import (
    choices_validator,
    convert_boolean,
    range_validator,
)
from clparse.commands.errors import (
    ArgumentParserError,
    CommandLineError,
    CommandLineParserError,
    CommandNotFoundError,
    OptionConverterError,
    OptionMissingValueError,
    OptionParserError,
    OptionValidatorError,
    PropertyMalformedError,
    RequiredOptionError,
    UnknownOptionError,
)
from clparse.commands.models import (
    OptionType,
    ProcessedArgument,
    ProcessedCommand,
    ProcessedOption,
)
from clparse.commands.parser import CommandLineParser
from clparse.commands.registry import CommandRegistry
from clparse.commands.result import CommandLine, ParsedArgument, ParsedOption
from clparse.commands.splitter import SplitLine, SplitStatus, split_line

__all__ = [
    # Models
    "OptionType",
    "ProcessedOption",
    "ProcessedArgument",
    "ProcessedCommand",
    "FieldBinding",
    "Cardinality",
    # Core
    "CommandLineParser",
    "CommandLine",
    "ParsedOption",
    "ParsedArgument",
    "Binder",
    "CommandRegistry",
    "split_line",
    "SplitLine",
    "SplitStatus",
    # Conversion
    "convert_boolean",
    "range_validator",
    "choices_validator",
    # Errors
    "CommandLineError",
    "CommandLineParserError",
    "CommandNotFoundError",
    "OptionParserError",
    "OptionMissingValueError",
    "UnknownOptionError",
    "PropertyMalformedError",
    "ArgumentParserError",
    "RequiredOptionError",
    "OptionValidatorError",
    "OptionConverterError",
]
