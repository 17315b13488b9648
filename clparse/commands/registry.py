"""Command registry for grammar registration and lookup."""

from typing import Any, Callable, Dict, List, Optional, Sequence, Union

from clparse.core.logging import get_module_logger
from clparse.commands.errors import CommandNotFoundError
from clparse.commands.models import ProcessedArgument, ProcessedCommand, ProcessedOption
from clparse.commands.parser import CommandLineParser
from clparse.commands.result import CommandLine
from clparse.commands.splitter import split_line

logger = get_module_logger()


class CommandRegistry:
    """Registry of command grammars and the classes they populate.

    Attributes:
        namespace: Registry namespace (e.g., "shell", "admin")
        _parsers: Dict of command name -> parser
        _targets: Dict of target class -> command name

    Example:
        registry = CommandRegistry("shell")

        @registry.command(
            name="test",
            usage="a simple test",
            options=[
                ProcessedOption(
                    "bar",
                    option_type=OptionType.BOOLEAN,
                    has_value=False,
                    binding=FieldBinding("bar", value_type=bool),
                ),
            ],
        )
        class TestCommand:
            bar: bool = False

        target = TestCommand()
        registry.parse_and_populate(target, "test --bar")
    """

    def __init__(self, namespace: str):
        """Initialize registry.

        Args:
            namespace: Registry namespace
        """
        self.namespace = namespace
        self._parsers: Dict[str, CommandLineParser] = {}
        self._targets: Dict[type, str] = {}

    def command(
        self,
        name: str,
        usage: str = "",
        options: List[ProcessedOption] = None,
        argument: Optional[ProcessedArgument] = None,
    ) -> Callable:
        """Decorator registering a grammar for the decorated class.

        Args:
            name: Command name
            usage: Human-readable usage/description
            options: Option definitions
            argument: Positional argument definition

        Returns:
            Decorator returning the class unchanged

        Raises:
            ValueError: If the command name is already registered
        """

        def decorator(target: type) -> type:
            grammar = ProcessedCommand(
                name=name,
                usage=usage,
                options=tuple(options or ()),
                argument=argument,
            )
            self.register(grammar, target)
            return target

        return decorator

    def register(
        self, command: ProcessedCommand, target: Optional[type] = None
    ) -> CommandLineParser:
        """Register a grammar, optionally tied to the class it populates.

        Args:
            command: Command grammar
            target: Class whose instances ``parse_and_populate`` accepts

        Returns:
            Parser for the grammar

        Raises:
            ValueError: If the command name is already registered
        """
        if command.name in self._parsers:
            raise ValueError(
                f"Command '{command.name}' already registered in {self.namespace}"
            )
        parser = CommandLineParser(command)
        self._parsers[command.name] = parser
        if target is not None:
            self._targets[target] = command.name
        logger.debug("registered command", namespace=self.namespace, name=command.name)
        return parser

    def get_parser(self, name: str) -> Optional[CommandLineParser]:
        """Get parser by command name.

        Args:
            name: Command name

        Returns:
            CommandLineParser or None if not found
        """
        return self._parsers.get(name)

    def list_commands(self) -> List[ProcessedCommand]:
        """Get all registered grammars."""
        return [parser.command for parser in self._parsers.values()]

    def find_parser(
        self, line: Union[str, Sequence[str]]
    ) -> Optional[CommandLineParser]:
        """Find the parser for the command a line starts with.

        Args:
            line: Raw command line, or its words

        Returns:
            CommandLineParser or None if the first word names no command
        """
        words = split_line(line).words if isinstance(line, str) else list(line)
        if not words:
            return None
        return self._parsers.get(words[0])

    def parse(self, line: str, ignore_missing: bool = False) -> CommandLine:
        """Parse a line with the grammar named by its first word.

        Args:
            line: Raw command line
            ignore_missing: See ``CommandLineParser.parse``

        Returns:
            CommandLine; an unknown command is reported as CommandNotFoundError
        """
        parser = self.find_parser(line)
        if parser is None:
            split = split_line(line)
            message = split.error_message or f"Command not found in {self.namespace}: {line}"
            return CommandLine(parser_error=CommandNotFoundError(message))
        return parser.parse(line, ignore_missing)

    def parse_and_populate(
        self,
        instance: Any,
        line: Union[str, Sequence[str]],
        validate: bool = True,
    ) -> CommandLine:
        """Parse a line with the grammar registered for ``type(instance)``
        and bind the result onto ``instance``.

        Raises:
            ValueError: If no grammar is registered for the instance class
            CommandLineParserError: If parsing recorded an error
            OptionValidatorError: If a validator rejects a value
        """
        name = self._targets.get(type(instance))
        if name is None:
            raise ValueError(
                f"No command registered in {self.namespace} for {type(instance).__name__}"
            )
        return self._parsers[name].populate_object(instance, line, validate)
