"""Command line parsing."""

from typing import Any, List, Optional, Sequence, Union

from clparse.core.logging import get_module_logger
from clparse.commands.binder import Binder
from clparse.commands.errors import (
    ArgumentParserError,
    CommandLineParserError,
    CommandNotFoundError,
    OptionMissingValueError,
    OptionParserError,
    PropertyMalformedError,
    RequiredOptionError,
    UnknownOptionError,
)
from clparse.commands.models import OptionType, ProcessedCommand, ProcessedOption
from clparse.commands.resolver import (
    EQUALS,
    Resolved,
    resolve_long_option,
    resolve_short_option,
)
from clparse.commands.result import CommandLine, ParsedArgument, ParsedOption
from clparse.commands.splitter import split_line
from clparse.commands.state import ParseScratch

logger = get_module_logger()

_MULTI_VALUED = (OptionType.LIST, OptionType.GROUP)


class CommandLineParser:
    """Parse command lines against a command grammar.

    Handles:
    - Long options: --name value, --name=value
    - Short options: -n value, -n=value
    - Grouped boolean flags: -abc
    - Properties: -Dkey=value, --definekey=value
    - List options: --longs 5;10;20
    - Positional values collected by the command argument

    Scanning never raises: problems are recorded on the returned CommandLine,
    and only the last one recorded is kept.

    Example:
        parser = CommandLineParser(command)

        result = parser.parse("test --bar -Dkey=value extra")
        # result.get_option("bar").value == "true"
        # result.get_option("D").properties == {"key": "value"}
        # result.argument.values == ["extra"]
    """

    def __init__(self, command: ProcessedCommand):
        self.command = command
        self.binder = Binder(command)

    def parse(self, line: str, ignore_missing: bool = False) -> CommandLine:
        """Split and parse a raw command line.

        Args:
            line: Raw command line, starting with the command name
            ignore_missing: Skip the required option check and keep a dangling
                option that never received its value

        Returns:
            CommandLine; malformed quoting is reported as CommandNotFoundError
        """
        split = split_line(line)
        if not split.ok:
            return self._failed(CommandNotFoundError(split.error_message), line)
        return self.parse_tokens(split.words, ignore_missing)

    def parse_tokens(
        self, tokens: Sequence[str], ignore_missing: bool = False
    ) -> CommandLine:
        """Parse an already split command line.

        Args:
            tokens: Words of the line, the first one being the command name
            ignore_missing: See ``parse``

        Returns:
            CommandLine
        """
        if tokens and tokens[0] == self.command.name:
            return self.do_parse(tokens, ignore_missing)
        raw_text = " ".join(tokens)
        return self._failed(
            CommandNotFoundError(
                f"Command: {self.command.name}, not found in: {raw_text}"
            ),
            raw_text,
        )

    def do_parse(self, tokens: Sequence[str], ignore_missing: bool = False) -> CommandLine:
        """Scan tokens, skipping the first one (the command name).

        Args:
            tokens: Words of the line
            ignore_missing: See ``parse``

        Returns:
            CommandLine with the matched options, positional values and the
            last recorded parser error
        """
        result = _Scanner(self.command, ignore_missing).run(tokens)
        if result.has_parser_error():
            logger.warning(
                "command_line_parse_error",
                command=self.command.name,
                raw_text=" ".join(tokens),
                error_type=type(result.parser_error).__name__,
                error=str(result.parser_error),
            )
        else:
            logger.debug(
                "command_line_parsed",
                command=self.command.name,
                options=list(result.options),
            )
        return result

    def populate_object(
        self,
        instance: Any,
        line: Union[str, Sequence[str]],
        validate: bool = True,
    ) -> CommandLine:
        """Parse a command line and bind the result onto ``instance``.

        Args:
            instance: Target object
            line: Raw command line, or its words
            validate: Run option validators

        Returns:
            The CommandLine that was bound

        Raises:
            CommandLineParserError: If parsing recorded an error
            OptionValidatorError: If a validator rejects a value
            OptionConverterError: If a raw value can not be converted
        """
        result = self.parse(line) if isinstance(line, str) else self.parse_tokens(line)
        if result.has_parser_error():
            raise result.parser_error
        self.binder.populate(instance, result, validate)
        return result

    def _failed(self, error: CommandLineParserError, raw_text: str) -> CommandLine:
        logger.warning(
            "command_line_parse_error",
            command=self.command.name,
            raw_text=raw_text,
            error_type=type(error).__name__,
            error=str(error),
        )
        return CommandLine(parser_error=error)

    def __repr__(self) -> str:
        return f"CommandLineParser(command={self.command.name!r})"


class _Scanner:
    """State of one scan: scratch values, result and the active option."""

    def __init__(self, command: ProcessedCommand, ignore_missing: bool):
        self.command = command
        self.ignore_missing = ignore_missing
        self.scratch = ParseScratch(command)
        self.result = CommandLine()
        self.active: Optional[ProcessedOption] = None
        self.arguments: List[str] = []

    @property
    def added_argument(self) -> bool:
        return bool(self.arguments)

    def run(self, tokens: Sequence[str]) -> CommandLine:
        # skip the command name
        for token in tokens[1:]:
            if token.startswith("--"):
                if not self._long_option(token):
                    break
            elif token.startswith("-"):
                self._short_option(token)
            elif self.active is not None:
                self._option_value(token)
            else:
                self._argument_value(token)

        self._finish()
        return self.result

    def _record(self, error: CommandLineParserError) -> None:
        logger.debug(
            "parser_error_recorded",
            command=self.command.name,
            error_type=type(error).__name__,
            error=str(error),
        )
        self.result.set_parser_error(error)

    def _commit(self, option: ProcessedOption) -> None:
        values = self.scratch.of(option)
        self.result.add_option(
            ParsedOption(
                option=option,
                values=list(values.values),
                properties=dict(values.properties),
                long_name_used=values.long_name_used,
            )
        )

    def _commit_after_arguments_check(self, option: ProcessedOption) -> None:
        self._commit(option)
        self.active = None
        if self.added_argument:
            self._record(
                ArgumentParserError(
                    "An argument was given to an option that does not support it."
                )
            )

    def _close_active(self) -> bool:
        """Commit an active list/property option before a new option token.

        Returns:
            False if the active option still waits for its single value
        """
        if self.active is None:
            return True
        if self.active.option_type in _MULTI_VALUED:
            self._commit(self.active)
            self.active = None
            return True
        self._record(
            OptionMissingValueError(
                f"Option: {self.active.display_name} must be given a value"
            )
        )
        return False

    def _long_option(self, token: str) -> bool:
        if not self._close_active():
            return False

        resolved = resolve_long_option(self.scratch, token[2:])
        if resolved is None:
            self._record(
                UnknownOptionError(
                    f"Option: {token} is not a valid option for this command"
                )
            )
            return True

        self.scratch.of(resolved.option).long_name_used = True
        self._matched(resolved, token, 2 + len(resolved.option.name))
        return True

    def _short_option(self, token: str) -> None:
        if not self._close_active():
            # the token is skipped, the option keeps waiting for its value
            return

        if len(token) != 2 and EQUALS not in token:
            if len(token) > 2:
                self._flag_group(token)
            else:
                self._record(
                    OptionParserError("Option: - must be followed by a valid operator")
                )
            return

        resolved = resolve_short_option(self.scratch, token[1:])
        if resolved is None:
            self._record(
                UnknownOptionError(
                    f"Option: {token} is not a valid option for this command"
                )
            )
            return

        self.scratch.of(resolved.option).long_name_used = False
        self._matched(resolved, token, 2)

    def _matched(self, resolved: Resolved, token: str, name_end: int) -> None:
        option = resolved.option
        match option.option_type:
            case OptionType.GROUP:
                self._property(option, token, name_end)
            case _ if resolved.attached:
                self._commit_after_arguments_check(option)
            case _ if not option.has_value:
                self.scratch.of(option).add_value("true")
                self._commit_after_arguments_check(option)
            case _:
                self.active = option

    def _property(self, option: ProcessedOption, token: str, name_end: int) -> None:
        body = token[name_end:]
        key, sep, value = body.partition(EQUALS)
        if not sep or not key:
            self._record(
                PropertyMalformedError(
                    f"Option {option.display_name}, must be part of a property"
                )
            )
        elif not value:
            self._record(
                PropertyMalformedError(
                    f"Option {option.display_name}, must have a value"
                )
            )
        else:
            self.scratch.of(option).add_property(key, value)
            self._commit_after_arguments_check(option)
            return
        self.active = None

    def _flag_group(self, token: str) -> None:
        for short_name in token[1:]:
            option = self.command.find_option(short_name)
            if option is None:
                self._record(UnknownOptionError(f"Option: -{short_name} was not found."))
            elif option.has_value:
                self._record(
                    OptionParserError(
                        f"Option: -{short_name} can not be grouped with other options "
                        "since it needs to be given a value"
                    )
                )
            else:
                values = self.scratch.of(option)
                values.long_name_used = False
                values.add_value("true")
                self._commit(option)
        self.active = None

    def _option_value(self, token: str) -> None:
        option = self.active
        values = self.scratch.of(option)
        match option.option_type:
            case OptionType.LIST:
                if option.value_separator in token:
                    for piece in _split_values(token, option.value_separator):
                        values.add_value(piece.strip())
                    self._commit(option)
                    self.active = None
                else:
                    values.add_value(token.strip())
            case _:
                values.add_value(token)
                self._commit(option)
                self.active = None

        if self.added_argument:
            self._record(
                ArgumentParserError(
                    "An argument was given to an option that does not support it."
                )
            )

    def _argument_value(self, token: str) -> None:
        if self.command.argument is None:
            self._record(
                ArgumentParserError(
                    "An argument was given to a command that does not support it."
                )
            )
        else:
            self.arguments.append(token)

    def _finish(self) -> None:
        if self.active is not None and (
            self.ignore_missing or self.active.option_type in _MULTI_VALUED
        ):
            self._commit(self.active)
        self.active = None

        if self.arguments:
            self.result.argument = ParsedArgument(self.command.argument, list(self.arguments))

        if not self.ignore_missing:
            for option in self.command.get_required_options():
                if option.name not in self.result.options:
                    self._record(
                        RequiredOptionError(
                            f"Option: {option.display_name} is required for this command."
                        )
                    )
                    break


def _split_values(token: str, separator: str) -> List[str]:
    """Split a list value, dropping trailing empty pieces."""
    pieces = token.split(separator)
    while pieces and not pieces[-1]:
        pieces.pop()
    return pieces
