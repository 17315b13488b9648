"""Bind parsed values onto target attributes."""

from typing import Any, Dict, Mapping, Sequence, Union

from clparse.core.logging import get_module_logger
from clparse.commands.binding import AttributeSetter, Cardinality
from clparse.commands.converters import convert_value
from clparse.commands.errors import OptionConverterError, OptionValidatorError
from clparse.commands.models import ProcessedArgument, ProcessedCommand, ProcessedOption
from clparse.commands.result import CommandLine

logger = get_module_logger()

Definition = Union[ProcessedOption, ProcessedArgument]


class Binder:
    """Convert, validate and assign parsed values.

    For every bound option of the command:
    - present on the command line: convert, validate, assign
    - absent but with default values: the defaults go through the same path
    - otherwise: the attribute is reset (False, 0, 0.0 or None)

    The positional argument is bound the same way, without defaults.

    A validator rejection stops binding at once; attributes bound before it
    keep their new values.

    Example:
        binder = Binder(command)
        binder.populate(target, parser.parse("test --bar"))
    """

    def __init__(self, command: ProcessedCommand):
        self.command = command

    def populate(
        self, instance: Any, command_line: CommandLine, validate: bool = True
    ) -> None:
        """Bind a parse result onto ``instance``.

        Args:
            instance: Target object
            command_line: Parse result (expected to carry no parser error)
            validate: Run option validators

        Raises:
            OptionValidatorError: If a validator rejects a value
            OptionConverterError: If a raw value can not be converted
        """
        for option in self.command.options:
            setter = self.command.setters.get(option.name)
            if setter is None:
                continue

            parsed = command_line.options.get(option.name)
            if parsed is not None:
                self._bind(instance, option, setter, parsed.values, parsed.properties, validate)
            elif option.default_values:
                self._bind(
                    instance,
                    option,
                    setter,
                    option.default_values,
                    self._default_properties(option),
                    validate,
                )
            else:
                setter.reset(instance)
                logger.debug("attribute_reset", attribute=setter.attribute)

        argument = self.command.argument
        setter = self.command.argument_setter
        if argument is None or setter is None:
            return
        parsed_argument = command_line.argument
        if parsed_argument is not None and parsed_argument.values:
            self._bind(instance, argument, setter, parsed_argument.values, {}, validate)
        else:
            setter.reset(instance)
            logger.debug("attribute_reset", attribute=setter.attribute)

    def _bind(
        self,
        instance: Any,
        definition: Definition,
        setter: AttributeSetter,
        values: Sequence[str],
        properties: Mapping[str, str],
        validate: bool,
    ) -> None:
        name = definition.display_name
        match setter.cardinality:
            case Cardinality.MAP:
                value: Any = {
                    key: self._convert(definition, setter, raw, validate)
                    for key, raw in properties.items()
                }
            case Cardinality.MULTI:
                value = [self._convert(definition, setter, raw, validate) for raw in values]
            case _:
                if not values:
                    # relaxed parses may commit an option that never got its value
                    setter.reset(instance)
                    return
                value = self._convert(definition, setter, values[0], validate)

        setter.assign(instance, value)
        logger.debug("option_bound", option=name, attribute=setter.attribute)

    def _convert(
        self,
        definition: Definition,
        setter: AttributeSetter,
        raw: str,
        validate: bool,
    ) -> Any:
        value = convert_value(
            raw, definition.converter, setter.value_type, definition.display_name
        )
        if validate and definition.validator is not None:
            self._validate(definition, value)
        return value

    def _validate(self, definition: Definition, value: Any) -> None:
        try:
            definition.validator(value)
        except (OptionValidatorError, ValueError) as e:
            logger.warning(
                "option_validation_failed",
                option=definition.display_name,
                error=str(e),
            )
            if isinstance(e, OptionValidatorError):
                raise
            raise OptionValidatorError(
                f"Invalid value for {definition.display_name}: {str(e)}"
            ) from e

    def _default_properties(self, option: ProcessedOption) -> Dict[str, str]:
        if not option.is_property:
            return {}
        return dict(_split_property(option, item) for item in option.default_values)


def _split_property(option: ProcessedOption, item: str) -> tuple[str, str]:
    key, sep, value = item.partition("=")
    if not sep or not key:
        raise OptionConverterError(
            f"Default value of {option.display_name} must be <key>=<value>: {item}"
        )
    return key, value
