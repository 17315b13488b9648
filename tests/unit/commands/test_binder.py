"""Unit tests for Binder and CommandLineParser.populate_object."""

import pytest

from clparse.commands.binder import Binder
from clparse.commands.binding import Cardinality, FieldBinding
from clparse.commands.errors import (
    OptionConverterError,
    OptionValidatorError,
    RequiredOptionError,
    UnknownOptionError,
)
from clparse.commands.models import OptionType


class Target:
    """Plain target object."""


@pytest.mark.unit
class TestPopulateObject:
    """Tests binding every option kind."""

    def test_populate_all_option_kinds(self, populator_parser, populator):
        """Every parsed option is converted and assigned."""
        populator_parser.populate_object(
            populator,
            "test --bar --longs 5;10;20 -Dkey2=2 -Dkey=1 -c eur --very-long 42 "
            "--basic-set x,y,x --strings a,b one two",
        )

        assert populator.bar is True
        assert populator.longs == [5, 10, 20]
        assert populator.define == {"key": 1, "key2": 2}
        assert list(populator.define) == ["key", "key2"]
        assert populator.currency == "EUR"
        assert populator.very_long == 42
        assert populator.basic_set == {"x", "y"}
        assert populator.strings == ["a", "b"]
        assert populator.arguments == {"one", "two"}

    def test_absent_options_are_reset(self, populator_parser, populator):
        """Missing options reset to False, 0 or None."""
        populator.bar = True
        populator.very_long = 12
        populator.longs = [1]
        populator.arguments = {"old"}

        populator_parser.populate_object(populator, "test")

        assert populator.bar is False
        assert populator.very_long == 0
        assert populator.longs is None
        assert populator.define is None
        assert populator.currency is None
        assert populator.arguments is None

    def test_populate_from_tokens(self, populator_parser, populator):
        """populate_object accepts already split words."""
        populator_parser.populate_object(populator, ["test", "--longs", "1;2"])

        assert populator.longs == [1, 2]

    def test_populate_returns_result(self, populator_parser, populator):
        """The bound CommandLine is returned."""
        result = populator_parser.populate_object(populator, "test --bar")

        assert result.get_option("bar").value == "true"

    def test_parser_error_is_raised(self, populator_parser, populator):
        """Binding never runs on a line with parse errors."""
        with pytest.raises(UnknownOptionError):
            populator_parser.populate_object(populator, "test --nope")

        assert populator.bar is None

    def test_required_error_is_raised(self, parser_factory, option_factory):
        """Required options are enforced before binding."""
        parser = parser_factory(
            options=[option_factory("name", required=True, binding=FieldBinding("name"))]
        )

        with pytest.raises(RequiredOptionError, match="--name"):
            parser.populate_object(Target(), "test")


@pytest.mark.unit
class TestPopulateValidation:
    """Tests for converters and validators during binding."""

    def test_validator_rejection(self, populator_parser, populator):
        """A rejected value aborts binding without rollback."""
        populator.very_long = 7

        with pytest.raises(OptionValidatorError, match="at most 100"):
            populator_parser.populate_object(populator, "test --longs 5;200 --bar")

        # options are bound in declaration order: very-long was reset before
        # longs failed, bar comes after and was never touched
        assert populator.very_long == 0
        assert populator.bar is None

    def test_validation_can_be_skipped(self, populator_parser, populator):
        """validate=False binds out of range values."""
        populator_parser.populate_object(
            populator, "test --very-long 500", validate=False
        )

        assert populator.very_long == 500

    def test_validator_raising_value_error(self, parser_factory, option_factory):
        """ValueError from a validator becomes OptionValidatorError."""

        def _even(value):
            if value % 2:
                raise ValueError("must be even")

        parser = parser_factory(
            options=[
                option_factory(
                    "count", validator=_even, binding=FieldBinding("count", value_type=int)
                )
            ]
        )

        with pytest.raises(OptionValidatorError, match="must be even"):
            parser.populate_object(Target(), "test --count 3")

    def test_conversion_failure(self, populator_parser, populator):
        """Values that do not convert raise OptionConverterError."""
        with pytest.raises(OptionConverterError, match="--very-long=abc"):
            populator_parser.populate_object(populator, "test --very-long abc")

    def test_custom_converter_failure(self, populator_parser, populator):
        """ValueError from a custom converter is wrapped too."""
        with pytest.raises(OptionConverterError, match="not a currency code"):
            populator_parser.populate_object(populator, "test -c euro")


@pytest.mark.unit
class TestPopulateDefaults:
    """Tests for default values."""

    def test_default_value_bound_when_absent(self, parser_factory, option_factory):
        """Default values go through conversion."""
        parser = parser_factory(
            options=[
                option_factory(
                    "level",
                    default_values=["3"],
                    binding=FieldBinding("level", value_type=int),
                )
            ]
        )
        target = Target()

        parser.populate_object(target, "test")

        assert target.level == 3

    def test_given_value_beats_default(self, parser_factory, option_factory):
        """Defaults only apply to absent options."""
        parser = parser_factory(
            options=[
                option_factory(
                    "level",
                    default_values=["3"],
                    binding=FieldBinding("level", value_type=int),
                )
            ]
        )
        target = Target()

        parser.populate_object(target, "test --level 5")

        assert target.level == 5

    def test_list_defaults(self, parser_factory, option_factory):
        """All default values are bound for list options."""
        parser = parser_factory(
            options=[
                option_factory(
                    "ports",
                    option_type=OptionType.LIST,
                    default_values=["80", "443"],
                    binding=FieldBinding("ports", value_type=int),
                )
            ]
        )
        target = Target()

        parser.populate_object(target, "test")

        assert target.ports == [80, 443]

    def test_property_defaults(self, parser_factory, option_factory):
        """Property defaults are written as key=value."""
        parser = parser_factory(
            options=[
                option_factory(
                    "define",
                    short_name="D",
                    option_type=OptionType.GROUP,
                    default_values=["a=1"],
                    binding=FieldBinding("define"),
                )
            ]
        )
        target = Target()

        parser.populate_object(target, "test")

        assert target.define == {"a": "1"}

    def test_default_validated(self, parser_factory, option_factory):
        """Defaults are validated like given values."""

        def _reject(value):
            raise OptionValidatorError("nope")

        parser = parser_factory(
            options=[
                option_factory(
                    "level",
                    default_values=["3"],
                    validator=_reject,
                    binding=FieldBinding("level"),
                )
            ]
        )

        with pytest.raises(OptionValidatorError):
            parser.populate_object(Target(), "test")


@pytest.mark.unit
class TestBinder:
    """Tests for Binder used directly."""

    def test_unbound_options_are_skipped(self, parser_factory, option_factory):
        """Options without binding are parsed but never assigned."""
        parser = parser_factory(
            options=[
                option_factory("free"),
                option_factory("kept", binding=FieldBinding("kept")),
            ]
        )
        target = Target()

        parser.populate_object(target, "test --free x --kept y")

        assert not hasattr(target, "free")
        assert target.kept == "y"

    def test_relaxed_option_without_value_is_reset(self, parser_factory, option_factory):
        """An option committed without value by a relaxed parse is reset."""
        parser = parser_factory(
            options=[option_factory("count", binding=FieldBinding("count", value_type=int))]
        )
        target = Target()
        target.count = 9

        result = parser.parse("test --count", ignore_missing=True)
        Binder(parser.command).populate(target, result)

        assert target.count == 0

    def test_single_value_argument(self, parser_factory, argument_factory):
        """An argument bound with SINGLE cardinality takes the first value."""
        parser = parser_factory(
            argument=argument_factory(
                binding=FieldBinding("path", cardinality=Cardinality.SINGLE)
            )
        )
        target = Target()

        parser.populate_object(target, "test a.txt b.txt")

        assert target.path == "a.txt"

    def test_argument_validator(self, parser_factory, argument_factory):
        """Positional values are validated one by one."""

        def _no_dots(value):
            if "." in value:
                raise OptionValidatorError(f"{value} has a dot")

        parser = parser_factory(
            argument=argument_factory(binding=FieldBinding("names"), validator=_no_dots)
        )

        with pytest.raises(OptionValidatorError, match="b.txt has a dot"):
            parser.populate_object(Target(), "test a b.txt")

    def test_boolean_binding_defaults_to_bool(self, parser_factory, option_factory):
        """A flag bound without a value type is set to True and reset to False."""
        parser = parser_factory(
            options=[
                option_factory(
                    "flag",
                    option_type=OptionType.BOOLEAN,
                    has_value=False,
                    binding=FieldBinding("flag"),
                )
            ]
        )
        target = Target()

        parser.populate_object(target, "test --flag")
        assert target.flag is True

        parser.populate_object(target, "test")
        assert target.flag is False
