"""Shared fixtures for clparse tests."""

import pytest

from clparse.commands.models import OptionType
from clparse.commands.parser import CommandLineParser
from tests.factories.commands import (
    Populator,
    make_argument,
    make_command,
    make_option,
    make_populator_command,
)


@pytest.fixture
def option_factory():
    """Factory for creating ProcessedOption instances."""
    return make_option


@pytest.fixture
def argument_factory():
    """Factory for creating ProcessedArgument instances."""
    return make_argument


@pytest.fixture
def command_factory():
    """Factory for creating ProcessedCommand instances."""
    return make_command


@pytest.fixture
def parser_factory():
    """Factory building a CommandLineParser straight from options.

    Returns:
        Callable taking options (and an optional argument) and returning a
        parser for a command named "test"
    """

    def _factory(options=None, argument=None, name: str = "test"):
        return CommandLineParser(make_command(name=name, options=options, argument=argument))

    return _factory


@pytest.fixture
def flags_parser():
    """Parser with boolean flags -a/-b/-c, a valued -d and a property -D."""
    return CommandLineParser(
        make_command(
            options=[
                make_option("alpha", "a", OptionType.BOOLEAN, has_value=False),
                make_option("beta", "b", OptionType.BOOLEAN, has_value=False),
                make_option("gamma", "c", OptionType.BOOLEAN, has_value=False),
                make_option("delta", "d"),
                make_option("define", "D", OptionType.GROUP),
            ],
            argument=make_argument(),
        )
    )


@pytest.fixture
def populator_parser():
    """Parser binding every option kind onto a Populator."""
    return CommandLineParser(make_populator_command())


@pytest.fixture
def populator():
    """Fresh Populator target."""
    return Populator()
