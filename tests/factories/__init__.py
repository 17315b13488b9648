"""Test data factories for deterministic test data generation."""

from tests.factories.commands import (
    Populator,
    make_argument,
    make_command,
    make_option,
    make_populator_command,
)

__all__ = [
    "Populator",
    "make_argument",
    "make_command",
    "make_option",
    "make_populator_command",
]
