"""Per-parse scratch state.

A fresh ``ParseScratch`` is built for every parse call, so values collected
for one command line never leak into the next one.
"""

from dataclasses import dataclass, field
from typing import Dict, List

from clparse.commands.models import ProcessedCommand, ProcessedOption


@dataclass
class OptionValues:
    """Values accumulated for one option during a parse."""

    values: List[str] = field(default_factory=list)
    properties: Dict[str, str] = field(default_factory=dict)
    long_name_used: bool = True

    @property
    def value(self):
        return self.values[0] if self.values else None

    def add_value(self, value: str) -> None:
        self.values.append(value)

    def add_property(self, key: str, value: str) -> None:
        self.properties[key] = value


@dataclass
class ParseScratch:
    """Scratch values for every option of a command."""

    command: ProcessedCommand
    _values: Dict[str, OptionValues] = field(default_factory=dict)

    def of(self, option: ProcessedOption) -> OptionValues:
        """Get (creating on first use) the scratch values of an option."""
        values = self._values.get(option.name)
        if values is None:
            values = OptionValues()
            self._values[option.name] = values
        return values
