"""Split a raw command line into words."""

import shlex
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class SplitStatus(Enum):
    """Outcome of splitting a line."""

    OK = "ok"
    UNCLOSED_QUOTE = "unclosed_quote"
    ERROR = "error"


@dataclass
class SplitLine:
    """Words of a command line plus the splitter status.

    Attributes:
        words: Words in line order, quotes removed
        status: OK, or why the line could not be split
        error_message: Splitter message when status is not OK
    """

    words: List[str] = field(default_factory=list)
    status: SplitStatus = SplitStatus.OK
    error_message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status is SplitStatus.OK


def split_line(line: str) -> SplitLine:
    """Split a line with POSIX shell quoting rules.

    Handles:
    - Quoted strings: "hello world" -> hello world
    - Escapes: hello\\ world -> hello world

    Args:
        line: Raw command line

    Returns:
        SplitLine; malformed quoting is reported through ``status``, never raised

    Example:
        split_line('test --name "my group"').words
        # ['test', '--name', 'my group']
    """
    try:
        return SplitLine(words=shlex.split(line))
    except ValueError as e:
        message = str(e)
        status = (
            SplitStatus.UNCLOSED_QUOTE
            if "closing quotation" in message
            else SplitStatus.ERROR
        )
        return SplitLine(status=status, error_message=message)
