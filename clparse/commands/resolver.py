"""Option name resolution.

Resolves the text following ``-`` or ``--`` to an option of the grammar:

1. exact match on the short name (``-x``) or long name (``--name``)
2. otherwise the option whose name prefixes the text, so ``-Dkey=value`` and
   ``--level=3`` resolve to ``D`` and ``level``
3. property (GROUP) options are returned as is, the caller reads ``key=value``
4. other options only match a prefix when followed by ``=<value>``; the value
   is recorded on the option's scratch values
"""

from typing import Callable, NamedTuple, Optional

from clparse.commands.models import ProcessedOption
from clparse.commands.state import ParseScratch

EQUALS = "="


class Resolved(NamedTuple):
    """A resolved option and whether a value was attached to its name."""

    option: ProcessedOption
    attached: bool = False


def _resolve(
    scratch: ParseScratch,
    fragment: str,
    exact: Callable[[str], Optional[ProcessedOption]],
    prefix: Callable[[str], Optional[ProcessedOption]],
    matched_name: Callable[[ProcessedOption], str],
) -> Optional[Resolved]:
    option = exact(fragment)
    if option is not None:
        return Resolved(option)

    option = prefix(fragment)
    if option is None:
        return None
    if option.is_property:
        return Resolved(option)

    rest = fragment[len(matched_name(option)):]
    if len(rest) > 1 and rest.startswith(EQUALS):
        scratch.of(option).add_value(rest[1:])
        return Resolved(option, attached=True)

    return None


def resolve_short_option(scratch: ParseScratch, fragment: str) -> Optional[Resolved]:
    """Resolve the text following a single dash.

    Args:
        scratch: Scratch state of the current parse
        fragment: Token without its leading ``-``

    Returns:
        Resolved option, or None if the fragment names no option
    """
    command = scratch.command
    return _resolve(
        scratch,
        fragment,
        command.find_option,
        command.starts_with_option,
        lambda option: option.short_name,
    )


def resolve_long_option(scratch: ParseScratch, fragment: str) -> Optional[Resolved]:
    """Resolve the text following a double dash.

    Args:
        scratch: Scratch state of the current parse
        fragment: Token without its leading ``--``

    Returns:
        Resolved option, or None if the fragment names no option
    """
    command = scratch.command
    return _resolve(
        scratch,
        fragment,
        command.find_long_option,
        command.starts_with_long_option,
        lambda option: option.name,
    )
