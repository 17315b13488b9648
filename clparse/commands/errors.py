"""Command line parsing and binding errors."""


class CommandLineError(Exception):
    """Base class for every error raised or recorded by clparse."""

    pass


class CommandLineParserError(CommandLineError):
    """Error detected while scanning a command line."""

    pass


class CommandNotFoundError(CommandLineParserError):
    """The line does not start with the command name, or could not be split."""

    pass


class OptionParserError(CommandLineParserError):
    """An option token could not be processed."""

    pass


class OptionMissingValueError(OptionParserError):
    """An option that needs a value was not given one."""

    pass


class UnknownOptionError(OptionParserError):
    """An option token does not match any option of the command."""

    pass


class PropertyMalformedError(OptionParserError):
    """A property option was not given as ``<key>=<value>``."""

    pass


class ArgumentParserError(CommandLineParserError):
    """A positional value was given where it is not supported."""

    pass


class RequiredOptionError(CommandLineParserError):
    """A required option is missing from the command line."""

    pass


class OptionValidatorError(CommandLineError):
    """A converted value was rejected by its validator."""

    pass


class OptionConverterError(CommandLineError):
    """A raw value could not be converted to the bound attribute type."""

    pass
