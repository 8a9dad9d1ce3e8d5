"""
Custom exception classes.

Everything raised while parsing descends from `ParseError`, so the top-level
call site (`.ArgumentHelper.run`) can tell user input mistakes apart from
truly unexpected errors.
"""


class ConfigurationError(Exception):
    """
    A declaration problem, e.g. two arguments sharing one key.

    These are reported as diagnostics at declaration time rather than raised;
    see `.Registry.report`.
    """
    pass


class ParseError(Exception):
    """
    An error arising from the parsing of command-line arguments.

    Unknown keys, missing or malformed values, leftover tokens, etc.
    """
    def __init__(self, msg, argument=None):
        super(ParseError, self).__init__(msg)
        self.argument = argument


class MissingValue(ParseError):
    """
    A value-taking argument ran out of tokens.
    """
    pass


class InvalidValue(ParseError):
    """
    A token could not be converted into the argument's kind.
    """
    pass


class TrailingCharacters(InvalidValue):
    """
    A token started out convertible but had junk left over, e.g. ``"12x"``.
    """
    pass


class InvalidParameter(ParseError):
    """
    A bare marker, or a key no declared argument answers to.
    """
    pass


class InvalidExtraArgument(ParseError):
    """
    A positional token arrived after every positional slot was filled.
    """
    pass


class MissingRequiredArguments(ParseError):
    """
    One or more required positional arguments were never given.

    The unfilled arguments live in ``missing``, in declaration order.
    """
    def __init__(self, missing):
        self.missing = list(missing)
        lines = ["Missing required arguments:"]
        lines.extend(x.name_token().rstrip() for x in self.missing)
        super(MissingRequiredArguments, self).__init__("\n".join(lines))


class Exit(Exception):
    """
    Simple stand-in for SystemExit that lets us gracefully exit.

    Removes lots of scattered sys.exit calls, improves testability.
    """
    def __init__(self, code=0):
        self.code = code


class HelpRequested(Exit):
    """
    The help marker showed up somewhere in argv.
    """
    def __init__(self):
        super(HelpRequested, self).__init__(code=0)
