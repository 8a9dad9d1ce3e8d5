from lexicon import Lexicon

from ..exceptions import (
    HelpRequested,
    InvalidExtraArgument,
    InvalidParameter,
    MissingRequiredArguments,
    ParseError,
)
from ..util import debug
from .argument import MARKER, is_keyed


#: Token which, anywhere in argv, short-circuits parsing into help output.
HELP = MARKER + "?"


class Cursor(object):
    """
    Read position within a token list. Arguments advance it as they consume.
    """
    def __init__(self, tokens):
        self.tokens = list(tokens)
        self.index = 0

    def __repr__(self):
        return "<Cursor: {!r}>".format(self.tokens[self.index:])

    def __bool__(self):
        return self.index < len(self.tokens)

    @property
    def remaining(self):
        return len(self.tokens) - self.index

    def peek(self):
        return self.tokens[self.index]

    def advance(self, count=1):
        self.index += count


class Parser(object):
    """
    Dispatches argv tokens onto the arguments declared in ``registry``.

    Keyed tokens (``/key``) go to whichever argument owns the key; everything
    else fills required positionals, then optional positionals, then the
    overflow list, in that order.
    """
    def __init__(self, registry):
        self.registry = registry

    def parse_argv(self, argv):
        """
        Parse an argv-style token list ``argv``, binding declared arguments.

        Assumes any program name has already been stripped out. Good::

            Parser(registry).parse_argv(['543', '21', '/t', '5000', '/B'])

        Bad::

            Parser(registry).parse_argv(['threadctl', '543', ...])

        :returns: a `ParseResult` of the bound values.

        :raises:
            `.HelpRequested` if `HELP` appears anywhere (checked before any
            binding happens); some other `.ParseError` subclass on bad input.
        """
        debug("Starting argv: {!r}".format(argv))
        if HELP in argv:
            debug("Saw {!r}, bailing out to help".format(HELP))
            raise HelpRequested
        required = self.registry.required
        optional = self.registry.optional
        overflow = self.registry.overflow
        next_required = next_optional = 0
        cursor = Cursor(argv)
        while cursor:
            token = cursor.peek()
            debug("Handling token: {!r}".format(token))
            if is_keyed(token):
                cursor.advance()
                key = token[len(MARKER):]
                if not key or key not in self.registry.keyed:
                    err = "{} is an invalid parameter."
                    raise InvalidParameter(err.format(token))
                self.registry.keyed[key].consume(cursor)
            elif next_required < len(required):
                required[next_required].consume(cursor)
                next_required += 1
            elif next_optional < len(optional):
                arg = optional[next_optional]
                next_optional += 1
                # Optional slots just get skipped on failure; the token is
                # then reconsidered for the next slot.
                try:
                    arg.consume(cursor)
                except ParseError as e:
                    debug("Leaving {!r} unfilled: {}".format(arg, e))
            elif overflow is not None:
                debug("Storing extra token {!r}".format(token))
                overflow.append(token)
                cursor.advance()
            else:
                err = "Invalid extra argument {}"
                raise InvalidExtraArgument(err.format(token))
        if next_required < len(required):
            raise MissingRequiredArguments(required[next_required:])
        result = ParseResult.from_registry(self.registry)
        debug("Parse result: {!r}".format(result))
        return result


class ParseResult(Lexicon):
    """
    Attribute-accessible mapping of argument names to their bound values.

    When an overflow list was declared, its tokens are under ``extra``.
    """
    @classmethod
    def from_registry(cls, registry):
        result = cls()
        for arg in registry.all:
            result[arg.name] = arg.value
        # Keyed lookups win, matching dispatch for duplicated keys.
        for arg in registry.keyed.values():
            result[arg.name] = arg.value
        if registry.overflow is not None:
            result["extra"] = registry.overflow
        return result
