import io
import math
import numbers

from .._types import Kind
from ..exceptions import InvalidValue, MissingValue, TrailingCharacters
from ..util import debug, text_wrap


#: Leading character that introduces keyed arguments.
MARKER = "/"

#: Characters a number token can be spelled with.
NUMERIC = frozenset("0123456789+-.eE")

#: How many prefixes to retry when looking for trailing characters.
MAX_PREFIX_TRIES = 32


def is_keyed(token):
    return token.startswith(MARKER)


class unsigned(int):
    """
    An `int` that refuses to be negative; used for ``uint``-style arguments.
    """
    def __new__(cls, value=0, *args, **kwargs):
        self = super(unsigned, cls).__new__(cls, value, *args, **kwargs)
        if self < 0:
            err = "unsigned value may not be negative: {!r}"
            raise ValueError(err.format(value))
        return self


class Argument(object):
    """
    A single declared command-line argument and its binding logic.

    Not used directly; `Flag`, `Scalar`, `String` and `StringList` are the
    complete set of concrete kinds.

    :param str key:
        The text following the marker for keyed arguments (so ``"t"`` for
        ``/t``). Empty for positional arguments.
    :param str arg_description:
        Short label for the value, shown in name tokens (e.g. ``"delay"``).
    :param str description:
        Free text, word-wrapped into usage output.
    :param bool optional:
        Whether the argument may be left out.
    :param dest:
        Optional callable handed every value this argument binds, for callers
        who want the result written straight into their own storage.
    :param str attr_name:
        Name used in `.ArgumentHelper.values`. Defaults to ``key``, or to
        ``arg_description`` for positional arguments.
    """
    def __init__(self, key="", arg_description="", description="",
        optional=False, dest=None, attr_name=None):
        self.key = key
        self.arg_description = arg_description
        self.description = description
        self.is_optional = optional
        self.dest = dest
        self.attr_name = attr_name
        self._value = self.default()

    def __repr__(self):
        return "<{}: {}>".format(
            self.__class__.__name__, self.name_token().strip()
        )

    @property
    def name(self):
        return self.attr_name or self.key or self.arg_description

    def default(self):
        return None

    @property
    def value(self):
        return self._value

    @value.setter
    def value(self, value):
        debug("Binding {!r} to {!r}".format(self, value))
        self._value = value
        if self.dest is not None:
            self.dest(value)

    def consume(self, cursor):
        """
        Bind this argument from the token(s) under ``cursor``.

        Only advances ``cursor`` when binding succeeds; failures raise a
        `.ParseError` subclass.
        """
        raise NotImplementedError

    def name_token(self):
        if self.key and self.arg_description:
            return "[{}{} {}] ".format(MARKER, self.key, self.arg_description)
        if self.key:
            return "[{}{}] ".format(MARKER, self.key)
        if self.is_optional:
            return "[{}] ".format(self.arg_description)
        return "{} ".format(self.arg_description)

    def write_usage(self, out):
        out.write("\t" + self.name_token() + "\n")
        text_wrap(self.description, out, 50, "\t   ")

    def usage(self):
        out = io.StringIO()
        self.write_usage(out)
        return out.getvalue()

    def value_text(self):
        return str(self.value)


class Flag(Argument):
    """
    A boolean which flips every time its key is seen.

    Giving the same flag twice therefore leaves it ``False`` again.
    """
    def default(self):
        return False

    def consume(self, cursor):
        self.value = not self.value

    def value_text(self):
        return "true" if self.value else "false"


class String(Argument):
    """
    Takes exactly one token, verbatim.
    """
    def default(self):
        return ""

    def take(self, cursor):
        if not cursor:
            raise MissingValue(
                "Missing value for argument {}".format(self.name_token().strip()),
                self,
            )
        return cursor.peek()

    def consume(self, cursor):
        self.value = self.take(cursor)
        cursor.advance()


class Scalar(String):
    """
    Takes exactly one token and converts it with ``kind``.

    ``kind`` must also return a zero value when called with no arguments,
    which becomes this argument's default (``int() == 0`` and so forth).
    The whole token has to convert; ``"12x"`` is not ``12``.
    """
    def __init__(self, kind: Kind = int, **kwargs) -> None:
        self.kind = kind
        super(Scalar, self).__init__(**kwargs)

    def default(self):
        return self.kind()

    def converts(self, token):
        # No digit-group underscores; "1_000" is a 1 with junk after it.
        if "_" in token:
            return False
        try:
            value = self.kind(token)
        except (TypeError, ValueError, ArithmeticError):
            return False
        # Spelled-out numbers ("nan", "inf") and overflowed floats don't count.
        if isinstance(value, numbers.Number):
            if not any(x.isdigit() for x in token):
                return False
            if isinstance(value, float) and not math.isfinite(value):
                return False
        return True

    def convert(self, token):
        if self.converts(token):
            return self.kind(token)
        # Distinguish "12x" (a good prefix with junk after it) from "x12".
        # Only the leading run of number characters is worth retrying, and
        # only its longest few prefixes.
        start = len(token) - len(token.lstrip())
        run = start
        while run < len(token) and token[run] in NUMERIC:
            run += 1
        # An all-digit token has no junk to trail; it just didn't convert.
        digits = token[start:].strip().lstrip("+-").isdigit()
        run = min(run, len(token) - 1)
        if not digits:
            for end in range(run, max(start, run - MAX_PREFIX_TRIES), -1):
                if self.converts(token[:end]):
                    err = "Trailing characters after argument: {}"
                    raise TrailingCharacters(err.format(token), self)
        raise InvalidValue("Invalid argument: {}".format(token), self)

    def consume(self, cursor):
        self.value = self.convert(self.take(cursor))
        cursor.advance()


class StringList(Argument):
    """
    Greedily collects tokens up to the next keyed one (or the end of input).

    Never fails; zero tokens is fine. Repeat occurrences keep appending.
    """
    def default(self):
        return []

    def consume(self, cursor):
        while cursor and not is_keyed(cursor.peek()):
            self.value.append(cursor.peek())
            cursor.advance()
        # Re-assign so any dest sees the updated list.
        self.value = self.value

    def value_text(self):
        return ", ".join(self.value)
