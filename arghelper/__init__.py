__all__ = (
    "Argument",
    "ArgumentHelper",
    "ConfigurationError",
    "Exit",
    "Flag",
    "HelpRequested",
    "InvalidExtraArgument",
    "InvalidParameter",
    "InvalidValue",
    "Metadata",
    "MissingRequiredArguments",
    "MissingValue",
    "ParseError",
    "ParseResult",
    "Parser",
    "Registry",
    "Scalar",
    "String",
    "StringList",
    "TrailingCharacters",
    "__version__",
    "__version_info__",
    "text_wrap",
    "unsigned",
)


from ._version import __version__, __version_info__
from .exceptions import (
    ConfigurationError,
    Exit,
    HelpRequested,
    InvalidExtraArgument,
    InvalidParameter,
    InvalidValue,
    MissingRequiredArguments,
    MissingValue,
    ParseError,
    TrailingCharacters,
)
from .helper import ArgumentHelper, Metadata
from .parser import (
    Argument,
    Flag,
    Parser,
    ParseResult,
    Registry,
    Scalar,
    String,
    StringList,
    unsigned,
)
from .util import text_wrap
