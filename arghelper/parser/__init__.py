# flake8: noqa
from .argument import (
    MARKER,
    Argument,
    Flag,
    Scalar,
    String,
    StringList,
    unsigned,
)
from .parser import HELP, Cursor, Parser, ParseResult
from .registry import Registry
