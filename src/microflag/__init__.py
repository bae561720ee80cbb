# SPDX-FileCopyrightText: AISEC Pentesting Team
#
# SPDX-License-Identifier: Apache-2.0

"""Minimal declarative command line flag parsing.

A flag table is a sequence of :class:`Flag` declarations. Each flag
writes into a caller-owned value slot (:class:`BoolValue`,
:class:`CharValue`, :class:`StrValue`, :class:`IntValue` or
:class:`DoubleValue`). :func:`parse` fills the slots from an argument
vector and :func:`print_help` renders the same table as help text.
"""

from importlib.metadata import PackageNotFoundError, version

from microflag.exceptions import (
    CharWrongArgError,
    MissingValueError,
    NotADoubleError,
    NotAnIntError,
    ParseError,
    ParseErrorKind,
    UnknownFlagError,
    UnknownTypeError,
)
from microflag.flag import (
    TYPE_PLACEHOLDERS,
    BoolValue,
    CharValue,
    DoubleValue,
    Flag,
    FlagType,
    IntValue,
    StrValue,
)
from microflag.help import format_help, print_help
from microflag.parser import parse

try:
    __version__ = version("microflag")
except PackageNotFoundError:
    __version__ = "0.1.0"

__all__ = (
    "TYPE_PLACEHOLDERS",
    "BoolValue",
    "CharValue",
    "CharWrongArgError",
    "DoubleValue",
    "Flag",
    "FlagType",
    "IntValue",
    "MissingValueError",
    "NotADoubleError",
    "NotAnIntError",
    "ParseError",
    "ParseErrorKind",
    "StrValue",
    "UnknownFlagError",
    "UnknownTypeError",
    "format_help",
    "parse",
    "print_help",
)
