# SPDX-FileCopyrightText: AISEC Pentesting Team
#
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import math
import re
from collections.abc import Sequence
from types import MappingProxyType

from microflag.exceptions import (
    CharWrongArgError,
    MissingValueError,
    NotADoubleError,
    NotAnIntError,
    ParseErrorKind,
    UnknownFlagError,
    UnknownTypeError,
)
from microflag.flag import Flag, FlagType
from microflag.log import get_logger

logger = get_logger(__name__)

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

_INT_RE = re.compile(r"[+-]?[0-9]+")
_DOUBLE_RE = re.compile(
    r"[+-]?(?:(?P<mantissa>[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)",
    re.IGNORECASE,
)

# The wording of the usage line differs from the help placeholders.
_USAGE_KINDS: MappingProxyType[FlagType, str] = MappingProxyType(
    {
        FlagType.CHAR: "<char>",
        FlagType.STR: "<string>",
        FlagType.INT: "<integer>",
        FlagType.DOUBLE: "<double>",
    }
)

_MISSING_KINDS: MappingProxyType[FlagType, ParseErrorKind] = MappingProxyType(
    {
        FlagType.CHAR: ParseErrorKind.MISSING_CHAR,
        FlagType.STR: ParseErrorKind.MISSING_STR,
        FlagType.INT: ParseErrorKind.MISSING_INT,
        FlagType.DOUBLE: ParseErrorKind.MISSING_DOUBLE,
    }
)


def print_usage(flag: Flag) -> None:
    short = flag.short_name if flag.short_name is not None else ""
    long = flag.long_name if flag.long_name is not None else ""
    print(f"Usage: {short},{long} {_USAGE_KINDS[flag.type]}")


def find_flag(flags: Sequence[Flag], token: str) -> Flag | None:
    """Returns the first flag in declaration order whose short or
    long name equals ``token``.
    """
    for flag in flags:
        if flag.matches(token):
            return flag
    return None


def parse_int(token: str) -> int | None:
    if _INT_RE.fullmatch(token) is None:
        return None

    # Bounds the conversion, int() refuses strings above sys.get_int_max_str_digits().
    if len(token.lstrip("+-").lstrip("0")) > len(str(INT32_MAX)):
        return None

    value = int(token, 10)
    if value < INT32_MIN or value > INT32_MAX:
        return None
    return value


def parse_double(token: str) -> float | None:
    if (m := _DOUBLE_RE.fullmatch(token)) is None:
        return None

    value = float(token)
    if (mantissa := m.group("mantissa")) is None:
        return value

    # Finite literals which do not fit a double are range errors.
    if math.isinf(value):
        return None
    if value == 0.0 and mantissa.strip("0.") != "":
        return None
    return value


def _coerce(flag: Flag, token: str) -> None:
    match flag.type:
        case FlagType.CHAR:
            if len(token) != 1:
                print_usage(flag)
                raise CharWrongArgError(flag, token, "expected exactly one character")
            flag.target.value = token
        case FlagType.STR:
            flag.target.value = token
        case FlagType.INT:
            if (value := parse_int(token)) is None:
                print_usage(flag)
                raise NotAnIntError(flag, token, f"{token!r} is not a 32-bit integer")
            flag.target.value = value
        case FlagType.DOUBLE:
            if (value_f := parse_double(token)) is None:
                print_usage(flag)
                raise NotADoubleError(flag, token, f"{token!r} is not a double")
            flag.target.value = value_f


def parse(flags: Sequence[Flag], argv: Sequence[str]) -> None:
    """Parses ``argv`` against ``flags`` and writes the parsed values
    into the targets of the matching flags.

    ``argv[0]`` is the program name and is skipped. Parsing stops at
    the first error; values written before the error are kept. On
    each error a diagnostic line is printed to stdout before the
    exception is raised.

    :param flags: The flag table, matched in declaration order.
    :param argv: The full argument vector, e.g. :data:`sys.argv`.
    :raises ParseError: One of its subclasses, see :class:`ParseErrorKind`.
    """
    i = 1
    while i < len(argv):
        token = argv[i]

        if (flag := find_flag(flags, token)) is None:
            print(f'Error parsing flags: unknown flag "{token}"')
            raise UnknownFlagError(token)

        logger.trace(f"token {token!r} matched flag {flag.names()}")

        match flag.type:
            case FlagType.BOOL:
                flag.target.value = True
            case FlagType.CHAR | FlagType.STR | FlagType.INT | FlagType.DOUBLE:
                if i + 1 >= len(argv):
                    print_usage(flag)
                    raise MissingValueError(_MISSING_KINDS[flag.type], flag=flag, token=token)
                i += 1
                _coerce(flag, argv[i])
            case _:
                raise UnknownTypeError(flag, f"unsupported flag type {flag.type!r}")

        logger.debug(f"{flag.names()} = {flag.target.value!r}")
        i += 1
