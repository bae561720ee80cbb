# SPDX-FileCopyrightText: AISEC Pentesting Team
#
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from enum import IntEnum, unique
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from microflag.flag import Flag


@unique
class ParseErrorKind(IntEnum):
    OK = 0
    UNKNOWN_TYPE = 1
    MISSING_CHAR = 2
    MISSING_STR = 3
    MISSING_INT = 4
    MISSING_DOUBLE = 5
    CHAR_WRONG_ARG = 6
    UNKNOWN_FLAG = 7
    NOT_AN_INT = 8
    NOT_A_DOUBLE = 9


# ****************
# * Base classes *
# ****************


class ParseError(Exception):
    kind: ParseErrorKind

    def __init__(
        self,
        kind: ParseErrorKind,
        flag: Flag | None = None,
        token: str | None = None,
        message: str | None = None,
    ):
        self.kind = kind
        self.flag = flag
        self.token = token
        self.message = message

        super().__init__(message)

    def _message_core(self) -> str:
        if self.flag is not None:
            return f"{self.kind.name} for flag {self.flag.names()}"
        return self.kind.name

    def __str__(self) -> str:
        message = self._message_core()

        if self.message is not None:
            message = f"{message}; {self.message}"

        return message

    def __repr__(self) -> str:
        return f"{type(self).__name__}({repr(str(self))})"


# ***************
# * Flag errors *
# ***************


class UnknownTypeError(ParseError):
    def __init__(self, flag: Flag, message: str | None = None):
        super().__init__(ParseErrorKind.UNKNOWN_TYPE, flag=flag, message=message)


class MissingValueError(ParseError):
    """A value-bearing flag was the last token of the argument vector."""


class CharWrongArgError(ParseError):
    def __init__(self, flag: Flag, token: str, message: str | None = None):
        super().__init__(ParseErrorKind.CHAR_WRONG_ARG, flag=flag, token=token, message=message)


class NotAnIntError(ParseError):
    def __init__(self, flag: Flag, token: str, message: str | None = None):
        super().__init__(ParseErrorKind.NOT_AN_INT, flag=flag, token=token, message=message)


class NotADoubleError(ParseError):
    def __init__(self, flag: Flag, token: str, message: str | None = None):
        super().__init__(ParseErrorKind.NOT_A_DOUBLE, flag=flag, token=token, message=message)


class UnknownFlagError(ParseError):
    def __init__(self, token: str, message: str | None = None):
        super().__init__(ParseErrorKind.UNKNOWN_FLAG, token=token, message=message)

    def _message_core(self) -> str:
        return f'unknown flag "{self.token}"'
