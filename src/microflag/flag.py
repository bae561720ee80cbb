# SPDX-FileCopyrightText: AISEC Pentesting Team
#
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, unique
from types import MappingProxyType
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict


@unique
class FlagType(IntEnum):
    """The kind of value a flag binds to. It decides how the
    value token is coerced and which placeholder the help
    listing shows.
    """

    BOOL = 0
    CHAR = 1
    STR = 2
    INT = 3
    DOUBLE = 4


#: Placeholder text shown after the flag names in the help listing.
TYPE_PLACEHOLDERS: MappingProxyType[FlagType, str] = MappingProxyType(
    {
        FlagType.BOOL: "",
        FlagType.CHAR: "<char>",
        FlagType.STR: "<str>",
        FlagType.INT: "<int>",
        FlagType.DOUBLE: "<double>",
    }
)


@dataclass
class BoolValue:
    value: bool = False

    flag_type: ClassVar[FlagType] = FlagType.BOOL


@dataclass
class CharValue:
    value: str = ""

    flag_type: ClassVar[FlagType] = FlagType.CHAR


@dataclass
class StrValue:
    value: str = ""

    flag_type: ClassVar[FlagType] = FlagType.STR


@dataclass
class IntValue:
    value: int = 0

    flag_type: ClassVar[FlagType] = FlagType.INT


@dataclass
class DoubleValue:
    value: float = 0.0

    flag_type: ClassVar[FlagType] = FlagType.DOUBLE


class Flag(BaseModel):
    """A single entry of a flag table.

    The ``target`` is owned by the caller. The parser only ever
    assigns ``target.value``; it never reads the previous content.
    Which coercion applies is derived from the target's class, so
    the declared type and the storage cannot disagree.

    Neither the uniqueness of names nor the presence of at least
    one name is checked; a flag without names never matches.
    """

    model_config = ConfigDict(frozen=True)

    target: Any
    short_name: str | None = None
    long_name: str | None = None
    description: str = ""

    @property
    def type(self) -> Any:
        return getattr(self.target, "flag_type", None)

    def matches(self, token: str) -> bool:
        return token == self.short_name or token == self.long_name

    def names(self) -> str:
        has_short = self.short_name is not None
        has_long = self.long_name is not None
        sep = "," if has_short and has_long else ""
        return f"{self.short_name if has_short else ''}{sep}{self.long_name if has_long else ''}"
