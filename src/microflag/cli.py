# SPDX-FileCopyrightText: AISEC Pentesting Team
#
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import sys
from collections.abc import Sequence

import exitcode
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from microflag.config import ConfigError, load_table
from microflag.exceptions import ParseError
from microflag.flag import BoolValue, CharValue, DoubleValue, Flag, IntValue, StrValue
from microflag.help import print_help
from microflag.log import Loglevel, get_logger, setup_logging
from microflag.parser import INT32_MAX, INT32_MIN, parse

logger = get_logger(__name__)


class ExampleDefaults(BaseModel):
    """Default values of the example program; they can be
    overridden in the ``[example]`` table of ``microflag.toml``.
    """

    model_config = ConfigDict(extra="forbid")

    output: str = "out"
    char: str = Field("A", min_length=1, max_length=1)
    number: int = Field(0, ge=INT32_MIN, le=INT32_MAX)
    double: float = 123.123


def load_defaults() -> ExampleDefaults:
    table, path = load_table("example")
    if path is not None:
        logger.debug(f"loaded config from {path}")
    return ExampleDefaults.model_validate(table)


def main(argv: Sequence[str] | None = None) -> int:
    argv = sys.argv if argv is None else argv

    try:
        level = Loglevel.from_env()
    except ValueError as e:
        setup_logging()
        logger.error(str(e))
        return exitcode.CONFIG
    setup_logging(level)

    try:
        defaults = load_defaults()
    except (ConfigError, ValidationError) as e:
        logger.error(f"invalid config: {e}")
        return exitcode.CONFIG

    show_help = BoolValue()
    out_name = StrValue(defaults.output)
    a_char = CharValue(defaults.char)
    a_number = IntValue(defaults.number)
    a_double = DoubleValue(defaults.double)

    flags = [
        Flag(target=show_help, short_name="-h", long_name="--help", description="show help message"),
        Flag(target=out_name, short_name="-o", long_name="--output", description="set output file"),
        Flag(target=a_char, short_name="-c", long_name="--char", description="give me a char!"),
        Flag(target=a_number, short_name="-n", long_name="--number", description="print this number"),
        Flag(target=a_double, short_name="-d", long_name="--double", description="print a double"),
    ]

    try:
        parse(flags, argv)
    except ParseError as e:
        logger.debug(repr(e))
        return exitcode.USAGE

    if show_help.value:
        print_help("example", "A sample application to showcase the library", flags)
        return exitcode.OK

    print(f"Output file: {out_name.value}")
    print(f"A char:      {a_char.value}")
    print(f"A number:    {a_number.value}")
    print(f"A double:    {a_double.value:f}")

    return exitcode.OK


if __name__ == "__main__":
    sys.exit(main())
