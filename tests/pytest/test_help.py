# SPDX-FileCopyrightText: AISEC Pentesting Team
#
# SPDX-License-Identifier: Apache-2.0

from io import StringIO

import pytest

from microflag import (
    TYPE_PLACEHOLDERS,
    BoolValue,
    CharValue,
    DoubleValue,
    Flag,
    FlagType,
    IntValue,
    StrValue,
    format_help,
    print_help,
)


def test_placeholders() -> None:
    assert TYPE_PLACEHOLDERS[FlagType.BOOL] == ""
    assert TYPE_PLACEHOLDERS[FlagType.CHAR] == "<char>"
    assert TYPE_PLACEHOLDERS[FlagType.STR] == "<str>"
    assert TYPE_PLACEHOLDERS[FlagType.INT] == "<int>"
    assert TYPE_PLACEHOLDERS[FlagType.DOUBLE] == "<double>"

    with pytest.raises(TypeError):
        TYPE_PLACEHOLDERS[FlagType.BOOL] = "<bool>"  # type: ignore


def test_bool_and_str(capsys: pytest.CaptureFixture[str]) -> None:
    flags = [
        Flag(target=BoolValue(), short_name="-h", long_name="--help", description="show help message"),
        Flag(target=StrValue(), short_name="-o", long_name="--output", description="set output file"),
    ]

    print_help("example", "A sample application to showcase the library", flags)

    assert capsys.readouterr().out.splitlines() == [
        "example",
        "A sample application to showcase the library",
        "",
        "Options:",
        "    -h,--help ",
        "        show help message",
        "    -o,--output <str>",
        "        set output file",
    ]


@pytest.mark.parametrize(
    "flag,line",
    [
        (Flag(target=CharValue(), short_name="-c"), "    -c <char>"),
        (Flag(target=IntValue(), long_name="--number"), "    --number <int>"),
        (Flag(target=DoubleValue(), short_name="-d", long_name="--double"), "    -d,--double <double>"),
        (Flag(target=BoolValue()), "     "),
    ],
)
def test_option_line(flag: Flag, line: str) -> None:
    assert format_help("prog", "desc", [flag]).split("\n")[4] == line


def test_no_flags() -> None:
    assert format_help("prog", "desc", []) == "prog\ndesc\n\nOptions:\n"


def test_print_help_to_file() -> None:
    buffer = StringIO()
    flags = [Flag(target=IntValue(), short_name="-n", description="print this number")]

    print_help("prog", "desc", flags, file=buffer)

    assert buffer.getvalue() == "prog\ndesc\n\nOptions:\n    -n <int>\n        print this number\n"
