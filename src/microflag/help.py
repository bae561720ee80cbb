# SPDX-FileCopyrightText: AISEC Pentesting Team
#
# SPDX-License-Identifier: Apache-2.0

import sys
from collections.abc import Sequence
from typing import TextIO

from microflag.flag import TYPE_PLACEHOLDERS, Flag


def format_help(prog_name: str, description: str, flags: Sequence[Flag]) -> str:
    out = f"{prog_name}\n{description}\n\nOptions:\n"
    for flag in flags:
        out += f"    {flag.names()} {TYPE_PLACEHOLDERS.get(flag.type, '')}\n"
        out += f"        {flag.description}\n"
    return out


def print_help(
    prog_name: str,
    description: str,
    flags: Sequence[Flag],
    file: TextIO | None = None,
) -> None:
    """Prints the help listing of ``flags`` to stdout, or ``file``
    if given.
    """
    print(format_help(prog_name, description, flags), end="", file=file or sys.stdout)
