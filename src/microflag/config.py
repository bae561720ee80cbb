# SPDX-FileCopyrightText: AISEC Pentesting Team
#
# SPDX-License-Identifier: Apache-2.0

import os
import subprocess
import tomllib
from pathlib import Path
from typing import Any

from platformdirs import user_config_path

CONFIG_NAME = "microflag.toml"


class ConfigError(Exception):
    def __init__(self, path: Path, message: str):
        self.path = path
        super().__init__(f"{path}: {message}")


def get_git_root() -> Path | None:
    try:
        p = subprocess.run(
            ["git", "rev-parse", "--show-toplevel"],
            capture_output=True,
            check=True,
        )
    except (FileNotFoundError, subprocess.CalledProcessError):
        return None
    return Path(p.stdout.decode().strip())


def find_config() -> Path | None:
    """``MICROFLAG_CONFIG`` names the config file explicitly. Without
    it, ``microflag.toml`` is looked up in the current directory, the
    git root and the user config directory, in this order.
    """
    if (s := os.getenv("MICROFLAG_CONFIG")) is not None:
        return Path(s)

    dirs = [Path.cwd()]
    if (git_root := get_git_root()) is not None:
        dirs.append(git_root)
    dirs.append(user_config_path("microflag"))

    for dir_ in dirs:
        if (path := dir_.joinpath(CONFIG_NAME)).is_file():
            return path
    return None


def load_table(name: str) -> tuple[dict[str, Any], Path | None]:
    """Returns the top level table ``name`` of the config file and
    the file's path; an empty table if there is no config file or
    the table is absent.

    :raises ConfigError: The file is unreadable, is no valid TOML or
                         ``name`` is not a table.
    """
    if (path := find_config()) is None:
        return {}, None

    try:
        with path.open("rb") as f:
            data = tomllib.load(f)
    except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError) as e:
        raise ConfigError(path, str(e)) from e

    table = data.get(name, {})
    if not isinstance(table, dict):
        raise ConfigError(path, f"[{name}] is not a table")
    return table, path
