# SPDX-FileCopyrightText: AISEC Pentesting Team
#
# SPDX-License-Identifier: Apache-2.0

import shutil
import subprocess
from pathlib import Path

import pytest

from microflag import config
from microflag.config import ConfigError, find_config, load_table


@pytest.fixture(autouse=True)
def isolated(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("MICROFLAG_CONFIG", raising=False)
    monkeypatch.setattr(config, "user_config_path", lambda _: tmp_path.joinpath("user"))


def init_repository(path: Path) -> None:
    subprocess.run(["git", "init", path], check=True)


@pytest.mark.skipif(shutil.which("git") is None, reason="git binary is not available")
def test_config_discovery_git(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    testrepo = tmp_path.joinpath("testrepo")
    testrepo.mkdir()
    init_repository(testrepo)
    monkeypatch.chdir(testrepo)

    config_file = testrepo.joinpath("microflag.toml")
    config_file.touch()

    path = find_config()
    assert path is not None
    assert path.name == "microflag.toml"

    foodir = testrepo.joinpath("foo")
    foodir.mkdir()
    monkeypatch.chdir(foodir)

    path = find_config()
    assert path is not None
    assert path.resolve() == config_file.resolve()


def test_config_discovery_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    config_file = tmp_path.joinpath("microflag.toml")
    config_file.touch()
    monkeypatch.chdir(tmp_path)

    assert find_config() == config_file


def test_config_discovery_user_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    user_dir = tmp_path.joinpath("user")
    user_dir.mkdir()
    config_file = user_dir.joinpath("microflag.toml")
    config_file.touch()
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(config, "get_git_root", lambda: None)

    assert find_config() == config_file


def test_config_discovery_none(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(config, "get_git_root", lambda: None)

    assert find_config() is None
    assert load_table("example") == ({}, None)


def test_config_discovery_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    config_file = tmp_path.joinpath("custom.toml")
    config_file.write_text('[example]\noutput = "x"\n')
    monkeypatch.setenv("MICROFLAG_CONFIG", str(config_file))

    assert find_config() == config_file
    assert load_table("example") == ({"output": "x"}, config_file)

    config_file.unlink()
    with pytest.raises(ConfigError):
        load_table("example")


def test_load_table(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    config_file = tmp_path.joinpath("microflag.toml")
    config_file.write_text(
        """[example]
output = "fiz"
number = 3

[other]
baz = 1
"""
    )
    monkeypatch.chdir(tmp_path)

    assert load_table("example") == ({"output": "fiz", "number": 3}, config_file)
    assert load_table("missing") == ({}, config_file)


@pytest.mark.parametrize(
    "content",
    [
        b"[example]\noutput = out\n",
        b"example = 5\n",
        b'[example]\noutput = "\xff\xfe"\n',
    ],
)
def test_invalid_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, content: bytes) -> None:
    config_file = tmp_path.joinpath("microflag.toml")
    config_file.write_bytes(content)
    monkeypatch.setenv("MICROFLAG_CONFIG", str(config_file))

    with pytest.raises(ConfigError) as excinfo:
        load_table("example")
    assert excinfo.value.path == config_file


def test_config_is_directory(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MICROFLAG_CONFIG", str(tmp_path))

    with pytest.raises(ConfigError):
        load_table("example")
