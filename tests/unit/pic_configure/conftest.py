# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES.
#                         All rights reserved.
# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

import stat
import textwrap
from pathlib import Path
from typing import TYPE_CHECKING, Any

import pytest
from rich.console import Console

from pic_configure.config import Config
from pic_configure.logger import Logger

if TYPE_CHECKING:
    from collections.abc import Callable

GenConfig = Any
MakeScript = Any


@pytest.fixture
def input_dir(tmp_path: Path) -> Path:
    path = tmp_path / "mySimulation"
    path.mkdir()
    return path


@pytest.fixture
def source_dir(tmp_path: Path) -> Path:
    return tmp_path / "picongpu"


@pytest.fixture
def base_env(source_dir: Path) -> dict[str, str]:
    return {"PICSRC": str(source_dir)}


@pytest.fixture
def genconfig(
    input_dir: Path, base_env: dict[str, str]
) -> Callable[..., Config]:
    def gen(
        args: list[str] | None = None,
        *,
        env: dict[str, str] | None = None,
        path: Path | None = None,
    ) -> Config:
        argv = ["pic-configure", *(args or []), str(path or input_dir)]
        return Config(argv, {**base_env, **(env or {})})

    return gen


@pytest.fixture
def make_script(input_dir: Path) -> Callable[..., Path]:
    def make(body: str, *, executable: bool = True) -> Path:
        script = input_dir / "cmakeFlags"
        script.write_text(
            "#!/usr/bin/env bash\n" + textwrap.dedent(body).strip() + "\n"
        )
        if executable:
            script.chmod(script.stat().st_mode | stat.S_IXUSR)
        return script

    return make


class StubPresets:
    def __init__(self, options: list[str] | None = None) -> None:
        self.options = options or []
        self.calls: list[tuple[Path, int]] = []

    def load_preset_options(self, directory: Path, preset: int) -> list[str]:
        self.calls.append((directory, preset))
        return list(self.options)


@pytest.fixture
def stub_presets() -> StubPresets:
    return StubPresets()


@pytest.fixture
def logger() -> Logger:
    return Logger(
        console=Console(color_system=None, soft_wrap=True),
        err_console=Console(stderr=True, color_system=None, soft_wrap=True),
    )
