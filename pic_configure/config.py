# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES.
#                         All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Consolidate command line arguments and environment defaults into an
immutable configuration for the configure driver.

"""
from __future__ import annotations

import os
import shlex
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from . import defaults
from .args import parse_args
from .util.exception import InvalidFlagError
from .util.types import DataclassMixin, object_to_dataclass

if TYPE_CHECKING:
    from collections.abc import Mapping

    from .util.types import ArgList

__all__ = ("Config",)


@dataclass(frozen=True)
class Options(DataclassMixin):
    input_dir: Path
    install: Path | None
    backend: str | None
    cmake: tuple[str, ...]
    preset: int

    def __post_init__(self) -> None:
        # fix up cmake so that each option is a separate entry, the user may
        # have passed several options in a single quoted string
        try:
            cmake = tuple(
                part for value in self.cmake for part in shlex.split(value)
            )
        except ValueError as e:
            raise InvalidFlagError(
                f"-c|--cmake: cannot split options: {e}"
            ) from e
        object.__setattr__(self, "cmake", cmake)

    @property
    def install_prefix(self) -> Path:
        """The explicit install path, else the input directory."""
        return self.input_dir if self.install is None else self.install


@dataclass(frozen=True)
class Output(DataclassMixin):
    dry_run: bool
    verbose: bool
    log_file: Path | None


@dataclass(frozen=True)
class Paths(DataclassMixin):
    cmake_exe: str
    source_dir: Path

    @property
    def target_dir(self) -> Path:
        """The CMake project directory that gets configured."""
        return self.source_dir / defaults.CMAKE_TARGET_SUBDIR


def _backend_or_none(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None


class Config:
    """A centralized configuration object that provides the information
    needed by the configure driver in order to run.

    Parameters
    ----------
    argv : ArgList
        command-line arguments to use when building the configuration

    env : Mapping[str, str], optional
        environment to read defaults from (default: ``os.environ``)

    """

    def __init__(
        self, argv: ArgList, env: Mapping[str, str] | None = None
    ) -> None:
        if env is None:
            env = os.environ

        self.argv = argv

        args = parse_args(argv[1:])

        # PIC_BACKEND only applies without -b, an empty value from either
        # source means no backend at all
        backend = _backend_or_none(
            env.get(defaults.PIC_BACKEND_ENV)
            if args.backend is None
            else args.backend
        )

        self.options = object_to_dataclass(
            args,
            Options,
            input_dir=Path(args.input_dir),
            install=None if args.install is None else Path(args.install),
            backend=backend,
            cmake=tuple(args.cmake),
        )
        self.output = object_to_dataclass(
            args,
            Output,
            log_file=None if args.log_file is None else Path(args.log_file),
        )

        source_dir = env.get(defaults.PICSRC_ENV, "").strip()
        self.paths = Paths(
            cmake_exe=env.get(defaults.PIC_CMAKE_ENV, "").strip()
            or defaults.CMAKE_EXECUTABLE,
            source_dir=(
                Path(source_dir) if source_dir else defaults.SOURCE_DIR
            ),
        )
