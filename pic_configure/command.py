# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES.
#                         All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Build the cmake command line, one part at a time.

Every ``cmd_*`` function receives the configuration plus the already
resolved backend and preset options, and returns its part of the command.
``CMD_PARTS`` fixes their order.

"""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from .config import Config
    from .util.types import Command, CommandPart

__all__ = ("CMD_PARTS", "compose")


def cmd_cmake(
    config: Config, backend: CommandPart, preset: CommandPart
) -> CommandPart:
    return (config.paths.cmake_exe,)


def cmd_preset(
    config: Config, backend: CommandPart, preset: CommandPart
) -> CommandPart:
    return tuple(preset)


def cmd_install(
    config: Config, backend: CommandPart, preset: CommandPart
) -> CommandPart:
    return (f"-DCMAKE_INSTALL_PREFIX={config.options.install_prefix}",)


def cmd_extension(
    config: Config, backend: CommandPart, preset: CommandPart
) -> CommandPart:
    return (f"-DPIC_EXTENSION_PATH={config.options.input_dir}",)


def cmd_user(
    config: Config, backend: CommandPart, preset: CommandPart
) -> CommandPart:
    return config.options.cmake


def cmd_backend(
    config: Config, backend: CommandPart, preset: CommandPart
) -> CommandPart:
    return tuple(backend)


def cmd_target(
    config: Config, backend: CommandPart, preset: CommandPart
) -> CommandPart:
    return (str(config.paths.target_dir),)


CMD_PARTS = (
    cmd_cmake,
    cmd_preset,
    cmd_install,
    cmd_extension,
    cmd_user,
    cmd_backend,
    cmd_target,
)


def compose(
    config: Config,
    backend_options: Sequence[str],
    preset_options: Sequence[str],
) -> Command:
    """Assemble the full cmake command.

    Parameters
    ----------
    config : Config
        The configuration to build the command for

    backend_options : Sequence[str]
        Options enabling the selected backend, empty if none was selected

    preset_options : Sequence[str]
        Options printed by the cmakeFlags script of the input directory

    Returns
    -------
        Command

    """
    backend = tuple(backend_options)
    preset = tuple(preset_options)
    parts = (part(config, backend, preset) for part in CMD_PARTS)
    return sum(parts, ())
