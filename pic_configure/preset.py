# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES.
#                         All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Obtain preset CMake options from an input directory.

An input directory may ship an executable ``cmakeFlags`` file. Called as
``cmakeFlags <presetNumber>`` it prints the CMake options for that preset to
stdout and exits with 0.

"""
from __future__ import annotations

import shlex
from subprocess import PIPE, run
from typing import TYPE_CHECKING, Protocol

from .defaults import CMAKE_FLAGS_FILE
from .util.exception import PresetScriptFailedError

if TYPE_CHECKING:
    from pathlib import Path

__all__ = (
    "PresetOptionsProvider",
    "ScriptPresetOptions",
)


class PresetOptionsProvider(Protocol):
    def load_preset_options(self, directory: Path, preset: int) -> list[str]:
        ...


class ScriptPresetOptions:
    """Load preset options by running the ``cmakeFlags`` script of an
    input directory.

    An input directory without the script has no preset options.

    """

    def script_path(self, directory: Path) -> Path:
        return directory / CMAKE_FLAGS_FILE

    def load_preset_options(self, directory: Path, preset: int) -> list[str]:
        """Run ``<directory>/cmakeFlags <preset>`` and split its output into
        separate options.

        Parameters
        ----------
        directory : Path
            The input directory

        preset : int
            The preset number to pass to the script

        Returns
        -------
            list[str]

        Raises
        ------
        PresetScriptFailedError
            If the script cannot be executed or exits with a non-zero code

        """
        script = self.script_path(directory)
        if not script.is_file():
            return []

        # Path(".") / "cmakeFlags" is a bare name that run() looks up on $PATH
        cmd = [str(script.absolute()), str(preset)]
        try:
            proc = run(cmd, stdout=PIPE, text=True, check=False)
        except OSError as e:
            raise PresetScriptFailedError(shlex.join(cmd), None) from e

        if proc.returncode != 0:
            raise PresetScriptFailedError(shlex.join(cmd), proc.returncode)

        try:
            return shlex.split(proc.stdout)
        except ValueError as e:
            raise PresetScriptFailedError(
                shlex.join(cmd), None, reason=f"Unusable output: {e}"
            ) from e
