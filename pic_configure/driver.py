# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES.
#                         All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import shlex
from functools import cached_property
from subprocess import Popen
from typing import TYPE_CHECKING

from rich.console import Group

from .backend import resolve_backend
from .command import compose
from .layout import check_legacy_layout, validate_input_directory
from .preset import ScriptPresetOptions
from .util.ui import banner, kvtable, shell

if TYPE_CHECKING:
    from rich.console import RenderableType

    from .config import Config
    from .logger import Logger
    from .preset import PresetOptionsProvider
    from .util.types import Command, CommandPart

__all__ = ("ConfigureDriver", "format_verbose")


class ConfigureDriver:
    """Validate an input directory and run cmake on it.

    Parameters
    ----------
    config : Config
        Specific configuration to use

    logger : Logger
        Where to report progress, warnings and the command

    presets : PresetOptionsProvider, optional
        How to obtain preset options from the input directory (default: run
        its cmakeFlags script)

    """

    def __init__(
        self,
        config: Config,
        logger: Logger,
        presets: PresetOptionsProvider | None = None,
    ) -> None:
        self.config = config
        self.logger = logger
        self.presets = ScriptPresetOptions() if presets is None else presets

    def validate(self) -> None:
        """Check that the input directory can be configured.

        Raises
        ------
        InputDirectoryError
            If the input directory does not exist

        LegacyLayoutDetectedError
            If the input directory uses the legacy layout

        """
        input_dir = self.config.options.input_dir
        self.logger.log(f"Validating input directory {input_dir}")
        validate_input_directory(input_dir)
        check_legacy_layout(input_dir)

    @cached_property
    def backend_options(self) -> CommandPart:
        backend = self.config.options.backend
        if backend is None:
            self.logger.log_warning(
                "No backend was specified. Using default backend of the "
                "build system."
            )
            return ()
        options = resolve_backend(backend)
        self.logger.log(f"Backend {backend!r} resolved to {options}")
        return options

    @cached_property
    def preset_options(self) -> CommandPart:
        options = self.config.options
        preset = tuple(
            self.presets.load_preset_options(options.input_dir, options.preset)
        )
        self.logger.log(f"Preset {options.preset} options: {preset}")
        return preset

    @cached_property
    def cmd(self) -> Command:
        """The full cmake command to run.

        The input directory is validated before anything else is looked at,
        so the companion script never runs for a directory that is rejected.

        """
        self.validate()
        return compose(self.config, self.backend_options, self.preset_options)

    @property
    def dry_run(self) -> bool:
        """Whether the command is only printed, not executed.

        Returns
        -------
            bool

        """
        return self.config.output.dry_run

    def run(self) -> int:
        """Print the cmake command and, unless it is a dry run, execute it.

        Returns
        -------
            int, the exit code of cmake

        """
        cmd = self.cmd

        if self.config.output.verbose:
            self.logger.log_screen(format_verbose(self.config, self))

        self.logger.log_screen(shell(shlex.join(cmd)))
        self.logger.flush()

        if self.dry_run:
            return 0

        with Popen(cmd) as proc:
            returncode = proc.wait()

        self.logger.log(f"{cmd[0]} exited with code {returncode}")
        return returncode


def format_verbose(
    config: Config, driver: ConfigureDriver | None = None
) -> RenderableType:
    """Print out the configuration and, if available, the resolved options.

    Parameters
    ----------
    config : Config
        The configuration to display

    driver : ConfigureDriver, optional
        If not None, the backend and preset options are also displayed
        (default: None)

    Returns
    -------
        RenderableType

    """
    renderables: list[RenderableType] = [
        banner("Options", kvtable(config.options.__dict__)),
        banner("Paths", kvtable(config.paths.__dict__)),
    ]

    if driver is not None:
        resolved = {
            "backend": " ".join(driver.backend_options) or "<none>",
            "preset": " ".join(driver.preset_options) or "<none>",
        }
        renderables.append(banner("Resolved Options", kvtable(resolved)))

    return Group(*renderables)
