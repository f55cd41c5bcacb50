# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES.
#                         All rights reserved.
# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

import shlex
import sys
import traceback
from contextlib import suppress
from typing import TYPE_CHECKING, Final

from .config import Config
from .driver import ConfigureDriver
from .logger import Logger
from .util.exception import BaseError

if TYPE_CHECKING:
    from collections.abc import Mapping

    from .preset import PresetOptionsProvider
    from .util.types import ArgList

__all__ = ("configure_main",)

SUCCESS: Final = 0
FAILURE: Final = 1


def _handle_error(logger: Logger, excn_obj: BaseError) -> int:
    message = str(excn_obj) or "[No Error Message Provided]"
    logger.log_error(message, title=excn_obj.title)
    return excn_obj.exit_code


def _handle_crash(logger: Logger, excn_obj: Exception) -> int:
    trace = "".join(traceback.format_exception(excn_obj, chain=True))
    message = str(excn_obj) or "[No Error Message Provided]"
    if (log_path := logger.file_path) is not None:
        message += f", please see {log_path} for additional details."
    logger.log(trace)
    logger.log_error(message, title="CONFIGURATION CRASH")
    return FAILURE


def _configure_main_impl(
    argv: ArgList,
    env: Mapping[str, str] | None,
    presets: PresetOptionsProvider | None,
) -> int:
    try:
        config = Config(argv, env)
    except BaseError as e:
        # no log file has been requested yet
        return _handle_error(Logger(), e)

    with Logger(config.output.log_file) as logger:
        logger.log(f"Configuring with: {shlex.join(argv)}")
        driver = ConfigureDriver(config, logger, presets)
        try:
            return driver.run()
        except BaseError as e:
            return _handle_error(logger, e)
        except KeyboardInterrupt:
            logger.log_error(
                "Configuration was aborted by the user (received SIGINT)",
                title="Configuration Aborted",
            )
            return FAILURE
        except Exception as e:
            return _handle_crash(logger, e)


def configure_main(
    argv: ArgList,
    env: Mapping[str, str] | None = None,
    presets: PresetOptionsProvider | None = None,
) -> int:
    """A main function for pic-configure that can be used programmatically
    or by entry-points.

    Parameters
    ----------
        argv : ArgList
            Command-line arguments, including the program name

        env : Mapping[str, str], optional
            Environment to read defaults such as PIC_BACKEND from
            (default: ``os.environ``)

        presets : PresetOptionsProvider, optional
            Source of preset options (default: run the cmakeFlags script of
            the input directory)

    Returns
    -------
        int, a process return code

    """
    try:
        return _configure_main_impl(argv, env, presets)
    finally:
        # Flush both streams on end so that error messages are not garbled
        # with the output of cmake
        with suppress(Exception):
            sys.stdout.flush()
        with suppress(Exception):
            sys.stderr.flush()
