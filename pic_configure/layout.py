# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES.
#                         All rights reserved.
# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

from typing import TYPE_CHECKING

from .defaults import LEGACY_LAYOUT_SUBDIR
from .util.exception import InputDirectoryError, LegacyLayoutDetectedError

if TYPE_CHECKING:
    from pathlib import Path

__all__ = ("check_legacy_layout", "validate_input_directory")


def validate_input_directory(path: Path) -> None:
    r"""Ensure the input directory exists.

    Parameters
    ----------
    path : Path
        The input directory given on the command line.

    Raises
    ------
    InputDirectoryError
        If `path` does not exist or is not a directory.
    """
    if not path.is_dir():
        msg = f'Path "{path}" does not exist.'
        raise InputDirectoryError(msg)


def check_legacy_layout(path: Path) -> None:
    r"""Reject input directories still using the old
    ``include/picongpu/simulation_defines/`` structure.

    Parameters
    ----------
    path : Path
        The input directory given on the command line.

    Raises
    ------
    LegacyLayoutDetectedError
        If the legacy subdirectory exists in `path`.
    """
    legacy = path / LEGACY_LAYOUT_SUBDIR
    if legacy.is_dir():
        msg = (
            f"{LEGACY_LAYOUT_SUBDIR.name}/ directory found in "
            f"{legacy.parent}/! Please update your input directory to the "
            "new structure!"
        )
        raise LegacyLayoutDetectedError(msg)
