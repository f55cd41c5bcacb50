# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES.
#                         All rights reserved.
# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

from typing import ClassVar


class BaseError(Exception):
    r"""Base exception.

    Every error carries the process exit code that ``pic-configure`` returns
    when the error terminates a run, and a short title used when reporting it.
    """

    exit_code: ClassVar[int] = 1
    title: ClassVar[str] = "Configuration failed"


class InvalidFlagError(BaseError):
    r"""An unknown flag, a bad flag value, or a missing positional argument."""

    title = "Invalid Option"


class UnsupportedBackendError(BaseError):
    r"""The backend name is not one of the supported backends."""

    title = "Unsupported Backend"


class MalformedBackendSpecError(BaseError):
    r"""The backend spec has more than one ':' separator."""

    title = "Malformed Backend"


class InputDirectoryError(BaseError):
    r"""The input directory does not exist or is not a directory."""

    title = "Not A Directory"


class PresetScriptFailedError(BaseError):
    r"""An error raised when the cmakeFlags companion script fails."""

    exit_code = 2
    title = "Preset Script Failed"

    def __init__(
        self,
        command: str,
        return_code: int | None,
        *,
        reason: str | None = None,
    ) -> None:
        self.command = command
        self.return_code = return_code
        self.reason = reason
        lines = [f"Executing '{command}' failed!"]
        if return_code is not None:
            lines.append(f"Returned exit-code: {return_code}")
        if reason is None:
            lines.append("Is the file executable? (chmod u+x ...)")
        else:
            lines.append(reason)
        super().__init__("\n".join(lines))


class LegacyLayoutDetectedError(BaseError):
    r"""The input directory uses the pre-0.4 layout with
    ``include/picongpu/simulation_defines``.
    """

    exit_code = 3
    title = "Legacy Input Directory"
