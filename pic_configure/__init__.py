# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES.
#                         All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from .backend import BACKENDS, BackendSpec, parse_backend, resolve_backend
from .config import Config
from .driver import ConfigureDriver
from .preset import PresetOptionsProvider, ScriptPresetOptions

__all__ = (
    "BACKENDS",
    "BackendSpec",
    "Config",
    "ConfigureDriver",
    "PresetOptionsProvider",
    "ScriptPresetOptions",
    "main",
    "parse_backend",
    "resolve_backend",
)


def main() -> int:
    import sys

    from .configure import configure_main

    return configure_main(sys.argv)
