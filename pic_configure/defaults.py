# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES.
#                         All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from pathlib import Path

__all__ = (
    "CMAKE_EXECUTABLE",
    "CMAKE_FLAGS_FILE",
    "CMAKE_TARGET_SUBDIR",
    "LEGACY_LAYOUT_SUBDIR",
    "PIC_BACKEND_ENV",
    "PIC_CMAKE_ENV",
    "PICSRC_ENV",
    "PRESET",
    "SOURCE_DIR",
)

#: Environment variable supplying a backend when -b/--backend is absent
PIC_BACKEND_ENV = "PIC_BACKEND"

#: Environment variable naming the root of the PIConGPU source tree
PICSRC_ENV = "PICSRC"

#: Environment variable overriding the cmake executable
PIC_CMAKE_ENV = "PIC_CMAKE"

CMAKE_EXECUTABLE = "cmake"

PRESET = 0

#: Name of the executable companion script inside an input directory
CMAKE_FLAGS_FILE = "cmakeFlags"

#: Removed after PIConGPU 0.3.X
LEGACY_LAYOUT_SUBDIR = Path("include", "picongpu", "simulation_defines")

CMAKE_TARGET_SUBDIR = Path("include", "picongpu")

#: Used when PICSRC is not set: the checkout this package lives in
SOURCE_DIR = Path(__file__).resolve().parent.parent
