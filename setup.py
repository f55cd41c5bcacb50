#!/usr/bin/env python3

# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES.
#                         All rights reserved.
# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

from setuptools import find_packages, setup

setup(
    name="pic-configure",
    version="0.1.0",
    description="Configure PIConGPU input directories with CMake",
    python_requires=">=3.10",
    packages=find_packages(include=["pic_configure", "pic_configure.*"]),
    install_requires=["rich", "typing_extensions"],
    extras_require={"test": ["pytest", "pytest-mock"]},
    entry_points={
        "console_scripts": ["pic-configure = pic_configure:main"],
    },
)
