# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES.
#                         All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

import pic_configure.layout as m
from pic_configure.util.exception import (
    InputDirectoryError,
    LegacyLayoutDetectedError,
)

if TYPE_CHECKING:
    from pathlib import Path


class Test_validate_input_directory:
    def test_exists(self, input_dir: Path) -> None:
        m.validate_input_directory(input_dir)

    def test_missing(self, tmp_path: Path) -> None:
        with pytest.raises(InputDirectoryError, match="does not exist"):
            m.validate_input_directory(tmp_path / "nope")

    def test_file(self, tmp_path: Path) -> None:
        path = tmp_path / "file.txt"
        path.write_text("not a directory")
        with pytest.raises(InputDirectoryError):
            m.validate_input_directory(path)


class Test_check_legacy_layout:
    def test_new_layout(self, input_dir: Path) -> None:
        (input_dir / "include" / "picongpu" / "param").mkdir(parents=True)
        m.check_legacy_layout(input_dir)

    def test_empty(self, input_dir: Path) -> None:
        m.check_legacy_layout(input_dir)

    def test_legacy(self, input_dir: Path) -> None:
        legacy = input_dir / "include" / "picongpu" / "simulation_defines"
        legacy.mkdir(parents=True)
        with pytest.raises(
            LegacyLayoutDetectedError, match="simulation_defines"
        ) as e:
            m.check_legacy_layout(input_dir)
        assert "update your input directory" in str(e.value)

    def test_legacy_file_ignored(self, input_dir: Path) -> None:
        (input_dir / "include" / "picongpu").mkdir(parents=True)
        (input_dir / "include" / "picongpu" / "simulation_defines").touch()
        m.check_legacy_layout(input_dir)
