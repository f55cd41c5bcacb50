# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES.
#                         All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from argparse import Namespace
from dataclasses import dataclass

import pic_configure.util.types as m


@dataclass(frozen=True)
class _TestObj(m.DataclassMixin):
    a: int
    b: str


class TestDataclassMixin:
    def test_str(self) -> None:
        out = str(_TestObj(a=10, b="foo"))
        assert "a: 10" in out
        assert "b: foo" in out


class Test_object_to_dataclass:
    def test_basic(self) -> None:
        ns = Namespace(a=1, b="bar", c="extra")
        assert m.object_to_dataclass(ns, _TestObj) == _TestObj(a=1, b="bar")

    def test_overrides(self) -> None:
        ns = Namespace(a=1, b="bar")
        obj = m.object_to_dataclass(ns, _TestObj, b="baz")
        assert obj == _TestObj(a=1, b="baz")
