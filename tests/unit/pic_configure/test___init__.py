# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES.
#                         All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

import pic_configure as m
import pic_configure.configure

if TYPE_CHECKING:
    from pytest_mock import MockerFixture


def test___all__() -> None:
    for name in m.__all__:
        assert hasattr(m, name)


# The main() function is very simple, this test just confirms that
# all the expected plumbing is hooked up as it is supposed to be
def test_main(mocker: MockerFixture) -> None:
    main_spy = mocker.patch.object(
        pic_configure.configure, "configure_main", return_value=123
    )
    mocker.patch.object(sys, "argv", ["/some/path/pic-configure", "bar"])

    result = m.main()

    main_spy.assert_called_once_with(["/some/path/pic-configure", "bar"])
    assert result == 123
