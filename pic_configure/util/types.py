# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES.
#                         All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Provide types that are useful throughout the configure code.

"""
from __future__ import annotations

from dataclasses import Field
from typing import Any, Protocol, TypeVar

from rich.console import Console
from typing_extensions import TypeAlias

from .ui import kvtable

__all__ = (
    "ArgList",
    "Command",
    "CommandPart",
    "DataclassMixin",
    "DataclassProtocol",
    "object_to_dataclass",
)


#: Represent command line arguments
ArgList: TypeAlias = list[str]


#: Represent part of a command-line command to execute
CommandPart: TypeAlias = tuple[str, ...]


#: Represent all the parts of a command-line command to execute
Command: TypeAlias = tuple[str, ...]


# This seems like it ought to be in stdlib
class DataclassProtocol(Protocol):
    """Afford better type checking for our dataclasses."""

    __dataclass_fields__: dict[str, Field[Any]]


class DataclassMixin(DataclassProtocol):
    """A mixin for automatically pretty-printing a dataclass."""

    def __str__(self) -> str:
        console = Console(color_system=None, soft_wrap=True)
        with console.capture() as capture:
            console.print(kvtable(self.__dict__), end="")
        return capture.get()


T = TypeVar("T", bound=DataclassProtocol)


def object_to_dataclass(obj: object, typ: type[T], **overrides: Any) -> T:
    """Automatically generate a dataclass from an object with appropriate
    attributes.

    Parameters
    ----------
    obj: object
        An object to pull values from (e.g. an argparse Namespace)

    typ:
        A dataclass type to generate from ``obj``

    **overrides:
        Values to use in place of the corresponding attributes of ``obj``

    Returns
    -------
        The generated dataclass instance

    """
    kws = {
        name: overrides[name] if name in overrides else getattr(obj, name)
        for name in typ.__dataclass_fields__
    }
    return typ(**kws)
