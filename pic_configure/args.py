# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES.
#                         All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Command line arguments accepted by pic-configure.

"""
from __future__ import annotations

from argparse import (
    Action,
    ArgumentParser,
    Namespace,
    RawDescriptionHelpFormatter,
)
from dataclasses import dataclass, fields as dataclasses_fields
from typing import TYPE_CHECKING, Any, Literal, NoReturn, TypeVar

from typing_extensions import TypeAlias

from . import defaults
from .backend import BACKENDS
from .util.exception import InvalidFlagError

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

__all__ = (
    "ARGUMENTS",
    "ArgSpec",
    "Argument",
    "BACKEND",
    "CMAKE",
    "DRY_RUN",
    "INPUT_DIR",
    "INSTALL",
    "LOG_FILE",
    "PRESET",
    "VERBOSE",
    "parse_args",
    "parser",
)

# https://docs.python.org/3/library/argparse.html#action
ActionType: TypeAlias = (
    Literal[
        "store",
        "store_const",
        "store_true",
        "append",
        "append_const",
        "count",
        "help",
        "version",
        "extend",
    ]
    | type[Action]
)

# https://docs.python.org/3/library/argparse.html#nargs
NargsType: TypeAlias = Literal["?", "*", "+", "..."]


class Unset:
    pass


T = TypeVar("T")

NotRequired: TypeAlias = type[Unset] | T


@dataclass(frozen=True)
class ArgSpec:
    dest: NotRequired[str] = Unset
    action: NotRequired[ActionType] = Unset
    nargs: NotRequired[int | NargsType] = Unset
    const: NotRequired[Any] = Unset
    default: NotRequired[Any] = Unset
    type: NotRequired[type[Any] | Callable[[str], Any]] = Unset
    choices: NotRequired[Sequence[Any]] = Unset
    help: NotRequired[str] = Unset
    metavar: NotRequired[str] = Unset
    required: NotRequired[bool] = Unset

    def as_pruned_dict(self) -> dict[str, Any]:
        ret = {}
        for f in dataclasses_fields(self):
            name = f.name
            value = getattr(self, name)
            if value is not Unset:
                ret[name] = value
        return ret


@dataclass(frozen=True)
class Argument:
    #: The flags (or the positional name), e.g. ("-i", "--install")
    flags: tuple[str, ...]

    #: The argparse argument spec.
    spec: ArgSpec

    @property
    def takes_value(self) -> bool:
        return self.spec.action in (Unset, "store", "append", "extend")

    def add_to_argparser(self, parser: ArgumentParser) -> None:
        """Add the contents of this Argument to an argument parser.

        Parameters
        ----------
        parser : ArgumentParser
            The argument parser to add to.

        """
        parser.add_argument(*self.flags, **self.spec.as_pruned_dict())


INSTALL = Argument(
    ("-i", "--install"),
    ArgSpec(
        dest="install",
        default=None,
        metavar="PATH",
        help="path where picongpu shall be installed "
        "(default is <inputDirectory>)",
    ),
)


BACKEND = Argument(
    ("-b", "--backend"),
    ArgSpec(
        dest="backend",
        default=None,
        metavar="SPEC",
        help="set compute backend and optionally the architecture, "
        "syntax: backend[:architecture], supported backends: "
        f"{', '.join(BACKENDS)} "
        '(e.g. "cuda:35;60" or "omp2b:native" or "omp2b"). '
        f"Default: taken from the {defaults.PIC_BACKEND_ENV} environment "
        "variable if set. Note: architecture names are compiler dependent",
    ),
)


CMAKE = Argument(
    ("-c", "--cmake"),
    ArgSpec(
        dest="cmake",
        action="append",
        default=[],
        metavar="OPTIONS",
        help="overwrite options for cmake, can appear more than once "
        '(e.g. "-DPIC_VERBOSE=21 -DCMAKE_BUILD_TYPE=Debug")',
    ),
)


PRESET = Argument(
    ("-t", "--preset"),
    ArgSpec(
        dest="preset",
        type=int,
        default=defaults.PRESET,
        metavar="N",
        help=f"configure this preset from {defaults.CMAKE_FLAGS_FILE} "
        f"(default: {defaults.PRESET})",
    ),
)


DRY_RUN = Argument(
    ("--dry-run",),
    ArgSpec(
        dest="dry_run",
        action="store_true",
        help="print the cmake command but do not execute it",
    ),
)


VERBOSE = Argument(
    ("-v", "--verbose"),
    ArgSpec(
        dest="verbose",
        action="store_true",
        help="print the resolved configuration before running cmake",
    ),
)


LOG_FILE = Argument(
    ("--log-file",),
    ArgSpec(
        dest="log_file",
        default=None,
        metavar="PATH",
        help="also write a plain-text log of the configuration to PATH",
    ),
)


INPUT_DIR = Argument(
    ("input_dir",),
    ArgSpec(
        metavar="inputDirectory",
        help="the input (extension) directory of the simulation",
    ),
)


ARGUMENTS = (
    INSTALL,
    BACKEND,
    CMAKE,
    PRESET,
    DRY_RUN,
    VERBOSE,
    LOG_FILE,
    INPUT_DIR,
)


class _ArgumentParser(ArgumentParser):
    def error(self, message: str) -> NoReturn:
        raise InvalidFlagError(f"{self.prog}: {message}")


parser = _ArgumentParser(
    prog="pic-configure",
    description="Configure PIConGPU with CMake",
    epilog="Generates a call to CMake and provides short-hand access to "
    "selected PIConGPU CMake options. Advanced users can always run "
    "'ccmake .' after this call for further compilation options.",
    formatter_class=RawDescriptionHelpFormatter,
    allow_abbrev=False,
)

for arg in ARGUMENTS:
    arg.add_to_argparser(parser)


def _attach_values(argv: Sequence[str]) -> list[str]:
    # "-c -DFOO=ON" would otherwise be read as a flag without a value
    long_flags: dict[str, str] = {}
    for arg in ARGUMENTS:
        if arg.takes_value and arg.flags[0].startswith("-"):
            for flag in arg.flags:
                long_flags[flag] = arg.flags[-1]

    ret: list[str] = []
    it = iter(argv)
    for token in it:
        if (flag := long_flags.get(token)) is not None:
            value = next(it, None)
            if value is None:
                ret.append(token)
                break
            if value.startswith("-"):
                ret.append(f"{flag}={value}")
                continue
            ret.extend((token, value))
            continue
        ret.append(token)
    return ret


def parse_args(argv: Sequence[str]) -> Namespace:
    """Parse pic-configure command line arguments.

    Parameters
    ----------
    argv : Sequence[str]
        Command-line arguments, excluding the program name

    Returns
    -------
        Namespace

    Raises
    ------
    InvalidFlagError
        On unknown flags, invalid values or a missing input directory

    """
    return parser.parse_args(_attach_values(argv))
