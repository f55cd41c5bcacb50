# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES.
#                         All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Map compute backend specs of the form ``name[:architecture]`` to the
alpaka CMake options that enable them.

"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from .util.exception import MalformedBackendSpecError, UnsupportedBackendError
from .util.types import CommandPart

__all__ = (
    "BACKENDS",
    "BackendSpec",
    "parse_backend",
    "resolve_backend",
)


@dataclass(frozen=True)
class _BackendOptions:
    base: CommandPart
    arch_var: str


_BACKEND_OPTIONS: Final = {
    "cuda": _BackendOptions(
        base=(
            "-DALPAKA_ACC_GPU_CUDA_ENABLE=ON",
            "-DALPAKA_ACC_GPU_CUDA_ONLY_MODE=ON",
        ),
        arch_var="ALPAKA_CUDA_ARCH",
    ),
    "omp2b": _BackendOptions(
        base=("-DALPAKA_ACC_CPU_B_OMP2_T_SEQ_ENABLE=ON",),
        arch_var="PMACC_CPU_ARCH",
    ),
    "serial": _BackendOptions(
        base=("-DALPAKA_ACC_CPU_B_SEQ_T_SEQ_ENABLE=ON",),
        arch_var="PMACC_CPU_ARCH",
    ),
    "tbb": _BackendOptions(
        base=("-DALPAKA_ACC_CPU_B_TBB_T_SEQ_ENABLE=ON",),
        arch_var="PMACC_CPU_ARCH",
    ),
    "threads": _BackendOptions(
        base=("-DALPAKA_ACC_CPU_B_SEQ_T_THREADS_ENABLE=ON",),
        arch_var="PMACC_CPU_ARCH",
    ),
}

#: The supported backend names
BACKENDS: Final = tuple(_BACKEND_OPTIONS)


@dataclass(frozen=True)
class BackendSpec:
    """A parsed ``name[:architecture]`` backend selection."""

    #: One of BACKENDS
    name: str

    #: Compiler dependent target, e.g. "35;60" for cuda or "native" for CPUs
    architecture: str | None = None

    @property
    def base_options(self) -> CommandPart:
        return _BACKEND_OPTIONS[self.name].base

    @property
    def arch_option(self) -> str | None:
        if not self.architecture:
            return None
        arch_var = _BACKEND_OPTIONS[self.name].arch_var
        return f"-D{arch_var}={self.architecture}"

    def to_options(self) -> CommandPart:
        """The CMake options enabling this backend.

        Returns
        -------
            CommandPart

        """
        arch = self.arch_option
        return self.base_options + (() if arch is None else (arch,))


def parse_backend(token: str) -> BackendSpec:
    """Parse a ``name[:architecture]`` backend spec.

    Parameters
    ----------
    token : str
        The backend spec, e.g. "cuda", "cuda:35;60" or "omp2b:native"

    Returns
    -------
        BackendSpec

    Raises
    ------
    MalformedBackendSpecError
        If ``token`` contains more than one ':'
    UnsupportedBackendError
        If the backend name is not one of BACKENDS

    """
    parts = token.split(":")
    if len(parts) > 2:
        msg = (
            f"-b|--backend must contain 'backend:arch' or 'backend', "
            f"got {token!r}"
        )
        raise MalformedBackendSpecError(msg)

    name = parts[0]
    if name not in _BACKEND_OPTIONS:
        msg = (
            f"unsupported backend given {token!r} "
            f"(supported backends: {', '.join(BACKENDS)})"
        )
        raise UnsupportedBackendError(msg)

    return BackendSpec(name, parts[1] if len(parts) == 2 else None)


def resolve_backend(token: str) -> CommandPart:
    """Resolve a backend spec to the CMake options that enable it.

    Parameters
    ----------
    token : str
        The backend spec, e.g. "cuda", "cuda:35;60" or "omp2b:native"

    Returns
    -------
        CommandPart

    """
    return parse_backend(token).to_options()
