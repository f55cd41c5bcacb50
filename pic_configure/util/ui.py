# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES.
#                         All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Helper functions for simple text UI output.

All functions return ``rich`` renderables; printing them is left to the
caller.

"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

if TYPE_CHECKING:
    from collections.abc import Iterable

__all__ = (
    "UI_WIDTH",
    "banner",
    "kvtable",
    "shell",
)

#: Width for terminal output headers and footers.
UI_WIDTH = 80


def banner(title: str, content: Any) -> Panel:
    """Generate a titled panel around some content.

    Parameters
    ----------
    title : str
        A title for the banner

    content : RenderableType
        Content to display inside the banner

    Returns
    -------
        Panel

    """
    return Panel(content, title=title, width=UI_WIDTH)


def shell(cmd: str, *, label: str = "cmake command:") -> Text:
    """Format a shell command, prefixed with a highlighted label.

    Parameters
    ----------
    cmd : str
        The command text to display

    label : str, optional
        Highlighted text to display in front of the command. If empty, the
        command is displayed on its own.

    Returns
    -------
        Text

    """
    if not label:
        return Text(cmd, style="dim white")
    text = Text()
    text.append(label, style="green")
    text.append(" ")
    text.append(cmd)
    return text


def kvtable(
    items: dict[str, Any], *, keys: Iterable[str] | None = None
) -> Table:
    """Format a dictionary as a basic table.

    Parameters
    ----------
    items : dict[str, Any]
        The dictionary of items to format.

    keys : iterable[str], optional
        If not None, only the specified subset of keys is included in the
        table output (default: None)

    Returns
    -------
        Table

    """
    table = Table.grid(padding=(0, 1, 0, 0))
    table.add_column(style="dim white", justify="right")
    table.add_column(style="cyan")
    for key in items if keys is None else keys:
        table.add_row(f"{key}:", str(items[key]))
    return table
