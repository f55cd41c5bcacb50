# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES.
#                         All rights reserved.
# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

import logging
import textwrap
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from rich.align import Align, AlignMethod
from rich.console import Console, RenderableType
from rich.panel import Panel
from rich.text import Text
from typing_extensions import Self

if TYPE_CHECKING:
    from collections.abc import Sequence


class Logger:
    __slots__ = ("_console", "_err_console", "_file_logger")
    __unique_id: ClassVar = 0

    def __init__(
        self,
        path: Path | None = None,
        *,
        console: Console | None = None,
        err_console: Console | None = None,
    ) -> None:
        r"""Construct a Logger.

        Parameters
        ----------
        path : Path, optional
            The path at which to create the on-disk log. If not given, file
            logging is disabled.
        console : Console, optional
            The console to print regular output to, defaults to stdout.
        err_console : Console, optional
            The console to print diagnostics to, defaults to stderr.
        """
        self._console = Console(soft_wrap=True) if console is None else console
        self._err_console = (
            Console(stderr=True) if err_console is None else err_console
        )
        self._file_logger = self._create_logger(path)

    @staticmethod
    def _create_logger(path: Path | None) -> logging.Logger:
        # Every Logger gets its own logging.Logger so handlers of different
        # instances never mix
        logger = logging.getLogger(f"pic_configure.run_{Logger.__unique_id}")
        Logger.__unique_id += 1
        logger.setLevel(logging.INFO)
        logger.propagate = False
        handler: logging.Handler
        if path is None:
            handler = logging.NullHandler()
        else:
            handler = logging.FileHandler(path.resolve(), mode="w", delay=True)
            handler.setFormatter(logging.Formatter("%(message)s"))
        handler.setLevel(logger.level)
        logger.addHandler(handler)
        return logger

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    @property
    def console(self) -> Console:
        r"""Get the console for regular output.

        Returns
        -------
        Console
            The stdout console.
        """
        return self._console

    @property
    def err_console(self) -> Console:
        r"""Get the console for warnings and errors.

        Returns
        -------
        Console
            The stderr console.
        """
        return self._err_console

    @property
    def file_path(self) -> Path | None:
        r"""Retrieve the path to the file handler log file.

        Returns
        -------
        file_path : Path | None
            The path to the log file, e.g. '/path/to/configure.log', or None
            if file logging is disabled.
        """
        for handler in self._file_logger.handlers:
            if isinstance(handler, logging.FileHandler):
                return Path(handler.baseFilename)
        return None

    def build_multiline_message(
        self,
        title: str,
        text: str,
        *,
        width: int | None = None,
        divider_char: str = "-",
    ) -> str:
        r"""Format a message as a plain-text block for the log file.

        A non-empty title is centered above a line of ``divider_char``. Each
        line of ``text`` is wrapped and indented by two spaces, unless the
        body fits on a single line, which is centered instead.

        Parameters
        ----------
        title : str
            The title of the block, e.g. 'WARNING'. May be empty.
        text : str
            The body of the message.
        width : int, optional
            The width of the block, defaults to the console width minus one.
        divider_char : str, '-'
            Character of the line below the title, empty for no line.

        Returns
        -------
        message : str
            The formatted block.
        """
        if width is None:
            width = self.console.width - 1

        body = [
            line.rstrip()
            for para in text.splitlines()
            for line in (
                textwrap.wrap(
                    para,
                    width=width - 2,
                    initial_indent="  ",
                    subsequent_indent="  ",
                    break_long_words=False,
                    break_on_hyphens=False,
                )
                or [""]
            )
        ]
        if len(body) == 1:
            body = [body[0].strip().center(width).rstrip()]

        header = []
        if title:
            header.append(title.center(width).rstrip())
            if divider_char:
                header.append(divider_char * width)
        return "\n".join(header + body)

    def flush(self) -> None:
        r"""Flush any pending log writes to disk or screen."""
        for handler in self._file_logger.handlers:
            handler.flush()
        self.console.file.flush()
        self.err_console.file.flush()

    def close(self) -> None:
        r"""Flush and release the on-disk log."""
        self.flush()
        for handler in list(self._file_logger.handlers):
            handler.close()
            self._file_logger.removeHandler(handler)

    def log(self, message: str | Sequence[str]) -> None:
        r"""Log a message to the log file only.

        Parameters
        ----------
        message : str | Sequence[str]
            The message, or sequence of lines to log to file.
        """
        if not isinstance(message, str):
            message = "\n".join(message)
        self._file_logger.log(self._file_logger.level, message)

    @staticmethod
    def _plain(mess: RenderableType) -> str:
        console = Console(color_system=None, soft_wrap=True)
        with console.capture() as capture:
            console.print(mess, end="")
        return capture.get()

    def log_screen(self, mess: RenderableType) -> None:
        r"""Print a message to screen, and its plain text to the log file.

        Parameters
        ----------
        mess : RenderableType
            The message to print to screen.
        """
        self.log(self._plain(mess) if not isinstance(mess, str) else mess)
        self.console.print(mess)

    def log_boxed(
        self,
        message: str,
        *,
        title: str = "",
        title_style: str = "",
        align: AlignMethod = "left",
    ) -> None:
        r"""Log a message surrounded by a box to the diagnostics console.

        Parameters
        ----------
        message : str
            The message to log.
        title : str, ''
            An optional title for the box.
        title_style : str, ''
            Optional additional styling for the title.
        align : AlignMethod, 'left'
            How to align the text.
        """
        self.log_divider()
        self.log(self.build_multiline_message(title, message))
        self.log_divider()

        if title and title_style:
            title = f"[{title_style}]{title}[/]"
        panel = Panel(
            Align(Text(message), align=align),
            title=title or None,
            style=title_style,
        )
        self.err_console.print(panel)

    def log_warning(self, message: str, *, title: str = "WARNING") -> None:
        r"""Log a warning.

        Parameters
        ----------
        message : str
            The message to print.
        title : str, 'WARNING'
            The title to use for the box.
        """
        self.log_boxed(
            message,
            title=f"***** {title.strip()} *****",
            title_style="bold yellow",
        )

    def log_error(self, message: str, *, title: str = "ERROR") -> None:
        r"""Log an error.

        Parameters
        ----------
        message : str
            The message to print.
        title : str, 'ERROR'
            The title to use for the box.
        """
        self.log_boxed(
            message,
            title=f"***** {title.strip()} *****",
            title_style="bold red",
        )

    def log_divider(self) -> None:
        r"""Append a dividing line to the log file."""
        self.log("=" * (self.console.width - 1))
