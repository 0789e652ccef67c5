#!/usr/bin/env python3
# Copyright (C) 2026 Alex Stoyanov
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License along with this program.
# If not, see <https://www.gnu.org/licenses/>.

from __future__ import annotations

from collections.abc import Callable

from ..core.errors import LayoutError

Block = Callable[[], None]


class HeaderFooterReplay:
    """Holds the registered header and footer blocks and replays them on demand.

    Only one block of each kind is active; registering again replaces it. A
    replay never starts while another one is running, so header or footer
    content can not recurse into a further page transition.
    """

    def __init__(self) -> None:
        self.header: Block | None = None
        self.footer: Block | None = None
        self.header_height = 0.0
        self.footer_height = 0.0
        self._running: str | None = None

    @property
    def running(self) -> str | None:
        return self._running

    def register_header(self, block: Block, height: float = 0.0) -> None:
        if height < 0:
            raise ValueError("header height cannot be negative")
        self.header = block
        self.header_height = float(height)

    def register_footer(self, block: Block, height: float) -> None:
        if height < 0:
            raise ValueError("footer height cannot be negative")
        self.footer = block
        self.footer_height = float(height)

    def run_header(self) -> None:
        self._run("header", self.header)

    def run_footer(self) -> None:
        self._run("footer", self.footer)

    def _run(self, name: str, block: Block | None) -> None:
        if block is None:
            return
        if self._running is not None:
            raise LayoutError(f"{name} replay requested while the {self._running} is replaying")
        self._running = name
        try:
            block()
        finally:
            self._running = None


__all__ = ["Block", "HeaderFooterReplay"]
