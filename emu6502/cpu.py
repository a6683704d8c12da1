"""6502 processor state: registers, memory and memory dumps."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import TextIO

# Memory layout
ZERO_PAGE_FIRST = 0x0000
ZERO_PAGE_LAST = 0x00FF
STACK_FIRST = 0x0100
STACK_LAST = 0x01FF
RAM_FIRST = 0x0200
RAM_LAST = 0x7FFF
ROM_FIRST = 0x8000
ROM_LAST = 0xFFFF

MEMORY_SIZE = 0xFFFF

_BYTES_PER_ROW = 16


def _new_memory() -> bytearray:
    return bytearray(MEMORY_SIZE)


@dataclass
class CPU:
    """Registers and attached memory of a 6502 processor.

    ``p`` holds the processor flags in NV-BDIZC order.
    """

    a: int = 0
    p: int = 0
    s: int = 0
    x: int = 0
    y: int = 0
    pc: int = 0
    memory: bytearray = field(default_factory=_new_memory, repr=False)

    def reset(self) -> None:
        """Clear every register and zero the whole memory."""
        self.a = self.p = self.s = self.x = self.y = 0
        self.pc = 0
        self.memory[:] = bytes(MEMORY_SIZE)

    def format_memory(self, begin: int, end: int) -> str:
        """Return a hex dump of the inclusive address range ``begin``..``end``.

        Rows start at every multiple of 16 with the address followed by ``>``.
        """
        if begin < 0 or begin > end:
            raise ValueError(f"invalid memory range {begin:#06x}..{end:#06x}")
        if end >= MEMORY_SIZE:
            raise ValueError(f"memory range end {end:#06x} is out of bounds")

        parts: list[str] = []
        for address, value in enumerate(self.memory[begin : end + 1], start=begin):
            if address % _BYTES_PER_ROW == 0:
                if address != 0:
                    parts.append("\n")
                parts.append(f"{address:04X} > ")
            parts.append(f"{value:02X} ")
        parts.append("\n")
        return "".join(parts)

    def print_memory(self, begin: int, end: int, file: TextIO | None = None) -> None:
        """Write the hex dump of ``begin``..``end`` to ``file`` (stdout by default)."""
        out = sys.stdout if file is None else file
        out.write(self.format_memory(begin, end))