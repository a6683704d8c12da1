"""The emulator: a CPU with its opcode table, and the command entry point."""

from __future__ import annotations

import argparse
import sys
from types import TracebackType
from typing import TextIO

from emu6502.cpu import CPU
from emu6502.opcodes import OpcodeTable

DUMP_FIRST = 0x0000
DUMP_LAST = 0x00AF


class Emulator:
    """A 6502 processor together with its instruction decoding table."""

    def __init__(self) -> None:
        self.cpu = CPU()
        self.opcodes = OpcodeTable()
        self._closed = False

    @property
    def closed(self) -> bool:
        """Whether the emulator has been shut down."""
        return self._closed

    def update(self, file: TextIO | None = None) -> None:
        """Run one emulator step: dump the start of memory to ``file``."""
        if self._closed:
            raise RuntimeError("emulator is closed")
        self.cpu.print_memory(DUMP_FIRST, DUMP_LAST, file)

    def close(self) -> None:
        """Shut the emulator down; calling it again does nothing."""
        self._closed = True

    def __enter__(self) -> Emulator:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


def main(argv: list[str] | None = None) -> int:
    """Start an emulator, run one update and shut it down."""
    parser = argparse.ArgumentParser(
        prog="emu6502", description="Run the 6502 emulator."
    )
    parser.parse_args(argv)
    with Emulator() as emu:
        emu.update(sys.stdout)
    return 0