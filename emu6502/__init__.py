"""CPU state, status flags, opcode table and a memory-dumping emulator shell for the MOS 6502."""

__version__ = "0.1.0"
__all__ = ["cpu", "flags", "opcodes", "emulator"]