"""Addressing modes, processor status flags and bit helpers."""

from __future__ import annotations

import enum


class AddressingMode(enum.Enum):
    """The 6502 operand addressing modes."""

    IMPLICIT = enum.auto()
    ACCUMULATOR = enum.auto()
    IMMEDIATE = enum.auto()
    ZERO_PAGE = enum.auto()
    ZERO_PAGE_X = enum.auto()
    ZERO_PAGE_Y = enum.auto()
    RELATIVE = enum.auto()
    ABSOLUTE = enum.auto()
    ABSOLUTE_X = enum.auto()
    ABSOLUTE_Y = enum.auto()
    INDIRECT = enum.auto()
    INDEXED_INDIRECT = enum.auto()
    INDIRECT_INDEXED = enum.auto()


class StatusFlag(enum.IntFlag):
    """Bits of the processor status register (NV-BDIZC); bit 5 is unused."""

    CARRY = 0x01
    ZERO = 0x02
    INTERRUPT_DISABLE = 0x04
    DECIMAL_MODE = 0x08
    BREAK_COMMAND = 0x10
    OVERFLOW = 0x40
    NEGATIVE = 0x80


_SINGLE_FLAGS = frozenset(int(flag) for flag in StatusFlag)


def _check_bit(bit: int) -> None:
    if not 0 <= bit <= 7:
        raise ValueError(f"bit index {bit} is outside 0..7")


def get_bit(byte: int, bit: int) -> int:
    """Return bit ``bit`` of ``byte`` as 0 or 1."""
    _check_bit(bit)
    return (byte >> bit) & 1


def set_bit(byte: int, bit: int) -> int:
    """Return ``byte`` with bit ``bit`` set."""
    _check_bit(bit)
    return byte | (1 << bit)


def _flag_bit(flag: int) -> int:
    value = int(flag)
    if value not in _SINGLE_FLAGS:
        raise ValueError(f"{value:#04x} is not a single processor flag")
    return value.bit_length() - 1


def get_flag(status: int, flag: StatusFlag) -> int:
    """Return 1 if ``flag`` is set in ``status``, else 0."""
    return get_bit(status, _flag_bit(flag))


def set_flag(status: int, flag: StatusFlag) -> int:
    """Return ``status`` with ``flag`` set."""
    return set_bit(status, _flag_bit(flag))