"""The 6502 instruction set: opcode bytes, mnemonics and addressing modes."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from emu6502.flags import AddressingMode

OPCODE_COUNT = 256

_M = AddressingMode

# mnemonic -> (description, {addressing mode: opcode byte})
_INSTRUCTIONS: dict[str, tuple[str, dict[AddressingMode, int]]] = {
    "ADC": ("Add with Carry", {
        _M.IMMEDIATE: 0x69, _M.ZERO_PAGE: 0x65, _M.ZERO_PAGE_X: 0x75,
        _M.ABSOLUTE: 0x6D, _M.ABSOLUTE_X: 0x7D, _M.ABSOLUTE_Y: 0x79,
        _M.INDEXED_INDIRECT: 0x61, _M.INDIRECT_INDEXED: 0x71,
    }),
    "AND": ("Logical AND", {
        _M.IMMEDIATE: 0x29, _M.ZERO_PAGE: 0x25, _M.ZERO_PAGE_X: 0x35,
        _M.ABSOLUTE: 0x2D, _M.ABSOLUTE_X: 0x3D, _M.ABSOLUTE_Y: 0x39,
        _M.INDEXED_INDIRECT: 0x21, _M.INDIRECT_INDEXED: 0x31,
    }),
    "ASL": ("Arithmetic Shift Left", {
        _M.ACCUMULATOR: 0x0A, _M.ZERO_PAGE: 0x06, _M.ZERO_PAGE_X: 0x16,
        _M.ABSOLUTE: 0x0E, _M.ABSOLUTE_X: 0x1E,
    }),
    "BCC": ("Branch if Carry Clear", {_M.RELATIVE: 0x90}),
    "BCS": ("Branch if Carry Set", {_M.RELATIVE: 0xB0}),
    "BEQ": ("Branch if Equal", {_M.RELATIVE: 0xF0}),
    "BIT": ("Bit Test", {_M.ZERO_PAGE: 0x24, _M.ABSOLUTE: 0x2C}),
    "BMI": ("Branch if Minus", {_M.RELATIVE: 0x30}),
    "BNE": ("Branch if Not Equal", {_M.RELATIVE: 0xD0}),
    "BPL": ("Branch if Positive", {_M.RELATIVE: 0x10}),
    "BRK": ("Force Interrupt", {_M.IMPLICIT: 0x00}),
    "BVC": ("Branch if Overflow Clear", {_M.RELATIVE: 0x50}),
    "BVS": ("Branch if Overflow Set", {_M.RELATIVE: 0x70}),
    "CLC": ("Clear Carry Flag", {_M.IMPLICIT: 0x18}),
    "CLD": ("Clear Decimal Mode", {_M.IMPLICIT: 0xD8}),
    "CLI": ("Clear Interrupt Disable", {_M.IMPLICIT: 0x58}),
    "CLV": ("Clear Overflow Flag", {_M.IMPLICIT: 0xB8}),
    "CMP": ("Compare", {
        _M.IMMEDIATE: 0xC9, _M.ZERO_PAGE: 0xC5, _M.ZERO_PAGE_X: 0xD5,
        _M.ABSOLUTE: 0xCD, _M.ABSOLUTE_X: 0xDD, _M.ABSOLUTE_Y: 0xD9,
        _M.INDEXED_INDIRECT: 0xC1, _M.INDIRECT_INDEXED: 0xD1,
    }),
    "CPX": ("Compare X Register", {
        _M.IMMEDIATE: 0xE0, _M.ZERO_PAGE: 0xE4, _M.ABSOLUTE: 0xEC,
    }),
    "CPY": ("Compare Y Register", {
        _M.IMMEDIATE: 0xC0, _M.ZERO_PAGE: 0xC4, _M.ABSOLUTE: 0xCC,
    }),
    "DEC": ("Decrement Memory", {
        _M.ZERO_PAGE: 0xC6, _M.ZERO_PAGE_X: 0xD6,
        _M.ABSOLUTE: 0xCE, _M.ABSOLUTE_X: 0xDE,
    }),
    "DEX": ("Decrement X Register", {_M.IMPLICIT: 0xCA}),
    "DEY": ("Decrement Y Register", {_M.IMPLICIT: 0x88}),
    "EOR": ("Exclusive OR", {
        _M.IMMEDIATE: 0x49, _M.ZERO_PAGE: 0x45, _M.ZERO_PAGE_X: 0x55,
        _M.ABSOLUTE: 0x4D, _M.ABSOLUTE_X: 0x5D, _M.ABSOLUTE_Y: 0x59,
        _M.INDEXED_INDIRECT: 0x41, _M.INDIRECT_INDEXED: 0x51,
    }),
    "INC": ("Increment Memory", {
        _M.ZERO_PAGE: 0xE6, _M.ZERO_PAGE_X: 0xF6,
        _M.ABSOLUTE: 0xEE, _M.ABSOLUTE_X: 0xFE,
    }),
    "INX": ("Increment X Register", {_M.IMPLICIT: 0xE8}),
    "INY": ("Increment Y Register", {_M.IMPLICIT: 0xC8}),
    "JMP": ("Jump", {_M.ABSOLUTE: 0x4C, _M.INDIRECT: 0x6C}),
    "JSR": ("Jump to Subroutine", {_M.ABSOLUTE: 0x20}),
    "LDA": ("Load Accumulator", {
        _M.IMMEDIATE: 0xA9, _M.ZERO_PAGE: 0xA5, _M.ZERO_PAGE_X: 0xB5,
        _M.ABSOLUTE: 0xAD, _M.ABSOLUTE_X: 0xBD, _M.ABSOLUTE_Y: 0xB9,
        _M.INDEXED_INDIRECT: 0xA1, _M.INDIRECT_INDEXED: 0xB1,
    }),
    "LDX": ("Load X Register", {
        _M.IMMEDIATE: 0xA2, _M.ZERO_PAGE: 0xA6, _M.ZERO_PAGE_Y: 0xB6,
        _M.ABSOLUTE: 0xAE, _M.ABSOLUTE_Y: 0xBE,
    }),
    "LDY": ("Load Y Register", {
        _M.IMMEDIATE: 0xA0, _M.ZERO_PAGE: 0xA4, _M.ZERO_PAGE_X: 0xB4,
        _M.ABSOLUTE: 0xAC, _M.ABSOLUTE_X: 0xBC,
    }),
    "LSR": ("Logical Shift Right", {
        _M.ACCUMULATOR: 0x4A, _M.ZERO_PAGE: 0x46, _M.ZERO_PAGE_X: 0x56,
        _M.ABSOLUTE: 0x4E, _M.ABSOLUTE_X: 0x5E,
    }),
    "NOP": ("No Operation", {_M.IMPLICIT: 0xEA}),
    "ORA": ("Logical Inclusive OR", {
        _M.IMMEDIATE: 0x09, _M.ZERO_PAGE: 0x05, _M.ZERO_PAGE_X: 0x15,
        _M.ABSOLUTE: 0x0D, _M.ABSOLUTE_X: 0x1D, _M.ABSOLUTE_Y: 0x19,
        _M.INDEXED_INDIRECT: 0x01, _M.INDIRECT_INDEXED: 0x11,
    }),
    "PHA": ("Push Accumulator", {_M.IMPLICIT: 0x48}),
    "PHP": ("Push Processor Status", {_M.IMPLICIT: 0x08}),
    "PLA": ("Pull Accumulator", {_M.IMPLICIT: 0x68}),
    "PLP": ("Pull Processor Status", {_M.IMPLICIT: 0x28}),
    "ROL": ("Rotate Left", {
        _M.ACCUMULATOR: 0x2A, _M.ZERO_PAGE: 0x26, _M.ZERO_PAGE_X: 0x36,
        _M.ABSOLUTE: 0x2E, _M.ABSOLUTE_X: 0x3E,
    }),
    "ROR": ("Rotate Right", {
        _M.ACCUMULATOR: 0x6A, _M.ZERO_PAGE: 0x66, _M.ZERO_PAGE_X: 0x76,
        _M.ABSOLUTE: 0x6E, _M.ABSOLUTE_X: 0x7E,
    }),
    "RTI": ("Return from Interrupt", {_M.IMPLICIT: 0x40}),
    "RTS": ("Return from Subroutine", {_M.IMPLICIT: 0x60}),
    "SBC": ("Subtract with Carry", {
        _M.IMMEDIATE: 0xE9, _M.ZERO_PAGE: 0xE5, _M.ZERO_PAGE_X: 0xF5,
        _M.ABSOLUTE: 0xED, _M.ABSOLUTE_X: 0xFD, _M.ABSOLUTE_Y: 0xF9,
        _M.INDEXED_INDIRECT: 0xE1, _M.INDIRECT_INDEXED: 0xF1,
    }),
    "SEC": ("Set Carry Flag", {_M.IMPLICIT: 0x38}),
    "SED": ("Set Decimal Flag", {_M.IMPLICIT: 0xF8}),
    "SEI": ("Set Interrupt Disable", {_M.IMPLICIT: 0x78}),
    "STA": ("Store Accumulator", {
        _M.ZERO_PAGE: 0x85, _M.ZERO_PAGE_X: 0x95,
        _M.ABSOLUTE: 0x8D, _M.ABSOLUTE_X: 0x9D, _M.ABSOLUTE_Y: 0x99,
        _M.INDEXED_INDIRECT: 0x81, _M.INDIRECT_INDEXED: 0x91,
    }),
    "STX": ("Store X Register", {
        _M.ZERO_PAGE: 0x86, _M.ZERO_PAGE_X: 0x96, _M.ABSOLUTE: 0x8E,
    }),
    "STY": ("Store Y Register", {
        _M.ZERO_PAGE: 0x84, _M.ZERO_PAGE_Y: 0x94, _M.ABSOLUTE: 0x8C,
    }),
    "TAX": ("Transfer Accumulator to X", {_M.IMPLICIT: 0xAA}),
    "TAY": ("Transfer Accumulator to Y", {_M.IMPLICIT: 0xA8}),
    "TSX": ("Transfer Stack Pointer to X", {_M.IMPLICIT: 0xBA}),
    "TXA": ("Transfer X to Accumulator", {_M.IMPLICIT: 0x8A}),
    "TXS": ("Transfer X to Stack Pointer", {_M.IMPLICIT: 0x9A}),
    "TYA": ("Transfer Y to Accumulator", {_M.IMPLICIT: 0x98}),
}


class UnknownOpcodeError(LookupError):
    """Raised when a byte or a mnemonic/mode pair names no instruction."""


@dataclass(frozen=True)
class Opcode:
    """One instruction encoding: its byte, mnemonic and addressing mode."""

    code: int
    mnemonic: str
    mode: AddressingMode
    description: str

    def __str__(self) -> str:
        return f"{self.code:02X} {self.mnemonic} ({self.mode.name})"


def _build() -> tuple[dict[int, Opcode], dict[tuple[str, AddressingMode], Opcode]]:
    by_code: dict[int, Opcode] = {}
    by_name: dict[tuple[str, AddressingMode], Opcode] = {}
    for mnemonic, (description, modes) in _INSTRUCTIONS.items():
        for mode, code in modes.items():
            if code in by_code:
                raise RuntimeError(f"opcode {code:#04x} defined twice")
            opcode = Opcode(code, mnemonic, mode, description)
            by_code[code] = opcode
            by_name[(mnemonic, mode)] = opcode
    return by_code, by_name


_BY_CODE, _BY_NAME = _build()


def _check_byte(code: int) -> None:
    if not 0 <= code < OPCODE_COUNT:
        raise ValueError(f"opcode {code} is outside 0..255")


class OpcodeTable:
    """Decoding table from opcode byte to instruction.

    Only the documented instructions are present; other bytes are unknown.
    """

    def __init__(self) -> None:
        self._table: Mapping[int, Opcode] = MappingProxyType(dict(sorted(_BY_CODE.items())))

    def __getitem__(self, code: int) -> Opcode:
        _check_byte(code)
        try:
            return self._table[code]
        except KeyError:
            raise UnknownOpcodeError(f"unknown opcode {code:#04x}") from None

    def __contains__(self, code: object) -> bool:
        return code in self._table

    def __iter__(self) -> Iterator[Opcode]:
        return iter(self._table.values())

    def __len__(self) -> int:
        return len(self._table)

    def decode(self, code: int) -> Opcode:
        """Return the instruction encoded by the byte ``code``."""
        return self[code]


def opcode_for(mnemonic: str, mode: AddressingMode) -> int:
    """Return the opcode byte of ``mnemonic`` in addressing ``mode``."""
    key = (mnemonic.upper(), mode)
    try:
        return _BY_NAME[key].code
    except KeyError:
        raise UnknownOpcodeError(
            f"no opcode for {mnemonic.upper()} in {mode.name} mode"
        ) from None