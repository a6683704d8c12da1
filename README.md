# emu6502

The groundwork for a MOS 6502 emulator. It provides the processor's registers
and memory, a hex dump of memory, the status flags and addressing modes, and a
table of every documented opcode.

## Installation

```
pip install .
```

## Command line

```
emu6502
```

This starts an emulator, prints a hex dump of memory from `0x0000` to `0x00AF`
and exits. Each line holds sixteen bytes, led by the address of the first byte
and a `>`:

```
0000 > 00 00 00 00 00 00 00 00 00 00 00 00 00 00 00 00
0010 > 00 00 00 00 00 00 00 00 00 00 00 00 00 00 00 00
...
```

The command takes no options besides `-h`/`--help`.

## Library use

### `emu6502.cpu`

`CPU` is a dataclass with the registers `a`, `p` (status flags, NV-BDIZC),
`s`, `x`, `y` and `pc`, all starting at 0, and `memory`, a `bytearray` of
`MEMORY_SIZE` (`0xFFFF`) zero bytes, so addresses run from `0x0000` to
`0xFFFE`.

- `format_memory(begin, end)` returns the hex dump of the inclusive range
  `begin`..`end` as a string. It raises `ValueError` when `begin` is negative,
  when `begin > end`, or when `end` is not below `MEMORY_SIZE`.
- `print_memory(begin, end, file=None)` writes that dump to `file`, or to
  standard output.
- `reset()` sets every register to 0 and zeroes the memory.

The module also defines the memory map constants: `ZERO_PAGE_FIRST`/`LAST`
(`0x0000`–`0x00FF`), `STACK_FIRST`/`LAST` (`0x0100`–`0x01FF`),
`RAM_FIRST`/`LAST` (`0x0200`–`0x7FFF`) and `ROM_FIRST`/`LAST`
(`0x8000`–`0xFFFF`).

### `emu6502.flags`

- `AddressingMode`: the thirteen addressing modes (`IMPLICIT`, `ACCUMULATOR`,
  `IMMEDIATE`, `ZERO_PAGE`, `ZERO_PAGE_X`, `ZERO_PAGE_Y`, `RELATIVE`,
  `ABSOLUTE`, `ABSOLUTE_X`, `ABSOLUTE_Y`, `INDIRECT`, `INDEXED_INDIRECT`,
  `INDIRECT_INDEXED`).
- `StatusFlag`: an `IntFlag` of the status bits `CARRY`, `ZERO`,
  `INTERRUPT_DISABLE`, `DECIMAL_MODE`, `BREAK_COMMAND`, `OVERFLOW` and
  `NEGATIVE`.
- `get_bit(byte, bit)` and `set_bit(byte, bit)` read and set one bit; a bit
  index outside 0..7 raises `ValueError`.
- `get_flag(status, flag)` and `set_flag(status, flag)` do the same for a
  single `StatusFlag`; a combination of flags raises `ValueError`.

### `emu6502.opcodes`

- `Opcode`: a frozen dataclass with `code`, `mnemonic`, `mode` and
  `description`.
- `OpcodeTable`: the documented instructions keyed by opcode byte. It supports
  `table[code]`, `code in table`, iteration over its `Opcode`s in byte order
  and `len(table)`. `decode(code)` is the same as `table[code]`. A byte outside
  0..255 raises `ValueError`; a byte with no instruction raises
  `UnknownOpcodeError`, a `LookupError`.
- `opcode_for(mnemonic, mode)` returns the byte for a mnemonic (any case) in a
  given mode, or raises `UnknownOpcodeError`.

### `emu6502.emulator`

`Emulator` holds a `CPU` as `cpu` and an `OpcodeTable` as `opcodes`.
`update(file=None)` writes the dump of `0x0000`–`0x00AF`; `close()` shuts the
emulator down, after which `update` raises `RuntimeError`. It is a context
manager that closes on exit. `main(argv=None)` is the command above.

### Example

```python
from emu6502.cpu import CPU
from emu6502.flags import AddressingMode, StatusFlag, get_flag, set_flag
from emu6502.opcodes import OpcodeTable, opcode_for
from emu6502.emulator import Emulator

cpu = CPU()
cpu.memory[0x10] = 0xAB
print(cpu.format_memory(0x00, 0x1F), end="")

status = set_flag(0, StatusFlag.CARRY)
assert get_flag(status, StatusFlag.CARRY) == 1

code = opcode_for("LDA", AddressingMode.IMMEDIATE)   # 0xA9
opcode = OpcodeTable().decode(code)
print(opcode)                                        # A9 LDA (IMMEDIATE)

with Emulator() as emu:
    emu.update()
```

## What it does not do

Instructions are decoded but never executed: there is no fetch/execute loop,
no stack or interrupt handling, no loading of programs or ROM images into
memory and no peripherals. The command only prints the start of an all-zero
memory.

## Tests

```
pip install .[test]
pytest
```