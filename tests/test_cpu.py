import io

import pytest

from emu6502.cpu import CPU, MEMORY_SIZE


def test_memory_has_declared_size_and_starts_zeroed():
    cpu = CPU()
    assert len(cpu.memory) == 0xFFFF
    assert len(cpu.memory) == MEMORY_SIZE
    assert not any(cpu.memory)


def test_reset_clears_memory_and_registers():
    cpu = CPU()
    cpu.memory[0x10] = 0xAB
    cpu.memory[MEMORY_SIZE - 1] = 0x01
    cpu.a, cpu.x, cpu.y, cpu.pc = 1, 2, 3, 0x8000
    cpu.reset()
    assert not any(cpu.memory)
    assert len(cpu.memory) == MEMORY_SIZE
    assert (cpu.a, cpu.x, cpu.y, cpu.pc) == (0, 0, 0, 0)


def test_format_small_range_from_zero():
    cpu = CPU()
    assert cpu.format_memory(0, 3) == "0000 > 00 00 00 00 \n"


def test_format_unaligned_start_has_no_address_prefix():
    cpu = CPU()
    cpu.memory[0x12] = 0x12
    cpu.memory[0x13] = 0x34
    assert cpu.format_memory(0x12, 0x13) == "12 34 \n"


def test_format_rows_start_with_their_address():
    cpu = CPU()
    cpu.memory[0x20] = 0xAB
    lines = cpu.format_memory(0x0000, 0x00AF).splitlines()
    assert len(lines) * 16 == 0x00B0
    for row, line in enumerate(lines):
        assert line.startswith(f"{row * 16:04X} > ")
        assert len(line.split(" > ")[1].split()) == 16
    assert lines[2].split(" > ")[1].split()[0] == "AB"


def test_format_ends_with_newline():
    cpu = CPU()
    assert cpu.format_memory(0x100, 0x11F).endswith("\n")


def test_format_rejects_reversed_range():
    with pytest.raises(ValueError):
        CPU().format_memory(5, 4)


def test_format_rejects_out_of_bounds_end():
    with pytest.raises(ValueError):
        CPU().format_memory(0, MEMORY_SIZE)


def test_print_memory_writes_format_output():
    cpu = CPU()
    cpu.memory[0x05] = 0x7F
    buffer = io.StringIO()
    cpu.print_memory(0, 0x1F, buffer)
    assert buffer.getvalue() == cpu.format_memory(0, 0x1F)


def test_print_memory_defaults_to_stdout(capsys):
    cpu = CPU()
    cpu.print_memory(0, 0x0F)
    assert capsys.readouterr().out == cpu.format_memory(0, 0x0F)