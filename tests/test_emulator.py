import io

import pytest

from emu6502.emulator import DUMP_FIRST, DUMP_LAST, Emulator, main
from emu6502.opcodes import OpcodeTable


def _dump(emu):
    out = io.StringIO()
    emu.update(out)
    return out.getvalue()


def test_update_writes_memory_dump_of_first_range():
    emu = Emulator()
    assert _dump(emu) == emu.cpu.format_memory(DUMP_FIRST, DUMP_LAST)


def test_update_dump_layout():
    lines = _dump(Emulator()).splitlines()
    assert len(lines) == (DUMP_LAST - DUMP_FIRST + 1) // 16
    assert lines[0].startswith("0000 > ")
    assert lines[-1].startswith("00A0 > ")
    assert all(line.endswith("00 ") for line in lines)


def test_update_reflects_memory_changes():
    emu = Emulator()
    emu.cpu.memory[0x0001] = 0xAB
    emu.cpu.memory[DUMP_LAST] = 0x7F
    text = _dump(emu)
    assert text.startswith("0000 > 00 AB 00 ")
    assert text.rstrip("\n").endswith("7F ")


def test_new_emulator_has_clear_cpu_and_full_table():
    emu = Emulator()
    assert emu.cpu.a == emu.cpu.x == emu.cpu.y == emu.cpu.pc == 0
    assert not any(emu.cpu.memory)
    assert len(emu.opcodes) == len(OpcodeTable())
    assert [op.code for op in emu.opcodes] == [op.code for op in OpcodeTable()]


def test_context_manager_closes():
    with Emulator() as emu:
        assert emu.closed is False
    assert emu.closed is True


def test_update_after_close_raises():
    emu = Emulator()
    emu.close()
    emu.close()
    with pytest.raises(RuntimeError):
        emu.update(io.StringIO())


def test_update_defaults_to_stdout(capsys):
    emu = Emulator()
    emu.update()
    assert capsys.readouterr().out == emu.cpu.format_memory(DUMP_FIRST, DUMP_LAST)


def test_main_prints_dump_and_returns_zero(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out == Emulator().cpu.format_memory(DUMP_FIRST, DUMP_LAST)


def test_main_rejects_unknown_arguments():
    with pytest.raises(SystemExit) as info:
        main(["--bogus"])
    assert info.value.code == 2