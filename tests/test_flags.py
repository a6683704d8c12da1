import pytest

from emu6502.flags import StatusFlag, get_bit, get_flag, set_bit, set_flag


def test_get_bit_reads_individual_bits():
    assert get_bit(0b1010, 1) == 1
    assert get_bit(0b1010, 0) == 0
    assert get_bit(0b1010, 3) == 1


@pytest.mark.parametrize("bit", range(8))
def test_set_bit_then_get_bit(bit):
    value = set_bit(0, bit)
    assert get_bit(value, bit) == 1
    assert all(get_bit(value, other) == 0 for other in range(8) if other != bit)


@pytest.mark.parametrize("bit", range(8))
def test_set_bit_is_idempotent(bit):
    once = set_bit(0x5A, bit)
    assert set_bit(once, bit) == once


@pytest.mark.parametrize("bit", [-1, 8])
def test_bit_index_out_of_range(bit):
    with pytest.raises(ValueError):
        get_bit(0, bit)
    with pytest.raises(ValueError):
        set_bit(0, bit)


def test_set_flag_negative_matches_register_bit():
    assert set_flag(0, StatusFlag.NEGATIVE) == 0x80
    assert set_flag(0, StatusFlag.CARRY) == 0x01


@pytest.mark.parametrize("flag", list(StatusFlag))
def test_flag_round_trip(flag):
    status = set_flag(0, flag)
    assert status == int(flag)
    assert get_flag(status, flag) == 1
    assert get_flag(0, flag) == 0
    others = [other for other in StatusFlag if other is not flag]
    assert all(get_flag(status, other) == 0 for other in others)


def test_get_flag_on_full_status():
    status = 0
    for flag in StatusFlag:
        status = set_flag(status, flag)
    assert all(get_flag(status, flag) == 1 for flag in StatusFlag)


def test_unused_bit_is_not_a_flag():
    with pytest.raises(ValueError):
        get_flag(0xFF, 0x20)
    with pytest.raises(ValueError):
        set_flag(0, StatusFlag.CARRY | StatusFlag.ZERO)