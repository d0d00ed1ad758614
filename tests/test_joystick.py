import pytest

from quadguide.joystick import KeySwitches, RockerBtnData


def test_first_bit_is_r1():
    keys = KeySwitches.from_value(1)
    assert keys.r1
    assert keys.pressed() == ["r1"]


def test_bit_eight_is_a():
    keys = KeySwitches.from_value(1 << 8)
    assert keys.a
    assert not keys.r1
    assert keys.pressed() == ["a"]


def test_last_bit_is_left():
    keys = KeySwitches.from_value(1 << 15)
    assert keys.left
    assert keys.pressed() == ["left"]


@pytest.mark.parametrize("value", [0, 1, 0x0101, 0xABCD, 0xFFFF])
def test_switch_word_round_trip(value):
    assert KeySwitches.from_value(value).to_value() == value


def test_switch_word_out_of_range():
    with pytest.raises(ValueError):
        KeySwitches.from_value(0x10000)
    with pytest.raises(ValueError):
        KeySwitches.from_value(-1)


def test_record_is_forty_bytes():
    assert len(RockerBtnData().to_bytes()) == 40


def test_button_word_position_in_record():
    data = RockerBtnData(btn=KeySwitches(r1=True)).to_bytes()
    assert data[2:4] == b"\x01\x00"


def test_record_round_trip():
    original = RockerBtnData(
        head=b"\x55\x51",
        btn=KeySwitches(a=True, start=True),
        lx=0.5,
        rx=-0.25,
        ry=1.0,
        l2=0.75,
        ly=-1.0,
        idle=bytes(range(16)),
    )
    decoded = RockerBtnData.from_bytes(original.to_bytes())
    assert decoded == original


def test_from_bytes_rejects_wrong_length():
    with pytest.raises(ValueError):
        RockerBtnData.from_bytes(bytes(39))


def test_to_bytes_rejects_bad_head():
    with pytest.raises(ValueError):
        RockerBtnData(head=b"\x00").to_bytes()