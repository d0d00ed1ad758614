import pytest

from quadguide.motor_msg import (
    BROADCAST_ID,
    COMMAND_SIZE,
    STATE_SIZE,
    ComHead,
    LowHzMotorCmd,
    MotorCommandPacket,
    MotorStatePacket,
)


def _command():
    return MotorCommandPacket(
        head=ComHead(motor_id=2),
        mode=10,
        modify_bit=0xFF,
        read_bit=1,
        modify=123456,
        t=-300,
        w=16000,
        pos=0x7FE95C80,
        k_p=1228,
        k_w=1024,
        low_hz_cmd_index=3,
        low_hz_cmd_byte=7,
        res=99,
        crc=0xDEADBEEF,
    )


def _state():
    return MotorStatePacket(
        head=ComHead(motor_id=1),
        mode=5,
        read_bit=1,
        temp=-12,
        m_error=2,
        read=42,
        t=-256,
        w=128,
        lw=1.5,
        w2=-64,
        lw2=-0.25,
        acc=-1000,
        out_acc=200,
        pos=-70000,
        pos2=80000,
        gyro=(1, -2, 3),
        accel=(-4, 5, -6),
        fgyro=(7, 8, 9),
        facc=(10, 11, 12),
        fmag=(-13, -14, -15),
        ftemp=60,
        force16=-5000,
        force8=-3,
        f_error=1,
        res=-1,
        crc=0x12345678,
    )


def test_command_packet_is_34_bytes():
    assert len(_command().pack()) == COMMAND_SIZE == 34


def test_state_packet_is_78_bytes():
    assert len(_state().pack()) == STATE_SIZE == 78


def test_low_hz_record_is_8_bytes_and_round_trips():
    cmd = LowHzMotorCmd(fan_d=3, f_music=64, h_music=4, reserved4=0, frgb=b"\x01\x02\x03\x04")
    data = cmd.pack()
    assert len(data) == 8
    assert LowHzMotorCmd.unpack(data) == cmd


def test_command_round_trip():
    cmd = _command()
    assert MotorCommandPacket.unpack(cmd.pack()) == cmd


def test_state_round_trip():
    state = _state()
    assert MotorStatePacket.unpack(state.pack()) == state


def test_default_head_start_bytes():
    data = MotorCommandPacket().pack()
    assert data[:2] == b"\xfe\xee"


def test_motor_id_follows_start_bytes():
    data = _command().pack()
    assert data[2] == 2


def test_broadcast_head():
    head = ComHead(motor_id=BROADCAST_ID)
    assert head.pack()[2] == 0xBB
    assert ComHead.unpack(head.pack()) == head


def test_torque_is_little_endian_after_head_and_flags():
    data = MotorCommandPacket(t=256).pack()
    assert data[12:14] == b"\x00\x01"


def test_crc_is_last_word():
    data = _command().pack()
    assert MotorCommandPacket.unpack(data).crc == 0xDEADBEEF
    assert int.from_bytes(data[-4:], "little") == 0xDEADBEEF


def test_state_arrays_become_tuples():
    state = MotorStatePacket(gyro=[1, 2, 3])
    assert state.gyro == (1, 2, 3)


def test_state_array_wrong_length():
    with pytest.raises(ValueError):
        MotorStatePacket(gyro=(1, 2))


def test_unpack_wrong_length():
    with pytest.raises(ValueError):
        MotorCommandPacket.unpack(bytes(33))
    with pytest.raises(ValueError):
        MotorStatePacket.unpack(bytes(79))


def test_out_of_range_value():
    with pytest.raises(ValueError):
        MotorCommandPacket(t=40000).pack()


def test_bad_start_length():
    with pytest.raises(ValueError):
        MotorCommandPacket(head=ComHead(start=b"\xfe")).pack()