import pytest

from quadguide.legged_comm import (
    BmsState,
    JointLimits,
    LeggedType,
    WireIMU,
    WireMotorCmd,
    WireMotorState,
    joint_limits,
)


def test_a1_limits():
    limits = joint_limits(LeggedType.A1)
    assert limits.hip_max == 0.802
    assert limits.hip_min == -0.802
    assert limits.thigh_max == 4.19
    assert limits.calf_min == -2.7


def test_aliengo_limits():
    limits = joint_limits(LeggedType.Aliengo)
    assert limits == JointLimits(1.047, -0.873, 3.927, -0.524, -0.611, -2.775)


def test_go1_limits():
    limits = joint_limits(LeggedType.Go1)
    assert limits.thigh_min == -0.663
    assert limits.calf_max == -0.837
    assert limits.calf_min == -2.721


def test_limits_are_ordered():
    for legged in (LeggedType.A1, LeggedType.Aliengo, LeggedType.Go1):
        lim = joint_limits(legged)
        assert lim.hip_min < lim.hip_max
        assert lim.thigh_min < lim.thigh_max
        assert lim.calf_min < lim.calf_max


def test_b1_has_no_limits():
    with pytest.raises(ValueError):
        joint_limits(LeggedType.B1)


def test_imu_round_trip():
    imu = WireIMU(
        quaternion=(1.0, 0.0, 0.5, -0.5),
        gyroscope=(0.25, -0.125, 2.0),
        accelerometer=(0.0, 0.0, 9.5),
        rpy=(0.5, -0.25, 1.5),
        temperature=-5,
    )
    assert WireIMU.unpack(imu.pack()) == imu


def test_motor_cmd_round_trip_and_mode_first():
    cmd = WireMotorCmd(mode=10, q=0.5, dq=-1.25, tau=2.0, kp=60.0, kd=5.0, reserve=(1, 2, 3))
    data = cmd.pack()
    assert data[0] == 10
    assert WireMotorCmd.unpack(data) == cmd


def test_motor_state_round_trip():
    state = WireMotorState(
        mode=10,
        q=0.75,
        dq=-0.5,
        ddq=4.0,
        tau_est=-1.5,
        q_raw=0.25,
        dq_raw=0.125,
        ddq_raw=-8.0,
        temperature=35,
        reserve=(7, 9),
    )
    assert WireMotorState.unpack(state.pack()) == state


def test_bms_round_trip():
    bms = BmsState(
        version_h=1,
        version_l=2,
        bms_status=3,
        soc=88,
        current=-2500,
        cycle=17,
        bq_ntc=(30, -2),
        mcu_ntc=(31, 29),
        cell_vol=tuple(range(3300, 3310)),
    )
    assert BmsState.unpack(bms.pack()) == bms


def test_bad_lengths_rejected():
    with pytest.raises(ValueError):
        WireMotorCmd.unpack(b"\x00" * 5)
    with pytest.raises(ValueError):
        WireIMU(quaternion=(1.0, 0.0, 0.0))
    with pytest.raises(ValueError):
        BmsState(cell_vol=(1, 2))


def test_out_of_range_mode_rejected():
    with pytest.raises(ValueError):
        WireMotorCmd(mode=256).pack()