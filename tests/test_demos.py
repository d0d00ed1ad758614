import math

import pytest

from quadguide.demos import (
    GRAVITY_COMPENSATION,
    HighLevelCommand,
    SinePositionController,
    joint_linear_interpolation,
    torque_feedback,
    velocity_command,
    walk_command,
)
from quadguide.legged_comm import FR_0, POS_STOP_F


def test_interpolation_endpoints_and_clamp():
    assert joint_linear_interpolation(0.3, 1.2, 0.0) == pytest.approx(0.3)
    assert joint_linear_interpolation(0.3, 1.2, 1.0) == pytest.approx(1.2)
    assert joint_linear_interpolation(0.3, 1.2, -4.0) == pytest.approx(0.3)
    assert joint_linear_interpolation(0.3, 1.2, 9.0) == pytest.approx(1.2)


def test_interpolation_stays_between_ends():
    for rate in (0.1, 0.25, 0.5, 0.9):
        value = joint_linear_interpolation(-2.0, 1.2, rate)
        assert -2.0 <= value <= 1.2


def test_controller_holds_still_while_recording():
    ctrl = SinePositionController()
    for _ in range(9):
        cmds = ctrl.step((0.1, 0.7, -1.5))
    assert [c.kp for c in cmds] == [0.0, 0.0, 0.0]
    assert [c.q for c in cmds] == [0.0, 0.0, 0.0]
    assert ctrl.q_init == [0.1, 0.7, -1.5]
    assert cmds[0].tau == GRAVITY_COMPENSATION[FR_0]


def test_controller_reaches_sine_middle():
    ctrl = SinePositionController()
    for _ in range(209):
        cmds = ctrl.step((0.1, 0.7, -1.5))
    assert ctrl.motiontime == 209
    assert [c.q for c in cmds] == pytest.approx([0.0, 1.2, -2.0])
    assert [c.kp for c in cmds] == [5.0, 5.0, 5.0]
    assert [c.kd for c in cmds] == [1.0, 1.0, 1.0]


def test_controller_sine_phase_moves_calf_only():
    ctrl = SinePositionController()
    for _ in range(400):
        cmds = ctrl.step((0.0, 0.0, 0.0))
    assert ctrl.sin_count == 1
    assert cmds[0].q == 0.0
    assert cmds[1].q == 1.2
    assert cmds[2].q < -2.0
    assert all(c.dq == 0.0 for c in cmds)


def test_controller_rejects_wrong_joint_count():
    with pytest.raises(ValueError):
        SinePositionController().step((0.0, 0.0))


def test_torque_feedback_zero_at_rest():
    assert torque_feedback(0.0, 0.0) == 0.0


def test_torque_feedback_clamped_and_odd():
    assert torque_feedback(1.0, 0.0) == -5.0
    assert torque_feedback(-1.0, -3.0) == 5.0
    for q, dq in ((0.1, 0.2), (-0.05, 0.4), (0.3, -1.0)):
        t = torque_feedback(q, dq)
        assert abs(t) <= 5.0
        assert t == pytest.approx(-torque_feedback(-q, -dq))


def test_velocity_command_fields():
    cmd = velocity_command(0)
    assert cmd.dq == 0.0
    assert cmd.q == POS_STOP_F
    assert cmd.kd == 4.0
    assert cmd.kp == 0.0


def test_velocity_command_bounded_and_periodic():
    for tpi in (13, 250, 777):
        dq = velocity_command(tpi).dq
        assert abs(dq) <= 2.0
        assert dq == pytest.approx(velocity_command(tpi + 1000).dq, abs=1e-9)


def test_walk_command_idle_outside_windows():
    assert walk_command(0) == HighLevelCommand()
    assert walk_command(1000) == HighLevelCommand()


def test_walk_command_stand_tilts():
    cmd = walk_command(500)
    assert cmd.mode == 1
    assert cmd.euler == (-0.3, 0.0, 0.0)
    assert walk_command(6500).body_height == -0.2


def test_walk_command_walking_phase():
    cmd = walk_command(15000)
    assert cmd.mode == 2
    assert cmd.gait_type == 2
    assert cmd.velocity[0] == 0.4
    assert cmd.foot_raise_height == 0.1


def test_walk_command_stand_down_and_final_stand():
    assert walk_command(10000).mode == 5
    assert walk_command(12000).mode == 6
    assert walk_command(25000).mode == 1
    assert math.isclose(walk_command(22000).velocity[0], 0.2)