"""Low-level command and state records exchanged with the robot's twelve motors."""

from __future__ import annotations

import math
import warnings
from dataclasses import dataclass, field

import numpy as np

from quadguide.enums import UserCommand
from quadguide.mathtools import quat_to_rot_mat, rot_mat_to_rpy, saturation

LEG_COUNT = 4
MOTOR_COUNT = 12

SERVO_MODE = 10


def _leg_motors(leg_id):
    if not 0 <= leg_id < LEG_COUNT:
        raise IndexError(f"leg id {leg_id} out of range 0..{LEG_COUNT - 1}")
    return range(3 * leg_id, 3 * leg_id + 3)


def _legs(leg_id):
    return range(LEG_COUNT) if leg_id is None else (leg_id,)


def _vector(values, length):
    arr = np.asarray(values, dtype=float).reshape(-1)
    if arr.shape[0] != length:
        raise ValueError(f"expected {length} values, got {arr.shape[0]}")
    return arr


@dataclass
class UserValue:
    """Analogue stick values from the command panel."""

    lx: float = 0.0
    ly: float = 0.0
    rx: float = 0.0
    ry: float = 0.0
    l2: float = 0.0

    def set_zero(self):
        """Reset every axis to zero."""
        self.lx = self.ly = self.rx = self.ry = self.l2 = 0.0


@dataclass
class MotorCmd:
    """Command for one joint motor."""

    mode: int = 0
    q: float = 0.0
    dq: float = 0.0
    tau: float = 0.0
    kp: float = 0.0
    kd: float = 0.0


@dataclass
class LowlevelCmd:
    """Commands for all twelve motors, three per leg."""

    motor_cmd: list = field(default_factory=lambda: [MotorCmd() for _ in range(MOTOR_COUNT)])

    def set_q(self, q):
        """Set the target angle of every motor from a 12-vector."""
        for cmd, value in zip(self.motor_cmd, _vector(q, MOTOR_COUNT)):
            cmd.q = float(value)

    def set_leg_q(self, leg_id, qi):
        """Set the target angles of one leg from a 3-vector."""
        for i, value in zip(_leg_motors(leg_id), _vector(qi, 3)):
            self.motor_cmd[i].q = float(value)

    def set_qd(self, qd):
        """Set the target velocity of every motor from a 12-vector."""
        for cmd, value in zip(self.motor_cmd, _vector(qd, MOTOR_COUNT)):
            cmd.dq = float(value)

    def set_leg_qd(self, leg_id, qdi):
        """Set the target velocities of one leg from a 3-vector."""
        for i, value in zip(_leg_motors(leg_id), _vector(qdi, 3)):
            self.motor_cmd[i].dq = float(value)

    def set_tau(self, tau, torque_limit=(-50.0, 50.0)):
        """Set feed-forward torques, clamped to ``torque_limit``; warns on NaN."""
        for cmd, value in zip(self.motor_cmd, _vector(tau, MOTOR_COUNT)):
            if math.isnan(value):
                warnings.warn("set_tau meets NaN", RuntimeWarning, stacklevel=2)
            cmd.tau = float(saturation(float(value), torque_limit))

    def set_zero_dq(self, leg_id=None):
        """Zero the target velocities of one leg, or of all legs."""
        for leg in _legs(leg_id):
            for i in _leg_motors(leg):
                self.motor_cmd[i].dq = 0.0

    def set_zero_tau(self, leg_id=None):
        """Zero the feed-forward torques of one leg, or of all legs."""
        for leg in _legs(leg_id):
            for i in _leg_motors(leg):
                self.motor_cmd[i].tau = 0.0

    def _set_gains(self, leg_id, gains):
        for leg in _legs(leg_id):
            for i, (kp, kd) in zip(_leg_motors(leg), gains):
                cmd = self.motor_cmd[i]
                cmd.mode = SERVO_MODE
                cmd.kp = kp
                cmd.kd = kd

    def set_sim_stance_gain(self, leg_id):
        """Stance gains tuned for simulation."""
        self._set_gains(leg_id, ((180.0, 8.0), (180.0, 8.0), (300.0, 15.0)))

    def set_real_stance_gain(self, leg_id):
        """Stance gains tuned for the real robot."""
        self._set_gains(leg_id, ((60.0, 5.0), (40.0, 4.0), (80.0, 7.0)))

    def set_zero_gain(self, leg_id=None):
        """Servo mode with zero gains for one leg, or all legs."""
        self._set_gains(leg_id, ((0.0, 0.0),) * 3)

    def set_stable_gain(self, leg_id=None):
        """Small stabilising gains for one leg, or all legs."""
        self._set_gains(leg_id, ((0.8, 0.8),) * 3)

    def set_swing_gain(self, leg_id):
        """Gains for a leg in swing."""
        self._set_gains(leg_id, ((3.0, 2.0),) * 3)


@dataclass
class MotorState:
    """Measured state of one joint motor."""

    mode: int = 0
    q: float = 0.0
    dq: float = 0.0
    ddq: float = 0.0
    tau_est: float = 0.0


@dataclass
class IMU:
    """Inertial measurement: quaternion ``(w, x, y, z)``, gyroscope and accelerometer."""

    quaternion: list = field(default_factory=lambda: [0.0] * 4)
    gyroscope: list = field(default_factory=lambda: [0.0] * 3)
    accelerometer: list = field(default_factory=lambda: [0.0] * 3)

    def rot_mat(self):
        """Body-to-world rotation matrix."""
        return quat_to_rot_mat(self.quat())

    def acc(self):
        """Acceleration in the body frame."""
        return np.array(self.accelerometer, dtype=float)

    def gyro(self):
        """Angular velocity in the body frame."""
        return np.array(self.gyroscope, dtype=float)

    def quat(self):
        """The quaternion as a 4-vector."""
        return np.array(self.quaternion, dtype=float)


@dataclass
class LowlevelState:
    """IMU, twelve motor states and the operator's command."""

    imu: IMU = field(default_factory=IMU)
    motor_state: list = field(default_factory=lambda: [MotorState() for _ in range(MOTOR_COUNT)])
    user_cmd: UserCommand = UserCommand.NONE
    user_value: UserValue = field(default_factory=UserValue)

    def q(self):
        """Joint angles as a 3x4 matrix, one column per leg."""
        return np.array([m.q for m in self.motor_state], dtype=float).reshape(LEG_COUNT, 3).T

    def qd(self):
        """Joint velocities as a 3x4 matrix, one column per leg."""
        return np.array([m.dq for m in self.motor_state], dtype=float).reshape(LEG_COUNT, 3).T

    def rot_mat(self):
        """Body-to-world rotation matrix."""
        return self.imu.rot_mat()

    def acc_global(self):
        """Acceleration in the world frame."""
        return self.rot_mat() @ self.imu.acc()

    def gyro_global(self):
        """Angular velocity in the world frame."""
        return self.rot_mat() @ self.imu.gyro()

    def yaw(self):
        """Heading angle of the body."""
        return float(rot_mat_to_rpy(self.rot_mat())[2])

    def d_yaw(self):
        """Yaw rate in the world frame."""
        return float(self.gyro_global()[2])

    def set_q(self, q):
        """Overwrite the measured joint angles from a 12-vector."""
        for state, value in zip(self.motor_state, _vector(q, MOTOR_COUNT)):
            state.q = float(value)