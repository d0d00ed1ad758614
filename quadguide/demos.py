"""Low-level and high-level motion sequences for a single leg or a whole robot.

Each function or controller is called once per control cycle. It returns the
commands for that cycle and does not talk to the robot itself.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from quadguide.legged_comm import FL_0, FR_0, POS_STOP_F, RL_0, RR_0, WireMotorCmd

# Feed-forward hip torques that hold up each leg's weight.
GRAVITY_COMPENSATION = {FR_0: -0.65, FL_0: 0.65, RR_0: -0.65, RL_0: 0.65}

TORQUE_LIMIT = 5.0


def joint_linear_interpolation(init_pos, target_pos, rate):
    """Blend linearly from ``init_pos`` to ``target_pos``.

    ``rate`` is clamped to ``[0, 1]``.
    """
    rate = min(max(rate, 0.0), 1.0)
    return init_pos * (1 - rate) + target_pos * rate


@dataclass
class SinePositionController:
    """Position sequence for the front-right leg, run over three phases.

    1. For the first ten cycles, record the starting angles.
    2. Until cycle 400, move to the middle of the sine wave.
    3. From cycle 400 on, swing the calf along a sine wave.
    """

    sin_mid_q: tuple = (0.0, 1.2, -2.0)
    motiontime: int = 0
    rate_count: int = 0
    sin_count: int = 0
    q_init: list = field(default_factory=lambda: [0.0, 0.0, 0.0])
    q_des: list = field(default_factory=lambda: [0.0, 0.0, 0.0])
    kp: list = field(default_factory=lambda: [0.0, 0.0, 0.0])
    kd: list = field(default_factory=lambda: [0.0, 0.0, 0.0])

    def step(self, current_q):
        """Advance one cycle, given the three measured front-right joint angles.

        Returns the commands for the joints FR_0, FR_1 and FR_2.
        """
        current_q = tuple(float(q) for q in current_q)
        if len(current_q) != 3:
            raise ValueError(f"expected 3 joint angles, got {len(current_q)}")
        self.motiontime += 1

        if 0 <= self.motiontime < 10:
            self.q_init = list(current_q)
        if 10 <= self.motiontime < 400:
            self.rate_count += 1
            rate = self.rate_count / 200.0
            self.kp = [5.0, 5.0, 5.0]
            self.kd = [1.0, 1.0, 1.0]
            self.q_des = [
                joint_linear_interpolation(start, mid, rate)
                for start, mid in zip(self.q_init, self.sin_mid_q)
            ]
        if self.motiontime >= 400:
            self.sin_count += 1
            sin_joint2 = -0.6 * math.sin(1.8 * math.pi * self.sin_count / 1000.0)
            self.q_des = [self.sin_mid_q[0], self.sin_mid_q[1], self.sin_mid_q[2] + sin_joint2]

        taus = (GRAVITY_COMPENSATION[FR_0], 0.0, 0.0)
        return tuple(
            WireMotorCmd(q=q, dq=0.0, tau=tau, kp=kp, kd=kd)
            for q, tau, kp, kd in zip(self.q_des, taus, self.kp, self.kd)
        )


def torque_feedback(q, dq):
    """PD torque that pulls a joint back to zero, clamped to the torque limit."""
    torque = (0 - q) * 10.0 + (0 - dq) * 1.0
    return min(max(torque, -TORQUE_LIMIT), TORQUE_LIMIT)


def velocity_command(tpi):
    """Velocity command for the front-right thigh on cycle ``tpi`` of a sine speed profile."""
    speed = 2 * math.sin(3 * math.pi * tpi / 1500.0)
    return WireMotorCmd(q=POS_STOP_F, dq=speed, tau=0.0, kp=0.0, kd=4.0)


@dataclass
class HighLevelCommand:
    """Whole-body command.

    Mode values:
    0 idle; 1 forced stand; 2 walk; 5 stand down; 6 stand up.
    """

    mode: int = 0
    gait_type: int = 0
    speed_level: int = 0
    foot_raise_height: float = 0.0
    body_height: float = 0.0
    euler: tuple = (0.0, 0.0, 0.0)
    velocity: tuple = (0.0, 0.0)
    yaw_speed: float = 0.0
    reserve: int = 0


# (lower bound, upper bound or None, fields) — both bounds exclusive.
_WALK_SCHEDULE = (
    (0, 1000, {"mode": 1, "euler": (-0.3, 0.0, 0.0)}),
    (1000, 2000, {"mode": 1, "euler": (0.3, 0.0, 0.0)}),
    (2000, 3000, {"mode": 1, "euler": (0.0, -0.2, 0.0)}),
    (3000, 4000, {"mode": 1, "euler": (0.0, 0.2, 0.0)}),
    (4000, 5000, {"mode": 1, "euler": (0.0, 0.0, -0.2)}),
    (5000, 6000, {"mode": 1, "euler": (0.0, 0.0, 0.2)}),
    (6000, 7000, {"mode": 1, "body_height": -0.2}),
    (7000, 8000, {"mode": 1, "body_height": 0.1}),
    (8000, 9000, {"mode": 1, "body_height": 0.0}),
    (9000, 11000, {"mode": 5}),
    (11000, 13000, {"mode": 6}),
    (13000, 14000, {"mode": 0}),
    (
        14000,
        18000,
        {
            "mode": 2,
            "gait_type": 2,
            "velocity": (0.4, 0.0),
            "yaw_speed": 2.0,
            "foot_raise_height": 0.1,
        },
    ),
    (18000, 20000, {"mode": 0, "velocity": (0.0, 0.0)}),
    (20000, 24000, {"mode": 2, "gait_type": 1, "velocity": (0.2, 0.0), "body_height": 0.1}),
    (24000, None, {"mode": 1}),
)


def walk_command(motiontime):
    """Whole-body command at ``motiontime`` (in ms) of the demonstration routine."""
    fields_ = {}
    for low, high, values in _WALK_SCHEDULE:
        if motiontime > low and (high is None or motiontime < high):
            fields_.update(values)
    return HighLevelCommand(**fields_)