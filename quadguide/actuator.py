"""Command presets and over-heat protection for a single joint actuator.

The actuator takes a torque command made of three parts,
``K_P * (Pos - pos) + K_W * (W - w) + T``. The presets below pick the parts
for pure torque, position and velocity control. The guard below lowers that
command once the motor has carried too much torque for too long.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum

from quadguide.timing import get_system_time

# Control modes understood by the motor board.
MODE_IDLE = 0
MODE_OPEN_LOOP = 5
MODE_SERVO = 10

# Byte counts of one command and one reply on the serial line.
SEND_LENGTH = 34
RECV_LENGTH = 78


class CommandType(Enum):
    """Which part of the actuator command is used."""

    TORQUE = 0
    POSITION = 1
    VELOCITY = 2


@dataclass(frozen=True)
class MotorGoal:
    """Targets and gains of the motor itself, without the reducer.

    ``t`` is in Nm, ``w`` in rad/s and ``pos`` in rad. ``k_p`` is the
    position stiffness and ``k_w`` the velocity stiffness.
    """

    t: float = 0.0
    w: float = 0.0
    pos: float = 0.0
    k_p: float = 0.0
    k_w: float = 0.0


_GOALS = {
    CommandType.TORQUE: MotorGoal(t=1.0, w=0.0, pos=0.0, k_p=0.0, k_w=0.0),
    # The velocity target must stay zero; k_w then acts as damping.
    CommandType.POSITION: MotorGoal(t=0.0, w=0.0, pos=0.0, k_p=0.1, k_w=3.0),
    CommandType.VELOCITY: MotorGoal(t=0.0, w=50.0, pos=0.0, k_p=0.0, k_w=3.0),
}


def goal_for(command_type):
    """Return the preset goal for a command type.

    Raises ``ValueError`` for an unknown type.
    """
    try:
        return _GOALS[CommandType(command_type)]
    except (KeyError, ValueError):
        raise ValueError(f"motor command type error: {command_type!r}") from None


class ProtectionStatus(Enum):
    """State of the over-heat guard."""

    NORMAL = 0
    OVERHEAT = 1
    COOLDOWN = 2


@dataclass
class OverheatGuard:
    """Lowers the command after the motor has carried too much torque for too long.

    Torque above ``safe_torque`` starts an overload period. If the overload
    lasts longer than ``overload_duration`` microseconds, the guard enters a
    cool-down of ``cooldown_duration`` microseconds. During the cool-down the
    command is scaled so that the motor carries about ``cooldown_torque``.
    """

    safe_torque: float = 0.7
    cooldown_torque: float = 0.5
    overload_duration: int = 70_000_000
    cooldown_duration: int = 600_000_000
    status: ProtectionStatus = ProtectionStatus.NORMAL
    overload_start: int = 0
    cooldown_start: int = 0
    limiting: bool = False

    def update(self, measured_torque, now=None):
        """Advance the guard with a torque reading taken at ``now`` (in µs).

        Returns the new status.
        """
        if now is None:
            now = get_system_time()
        self.limiting = False
        if self.status is ProtectionStatus.NORMAL:
            if measured_torque > self.safe_torque:
                self.overload_start = now
                self.status = ProtectionStatus.OVERHEAT
        elif self.status is ProtectionStatus.OVERHEAT:
            if measured_torque < self.safe_torque:
                self.status = ProtectionStatus.NORMAL
            elif now - self.overload_start > self.overload_duration:
                self.cooldown_start = now
                self.status = ProtectionStatus.COOLDOWN
        elif now - self.cooldown_start > self.cooldown_duration:
            self.status = ProtectionStatus.NORMAL
        else:
            self.limiting = True
        return self.status

    def scaled_goal(self, goal, measured_torque):
        """Return the goal to send after the last update.

        While the cool-down is active, ``t``, ``k_p`` and ``k_w`` are scaled
        by ``cooldown_torque / measured_torque``. Otherwise ``goal`` is
        returned unchanged.
        """
        if not self.limiting:
            return goal
        if measured_torque == 0:
            raise ZeroDivisionError("cannot scale the command for a zero measured torque")
        ratio = self.cooldown_torque / measured_torque
        return replace(goal, t=ratio * goal.t, k_p=ratio * goal.k_p, k_w=ratio * goal.k_w)