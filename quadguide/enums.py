"""Enumerations shared by the controller: platforms, robots, commands and states."""

from enum import Enum


class CtrlPlatform(Enum):
    """Where the controller runs."""

    GAZEBO = 0
    REALROBOT = 1


class RobotType(Enum):
    """Supported quadruped models."""

    A1 = 0
    Go1 = 1


class UserCommand(Enum):
    """Commands coming from the keyboard or the wireless handle."""

    NONE = 0
    START = 1  # trotting
    L2_A = 2  # fixed stand
    L2_B = 3  # passive
    L2_X = 4  # free stand
    L1_X = 5  # balance test
    L1_A = 6  # swing test
    L1_Y = 7  # step test


class FrameType(Enum):
    """Coordinate frame in which a position is expressed."""

    BODY = 0
    HIP = 1
    GLOBAL = 2


class WaveStatus(Enum):
    """Gait wave generator mode."""

    STANCE_ALL = 0
    SWING_ALL = 1
    WAVE_ALL = 2


class FSMMode(Enum):
    """Whether the state machine is running a state or switching."""

    NORMAL = 0
    CHANGE = 1


class FSMStateName(Enum):
    """Names of the finite-state-machine states."""

    INVALID = 0
    PASSIVE = 1
    FIXEDSTAND = 2
    FREESTAND = 3
    TROTTING = 4
    BALANCETEST = 5
    SWINGTEST = 6
    STEPTEST = 7