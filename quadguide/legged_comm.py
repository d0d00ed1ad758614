"""Low-level communication records and constants of the legged robot SDK.

The records are packed little-endian without padding, as sent over UDP.
"""

from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import Enum

HIGHLEVEL = 0xEE
LOWLEVEL = 0xFF
TRIGERLEVEL = 0xF0

POS_STOP_F = struct.unpack("<f", struct.pack("<f", 2.146e9))[0]
VEL_STOP_F = 16000.0

# Leg indices.
FR_ = 0
FL_ = 1
RR_ = 2
RL_ = 3

# Joint indices.
FR_0, FR_1, FR_2 = 0, 1, 2
FL_0, FL_1, FL_2 = 3, 4, 5
RR_0, RR_1, RR_2 = 6, 7, 8
RL_0, RL_1, RL_2 = 9, 10, 11


class LeggedType(Enum):
    """Robot models known to the SDK."""

    Aliengo = 0
    A1 = 1
    Go1 = 2
    B1 = 3


@dataclass(frozen=True)
class JointLimits:
    """Joint angle limits in radians."""

    hip_max: float
    hip_min: float
    thigh_max: float
    thigh_min: float
    calf_max: float
    calf_min: float


_LIMITS = {
    LeggedType.A1: JointLimits(0.802, -0.802, 4.19, -1.05, -0.916, -2.7),
    LeggedType.Aliengo: JointLimits(1.047, -0.873, 3.927, -0.524, -0.611, -2.775),
    LeggedType.Go1: JointLimits(1.047, -1.047, 2.966, -0.663, -0.837, -2.721),
}


def joint_limits(legged_type):
    """Joint limits of a robot model; raises ``ValueError`` when none are known."""
    try:
        return _LIMITS[LeggedType(legged_type)]
    except KeyError:
        raise ValueError(f"no joint limits known for {legged_type}") from None


def _pack(layout, what, *values):
    try:
        return layout.pack(*values)
    except struct.error as exc:
        raise ValueError(f"cannot encode {what}: {exc}") from None


def _unpack(layout, what, data):
    data = bytes(data)
    if len(data) != layout.size:
        raise ValueError(f"{what} needs {layout.size} bytes, got {len(data)}")
    return layout.unpack(data)


def _sized(values, length, what):
    values = tuple(values)
    if len(values) != length:
        raise ValueError(f"{what} needs {length} values, got {len(values)}")
    return values


_IMU = struct.Struct("<4f3f3f3fb")
_MOTOR_CMD = struct.Struct("<B5f3I")
_MOTOR_STATE = struct.Struct("<B7fb2I")
_BMS_STATE = struct.Struct("<BBBBiH2b2b10H")


@dataclass
class WireIMU:
    """IMU record: quaternion ``(w, x, y, z)``, gyroscope, accelerometer, rpy, temperature."""

    quaternion: tuple = (0.0, 0.0, 0.0, 0.0)
    gyroscope: tuple = (0.0, 0.0, 0.0)
    accelerometer: tuple = (0.0, 0.0, 0.0)
    rpy: tuple = (0.0, 0.0, 0.0)
    temperature: int = 0

    def __post_init__(self):
        self.quaternion = _sized(self.quaternion, 4, "quaternion")
        self.gyroscope = _sized(self.gyroscope, 3, "gyroscope")
        self.accelerometer = _sized(self.accelerometer, 3, "accelerometer")
        self.rpy = _sized(self.rpy, 3, "rpy")

    def pack(self):
        """Encode the record."""
        return _pack(
            _IMU,
            "IMU",
            *_sized(self.quaternion, 4, "quaternion"),
            *_sized(self.gyroscope, 3, "gyroscope"),
            *_sized(self.accelerometer, 3, "accelerometer"),
            *_sized(self.rpy, 3, "rpy"),
            self.temperature,
        )

    @classmethod
    def unpack(cls, data):
        """Decode the record."""
        v = _unpack(_IMU, "IMU", data)
        return cls(v[0:4], v[4:7], v[7:10], v[10:13], v[13])


@dataclass
class WireMotorCmd:
    """Command for one motor as sent to the robot."""

    mode: int = 0
    q: float = 0.0
    dq: float = 0.0
    tau: float = 0.0
    kp: float = 0.0
    kd: float = 0.0
    reserve: tuple = (0, 0, 0)

    def __post_init__(self):
        self.reserve = _sized(self.reserve, 3, "reserve")

    def pack(self):
        """Encode the record."""
        return _pack(
            _MOTOR_CMD,
            "motor command",
            self.mode,
            self.q,
            self.dq,
            self.tau,
            self.kp,
            self.kd,
            *_sized(self.reserve, 3, "reserve"),
        )

    @classmethod
    def unpack(cls, data):
        """Decode the record."""
        v = _unpack(_MOTOR_CMD, "motor command", data)
        return cls(*v[:6], reserve=v[6:9])


@dataclass
class WireMotorState:
    """Feedback from one motor as received from the robot."""

    mode: int = 0
    q: float = 0.0
    dq: float = 0.0
    ddq: float = 0.0
    tau_est: float = 0.0
    q_raw: float = 0.0
    dq_raw: float = 0.0
    ddq_raw: float = 0.0
    temperature: int = 0
    reserve: tuple = (0, 0)

    def __post_init__(self):
        self.reserve = _sized(self.reserve, 2, "reserve")

    def pack(self):
        """Encode the record."""
        return _pack(
            _MOTOR_STATE,
            "motor state",
            self.mode,
            self.q,
            self.dq,
            self.ddq,
            self.tau_est,
            self.q_raw,
            self.dq_raw,
            self.ddq_raw,
            self.temperature,
            *_sized(self.reserve, 2, "reserve"),
        )

    @classmethod
    def unpack(cls, data):
        """Decode the record."""
        v = _unpack(_MOTOR_STATE, "motor state", data)
        return cls(*v[:9], reserve=v[9:11])


@dataclass
class BmsState:
    """Battery management state: version, status, charge, current (mA), cycles, temperatures, cell voltages (mV)."""

    version_h: int = 0
    version_l: int = 0
    bms_status: int = 0
    soc: int = 0
    current: int = 0
    cycle: int = 0
    bq_ntc: tuple = (0, 0)
    mcu_ntc: tuple = (0, 0)
    cell_vol: tuple = (0,) * 10

    def __post_init__(self):
        self.bq_ntc = _sized(self.bq_ntc, 2, "bq_ntc")
        self.mcu_ntc = _sized(self.mcu_ntc, 2, "mcu_ntc")
        self.cell_vol = _sized(self.cell_vol, 10, "cell_vol")

    def pack(self):
        """Encode the record."""
        return _pack(
            _BMS_STATE,
            "BMS state",
            self.version_h,
            self.version_l,
            self.bms_status,
            self.soc,
            self.current,
            self.cycle,
            *_sized(self.bq_ntc, 2, "bq_ntc"),
            *_sized(self.mcu_ntc, 2, "mcu_ntc"),
            *_sized(self.cell_vol, 10, "cell_vol"),
        )

    @classmethod
    def unpack(cls, data):
        """Decode the record."""
        v = _unpack(_BMS_STATE, "BMS state", data)
        return cls(*v[:6], bq_ntc=v[6:8], mcu_ntc=v[8:10], cell_vol=v[10:20])