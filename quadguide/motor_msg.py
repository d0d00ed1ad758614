"""Wire packets of the actuator serial protocol: a 34-byte command and a 78-byte reply.

Every packet starts with a 4-byte head and ends with a 32-bit CRC word. Numeric
fields hold the raw fixed-point values exactly as they travel on the wire,
little-endian and without padding.
"""

from __future__ import annotations

import struct
from dataclasses import dataclass, field

HEADER = b"\xfe\xee"
BROADCAST_ID = 0xBB

COMMAND_SIZE = 34
STATE_SIZE = 78

_HEAD = struct.Struct("<2sBB")
_LOW_HZ = struct.Struct("<BBBB4s")
_COMMAND = struct.Struct("<2sBBBBBBIhhihhBBII")
_STATE = struct.Struct("<2sBBBBbBIhhfhfhhii3h3h3h3h3hBhbBbI")


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


def _exact_bytes(value, length, what):
    value = bytes(value)
    if len(value) != length:
        raise ValueError(f"{what} must be exactly {length} bytes")
    return value


def _triple(values, what):
    values = tuple(values)
    if len(values) != 3:
        raise ValueError(f"{what} needs 3 values, got {len(values)}")
    return values


@dataclass
class ComHead:
    """Packet head: two start bytes, the motor id and a reserved byte."""

    start: bytes = HEADER
    motor_id: int = 0
    reserved: int = 0

    def _fields(self):
        return (_exact_bytes(self.start, 2, "start"), self.motor_id, self.reserved)

    def pack(self):
        """Encode the 4-byte head."""
        return _pack(_HEAD, "packet head", *self._fields())

    @classmethod
    def unpack(cls, data):
        """Decode a 4-byte head."""
        return cls(*_unpack(_HEAD, "packet head", data))


@dataclass
class LowHzMotorCmd:
    """Slow-rate commands: fan speed, buzzer frequency and volume, foot LED colour."""

    fan_d: int = 0
    f_music: int = 0
    h_music: int = 0
    reserved4: int = 0
    frgb: bytes = bytes(4)

    def pack(self):
        """Encode the 8-byte record."""
        return _pack(
            _LOW_HZ,
            "low-rate command",
            self.fan_d,
            self.f_music,
            self.h_music,
            self.reserved4,
            _exact_bytes(self.frgb, 4, "frgb"),
        )

    @classmethod
    def unpack(cls, data):
        """Decode an 8-byte record."""
        return cls(*_unpack(_LOW_HZ, "low-rate command", data))


@dataclass
class MotorCommandPacket:
    """Command sent to one motor (34 bytes with head and CRC).

    ``t``, ``w``, ``pos``, ``k_p`` and ``k_w`` are the raw fixed-point values;
    the torque the controller applies is ``k_p*dPos + k_w*dW + t``.
    ``modify`` and ``res`` are the 32-bit words of the parameter and reserved slots.
    """

    head: ComHead = field(default_factory=ComHead)
    mode: int = 0
    modify_bit: int = 0
    read_bit: int = 0
    reserved: int = 0
    modify: int = 0
    t: int = 0
    w: int = 0
    pos: int = 0
    k_p: int = 0
    k_w: int = 0
    low_hz_cmd_index: int = 0
    low_hz_cmd_byte: int = 0
    res: int = 0
    crc: int = 0

    def pack(self):
        """Encode the full 34-byte packet."""
        return _pack(
            _COMMAND,
            "motor command",
            *self.head._fields(),
            self.mode,
            self.modify_bit,
            self.read_bit,
            self.reserved,
            self.modify,
            self.t,
            self.w,
            self.pos,
            self.k_p,
            self.k_w,
            self.low_hz_cmd_index,
            self.low_hz_cmd_byte,
            self.res,
            self.crc,
        )

    @classmethod
    def unpack(cls, data):
        """Decode a 34-byte packet."""
        values = _unpack(_COMMAND, "motor command", data)
        return cls(ComHead(*values[:3]), *values[3:])


@dataclass
class MotorStatePacket:
    """Reply from one motor (78 bytes with head and CRC), with raw sensor values."""

    head: ComHead = field(default_factory=ComHead)
    mode: int = 0
    read_bit: int = 0
    temp: int = 0
    m_error: int = 0
    read: int = 0
    t: int = 0
    w: int = 0
    lw: float = 0.0
    w2: int = 0
    lw2: float = 0.0
    acc: int = 0
    out_acc: int = 0
    pos: int = 0
    pos2: int = 0
    gyro: tuple = (0, 0, 0)
    accel: tuple = (0, 0, 0)
    fgyro: tuple = (0, 0, 0)
    facc: tuple = (0, 0, 0)
    fmag: tuple = (0, 0, 0)
    ftemp: int = 0
    force16: int = 0
    force8: int = 0
    f_error: int = 0
    res: int = 0
    crc: int = 0

    def __post_init__(self):
        for name in ("gyro", "accel", "fgyro", "facc", "fmag"):
            setattr(self, name, _triple(getattr(self, name), name))

    def pack(self):
        """Encode the full 78-byte packet."""
        return _pack(
            _STATE,
            "motor state",
            *self.head._fields(),
            self.mode,
            self.read_bit,
            self.temp,
            self.m_error,
            self.read,
            self.t,
            self.w,
            self.lw,
            self.w2,
            self.lw2,
            self.acc,
            self.out_acc,
            self.pos,
            self.pos2,
            *_triple(self.gyro, "gyro"),
            *_triple(self.accel, "accel"),
            *_triple(self.fgyro, "fgyro"),
            *_triple(self.facc, "facc"),
            *_triple(self.fmag, "fmag"),
            self.ftemp,
            self.force16,
            self.force8,
            self.f_error,
            self.res,
            self.crc,
        )

    @classmethod
    def unpack(cls, data):
        """Decode a 78-byte packet."""
        v = _unpack(_STATE, "motor state", data)
        head = ComHead(*v[:3])
        scalars = v[3:17]
        arrays = [tuple(v[17 + 3 * i : 20 + 3 * i]) for i in range(5)]
        ftemp, force16, force8, f_error, res, crc = v[32:]
        return cls(
            head,
            *scalars,
            *arrays,
            ftemp=ftemp,
            force16=force16,
            force8=force8,
            f_error=f_error,
            res=res,
            crc=crc,
        )