"""Wireless remote data: button bit field and the 40-byte rocker/button record."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field, fields

# Bit order of the 16 button switches, least significant bit first.
_BUTTONS = (
    "r1",
    "l1",
    "start",
    "select",
    "r2",
    "l2",
    "f1",
    "f2",
    "a",
    "b",
    "x",
    "y",
    "up",
    "right",
    "down",
    "left",
)

_LAYOUT = struct.Struct("<2sH5f16s")

RECORD_SIZE = _LAYOUT.size


@dataclass
class KeySwitches:
    """State of the sixteen buttons of the wireless remote."""

    r1: bool = False
    l1: bool = False
    start: bool = False
    select: bool = False
    r2: bool = False
    l2: bool = False
    f1: bool = False
    f2: bool = False
    a: bool = False
    b: bool = False
    x: bool = False
    y: bool = False
    up: bool = False
    right: bool = False
    down: bool = False
    left: bool = False

    @classmethod
    def from_value(cls, value):
        """Decode the 16-bit switch word."""
        if not 0 <= value <= 0xFFFF:
            raise ValueError(f"switch word {value} does not fit in 16 bits")
        return cls(**{name: bool((value >> bit) & 1) for bit, name in enumerate(_BUTTONS)})

    def to_value(self):
        """Encode the buttons as the 16-bit switch word."""
        return sum(1 << bit for bit, name in enumerate(_BUTTONS) if getattr(self, name))

    def pressed(self):
        """Names of the buttons that are down, in bit order."""
        return [f.name for f in fields(self) if getattr(self, f.name)]


@dataclass
class RockerBtnData:
    """The 40-byte remote record: header, buttons, five analogue axes, spare bytes."""

    head: bytes = b"\x00\x00"
    btn: KeySwitches = field(default_factory=KeySwitches)
    lx: float = 0.0
    rx: float = 0.0
    ry: float = 0.0
    l2: float = 0.0
    ly: float = 0.0
    idle: bytes = bytes(16)

    @classmethod
    def from_bytes(cls, data):
        """Decode a record from exactly 40 bytes."""
        data = bytes(data)
        if len(data) != RECORD_SIZE:
            raise ValueError(f"remote record needs {RECORD_SIZE} bytes, got {len(data)}")
        head, btn, lx, rx, ry, l2, ly, idle = _LAYOUT.unpack(data)
        return cls(
            head=head,
            btn=KeySwitches.from_value(btn),
            lx=lx,
            rx=rx,
            ry=ry,
            l2=l2,
            ly=ly,
            idle=idle,
        )

    def to_bytes(self):
        """Encode the record as 40 bytes."""
        if len(self.head) != 2:
            raise ValueError("head must be exactly 2 bytes")
        if len(self.idle) != 16:
            raise ValueError("idle must be exactly 16 bytes")
        return _LAYOUT.pack(
            bytes(self.head),
            self.btn.to_value(),
            self.lx,
            self.rx,
            self.ry,
            self.l2,
            self.ly,
            bytes(self.idle),
        )