"""Small numeric helpers: clamping, running statistics and rigid-body rotations."""

from __future__ import annotations

import math

import numpy as np


def saturation(a, limits):
    """Clamp ``a`` into the interval given by the two values of ``limits`` (any order)."""
    low, high = sorted((float(limits[0]), float(limits[1])))
    if a < low:
        return low
    if a > high:
        return high
    return a


def kill_zero_offset(a, limit):
    """Return zero when ``a`` lies strictly within ``(-limit, limit)``, else ``a``."""
    if -limit < a < limit:
        return type(a)(0)
    return a


def inv_normalize(value, min_value, max_value, min_lim=-1.0, max_lim=1.0):
    """Map ``value`` from ``[min_lim, max_lim]`` linearly onto ``[min_value, max_value]``."""
    return (value - min_lim) * (max_value - min_value) / (max_lim - min_lim) + min_value


def window_func(x, window_ratio, x_range=1.0, y_range=1.0):
    """Trapezoidal window rising over the first and falling over the last ``window_ratio``."""
    if x < 0 or x > x_range:
        raise ValueError(f"x={x} should lie in [0, {x_range}]")
    if window_ratio <= 0 or window_ratio >= 0.5:
        raise ValueError(f"window_ratio={window_ratio} should lie in (0, 0.5)")

    if x / x_range < window_ratio:
        return x * y_range / (x_range * window_ratio)
    if x / x_range > 1 - window_ratio:
        return y_range * (x_range - x) / (x_range * window_ratio)
    return y_range


def update_average(exp, new_value, n):
    """Return the running mean after adding the ``n``-th sample ``new_value``."""
    exp = np.asarray(exp, dtype=float)
    new_value = np.asarray(new_value, dtype=float)
    if exp.shape[0] != new_value.shape[0]:
        raise ValueError("size mismatch in update_average")
    if abs(n - 1) < 0.001:
        return new_value.copy()
    return exp + (new_value - exp) / n


def update_covariance(cov, exp_past, new_value, n):
    """Return the running (population) covariance after adding the ``n``-th sample."""
    cov = np.asarray(cov, dtype=float)
    exp_past = np.asarray(exp_past, dtype=float)
    new_value = np.asarray(new_value, dtype=float)
    if (
        cov.ndim != 2
        or cov.shape[0] != cov.shape[1]
        or cov.shape[0] != exp_past.shape[0]
        or exp_past.shape[0] != new_value.shape[0]
    ):
        raise ValueError("size mismatch in update_covariance")
    if abs(n - 1) < 0.1:
        return np.zeros_like(cov)
    d = new_value - exp_past
    return cov * (n - 1) / n + np.outer(d, d) * (n - 1) / (n * n)


def update_avg_cov(cov, exp, new_value, n):
    """Update covariance (using the previous mean) and then the mean; returns ``(cov, exp)``."""
    new_cov = update_covariance(cov, exp, new_value, n)
    new_exp = update_average(exp, new_value, n)
    return new_cov, new_exp


def rotx(theta):
    """Rotation matrix about the x axis."""
    s, c = math.sin(theta), math.cos(theta)
    return np.array([[1.0, 0.0, 0.0], [0.0, c, -s], [0.0, s, c]])


def roty(theta):
    """Rotation matrix about the y axis."""
    s, c = math.sin(theta), math.cos(theta)
    return np.array([[c, 0.0, s], [0.0, 1.0, 0.0], [-s, 0.0, c]])


def rotz(theta):
    """Rotation matrix about the z axis."""
    s, c = math.sin(theta), math.cos(theta)
    return np.array([[c, -s, 0.0], [s, c, 0.0], [0.0, 0.0, 1.0]])


def skew(v):
    """Skew-symmetric matrix: 2x2 for a scalar, 3x3 (cross-product matrix) for a 3-vector."""
    if np.ndim(v) == 0:
        w = float(v)
        return np.array([[0.0, -w], [w, 0.0]])
    x, y, z = (float(c) for c in np.asarray(v).reshape(3))
    return np.array([[0.0, -z, y], [z, 0.0, -x], [-y, x, 0.0]])


def rpy_to_rot_mat(roll, pitch, yaw):
    """Rotation matrix ``Rz(yaw) Ry(pitch) Rx(roll)``."""
    return rotz(yaw) @ roty(pitch) @ rotx(roll)


def rot_mat_to_rpy(r):
    """Roll, pitch and yaw of a rotation matrix."""
    r = np.asarray(r, dtype=float)
    return np.array(
        [
            math.atan2(r[2, 1], r[2, 2]),
            math.asin(-r[2, 0]),
            math.atan2(r[1, 0], r[0, 0]),
        ]
    )


def quat_to_rot_mat(q):
    """Rotation matrix of a quaternion given as ``(w, x, y, z)``."""
    e0, e1, e2, e3 = (float(c) for c in np.asarray(q).reshape(4))
    return np.array(
        [
            [1 - 2 * (e2 * e2 + e3 * e3), 2 * (e1 * e2 - e0 * e3), 2 * (e1 * e3 + e0 * e2)],
            [2 * (e1 * e2 + e0 * e3), 1 - 2 * (e1 * e1 + e3 * e3), 2 * (e2 * e3 - e0 * e1)],
            [2 * (e1 * e3 - e0 * e2), 2 * (e2 * e3 + e0 * e1), 1 - 2 * (e1 * e1 + e2 * e2)],
        ]
    )


def rot_mat_to_exp(rm):
    """Exponential coordinates (axis times angle) of a rotation matrix."""
    rm = np.asarray(rm, dtype=float)
    diagonal_sum = rm[0, 0] + rm[1, 1] + rm[2, 2]
    cos_value = min(1.0, max(-1.0, diagonal_sum / 2.0 - 0.5))
    angle = math.acos(cos_value)
    if abs(angle) < 1e-5:
        return np.zeros(3)
    if abs(angle - math.pi) < 1e-5:
        return angle * np.array([rm[0, 0] + 1, rm[0, 1], rm[0, 2]]) / math.sqrt(2 * (1 + rm[0, 0]))
    return angle / (2.0 * math.sin(angle)) * np.array(
        [rm[2, 1] - rm[1, 2], rm[0, 2] - rm[2, 0], rm[1, 0] - rm[0, 1]]
    )


def homo_matrix(p, rotation):
    """4x4 homogeneous transform from a translation and a rotation matrix or quaternion."""
    rotation = np.asarray(rotation, dtype=float)
    if rotation.shape == (3, 3):
        rot = rotation
    elif rotation.size == 4:
        rot = quat_to_rot_mat(rotation)
    else:
        raise ValueError("rotation must be a 3x3 matrix or a 4-element quaternion")
    homo = np.zeros((4, 4))
    homo[:3, :3] = rot
    homo[:3, 3] = np.asarray(p, dtype=float).reshape(3)
    homo[3, 3] = 1.0
    return homo


def homo_matrix_inverse(homo):
    """Inverse of a rigid homogeneous transform."""
    homo = np.asarray(homo, dtype=float)
    rot_t = homo[:3, :3].T
    inv = np.zeros((4, 4))
    inv[:3, :3] = rot_t
    inv[:3, 3] = -rot_t @ homo[:3, 3]
    inv[3, 3] = 1.0
    return inv


def homo_vec(v3):
    """Append 1 to a 3-vector."""
    return np.append(np.asarray(v3, dtype=float).reshape(3), 1.0)


def no_homo_vec(v4):
    """Drop the last element of a 4-vector."""
    return np.asarray(v4, dtype=float).reshape(4)[:3].copy()


def vec12_to_vec34(vec12):
    """Arrange a 12-vector as a 3x4 matrix, one column per leg."""
    return np.asarray(vec12, dtype=float).reshape(4, 3).T.copy()


def vec34_to_vec12(vec34):
    """Flatten a 3x4 per-leg matrix into a 12-vector, leg by leg."""
    return np.asarray(vec34, dtype=float).T.reshape(12).copy()


class AvgCov:
    """Running mean and covariance of a vector signal, printed periodically."""

    def __init__(
        self,
        size,
        name,
        avg_only=False,
        show_period=1000,
        wait_count=5000,
        zoom_factor=10000.0,
    ):
        self.size = size
        self.name = name
        self.avg_only = avg_only
        self.show_period = show_period
        self.wait_count = wait_count
        self.zoom_factor = zoom_factor
        self.exp = np.zeros(size)
        self.cov = np.zeros((size, size))
        self.measure_count = 0

    def measure(self, new_value):
        """Add a sample; samples before ``wait_count`` are ignored."""
        self.measure_count += 1
        if self.measure_count <= self.wait_count:
            return
        n = self.measure_count - self.wait_count
        self.cov, self.exp = update_avg_cov(self.cov, self.exp, new_value, n)
        if self.measure_count % self.show_period == 0:
            print(f"******{self.name} measured count: {n}******")
            print(f"{self.zoom_factor} Times Average of {self.name}")
            print(self.zoom_factor * self.exp)
            if not self.avg_only:
                print(f"{self.zoom_factor} Times Covariance of {self.name}")
                print(self.zoom_factor * self.cov)