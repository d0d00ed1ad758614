# quadguide

Building blocks for the control software of a quadruped robot and of its
joint actuators: rotation math, joint command and state records, the byte
layouts of the robot's and actuator's messages, and per-cycle control logic.
Everything is plain Python on top of numpy; matplotlib is used only to draw
recorded curves.

## Modules

- `quadguide.enums`: `CtrlPlatform`, `RobotType`, `UserCommand`, `FrameType`,
  `WaveStatus`, `FSMMode` and `FSMStateName`.
- `quadguide.mathtools`:
  - `rotx`, `roty`, `rotz`, `rpy_to_rot_mat`, `rot_mat_to_rpy`,
    `quat_to_rot_mat` (quaternion as `(w, x, y, z)`) and `rot_mat_to_exp`
  - `skew`, which gives a 2x2 matrix for a scalar and a 3x3 matrix for a 3-vector
  - `homo_matrix`, which takes a rotation matrix or a quaternion, and
    `homo_matrix_inverse`, `homo_vec`, `no_homo_vec`
  - `vec12_to_vec34` and `vec34_to_vec12`, which convert between a 12-vector
    and a 3x4 matrix with one column per leg
  - `saturation`, `kill_zero_offset`, `inv_normalize` and `window_func`.
    `window_func` raises `ValueError` when an argument is out of range.
  - `update_average`, `update_covariance` and `update_avg_cov`, which return
    new arrays. `AvgCov` accumulates a running mean and covariance after a
    number of samples it ignores first, and prints both every `show_period`
    samples.
- `quadguide.timing`:
  - `get_system_time()` gives the time in microseconds.
  - `get_time_second()` gives the time in seconds.
  - `absolute_wait(start_time, wait_time)` blocks until `wait_time` µs have
    passed since `start_time`. It issues a `RuntimeWarning` if the deadline
    has already passed.
- `quadguide.messages`:
  - `LowlevelCmd` holds twelve `MotorCmd`. Its setters cover the whole robot
    (`set_q`, `set_qd`, `set_tau`) and single legs (`set_leg_q`,
    `set_leg_qd`). `set_tau` clamps to ±50 by default and warns on NaN.
  - Zeroing helpers: `set_zero_dq` and `set_zero_tau`.
  - Gain presets: `set_sim_stance_gain`, `set_real_stance_gain`,
    `set_zero_gain`, `set_stable_gain` and `set_swing_gain`.
  - `LowlevelState` holds an `IMU`, twelve `MotorState` records, a
    `UserCommand` and a `UserValue`. It provides `q()`, `qd()`, `rot_mat()`,
    `acc_global()`, `gyro_global()`, `yaw()`, `d_yaw()` and `set_q()`.
- `quadguide.joystick`:
  - `KeySwitches` is the 16 buttons of the wireless remote. Use
    `from_value`/`to_value` for the 16-bit word; `pressed()` lists the
    buttons that are down.
  - `RockerBtnData` is the 40-byte remote record (`from_bytes`/`to_bytes`).
- `quadguide.plot`: `PyPlot` collects named plots of labelled `Curve`s.
  - `add_plot` and `add_frame` build the plots. When no `x` is given,
    `add_frame` uses seconds since the first timed frame.
  - `print_xy` prints and returns points of a curve.
  - `show_plot` and `show_plot_all` draw the plots with matplotlib.
- `quadguide.motor_msg` holds the actuator serial packets, little-endian and
  without padding:
  - `ComHead`, the 4-byte head
  - `LowHzMotorCmd`, 8 bytes
  - `MotorCommandPacket`, 34 bytes
  - `MotorStatePacket`, 78 bytes

  Each has `pack`/`unpack`. Numeric fields hold the raw fixed-point values.
- `quadguide.legged_comm` holds the robot SDK's records and constants:
  - `WireIMU`, `WireMotorCmd`, `WireMotorState` and `BmsState`, each with
    `pack`/`unpack`
  - `LeggedType`, and `joint_limits()` for A1, Aliengo and Go1, which returns
    a `JointLimits`
  - level flags, stop values and leg and joint indices.
- `quadguide.actuator`:
  - `CommandType` and `goal_for()` give `MotorGoal` presets for torque,
    position and velocity control.
  - `OverheatGuard` moves between the `ProtectionStatus` states `NORMAL`,
    `OVERHEAT` and `COOLDOWN` from torque readings. During the cool-down,
    `scaled_goal` scales `t`, `k_p` and `k_w` down.
- `quadguide.demos` holds per-cycle command generators. Each returns
  `WireMotorCmd` or `HighLevelCommand` values:
  - `joint_linear_interpolation`
  - `SinePositionController`, a sine-wave position sequence for the
    front-right leg
  - `torque_feedback`, a clamped PD torque
  - `velocity_command`, a sine speed profile
  - `walk_command`, a timed whole-body routine.

## Installation

```
pip install .
pip install ".[test]"    # with pytest
```

## Examples

```python
import numpy as np
from quadguide.mathtools import rpy_to_rot_mat, rot_mat_to_rpy
from quadguide.messages import LowlevelCmd

r = rpy_to_rot_mat(0.1, -0.2, 0.3)
print(rot_mat_to_rpy(r))          # approximately [0.1, -0.2, 0.3]

cmd = LowlevelCmd()
cmd.set_q(np.zeros(12))
cmd.set_stable_gain()             # all legs; pass a leg id for one leg
```

```python
from quadguide.actuator import CommandType, OverheatGuard, goal_for

goal = goal_for(CommandType.VELOCITY)
guard = OverheatGuard()
guard.update(0.9, now=0)              # ProtectionStatus.OVERHEAT
guard.update(0.9, now=80_000_000)     # ProtectionStatus.COOLDOWN
guard.update(1.0, now=80_000_001)     # still COOLDOWN, now limiting
print(guard.scaled_goal(goal, 1.0))   # k_w scaled by 0.5
```

```python
from quadguide.joystick import KeySwitches
from quadguide.demos import walk_command

print(KeySwitches.from_value(0x0100).pressed())   # ['a']
print(walk_command(500).mode)                      # 1
```

## What the package does not do

- It opens no serial port or network socket. It only builds and parses the
  bytes that would be sent and received.
- It does not compute or check packet CRCs. The `crc` fields are carried as
  given.
- It has no state machine, gait generator, estimator, balance controller or
  leg kinematics, and no command-line program.

## Running the tests

```
pytest
```