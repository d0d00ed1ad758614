"""Wall-clock timestamps in microseconds and an absolute-deadline wait."""

import time
import warnings


def get_system_time():
    """Current wall-clock time in microseconds."""
    return time.time_ns() // 1000


def get_time_second():
    """Current wall-clock time in seconds."""
    return get_system_time() * 0.000001


def absolute_wait(start_time, wait_time):
    """Block until ``wait_time`` microseconds have passed since ``start_time``.

    Warns with ``RuntimeWarning`` when the deadline has already passed.
    """
    elapsed = get_system_time() - start_time
    if elapsed > wait_time:
        warnings.warn(
            f"The wait_time={wait_time} of absolute_wait is not enough! "
            f"The program has already cost {elapsed}us.",
            RuntimeWarning,
            stacklevel=2,
        )
    while (remaining := wait_time - (get_system_time() - start_time)) > 0:
        time.sleep(max(remaining * 1e-6, 50e-6))