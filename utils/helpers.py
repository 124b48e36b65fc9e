"""
Helper math functions for the grid raycaster
Compiled with Numba so the ray kernels can call them
"""

import math
from numba import njit

TWO_PI = 2.0 * math.pi


def clamp(value, min_value, max_value):
    """Clamp a value between min and max"""
    return max(min_value, min(value, max_value))


@njit(cache=True)
def normalize_angle(angle):
    """
    Normalize an angle to [0, 2pi)

    For angles within one turn of the range this is the plain single-step
    correction (a < 0 -> a + 2pi, a >= 2pi -> a - 2pi).
    """
    a = float(angle) % TWO_PI
    # -1e-17 % 2pi rounds to 2pi
    if a >= TWO_PI:
        a -= TWO_PI
    return a


@njit(cache=True)
def distance(x1, y1, x2, y2):
    """Calculate Euclidean distance between two points"""
    return math.sqrt((x2 - x1) ** 2 + (y2 - y1) ** 2)
