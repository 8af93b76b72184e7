# core/utils.py
import sys

# Tolerance for float equality and for the over/under point offsets.
EPSILON = 0.0001

# Smallest tolerance used when a value must count as "at zero".
MACHINE_EPSILON = sys.float_info.epsilon


def approx_eq(a: float, b: float, epsilon: float = EPSILON) -> bool:
    """
    Returns True when a and b differ by less than epsilon.
    Infinities compare equal only to themselves.
    """
    if a == b:
        return True
    return abs(a - b) < epsilon


def reflect(v, n):
    """
    Reflects vector v about the normal n.
    """
    return v - n * 2 * v.dot(n)
