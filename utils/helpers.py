"""
Helper utility functions for the grid raycaster
"""


def clamp(value, min_value, max_value):
    """Clamp a value between min and max"""
    return max(min_value, min(value, max_value))


def sign(value):
    """Return -1, 0 or 1 depending on the sign of value"""
    if value > 0:
        return 1
    if value < 0:
        return -1
    return 0
