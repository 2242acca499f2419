import math


def round_half_up(value: float) -> int:
    # Python's round() goes to even on .5; rates shown to users round up.
    return int(math.floor(value + 0.5))


def percentage(part: float, whole: float) -> int:
    if not whole:
        return 0
    return round_half_up(part / whole * 100)
