import math


def round_half_up(value: float) -> int:
    '''
    Round to the nearest integer, with .5 going up (2.5 -> 3, -2.5 -> -2).

    Ties go the same way on both sides of zero, so shifting a value by a whole number shifts the result by the same amount.
    '''

    low = math.floor(value)
    return low + 1 if value - low >= 0.5 else low
