"""
Successor stepping over discrete types.

A stepper knows how many successor steps separate two values and which value
lies a given number of steps after another. `grid_step` uses them to walk
integer and character grids.
"""
from typing import Optional

import numpy as np

SURROGATE_START = 0xD800
SURROGATE_END = 0xE000
MAX_CODE_POINT = 0x10FFFF

class Step:
    """
    Base class of the steppers.

    For any `a`, `b` and `n`:
        * `steps_between(a, b) == n` if and only if `forward(a, n) == b`
        * `steps_between(a, b)` is None when `a > b`
    """
    @staticmethod
    def steps_between(start, end) -> Optional[int]:
        raise NotImplementedError

    @staticmethod
    def forward(start, count: int):
        raise NotImplementedError


class IntegerStep(Step):
    """Steps over integers by 1."""
    @staticmethod
    def steps_between(start, end) -> Optional[int]:
        if start <= end:
            return int(end - start)
        return None

    @staticmethod
    def forward(start, count: int):
        return start + count


class CharStep(Step):
    """
    Steps over single characters by code point, skipping the surrogate block
    U+D800..U+DFFF.
    """
    @staticmethod
    def steps_between(start: str, end: str) -> Optional[int]:
        a, b = ord(start), ord(end)
        if a > b:
            return None
        count = b - a
        if a < SURROGATE_START and SURROGATE_END <= b:
            count -= SURROGATE_END - SURROGATE_START
        return count

    @staticmethod
    def forward(start: str, count: int) -> Optional[str]:
        a = ord(start)
        res = a + count
        if a < SURROGATE_START <= res:
            res += SURROGATE_END - SURROGATE_START
        if res > MAX_CODE_POINT:
            return None
        return chr(res)


def step_for(value) -> type:
    """Returns the stepper class for a value."""
    if isinstance(value, (int, np.integer)) and not isinstance(value, bool):
        return IntegerStep
    if isinstance(value, str) and len(value) == 1:
        if SURROGATE_START <= ord(value) < SURROGATE_END:
            raise ValueError(f"surrogate code point {ord(value):#x} is not a character")
        return CharStep
    raise TypeError(f"no stepper for {type(value).__name__} value {value!r}")
