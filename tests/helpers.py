import pytest


def check_double_ended(space, expected, approx=False):
    """
    Checks that `space` produces `expected` forwards, backwards and when
    alternating between both ends, with an exact length throughout.
    The space itself is left untouched.
    """
    expected = list(expected)

    def same(actual, wanted):
        if approx:
            assert actual == pytest.approx(wanted)
        else:
            assert actual == wanted

    forward = space.clone()
    assert len(forward) == len(expected)
    same(list(forward), expected)
    assert len(forward) == 0

    backward = space.clone()
    same(list(reversed(backward)), expected[::-1])
    assert backward.next_back() is None

    alternating = space.clone()
    front, back = [], []
    remaining = len(expected)
    while remaining:
        front.append(next(alternating))
        remaining -= 1
        assert len(alternating) == remaining
        if remaining:
            back.append(alternating.next_back())
            remaining -= 1
            assert len(alternating) == remaining
    same(front + back[::-1], expected)
