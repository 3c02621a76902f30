"""Cyclic selection index handling."""


def update_index(current: int, maximum: int, direction: int) -> int:
    """Move ``current`` one step in the sign of ``direction``, wrapping in [0, maximum]."""
    step = (direction > 0) - (direction < 0)
    nxt = current + step
    if nxt < 0:
        nxt = maximum
    if nxt > maximum:
        nxt = 0
    return nxt