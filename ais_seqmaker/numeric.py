"""
Small numeric helpers shared by the segmenter, the record parser and the
diff export.
"""


import math
import re


ONE_MINUTE = 60
HALF_MINUTE = 30
SLOT_MAX_VALUE = 59

INT32_MIN = -(2 ** 31)
INT32_MAX = 2 ** 31 - 1
UINT32_MAX = 2 ** 32 - 1
MAX_INT_DIGITS = len(str(UINT32_MAX))

_SIGNED_PREFIX = re.compile(r"-?[0-9]+")
_UNSIGNED_PREFIX = re.compile(r"[0-9]+")


def parse_int(text, fallback, signed=True):
    """
    Parse the leading integer of `text`, ignoring whatever follows it, so
    `"123.4"` gives `123`.  Returns `fallback` if `text` does not start with
    a digit (or a minus sign when `signed`) or if the value does not fit in
    a 32 bit integer.
    """
    match = (_SIGNED_PREFIX if signed else _UNSIGNED_PREFIX).match(text)
    if match is None:
        return fallback
    # No 32 bit value has more than 10 significant digits.
    if len(match.group(0).lstrip("-").lstrip("0")) > MAX_INT_DIGITS:
        return fallback
    value = int(match.group(0))
    lo, hi = (INT32_MIN, INT32_MAX) if signed else (0, UINT32_MAX)
    if not lo <= value <= hi:
        return fallback
    return value


def adjacent_diff(seq, op, stride=1):
    """
    Yield `op(seq[i], seq[i + stride])` for every `i` where both exist.

        >>> list(adjacent_diff([4, 8, 15, 16, 23, 42], lambda a, b: b - a, 2))
        [11, 8, 8, 26]

    Nothing is yielded when `seq` has `stride` or fewer items.
    """
    n = len(seq)
    if n > stride:
        for i in range(n - stride):
            yield op(seq[i], seq[i + stride])


def spike_filter(seq, is_valid):
    """
    Remove isolated outliers from a time ordered sequence in one pass.

    `is_valid(a, b)` decides whether the transition between two neighbours
    is plausible.  A point is dropped when both transitions around it are
    invalid.  Runs of two or more consecutive invalid transitions are only
    trimmed at their start, so two adjacent outliers survive, e.g. with
    `is_valid = lambda a, b: abs(a - b) < 2`:

        [1, 2, 3, 99, 5, 6, 7] -> [1, 2, 3, 5, 6, 7]
        [1, 2, 99, 99, 5, 6, 7] -> [1, 2, 99, 99, 5, 6, 7]

    The last point is kept only if the transition into it is valid.

    Parameters
    ----------
    seq : list
    is_valid : callable

    Returns
    -------
    list
    """
    filtered = []
    if len(seq) > 1:
        acc = 1
        for a, b in zip(seq, seq[1:]):
            acc = 0 if is_valid(a, b) else acc + 1
            if acc < 2:
                filtered.append(a)
        if acc < 1:
            filtered.append(seq[-1])
    return filtered


def quantize_recv_time(recv_seconds, slot_seconds):
    """
    Estimate the time a message was sent from its reception time and the
    AIS slot second it was transmitted in.

    The reception time is truncated to whole seconds and moved to the
    nearest time whose second equals the slot, which may lie in the
    previous or the next minute.

        >>> quantize_recv_time("123.4", "4")
        124
        >>> quantize_recv_time("123.4", "50")
        110

    Parameters
    ----------
    recv_seconds : str or float
        Reception time as seconds since the epoch.
    slot_seconds : str or int
        Slot second, 0 to 59.

    Returns
    -------
    int or None
        `None` when the reception time is zero or unparsable or the slot is
        out of range.
    """
    if isinstance(recv_seconds, str):
        recv = parse_int(recv_seconds, 0, signed=False)
    else:
        recv = int(recv_seconds) if 0 <= recv_seconds <= UINT32_MAX else 0

    if isinstance(slot_seconds, str):
        slot = parse_int(slot_seconds, SLOT_MAX_VALUE + 1, signed=False)
    else:
        slot = int(slot_seconds) if slot_seconds >= 0 else SLOT_MAX_VALUE + 1

    if recv == 0 or slot > SLOT_MAX_VALUE:
        return None

    # Offset from the slot to the reception second, folded into (-30, 30]
    # so the slot of the closest minute boundary wins.
    sec = recv % ONE_MINUTE
    dt = (sec - slot + HALF_MINUTE - 1) % ONE_MINUTE - (HALF_MINUTE - 1)
    t = recv - dt
    return t if t > 0 else None


def round_half_away(x):
    """
    Round to the nearest integer, halves away from zero.  The builtin
    `round()` rounds halves to even.
    """
    return int(math.copysign(math.floor(abs(x) + 0.5), x))
