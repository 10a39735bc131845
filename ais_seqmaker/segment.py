"""
Split a cleaned trajectory into pieces of constant duration and resample
each piece onto a regular time grid.

A piece ends early, and is thrown away, as soon as two consecutive
positions are too far apart in time (`dt_max`) or in space (`ds_max`).
Pieces that reach `seq_length * dti` seconds are interpolated onto
`seq_length + 1` grid points `dti` seconds apart.
"""


import logging
from collections import namedtuple

from ais_seqmaker.geo import accumulated_distance, distance

logging.basicConfig()
logger = logging.getLogger(__file__)
logger.setLevel(logging.WARNING)

log = logger.info


DEFAULT_SEQ_LENGTH = 3600  # intervals
DEFAULT_MAX_DT = 60  # seconds
DEFAULT_MAX_DS = 0.1  # nautical miles
DEFAULT_DTI = 6  # seconds
DEFAULT_MIN_SPEED = 0.0  # knots

NM_PER_S = 1.0 / 3600


class ResampleError(IndexError):
    """
    The trajectory does not reach the last requested grid point.
    """


class SplitArgs(
    namedtuple("SplitArgs", ["seq_length", "dt_max", "dti", "ds_max", "v_min"])
):

    """
    Parameters controlling `split()` and `drop_rate()`.

    Parameters
    ----------
    seq_length : int
        Number of grid intervals per sequence.
    dt_max : int
        Maximum number of seconds between consecutive positions.
    dti : int
        Seconds between grid points.
    ds_max : float
        Maximum distance between consecutive positions in nautical miles.
    v_min : float
        Minimum average speed in knots along an accepted sequence.
    """

    __slots__ = ()

    def __new__(
        cls,
        seq_length=DEFAULT_SEQ_LENGTH,
        dt_max=DEFAULT_MAX_DT,
        dti=DEFAULT_DTI,
        ds_max=DEFAULT_MAX_DS,
        v_min=DEFAULT_MIN_SPEED,
    ):
        return super(SplitArgs, cls).__new__(cls, seq_length, dt_max, dti, ds_max, v_min)

    @property
    def duration(self):
        """
        Duration of one sequence in seconds.
        """
        return self.seq_length * self.dti

    @property
    def min_distance(self):
        """
        Shortest path length in nautical miles a sequence must cover.
        """
        return self.v_min * NM_PER_S * self.duration

    def validate(self):
        for key in ("seq_length", "dt_max", "dti"):
            if getattr(self, key) <= 0:
                raise ValueError("{} has to be non-zero and positive".format(key))
        if self.ds_max <= 0:
            raise ValueError("ds_max has to be non-zero and positive")
        if self.v_min < 0:
            raise ValueError("v_min has to be zero or positive")
        return self


def is_gap(prev_pos, pos, args):
    """
    True if `pos` can not continue a sequence ending in `prev_pos`.  A
    repeated timestamp or going back in time is a gap as well.
    """
    dt = pos.t - prev_pos.t
    return dt <= 0 or dt > args.dt_max or distance(pos.x, prev_pos.x) > args.ds_max


def interpolate(trajectory, n_grid_points, dt):
    """
    Resample `trajectory` onto `n_grid_points` times starting with its
    first position and spaced `dt` seconds apart.

        >>> trajectory = [Position(0, Point(0, 0)), Position(20, Point(4, 2)),
        ...               Position(50, Point(10, 5))]
        >>> interpolate(trajectory, 6, 10)[1]
        Point(latitude=2, longitude=1)

    Parameters
    ----------
    trajectory : list of Position
        Ordered by time, without duplicate timestamps.
    n_grid_points : int
    dt : int

    Returns
    -------
    list of Point

    Raises
    ------
    ResampleError
        If a grid time lies after the last position.
    """
    seq = []
    j = 0
    last = len(trajectory) - 1
    t0 = trajectory[0].t
    for i in range(n_grid_points):
        ti = t0 + i * dt

        while j < last and trajectory[j + 1].t < ti:
            j += 1
        if j >= last:
            raise ResampleError(
                "grid time {} is not covered by trajectory ending at {}".format(
                    ti, trajectory[last].t
                )
            )

        p1 = trajectory[j]
        p2 = trajectory[j + 1]
        w = (ti - p1.t) / (p2.t - p1.t)
        seq.append(p1.x.interpolate(p2.x, w))

    return seq


def split(trajectory, args):
    """
    Cut `trajectory` into sequences of `args.duration` seconds and resample
    them.  Positions of a sequence interrupted by a gap are dropped, as is
    a trailing sequence that never reaches full length.  Sequences whose
    path is shorter than `args.min_distance` are rejected.

    Returns
    -------
    list of Point
        The accepted sequences concatenated, `args.seq_length + 1` points
        each.
    """
    seqs = []
    buffer = []
    t0 = 0
    for pos in trajectory:
        if not buffer:
            buffer.append(pos)
            t0 = pos.t
        elif is_gap(buffer[-1], pos, args):
            buffer = [pos]
            t0 = pos.t
        else:
            buffer.append(pos)
            if pos.t - t0 >= args.duration:
                seq = interpolate(buffer, args.seq_length + 1, args.dti)
                length = accumulated_distance(seq)
                if length >= args.min_distance:
                    seqs.extend(seq)
                else:
                    logger.debug(
                        "Rejecting sequence starting at %s, %.4f nm < %.4f nm",
                        t0,
                        length,
                        args.min_distance,
                    )
                buffer = []

    return seqs


def drop_rate(trajectory, args):
    """
    Fraction of the positions in `trajectory` that `split()` would not use
    for a complete sequence, ignoring the minimum speed.

    Returns
    -------
    float
    """
    if not trajectory:
        raise ValueError("drop rate of an empty trajectory is undefined")

    total = 0
    i = 0
    t0 = 0
    last_pos = None
    for pos in trajectory:
        i += 1

        if i == 1:
            t0 = pos.t
        elif is_gap(last_pos, pos, args):
            i = 1
            t0 = pos.t
        elif pos.t - t0 >= args.duration:
            total += i
            i = 0

        last_pos = pos

    return 1.0 - total / len(trajectory)
