"""
Strategies deciding what the `Sequencer()` produces from each cleaned
trajectory.

Every handler implements the same small interface:

    init(n_trajectories)
        Called once before the first trajectory.
    process(mmsi, trajectory)
        Called for every trajectory that passed cleaning and gating.
    result()
        The collected output.

and carries the `SplitArgs()` used by the `Sequencer()` for cleaning and
gating.  The set of handlers is closed, pick one by name with
`make_handler()`.
"""


import logging

from ais_seqmaker.geo import distance
from ais_seqmaker.numeric import adjacent_diff, round_half_away
from ais_seqmaker.segment import SplitArgs, drop_rate, split

logging.basicConfig()
logger = logging.getLogger(__file__)
logger.setLevel(logging.WARNING)

log = logger.info


DEFAULT_STRIDE = 1

# Distances in the diff export are in 1/10000 nautical mile.
AIS_SCALE = 10000.0

# Admits every non-empty trajectory through the gate.
DIFF_SPLIT_ARGS = SplitArgs(seq_length=0, dt_max=1, dti=0, ds_max=0.0, v_min=0.0)


class SequenceMaker:

    """
    Collect the resampled sequences of each vessel.  Vessels without a
    single accepted sequence are left out.
    """

    name = "sequences"

    def __init__(self, split_args):
        self.split_args = split_args
        self.seqs = {}

    def __repr__(self):
        return "<{cname}() {args} with {n} vessels>".format(
            cname=self.__class__.__name__, args=self.split_args, n=len(self.seqs)
        )

    def init(self, n_trajectories):
        self.seqs = {}

    def process(self, mmsi, trajectory):
        seq = split(trajectory, self.split_args)
        if seq:
            self.seqs[mmsi] = seq
        else:
            log("No sequence for %s out of %s positions", mmsi, len(trajectory))

    def result(self):
        """
        Returns
        -------
        dict
            MMSI -> list of `Point()`, `split_args.seq_length + 1` points per
            sequence.
        """
        return self.seqs


class SequenceCounter:

    """
    Compute the drop rate of each vessel.
    """

    name = "drop-rate"

    def __init__(self, split_args):
        self.split_args = split_args
        self.drop_rates = {}

    def __repr__(self):
        return "<{cname}() {args} with {n} vessels>".format(
            cname=self.__class__.__name__, args=self.split_args, n=len(self.drop_rates)
        )

    def init(self, n_trajectories):
        self.drop_rates = {}

    def process(self, mmsi, trajectory):
        self.drop_rates[mmsi] = drop_rate(trajectory, self.split_args)

    def result(self):
        return self.drop_rates


class SequenceDiff:

    """
    Time and distance between each position and the one `stride` positions
    later, over whole trajectories.  The pairs of all vessels go into one
    flat list, vessel after vessel.
    """

    name = "diff"

    split_args = DIFF_SPLIT_ARGS

    def __init__(self, stride=DEFAULT_STRIDE):
        if stride <= 0:
            raise ValueError("stride has to be non-zero and positive")
        self.stride = stride
        self.diffs = []

    def __repr__(self):
        return "<{cname}(stride={stride}) with {n} diffs>".format(
            cname=self.__class__.__name__, stride=self.stride, n=len(self.diffs)
        )

    @staticmethod
    def diff(pos1, pos2):
        """
        Returns
        -------
        tuple
            `(dt, dx)`, seconds and 1/10000 nautical miles.
        """
        dx_nm = distance(pos2.x, pos1.x)
        return pos2.t - pos1.t, round_half_away(dx_nm * AIS_SCALE)

    def init(self, n_trajectories):
        self.diffs = []

    def process(self, mmsi, trajectory):
        self.diffs.extend(adjacent_diff(trajectory, self.diff, self.stride))

    def result(self):
        return self.diffs


HANDLERS = {cls.name: cls for cls in (SequenceMaker, SequenceCounter, SequenceDiff)}


def make_handler(name, split_args=None, stride=DEFAULT_STRIDE):
    """
    Build the handler registered as `name`.

    Parameters
    ----------
    name : str
        One of `HANDLERS`.
    split_args : SplitArgs, optional
        Required by the "sequences" and "drop-rate" handlers.
    stride : int, optional
        Used by the "diff" handler.
    """
    try:
        cls = HANDLERS[name]
    except KeyError:
        raise ValueError(
            "unknown handler {!r}, expected one of {}".format(name, sorted(HANDLERS))
        )

    if cls is SequenceDiff:
        return cls(stride)
    if split_args is None:
        raise ValueError("handler {!r} needs split arguments".format(name))
    return cls(split_args.validate())
