"""
Gather positions by MMSI and feed each vessel's cleaned trajectory to a
handler.

Cleaning sorts a trajectory by time, keeps only the first position seen
for each timestamp and, optionally, removes isolated spikes whose distance
to both neighbours exceeds `ds_max`.  Trajectories too short or too sparse
to ever produce a sequence of `seq_length * dti` seconds are skipped.
"""


import logging
from operator import attrgetter

from ais_seqmaker.geo import distance
from ais_seqmaker.numeric import spike_filter
from ais_seqmaker.records import DEFAULT_DELIMITER, RecordReader

logging.basicConfig()
logger = logging.getLogger(__file__)
logger.setLevel(logging.WARNING)

log = logger.info


class Sequencer:

    """
    Per vessel store of positions.

        >>> from ais_seqmaker import Sequencer, SequenceMaker, SplitArgs
        >>> sequencer = Sequencer(SequenceMaker(SplitArgs(360, 50, 10, 0.5)))
        >>> with open('ais.csv') as f:
        ...     sequencer.read(f)
        >>> for mmsi, seq in sequencer.run().items():
        ...     ...

    Parameters
    ----------
    handler : SequenceMaker or SequenceCounter or SequenceDiff
        Decides what `run()` produces.
    """

    def __init__(self, handler):
        self.handler = handler
        self._trajectories = {}

    def __repr__(self):
        return "<{cname}() handler={handler!r} with {n} vessels>".format(
            cname=self.__class__.__name__, handler=self.handler, n=len(self)
        )

    def __len__(self):
        return len(self._trajectories)

    def __contains__(self, mmsi):
        return mmsi in self._trajectories

    @property
    def split_args(self):
        return self.handler.split_args

    def add(self, mmsi, position):
        self._trajectories.setdefault(mmsi, []).append(position)

    def add_trajectory(self, mmsi, trajectory):
        """
        Replace whatever is stored for `mmsi`.
        """
        self._trajectories[mmsi] = list(trajectory)

    def read(self, lines, delimiter=DEFAULT_DELIMITER, strict=True):
        """
        Add every valid record in `lines`.

        Returns
        -------
        RecordReader
            With the line counts of this read.

        Raises
        ------
        FormatError
            If `strict` and a line is malformed.
        """
        reader = RecordReader(delimiter=delimiter, strict=strict)
        for mmsi, position in reader(lines):
            self.add(mmsi, position)
        return reader

    def clean(self, trajectory, apply_spike_filter=False):
        """
        Sort by time and drop repeated timestamps, keeping the one that
        arrived first.

        Returns
        -------
        list of Position
        """
        cleaned = []
        for pos in sorted(trajectory, key=attrgetter("t")):
            if not cleaned or pos.t != cleaned[-1].t:
                cleaned.append(pos)

        if apply_spike_filter:
            ds_max = self.split_args.ds_max

            def is_valid(a, b):
                return distance(a.x, b.x) <= ds_max

            cleaned = spike_filter(cleaned, is_valid)

        return cleaned

    def is_processable(self, trajectory):
        """
        True if `trajectory` spans at least one sequence and has enough
        positions to cover it without exceeding `dt_max` between them.
        """
        duration = self.split_args.duration
        n = len(trajectory)
        return (
            n > 0
            and n * self.split_args.dt_max >= duration
            and trajectory[-1].t - trajectory[0].t >= duration
        )

    def run(self, apply_spike_filter=False):
        """
        Clean every trajectory, in order of MMSI, and hand it to the
        handler.  The store is empty afterwards.

        Returns
        -------
        object
            Whatever `handler.result()` returns.
        """
        trajectories, self._trajectories = self._trajectories, {}

        self.handler.init(len(trajectories))
        n_processed = 0
        for mmsi in sorted(trajectories):
            trajectory = self.clean(trajectories.pop(mmsi), apply_spike_filter)
            if not self.is_processable(trajectory):
                logger.debug("Skipping %s with %s positions", mmsi, len(trajectory))
                continue
            self.handler.process(mmsi, trajectory)
            n_processed += 1

        log("Processed %s trajectories", n_processed)
        return self.handler.result()
