"""
Parse delimited AIS records into `(mmsi, Position)` pairs.

A record is a line with at least five columns:

    (1) Time of reception as UTC epoch seconds, e.g. 1456786800.005
    (2) MMSI
    (3) AIS slot second
    (4) Latitude in 1/10000 minute
    (5) Longitude in 1/10000 minute

Additional columns are ignored.
"""


import logging

from ais_seqmaker.geo import Point, Position, is_valid_mmsi
from ais_seqmaker.numeric import INT32_MAX, parse_int, quantize_recv_time

logging.basicConfig()
logger = logging.getLogger(__file__)
logger.setLevel(logging.WARNING)

log = logger.info


DEFAULT_DELIMITER = ", "
N_COLUMNS = 5

# Anything outside the valid coordinate range works, as long as it is
# rejected by `Point.is_valid()`.
POSITION_FALLBACK = INT32_MAX


class FormatError(ValueError):
    """
    The shape of a line is wrong: too few columns or an empty column.
    Unlike an invalid record this is not silently skipped.
    """


def split_columns(line, delimiter=DEFAULT_DELIMITER, n=N_COLUMNS):
    """
    Split `line` on any of the characters in `delimiter` and return the
    first `n` non-empty tokens.  With the default `", "` both commas and
    spaces separate columns and runs of them count as one.

    Raises
    ------
    FormatError
        If there are fewer than `n` tokens.
    """
    tokens = []
    start = 0
    for idx, char in enumerate(line):
        if char in delimiter:
            if idx > start:
                tokens.append(line[start:idx])
                if len(tokens) == n:
                    return tokens
            start = idx + 1
    if len(line) > start:
        tokens.append(line[start:])

    if len(tokens) < n:
        raise FormatError("Invalid data format. Could not find enough columns.")
    return tokens[:n]


def parse_record(t_str, mmsi_str, slot_str, lat_str, lon_str):
    """
    Validate and convert the five columns of a record.

    Returns
    -------
    tuple or None
        `(mmsi, Position)`, or `None` if the MMSI, the time or the position
        is invalid.

    Raises
    ------
    FormatError
        If any column is empty.
    """
    if not all((t_str, mmsi_str, slot_str, lat_str, lon_str)):
        raise FormatError("Invalid data format. At least one column is empty.")

    t = quantize_recv_time(t_str, slot_str)
    mmsi = parse_int(mmsi_str, 0)
    point = Point(parse_int(lat_str, POSITION_FALLBACK), parse_int(lon_str, POSITION_FALLBACK))

    if t is None or not is_valid_mmsi(mmsi) or not point.is_valid():
        return None
    return mmsi, Position(t, point)


class RecordReader:

    """
    Turn an iterable of text lines into valid `(mmsi, Position)` pairs.

        >>> with open('ais.csv') as f:
        ...     for mmsi, pos in RecordReader(delimiter=',')(f):
        ...         ...

    Parameters
    ----------
    delimiter : str, optional
        Characters separating columns.
    strict : bool, optional
        If True a malformed line raises `FormatError` and ends the run.
        Otherwise it is logged and skipped like an invalid record.
    """

    def __init__(self, delimiter=DEFAULT_DELIMITER, strict=True):
        self.delimiter = delimiter
        self.strict = strict
        self.n_lines = 0
        self.n_valid = 0
        self.n_invalid = 0
        self.n_malformed = 0

    def __repr__(self):
        return "<{cname}(delimiter={delim!r}, strict={strict}) lines={n}>".format(
            cname=self.__class__.__name__,
            delim=self.delimiter,
            strict=self.strict,
            n=self.n_lines,
        )

    def _parse_line(self, line):
        return parse_record(*split_columns(line, self.delimiter, N_COLUMNS))

    def __call__(self, lines):
        for line in lines:
            line = line.rstrip("\r\n")
            self.n_lines += 1
            try:
                record = self._parse_line(line)
            except FormatError:
                if self.strict:
                    raise
                self.n_malformed += 1
                logger.debug("Skipping malformed line %s: %r", self.n_lines, line)
                continue

            if record is None:
                self.n_invalid += 1
                logger.debug("Skipping invalid record on line %s", self.n_lines)
                continue

            self.n_valid += 1
            yield record

        log(
            "Read %s lines: %s valid, %s invalid, %s malformed",
            self.n_lines,
            self.n_valid,
            self.n_invalid,
            self.n_malformed,
        )
