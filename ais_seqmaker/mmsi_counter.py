"""
Count how often each MMSI occurs in a stream of records.
"""


import logging
from collections import Counter

from ais_seqmaker.numeric import parse_int
from ais_seqmaker.records import DEFAULT_DELIMITER, split_columns

logging.basicConfig()
logger = logging.getLogger(__file__)
logger.setLevel(logging.WARNING)


def count_mmsi(lines, delimiter=DEFAULT_DELIMITER):
    """
    Only the first two columns, time and MMSI, have to be present.  The
    MMSI is not range checked, anything that parses to a positive number
    is counted.

    Returns
    -------
    list of tuple
        `(mmsi, count)`, most frequent first.

    Raises
    ------
    FormatError
        If a line has fewer than two columns.
    """
    hist = Counter()
    for line in lines:
        _, mmsi_str = split_columns(line.rstrip("\r\n"), delimiter, 2)
        mmsi = parse_int(mmsi_str, 0)
        if mmsi > 0:
            hist[mmsi] += 1

    logger.debug("Counted %s distinct MMSIs", len(hist))
    return sorted(hist.items(), key=lambda x: (-x[1], x[0]))
