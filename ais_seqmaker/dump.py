"""
Binary output of sequences and diffs.

Sequences are written as pairs of native endian 32 bit signed integers,
latitude then longitude in 1/10000 minute, one file per MMSI.  Diffs are
pairs of an unsigned 32 bit time delta in seconds and a signed 32 bit
distance in 1/10000 nautical miles.
"""


import logging
import os

import numpy as np

from ais_seqmaker.geo import Point

logging.basicConfig()
logger = logging.getLogger(__file__)
logger.setLevel(logging.WARNING)

log = logger.info


POINT_DTYPE = np.dtype([("latitude", np.int32), ("longitude", np.int32)])
DIFF_DTYPE = np.dtype([("dt", np.uint32), ("dx", np.int32)])

ARGS_FILENAME = "args.txt"


def sequence_filename(mmsi, path=""):
    return os.path.join(path, "{}.bin".format(mmsi))


def dump_sequence(mmsi, seq, path=""):
    """
    Write `seq` to `<path>/<mmsi>.bin`.

    Returns
    -------
    str
        The file name.
    """
    fname = sequence_filename(mmsi, path)
    np.array([tuple(p) for p in seq], dtype=POINT_DTYPE).tofile(fname)
    log("Wrote %s points to %s", len(seq), fname)
    return fname


def load_sequence(fname):
    """
    Read a file written by `dump_sequence()`.

    Returns
    -------
    list of Point
    """
    data = np.fromfile(fname, dtype=POINT_DTYPE)
    return [Point(int(lat), int(lon)) for lat, lon in data]


def dump_diffs(diffs, fname):
    np.array(diffs, dtype=DIFF_DTYPE).tofile(fname)
    log("Wrote %s diffs to %s", len(diffs), fname)
    return fname


def load_diffs(fname):
    return [(int(dt), int(dx)) for dt, dx in np.fromfile(fname, dtype=DIFF_DTYPE)]


def dump_args(path, delimiter, split_args, low_pass):
    """
    Record the parameters of a run next to its output, in the form of the
    command line options that produced it.
    """
    opts = [
        "-d {}".format(delimiter),
        "-N {}".format(split_args.seq_length),
        "-t {}".format(split_args.dt_max),
        "-s {}".format(split_args.ds_max),
        "-i {}".format(split_args.dti),
        "-v {}".format(split_args.v_min),
    ]
    if low_pass:
        opts.append("-l")
    opts.append("-p {}".format(path))

    fname = os.path.join(path, ARGS_FILENAME)
    with open(fname, "w") as f:
        f.write(" ".join(opts) + "\n")
    return fname
