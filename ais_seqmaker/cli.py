"""
Commandline interface for ais-seqmaker
"""


import logging
import os

import click

import ais_seqmaker
from ais_seqmaker import dump, handlers, mmsi_counter, records, segment, sequencer
from ais_seqmaker.dump import dump_args, dump_diffs, dump_sequence
from ais_seqmaker.handlers import DEFAULT_STRIDE, make_handler
from ais_seqmaker.mmsi_counter import count_mmsi
from ais_seqmaker.records import DEFAULT_DELIMITER, FormatError
from ais_seqmaker.segment import (DEFAULT_DTI, DEFAULT_MAX_DS, DEFAULT_MAX_DT,
                                  DEFAULT_MIN_SPEED, DEFAULT_SEQ_LENGTH,
                                  SplitArgs)
from ais_seqmaker.sequencer import Sequencer


POSITIVE_INT = click.IntRange(min=1)
POSITIVE_FLOAT = click.FloatRange(min=0, min_open=True)

# Modules whose loggers are pinned to WARNING until --verbose is given.
LOGGING_MODULES = (records, segment, handlers, sequencer, mmsi_counter, dump)


def normalize_delimiter(delimiter):
    """
    Accept a quoted delimiter and a literal `\\t` for tab.
    """
    if len(delimiter) > 2 and delimiter.startswith('"') and delimiter.endswith('"'):
        delimiter = delimiter[1:-1]
    return delimiter.replace("\\t", "\t")


def read_sequencer(handler, infile, delimiter, strict):
    sequencer = Sequencer(handler)
    try:
        reader = sequencer.read(infile, delimiter=normalize_delimiter(delimiter), strict=strict)
    except FormatError as e:
        raise click.ClickException(str(e))
    logging.getLogger(__file__).debug("Read %r", reader)
    return sequencer


def infile_argument(f):
    return click.argument("infile", type=click.File("r"), default="-")(f)


def delimiter_option(f):
    return click.option(
        "-d", "--delimiter", default=DEFAULT_DELIMITER, show_default=True,
        help="Characters separating columns.  Any of them ends a column."
    )(f)


def lenient_option(f):
    return click.option(
        "--lenient", is_flag=True,
        help="Skip lines with too few columns instead of aborting."
    )(f)


def split_options(f):
    for option in reversed([
        click.option(
            "-N", "--seq-length", type=POSITIVE_INT, default=DEFAULT_SEQ_LENGTH,
            help="Sequence length N, a duration of N x dti and N + 1 grid points. "
                 "(default: {})".format(DEFAULT_SEQ_LENGTH)
        ),
        click.option(
            "-t", "--max-dt", type=POSITIVE_INT, default=DEFAULT_MAX_DT,
            help="Seconds between consecutive points above which a sequence is split. "
                 "(default: {})".format(DEFAULT_MAX_DT)
        ),
        click.option(
            "-s", "--max-ds", type=POSITIVE_FLOAT, default=DEFAULT_MAX_DS,
            help="Nautical miles between consecutive points above which a sequence is "
                 "split. (default: {})".format(DEFAULT_MAX_DS)
        ),
        click.option(
            "-i", "--dti", type=POSITIVE_INT, default=DEFAULT_DTI,
            help="Interpolation interval in seconds. (default: {})".format(DEFAULT_DTI)
        ),
        click.option(
            "-v", "--min-speed", type=click.FloatRange(min=0), default=DEFAULT_MIN_SPEED,
            help="Minimal average speed in knots on an interpolated sequence. "
                 "(default: {})".format(DEFAULT_MIN_SPEED)
        ),
        click.option(
            "-l", "--low-pass", is_flag=True,
            help="Drop isolated points further than --max-ds from both neighbours."
        ),
    ]):
        f = option(f)
    return f


@click.group()
@click.version_option(version=ais_seqmaker.__version__)
@click.option("--verbose", is_flag=True, help="Log progress information.")
def main(verbose):

    """
    Turn AIS records into fixed rate sequences.

    The first five columns of the input are interpreted as reception time
    (UTC epoch seconds), MMSI, AIS slot second, latitude and longitude
    (both in 1/10000 minute).
    """

    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)
        for module in LOGGING_MODULES:
            module.logger.setLevel(logging.DEBUG)


@main.command()
@infile_argument
@delimiter_option
@split_options
@click.option(
    "-p", "--path", default="",
    help="Directory for the generated files. Created if missing."
)
@lenient_option
def make(infile, delimiter, seq_length, max_dt, max_ds, dti, min_speed, low_pass,
         path, lenient):

    """
    Write the sequences of each MMSI to <path>/<mmsi>.bin.
    """

    logger = logging.getLogger(__file__)

    split_args = SplitArgs(seq_length, max_dt, dti, max_ds, min_speed)
    if path:
        os.makedirs(path, exist_ok=True)
    dump_args(path, delimiter, split_args, low_pass)

    handler = make_handler("sequences", split_args)
    sequencer = read_sequencer(handler, infile, delimiter, not lenient)
    logger.debug("Beginning to make sequences for %s vessels", len(sequencer))
    for mmsi, seq in sequencer.run(low_pass).items():
        dump_sequence(mmsi, seq, path)


@main.command()
@infile_argument
@delimiter_option
@split_options
@lenient_option
def stats(infile, delimiter, seq_length, max_dt, max_ds, dti, min_speed, low_pass,
          lenient):

    """
    Print the drop rate of each MMSI.
    """

    if min_speed > 0:
        raise click.BadParameter("incompatible with drop rates, use 0", param_hint="--min-speed")

    split_args = SplitArgs(seq_length, max_dt, dti, max_ds, min_speed)
    handler = make_handler("drop-rate", split_args)
    sequencer = read_sequencer(handler, infile, delimiter, not lenient)
    for mmsi, rate in sequencer.run(low_pass).items():
        click.echo("{}: {:g}".format(mmsi, rate))


@main.command()
@infile_argument
@delimiter_option
@click.option(
    "-s", "--stride", type=POSITIVE_INT, default=DEFAULT_STRIDE,
    help="Distance in positions between the points of a pair. "
         "(default: {})".format(DEFAULT_STRIDE)
)
@click.option(
    "-f", "--outfile", required=True, type=click.Path(dir_okay=False),
    help="File to write the binary diffs to."
)
@lenient_option
def diff(infile, delimiter, stride, outfile, lenient):

    """
    Write time and distance differences of positions of a common MMSI.
    """

    handler = make_handler("diff", stride=stride)
    sequencer = read_sequencer(handler, infile, delimiter, not lenient)
    dump_diffs(sequencer.run(), outfile)


@main.command()
@infile_argument
@delimiter_option
def count(infile, delimiter):

    """
    Print how often each MMSI occurs, most frequent first.
    """

    try:
        counts = count_mmsi(infile, normalize_delimiter(delimiter))
    except FormatError as e:
        raise click.ClickException(str(e))
    for mmsi, n in counts:
        click.echo("{}: {}".format(mmsi, n))
