import logging
import os

from click.testing import CliRunner

import ais_seqmaker.cli
from ais_seqmaker.dump import load_diffs, load_sequence

from support import MMSI, make_pos, to_lines


SPLIT_OPTS = ['-N', '5', '-t', '15', '-s', '0.0005', '-i', '5']


def test_make_via_cli(tmpdir, spiky_trajectory, spiky_expected):
    infile = str(tmpdir.join('ais.csv'))
    with open(infile, 'w') as f:
        f.writelines(to_lines(spiky_trajectory))
    outdir = str(tmpdir.join('out'))

    result = CliRunner().invoke(ais_seqmaker.cli.main, [
        'make', infile, '-l', '-p', outdir] + SPLIT_OPTS)
    assert result.exit_code == 0, result.output

    assert sorted(os.listdir(outdir)) == ['{}.bin'.format(MMSI), 'args.txt']
    assert load_sequence(os.path.join(outdir, '{}.bin'.format(MMSI))) == spiky_expected
    with open(os.path.join(outdir, 'args.txt')) as f:
        assert f.read().startswith('-d ,  -N 5 -t 15 -s 0.0005 -i 5 -v 0.0 -l -p ')


def test_make_from_stdin(tmpdir, split_trajectory, split_expected):
    outdir = str(tmpdir.join('out'))
    result = CliRunner().invoke(
        ais_seqmaker.cli.main, ['make', '-p', outdir, '-d', '";"'] + SPLIT_OPTS,
        input=''.join(to_lines(split_trajectory, delimiter=';')))
    assert result.exit_code == 0, result.output
    assert load_sequence(os.path.join(outdir, '{}.bin'.format(MMSI))) == split_expected


def test_make_malformed_input(tmpdir):
    outdir = str(tmpdir.join('out'))
    result = CliRunner().invoke(
        ais_seqmaker.cli.main, ['make', '-p', outdir], input='1456786800.5, 200000000\n')
    assert result.exit_code == 1
    assert 'Could not find enough columns' in result.output

    result = CliRunner().invoke(
        ais_seqmaker.cli.main, ['make', '-p', outdir, '--lenient'],
        input='1456786800.5, 200000000\n')
    assert result.exit_code == 0


def test_make_rejects_non_positive_options():
    for opts in (['-N', '0'], ['-t', '0'], ['-i', '-1'], ['-s', '0'], ['-v', '-1']):
        result = CliRunner().invoke(ais_seqmaker.cli.main, ['make'] + opts, input='')
        assert result.exit_code == 2, opts


def test_stats_via_cli(split_trajectory):
    lines = list(to_lines(split_trajectory))
    lines += to_lines([make_pos(0, 0, 0), make_pos(10, 0, 0), make_pos(30, 0, 0)], mmsi=MMSI + 1)
    # Two complete sequences out of nine positions
    lines += to_lines(
        [make_pos(t, 0, 0) for t in (0, 10, 25, 35, 45, 60, 100, 110, 120)], mmsi=MMSI + 2)
    result = CliRunner().invoke(
        ais_seqmaker.cli.main, ['stats'] + SPLIT_OPTS, input=''.join(lines))
    assert result.exit_code == 0, result.output
    assert result.output == '{}: 0.25\n{}: 1\n{}: 0.333333\n'.format(MMSI, MMSI + 1, MMSI + 2)


def test_stats_rejects_min_speed():
    result = CliRunner().invoke(ais_seqmaker.cli.main, ['stats', '-v', '1'], input='')
    assert result.exit_code == 2


def test_diff_via_cli(tmpdir):
    lines = list(to_lines([make_pos(0, 0, 0), make_pos(10, 600, 0), make_pos(30, 1800, 0)]))
    outfile = str(tmpdir.join('diff.bin'))
    result = CliRunner().invoke(
        ais_seqmaker.cli.main, ['diff', '-s', '2', '-f', outfile], input=''.join(lines))
    assert result.exit_code == 0, result.output
    assert load_diffs(outfile) == [(30, 1800)]


def test_diff_requires_outfile():
    result = CliRunner().invoke(ais_seqmaker.cli.main, ['diff'], input='')
    assert result.exit_code == 2


def test_count_via_cli():
    result = CliRunner().invoke(ais_seqmaker.cli.main, ['count', 'tests/data/records.csv'])
    assert result.exit_code == 0
    assert result.output.splitlines() == [
        '211000001: 3', '244000003: 2', '12345: 1', '211000002: 1']


def test_verbose_enables_module_logging():
    loggers = [module.logger for module in ais_seqmaker.cli.LOGGING_MODULES]
    assert not any(logger.isEnabledFor(logging.INFO) for logger in loggers)
    try:
        result = CliRunner().invoke(
            ais_seqmaker.cli.main, ['--verbose', 'count', 'tests/data/records.csv'])
        assert result.exit_code == 0
        assert all(logger.isEnabledFor(logging.DEBUG) for logger in loggers)
        assert logging.getLogger(ais_seqmaker.records.__file__).isEnabledFor(logging.INFO)
    finally:
        logging.getLogger().setLevel(logging.WARNING)
        for logger in loggers:
            logger.setLevel(logging.WARNING)


def test_version():
    result = CliRunner().invoke(ais_seqmaker.cli.main, ['--version'])
    assert result.exit_code == 0
    assert ais_seqmaker.__version__ in result.output
