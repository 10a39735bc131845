import pytest

from ais_seqmaker.geo import Point
from ais_seqmaker.segment import SplitArgs

from support import make_pos


@pytest.fixture(scope='function')
def split_args():
    # 5 AIS units is 0.0005 nm
    return SplitArgs(seq_length=5, dt_max=15, dti=5, ds_max=5. / (600000. / 60.), v_min=0.)


@pytest.fixture(scope='function')
def split_trajectory():
    """
    Three complete sequences, one position far in the future and a short
    tail broken by a spatial jump.
    """
    return [
        make_pos(0, 0, 0),  # 1.1
        make_pos(10, 4, 2),  # 1.2
        make_pos(20, 8, 4),  # 1.3
        make_pos(30, 12, 6),  # 1.x
        make_pos(40, 16, 8),  # 2.1
        make_pos(50, 20, 10),  # 2.2
        make_pos(60, 24, 12),  # 2.3
        make_pos(70, 28, 14),  # 2.x
        make_pos(999, 32, 16),
        make_pos(90, 36, 18),  # 3.1
        make_pos(100, 40, 20),  # 3.2
        make_pos(110, 44, 22),  # 3.3
        make_pos(120, 48, 24),  # 3.x
        make_pos(130, 52, 26),
        make_pos(140, 60, 28),
        make_pos(150, 60, 30),
    ]


@pytest.fixture(scope='function')
def split_expected():
    return [
        Point(0, 0), Point(2, 1), Point(4, 2), Point(6, 3), Point(8, 4), Point(10, 5),
        Point(16, 8), Point(18, 9), Point(20, 10), Point(22, 11), Point(24, 12), Point(26, 13),
        Point(36, 18), Point(38, 19), Point(40, 20), Point(42, 21), Point(44, 22), Point(46, 23),
    ]


@pytest.fixture(scope='function')
def spiky_trajectory():
    """
    Four complete sequences once spikes are removed.
    """
    return [
        make_pos(0, 0, 0),  # 1.1
        make_pos(10, 4, 2),  # 1.2
        make_pos(11, 99, 4),
        make_pos(20, 8, 4),  # 1.3
        make_pos(30, 12, 6),  # 1.x
        make_pos(31, 16, 8),
        make_pos(40, 16, 8),
        make_pos(41, 20, 99),
        make_pos(42, 20, 99),
        make_pos(50, 20, 10),  # 2.1
        make_pos(60, 24, 12),  # 2.2
        make_pos(70, 28, 14),  # 2.3
        make_pos(80, 32, 16),  # 2.x
        make_pos(90, 36, 18),  # 3.1
        make_pos(999, 36, 18),
        make_pos(100, 40, 20),  # 3.2
        make_pos(110, 44, 22),  # 3.3
        make_pos(120, 48, 24),  # 3.x
        make_pos(130, 52, 26),  # 4.1
        make_pos(140, 56, 28),  # 4.2
        make_pos(150, 60, 30),  # 4.3
        make_pos(160, 64, 32),  # 4.x
        make_pos(161, 64, 99),
        make_pos(170, 68, 34),
        make_pos(180, 72, 36),
        make_pos(190, 76, 38),
    ]


@pytest.fixture(scope='function')
def spiky_expected():
    return [
        Point(0, 0), Point(2, 1), Point(4, 2), Point(6, 3), Point(8, 4), Point(10, 5),
        Point(20, 10), Point(22, 11), Point(24, 12), Point(26, 13), Point(28, 14), Point(30, 15),
        Point(36, 18), Point(38, 19), Point(40, 20), Point(42, 21), Point(44, 22), Point(46, 23),
        Point(52, 26), Point(54, 27), Point(56, 28), Point(58, 29), Point(60, 30), Point(62, 31),
    ]
