from ais_seqmaker.geo import Point, Position

# Start of a minute, so that slot second == t % 60 maps a record back
# onto BASE_TIME + t.
BASE_TIME = 1456786800

MMSI = 200000000


def make_pos(t, lat, lon):
    return Position(t, Point(lat, lon))


def to_lines(trajectory, mmsi=MMSI, base_time=BASE_TIME, delimiter=", "):
    """
    Render positions as input records whose quantized time is
    `base_time + pos.t`.
    """
    for pos in trajectory:
        t = base_time + pos.t
        yield delimiter.join(
            str(x) for x in ("{}.5".format(t), mmsi, t % 60, pos.x.latitude, pos.x.longitude)
        ) + "\n"


def shift(trajectory, dt):
    return [Position(pos.t + dt, pos.x) for pos in trajectory]
