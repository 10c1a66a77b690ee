"""Published time seeds of the Taillard flow shop instances.

``TIME_SEEDS[k]`` is the seed of instance ``ta{k + 1:03d}``. Instances come
in twelve size classes of ten, from 20x5 (ta001-ta010) to 500x20
(ta111-ta120).
"""

from __future__ import annotations

import re

from taillard.errors import InstanceNameError, OutOfRangeIdError

# fmt: off
TIME_SEEDS: tuple[int, ...] = (
    873654221, 379008056, 1866992158, 216771124, 495070989,      # ta001-ta005
    402959317, 1369363414, 2021925980, 573109518, 88325120,      # ta006-ta010
    587595453, 1401007982, 873136276, 268827376, 1634173168,     # ta011-ta015
    691823909, 73807235, 1273398721, 2065119309, 1672900551,     # ta016-ta020
    479340445, 268827376, 1958948863, 918272953, 555010963,      # ta021-ta025
    2010851491, 1519833303, 1748670931, 1923497586, 1829909967,  # ta026-ta030
    1328042058, 200382020, 496319842, 1203030903, 1730708564,    # ta031-ta035
    450926852, 1303135678, 1273398721, 587288402, 248421594,     # ta036-ta040
    1958948863, 575633267, 655816003, 1977864101, 93805469,      # ta041-ta045
    1803345551, 49612559, 1899802599, 2013025619, 578962478,     # ta046-ta050
    1539989115, 691823909, 655816003, 1315102446, 1949668355,    # ta051-ta055
    1923497586, 1805594913, 1861070898, 715643788, 464843328,    # ta056-ta060
    896678084, 1179439976, 1122278347, 416756875, 267829958,     # ta061-ta065
    1835213917, 1328833962, 1418570761, 161033112, 304212574,    # ta066-ta070
    1539989115, 655816003, 960914243, 1915696806, 2013025619,    # ta071-ta075
    1168140026, 1923497586, 167698528, 1528387973, 993794175,    # ta076-ta080
    450926852, 1462772409, 1021685265, 83696007, 508154254,      # ta081-ta085
    1861070898, 26482542, 444956424, 2115448041, 118254244,      # ta086-ta090
    471503978, 1215892992, 135346136, 1602504050, 160037322,     # ta091-ta095
    551454346, 519485142, 383947510, 1968171878, 540872513,      # ta096-ta100
    2013025619, 475051709, 914834335, 810642687, 1019331795,     # ta101-ta105
    2056065863, 1342855162, 1325809384, 1988803007, 765656702,   # ta106-ta110
    1368624604, 450181436, 1927888393, 1759567256, 606425239,    # ta111-ta115
    19268348, 1298201670, 2041736264, 379756761, 28837162,       # ta116-ta120
)
# fmt: on

FIRST_ID = 1
LAST_ID = len(TIME_SEEDS)

_NAME_RE = re.compile(r"^(?:ta)?0*(\d+)$", re.IGNORECASE)


def validate_instance_id(instance_id: int) -> int:
    """Return ``instance_id`` unchanged if it names a known instance.

    Raises:
        TypeError: If ``instance_id`` is not an ``int`` (bools rejected).
        OutOfRangeIdError: If it lies outside ``[1, 120]``.
    """
    if isinstance(instance_id, bool) or not isinstance(instance_id, int):
        raise TypeError(f"instance id must be int, got {type(instance_id).__name__}")
    if not (FIRST_ID <= instance_id <= LAST_ID):
        raise OutOfRangeIdError(instance_id, FIRST_ID, LAST_ID)
    return instance_id


def get_time_seed(instance_id: int) -> int:
    """Time seed of instance ``instance_id`` (1-based)."""
    return TIME_SEEDS[validate_instance_id(instance_id) - 1]


def instance_name(instance_id: int) -> str:
    return f"ta{validate_instance_id(instance_id):03d}"


def parse_instance_name(name: str) -> int:
    """Parse ``'ta007'``, ``'TA7'`` or ``'7'`` into the instance id 7."""
    match = _NAME_RE.match(name.strip())
    if match is None:
        raise InstanceNameError(f"not a Taillard instance name: {name!r}")
    return validate_instance_id(int(match.group(1)))
