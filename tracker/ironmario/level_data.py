"""Level id lookup: full course name and the short form used on the overlay.

Level ids are the values of the current-level halfword in RDRAM. Id 1 is
the file select / menu, which is also the tracker's default before the
first refresh.

Id 3626007 is declared several times in the randomizer's data (basement,
second floor, third floor, Bowser in the Sky); only the last declaration
is meaningful, so only that one is kept here.
"""

LOCATION_MAP: dict[int, tuple[str, str]] = {
    0: ('', ''),
    1: ('Menu', 'Menu'),
    4: ("Big Boo's Haunt", 'BBH'),
    5: ('Cool Cool Mountain', 'CCM'),
    6: ('Castle', 'Castle'),
    7: ('Hazy Maze Cave', 'HMC'),
    8: ('Shifting Sand Land', 'SSL'),
    9: ('Bob-Omb Battlefield', 'BoB'),
    10: ("Snowman's Land", 'SL'),
    11: ('Wet Dry World', 'WDW'),
    12: ('Jolly Roger Bay', 'JRB'),
    13: ('Tiny Huge Island', 'THI'),
    14: ('Tick Tock Clock', 'TTC'),
    15: ('Rainbow Ride', 'RR'),
    16: ('Outside Castle', 'Outside'),
    17: ('Bowser in the Dark World', 'BitDW'),
    18: ('Vanish Cap Under the Moat', 'Vanish'),
    19: ('Bowser in the Fire Sea', 'BitFS'),
    20: ('Secret Aquarium', 'SA'),
    22: ('Lethal Lava Land', 'LLL'),
    23: ('Dire Dire Docks', 'DDD'),
    24: ("Whomp's Fortress", 'WF'),
    26: ('Garden', 'Garden'),
    27: ("Peach's Slide", 'PSS'),
    28: ('Cavern of the Metal Cap', 'Metal'),
    29: ('Tower of the Wing Cap', 'Wing'),
    30: ('Bowser Fight 1', 'Bowser1'),
    31: ('Wing Mario Over the Rainbow', 'WMotR'),
    36: ('Tall Tall Mountain', 'TTM'),
    3626007: ('Bowser in the Sky', 'BitS'),
}

# Courses with no water; kept for overlay layouts that hide the water meter
HAS_NO_WATER = frozenset({9, 24, 4, 22, 8, 14, 15, 27, 31, 29, 18, 17, 30, 19})


def level_name(level_id: int) -> str:
    """Full course name for a level id, or ``'Unknown'``."""
    entry = LOCATION_MAP.get(level_id)
    return entry[0] if entry is not None else 'Unknown'


def level_abbr(level_id: int) -> str:
    """Short course name for a level id, or ``'Unknown'``."""
    entry = LOCATION_MAP.get(level_id)
    return entry[1] if entry is not None else 'Unknown'


def has_water(level_id: int) -> bool:
    return level_id not in HAS_NO_WATER
