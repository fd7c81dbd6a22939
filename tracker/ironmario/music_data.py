"""Song id lookup for the IronMario 64 music randomizer.

The ROM ships a soundtrack pulled from many games; the sequence id read
from memory maps to (game title, track title). Ids 0-11 are vanilla
fanfares and jingles with no overlay display.
"""

SONG_MAP: dict[int, tuple[str, str]] = {
    12: ("Super Mario 64", "Endless Stairs"),
    13: ("Super Mario 64", "Merry Go Round"),
    14: ("Super Mario 64", "Title Screen"),
    15: ("Super Mario 64", "Bob-omb Battlefield"),
    16: ("Super Mario 64", "Inside Castle"),
    17: ("Super Mario 64", "Dire Dire Docks"),
    18: ("Super Mario 64", "Lethal Lava Land"),
    19: ("Super Mario 64", "Title"),
    20: ("Super Mario 64", "Snowman's Land"),
    21: ("Super Mario 64", "Cool Cool Mountain Slide"),
    22: ("Super Mario 64", "Big Boo's Haunt"),
    23: ("Super Mario 64", "Piranha Plant Lullaby"),
    24: ("Super Mario 64", "Hazy Maze Cave"),
    25: ("Super Mario 64", "Power-up"),
    26: ("Super Mario 64", "Metal Cap"),
    27: ("Super Mario 64", "Koopa Road"),
    28: ("Super Mario 64", "Race"),
    29: ("Super Mario 64", "Boss Battle"),
    30: ("Super Mario 64", "Bowser Battle"),
    31: ("Super Mario 64", "File Select"),
    32: ("Super Mario 64", "Shell Power-up"),
    33: ("Super Mario 64", "Start Menu"),
    34: ("Bomberman 64", "Green Garden"),
    35: ("Bomberman 64", "Blue Resort"),
    36: ("Bomberman Hero", "Redial"),
    37: ("Wii", "Shop Channel"),
    38: ("Chrono Trigger", "Spekkio's Theme"),
    39: ("Castlevania: Order of Ecclesia", "A Prologue"),
    40: ("Diddy Kong Racing", "Credits (Port)"),
    41: ("Diddy Kong Racing", "Frosty Village"),
    42: ("Diddy Kong Racing", "Spacedust Alley"),
    43: ("Donkey Kong Country", "Aquatic Ambience"),
    44: ("Donkey Kong Country 2", "Forest Interlude"),
    45: ("Donkey Kong Country 2", "Stickerbrush Symphony"),
    46: ("Diddy Kong Racing", "Greenwood Village"),
    47: ("Donkey Kong Country 2", "In a Snow-Bound Land"),
    48: ("EarthBound", "Home Sweet Home"),
    49: ("EarthBound", "Onett Theme"),
    50: ("The Legend of Zelda: Ocarina of Time", "Gerudo Valley"),
    51: ("Super Mario 64", "Hard Puzzle"),
    52: ("Super Mario 64", "Inside Castle Walls (Remix)"),
    53: ("Kirby: Nightmare in Dream Land", "Butter Building"),
    54: ("Kirby 64: The_Crystal Shards", "Shiver Star"),
    55: ("Kirby's Adventure", "Yogurt Yard"),
    56: ("Kirby Super Star", "Mine Cart"),
    57: ("The Legend of Zelda: Majora's Mask", "Clock Town Day 1"),
    58: ("Mario & Luigi: Partners in Time", "Thwomp Caverns"),
    59: ("Mario Kart 8", "Rainbow Road"),
    60: ("Mario Kart 64", "Koopa Beach"),
    61: ("Mario Kart Wii", "Maple Treeway"),
    62: ("Mega Man 3", "Spark Man Stage"),
    63: ("Mega Man Battle Network 5", "Hero Theme"),
    64: ("Mario Kart 64", "Moo Moo Farm"),
    65: ("New Super Mario Bros.", "Athletic Theme"),
    66: ("New Super Mario Bros.", "Desert Theme"),
    67: ("New Super Mario Bros. U", "Overworld"),
    68: ("New Super Mario Bros. Wii", "Forest"),
    69: ("The Legend of Zelda: Ocarina of Time", "Lost Woods"),
    70: ("Pilotwings", "Light Plane"),
    71: ("Pokémon Diamond & Pearl", "Eterna Forest"),
    72: ("Pokémon HeartGold & SoulSilver", "Lavender Town"),
    73: ("Super Mario 64", "Rainbow Castle"),
    74: ("Bomberman 64", "Red Mountain"),
    75: ("Deltarune", "Rude Buster"),
    76: ("Super Mario 3D World", "Overworld"),
    77: ("Super Mario Sunshine", "No-Pack/Puzzle Level"),
    78: ("Snowboard Kids", "Big Snowman"),
    79: ("Sonic Adventure", "Emerald Coast"),
    80: ("Sonic the Hedgehog", "Green Hill Zone"),
    81: ("Super Castlevania IV", "Underwater City"),
    82: ("Super Mario Land", "Birabuto Kingdom"),
    83: ("Super Mario RPG", "Inside the Forest Maze"),
    84: ("Super Mario Sunshine", "Delfino Plaza"),
    85: ("Super Mario Sunshine", "Gelato Beach"),
    86: ("Yoshi's Island (SNES)", "Caves"),
    87: ("The Legend of Zelda: Ocarina of Time", "Water Temple"),
    88: ("Wave Race 64", "Sunny Beach"),
    89: ("Final Fantasy VII", "WFH"),
    90: ("The Legend of Zelda: Ocarina of Time", "Kokiri Forest"),
    91: ("The Legend of Zelda: Ocarina of Time", "Zora's Domain"),
    92: ("The Legend of Zelda: Ocarina of Time", "Kakariko Village"),
    93: ("???", "A Morning Jog"),
    94: ("The Legend of Zelda: The Wind Waker", "Outset Island"),
    95: ("Super Paper Mario", "Flipside"),
    96: ("Super Mario Galaxy", "Ghostly Galaxy"),
    97: ("Super Mario RPG", "Nimbus Land"),
    98: ("Super Mario Galaxy", "Battlerock Galaxy"),
    99: ("Sonic Adventure", "Windy Hill"),
    100: ("Super Paper Mario", "The Overthere Stair"),
    101: ("Super Mario Sunshine", "Secret Course"),
    102: ("Super Mario Sunshine", "Bianco Hills"),
    103: ("Super Paper Mario", "Lineland Road"),
    104: ("Paper Mario: The Thousand-Year Door", "X-Naut Fortress"),
    105: ("Mario & Luigi: Bowser's Inside Story", "Bumpsy Plains"),
    106: ("Super Mario World", "Athletic Theme"),
    107: ("The Legend of Zelda: Skyward Sword", "Skyloft"),
    108: ("Super Mario World", "Castle"),
    109: ("Super Mario Galaxy", "Comet Observatory"),
    110: ("Banjo-Kazooie", "Freezeezy Peak"),
    111: ("Mario Kart DS", "Waluigi Pinball"),
    112: ("Kirby 64: The Crystal Shards", "Factory Inspection"),
    113: ("Donkey Kong 64", "Creepy Castle"),
    114: ("Paper Mario", "Forever Forest"),
    115: ("Super Mario Bros.", "Bowser Theme (Remix)"),
    116: ("The Legend of Zelda: Twilight Princess", "Gerudo Desert"),
    117: ("Yoshi's Island", "Overworld"),
    118: ("Mario & Luigi: Partners in Time", "Gritzy Desert"),
    119: ("Donkey Kong 64", "Angry Aztec"),
    120: ("Mario & Luigi: Partners in Time", "Yoshi's Village"),
    121: ("Touhou", "Youkai Mountain"),
    122: ("Mario & Luigi: Bowser's Inside Story", "Deep Castle"),
    123: ("Paper Mario: The Thousand-Year Door", "Petal Meadows"),
    124: ("Mario Party", "Yoshi's Tropical Island"),
    125: ("Super Mario 3D World", "Piranha Creek"),
    126: ("Final Fantasy VII", "Temple of the Ancients"),
    127: ("Paper Mario", "Dry Dry Desert"),
    128: ("Rayman", "Band Land"),
    129: ("Donkey Kong 64", "Hideout Helm"),
    130: ("Donkey Kong 64", "Frantic Factory"),
    131: ("Super Paper Mario", "Sammer's Kingdom"),
    132: ("Super Mario Galaxy", "Purple Comet"),
    133: ("The Legend of Zelda: Majora's Mask", "Stone Tower Temple"),
    134: ("Banjo-Kazooie", "Treasure Trove Cove (Port)"),
    135: ("Banjo-Kazooie", "Gobi's Valley"),
    136: ("Super Mario 64: Last Impact", "Unknown"),
    137: ("Donkey Kong 64", "Fungi Forest"),
    138: ("Paper Mario: The Thousand-Year Door", "Palace of Shadow"),
    139: ("Paper Mario: The Thousand-Year Door", "Rogueport Sewers"),
    140: ("Super Mario Galaxy 2", "Honeybloom Galaxy"),
    141: ("Pokémon Mystery Dungeon", "Sky Tower"),
    142: ("Super Mario Bros. 3", "Overworld"),
    143: ("Super Mario RPG", "Mario's Pad"),
    144: ("Super Mario RPG", "Sunken Ship"),
    145: ("Super Mario Galaxy", "Buoy Base Galaxy"),
    146: ("Donkey Kong 64", "Crystal Caves"),
    147: ("Super Paper Mario", "Floro Caverns"),
    148: ("Ys", "Title Theme"),
    149: ("The Legend of Zelda: Twilight Princess", "Lake Hylia"),
    150: ("Mario Kart 64", "Frappe Snowland"),
    151: ("Donkey Kong 64", "Gloomy Galleon"),
    152: ("Mario Kart 64", "Bowser's Castle"),
    153: ("Mario Kart 64", "Rainbow Road"),
    154: ("Donkey Kong Country 2", "Rigging Jib-Jig"),
    155: ("Donkey Kong Country 2", "Crocodile Isle"),
    156: ("The Legend of Zelda: The Wind Waker", "Dragon Roost Island"),
    157: ("Pokémon Black & White", "Accumula Town"),
    158: ("Pokémon HeartGold & SoulSilver", "Vermilion City"),
    159: ("Undertale", "Snowdin Town"),
    160: ("Undertale", "Bonetrousle"),
    161: ("Undertale", "Death by Glamour"),
    162: ("Undertale", "Home"),
    163: ("Undertale", "Ruins"),
    164: ("Undertale", "Spider Dance"),
    165: ("Undertale", "Waterfall"),
}


def song_name(song_id: int) -> str:
    """Return ``'<game> - <track>'`` for a song id, or ``'Unknown'``."""
    info = SONG_MAP.get(song_id)
    if info is None:
        return 'Unknown'
    game, track = info
    return f'{game} - {track}'
