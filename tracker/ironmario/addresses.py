"""IronMario 64 memory address table.

All addresses are RDRAM offsets read big-endian. Mario and HUD fields are
derived from their base address once, when the table is built:

  address = base + fixed_offset

The ROM signature lives in the ROM domain instead of RDRAM.
"""

from dataclasses import dataclass, field

MARIO_BASE = 0x1A0340
HUD_BASE = 0x1A0330

CURRENT_LEVEL_ID = 0x18FD78
CURRENT_SEED = 0x1CDF80
DELAYED_WARP_OP = 0x1A031C
INTENDED_LEVEL_ID = 0x19F0CC
CURRENT_SONG_ID = 0x19485E

ROM_SIGNATURE_ADDR = 0x20
ROM_SIGNATURE_LEN = 12

# Offsets from MARIO_BASE
MARIO_INPUT_OFFSET = 0x2
MARIO_ACTION_OFFSET = 0xC
MARIO_POS_OFFSET = 0x3C            # 3 big-endian floats (x, y, z)
MARIO_HURT_COUNTER_OFFSET = 0xB2

# Offsets from HUD_BASE
HUD_STARS_OFFSET = 0x4
HUD_HEALTH_OFFSET = 0x6


@dataclass(frozen=True)
class MarioAddresses:
    """Mario struct fields, derived from a base address."""
    BASE: int = MARIO_BASE
    INPUT: int = field(init=False)
    ACTION: int = field(init=False)
    POS: int = field(init=False)
    HURT_COUNTER: int = field(init=False)

    def __post_init__(self):
        object.__setattr__(self, 'INPUT', self.BASE + MARIO_INPUT_OFFSET)
        object.__setattr__(self, 'ACTION', self.BASE + MARIO_ACTION_OFFSET)
        object.__setattr__(self, 'POS', self.BASE + MARIO_POS_OFFSET)
        object.__setattr__(self, 'HURT_COUNTER',
                           self.BASE + MARIO_HURT_COUNTER_OFFSET)


@dataclass(frozen=True)
class HudAddresses:
    """HUD fields, derived from a base address."""
    BASE: int = HUD_BASE
    STARS: int = field(init=False)
    HEALTH: int = field(init=False)

    def __post_init__(self):
        object.__setattr__(self, 'STARS', self.BASE + HUD_STARS_OFFSET)
        object.__setattr__(self, 'HEALTH', self.BASE + HUD_HEALTH_OFFSET)


@dataclass(frozen=True)
class AddressTable:
    """Complete set of addresses the state refresh reads from."""
    CURRENT_LEVEL_ID: int = CURRENT_LEVEL_ID
    CURRENT_SEED: int = CURRENT_SEED
    DELAYED_WARP_OP: int = DELAYED_WARP_OP
    INTENDED_LEVEL_ID: int = INTENDED_LEVEL_ID
    CURRENT_SONG_ID: int = CURRENT_SONG_ID
    MARIO: MarioAddresses = field(default_factory=MarioAddresses)
    HUD: HudAddresses = field(default_factory=HudAddresses)

    def as_dict(self) -> dict[str, int]:
        """Flatten to name -> address (derived entries use dotted names)."""
        return {
            'CURRENT_LEVEL_ID': self.CURRENT_LEVEL_ID,
            'CURRENT_SEED': self.CURRENT_SEED,
            'DELAYED_WARP_OP': self.DELAYED_WARP_OP,
            'INTENDED_LEVEL_ID': self.INTENDED_LEVEL_ID,
            'CURRENT_SONG_ID': self.CURRENT_SONG_ID,
            'MARIO.BASE': self.MARIO.BASE,
            'MARIO.INPUT': self.MARIO.INPUT,
            'MARIO.ACTION': self.MARIO.ACTION,
            'MARIO.POS': self.MARIO.POS,
            'MARIO.HURT_COUNTER': self.MARIO.HURT_COUNTER,
            'HUD.BASE': self.HUD.BASE,
            'HUD.STARS': self.HUD.STARS,
            'HUD.HEALTH': self.HUD.HEALTH,
        }


MEM = AddressTable()
