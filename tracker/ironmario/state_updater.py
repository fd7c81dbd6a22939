"""Per-tick refresh of the tracker State from emulator memory.

One tick:
  1. previous <- deep copy of current
  2. stamp current.last_updated_time
  3. overwrite every GameState / MarioState field from memory
  4. refresh the run seed (stars are left to the run rule)
  5. let the run rule compare previous and current

Reads go through MemoryReader, which turns failures into zeros, so a tick
never raises because of memory.
"""

from .addresses import MEM, AddressTable, ROM_SIGNATURE_ADDR, ROM_SIGNATURE_LEN
from .config import DOMAIN_RDRAM, DOMAIN_ROM, ROM_SIGNATURE
from .game_state import State, StateHolder, RunStatus, now_seconds
from .memory import MemoryReader, read3float
from .run_rules import RunRule, NoOpRunRule


def read_game_fields(state: State, reader: MemoryReader,
                     mem: AddressTable = MEM) -> None:
    """Overwrite the memory-mirrored fields of ``state`` in place."""
    game = state.game
    game.delayed_warp_op = reader.read_u16_be(mem.DELAYED_WARP_OP)
    game.intended_level_id = reader.read_u32_be(mem.INTENDED_LEVEL_ID)
    game.level_id = reader.read_u16_be(mem.CURRENT_LEVEL_ID)
    game.song = reader.read_u16_be(mem.CURRENT_SONG_ID)

    mario = state.mario
    mario.action = reader.read_u32_be(mem.MARIO.ACTION)
    # flags and input share an address; flags is the full 32-bit word
    mario.flags = reader.read_u32_be(mem.MARIO.INPUT)
    mario.hp = reader.read_u16_be(mem.HUD.HEALTH)
    mario.input = reader.read_u16_be(mem.MARIO.INPUT)
    mario.pos = read3float(reader, mem.MARIO.POS)
    mario.hurt_counter = reader.read_u8(mem.MARIO.HURT_COUNTER)

    state.run.seed = reader.read_u32_be(mem.CURRENT_SEED)


def refresh_from_memory(holder: StateHolder, reader: MemoryReader,
                        rule: RunRule | None = None,
                        mem: AddressTable = MEM,
                        now: int | None = None) -> None:
    """Advance ``holder`` by one tick.

    The caller selects the memory domain beforehand (RDRAM).
    """
    ts = now_seconds() if now is None else now
    holder.previous = holder.current.snapshot()

    current = holder.current
    current.last_updated_time = ts
    read_game_fields(current, reader, mem)
    if current.run.status == RunStatus.ACTIVE:
        current.run.touch(ts)

    (rule or NoOpRunRule()).apply(holder.previous, current, ts)


def check_rom_signature(reader: MemoryReader) -> bool:
    """True if the loaded ROM is IronMario 64.

    Reads the 12-byte internal name at ROM offset 0x20 and switches the
    reader back to RDRAM afterwards.
    """
    reader.use_domain(DOMAIN_ROM)
    try:
        raw = reader.read_bytes(ROM_SIGNATURE_ADDR, ROM_SIGNATURE_LEN)
    finally:
        reader.use_domain(DOMAIN_RDRAM)
    return raw.decode('latin-1') == ROM_SIGNATURE
