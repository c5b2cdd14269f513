import logging
import random

from .constants import (
    DISPLAY_WIDTH, DISPLAY_HEIGHT, FONT_START, FONT_HEIGHT, FLAG,
    INSTRUCTION_SIZE, KEY_COUNT, SPRITE_WIDTH,
)
from .decoder import Op

logger = logging.getLogger(__name__)


class Executor:
    """Applies decoded instructions to a ``Chip8State``.

    Each handler returns the next program counter, or ``None`` when the
    instruction blocked and the step must not make progress. The program
    counter is only written once the handler has finished, so a handler
    that raises leaves it on the faulting instruction.

    ``rng`` is anything with a ``randint(a, b)`` method; a fresh
    ``random.Random`` is used when none is given.
    """

    def __init__(self, rng=None):
        self.rng = rng if rng is not None else random.Random()
        self._handlers = {
            Op.CLS: self.cls,
            Op.RET: self.ret,
            Op.SYS: self.nop,
            Op.JP: self.jp,
            Op.CALL: self.call,
            Op.SE_BYTE: self.se_byte,
            Op.SNE_BYTE: self.sne_byte,
            Op.SE_REG: self.se_reg,
            Op.LD_BYTE: self.ld_byte,
            Op.ADD_BYTE: self.add_byte,
            Op.LD_REG: self.ld_reg,
            Op.OR: self.or_,
            Op.AND: self.and_,
            Op.XOR: self.xor,
            Op.ADD_REG: self.add_reg,
            Op.SUB: self.sub,
            Op.SHR: self.shr,
            Op.SUBN: self.subn,
            Op.SHL: self.shl,
            Op.SNE_REG: self.sne_reg,
            Op.LD_I: self.ld_i,
            Op.JP_V0: self.jp_v0,
            Op.RND: self.rnd,
            Op.DRW: self.drw,
            Op.SKP: self.skp,
            Op.SKNP: self.sknp,
            Op.LD_VX_DT: self.ld_vx_dt,
            Op.LD_VX_K: self.ld_vx_k,
            Op.LD_DT_VX: self.ld_dt_vx,
            Op.LD_ST_VX: self.ld_st_vx,
            Op.ADD_I_VX: self.add_i_vx,
            Op.LD_F_VX: self.ld_f_vx,
            Op.LD_B_VX: self.ld_b_vx,
            Op.LD_I_VX: self.ld_i_vx,
            Op.LD_VX_I: self.ld_vx_i,
            Op.UNKNOWN: self.unknown,
        }

    def execute(self, state, ins):
        """Run one instruction. Returns False if it blocked, True otherwise."""
        logger.debug("%#06x: %s", state.pc, ins.mnemonic())
        next_pc = self._handlers[ins.op](state, ins)
        if next_pc is None:
            return False
        state.pc = next_pc
        return True

    @staticmethod
    def _next(state):
        return state.pc + INSTRUCTION_SIZE

    @staticmethod
    def _skip_if(state, condition):
        return state.pc + (2 * INSTRUCTION_SIZE if condition else INSTRUCTION_SIZE)

    # control flow

    def nop(self, state, ins): # SYS addr, ignored (0NNN)
        return self._next(state)

    def unknown(self, state, ins):
        logger.warning("Unknown opcode %04X at %#06x, ignored", ins.raw, state.pc)
        return self._next(state)

    def cls(self, state, ins): # Clear the display (00E0)
        state.clear_display()
        state.draw_flag = True
        return self._next(state)

    def ret(self, state, ins): # Return from a subroutine (00EE)
        return state.pop() + INSTRUCTION_SIZE

    def jp(self, state, ins): # Jump to address NNN (1NNN)
        return ins.nnn

    def call(self, state, ins): # Call subroutine at NNN (2NNN)
        state.push(state.pc)
        return ins.nnn

    def se_byte(self, state, ins): # Skip next instruction if Vx == NN (3XNN)
        return self._skip_if(state, state.v[ins.x] == ins.nn)

    def sne_byte(self, state, ins): # Skip next instruction if Vx != NN (4XNN)
        return self._skip_if(state, state.v[ins.x] != ins.nn)

    def se_reg(self, state, ins): # Skip next instruction if Vx == Vy (5XY0)
        return self._skip_if(state, state.v[ins.x] == state.v[ins.y])

    def sne_reg(self, state, ins): # Skip next instruction if Vx != Vy (9XY0)
        return self._skip_if(state, state.v[ins.x] != state.v[ins.y])

    def jp_v0(self, state, ins): # Jump to location NNN + V0 (BNNN)
        return ins.nnn + state.v[0]

    # loads and arithmetic

    def ld_byte(self, state, ins): # Set Vx = NN (6XNN)
        state.v[ins.x] = ins.nn
        return self._next(state)

    def add_byte(self, state, ins): # Set Vx = Vx + NN, no carry (7XNN)
        state.v[ins.x] = (state.v[ins.x] + ins.nn) & 0xFF
        return self._next(state)

    def ld_reg(self, state, ins): # Set Vx = Vy (8XY0)
        state.v[ins.x] = state.v[ins.y]
        return self._next(state)

    def or_(self, state, ins): # Set Vx = Vx OR Vy (8XY1)
        state.v[ins.x] |= state.v[ins.y]
        return self._next(state)

    def and_(self, state, ins): # Set Vx = Vx AND Vy (8XY2)
        state.v[ins.x] &= state.v[ins.y]
        return self._next(state)

    def xor(self, state, ins): # Set Vx = Vx XOR Vy (8XY3)
        state.v[ins.x] ^= state.v[ins.y]
        return self._next(state)

    # The flag is computed from the operands first, then the result is
    # stored, so Vx == VF ends up holding the result.

    def add_reg(self, state, ins): # Set Vx = Vx + Vy, set VF = carry (8XY4)
        total = state.v[ins.x] + state.v[ins.y]
        state.v[FLAG] = 1 if total > 0xFF else 0
        state.v[ins.x] = total & 0xFF
        return self._next(state)

    def sub(self, state, ins): # Set Vx = Vx - Vy, set VF = NOT borrow (8XY5)
        vx, vy = state.v[ins.x], state.v[ins.y]
        state.v[FLAG] = 1 if vx > vy else 0
        state.v[ins.x] = (vx - vy) & 0xFF
        return self._next(state)

    def shr(self, state, ins): # Set Vx = Vx SHR 1 (8XY6)
        vx = state.v[ins.x]
        state.v[FLAG] = vx & 0x1
        state.v[ins.x] = vx >> 1
        return self._next(state)

    def subn(self, state, ins): # Set Vx = Vy - Vx, set VF = NOT borrow (8XY7)
        vx, vy = state.v[ins.x], state.v[ins.y]
        state.v[FLAG] = 1 if vy > vx else 0
        state.v[ins.x] = (vy - vx) & 0xFF
        return self._next(state)

    def shl(self, state, ins): # Set Vx = Vx SHL 1 (8XYE)
        vx = state.v[ins.x]
        state.v[FLAG] = vx >> 7
        state.v[ins.x] = (vx << 1) & 0xFF
        return self._next(state)

    def rnd(self, state, ins): # Set Vx = random byte AND NN (CXNN)
        state.v[ins.x] = self.rng.randint(0, 255) & ins.nn
        return self._next(state)

    # index register

    def ld_i(self, state, ins): # Set I = NNN (ANNN)
        state.i = ins.nnn
        return self._next(state)

    def add_i_vx(self, state, ins): # Set I = I + Vx (FX1E)
        state.i = (state.i + state.v[ins.x]) & 0xFFFF
        return self._next(state)

    def ld_f_vx(self, state, ins): # Set I = location of sprite for digit Vx (FX29)
        state.i = FONT_START + state.v[ins.x] * FONT_HEIGHT
        return self._next(state)

    # display

    def drw(self, state, ins): # Display N-byte sprite at (Vx, Vy), set VF = collision (DXYN)
        sprite = state.read_block(state.i, ins.n)
        x = state.v[ins.x]
        y = state.v[ins.y]
        state.v[FLAG] = 0

        for yline, row in enumerate(sprite):
            for xline in range(SPRITE_WIDTH):
                if row & (0x80 >> xline):
                    if state.flip_pixel((x + xline) % DISPLAY_WIDTH, (y + yline) % DISPLAY_HEIGHT):
                        state.v[FLAG] = 1

        state.draw_flag = True
        return self._next(state)

    # keyboard

    def skp(self, state, ins): # Skip next instruction if key Vx is pressed (EX9E)
        return self._skip_if(state, state.keys[state.v[ins.x] & 0xF])

    def sknp(self, state, ins): # Skip next instruction if key Vx is not pressed (EXA1)
        return self._skip_if(state, not state.keys[state.v[ins.x] & 0xF])

    def ld_vx_k(self, state, ins): # Wait for a key press, store the key in Vx (FX0A)
        if self.store_pressed_key(state, ins.x):
            return self._next(state)
        state.waiting_register = ins.x
        logger.debug("Waiting for a key press to fill V%X", ins.x)
        return None

    @staticmethod
    def store_pressed_key(state, register):
        """Store the last pressed key index in ``register``.

        Returns False, leaving the register untouched, if no key is down.
        """
        pressed = None
        for key in range(KEY_COUNT):
            if state.keys[key]:
                pressed = key
        if pressed is None:
            return False
        state.v[register] = pressed
        return True

    # timers

    def ld_vx_dt(self, state, ins): # Set Vx = delay timer value (FX07)
        state.v[ins.x] = state.delay_timer
        return self._next(state)

    def ld_dt_vx(self, state, ins): # Set delay timer = Vx (FX15)
        state.delay_timer = state.v[ins.x]
        return self._next(state)

    def ld_st_vx(self, state, ins): # Set sound timer = Vx (FX18)
        state.sound_timer = state.v[ins.x]
        return self._next(state)

    # memory transfers

    def ld_b_vx(self, state, ins): # Store BCD of Vx at I, I+1, I+2 (FX33)
        vx = state.v[ins.x]
        state.write_block(state.i, bytes([vx // 100, (vx // 10) % 10, vx % 10]))
        return self._next(state)

    # FX55 and FX65 move V0 up to but not including Vx, then step I past Vx.

    def ld_i_vx(self, state, ins): # Store V0..V(x-1) in memory starting at I (FX55)
        state.write_block(state.i, state.v[:ins.x])
        state.i = (state.i + ins.x + 1) & 0xFFFF
        return self._next(state)

    def ld_vx_i(self, state, ins): # Read V0..V(x-1) from memory starting at I (FX65)
        state.v[:ins.x] = state.read_block(state.i, ins.x)
        state.i = (state.i + ins.x + 1) & 0xFFFF
        return self._next(state)
