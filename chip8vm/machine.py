import enum
import logging

from . import loader, timers
from .constants import INSTRUCTION_SIZE
from .decoder import decode
from .executor import Executor
from .state import Chip8State

logger = logging.getLogger(__name__)


class StepResult(enum.Enum):
    EXECUTED = "executed"
    BLOCKED = "blocked"


class Chip8:
    """The virtual machine: owns the state and runs it one step at a time.

    The host drives it::

        chip8 = Chip8()
        chip8.load_rom("roms/pong.ch8")
        while chip8.can_fetch:
            chip8.set_keys(poll_keyboard())
            chip8.step()
            if chip8.state.draw_flag:
                present(chip8.state.display)
    """

    def __init__(self, rng=None):
        self.state = Chip8State()
        self.executor = Executor(rng)
        loader.load_fonts(self.state)

    def reset(self):
        self.state.reset()
        loader.load_fonts(self.state)

    def load_rom(self, path):
        return loader.load_rom(self.state, path)

    def load_program(self, data):
        return loader.load_program(self.state, data)

    def set_keys(self, pressed):
        pressed = list(pressed)
        if len(pressed) != len(self.state.keys):
            raise ValueError(f"expected {len(self.state.keys)} key states, got {len(pressed)}")
        self.state.keys = [bool(key) for key in pressed]

    @property
    def can_fetch(self):
        return self.state.can_fetch()

    @property
    def sound_active(self):
        return self.state.sound_timer > 0

    def step(self):
        """Execute at most one instruction.

        While an FX0A instruction is waiting for input, every step checks
        the keys and returns ``StepResult.BLOCKED`` without moving the
        program counter or the timers until a key is down.
        """
        state = self.state
        state.draw_flag = False

        if state.waiting_for_key:
            if not self.executor.store_pressed_key(state, state.waiting_register):
                return StepResult.BLOCKED
            logger.debug("Key %X stored in V%X, resuming", state.v[state.waiting_register], state.waiting_register)
            state.waiting_register = None
            state.pc += INSTRUCTION_SIZE
        elif not self.executor.execute(state, decode(state.fetch())):
            return StepResult.BLOCKED

        timers.tick(state)
        return StepResult.EXECUTED

    def run(self, max_steps):
        """Step until blocked, out of program memory, or ``max_steps`` ran.

        Returns the number of executed steps.
        """
        executed = 0
        while executed < max_steps and self.can_fetch:
            if self.step() is StepResult.BLOCKED:
                break
            executed += 1
        return executed
