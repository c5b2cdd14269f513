from .constants import (
    MEMORY_SIZE, REGISTER_COUNT, STACK_SIZE, KEY_COUNT,
    DISPLAY_WIDTH, DISPLAY_HEIGHT, DISPLAY_SIZE, PROGRAM_START,
)
from .errors import MemoryAccessError, StackOverflowError, StackUnderflowError


class Chip8State:
    """All mutable data of the virtual machine.

    The executor is the only writer; the host reads ``display``,
    ``draw_flag`` and the timers, and writes ``keys`` between steps.
    """

    def __init__(self):
        self.reset()

    def reset(self):
        self.memory = bytearray(MEMORY_SIZE) # 4KB of memory
        self.v = bytearray(REGISTER_COUNT) # 16 8-bit data registers
        self.i = 0
        self.pc = PROGRAM_START
        self.stack = [0] * STACK_SIZE
        self.sp = 0

        self.delay_timer = 0
        self.sound_timer = 0

        self.display = bytearray(DISPLAY_SIZE) # can be 0 or 1 (off or on)
        self.draw_flag = False
        self.keys = [False] * KEY_COUNT

        # register index an FX0A instruction is waiting to fill, or None
        self.waiting_register = None

    @property
    def waiting_for_key(self):
        return self.waiting_register is not None

    # memory

    def _check_range(self, address, length=1):
        if address < 0 or address + length > MEMORY_SIZE:
            raise MemoryAccessError(address, length)

    def read_byte(self, address):
        self._check_range(address)
        return self.memory[address]

    def write_byte(self, address, value):
        self._check_range(address)
        self.memory[address] = value & 0xFF

    def read_block(self, address, length):
        self._check_range(address, length)
        return bytes(self.memory[address:address + length])

    def write_block(self, address, data):
        self._check_range(address, len(data))
        self.memory[address:address + len(data)] = data

    def can_fetch(self, address=None):
        if address is None:
            address = self.pc
        return 0 <= address and address + 1 < MEMORY_SIZE

    def fetch(self):
        """Return the big-endian instruction word at the program counter."""
        self._check_range(self.pc, 2)
        return self.memory[self.pc] << 8 | self.memory[self.pc + 1]

    # stack

    def push(self, address):
        if self.sp + 1 >= STACK_SIZE:
            raise StackOverflowError(f"call stack full ({STACK_SIZE - 1} nested calls) at {self.pc:#06x}")
        self.sp += 1
        self.stack[self.sp] = address

    def pop(self):
        if self.sp == 0:
            raise StackUnderflowError(f"return with empty call stack at {self.pc:#06x}")
        address = self.stack[self.sp]
        self.sp -= 1
        return address

    # display

    def pixel(self, x, y):
        if not (0 <= x < DISPLAY_WIDTH and 0 <= y < DISPLAY_HEIGHT):
            raise IndexError(f"pixel ({x}, {y}) is off screen")
        return self.display[x + y * DISPLAY_WIDTH]

    def flip_pixel(self, x, y):
        """Toggle a cell and return True if it was lit before the flip."""
        was_lit = self.pixel(x, y) == 1
        self.display[x + y * DISPLAY_WIDTH] ^= 1
        return was_lit

    def clear_display(self):
        self.display[:] = bytes(DISPLAY_SIZE)
