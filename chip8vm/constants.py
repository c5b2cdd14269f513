"""
CHIP-8 Specifications:
- Direct access up to 4KB (4,096 bytes) of memory
- 64x32 pixel monochrome display
- Program counter (PC), points to the current instruction in memory
- Index register (I), used to point to locations in memory
- Stack, used to remember the current location before a jump is performed
- 8-bit delay timer and sound timer, decremented once per executed instruction
- 16 8-bit data registers (V0-VF), used to store data
- - VF register is used as a flag for some instructions
"""

MEMORY_SIZE = 4096
REGISTER_COUNT = 16
STACK_SIZE = 16
KEY_COUNT = 16

DISPLAY_WIDTH = 64
DISPLAY_HEIGHT = 32
DISPLAY_SIZE = DISPLAY_WIDTH * DISPLAY_HEIGHT

PROGRAM_START = 0x200
MAX_PROGRAM_SIZE = MEMORY_SIZE - PROGRAM_START
INSTRUCTION_SIZE = 2

SPRITE_WIDTH = 8
FONT_START = 0x000
FONT_HEIGHT = 5
FLAG = 0xF

FONTSET = bytes([
    0xF0, 0x90, 0x90, 0x90, 0xF0, # 0
    0x20, 0x60, 0x20, 0x20, 0x70, # 1
    0xF0, 0x10, 0xF0, 0x80, 0xF0, # 2
    0xF0, 0x10, 0xF0, 0x10, 0xF0, # 3
    0x90, 0x90, 0xF0, 0x10, 0x10, # 4
    0xF0, 0x80, 0xF0, 0x10, 0xF0, # 5
    0xF0, 0x80, 0xF0, 0x90, 0xF0, # 6
    0xF0, 0x10, 0x20, 0x40, 0x40, # 7
    0xF0, 0x90, 0xF0, 0x90, 0xF0, # 8
    0xF0, 0x90, 0xF0, 0x10, 0xF0, # 9
    0xF0, 0x90, 0xF0, 0x90, 0x90, # A
    0xE0, 0x90, 0xE0, 0x90, 0xE0, # B
    0xF0, 0x80, 0x80, 0x80, 0xF0, # C
    0xE0, 0x90, 0x90, 0x90, 0xE0, # D
    0xF0, 0x80, 0xF0, 0x80, 0xF0, # E
    0xF0, 0x80, 0xF0, 0x80, 0x80  # F
])

# host defaults, overridable from the command line
DEFAULT_ROM_PATH = "roms/pong.ch8"
DEFAULT_SPEED = 500 # instructions per second
DEFAULT_SCALE = 10
