"""A CHIP-8 virtual machine with a pygame front end."""

from .decoder import Instruction, Op, decode
from .errors import (
    Chip8Error, MemoryAccessError, RomLoadError, RomTooLargeError,
    StackOverflowError, StackUnderflowError,
)
from .executor import Executor
from .machine import Chip8, StepResult
from .state import Chip8State

__version__ = "0.1.0"
