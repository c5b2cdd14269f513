"""Exceptions raised by the CHIP-8 virtual machine."""


class Chip8Error(Exception):
    """Base class for every error raised by the virtual machine."""


class RomLoadError(Chip8Error, OSError):
    """The ROM file could not be opened or read."""


class RomTooLargeError(Chip8Error):
    """The ROM does not fit in memory after the program start address."""

    def __init__(self, size, capacity):
        super().__init__(f"ROM is {size} bytes, only {capacity} bytes fit after 0x200")
        self.size = size
        self.capacity = capacity


class MemoryAccessError(Chip8Error, IndexError):
    """A read, write or fetch addressed memory outside 0x000-0xFFF."""

    def __init__(self, address, length=1):
        super().__init__(f"memory access out of range: {address:#06x} (+{length})")
        self.address = address
        self.length = length


class StackOverflowError(Chip8Error):
    """A subroutine call would exceed the call stack capacity."""


class StackUnderflowError(Chip8Error):
    """A return was executed with no matching call on the stack."""
