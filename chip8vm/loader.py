import logging
from pathlib import Path

from .constants import FONTSET, FONT_START, PROGRAM_START, MAX_PROGRAM_SIZE
from .errors import RomLoadError, RomTooLargeError

logger = logging.getLogger(__name__)


def load_fonts(state):
    """Copy the built-in hex digit glyphs to the start of memory."""
    state.write_block(FONT_START, FONTSET)


def load_program(state, data):
    """Copy raw program bytes into memory at 0x200."""
    data = bytes(data)
    if len(data) > MAX_PROGRAM_SIZE:
        raise RomTooLargeError(len(data), MAX_PROGRAM_SIZE)
    state.write_block(PROGRAM_START, data)
    return len(data)


def read_rom(path):
    try:
        with open(path, "rb") as f:
            return f.read()
    except OSError as exc:
        raise RomLoadError(f"Failed to read ROM '{path}': {exc}") from exc


def load_rom(state, path):
    """Read a ROM file and load it at 0x200. Returns the number of bytes loaded."""
    path = Path(path)
    size = load_program(state, read_rom(path))
    logger.info("Loaded %s (%d bytes)", path.name, size)
    return size
