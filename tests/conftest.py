import pytest

from chip8vm import Chip8, Chip8State, Executor
from chip8vm.loader import load_fonts


class FixedRandom:
    """Stand-in random source that always returns the same byte."""

    def __init__(self, value):
        self.value = value

    def randint(self, a, b):
        return self.value


@pytest.fixture
def rng():
    return FixedRandom(0xAB)


@pytest.fixture
def machine(rng):
    return Chip8(rng=rng)


@pytest.fixture
def state():
    state = Chip8State()
    load_fonts(state)
    return state


@pytest.fixture
def executor(rng):
    return Executor(rng=rng)


@pytest.fixture
def load(machine):
    """Load instruction words at 0x200 and return the machine."""
    def load(*words):
        machine.load_program(b"".join(word.to_bytes(2, "big") for word in words))
        return machine
    return load
