import random

import pytest

from chip8vm import Chip8, StepResult
from chip8vm.constants import FONTSET, MEMORY_SIZE
from chip8vm.errors import MemoryAccessError


def test_fonts_loaded_on_start(machine):
    assert machine.state.memory[:80] == FONTSET
    assert machine.state.pc == 0x200


def test_step_executes_one_instruction(load):
    chip8 = load(0x6A05, 0x6B06)
    assert chip8.step() is StepResult.EXECUTED
    assert chip8.state.v[0xA] == 5
    assert chip8.state.v[0xB] == 0
    assert chip8.state.pc == 0x202


def test_call_then_return_resumes_after_call(load):
    chip8 = load(0x2204, 0x0000, 0x00EE)
    chip8.step()
    assert chip8.state.pc == 0x204
    chip8.step()
    assert chip8.state.pc == 0x202
    assert chip8.state.sp == 0


def test_skip_if_equal_scenario(load):
    chip8 = load(0x6005, 0x3005)
    chip8.step()
    chip8.step()
    assert chip8.state.pc == 0x206


def test_timers_tick_once_per_step(load):
    chip8 = load(0x600A, 0xF015, 0xF018, 0x0000)
    chip8.step()
    chip8.step()
    assert chip8.state.delay_timer == 9
    chip8.step()
    assert chip8.state.delay_timer == 8
    assert chip8.state.sound_timer == 9
    assert chip8.sound_active


def test_timer_at_zero_stays_zero(load):
    chip8 = load(0x6001)
    chip8.step()
    assert chip8.state.delay_timer == 0
    assert chip8.state.sound_timer == 0
    assert not chip8.sound_active


def test_draw_flag_only_for_display_instructions(load):
    chip8 = load(0x00E0, 0x6001)
    chip8.step()
    assert chip8.state.draw_flag
    chip8.step()
    assert not chip8.state.draw_flag


def test_wait_for_key_blocks_until_pressed(load):
    chip8 = load(0x6020, 0xF015, 0xF30A, 0x6401)
    chip8.step()
    chip8.step()
    assert chip8.state.delay_timer == 0x1F

    for _ in range(5):
        assert chip8.step() is StepResult.BLOCKED
        assert chip8.state.pc == 0x204
        assert chip8.state.delay_timer == 0x1F
        assert chip8.state.waiting_for_key

    keys = [False] * 16
    keys[0x7] = True
    chip8.set_keys(keys)
    assert chip8.step() is StepResult.EXECUTED
    assert chip8.state.v[3] == 0x7
    assert chip8.state.pc == 0x206
    assert chip8.state.delay_timer == 0x1E
    assert not chip8.state.waiting_for_key

    chip8.step()
    assert chip8.state.v[4] == 1


def test_wait_for_key_with_key_already_down(load):
    chip8 = load(0xF10A)
    keys = [False] * 16
    keys[0xC] = True
    chip8.set_keys(keys)
    assert chip8.step() is StepResult.EXECUTED
    assert chip8.state.v[1] == 0xC
    assert chip8.state.pc == 0x202


def test_set_keys_requires_sixteen_states(machine):
    with pytest.raises(ValueError):
        machine.set_keys([True] * 4)


def test_fetch_outside_memory_raises(load):
    chip8 = load(0x1FFF)
    chip8.step()
    assert chip8.state.pc == 0xFFF
    assert not chip8.can_fetch
    with pytest.raises(MemoryAccessError):
        chip8.step()


def test_run_stops_when_blocked(load):
    chip8 = load(0x6001, 0x6102, 0xF00A, 0x6203)
    assert chip8.run(100) == 2
    assert chip8.state.pc == 0x204
    assert chip8.state.v[2] == 0


def test_run_respects_step_limit(load):
    chip8 = load(0x1200)
    assert chip8.run(25) == 25
    assert chip8.state.pc == 0x200


def test_seeded_random_is_reproducible():
    values = []
    for _ in range(2):
        chip8 = Chip8(rng=random.Random(1234))
        chip8.load_program(bytes([0xC0, 0xFF, 0xC1, 0xFF]))
        chip8.run(2)
        values.append(bytes(chip8.state.v[:2]))
    assert values[0] == values[1]


def test_reset_clears_program_and_keeps_fonts(load):
    chip8 = load(0x6001, 0x00E0)
    chip8.run(2)
    chip8.reset()
    assert chip8.state.pc == 0x200
    assert chip8.state.v[0] == 0
    assert chip8.state.memory[:80] == FONTSET
    assert not any(chip8.state.memory[0x200:MEMORY_SIZE])
