import logging

import pygame as pg

from .constants import DISPLAY_WIDTH, DISPLAY_HEIGHT, KEY_COUNT, DEFAULT_SPEED, DEFAULT_SCALE
from .machine import StepResult

logger = logging.getLogger(__name__)

# QWERTY 4x4 block -> CHIP-8 hex keypad
#   1 2 3 4      1 2 3 C
#   Q W E R  ->  4 5 6 D
#   A S D F      7 8 9 E
#   Z X C V      A 0 B F
KEY_MAPPING = {
    pg.K_1: 0x1,
    pg.K_2: 0x2,
    pg.K_3: 0x3,
    pg.K_4: 0xC,
    pg.K_q: 0x4,
    pg.K_w: 0x5,
    pg.K_e: 0x6,
    pg.K_r: 0xD,
    pg.K_a: 0x7,
    pg.K_s: 0x8,
    pg.K_d: 0x9,
    pg.K_f: 0xE,
    pg.K_z: 0xA,
    pg.K_x: 0x0,
    pg.K_c: 0xB,
    pg.K_v: 0xF
}


def keys_from_pressed(pressed):
    """Convert a ``pygame.key.get_pressed()`` result to 16 keypad states."""
    keys = [False] * KEY_COUNT
    for key, value in KEY_MAPPING.items():
        if pressed[key]:
            keys[value] = True
    return keys


class PygameHost:
    """Window, keyboard and pacing around a ``Chip8`` machine."""

    def __init__(self, chip8, speed=DEFAULT_SPEED, scale=DEFAULT_SCALE):
        self.chip8 = chip8
        self.speed = speed
        self.scale = scale
        self.running = False
        self.screen = None
        self.clock = None

    def open(self):
        pg.init()
        self.screen = pg.display.set_mode((DISPLAY_WIDTH * self.scale, DISPLAY_HEIGHT * self.scale))
        pg.display.set_caption("CHIP-8 Emulator")
        self.clock = pg.time.Clock()

    def draw_graphics(self):
        display = self.chip8.state.display
        self.screen.fill((0, 0, 0))
        for y in range(DISPLAY_HEIGHT):
            for x in range(DISPLAY_WIDTH):
                if display[x + y * DISPLAY_WIDTH] == 1:
                    pg.draw.rect(self.screen, (255, 255, 255), (x * self.scale, y * self.scale, self.scale, self.scale))

        pg.display.set_caption(f"CHIP-8 Emulator - {int(self.clock.get_fps())} steps/s")
        pg.display.flip()

    def set_keys(self):
        self.chip8.set_keys(keys_from_pressed(pg.key.get_pressed()))

    def handle_events(self):
        for event in pg.event.get():
            if event.type == pg.QUIT:
                self.running = False
            elif event.type == pg.KEYDOWN and event.key == pg.K_ESCAPE:
                self.running = False

    def run(self):
        self.open()
        self.running = True
        try:
            while self.running:
                self.handle_events()
                if not self.chip8.can_fetch:
                    logger.info("Program counter %#06x left memory, stopping", self.chip8.state.pc)
                    break
                self.set_keys()
                if self.chip8.step() is StepResult.EXECUTED and self.chip8.state.draw_flag:
                    self.draw_graphics()
                self.clock.tick(self.speed)
        finally:
            pg.quit()
