import argparse
import logging
import random
import sys

from .constants import DEFAULT_ROM_PATH, DEFAULT_SPEED, DEFAULT_SCALE
from .errors import Chip8Error
from .machine import Chip8

logger = logging.getLogger("chip8vm")


def build_parser():
    parser = argparse.ArgumentParser(prog="chip8vm", description="CHIP-8 emulator")
    parser.add_argument("rom", nargs="?", default=DEFAULT_ROM_PATH,
                        help=f"ROM file to run (default: {DEFAULT_ROM_PATH})")
    parser.add_argument("--speed", type=int, default=DEFAULT_SPEED,
                        help=f"instructions per second (default: {DEFAULT_SPEED})")
    parser.add_argument("--scale", type=int, default=DEFAULT_SCALE,
                        help=f"window pixels per CHIP-8 pixel (default: {DEFAULT_SCALE})")
    parser.add_argument("--seed", type=int, default=None,
                        help="seed for the random number instruction")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    parser.add_argument("--debug", action="store_true",
                        help="trace every instruction (same as --log-level DEBUG)")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.debug else args.log_level,
                        format="[%(levelname)s]:  %(message)s", stream=sys.stdout)

    # keep pygame out of --help and argument errors
    from .host import PygameHost

    chip8 = Chip8(rng=random.Random(args.seed))
    try:
        chip8.load_rom(args.rom)
        PygameHost(chip8, speed=args.speed, scale=args.scale).run()
    except Chip8Error as exc:
        logger.error("%s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
