
import argparse
import logging
import sys

import pygame

from tetris_config import CONFIG
from tetris_game import new_game, apply, update
from tetris_input import command_for_event, enable_key_repeat
from tetris_layout import compute_dims
from tetris_render import Renderer, render_frame

logger = logging.getLogger(__name__)


def recreate_window(dims, flags=pygame.DOUBLEBUF):
    try:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags, vsync=1)
    except (TypeError, pygame.error):
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Falling-block puzzle game")
    parser.add_argument('--seed', type=int, default=CONFIG["SEED"], help='Seed for the piece randomizer')
    parser.add_argument('--cell-size', type=int, default=CONFIG["CELL_SIZE"], help='Pixel size of a board cell')
    parser.add_argument('--fps', type=int, default=CONFIG["FPS"], help='Frame rate cap')
    parser.add_argument('--log-level', default=CONFIG["LOG_LEVEL"],
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'], help='Logging verbosity')
    return parser.parse_args(argv)


def configure(args):
    CONFIG["SEED"] = args.seed
    CONFIG["CELL_SIZE"] = args.cell_size
    CONFIG["FPS"] = args.fps
    CONFIG["LOG_LEVEL"] = args.log_level
    logging.basicConfig(level=CONFIG["LOG_LEVEL"],
                        format="%(asctime)s %(name)s %(levelname)s: %(message)s")


def main(argv=None):
    configure(parse_args(argv))

    pygame.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN])
    enable_key_repeat()

    dims = compute_dims()
    screen = recreate_window(dims)
    pygame.display.set_caption("Tetris")
    font = pygame.font.SysFont(None, 22)
    big_font = pygame.font.SysFont(None, 42)

    render = Renderer(screen, dims, font, big_font)
    clock = pygame.time.Clock()
    state = new_game(CONFIG["SEED"])
    logger.info("window %dx%d, cell %dpx", dims.total_w, dims.total_h, dims.cell)

    while True:
        dt = clock.tick(CONFIG["FPS"])

        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                pygame.quit(); sys.exit()
            cmd = command_for_event(e)
            if cmd is not None:
                apply(state, cmd)

        update(state, dt)

        render_frame(render, state)
        pygame.display.flip()


if __name__ == '__main__':
    main()
