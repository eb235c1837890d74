import argparse
import logging
import sys

import pygame

from tetris_clock import DropClock
from tetris_config import CONFIG
from tetris_engine import Command, Game
from tetris_input import command_for_key
from tetris_layout import compute_dims
from tetris_log import setup_logger
from tetris_overlay import Overlay
from tetris_render import RenderAssets

log = logging.getLogger("main")


def parse_args(argv=None):
    ap = argparse.ArgumentParser(description="Falling-block puzzle game")
    ap.add_argument("--seed", type=int, default=CONFIG["BAG_SEED"], help="seed for the piece bag")
    ap.add_argument("--cell-size", type=int, default=CONFIG["CELL_SIZE"])
    ap.add_argument("--log-level", default=CONFIG["LOG_LEVEL"])
    ap.add_argument("--plain-log", action="store_true", help="plain stream logging instead of rich")
    return ap.parse_args(argv)


def apply_args(args):
    CONFIG["BAG_SEED"] = args.seed
    CONFIG["CELL_SIZE"] = args.cell_size
    CONFIG["LOG_LEVEL"] = args.log_level
    CONFIG["USE_RICH"] = not args.plain_log


def recreate_window(dims, flags=pygame.DOUBLEBUF):
    try:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags, vsync=1)
    except (TypeError, pygame.error):
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags)


def handle_command(clock, cmd, now):
    # pause and restart also reset the clock baseline
    if cmd is Command.PAUSE:
        return clock.toggle_pause(now)
    if cmd is Command.RESTART:
        clock.restart(now)
        return True
    return clock.game.dispatch(cmd)


def run():
    pygame.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN])

    dims = compute_dims()
    screen = recreate_window(dims)
    pygame.display.set_caption("Tetris")
    font = pygame.font.SysFont(None, 22)
    big_font = pygame.font.SysFont(None, 42)

    render = RenderAssets(dims, font)
    overlay = Overlay(font, big_font)
    board_rect = pygame.Rect(dims.board_x, dims.board_y, dims.board_w, dims.board_h)
    frame = pygame.time.Clock()

    game = Game(seed=CONFIG["BAG_SEED"])
    clock = DropClock(game, pygame.time.get_ticks())
    log.info("window %dx%d, seed=%s", dims.total_w, dims.total_h, CONFIG["BAG_SEED"])

    while True:
        frame.tick(CONFIG["FPS"])
        now = pygame.time.get_ticks()

        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                return
            if e.type == pygame.KEYDOWN:
                if e.key == pygame.K_ESCAPE:
                    return
                cmd = command_for_key(e.key, game.game_over)
                if cmd is not None:
                    handle_command(clock, cmd, now)

        clock.update(now)

        snap = game.snapshot()
        render.draw(screen, snap)
        overlay.draw(screen, snap, board_rect)
        pygame.display.flip()


def main(argv=None):
    apply_args(parse_args(argv))
    setup_logger(use_rich=CONFIG["USE_RICH"], level=CONFIG["LOG_LEVEL"])
    try:
        run()
    finally:
        pygame.quit()
    return 0


if __name__ == '__main__':
    sys.exit(main())
