
"""Keyboard mapping: pygame key codes to engine commands"""
from typing import Optional
import pygame
from tetris_engine import Command

KEYMAP = {
    pygame.K_LEFT: Command.LEFT, pygame.K_a: Command.LEFT,
    pygame.K_RIGHT: Command.RIGHT, pygame.K_d: Command.RIGHT,
    pygame.K_DOWN: Command.SOFT_DROP, pygame.K_s: Command.SOFT_DROP,
    pygame.K_UP: Command.ROTATE, pygame.K_w: Command.ROTATE,
    pygame.K_SPACE: Command.HARD_DROP,
    pygame.K_c: Command.HOLD,
    pygame.K_p: Command.PAUSE,
    pygame.K_RETURN: Command.RESTART, pygame.K_r: Command.RESTART,
}

def command_for_key(key: int, game_over: bool = False) -> Optional[Command]:
    cmd = KEYMAP.get(key)
    # a finished game only listens for restart
    if game_over and cmd is not Command.RESTART:
        return None
    return cmd
