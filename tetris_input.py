
"""Keyboard to Command translation"""
from typing import Optional
import pygame
from tetris_config import CONFIG
from tetris_game import Command

KEY_COMMANDS = {
    pygame.K_LEFT: Command.MOVE_LEFT,
    pygame.K_RIGHT: Command.MOVE_RIGHT,
    pygame.K_DOWN: Command.SOFT_DROP,
    pygame.K_UP: Command.ROTATE,
    pygame.K_z: Command.ROTATE_CCW,
    pygame.K_SPACE: Command.HARD_DROP,
    pygame.K_p: Command.TOGGLE_PAUSE,
    pygame.K_r: Command.RESTART,
}

def command_for_event(e) -> Optional[Command]:
    if e.type != pygame.KEYDOWN: return None
    return KEY_COMMANDS.get(e.key)

def enable_key_repeat():
    # repeat rate belongs to the input wiring, the core sees discrete commands
    pygame.key.set_repeat(CONFIG["KEY_REPEAT_DELAY_MS"], CONFIG["KEY_REPEAT_INTERVAL_MS"])
