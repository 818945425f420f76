import os
import unittest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
import pygame

from tetris_game import Command
from tetris_input import command_for_event


def keydown(key):
    return pygame.event.Event(pygame.KEYDOWN, key=key)


class TestCommandForEvent(unittest.TestCase):

    def test_default_bindings(self):
        expected = {
            pygame.K_LEFT: Command.MOVE_LEFT,
            pygame.K_RIGHT: Command.MOVE_RIGHT,
            pygame.K_DOWN: Command.SOFT_DROP,
            pygame.K_UP: Command.ROTATE,
            pygame.K_z: Command.ROTATE_CCW,
            pygame.K_SPACE: Command.HARD_DROP,
            pygame.K_p: Command.TOGGLE_PAUSE,
            pygame.K_r: Command.RESTART,
        }
        for key, command in expected.items():
            self.assertIs(command_for_event(keydown(key)), command)

    def test_unbound_key(self):
        self.assertIsNone(command_for_event(keydown(pygame.K_F5)))

    def test_key_release_is_ignored(self):
        self.assertIsNone(command_for_event(pygame.event.Event(pygame.KEYUP, key=pygame.K_LEFT)))


if __name__ == '__main__':
    unittest.main()
