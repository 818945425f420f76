
"""
Game state and controller.

All game state lives in a GameState record that is passed to every
operation; there are no module-level globals. Operations mutate the state
synchronously and never raise during play: an illegal move is rolled back,
and a spawn that collides wipes the board and sets `game_over`.

Gravity is driven by `update(state, dt_ms)`, player input by
`apply(state, command)`. Both may be fed from a recorded sequence with
`replay`, which makes whole games reproducible for a seeded PieceRandom.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Optional, Union

from tetris_board import collide, merge, rotate_piece, landing_y
from tetris_grid import Grid
from tetris_piece import Piece
from tetris_progress import Progress
from tetris_rng import PieceRandom

logger = logging.getLogger(__name__)


class Command(Enum):
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    SOFT_DROP = "soft_drop"
    ROTATE = "rotate"
    ROTATE_CCW = "rotate_ccw"
    HARD_DROP = "hard_drop"
    TOGGLE_PAUSE = "toggle_pause"
    RESTART = "restart"


# Commands honoured while paused
PAUSE_COMMANDS = {Command.TOGGLE_PAUSE, Command.RESTART}


@dataclass
class GameState:
    grid: Grid
    rng: PieceRandom
    piece: Optional[Piece] = None
    next_type: Optional[str] = None
    progress: Progress = field(default_factory=Progress)
    drop_counter: float = 0.0

    @property
    def score(self) -> int:
        return self.progress.score

    @property
    def level(self) -> int:
        return self.progress.level


def new_game(seed: Optional[int] = None, rng: Optional[PieceRandom] = None) -> GameState:
    rng = rng or PieceRandom(seed)
    state = GameState(grid=Grid(), rng=rng)
    state.next_type = rng.next_piece()
    player_reset(state)
    logger.info("new game (seed=%s)", rng.seed)
    return state


def player_reset(state: GameState) -> GameState:
    """Spawn the queued piece at the top centre and queue the next one.

    A spawn that collides resets the board and progression and flags
    `game_over`; play continues on the fresh board.
    """
    t = state.next_type or state.rng.next_piece()
    state.next_type = state.rng.next_piece()
    state.piece = Piece.spawn(t, state.grid.width)
    logger.debug("spawned %s at x=%d, next %s", t, state.piece.x, state.next_type)
    if collide(state.grid, state.piece):
        logger.info("board full at score %d, resetting", state.progress.score)
        state.grid = Grid(state.grid.width, state.grid.height)
        state.progress.reset()
        state.progress.game_over = True
    return state


def lock_piece(state: GameState) -> int:
    """Merge the piece, sweep full rows, score them and spawn the next piece."""
    merge(state.grid, state.piece)
    rows = state.grid.clear_full_rows()
    if rows:
        points = state.progress.award(rows)
        p = state.progress
        logger.debug("cleared %d rows for %d points: score=%d level=%d interval=%dms",
                     rows, points, p.score, p.level, p.drop_interval)
    player_reset(state)
    return rows


def player_drop(state: GameState) -> bool:
    """Move down one row; lock the piece if it cannot. Returns True if it moved."""
    piece = state.piece
    piece.y += 1
    moved = True
    if collide(state.grid, piece):
        piece.y -= 1
        moved = False
        lock_piece(state)
    state.drop_counter = 0.0
    return moved


def player_move(state: GameState, direction: int) -> bool:
    piece = state.piece
    piece.x += direction
    if collide(state.grid, piece):
        piece.x -= direction
        return False
    return True


def player_rotate(state: GameState, direction: int) -> bool:
    return rotate_piece(state.grid, state.piece, direction)


def hard_drop(state: GameState) -> int:
    """Drop straight to the landing row and lock. Returns the rows cleared."""
    state.piece.y = landing_y(state.grid, state.piece)
    return lock_piece(state)


def toggle_pause(state: GameState) -> bool:
    state.progress.paused = not state.progress.paused
    logger.info("paused" if state.progress.paused else "resumed")
    return state.progress.paused


def restart(state: GameState) -> GameState:
    """Start over in place, keeping the piece randomizer."""
    fresh = new_game(rng=state.rng)
    state.grid = fresh.grid
    state.piece = fresh.piece
    state.next_type = fresh.next_type
    state.progress = fresh.progress
    state.drop_counter = 0.0
    return state


def update(state: GameState, dt_ms: float) -> GameState:
    """Advance gravity by `dt_ms` milliseconds."""
    if state.progress.paused:
        return state
    state.drop_counter += dt_ms
    if state.drop_counter >= state.progress.drop_interval:
        player_drop(state)
    return state


def apply(state: GameState, command: Command) -> GameState:
    if not isinstance(command, Command):
        raise TypeError(f"expected a Command, got {command!r}")
    if state.progress.paused and command not in PAUSE_COMMANDS:
        return state
    if command is Command.MOVE_LEFT:
        player_move(state, -1)
    elif command is Command.MOVE_RIGHT:
        player_move(state, 1)
    elif command is Command.SOFT_DROP:
        player_drop(state)
    elif command is Command.ROTATE:
        player_rotate(state, 1)
    elif command is Command.ROTATE_CCW:
        player_rotate(state, -1)
    elif command is Command.HARD_DROP:
        hard_drop(state)
    elif command is Command.TOGGLE_PAUSE:
        toggle_pause(state)
    elif command is Command.RESTART:
        restart(state)
    return state


def replay(state: GameState, events: Iterable[Union[Command, float]]) -> GameState:
    """Feed commands and elapsed-time ticks (numbers, in ms) in order."""
    for e in events:
        if isinstance(e, Command):
            apply(state, e)
        else:
            update(state, e)
    return state
