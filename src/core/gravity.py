"""
Cooperative gravity routine for a live game.
"""
import asyncio

from .game import Game
from .rules import grav_speed


async def gravity(game: Game, stop: asyncio.Event) -> int:
    """
    Move the current piece down one row per gravity interval until stopped.

    The stop event is checked at every wait, so setting it ends the routine
    at its next yield point. Gravity never locks a piece.

    Returns:
        Number of gravity steps that moved the piece
    """
    steps = 0
    while game.running and not stop.is_set():
        speed = grav_speed(game.level, game.soft_drop, game.scoring.config)
        try:
            await asyncio.wait_for(stop.wait(), timeout=speed / 1000)
        except asyncio.TimeoutError:
            if game.apply_gravity():
                steps += 1
    return steps
