"""
Host loop driving a live game with an agent.

Each control cycle either plans the moves for a freshly spawned piece or
replays the next planned move. Planning is synchronous; replay is spread over
cycles so gravity and other routines can interleave with it.
"""
import asyncio
import inspect
from dataclasses import dataclass, asdict
from typing import Any, Callable, Dict, Iterator, Optional

from core.game import Game
from core.gravity import gravity
from .agents.base import BaseAgent
from .player import SolutionPlayer
from .search.node import MoveToken


@dataclass
class GameResult:
    """Result of a single autoplayed game."""
    agent: str
    score: int
    pieces: int
    total_lines: int
    level: int
    ticks: int
    game_over: bool
    seed: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class Autoplayer:
    """
    Plays a game with an agent, one move per tick.
    """

    def __init__(
        self,
        agent: BaseAgent,
        game: Optional[Game] = None,
        seed: Optional[int] = None
    ):
        self.agent = agent
        self.seed = seed
        self.game = game or Game(seed=seed)
        self.player = SolutionPlayer(self.game)
        self.ticks = 0
        self._playback: Optional[Iterator[MoveToken]] = None

    @property
    def finished(self) -> bool:
        return self.game.game_over or not self.game.running

    def tick(self) -> Optional[MoveToken]:
        """
        Run one control cycle.

        Returns:
            The move applied this cycle, or None if the cycle planned nothing,
            locked a piece or the game is over
        """
        if self.finished:
            return None

        if self._playback is None:
            if self.game.piece is None:
                return None
            solution = self.agent.plan(self.game)
            self._playback = self.player.play(solution)

        self.ticks += 1
        move = next(self._playback, None)
        if move is None:
            self._playback = None
        return move

    def run(
        self,
        max_pieces: Optional[int] = None,
        callback: Optional[Callable] = None
    ) -> GameResult:
        """
        Play until the game ends or max_pieces pieces have locked.

        Args:
            max_pieces: Optional limit on locked pieces
            callback: Optional callback(game, move) after every tick

        Returns:
            GameResult with game statistics
        """
        while not self.finished:
            if max_pieces is not None and self.game.pieces_locked >= max_pieces:
                break
            move = self.tick()
            if callback:
                callback(self.game, move)

        return self.result()

    async def run_async(
        self,
        stop: Optional[asyncio.Event] = None,
        tick_interval: float = 0.1,
        with_gravity: bool = False,
        max_pieces: Optional[int] = None,
        callback: Optional[Callable] = None
    ) -> GameResult:
        """
        Cooperative version of run(): yields to the event loop after every tick.

        Args:
            stop: Event checked at each yield point; setting it ends the loop
            tick_interval: Seconds between ticks (0 = just yield)
            with_gravity: Run the gravity routine alongside the agent
            max_pieces: Optional limit on locked pieces
            callback: Optional callback(game, move), may be a coroutine function

        Returns:
            GameResult with game statistics
        """
        stop = stop or asyncio.Event()
        gravity_stop = asyncio.Event()
        gravity_task = None
        if with_gravity:
            gravity_task = asyncio.create_task(gravity(self.game, gravity_stop))

        try:
            while not self.finished and not stop.is_set():
                if max_pieces is not None and self.game.pieces_locked >= max_pieces:
                    break
                move = self.tick()
                if callback:
                    result = callback(self.game, move)
                    if inspect.isawaitable(result):
                        await result
                await asyncio.sleep(tick_interval)
        finally:
            gravity_stop.set()
            if gravity_task is not None:
                await gravity_task

        return self.result()

    def result(self) -> GameResult:
        return GameResult(
            agent=self.agent.name,
            score=self.game.score,
            pieces=self.game.pieces_locked,
            total_lines=self.game.scoring.total_lines,
            level=self.game.level,
            ticks=self.ticks,
            game_over=self.game.game_over,
            seed=self.seed
        )
