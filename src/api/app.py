"""
FastAPI backend for the falling-block autoplayer.

Supports:
- Solving a single board/piece position
- Listing the available traversals and heuristics
- Live autoplay streaming over WebSocket

The search configuration is read from the environment once at startup
(TETRIS_SEARCH_STRATEGY, TETRIS_HEURISTIC); an invalid value stops the
server from starting.
"""
import logging
from dataclasses import dataclass, asdict
from typing import List, Optional, Tuple

from fastapi import FastAPI, HTTPException, WebSocket, WebSocketDisconnect
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel
import uvicorn

from core.board import Board, START_POSITION
from core.game import Game
from core.pieces import Piece
from ai.agents.search_agent import SearchAgent
from ai.autoplay import Autoplayer
from ai.search.config import SearchConfig
from ai.search.moves import lock
from ai.search.registry import list_heuristics, list_traversals
from ai.search.solver import Searcher

logger = logging.getLogger(__name__)

SEARCH_CONFIG = SearchConfig.from_env()
searcher = Searcher(SEARCH_CONFIG)

app = FastAPI(title="Falling-Block Autoplayer")

# Allow CORS for development
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


class SolveRequest(BaseModel):
    """A board, a piece name and the piece's pivot position."""
    grid: Optional[List[List[int]]] = None
    piece: str
    position: Optional[Tuple[int, int]] = None


@dataclass
class AutoplayConfig:
    """Configuration for an autoplay session."""
    seed: Optional[int] = None
    max_pieces: Optional[int] = None
    speed: float = 0.1  # seconds between ticks (0 = as fast as possible)
    with_gravity: bool = False


@app.get("/api/config")
async def get_config():
    """The search configuration fixed at startup."""
    return SEARCH_CONFIG.to_dict()


@app.get("/api/heuristics")
async def get_heuristics():
    """List all available heuristics."""
    return {"heuristics": [info.to_dict() for info in list_heuristics()]}


@app.get("/api/traversals")
async def get_traversals():
    """List all available traversal strategies."""
    return {"traversals": [info.to_dict() for info in list_traversals()]}


@app.post("/api/solve")
async def solve(request: SolveRequest):
    """Find the moves taking the piece to its best resting placement."""
    try:
        piece = Piece.from_name(request.piece)
        board = Board(request.grid) if request.grid is not None else Board()
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    position = tuple(request.position) if request.position else START_POSITION
    result = searcher.search(board, piece, position)

    final = None
    if result.best is not None:
        locked = lock(result.best)
        final = {
            "piece": result.best.piece.name,
            "coords": [list(c) for c in result.best.piece.coords],
            "position": list(result.best.position),
            "grid": locked.board.to_array().tolist(),
        }

    return {
        "solution": [move.value for move in result.solution],
        "score": result.best_score,
        "expanded": result.expanded,
        "final": final,
    }


@app.websocket("/ws/autoplay")
async def autoplay_websocket(websocket: WebSocket):
    """
    WebSocket for live autoplay.

    Expects config:
    {
        "seed": optional,
        "max_pieces": optional,
        "speed": 0.1,
        "with_gravity": false
    }
    """
    await websocket.accept()

    try:
        config_data = await websocket.receive_json()
        if not isinstance(config_data, dict) or not isinstance(config_data.get("config", {}), dict):
            raise ValueError("Expected a JSON object of the form {\"config\": {...}}")
        config = AutoplayConfig(**config_data.get("config", {}))

        game = Game(seed=config.seed)
        autoplayer = Autoplayer(SearchAgent(SEARCH_CONFIG), game=game, seed=config.seed)

        await websocket.send_json({
            "type": "game_start",
            "config": asdict(config),
            "search": SEARCH_CONFIG.to_dict(),
            "state": game.get_state().to_dict()
        })

        async def send_tick(game, move):
            await websocket.send_json({
                "type": "tick",
                "move": move.value if move else None,
                "state": game.get_state().to_dict()
            })

        result = await autoplayer.run_async(
            tick_interval=config.speed,
            with_gravity=config.with_gravity,
            max_pieces=config.max_pieces,
            callback=send_tick
        )

        await websocket.send_json({
            "type": "game_over",
            "result": result.to_dict()
        })

    except WebSocketDisconnect:
        logger.info("Autoplay client disconnected")
    except Exception as e:
        logger.warning("Autoplay session failed: %s", e)
        await websocket.send_json({
            "type": "error",
            "message": str(e)
        })


def main():
    """Run the server."""
    uvicorn.run(app, host="127.0.0.1", port=8000)


if __name__ == "__main__":
    main()
