"""Game catalog routes — thin wrappers over the cached RAWG catalog.

GET /api/trending        → most-added games (up to 100)
GET /api/search/{query}  → up to 24 games matching query (may contain "/")
GET /api/game/{game_id}  → one game's detail record
"""

from typing import Any

from fastapi import APIRouter, Depends, Request

from services.games import GameCatalog

router = APIRouter(prefix="/api")


def get_catalog(request: Request) -> GameCatalog:
    return request.app.state.catalog


@router.get("/trending")
async def trending(catalog: GameCatalog = Depends(get_catalog)) -> Any:
    return await catalog.get_trending()


@router.get("/search/{query:path}")
async def search(query: str, catalog: GameCatalog = Depends(get_catalog)) -> Any:
    return await catalog.search_games(query)


@router.get("/game/{game_id}")
async def game_details(game_id: str, catalog: GameCatalog = Depends(get_catalog)) -> Any:
    return await catalog.get_game_details(game_id)
