import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from starlette import status
from starlette.middleware.cors import CORSMiddleware
from starlette.responses import JSONResponse

from pokerleague.config import config, environment
from pokerleague.database import database
from pokerleague.logic.scoring.calculation import ScoringInputError
from pokerleague.logic.scoring.scorer import UnknownGameTypeError, build_game_scorer
from pokerleague.routes import (
    leagues,
    players,
    qualification,
    results,
    scoring,
    seasons,
    series,
    standings,
    tournaments,
)
from pokerleague.utils.alembic import alembic_run_migrations
from pokerleague.utils.logging import logger


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    if config.auto_run_migrations:
        await asyncio.to_thread(alembic_run_migrations)

    await database.connect()
    app.state.game_scorer = build_game_scorer()
    logger.info(f"Started poker league API ({environment.value})")

    yield

    await database.disconnect()


app = FastAPI(
    title="Poker League API",
    docs_url="/docs",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[origin for origin in config.cors_origins.split(",") if origin != ""],
    allow_origin_regex=config.cors_origin_regex or None,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(ScoringInputError)
async def scoring_input_error_handler(request: Request, exc: ScoringInputError) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": str(exc)})


@app.exception_handler(UnknownGameTypeError)
async def unknown_game_type_handler(request: Request, exc: UnknownGameTypeError) -> JSONResponse:
    logger.error(str(exc))
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": str(exc)})


@app.get("/ping", summary="Healthcheck ping")
async def ping() -> str:
    return "ping"


for router in (
    leagues.router,
    seasons.router,
    series.router,
    tournaments.router,
    players.router,
    results.router,
    standings.router,
    qualification.router,
    scoring.router,
):
    app.include_router(router)
