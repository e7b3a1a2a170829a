import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import get_settings
from app.routers import board, moves
from app.services.board import get_default_board

logger = logging.getLogger(__name__)
settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting Maha Lilah Engine API")
    logger.debug("Debug mode: %s", settings.DEBUG)

    # Load and validate the board before serving any move
    loaded = get_default_board()
    logger.info("Board loaded: %d houses", loaded.rules.total_cells)

    yield

    logger.info("Shutting down Maha Lilah Engine API")


app = FastAPI(
    title="Maha Lilah Engine API",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
logger.debug("CORS configured with origins: %s", settings.CORS_ORIGINS)

app.include_router(board.router, prefix="/api/v1")
app.include_router(moves.router, prefix="/api/v1")
logger.debug("Routers registered: /api/v1/board, /api/v1/moves")


@app.get("/")
def root():
    return {"message": "Maha Lilah Engine API"}


@app.get("/health")
def health():
    return {"status": "healthy"}
