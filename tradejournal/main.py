"""FastAPI application entry point."""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from tradejournal import __version__
from tradejournal.config import settings
from tradejournal.database import create_db_and_tables, engine
from tradejournal.services.journal import JournalState
from tradejournal.utils.logging import setup_logging
from tradejournal.api import accounts, trades, dashboard, coach, system


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    setup_logging()
    create_db_and_tables()
    journal = JournalState(engine)
    journal.load()
    app.state.journal = journal

    yield


app = FastAPI(
    title="Trade Journal",
    description="Single-user trading journal with performance statistics and AI coaching",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Mount routers
app.include_router(accounts.router)
app.include_router(trades.router)
app.include_router(dashboard.router)
app.include_router(coach.router)
app.include_router(system.router)
