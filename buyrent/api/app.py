"""FastAPI application entry point.

Start with: uvicorn buyrent.api.app:app --reload
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from buyrent.api.routes import payoff, projection
from buyrent.config import settings

logging.basicConfig(level=settings.log_level)

app = FastAPI(
    title="Buy vs Rent",
    description="Long-run net worth projection: buying a home vs renting and investing",
    version="0.1.0",
    debug=settings.debug,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(projection.router)
app.include_router(payoff.router)


@app.get("/health")
async def health():
    return {"status": "ok"}
