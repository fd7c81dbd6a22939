"""
IronMario Overlay Service — latest tracker state via FastAPI

Runs as a persistent HTTP service. The tracker engine POSTs state deltas
to /api/tracker; the browser overlay polls GET /api/tracker.

Usage:
  python -m uvicorn overlay_server:app --host 127.0.0.1 --port 5124
"""

import sys
import time
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, ConfigDict

# Bump together with TRACKER_VERSION in tracker/ironmario/config.py
OVERLAY_VERSION = "1.1.1"

# ─── Tracker state ───

latest: dict[str, Any] = {}
last_push: float | None = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    print("[Overlay] Ready for tracker pushes", file=sys.stderr, flush=True)
    yield
    print("[Overlay] Shutting down", file=sys.stderr, flush=True)


app = FastAPI(lifespan=lifespan)


# ─── Request/Response Models ───

class TrackerDelta(BaseModel):
    model_config = ConfigDict(extra="forbid")

    version: str | None = None
    rom_valid: bool | None = None
    level: str | None = None
    level_abbr: str | None = None
    stars: int | None = None
    pb_stars: int | None = None
    attempts: int | None = None
    run_status: str | None = None
    seed: str | None = None
    hp: int | None = None
    song: str | None = None


# ─── Endpoints ───

@app.get("/health")
async def health():
    return {
        "status": "ok",
        "version": OVERLAY_VERSION,
        "has_state": bool(latest),
    }


@app.get("/api/tracker")
async def get_state():
    return {
        "state": latest,
        "age_ms": None if last_push is None else int((time.time() - last_push) * 1000),
    }


@app.post("/api/tracker")
async def push_state(delta: TrackerDelta):
    global last_push
    changes = delta.model_dump(exclude_unset=True)
    if not changes:
        raise HTTPException(400, "Empty delta")

    latest.update(changes)
    last_push = time.time()
    return {"updated": sorted(changes)}


@app.delete("/api/tracker")
async def clear_state():
    global last_push
    latest.clear()
    last_push = None
    return {"status": "cleared"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="127.0.0.1", port=5124)
