"""
FastAPI server exposing the scene controller.
Endpoints:
- GET /health: basic health check
- GET /scene: current scene snapshot (state, frame, insight)
- POST /events: dispatch one control event and return the new snapshot

Startup loads the movie CSV once; if that fails the server stays up but inert and
scene endpoints answer 503.
"""

# Import standard libraries for timing
import time  # measure startup latency
from typing import Optional  # precise typing for clarity

# Import FastAPI for building the web API
from fastapi import FastAPI, HTTPException  # FastAPI primitives

# Import our internal modules
from cinescope.config import Settings, configure_logging  # env-based settings
from cinescope.controller import SceneSession  # load-once session
from cinescope.errors import SessionNotReady  # events before a dataset exists
from cinescope.models import ControlEvent  # control-surface event
from cinescope.renderers import SnapshotRenderer  # keeps the latest frame
from cinescope.schemas import ControlEventIn, SceneSnapshot, build_snapshot  # response models

# Import loguru for simple, structured console logging
from loguru import logger  # convenient console logger

# Instantiate the FastAPI application with metadata
app = FastAPI(title="CineScope API", version="1.0.0")  # web app

# Globals that hold the session and measured startup time
SESSION: Optional[SceneSession] = None  # set once at startup
RENDERER: Optional[SnapshotRenderer] = None  # render collaborator the session draws into
STARTUP_TIME_S: float = 0.0  # measures how long startup took


# FastAPI startup hook to load the dataset once
@app.on_event("startup")
async def startup_event():
	"""Load the dataset and render the first scene."""
	global SESSION, RENDERER, STARTUP_TIME_S  # refer to module-level globals
	start = time.time()  # start timer for startup latency

	settings = Settings.from_env()  # resolve configuration
	configure_logging(settings.log_level)  # apply log level
	logger.info(f"[API] Startup: loading movies from {settings.data_path}...")  # log intent

	RENDERER = SnapshotRenderer()  # in-memory frame holder
	SESSION = SceneSession(settings.data_path, RENDERER)  # session owns the load
	await SESSION.start()  # inert on LoadFailure, never partially initialized

	STARTUP_TIME_S = time.time() - start  # elapsed seconds
	mode = 'ready' if SESSION.ready else 'inert (load failed)'  # mode string
	logger.info(f"[API] Startup complete in {STARTUP_TIME_S:.2f}s. Session {mode}.")  # summary log


def _snapshot() -> SceneSnapshot:
	"""Build the current snapshot or fail with 503 when the dataset is missing."""
	if SESSION is None or not SESSION.ready:
		detail = str(SESSION.load_error) if SESSION is not None and SESSION.load_error else "Dataset not loaded"
		raise HTTPException(status_code=503, detail=detail)
	controller = SESSION.controller
	return build_snapshot(
		controller.state,
		RENDERER.frame,
		RENDERER.insight,
		genres=SESSION.dataset.genres,
		year_extent=SESSION.dataset.year_extent,
	)


# Simple health endpoint for readiness checks
@app.get("/health")
async def health():
	"""Return minimal health info for liveness/readiness probes."""
	return {
		"status": "ok",  # constant indicator
		"dataset_ready": SESSION is not None and SESSION.ready,  # True if data loaded
		"load_error": str(SESSION.load_error) if SESSION is not None and SESSION.load_error else None,
		"startup_seconds": round(STARTUP_TIME_S, 2)  # startup latency
	}


@app.get("/scene", response_model=SceneSnapshot)
async def scene():
	"""Return the scene currently on screen."""
	return _snapshot()


@app.post("/events", response_model=SceneSnapshot)
async def events(event: ControlEventIn):
	"""Dispatch a control event; handlers run to completion before the response is built."""
	if SESSION is None:
		raise HTTPException(status_code=503, detail="Server not started")
	logger.debug(f"[API] /events {event.name}={event.value!r}")  # debug log of input
	try:
		SESSION.handle(ControlEvent(name=event.name, value=event.value))
	except SessionNotReady as e:
		raise HTTPException(status_code=503, detail=str(e))
	except ValueError as e:  # unknown event name, scene or malformed value
		logger.warning(f"[API] Rejected event {event.name}={event.value!r}: {e}")
		raise HTTPException(status_code=422, detail=str(e))
	return _snapshot()
