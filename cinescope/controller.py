"""
Scene controller module.
Holds the current scene and control values, re-derives what changed and hands
the result to the rendering and insight collaborators.
"""

import asyncio  # the one suspending operation: loading the dataset
import math  # finite checks on control values
from dataclasses import replace  # state is replaced, never patched
from typing import Callable, Dict, Optional, Protocol, Union  # type annotations

from loguru import logger  # simple structured logger

from .data_loader import DataLoader  # loads and normalizes movies
from .dataset import Dataset  # immutable movie collection
from .errors import LoadFailure, SessionNotReady  # error taxonomy
from .insights import critics_insight, genre_insight, timeline_insight  # narrative text
from .models import (
	CRITICS_SCENE,
	GENRE_SCENE,
	SCENES,
	TIMELINE_SCENE,
	ControlEvent,
	EmphasisUpdate,
	Insight,
	RenderInstructions,
	SceneState,
)
from .scene_filters import FilteredView, SceneFilterEngine  # per-scene filters
from .scenes import build_instructions, emphasis_for  # render adapter


def finite_number(value: object, what: str) -> float:
	"""Coerce a control value to a finite float; NaN and infinities are refused."""
	if isinstance(value, bool):
		raise ValueError(f"Invalid {what}: {value!r}")
	try:
		number = float(value)
	except (TypeError, ValueError):
		raise ValueError(f"Invalid {what}: {value!r}")
	if not math.isfinite(number):
		raise ValueError(f"Invalid {what}: {value!r}")
	return number


def whole_number(value: object, what: str) -> int:
	"""Coerce a control value to an int without truncating; 2.9 is refused, 2.0 and "2" are not."""
	number = finite_number(value, what)
	if not number.is_integer():
		raise ValueError(f"Invalid {what}: {value!r} is not a whole number")
	return int(number)


class SceneRenderer(Protocol):
	"""Draws frames. Implementations own every drawing primitive."""

	def render(self, frame: RenderInstructions) -> None:
		...

	def update_emphasis(self, update: EmphasisUpdate) -> None:
		...


class InsightSurface(Protocol):
	"""Displays narrative text verbatim."""

	def show_insight(self, title: str, body: str) -> None:
		...


class SceneController:
	"""
	State machine over the three scenes.
	- switch_scene: hard reset and full render of the target scene
	- set_decade / set_genre: emphasis and insight only, while their scene is active
	- set_rating: re-filter and full render, while Scene 3 is active
	"""

	def __init__(
		self,
		dataset: Dataset,  # loaded, immutable movies
		renderer: SceneRenderer,  # draws frames
		insight_surface: Optional[InsightSurface] = None,  # defaults to the renderer if it can show text
		state: Optional[SceneState] = None,  # starting control values
	):
		self.dataset = dataset  # never mutated
		self.filters = SceneFilterEngine(dataset)  # caches the Scene 3 gross anchor
		self.renderer = renderer
		self.insight_surface = insight_surface if insight_surface is not None else renderer
		self.state = state or SceneState()  # Scene 1, 2000s, all genres, 8.0
		self.view: Optional[FilteredView] = None  # current filtered view
		self.frame: Optional[RenderInstructions] = None  # last frame handed to the renderer
		self.insight: Optional[Insight] = None  # last insight shown

		# Control-surface event names -> transitions
		self._handlers: Dict[str, Callable[[object], object]] = {
			'sceneSelected': lambda v: self.switch_scene(whole_number(v, 'scene')),
			'decadeChanged': lambda v: self.set_decade(whole_number(v, 'decade')),
			'genreChanged': lambda v: self.set_genre(str(v)),
			'ratingChanged': lambda v: self.set_rating(finite_number(v, 'rating')),
		}

	def start(self) -> RenderInstructions:
		"""Render the initial scene."""
		logger.info(f"[Controller] Starting in scene {self.state.current_scene}")
		return self._render_scene()

	def dispatch(self, event: ControlEvent) -> Union[RenderInstructions, EmphasisUpdate, None]:
		"""Route a control event to its transition."""
		handler = self._handlers.get(event.name)
		if handler is None:
			raise ValueError(f"Unknown control event: {event.name}")
		logger.debug(f"[Controller] Event {event.name}={event.value!r}")
		return handler(event.value)

	# ---------- Transitions ----------

	def switch_scene(self, scene: int) -> RenderInstructions:
		"""Discard the current frame and fully render another scene."""
		if scene not in SCENES:
			raise ValueError(f"Unknown scene: {scene}")
		logger.info(f"[Controller] Switching scene {self.state.current_scene} -> {scene}")
		self.state = replace(self.state, current_scene=scene)
		self.view = None  # previous scene's derived state is dropped
		self.frame = None
		return self._render_scene()

	def set_decade(self, decade: int) -> Optional[EmphasisUpdate]:
		"""Record the decade; in Scene 1 refresh emphasis and insight without redrawing."""
		if decade % 10 != 0:
			raise ValueError(f"Decade must start a decade (multiple of 10): {decade}")
		self.state = replace(self.state, selected_decade=decade)
		if self.state.current_scene != TIMELINE_SCENE:
			return None
		return self._refresh_emphasis()

	def set_genre(self, genre: str) -> Optional[EmphasisUpdate]:
		"""Record the genre; in Scene 2 refresh emphasis and insight without redrawing."""
		self.state = replace(self.state, selected_genre=genre)
		if self.state.current_scene != GENRE_SCENE:
			return None
		return self._refresh_emphasis()

	def set_rating(self, min_rating: float) -> Optional[RenderInstructions]:
		"""
		Record the threshold; in Scene 3 re-filter and redraw.
		An empty result keeps the last good frame on screen.
		"""
		if not math.isfinite(min_rating):
			raise ValueError(f"Rating threshold must be finite: {min_rating}")
		self.state = replace(self.state, min_rating=min_rating)
		if self.state.current_scene != CRITICS_SCENE:
			return None

		view = self.filters.view_for(self.state)
		if view.is_empty:
			logger.warning(f"[Controller] No movies rated >= {min_rating}; keeping the previous frame")
			return None
		return self._render_view(view)

	# ---------- Derivation ----------

	def _render_scene(self) -> RenderInstructions:
		"""Filter, summarize and render the current scene from scratch."""
		return self._render_view(self.filters.view_for(self.state))

	def _render_view(self, view: FilteredView) -> RenderInstructions:
		self.view = view  # replaces, never patches, the previous view
		frame = build_instructions(self.dataset, view, self.state, gross_anchor=self.filters.gross_anchor)
		self.frame = frame
		self.renderer.render(frame)
		self._show(self._insight_for(view))
		logger.debug(f"[Controller] Rendered scene {frame.scene} with {len(frame.marks)} marks")
		return frame

	def _refresh_emphasis(self) -> EmphasisUpdate:
		if self.view is None:
			raise RuntimeError("Controller has not rendered a scene yet; call start() first")
		update = EmphasisUpdate(scene=self.view.scene, emphasis=emphasis_for(self.view, self.state))
		self.renderer.update_emphasis(update)
		self._show(self._insight_for(self.view))
		return update

	def _insight_for(self, view: FilteredView) -> Insight:
		if view.scene == TIMELINE_SCENE:
			return timeline_insight(self.dataset, self.state.selected_decade)
		if view.scene == GENRE_SCENE:
			return genre_insight(self.dataset, self.state.selected_genre)
		return critics_insight(view, self.state.min_rating)

	def _show(self, insight: Insight):
		self.insight = insight
		self.insight_surface.show_insight(insight.title, insight.body)


class SceneSession:
	"""
	Owns the one-time load. Until start() succeeds there is no dataset and no
	controller, and every control event is refused.
	"""

	def __init__(
		self,
		data_path: str,  # CSV source
		renderer: SceneRenderer,  # collaborator passed to the controller
		insight_surface: Optional[InsightSurface] = None,
		loader: Optional[DataLoader] = None,
	):
		self.data_path = data_path
		self.renderer = renderer
		self.insight_surface = insight_surface
		self.loader = loader or DataLoader()
		self.dataset: Optional[Dataset] = None
		self.controller: Optional[SceneController] = None
		self.load_error: Optional[LoadFailure] = None

	@property
	def ready(self) -> bool:
		return self.controller is not None

	async def start(self) -> bool:
		"""Load the data off the event loop, then build the controller and render Scene 1."""
		logger.info(f"[Session] Loading dataset from {self.data_path}")
		try:
			movies, rejected = await asyncio.to_thread(self.loader.load_movies_from_csv, self.data_path)
		except LoadFailure as e:
			self.load_error = e
			logger.error(f"[Session] Load failed, visualization stays inert: {e}")
			return False

		dataset = Dataset.build(movies)
		controller = SceneController(dataset, self.renderer, self.insight_surface)
		controller.start()
		# Publish only fully initialized objects
		self.dataset = dataset
		self.controller = controller
		logger.info(f"[Session] Ready with {len(dataset)} movies ({rejected} rows rejected)")
		return True

	def handle(self, event: ControlEvent):
		"""Forward a control event to the controller."""
		if self.controller is None:
			raise SessionNotReady(
				f"Dataset not loaded: {self.load_error}" if self.load_error else "Dataset not loaded yet"
			)
		return self.controller.dispatch(event)
