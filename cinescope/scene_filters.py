"""
Scene filter module.
One pure function per scene maps the dataset and the relevant control value to
the subset of movies that scene shows.
"""

from dataclasses import dataclass  # lightweight container for filter results
from functools import cached_property  # once-per-dataset anchor
from typing import Iterator, Optional, Tuple  # type annotations for clarity

from loguru import logger  # simple structured logger

from .dataset import Dataset  # immutable movie collection
from .models import CRITICS_SCENE, GENRE_SCENE, TIMELINE_SCENE, Movie, SceneState


MIN_BOX_OFFICE = 50_000_000  # Scene 3 only shows major releases


@dataclass(frozen=True)
class FilteredView:
	"""
	Movies selected for one scene. Holds references into the dataset, never copies,
	and is replaced on every control change that affects membership.
	"""
	scene: int  # scene the view was computed for
	movies: Tuple[Movie, ...]  # selected records, dataset order

	@property
	def is_empty(self) -> bool:
		"""True when the filter matched nothing; callers must not summarize an empty view."""
		return not self.movies

	def __len__(self) -> int:
		return len(self.movies)

	def __iter__(self) -> Iterator[Movie]:
		return iter(self.movies)


def filter_timeline(dataset: Dataset) -> FilteredView:
	"""Scene 1: every movie; the decade only changes emphasis."""
	return FilteredView(scene=TIMELINE_SCENE, movies=dataset.movies)


def filter_genre_evolution(dataset: Dataset) -> FilteredView:
	"""Scene 2: every movie; the genre only changes emphasis."""
	return FilteredView(scene=GENRE_SCENE, movies=dataset.movies)


def is_major_release(movie: Movie) -> bool:
	"""Movie has a known gross of at least MIN_BOX_OFFICE."""
	return movie.gross is not None and movie.gross >= MIN_BOX_OFFICE


def filter_critics_vs_box_office(dataset: Dataset, min_rating: float) -> FilteredView:
	"""
	Scene 3: major releases with a Metacritic score and an IMDB rating at or above min_rating.
	"""
	movies = tuple(
		m for m in dataset.movies
		if is_major_release(m) and m.meta_score is not None and m.rating >= min_rating
	)
	return FilteredView(scene=CRITICS_SCENE, movies=movies)


def major_release_gross_extent(dataset: Dataset) -> Optional[Tuple[float, float]]:
	"""
	Gross extent over all major releases of the unfiltered dataset.
	None when no movie reaches MIN_BOX_OFFICE.
	"""
	grosses = [m.gross for m in dataset.movies if is_major_release(m)]
	if not grosses:
		return None
	return min(grosses), max(grosses)


class SceneFilterEngine:
	"""
	Binds the scene filters to one dataset and caches what depends only on it.
	"""

	def __init__(self, dataset: Dataset):
		self.dataset = dataset  # never mutated

	@cached_property
	def gross_anchor(self) -> Optional[Tuple[float, float]]:
		"""Scene 3 gross extent; computed once so the x-axis stays put across rating changes."""
		anchor = major_release_gross_extent(self.dataset)
		logger.debug(f"[Filters] Scene 3 gross anchor: {anchor}")
		return anchor

	def view_for(self, state: SceneState) -> FilteredView:
		"""Compute the filtered view for the state's current scene."""
		if state.current_scene == TIMELINE_SCENE:
			return filter_timeline(self.dataset)
		if state.current_scene == GENRE_SCENE:
			return filter_genre_evolution(self.dataset)
		if state.current_scene == CRITICS_SCENE:
			view = filter_critics_vs_box_office(self.dataset, state.min_rating)
			logger.debug(f"[Filters] Scene 3 filtered to {len(view)} movies with rating >= {state.min_rating}")
			return view
		raise ValueError(f"Unknown scene: {state.current_scene}")
