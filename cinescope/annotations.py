"""
Annotation module.
Chooses the single data point each scene calls out and describes the callout.
"""

from typing import Optional

from .dataset import Dataset
from .insights import mean, most_frequent, rollup_count
from .models import Annotation
from .scene_filters import FilteredView


SWEET_SPOT_GROSS = 300_000_000  # Scene 3 callout needs a real hit
SWEET_SPOT_META_SCORE = 80  # ...that critics also loved


def timeline_annotation(dataset: Dataset) -> Optional[Annotation]:
	"""Highest rated movie; the first one in dataset order wins ties."""
	if not dataset.movies:
		return None
	best = max(dataset.movies, key=lambda m: m.rating)
	return Annotation(
		label=best.title,
		title='Highest Rated Movie',
		anchor=(best.year, best.rating),
		offset=(50, -30),
	)


def genre_annotation(dataset: Dataset) -> Optional[Annotation]:
	"""Callout at the average (year, rating) of the most represented genre."""
	if not dataset.movies:
		return None
	genre, _ = most_frequent(rollup_count(dataset.movies, lambda m: m.genre))
	movies = [m for m in dataset.movies if m.genre == genre]
	return Annotation(
		label=f"{genre} dominates the top ratings",
		title='Genre Insight',
		anchor=(mean([m.year for m in movies]), mean([m.rating for m in movies])),
		offset=(-80, -40),
	)


def critics_annotation(view: FilteredView) -> Optional[Annotation]:
	"""Highest grossing movie in the view that is also a critical success."""
	hits = [
		m for m in view.movies
		if m.gross > SWEET_SPOT_GROSS and m.meta_score > SWEET_SPOT_META_SCORE
	]
	if not hits:
		return None
	movie = max(hits, key=lambda m: m.gross)
	return Annotation(
		label=f"{movie.title} - Critical and commercial success",
		title='Sweet Spot',
		anchor=(movie.gross, movie.meta_score),
		offset=(-100, -50),
	)
