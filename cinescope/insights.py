"""
Insight module.
Statistical summaries over filtered views and the narrative text built from them.
"""

from typing import Callable, Dict, Hashable, Iterable, Sequence, Tuple, TypeVar

import numpy as np

from .dataset import Dataset
from .models import ALL_GENRES, Insight, Movie
from .scene_filters import FilteredView


T = TypeVar('T')
K = TypeVar('K', bound=Hashable)

# Narrative thresholds
PROLIFIC_DECADE_COUNT = 80
SOLID_DECADE_COUNT = 50
BLOCKBUSTER_GROSS = 200_000_000
MEANINGFUL_CORRELATION = 0.3


def mean(values: Sequence[float]) -> float:
	"""Arithmetic mean. Undefined for an empty sequence."""
	if len(values) == 0:
		raise ValueError("mean() of an empty sequence")
	return float(np.mean(np.asarray(values, dtype=float)))


def extent(values: Sequence[T]) -> Tuple[T, T]:
	"""(min, max) of a non-empty sequence."""
	if len(values) == 0:
		raise ValueError("extent() of an empty sequence")
	return min(values), max(values)


def rollup_count(records: Iterable[T], key_fn: Callable[[T], K]) -> Dict[K, int]:
	"""
	Count records per key. The mapping keeps keys in order of first occurrence,
	which most_frequent relies on for tie-breaking.
	"""
	counts: Dict[K, int] = {}
	for record in records:
		key = key_fn(record)
		counts[key] = counts.get(key, 0) + 1
	return counts


def most_frequent(counts: Dict[K, int]) -> Tuple[K, int]:
	"""
	Key with the highest count. Among equal counts the key seen first wins,
	since max() keeps the first maximal item of an ordered mapping.
	"""
	if not counts:
		raise ValueError("most_frequent() of an empty rollup")
	return max(counts.items(), key=lambda item: item[1])


def pearson_correlation(xs: Sequence[float], ys: Sequence[float]) -> float:
	"""
	Pearson's r computed as (nΣxy − ΣxΣy) / sqrt((nΣx² − (Σx)²)(nΣy² − (Σy)²)).
	Returns 0.0 when either axis has zero variance (the denominator is zero).
	"""
	if len(xs) != len(ys):
		raise ValueError(f"Length mismatch: {len(xs)} vs {len(ys)}")

	x = np.asarray(xs, dtype=float)
	y = np.asarray(ys, dtype=float)

	# Constant input is degenerate even when rounding leaves a tiny variance term
	if x.size == 0 or np.all(x == x[0]) or np.all(y == y[0]):
		return 0.0

	n = x.size
	sum_x = x.sum()
	sum_y = y.sum()
	numerator = n * (x * y).sum() - sum_x * sum_y
	variance_product = (n * (x * x).sum() - sum_x * sum_x) * (n * (y * y).sum() - sum_y * sum_y)
	if variance_product <= 0:
		return 0.0
	return float(numerator / np.sqrt(variance_product))


# ---------- Narrative templates ----------


def decade_movies(dataset: Dataset, decade: int) -> Tuple[Movie, ...]:
	"""Movies released in [decade, decade + 9]."""
	return tuple(m for m in dataset.movies if decade <= m.year <= decade + 9)


def timeline_insight(dataset: Dataset, decade: int) -> Insight:
	"""Scene 1 text for the selected decade."""
	movies = decade_movies(dataset, decade)
	title = f"{decade}s Cinema"
	if not movies:
		return Insight(title=title, body=f"No films from the {decade}s made it into the top-rated list.")

	count = len(movies)
	avg_rating = mean([m.rating for m in movies])
	if count > PROLIFIC_DECADE_COUNT:
		verdict = 'was particularly prolific'
	elif count > SOLID_DECADE_COUNT:
		verdict = 'had solid representation'
	else:
		verdict = 'had fewer but quality films'

	return Insight(
		title=title,
		body=(
			f"The {decade}s produced {count} top-rated films with an average IMDB rating of {avg_rating:.1f}. "
			f"This decade {verdict} in cinema history."
		),
	)


def genre_insight(dataset: Dataset, genre: str) -> Insight:
	"""Scene 2 text: overall distribution for "all", otherwise a genre profile."""
	total = len(dataset)
	if genre == ALL_GENRES:
		top_genre, top_count = most_frequent(rollup_count(dataset.movies, lambda m: m.genre))
		return Insight(
			title='Genre Distribution',
			body=(
				f"Among the top {total} films, {top_genre} leads with {top_count} movies, "
				f"demonstrating its consistent ability to produce critically acclaimed cinema."
			),
		)

	movies = [m for m in dataset.movies if m.genre == genre]
	title = f"{genre} Movies"
	if not movies:
		return Insight(title=title, body=f"No {genre} films made it into the top {total}.")

	first_year, last_year = extent([m.year for m in movies])
	avg_rating = mean([m.rating for m in movies])
	return Insight(
		title=title,
		body=(
			f"{genre} films span from {first_year} to {last_year} with an average rating of {avg_rating:.1f}. "
			f"This genre has {len(movies)} representatives in the top {total}."
		),
	)


def critics_insight(view: FilteredView, min_rating: float) -> Insight:
	"""Scene 3 text: blockbuster count and box office / Metacritic correlation."""
	title = 'Critics vs Commercial Success'
	if view.is_empty:
		return Insight(
			title=title,
			body=f"No major releases rated {min_rating:g}+ have both box office and Metacritic data.",
		)

	blockbusters = [m for m in view.movies if m.gross > BLOCKBUSTER_GROSS]
	r = pearson_correlation([m.gross for m in view.movies], [m.meta_score for m in view.movies])
	if r > 0:
		direction = 'positive'
	elif r < 0:
		direction = 'negative'
	else:
		direction = 'flat'
	strength = (
		'suggesting a meaningful relationship' if abs(r) > MEANINGFUL_CORRELATION
		else 'indicating weak correlation'
	)
	return Insight(
		title=title,
		body=(
			f"Among movies rated {min_rating:g}+, there are {len(blockbusters)} blockbusters (>$200M). "
			f"The correlation between box office and critical acclaim is {direction} (r={r:.2f}), {strength}."
		),
	)
