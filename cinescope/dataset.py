"""
Dataset module.
Holds the immutable collection of normalized movies and its global scale domains.
"""

from dataclasses import dataclass  # frozen container
from typing import Iterator, Sequence, Tuple  # type hints

from loguru import logger  # console logger

from .models import Movie  # structured movie record


@dataclass(frozen=True)
class Dataset:
	"""
	All valid movies plus domains derived once at construction.
	Consumers only ever receive read-only views (tuples) of the records.
	"""
	movies: Tuple[Movie, ...]  # records in source order
	year_extent: Tuple[int, int]  # (earliest, latest) release year
	votes_extent: Tuple[int, int]  # (fewest, most) votes
	genres: Tuple[str, ...]  # distinct primary genres, first-seen order

	@classmethod
	def build(cls, movies: Sequence[Movie]) -> 'Dataset':
		"""Freeze the movie list and compute its global domains."""
		if not movies:
			raise ValueError("Dataset requires at least one movie")

		records = tuple(movies)  # detach from the caller's list
		years = [m.year for m in records]
		votes = [m.votes for m in records]
		genres = tuple(dict.fromkeys(m.genre for m in records))  # ordered de-duplication

		dataset = cls(
			movies=records,
			year_extent=(min(years), max(years)),
			votes_extent=(min(votes), max(votes)),
			genres=genres,
		)
		logger.info(
			f"[Dataset] Built with {len(records)} movies | years={dataset.year_extent} | genres={len(genres)}"
		)
		return dataset

	def __len__(self) -> int:
		return len(self.movies)

	def __iter__(self) -> Iterator[Movie]:
		return iter(self.movies)
