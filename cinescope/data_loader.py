"""
Data loading and normalization module.
Reads the top-rated films CSV and turns raw rows into typed Movie records.
"""

# Standard libs for CSV parsing, typing, and paths
import csv  # read the tabular source
from typing import Dict, Iterable, List, Optional, Tuple  # type hints
from pathlib import Path  # filesystem-safe paths

# Import our Movie data class used across the project
from .models import Movie  # structured movie record
from .errors import LoadFailure  # fatal load error

# Console logging
from loguru import logger  # console logger


MIN_YEAR = 1920  # earliest release year kept
MAX_YEAR = 2020  # latest release year kept


class DataLoader:
	"""
	Handles loading and normalization of the movie table.
	"""

	# Columns that must be present in the header for the file to be usable
	REQUIRED_COLUMNS = (
		'Series_Title',
		'Released_Year',
		'IMDB_Rating',
		'Meta_score',
		'Genre',
		'Director',
		'No_of_Votes',
		'Gross',
		'Runtime',
		'Overview',
	)

	# Star columns, in billing order
	STAR_COLUMNS = ('Star1', 'Star2', 'Star3', 'Star4')

	# Characters removed from the gross column before parsing
	GROSS_JUNK = '$,"'

	def load_movies_from_csv(self, filepath: str) -> Tuple[List[Movie], int]:
		"""
		Load movies from a CSV file where each row is one film.
		Returns (movies, rejected_count). Raises LoadFailure when the file cannot be used at all.
		"""
		filepath = Path(filepath)  # normalize path

		# Validate the file presence early to give clear error messages
		if not filepath.exists():
			raise LoadFailure(f"Movie data file not found: {filepath}")

		logger.info(f"[DataLoader] Loading movies from {filepath}...")  # log action

		try:
			with open(filepath, 'r', encoding='utf-8', newline='') as f:
				reader = csv.DictReader(f)  # header row gives column names
				self._check_columns(reader.fieldnames, filepath)  # fail fast on wrong files
				rows = list(reader)  # source is small; keep all rows in memory
		except (OSError, UnicodeDecodeError, csv.Error) as e:
			raise LoadFailure(f"Could not read movie data from {filepath}: {e}") from e

		movies, rejected = self.normalize(rows)  # parse and validate

		# Without a single valid row there is nothing to build scales from
		if not movies:
			raise LoadFailure(f"No valid movies found in {filepath} ({rejected} rows rejected)")

		return movies, rejected  # return list and rejection count

	def _check_columns(self, fieldnames: Optional[List[str]], filepath: Path):
		"""Raise LoadFailure if the header lacks any required column."""
		if not fieldnames:  # empty file
			raise LoadFailure(f"Movie data file has no header: {filepath}")
		missing = [c for c in self.REQUIRED_COLUMNS if c not in fieldnames]
		if missing:
			raise LoadFailure(f"Movie data file {filepath} is missing columns: {missing}")

	def normalize(self, raw_rows: Iterable[Dict[str, str]]) -> Tuple[List[Movie], int]:
		"""
		Convert raw rows into Movie records.
		Rows with an unusable title, year, rating or runtime are dropped and counted.
		"""
		movies = []  # accumulator for parsed Movie objects
		rejected = 0  # rows that failed validation
		total = 0  # rows seen

		for row_num, row in enumerate(raw_rows, 1):  # keep track of row number for diagnostics
			total += 1
			movie = self._parse_movie_row(row)  # None when the row is rejected
			if movie is None:
				rejected += 1
				logger.debug(f"[DataLoader] Rejected row {row_num}: {row.get('Series_Title')!r}")
				continue  # move on
			movies.append(movie)  # collect

		# Diagnostics only; nothing downstream depends on these numbers
		with_gross = [m for m in movies if m.gross is not None]
		logger.info(f"[DataLoader] Loaded {len(movies)} movies from {total} rows ({rejected} rejected)")
		logger.info(f"[DataLoader] Movies with gross data: {len(with_gross)}")
		logger.debug(f"[DataLoader] Sample gross values: {[(m.title, m.gross) for m in with_gross[:5]]}")

		return movies, rejected  # return list and count

	def _parse_movie_row(self, row: Dict[str, str]) -> Optional[Movie]:
		"""
		Build a Movie from a single raw row, or return None when a required field is unusable.
		"""
		title = self._clean(row.get('Series_Title'))  # display title
		year = self._parse_int(row.get('Released_Year'))  # required
		rating = self._parse_float(row.get('IMDB_Rating'))  # required
		runtime = self._parse_int(self._clean(row.get('Runtime')).replace('min', ''))  # "142 min" -> 142

		# Required fields decide whether the row survives
		if not title or year is None or rating is None or runtime is None:
			return None
		if not (MIN_YEAR <= year <= MAX_YEAR):  # outside the covered era
			return None

		return Movie(
			title=title,
			year=year,
			rating=rating,
			genre=self._primary_genre(row.get('Genre')),  # first listed genre
			director=self._clean(row.get('Director')),
			votes=self._parse_votes(row.get('No_of_Votes')),  # "2,343,110" -> 2343110
			runtime=runtime,
			overview=self._clean(row.get('Overview')),
			meta_score=self._parse_meta_score(row.get('Meta_score')),  # optional
			gross=self._parse_gross(row.get('Gross')),  # optional
			stars=tuple(s for s in (self._clean(row.get(c)) for c in self.STAR_COLUMNS) if s),
		)

	def _clean(self, value: Optional[str]) -> str:
		"""Trim whitespace; handle None safely by returning empty string."""
		if not value:  # None or empty
			return ''
		return value.strip()

	def _parse_int(self, value: Optional[str]) -> Optional[int]:
		"""Parse an integer field, tolerating float notation like '80.0'."""
		number = self._parse_float(value)
		if number is None or not number.is_integer():
			return None
		return int(number)

	def _parse_float(self, value: Optional[str]) -> Optional[float]:
		"""Parse a float field; blank or malformed input gives None."""
		text = self._clean(value)
		if not text:
			return None
		try:
			number = float(text)
		except ValueError:
			return None
		if number != number or number in (float('inf'), float('-inf')):  # NaN / infinities
			return None
		return number

	def _parse_meta_score(self, value: Optional[str]) -> Optional[int]:
		"""Metacritic score in [0, 100]; absent or invalid scores are None, never 0."""
		score = self._parse_int(value)
		if score is None or not (0 <= score <= 100):
			return None
		return score

	def _parse_gross(self, value: Optional[str]) -> Optional[float]:
		"""Strip currency symbols and separators; blank or non-numeric gross is None."""
		text = self._clean(value)
		for ch in self.GROSS_JUNK:
			text = text.replace(ch, '')
		gross = self._parse_float(text)
		if gross is None or gross < 0:
			return None
		return gross

	def _parse_votes(self, value: Optional[str]) -> int:
		"""Vote count with thousands separators removed; unparseable counts become 0."""
		votes = self._parse_int(self._clean(value).replace(',', ''))
		if votes is None or votes < 0:
			return 0
		return votes

	def _primary_genre(self, value: Optional[str]) -> str:
		"""Return the first genre of a comma-separated list, trimmed."""
		return self._clean(value).split(',')[0].strip()
