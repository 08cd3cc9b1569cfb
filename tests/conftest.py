"""
Shared fixtures: the three-film sample from the docs plus a CSV writer.
"""

import csv
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
	sys.path.insert(0, str(ROOT))

from cinescope.data_loader import DataLoader
from cinescope.dataset import Dataset
from cinescope.models import Movie


COLUMNS = [
	'Series_Title', 'Released_Year', 'IMDB_Rating', 'Meta_score', 'Genre', 'Director',
	'No_of_Votes', 'Gross', 'Runtime', 'Overview', 'Star1', 'Star2', 'Star3', 'Star4',
]


def make_row(**overrides):
	"""A valid raw CSV row; keyword arguments replace individual columns."""
	row = {
		'Series_Title': 'Some Film',
		'Released_Year': '2000',
		'IMDB_Rating': '8.0',
		'Meta_score': '70',
		'Genre': 'Drama',
		'Director': 'Some Director',
		'No_of_Votes': '100,000',
		'Gross': '10,000,000',
		'Runtime': '120 min',
		'Overview': 'A film.',
		'Star1': 'Actor One',
		'Star2': 'Actor Two',
		'Star3': '',
		'Star4': '',
	}
	row.update(overrides)
	return row


SAMPLE_ROWS = [
	make_row(
		Series_Title='The Shawshank Redemption', Released_Year='1994', IMDB_Rating='9.3', Meta_score='80',
		Genre='Drama', Director='Frank Darabont', No_of_Votes='2,000,000', Gross='28,000,000', Runtime='142 min',
	),
	make_row(
		Series_Title='The Godfather', Released_Year='1972', IMDB_Rating='9.2', Meta_score='100',
		Genre='Crime, Drama', Director='Francis Ford Coppola', No_of_Votes='1,800,000', Gross='', Runtime='175 min',
	),
	make_row(
		Series_Title='The Dark Knight', Released_Year='2008', IMDB_Rating='9.0', Meta_score='84',
		Genre='Action, Crime, Drama', Director='Christopher Nolan', No_of_Votes='2,500,000',
		Gross='1,000,000,000', Runtime='152 min',
	),
]


def write_csv(path: Path, rows, columns=COLUMNS) -> Path:
	with open(path, 'w', encoding='utf-8', newline='') as f:
		writer = csv.DictWriter(f, fieldnames=columns)
		writer.writeheader()
		for row in rows:
			writer.writerow({c: row.get(c, '') for c in columns})
	return path


def movie(title='Film', year=2000, rating=8.0, genre='Drama', votes=1000, gross=None, meta_score=None):
	"""Build a Movie directly, bypassing the loader."""
	return Movie(
		title=title,
		year=year,
		rating=rating,
		genre=genre,
		director='Director',
		votes=votes,
		runtime=100,
		meta_score=meta_score,
		gross=gross,
	)


@pytest.fixture
def sample_movies():
	movies, rejected = DataLoader().normalize(SAMPLE_ROWS)
	assert rejected == 0
	return movies


@pytest.fixture
def sample_dataset(sample_movies):
	return Dataset.build(sample_movies)


@pytest.fixture
def sample_csv(tmp_path):
	return write_csv(tmp_path / 'movies.csv', SAMPLE_ROWS)
