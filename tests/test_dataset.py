"""
Tests for Dataset construction and immutability.
"""

import dataclasses

import pytest

from cinescope.dataset import Dataset

from conftest import movie


def test_build_computes_domains(sample_dataset):
	assert len(sample_dataset) == 3
	assert sample_dataset.year_extent == (1972, 2008)
	assert sample_dataset.votes_extent == (1_800_000, 2_500_000)
	assert sample_dataset.genres == ('Drama', 'Crime', 'Action')


def test_genres_keep_first_seen_order():
	dataset = Dataset.build([
		movie(genre='Western'), movie(genre='Drama'), movie(genre='Western'), movie(genre='Comedy'),
	])
	assert dataset.genres == ('Western', 'Drama', 'Comedy')


def test_build_detaches_from_source_list():
	movies = [movie(title='A'), movie(title='B')]
	dataset = Dataset.build(movies)
	movies.append(movie(title='C'))
	assert [m.title for m in dataset] == ['A', 'B']


def test_dataset_is_frozen(sample_dataset):
	with pytest.raises(dataclasses.FrozenInstanceError):
		sample_dataset.year_extent = (1900, 2000)
	with pytest.raises(dataclasses.FrozenInstanceError):
		sample_dataset.movies[0].rating = 1.0


def test_empty_dataset_is_rejected():
	with pytest.raises(ValueError):
		Dataset.build([])
