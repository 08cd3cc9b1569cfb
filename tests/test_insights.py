"""
Tests for the statistics helpers and narrative templates.
"""

import pytest

from cinescope.dataset import Dataset
from cinescope.insights import (
	critics_insight,
	extent,
	genre_insight,
	mean,
	most_frequent,
	pearson_correlation,
	rollup_count,
	timeline_insight,
)
from cinescope.scene_filters import filter_critics_vs_box_office

from conftest import movie


def test_mean_and_extent():
	assert mean([1, 2, 3, 4]) == 2.5
	assert extent([1994, 1972, 2008]) == (1972, 2008)


def test_mean_and_extent_refuse_empty_input():
	with pytest.raises(ValueError):
		mean([])
	with pytest.raises(ValueError):
		extent([])


def test_rollup_count_and_first_seen_tie_break(sample_dataset):
	counts = rollup_count(sample_dataset.movies, lambda m: m.genre)
	assert counts == {'Drama': 1, 'Crime': 1, 'Action': 1}
	assert most_frequent(counts) == ('Drama', 1)


def test_most_frequent_prefers_higher_count_then_first_seen():
	counts = rollup_count(['b', 'a', 'a', 'b', 'c', 'c', 'c'], lambda x: x)
	assert most_frequent(counts) == ('c', 3)
	counts = rollup_count(['b', 'a', 'a', 'b'], lambda x: x)
	assert most_frequent(counts) == ('b', 2)


def test_pearson_perfect_correlations():
	assert pearson_correlation([1, 2, 3], [2, 4, 6]) == pytest.approx(1.0)
	assert pearson_correlation([1, 2, 3], [6, 4, 2]) == pytest.approx(-1.0)


def test_pearson_is_symmetric():
	xs = [60e6, 150e6, 1_000e6, 320e6, 75e6]
	ys = [70, 84, 90, 66, 58]
	assert pearson_correlation(xs, ys) == pearson_correlation(ys, xs)


def test_pearson_zero_variance_returns_zero():
	assert pearson_correlation([5, 5, 5], [1, 2, 3]) == 0
	assert pearson_correlation([0.1, 0.1, 0.1], [3, 9, 1]) == 0
	assert pearson_correlation([1, 2, 3], [7, 7, 7]) == 0
	assert pearson_correlation([1e9], [80]) == 0


def test_pearson_length_mismatch():
	with pytest.raises(ValueError):
		pearson_correlation([1, 2], [1])


def test_timeline_insight_thresholds():
	dataset = Dataset.build(
		[movie(year=1990 + i % 10, rating=8.0) for i in range(81)]
		+ [movie(year=1980 + i % 10, rating=8.4) for i in range(51)]
		+ [movie(year=1970, rating=9.0)]
	)
	assert 'was particularly prolific' in timeline_insight(dataset, 1990).body
	assert 'had solid representation' in timeline_insight(dataset, 1980).body

	insight = timeline_insight(dataset, 1970)
	assert insight.title == '1970s Cinema'
	assert insight.body == (
		"The 1970s produced 1 top-rated films with an average IMDB rating of 9.0. "
		"This decade had fewer but quality films in cinema history."
	)


def test_timeline_insight_for_empty_decade(sample_dataset):
	insight = timeline_insight(sample_dataset, 1930)
	assert insight.title == '1930s Cinema'
	assert 'No films' in insight.body


def test_genre_insight_all_names_leading_genre(sample_dataset):
	insight = genre_insight(sample_dataset, 'all')
	assert insight.title == 'Genre Distribution'
	assert insight.body.startswith('Among the top 3 films, Drama leads with 1 movies')


def test_genre_insight_for_specific_genre():
	dataset = Dataset.build([
		movie(genre='Western', year=1966, rating=8.8),
		movie(genre='Western', year=1968, rating=8.4),
		movie(genre='Drama'),
	])
	insight = genre_insight(dataset, 'Western')
	assert insight.title == 'Western Movies'
	assert insight.body == (
		"Western films span from 1966 to 1968 with an average rating of 8.6. "
		"This genre has 2 representatives in the top 3."
	)


def test_genre_insight_for_unknown_genre(sample_dataset):
	assert 'No Horror films' in genre_insight(sample_dataset, 'Horror').body


def test_critics_insight(sample_dataset):
	view = filter_critics_vs_box_office(sample_dataset, 8.0)
	insight = critics_insight(view, 8.0)
	assert insight.title == 'Critics vs Commercial Success'
	# Single movie: zero variance, so r falls back to 0
	assert insight.body == (
		"Among movies rated 8+, there are 1 blockbusters (>$200M). "
		"The correlation between box office and critical acclaim is flat (r=0.00), indicating weak correlation."
	)


def test_critics_insight_positive_correlation():
	dataset = Dataset.build([
		movie(gross=60e6, meta_score=60, rating=8.1),
		movie(gross=250e6, meta_score=75, rating=8.2),
		movie(gross=900e6, meta_score=95, rating=8.3),
	])
	body = critics_insight(filter_critics_vs_box_office(dataset, 8.0), 8.0).body
	assert 'there are 2 blockbusters' in body
	assert 'is positive' in body
	assert 'suggesting a meaningful relationship' in body


def test_critics_insight_for_empty_view(sample_dataset):
	view = filter_critics_vs_box_office(sample_dataset, 9.5)
	assert 'No major releases rated 9.5+' in critics_insight(view, 9.5).body
