"""
Tests for the scene report script.
"""

import pytest
from loguru import logger

from scripts import scene_report

from conftest import make_row, write_csv


@pytest.fixture
def log_lines(monkeypatch):
	monkeypatch.setattr(scene_report, 'configure_logging', lambda level: None)
	lines = []
	handler_id = logger.add(lambda message: lines.append(message.record['message']), level='INFO')
	yield lines
	logger.remove(handler_id)


def test_report_logs_empty_thresholds_without_stale_counts(tmp_path, log_lines):
	path = write_csv(tmp_path / 'movies.csv', [
		make_row(Series_Title='Only Hit', Released_Year='2005', IMDB_Rating='7.8', Meta_score='70', Gross='100,000,000'),
	])

	assert scene_report.main([str(path)]) == 0

	scene3 = [line for line in log_lines if line.startswith('[Scene 3]')]
	assert scene3[0].startswith('[Scene 3] rating>=7.5: 1 movies |')
	assert scene3[1] == '[Scene 3] rating>=8.0: no movies'
	assert scene3[2] == '[Scene 3] rating>=8.5: no movies'


def test_report_fails_on_missing_file(tmp_path, log_lines):
	assert scene_report.main([str(tmp_path / 'missing.csv')]) == 1
