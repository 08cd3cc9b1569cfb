"""
Smoke tests for the wire schema and the Altair chart built from it.
"""

from cinescope.charts import build_scene_chart, frame_records
from cinescope.controller import SceneController
from cinescope.models import CRITICS_SCENE
from cinescope.renderers import SnapshotRenderer
from cinescope.scenes import format_gross, tooltip_text
from cinescope.schemas import build_snapshot, frame_out


def test_format_gross():
	assert format_gross(50_000_000) == '$50M'
	assert format_gross(936_662_225) == '$937M'
	assert format_gross(1_200_000_000) == '$1.2B'


def test_tooltip_omits_missing_fields(sample_dataset):
	godfather = sample_dataset.movies[1]
	text = tooltip_text(godfather)
	assert text.startswith('The Godfather (1972)')
	assert 'Gross' not in text
	assert 'Metacritic: 100/100' in text


def test_snapshot_and_chart(sample_dataset):
	renderer = SnapshotRenderer()
	controller = SceneController(sample_dataset, renderer)
	controller.start()
	controller.switch_scene(CRITICS_SCENE)

	snapshot = build_snapshot(
		controller.state, renderer.frame, renderer.insight,
		genres=sample_dataset.genres, year_extent=sample_dataset.year_extent,
	)
	assert snapshot.frame.scene == CRITICS_SCENE
	assert snapshot.frame.annotation.title == 'Sweet Spot'

	frame = frame_out(renderer.frame)
	records = frame_records(frame)
	assert records[0]['title'] == 'The Dark Knight'
	assert records[0]['x'] == 1_000_000_000

	chart = build_scene_chart(frame).to_dict()
	assert chart['title'] == 'Critics vs Box Office'
	assert len(chart['layer']) == 3
