"""
Print the narrative of every scene for the configured dataset.

This script:
1) Loads movies from the CSV (CINESCOPE_DATA_PATH, default data/imdb_top_1000.csv)
2) Builds the dataset and a scene controller
3) Walks through the three scenes and every decade
4) Logs each insight and the Scene 3 membership at a few rating thresholds

Usage:
	python -m scripts.scene_report [path/to/movies.csv]
"""

import sys  # optional path argument

from loguru import logger  # console logging

from cinescope.config import Settings, configure_logging  # env-based settings
from cinescope.controller import SceneController  # scene state machine
from cinescope.data_loader import DataLoader  # data ingestion
from cinescope.dataset import Dataset  # immutable movie collection
from cinescope.errors import LoadFailure  # fatal load error
from cinescope.models import CRITICS_SCENE, GENRE_SCENE  # scene ids
from cinescope.renderers import SnapshotRenderer  # in-memory render collaborator


def main(argv=None) -> int:
	argv = sys.argv[1:] if argv is None else argv
	settings = Settings.from_env()
	configure_logging(settings.log_level)
	data_path = argv[0] if argv else settings.data_path

	# Headline banner for visibility in console
	logger.info("=" * 60)
	logger.info("CineScope Scene Report")
	logger.info("=" * 60)

	# 1) Load data
	try:
		movies, rejected = DataLoader().load_movies_from_csv(data_path)
	except LoadFailure as e:
		logger.error(f"[Report] {e}")
		return 1
	dataset = Dataset.build(movies)
	logger.info(f"[OK] Loaded {len(dataset)} movies ({rejected} rejected), years {dataset.year_extent}")

	renderer = SnapshotRenderer()
	controller = SceneController(dataset, renderer)
	controller.start()

	# 2) Scene 1, one insight per decade
	first, last = dataset.year_extent
	for decade in range(first // 10 * 10, last + 1, 10):
		controller.set_decade(decade)
		logger.info(f"[Scene 1] {renderer.insight.title}: {renderer.insight.body}")

	# 3) Scene 2, overall distribution
	controller.switch_scene(GENRE_SCENE)
	logger.info(f"[Scene 2] {renderer.insight.title}: {renderer.insight.body}")

	# 4) Scene 3 at a few thresholds
	controller.switch_scene(CRITICS_SCENE)
	for threshold in (7.5, 8.0, 8.5):
		frame = controller.set_rating(threshold)
		if frame is None:  # empty result, the previous frame is still on screen
			logger.info(f"[Scene 3] rating>={threshold}: no movies")
			continue
		logger.info(f"[Scene 3] rating>={threshold}: {len(frame.marks)} movies | {renderer.insight.body}")

	logger.info("=" * 60)
	return 0


if __name__ == '__main__':
	sys.exit(main())  # invoke report
