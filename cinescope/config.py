"""
Runtime settings and logging setup.
Values come from environment variables with local-development defaults.
"""

import os  # environment lookups
import sys  # stderr sink for loguru
from dataclasses import dataclass  # immutable settings container

from loguru import logger  # console logger


DEFAULT_DATA_PATH = 'data/imdb_top_1000.csv'  # source CSV relative to the project root
DEFAULT_API_URL = 'http://localhost:8000'  # where the FastAPI server runs locally
DEFAULT_LOG_LEVEL = 'INFO'


@dataclass(frozen=True)
class Settings:
	"""Resolved configuration for the API, UI and scripts."""
	data_path: str = DEFAULT_DATA_PATH
	api_url: str = DEFAULT_API_URL
	log_level: str = DEFAULT_LOG_LEVEL

	@classmethod
	def from_env(cls) -> 'Settings':
		"""Build settings from CINESCOPE_* environment variables."""
		return cls(
			data_path=os.environ.get('CINESCOPE_DATA_PATH', DEFAULT_DATA_PATH),
			api_url=os.environ.get('CINESCOPE_API_URL', DEFAULT_API_URL).rstrip('/'),
			log_level=os.environ.get('CINESCOPE_LOG_LEVEL', DEFAULT_LOG_LEVEL).upper(),
		)


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
	"""Replace loguru's default sink with a stderr sink at the given level."""
	logger.remove()  # drop the default handler so levels do not stack
	logger.add(sys.stderr, level=level)
	logger.debug(f"[Config] Logging configured at level {level}")
