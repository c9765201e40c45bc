# (c) Copyright Datacraft, 2026
"""Logging bootstrap from a YAML dictConfig file."""
import logging
import os
from logging.config import dictConfig
from pathlib import Path

import yaml

from fieldcamp.core.config import Settings

logger = logging.getLogger(__name__)


def setup_logging(settings: Settings, level: int = logging.INFO) -> None:
	"""Configure logging from the YAML file named by settings.

	``FIELDCAMP__LOGGING_CFG`` overrides ``settings.log_config``. Without a
	readable file the root logger gets a plain ``basicConfig``.
	"""
	env_path = os.environ.get("FIELDCAMP__LOGGING_CFG")
	config_path = Path(env_path) if env_path else settings.log_config

	if config_path and config_path.exists() and config_path.is_file():
		with open(config_path, "r") as stream:
			config = yaml.safe_load(stream)
		dictConfig(config)
		logger.debug(f"Logging configured from {config_path}")
		return

	logging.basicConfig(
		level=level,
		format="%(asctime)s %(levelname)s %(name)s: %(message)s",
	)
