"""Engine factory with logging setup."""
from __future__ import annotations

import logging
import random
import sys
from pathlib import Path
from typing import Optional, Union

from .config import Config, get_config
from .engine import LocalAnswerEngine

LOGGER = logging.getLogger(__name__)


def configure_logging(config: Optional[Config] = None) -> None:
    config = config or get_config()
    logging.basicConfig(
        level=logging.DEBUG if config.is_dev else config.LOG_LEVEL.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stdout,
    )


def create_engine(
    catalog_path: Optional[Union[str, Path]] = None,
    *,
    config: Optional[Config] = None,
    rng: Optional[random.Random] = None,
) -> LocalAnswerEngine:
    """Build an engine from the catalog at ``catalog_path`` or CATALOG_PATH."""
    config = config or get_config()
    configure_logging(config)
    path = catalog_path or config.CATALOG_PATH
    if not path:
        raise RuntimeError("Missing catalog: pass catalog_path or set CATALOG_PATH")
    LOGGER.info("Starting quickreply engine (env=%s, catalog=%s)", config.APP_ENV, path)
    engine = LocalAnswerEngine.from_file(path, config=config, rng=rng)
    engine.build_index()
    return engine
