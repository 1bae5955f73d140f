"""
Township Resolver — Configuration
==================================
Constants and credential loading.

The geocoding API key is read from the process environment after loading
a ``.env`` file with python-dotenv.  Variables already present in the
environment are never overridden by the file.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

from township_resolver.common.exceptions import MissingCredentialError

logger = logging.getLogger("township_resolver.config")

GOOGLE_GEOCODE_URL = "https://maps.googleapis.com/maps/api/geocode/json"
DEFAULT_TIMEOUT = 10.0
DEFAULT_OUTPUT_PATH = Path("output.csv")

#: Environment variables consulted for the API key, in priority order.
API_KEY_ENV_VARS: tuple[str, ...] = ("API_KEY", "GOOGLE_MAPS_API_KEY")


def load_api_key(env_file: Path | None = None) -> str:
    """Return the geocoding API key from the environment.

    Args:
        env_file: Explicit dotenv file to load.  When ``None`` the nearest
                  ``.env`` at or above the working directory is used, if any.

    Raises:
        MissingCredentialError: If none of :data:`API_KEY_ENV_VARS` is set
            to a non-blank value.
    """
    dotenv_path = env_file if env_file is not None else find_dotenv(usecwd=True)
    if dotenv_path and load_dotenv(dotenv_path):
        logger.debug("Loaded environment from %s", dotenv_path)

    for name in API_KEY_ENV_VARS:
        value = os.environ.get(name, "").strip()
        if value:
            logger.debug("Using API key from %s", name)
            return value

    raise MissingCredentialError(API_KEY_ENV_VARS)
