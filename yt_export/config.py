# yt_export/config.py

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from dotenv import find_dotenv, load_dotenv

from .constants import API_KEY_ENV_VAR, DEFAULT_CHANNEL_ID, DEFAULT_OUTPUT_PATH, DEFAULT_TIMEOUT
from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Settings:
    api_key: str
    channel_id: str = DEFAULT_CHANNEL_ID
    output_path: Path = Path(DEFAULT_OUTPUT_PATH)
    timeout: float = DEFAULT_TIMEOUT


def load_settings(
    channel_id: Optional[str] = None,
    output_path: Optional[Union[str, Path]] = None,
    timeout: Optional[float] = None,
    use_dotenv: bool = True,
) -> Settings:
    """
    Builds the run settings from the environment.

    The API key is read from `YOUTUBE_API_KEY`, after loading a `.env` file
    from the working directory if one exists. Values already present in the
    environment win over the file.

    Raises:
        ConfigurationError: If the API key is missing or blank.
    """
    if use_dotenv:
        load_dotenv(find_dotenv(usecwd=True))

    api_key = os.environ.get(API_KEY_ENV_VAR, "").strip()
    if not api_key:
        logger.error(f"{API_KEY_ENV_VAR} is not set.")
        raise ConfigurationError(f"{API_KEY_ENV_VAR} must be set", variable=API_KEY_ENV_VAR)

    return Settings(
        api_key=api_key,
        channel_id=channel_id or DEFAULT_CHANNEL_ID,
        output_path=Path(output_path or DEFAULT_OUTPUT_PATH),
        timeout=DEFAULT_TIMEOUT if timeout is None else timeout,
    )
