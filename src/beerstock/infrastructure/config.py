"""Process settings read from the environment (and an optional ``.env``)."""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

# Project root when installed in editable mode.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


class Settings:

    def __init__(self) -> None:
        self.data_dir: Path = Path(
            os.getenv("BEERSTOCK_DATA_DIR", str(_DEFAULT_DATA_DIR))
        )
        self.log_level: str = os.getenv("BEERSTOCK_LOG_LEVEL", "WARNING").upper()

    @property
    def beers_file(self) -> Path:
        return self.data_dir / "beers.json"


def get_settings() -> Settings:
    return Settings()
