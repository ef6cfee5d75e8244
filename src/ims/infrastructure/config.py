"""Runtime settings read from the environment.

``IMS_DATA_FILE`` points at the JSON product file; ``IMS_LOG_LEVEL``
sets the log level. CLI options override both.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
DEFAULT_DATA_FILE = Path(__file__).resolve().parents[3] / "data" / "products.json"
DEFAULT_LOG_LEVEL = "WARNING"

DATA_FILE_ENV = "IMS_DATA_FILE"
LOG_LEVEL_ENV = "IMS_LOG_LEVEL"


@dataclass(frozen=True)
class Settings:
    data_file: Path = DEFAULT_DATA_FILE
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls) -> Settings:
        data_file = os.getenv(DATA_FILE_ENV)
        return cls(
            data_file=Path(data_file).expanduser() if data_file else DEFAULT_DATA_FILE,
            log_level=os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper(),
        )
