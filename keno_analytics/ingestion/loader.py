"""Read venue snapshots and payout tables from the data directory.

File layout::

    <data_dir>/<venue>.json          current day, {"<game>": ["n1", ...]}
    <data_dir>/<venue>allData.json   history, {"<date>": {"<game>": [...]}}
    <data_dir>/payoutData.json       payout tables
"""

import json
from pathlib import Path
from typing import Any

from loguru import logger

from keno_analytics.exceptions import IngestionError


def current_path(data_dir: Path, venue: str) -> Path:
    return data_dir / f"{venue}.json"


def all_data_path(data_dir: Path, venue: str) -> Path:
    return data_dir / f"{venue}allData.json"


def read_json(path: Path) -> dict[str, Any]:
    """Load a JSON object, raising IngestionError on any read/parse problem."""
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise IngestionError(str(path), "file not found") from e
    except (OSError, UnicodeDecodeError) as e:
        raise IngestionError(str(path), f"could not read file: {e}") from e
    except json.JSONDecodeError as e:
        raise IngestionError(str(path), f"invalid JSON: {e}") from e

    if not isinstance(data, dict):
        raise IngestionError(str(path), f"expected a JSON object, got {type(data).__name__}")
    logger.debug("Loaded {}", path)
    return data
