"""JSON file persistence for planner records (custom recipes, removed ids, saved plans).

One file per record kind under the data directory. Reads never raise: a
missing or malformed file is "absent". Writes are atomic and report success
as a boolean so callers can treat them as best effort.
"""
import json
import logging
import os
import shutil
import tempfile
from pathlib import Path
from typing import Any, Optional, Union

from foodplanner.utilities.constants import STORE_KINDS

logger = logging.getLogger(__name__)


class JsonStore:
    def __init__(self, data_dir: Union[str, Path]):
        self.data_dir = Path(data_dir)

    def path_for(self, kind: str) -> Path:
        if kind not in STORE_KINDS:
            raise ValueError(f"Unknown record kind: {kind}")
        return self.data_dir / f"{kind}.json"

    def load(self, kind: str) -> Optional[Any]:
        """Read a record; None when the file is missing or not valid JSON."""
        path = self.path_for(kind)
        try:
            with open(path, 'r', encoding='utf-8') as f:
                return json.load(f)
        except FileNotFoundError:
            logger.debug(f"No {kind} file at {path}")
            return None
        except json.JSONDecodeError as e:
            logger.error(f"Invalid JSON in {path}: {e}")
            return None
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Error reading {path}: {e}")
            return None

    def save(self, kind: str, value: Any) -> bool:
        """Atomically replace a record; False when the write did not happen."""
        path = self.path_for(kind)
        tmp_path = None
        try:
            os.makedirs(self.data_dir, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(dir=str(self.data_dir), prefix=f".{kind}_", suffix=".json")
            with os.fdopen(fd, "w", encoding="utf-8") as tmp:
                json.dump(value, tmp, indent=2, ensure_ascii=False)
            shutil.move(tmp_path, path)
            tmp_path = None
            return True
        except (OSError, TypeError, ValueError) as e:
            logger.error(f"Failed to save {kind} to {path}: {e}")
            return False
        finally:
            if tmp_path and os.path.exists(tmp_path):
                try:
                    os.remove(tmp_path)
                except OSError:
                    pass
