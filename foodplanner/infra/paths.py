from pathlib import Path
from foodplanner.utilities.config import DATA_DIR as _CONFIGURED_DATA_DIR, BUILTIN_RECIPES_FILE as _BUILTIN

# Centralized paths for data files (single source of truth)
DATA_DIR = Path(_CONFIGURED_DATA_DIR).resolve()
BUILTIN_RECIPES_FILE = Path(_BUILTIN).resolve()

__all__ = ['DATA_DIR', 'BUILTIN_RECIPES_FILE']
