"""Configuration management for the Food Planner application."""
import os
from typing import Final
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file if it exists
env_path = Path(__file__).parent.parent / '.env'
if env_path.exists():
    load_dotenv(env_path)

# Application Settings
APP_HOST: Final[str] = os.getenv('APP_HOST', '0.0.0.0')
APP_PORT: Final[int] = int(os.getenv('APP_PORT', '8000'))
DEBUG: Final[bool] = os.getenv('DEBUG', 'False').lower() == 'true'
LOG_LEVEL: Final[str] = os.getenv('LOG_LEVEL', 'DEBUG' if DEBUG else 'INFO').upper()

# Planning
DAY_COUNT: Final[int] = int(os.getenv('DAY_COUNT', '7'))
DEFAULT_SERVINGS: Final[int] = int(os.getenv('DEFAULT_SERVINGS', '1'))
MAX_SERVINGS: Final[int] = int(os.getenv('MAX_SERVINGS', '20'))

# File Paths
BASE_DIR: Final[Path] = Path(__file__).parent.parent
DATA_DIR: Final[Path] = Path(os.getenv('FOODPLANNER_DATA_DIR', str(BASE_DIR / 'data')))
BUILTIN_RECIPES_FILE: Final[Path] = BASE_DIR / 'data' / 'builtin_recipes.json'
