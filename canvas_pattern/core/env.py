"""Settings for canvas-pattern, read from the process environment.

A .env file only fills in keys the environment lacks. It is either the
--env-file path or the nearest .env above cwd inside the current git
checkout.

Recognised keys:
  CANVAS_PATTERN_LOG_LEVEL  logging level name (default WARNING)
  CANVAS_PATTERN_STRICT     1/true/yes/on to validate surface layouts
"""

import os
from dataclasses import dataclass
from pathlib import Path

LOG_LEVEL_KEY = 'CANVAS_PATTERN_LOG_LEVEL'
STRICT_KEY = 'CANVAS_PATTERN_STRICT'

_TRUTHY = {'1', 'true', 'yes', 'on'}


@dataclass
class Settings:
    log_level: str = 'WARNING'
    strict: bool = False
    env_path: Path | None = None  # .env file that was loaded, if any


def _find_dotenv(start: Path) -> Path | None:
    """Nearest .env in start or its parents; never looks above a .git (dir or worktree file)."""
    here = start.resolve()
    for directory in (here, *here.parents):
        if (directory / '.env').is_file():
            return directory / '.env'
        if (directory / '.git').exists():
            break
    return None


def _parse_dotenv(path: Path) -> dict[str, str]:
    """KEY=value pairs from a .env file. Comments, blanks and lines without '=' are skipped."""
    pairs = (
        line.split('=', 1)
        for line in map(str.strip, path.read_text(encoding='utf-8').splitlines())
        if line and not line.startswith('#') and '=' in line
    )
    return {key.strip(): value.strip().strip('"\'') for key, value in pairs if key.strip()}


def load_env(env_file: str | None = None) -> Path | None:
    """Copy .env values into os.environ without overriding what is already set.

    An explicit env_file that does not exist loads nothing. Returns the
    file used, or None.
    """
    path = Path(env_file) if env_file else _find_dotenv(Path.cwd())
    if path is None or not path.is_file():
        return None

    for key, value in _parse_dotenv(path).items():
        os.environ.setdefault(key, value)
    return path


def load_settings(env_file: str | None = None) -> Settings:
    """Load .env (if any) and read canvas-pattern settings from the environment."""
    env_path = load_env(env_file)
    return Settings(
        log_level=os.environ.get(LOG_LEVEL_KEY, 'WARNING').upper(),
        strict=os.environ.get(STRICT_KEY, '').strip().lower() in _TRUTHY,
        env_path=env_path,
    )
