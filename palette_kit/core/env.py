"""`.env` loading for palette-kit settings.

Only PALETTE_* keys are read from the file; anything else in a shared
project .env is ignored.

Precedence (first wins):
  1. Variables already in os.environ.
  2. The file given by --env-file.
  3. The nearest .env found walking up from cwd. The walk ends at the first
     directory holding .git (dir or worktree file) so a parent project's
     .env never leaks in.
"""

import os
from pathlib import Path

ENV_PREFIX = 'PALETTE_'


def _find_dotenv(start: Path) -> Path | None:
    """Nearest .env at or above start, without crossing a .git boundary."""
    for directory in (start.resolve(), *start.resolve().parents):
        candidate = directory / '.env'
        if candidate.is_file():
            return candidate
        if (directory / '.git').exists():
            return None
    return None


def _parse_dotenv(path: Path, prefix: str = ENV_PREFIX) -> dict[str, str]:
    """KEY=value pairs whose key starts with prefix. Quotes and `export ` are stripped."""
    values: dict[str, str] = {}
    for raw in path.read_text(encoding='utf-8').splitlines():
        line = raw.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        if line.startswith('export '):
            line = line[len('export ') :]
        key, _, value = line.partition('=')
        key = key.strip()
        if key.startswith(prefix):
            values[key] = value.strip().strip('"').strip("'")
    return values


def load_env(env_file: str | None = None) -> Path | None:
    """Copy PALETTE_* settings from a .env into os.environ without overriding.

    Returns the file used, or None when there was nothing to load.
    """
    path = Path(env_file) if env_file else _find_dotenv(Path.cwd())
    if path is None or not path.is_file():
        return None

    for key, value in _parse_dotenv(path).items():
        os.environ.setdefault(key, value)
    return path
