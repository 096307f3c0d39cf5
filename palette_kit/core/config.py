"""Analyzer settings, from defaults, PALETTE_* environment variables or CLI flags.

  PALETTE_MAX_COLORS       number of clusters (must be 5 for a palette)
  PALETTE_MAX_ITERATIONS   Lloyd rounds, always run in full (default 20)
  PALETTE_SEEDING          first | farthest (default first)
  PALETTE_EMPTY_CLUSTER    reseed | black (default reseed)
  PALETTE_MAX_FILE_MB      upload limit in MB (default 5)
  PALETTE_LOG_LEVEL        loguru level for the CLI (default WARNING)
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass

from palette_kit.core.decode import MAX_FILE_BYTES
from palette_kit.core.quantize import (
    DEFAULT_K,
    DEFAULT_MAX_ITERATIONS,
    EMPTY_CLUSTER_MODES,
    SEEDING_MODES,
)
from palette_kit.core.types import ROLES

LOG_LEVELS = ('TRACE', 'DEBUG', 'INFO', 'SUCCESS', 'WARNING', 'ERROR', 'CRITICAL')


@dataclass
class AnalyzerConfig:
    max_colors: int = DEFAULT_K
    max_iterations: int = DEFAULT_MAX_ITERATIONS
    seeding: str = 'first'
    empty_cluster: str = 'reseed'
    max_file_bytes: int = MAX_FILE_BYTES
    log_level: str = 'WARNING'

    def validate(self) -> 'AnalyzerConfig':
        """Raise ValueError on any out-of-range setting. Returns self."""
        if self.max_colors != len(ROLES):
            raise ValueError(f'max_colors must be {len(ROLES)} (one per palette role), got {self.max_colors}')
        if self.max_iterations < 1:
            raise ValueError(f'max_iterations must be >= 1, got {self.max_iterations}')
        if self.seeding not in SEEDING_MODES:
            raise ValueError(f'seeding must be one of {", ".join(SEEDING_MODES)}, got {self.seeding!r}')
        if self.empty_cluster not in EMPTY_CLUSTER_MODES:
            raise ValueError(
                f'empty_cluster must be one of {", ".join(EMPTY_CLUSTER_MODES)}, got {self.empty_cluster!r}'
            )
        if self.max_file_bytes <= 0:
            raise ValueError(f'max_file_bytes must be positive, got {self.max_file_bytes}')
        if self.log_level.upper() not in LOG_LEVELS:
            raise ValueError(f'log_level must be one of {", ".join(LOG_LEVELS)}, got {self.log_level!r}')
        return self

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> 'AnalyzerConfig':
        env = os.environ if environ is None else environ
        cfg = cls()
        try:
            if 'PALETTE_MAX_COLORS' in env:
                cfg.max_colors = int(env['PALETTE_MAX_COLORS'])
            if 'PALETTE_MAX_ITERATIONS' in env:
                cfg.max_iterations = int(env['PALETTE_MAX_ITERATIONS'])
            if 'PALETTE_MAX_FILE_MB' in env:
                cfg.max_file_bytes = int(float(env['PALETTE_MAX_FILE_MB']) * 1024 * 1024)
        except ValueError as exc:
            raise ValueError(f'Invalid numeric PALETTE_* setting: {exc}') from exc
        cfg.seeding = env.get('PALETTE_SEEDING', cfg.seeding).strip().lower()
        cfg.empty_cluster = env.get('PALETTE_EMPTY_CLUSTER', cfg.empty_cluster).strip().lower()
        cfg.log_level = env.get('PALETTE_LOG_LEVEL', cfg.log_level).strip().upper()
        return cfg.validate()
