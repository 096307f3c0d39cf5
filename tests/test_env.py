"""Tests for palette_kit.core.env — .env loading and walk-up logic."""

import os
from pathlib import Path

import pytest
from palette_kit.core.env import _find_dotenv, _parse_dotenv, load_env


class TestParseDotenv:
    def test_simple_key_value(self, tmp_path: Path) -> None:
        f = tmp_path / '.env'
        f.write_text('PALETTE_SEEDING=farthest\n')
        assert _parse_dotenv(f) == {'PALETTE_SEEDING': 'farthest'}

    def test_quoted_values(self, tmp_path: Path) -> None:
        f = tmp_path / '.env'
        f.write_text('PALETTE_A="hello world"\nPALETTE_B=\'single\'\n')
        assert _parse_dotenv(f) == {'PALETTE_A': 'hello world', 'PALETTE_B': 'single'}

    def test_other_keys_ignored(self, tmp_path: Path) -> None:
        f = tmp_path / '.env'
        f.write_text('DATABASE_URL=postgres://x\nPALETTE_LOG_LEVEL=DEBUG\n')
        assert _parse_dotenv(f) == {'PALETTE_LOG_LEVEL': 'DEBUG'}

    def test_export_prefix(self, tmp_path: Path) -> None:
        f = tmp_path / '.env'
        f.write_text('export PALETTE_MAX_ITERATIONS=10\n')
        assert _parse_dotenv(f) == {'PALETTE_MAX_ITERATIONS': '10'}

    def test_comments_blank_and_bare_lines_ignored(self, tmp_path: Path) -> None:
        f = tmp_path / '.env'
        f.write_text('# comment\n\nPALETTE_NOEQUALS\nPALETTE_X=1\n')
        assert _parse_dotenv(f) == {'PALETTE_X': '1'}


class TestFindDotenv:
    def test_finds_in_cwd(self, tmp_path: Path) -> None:
        dotenv = tmp_path / '.env'
        dotenv.write_text('PALETTE_X=1\n')
        assert _find_dotenv(tmp_path) == dotenv

    def test_finds_in_parent(self, tmp_path: Path) -> None:
        subdir = tmp_path / 'sub'
        subdir.mkdir()
        dotenv = tmp_path / '.env'
        dotenv.write_text('PALETTE_X=1\n')
        assert _find_dotenv(subdir) == dotenv

    def test_stops_at_git_dir(self, tmp_path: Path) -> None:
        repo = tmp_path / 'repo'
        (repo / '.git').mkdir(parents=True)
        (tmp_path / '.env').write_text('PALETTE_X=1\n')
        subdir = repo / 'src'
        subdir.mkdir()
        assert _find_dotenv(subdir) is None

    def test_stops_at_git_file(self, tmp_path: Path) -> None:
        repo = tmp_path / 'repo'
        repo.mkdir()
        (repo / '.git').write_text('gitdir: ../somewhere\n')
        (tmp_path / '.env').write_text('PALETTE_X=1\n')
        assert _find_dotenv(repo) is None

    def test_env_beside_git_is_found(self, tmp_path: Path) -> None:
        (tmp_path / '.git').mkdir()
        dotenv = tmp_path / '.env'
        dotenv.write_text('PALETTE_X=1\n')
        assert _find_dotenv(tmp_path) == dotenv


class TestLoadEnv:
    def test_sets_missing_vars(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / '.env').write_text('PALETTE_SEEDING=farthest\n')
        monkeypatch.chdir(tmp_path)
        load_env()
        assert os.environ.get('PALETTE_SEEDING') == 'farthest'

    def test_does_not_overwrite_existing(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv('PALETTE_SEEDING', 'first')
        (tmp_path / '.env').write_text('PALETTE_SEEDING=farthest\n')
        monkeypatch.chdir(tmp_path)
        load_env()
        assert os.environ.get('PALETTE_SEEDING') == 'first'

    def test_explicit_env_file(self, tmp_path: Path) -> None:
        custom = tmp_path / 'custom.env'
        custom.write_text('PALETTE_LOG_LEVEL=INFO\n')
        assert load_env(env_file=str(custom)) == custom
        assert os.environ.get('PALETTE_LOG_LEVEL') == 'INFO'

    def test_missing_explicit_file(self, tmp_path: Path) -> None:
        assert load_env(env_file=str(tmp_path / 'nope.env')) is None

    def test_returns_none_when_no_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / '.git').mkdir()
        monkeypatch.chdir(tmp_path)
        assert load_env() is None
