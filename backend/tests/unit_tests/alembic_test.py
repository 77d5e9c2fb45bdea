from pathlib import Path
from typing import Any

import pytest
from alembic.config import Config

from pokerleague.utils import alembic as alembic_utils


def test_alembic_config_resolves_scripts_from_backend_dir() -> None:
    alembic_config = alembic_utils.get_alembic_config()

    script_location = Path(alembic_config.get_main_option("script_location") or "")
    assert script_location.resolve() == alembic_utils.ALEMBIC_INI_PATH.parent / "alembic"
    assert (script_location / "env.py").is_file()


def test_head_revision_is_latest_migration() -> None:
    assert alembic_utils.get_head_revision(alembic_utils.get_alembic_config()) == "9c1e4b7a2f60"


def test_run_migrations_upgrades_to_head(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    upgrades: list[tuple[Config, str]] = []

    def fake_upgrade(alembic_config: Config, revision: str, **_: Any) -> None:
        upgrades.append((alembic_config, revision))

    monkeypatch.setattr(alembic_utils.command, "upgrade", fake_upgrade)

    alembic_utils.alembic_run_migrations(tmp_path / "migrations.lock")

    assert [revision for _, revision in upgrades] == ["head"]
    assert (tmp_path / "migrations.lock").exists()
