import fcntl
import tempfile
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from alembic.config import Config
from alembic.script import ScriptDirectory

from alembic import command
from pokerleague.utils.logging import logger

ALEMBIC_INI_PATH = Path(__file__).resolve().parents[2] / "alembic.ini"
MIGRATION_LOCK_PATH = Path(tempfile.gettempdir()) / "pokerleague-alembic.lock"


@contextmanager
def migration_lock(lock_path: Path = MIGRATION_LOCK_PATH) -> Iterator[None]:
    """Serializes migrations between app workers starting at the same time."""
    with lock_path.open("w", encoding="utf-8") as lock_file:
        fcntl.flock(lock_file, fcntl.LOCK_EX)
        try:
            yield
        finally:
            fcntl.flock(lock_file, fcntl.LOCK_UN)


def get_alembic_config() -> Config:
    return Config(str(ALEMBIC_INI_PATH))


def get_head_revision(alembic_config: Config) -> str | None:
    return ScriptDirectory.from_config(alembic_config).get_current_head()


def alembic_run_migrations(lock_path: Path = MIGRATION_LOCK_PATH) -> None:
    alembic_config = get_alembic_config()
    with migration_lock(lock_path):
        logger.info(f"Running migrations up to revision {get_head_revision(alembic_config)}")
        command.upgrade(alembic_config, "head")
