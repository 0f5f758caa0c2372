from pathlib import Path

from domain.models.cache import cache
from common.read_config import get_database_options
from . import util as db_util


def create_table():
    database = get_database_options().sync.get("database")
    if database:
        Path(database).parent.mkdir(parents=True, exist_ok=True)
    db_util.create_db_and_tables()
