from databases import Database

from pokerleague.config import config

database = Database(str(config.pg_dsn))
