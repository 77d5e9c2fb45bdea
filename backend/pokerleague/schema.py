from sqlalchemy import Column, ForeignKey, Integer, String, Table, UniqueConstraint, func
from sqlalchemy.orm import declarative_base  # type: ignore[attr-defined]
from sqlalchemy.sql.sqltypes import BigInteger, Boolean, Date, DateTime, Enum, Text

Base = declarative_base()
metadata = Base.metadata
DateTimeTZ = DateTime(timezone=True)

leagues = Table(
    "leagues",
    metadata,
    Column("id", BigInteger, primary_key=True, index=True, autoincrement=True),
    Column("name", String, nullable=False, index=True),
    Column("user_id", String, nullable=False, index=True),
    Column("description", Text, nullable=True),
    Column("is_active", Boolean, nullable=False, server_default="t", index=True),
    Column("image_url", String, nullable=True),
    Column("created", DateTimeTZ, nullable=False, server_default=func.now()),
    Column("updated", DateTimeTZ, nullable=False, server_default=func.now()),
)

seasons = Table(
    "seasons",
    metadata,
    Column("id", BigInteger, primary_key=True, index=True, autoincrement=True),
    Column("league_id", BigInteger, ForeignKey("leagues.id", ondelete="CASCADE"), index=True, nullable=False),
    Column("name", String, nullable=False, index=True),
    Column("start_date", Date, nullable=False),
    Column("end_date", Date, nullable=True),
    Column("is_active", Boolean, nullable=False, server_default="t", index=True),
    Column("description", Text, nullable=True),
    Column("finale_max_players", Integer, nullable=False, server_default="30"),
    Column("created", DateTimeTZ, nullable=False, server_default=func.now()),
    Column("updated", DateTimeTZ, nullable=False, server_default=func.now()),
)

series = Table(
    "series",
    metadata,
    Column("id", BigInteger, primary_key=True, index=True, autoincrement=True),
    Column("season_id", BigInteger, ForeignKey("seasons.id", ondelete="CASCADE"), index=True, nullable=False),
    Column("league_id", BigInteger, ForeignKey("leagues.id", ondelete="CASCADE"), index=True, nullable=False),
    Column("name", String, nullable=False, index=True),
    Column("start_date", Date, nullable=False),
    Column("end_date", Date, nullable=True),
    Column("is_active", Boolean, nullable=False, server_default="t", index=True),
    Column("description", Text, nullable=True),
    Column(
        "points_system",
        Enum(
            "WEIGHTED",
            "FIXED",
            "PERCENTAGE",
            "WINNER_TAKES_ALL",
            name="points_system",
        ),
        nullable=False,
        server_default="WEIGHTED",
    ),
    Column("max_tournaments", Integer, nullable=True),
    Column("created", DateTimeTZ, nullable=False, server_default=func.now()),
    Column("updated", DateTimeTZ, nullable=False, server_default=func.now()),
)

tournaments = Table(
    "tournaments",
    metadata,
    Column("id", BigInteger, primary_key=True, index=True, autoincrement=True),
    Column("series_id", BigInteger, ForeignKey("series.id", ondelete="CASCADE"), index=True, nullable=False),
    Column("season_id", BigInteger, ForeignKey("seasons.id", ondelete="CASCADE"), index=True, nullable=False),
    Column("league_id", BigInteger, ForeignKey("leagues.id", ondelete="CASCADE"), index=True, nullable=False),
    Column("name", String, nullable=False, index=True),
    Column("date", Date, nullable=False, index=True),
    Column("start_time", String, nullable=True),
    Column("location", String, nullable=True),
    Column("poker_variant", String, nullable=False, server_default="Texas Hold'em"),
    Column("buy_in", Integer, nullable=False, server_default="0"),
    Column("rebuy_allowed", Boolean, nullable=False, server_default="f"),
    Column("rebuy_amount", Integer, nullable=False, server_default="0"),
    Column("starting_chips", Integer, nullable=True),
    Column(
        "status",
        Enum(
            "PLANNED",
            "IN_PROGRESS",
            "FINISHED",
            name="tournament_status",
        ),
        nullable=False,
        server_default="PLANNED",
        index=True,
    ),
    Column("max_players", Integer, nullable=True),
    Column("total_players", Integer, nullable=True),
    Column("notes", Text, nullable=True),
    Column("is_finalized", Boolean, nullable=False, server_default="f"),
    Column("created", DateTimeTZ, nullable=False, server_default=func.now()),
    Column("updated", DateTimeTZ, nullable=False, server_default=func.now()),
)

players = Table(
    "players",
    metadata,
    Column("id", BigInteger, primary_key=True, index=True, autoincrement=True),
    Column("name", String, nullable=False, index=True),
    Column("user_id", String, nullable=False, index=True),
    Column("email", String, nullable=True),
    Column("phone", String, nullable=True),
    Column("join_date", Date, nullable=True),
    Column("is_active", Boolean, nullable=False, server_default="t", index=True),
    Column("notes", Text, nullable=True),
    Column("created", DateTimeTZ, nullable=False, server_default=func.now()),
    Column("updated", DateTimeTZ, nullable=False, server_default=func.now()),
)

tournament_players = Table(
    "tournament_players",
    metadata,
    Column("id", BigInteger, primary_key=True, index=True, autoincrement=True),
    Column("tournament_id", BigInteger, ForeignKey("tournaments.id", ondelete="CASCADE"), index=True, nullable=False),
    Column("player_id", BigInteger, ForeignKey("players.id", ondelete="CASCADE"), index=True, nullable=False),
    Column("final_position", Integer, nullable=True),
    Column("points", Integer, nullable=False, server_default="0"),
    Column("consolation_position", Integer, nullable=True),
    Column("consolation_points", Integer, nullable=False, server_default="0"),
    Column("bounty_count", Integer, nullable=False, server_default="0"),
    Column("bounty_points", Integer, nullable=False, server_default="0"),
    Column("payout", Integer, nullable=False, server_default="0"),
    Column("rebuy_count", Integer, nullable=False, server_default="0"),
    Column("notes", Text, nullable=True),
    Column("created", DateTimeTZ, nullable=False, server_default=func.now()),
    Column("updated", DateTimeTZ, nullable=False, server_default=func.now()),
    UniqueConstraint("tournament_id", "player_id"),
)

qualifications = Table(
    "qualifications",
    metadata,
    Column("id", BigInteger, primary_key=True, index=True, autoincrement=True),
    Column("season_id", BigInteger, ForeignKey("seasons.id", ondelete="CASCADE"), index=True, nullable=False),
    Column("player_id", BigInteger, ForeignKey("players.id", ondelete="CASCADE"), index=True, nullable=False),
    Column("tournament_id", BigInteger, ForeignKey("tournaments.id", ondelete="SET NULL"), nullable=True),
    Column(
        "qualification_type",
        Enum(
            "MANUAL",
            "TOURNAMENT_WINNER",
            "SERIES_TOP_TEN",
            "POINTS",
            name="qualification_type",
        ),
        nullable=False,
        server_default="MANUAL",
    ),
    Column("qualification_date", Date, nullable=False),
    Column("notes", Text, nullable=True),
    Column("is_active", Boolean, nullable=False, server_default="t", index=True),
    Column("created", DateTimeTZ, nullable=False, server_default=func.now()),
    UniqueConstraint("season_id", "player_id"),
)

season_events = Table(
    "season_events",
    metadata,
    Column("id", BigInteger, primary_key=True, index=True, autoincrement=True),
    Column("season_id", BigInteger, ForeignKey("seasons.id", ondelete="CASCADE"), index=True, nullable=False),
    Column("name", String, nullable=False),
    Column("date", Date, nullable=False),
    Column("user_id", String, nullable=False),
    Column("created", DateTimeTZ, nullable=False, server_default=func.now()),
)

season_event_results = Table(
    "season_event_results",
    metadata,
    Column("id", BigInteger, primary_key=True, index=True, autoincrement=True),
    Column(
        "season_event_id",
        BigInteger,
        ForeignKey("season_events.id", ondelete="CASCADE"),
        index=True,
        nullable=False,
    ),
    Column("player_id", BigInteger, ForeignKey("players.id", ondelete="CASCADE"), index=True, nullable=False),
    Column("position", Integer, nullable=False),
    Column("starting_chips", Integer, nullable=False, server_default="0"),
    Column("prize", Integer, nullable=False, server_default="0"),
    UniqueConstraint("season_event_id", "player_id"),
)
