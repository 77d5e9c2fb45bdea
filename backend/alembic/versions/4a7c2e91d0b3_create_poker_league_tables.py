"""create poker league tables

Revision ID: 4a7c2e91d0b3
Revises:
Create Date: 2026-10-17 00:00:00.000000

"""

import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import ENUM

from alembic import op

# revision identifiers, used by Alembic.
revision: str | None = "4a7c2e91d0b3"
down_revision: str | None = None
branch_labels: str | None = None
depends_on: str | None = None

points_system_enum = ENUM(
    "WEIGHTED",
    "FIXED",
    "PERCENTAGE",
    "WINNER_TAKES_ALL",
    name="points_system",
    create_type=False,
)
tournament_status_enum = ENUM(
    "PLANNED",
    "IN_PROGRESS",
    "FINISHED",
    name="tournament_status",
    create_type=False,
)
qualification_type_enum = ENUM(
    "MANUAL",
    "TOURNAMENT_WINNER",
    "SERIES_TOP_TEN",
    "POINTS",
    name="qualification_type",
    create_type=False,
)


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.Column("updated", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
    ]


def upgrade() -> None:
    for enum in (points_system_enum, tournament_status_enum, qualification_type_enum):
        enum.create(op.get_bind(), checkfirst=True)

    op.create_table(
        "leagues",
        sa.Column("id", sa.BigInteger(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("user_id", sa.String(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("is_active", sa.Boolean(), server_default="t", nullable=False),
        sa.Column("image_url", sa.String(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_leagues_id"), "leagues", ["id"], unique=False)
    op.create_index(op.f("ix_leagues_name"), "leagues", ["name"], unique=False)
    op.create_index(op.f("ix_leagues_user_id"), "leagues", ["user_id"], unique=False)
    op.create_index(op.f("ix_leagues_is_active"), "leagues", ["is_active"], unique=False)

    op.create_table(
        "seasons",
        sa.Column("id", sa.BigInteger(), autoincrement=True, nullable=False),
        sa.Column("league_id", sa.BigInteger(), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("start_date", sa.Date(), nullable=False),
        sa.Column("end_date", sa.Date(), nullable=True),
        sa.Column("is_active", sa.Boolean(), server_default="t", nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("finale_max_players", sa.Integer(), server_default="30", nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(["league_id"], ["leagues.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_seasons_id"), "seasons", ["id"], unique=False)
    op.create_index(op.f("ix_seasons_league_id"), "seasons", ["league_id"], unique=False)
    op.create_index(op.f("ix_seasons_name"), "seasons", ["name"], unique=False)
    op.create_index(op.f("ix_seasons_is_active"), "seasons", ["is_active"], unique=False)

    op.create_table(
        "series",
        sa.Column("id", sa.BigInteger(), autoincrement=True, nullable=False),
        sa.Column("season_id", sa.BigInteger(), nullable=False),
        sa.Column("league_id", sa.BigInteger(), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("start_date", sa.Date(), nullable=False),
        sa.Column("end_date", sa.Date(), nullable=True),
        sa.Column("is_active", sa.Boolean(), server_default="t", nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("points_system", points_system_enum, server_default="WEIGHTED", nullable=False),
        sa.Column("max_tournaments", sa.Integer(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(["season_id"], ["seasons.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["league_id"], ["leagues.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_series_id"), "series", ["id"], unique=False)
    op.create_index(op.f("ix_series_season_id"), "series", ["season_id"], unique=False)
    op.create_index(op.f("ix_series_league_id"), "series", ["league_id"], unique=False)
    op.create_index(op.f("ix_series_name"), "series", ["name"], unique=False)
    op.create_index(op.f("ix_series_is_active"), "series", ["is_active"], unique=False)

    op.create_table(
        "tournaments",
        sa.Column("id", sa.BigInteger(), autoincrement=True, nullable=False),
        sa.Column("series_id", sa.BigInteger(), nullable=False),
        sa.Column("season_id", sa.BigInteger(), nullable=False),
        sa.Column("league_id", sa.BigInteger(), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("date", sa.Date(), nullable=False),
        sa.Column("start_time", sa.String(), nullable=True),
        sa.Column("location", sa.String(), nullable=True),
        sa.Column("poker_variant", sa.String(), server_default="Texas Hold'em", nullable=False),
        sa.Column("buy_in", sa.Integer(), server_default="0", nullable=False),
        sa.Column("rebuy_allowed", sa.Boolean(), server_default="f", nullable=False),
        sa.Column("rebuy_amount", sa.Integer(), server_default="0", nullable=False),
        sa.Column("starting_chips", sa.Integer(), nullable=True),
        sa.Column("status", tournament_status_enum, server_default="PLANNED", nullable=False),
        sa.Column("max_players", sa.Integer(), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("is_finalized", sa.Boolean(), server_default="f", nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(["series_id"], ["series.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["season_id"], ["seasons.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["league_id"], ["leagues.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_tournaments_id"), "tournaments", ["id"], unique=False)
    op.create_index(op.f("ix_tournaments_series_id"), "tournaments", ["series_id"], unique=False)
    op.create_index(op.f("ix_tournaments_season_id"), "tournaments", ["season_id"], unique=False)
    op.create_index(op.f("ix_tournaments_league_id"), "tournaments", ["league_id"], unique=False)
    op.create_index(op.f("ix_tournaments_name"), "tournaments", ["name"], unique=False)
    op.create_index(op.f("ix_tournaments_date"), "tournaments", ["date"], unique=False)
    op.create_index(op.f("ix_tournaments_status"), "tournaments", ["status"], unique=False)

    op.create_table(
        "players",
        sa.Column("id", sa.BigInteger(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("user_id", sa.String(), nullable=False),
        sa.Column("email", sa.String(), nullable=True),
        sa.Column("phone", sa.String(), nullable=True),
        sa.Column("join_date", sa.Date(), nullable=True),
        sa.Column("is_active", sa.Boolean(), server_default="t", nullable=False),
        sa.Column("notes", sa.Text(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_players_id"), "players", ["id"], unique=False)
    op.create_index(op.f("ix_players_name"), "players", ["name"], unique=False)
    op.create_index(op.f("ix_players_user_id"), "players", ["user_id"], unique=False)
    op.create_index(op.f("ix_players_is_active"), "players", ["is_active"], unique=False)

    op.create_table(
        "tournament_players",
        sa.Column("id", sa.BigInteger(), autoincrement=True, nullable=False),
        sa.Column("tournament_id", sa.BigInteger(), nullable=False),
        sa.Column("player_id", sa.BigInteger(), nullable=False),
        sa.Column("final_position", sa.Integer(), nullable=True),
        sa.Column("points", sa.Integer(), server_default="0", nullable=False),
        sa.Column("consolation_position", sa.Integer(), nullable=True),
        sa.Column("consolation_points", sa.Integer(), server_default="0", nullable=False),
        sa.Column("bounty_count", sa.Integer(), server_default="0", nullable=False),
        sa.Column("bounty_points", sa.Integer(), server_default="0", nullable=False),
        sa.Column("payout", sa.Integer(), server_default="0", nullable=False),
        sa.Column("rebuy_count", sa.Integer(), server_default="0", nullable=False),
        sa.Column("notes", sa.Text(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(["tournament_id"], ["tournaments.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["player_id"], ["players.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("tournament_id", "player_id"),
    )
    op.create_index(op.f("ix_tournament_players_id"), "tournament_players", ["id"], unique=False)
    op.create_index(
        op.f("ix_tournament_players_tournament_id"), "tournament_players", ["tournament_id"], unique=False
    )
    op.create_index(
        op.f("ix_tournament_players_player_id"), "tournament_players", ["player_id"], unique=False
    )

    op.create_table(
        "qualifications",
        sa.Column("id", sa.BigInteger(), autoincrement=True, nullable=False),
        sa.Column("season_id", sa.BigInteger(), nullable=False),
        sa.Column("player_id", sa.BigInteger(), nullable=False),
        sa.Column("tournament_id", sa.BigInteger(), nullable=True),
        sa.Column("qualification_type", qualification_type_enum, server_default="MANUAL", nullable=False),
        sa.Column("qualification_date", sa.Date(), nullable=False),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("is_active", sa.Boolean(), server_default="t", nullable=False),
        sa.Column("created", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.ForeignKeyConstraint(["season_id"], ["seasons.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["player_id"], ["players.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["tournament_id"], ["tournaments.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("season_id", "player_id"),
    )
    op.create_index(op.f("ix_qualifications_id"), "qualifications", ["id"], unique=False)
    op.create_index(op.f("ix_qualifications_season_id"), "qualifications", ["season_id"], unique=False)
    op.create_index(op.f("ix_qualifications_player_id"), "qualifications", ["player_id"], unique=False)
    op.create_index(op.f("ix_qualifications_is_active"), "qualifications", ["is_active"], unique=False)

    op.create_table(
        "season_events",
        sa.Column("id", sa.BigInteger(), autoincrement=True, nullable=False),
        sa.Column("season_id", sa.BigInteger(), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("date", sa.Date(), nullable=False),
        sa.Column("user_id", sa.String(), nullable=False),
        sa.Column("created", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.ForeignKeyConstraint(["season_id"], ["seasons.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_season_events_id"), "season_events", ["id"], unique=False)
    op.create_index(op.f("ix_season_events_season_id"), "season_events", ["season_id"], unique=False)

    op.create_table(
        "season_event_results",
        sa.Column("id", sa.BigInteger(), autoincrement=True, nullable=False),
        sa.Column("season_event_id", sa.BigInteger(), nullable=False),
        sa.Column("player_id", sa.BigInteger(), nullable=False),
        sa.Column("position", sa.Integer(), nullable=False),
        sa.Column("starting_chips", sa.Integer(), server_default="0", nullable=False),
        sa.Column("prize", sa.Integer(), server_default="0", nullable=False),
        sa.ForeignKeyConstraint(["season_event_id"], ["season_events.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["player_id"], ["players.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("season_event_id", "player_id"),
    )
    op.create_index(op.f("ix_season_event_results_id"), "season_event_results", ["id"], unique=False)
    op.create_index(
        op.f("ix_season_event_results_season_event_id"),
        "season_event_results",
        ["season_event_id"],
        unique=False,
    )
    op.create_index(
        op.f("ix_season_event_results_player_id"), "season_event_results", ["player_id"], unique=False
    )


def downgrade() -> None:
    for table in (
        "season_event_results",
        "season_events",
        "qualifications",
        "tournament_players",
        "players",
        "tournaments",
        "series",
        "seasons",
        "leagues",
    ):
        op.drop_table(table)

    for enum in (qualification_type_enum, tournament_status_enum, points_system_enum):
        enum.drop(op.get_bind(), checkfirst=True)
