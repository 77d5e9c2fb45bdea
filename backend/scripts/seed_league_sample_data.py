#!/usr/bin/env python3
import argparse
import asyncio
import random

from heliclockter import datetime_utc, timedelta

from pokerleague.database import database
from pokerleague.logic.results import build_result_rows, score_recorded_results
from pokerleague.logic.scoring.game_result import GameType
from pokerleague.logic.scoring.points_systems import PointsSystem
from pokerleague.logic.scoring.scorer import build_game_scorer
from pokerleague.logic.standings import build_standings
from pokerleague.models.db.league import LeagueBody
from pokerleague.models.db.player import PlayerBody
from pokerleague.models.db.result import RecordResultsBody, ResultEntryBody
from pokerleague.models.db.season import SeasonBody
from pokerleague.models.db.series import SeriesBody
from pokerleague.models.db.tournament import TournamentBody, TournamentStatus
from pokerleague.sql.leagues import sql_create_league
from pokerleague.sql.players import insert_player
from pokerleague.sql.results import get_player_result_rows, sql_replace_results
from pokerleague.sql.seasons import get_season_by_id, sql_create_season
from pokerleague.sql.series import get_series_by_id, sql_create_series
from pokerleague.sql.tournaments import (
    sql_create_tournament,
    sql_finalize_tournament,
    sql_get_tournament,
)
from pokerleague.utils.id_types import PlayerId, SeasonId
from pokerleague.utils.types import assert_some

SAMPLE_PLAYER_NAMES = [
    "Ada Holloway",
    "Ben Okafor",
    "Carla Mendes",
    "Dev Patel",
    "Elena Varga",
    "Finn Gallagher",
    "Grace Liu",
    "Hugo Brandt",
    "Iris Novak",
    "Jonas Berg",
    "Kemi Adeyemi",
    "Luis Ortega",
    "Mira Sato",
    "Nils Dahl",
    "Olga Petrov",
    "Pablo Reyes",
]
CONSOLATION_FIELD_SIZE = 6
SERIES_POINTS_SYSTEMS = [PointsSystem.WEIGHTED, PointsSystem.FIXED]


async def seed_tournament_results(
    tournament_body: TournamentBody,
    player_ids: list[PlayerId],
    rng: random.Random,
    bounty_point_value: int,
) -> None:
    series = assert_some(await get_series_by_id(tournament_body.series_id))
    tournament_id = await sql_create_tournament(tournament_body, series)
    tournament = assert_some(await sql_get_tournament(tournament_id))
    scorer = build_game_scorer().with_points_system(series.points_system)

    field = rng.sample(player_ids, k=rng.randint(len(player_ids) // 2, len(player_ids)))
    main_event = RecordResultsBody(
        game_type=GameType.TOURNAMENT,
        total_players=len(field),
        bounty_point_value=bounty_point_value,
        results=[
            ResultEntryBody(
                player_id=player_id,
                rank=rank,
                bounty_count=rng.randint(0, 3),
                payout=max(0, (4 - rank) * tournament.buy_in * len(field) // 6),
                rebuy_count=rng.randint(0, 1) if tournament.rebuy_allowed else 0,
            )
            for rank, player_id in enumerate(field, start=1)
        ],
    )
    await sql_replace_results(
        tournament.id,
        GameType.TOURNAMENT,
        build_result_rows(
            tournament.id, main_event, score_recorded_results(main_event, scorer), bounty_point_value
        ),
        main_event.field_size(),
    )

    # Early busts play the consolation table.
    consolation_field = field[-CONSOLATION_FIELD_SIZE:]
    rng.shuffle(consolation_field)
    consolation = RecordResultsBody(
        game_type=GameType.CONSOLATION,
        results=[
            ResultEntryBody(player_id=player_id, rank=rank)
            for rank, player_id in enumerate(consolation_field, start=1)
        ],
    )
    await sql_replace_results(
        tournament.id,
        GameType.CONSOLATION,
        build_result_rows(
            tournament.id, consolation, score_recorded_results(consolation, scorer), bounty_point_value
        ),
        consolation.field_size(),
    )
    await sql_finalize_tournament(tournament.id)


async def seed_league(
    *,
    league_name: str,
    owner_user_id: str,
    player_count: int,
    tournaments_per_series: int,
    bounty_point_value: int,
    random_seed: int,
) -> SeasonId:
    rng = random.Random(random_seed)
    today = datetime_utc.now().date()
    season_start = today - timedelta(days=7 * tournaments_per_series * len(SERIES_POINTS_SYSTEMS))

    league_id = await sql_create_league(
        LeagueBody(name=league_name, user_id=owner_user_id, description="Sample poker league")
    )
    season_id = await sql_create_season(
        SeasonBody(
            league_id=league_id,
            name=f"Season {today.year}",
            start_date=season_start,
            end_date=today + timedelta(days=30),
        )
    )
    season = assert_some(await get_season_by_id(season_id))

    player_ids = [
        await insert_player(PlayerBody(name=name, user_id=owner_user_id, join_date=season_start))
        for name in SAMPLE_PLAYER_NAMES[:player_count]
    ]

    tournament_date = season_start
    for series_index, points_system in enumerate(SERIES_POINTS_SYSTEMS, start=1):
        series_start = tournament_date
        series_id = await sql_create_series(
            SeriesBody(
                season_id=season_id,
                name=f"Series {series_index}",
                start_date=series_start,
                end_date=series_start + timedelta(days=7 * tournaments_per_series),
                points_system=points_system,
                max_tournaments=tournaments_per_series,
            ),
            season,
        )
        for tournament_index in range(1, tournaments_per_series + 1):
            await seed_tournament_results(
                TournamentBody(
                    series_id=series_id,
                    name=f"Series {series_index} - Night {tournament_index}",
                    date=tournament_date,
                    start_time="19:00",
                    location="Back room",
                    buy_in=20,
                    rebuy_allowed=tournament_index % 2 == 0,
                    rebuy_amount=20,
                    starting_chips=10_000,
                    status=TournamentStatus.FINISHED,
                ),
                player_ids,
                rng,
                bounty_point_value,
            )
            tournament_date += timedelta(days=7)

    return season_id


async def async_main() -> None:
    parser = argparse.ArgumentParser(
        description=(
            "Seed a sample poker league: one season with a weighted and a fixed-points series, "
            "finalized tournaments with main event and consolation results."
        )
    )
    parser.add_argument("--league-name", type=str, default="Thursday Night Poker")
    parser.add_argument("--owner-user-id", type=str, default="sample-owner")
    parser.add_argument("--players", type=int, default=12)
    parser.add_argument("--tournaments-per-series", type=int, default=4)
    parser.add_argument("--bounty-point-value", type=int, default=1)
    parser.add_argument("--random-seed", type=int, default=42)
    args = parser.parse_args()

    if not 2 <= args.players <= len(SAMPLE_PLAYER_NAMES):
        raise ValueError(f"--players must be between 2 and {len(SAMPLE_PLAYER_NAMES)}")
    if args.tournaments_per_series < 1:
        raise ValueError("--tournaments-per-series must be at least 1")

    await database.connect()
    try:
        season_id = await seed_league(
            league_name=str(args.league_name),
            owner_user_id=str(args.owner_user_id),
            player_count=int(args.players),
            tournaments_per_series=int(args.tournaments_per_series),
            bounty_point_value=int(args.bounty_point_value),
            random_seed=int(args.random_seed),
        )
        standings = build_standings(await get_player_result_rows(season_id=season_id))
        print(f"Seeded season {season_id} with {len(standings)} ranked players")
        for row in standings[:5]:
            print(f"  {row.rank:>2}. {row.player_name:<16} {row.total_points:>5} pts")
    finally:
        await database.disconnect()


if __name__ == "__main__":
    asyncio.run(async_main())
