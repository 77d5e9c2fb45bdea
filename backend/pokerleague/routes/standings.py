import asyncio
import csv
import io

from fastapi import APIRouter, Depends
from starlette.responses import Response

from pokerleague.config import config
from pokerleague.logic.standings import build_detailed_standings, build_standings
from pokerleague.models.db.season import Season
from pokerleague.models.db.series import Series
from pokerleague.models.standings import (
    DetailedSeriesStandingsView,
    SeasonStandingsView,
    SeriesStandingsView,
    StandingsOverview,
)
from pokerleague.routes.models import (
    SeasonStandingsResponse,
    SeriesStandingsResponse,
    StandingsOverviewResponse,
)
from pokerleague.routes.util import season_dependency, series_dependency
from pokerleague.sql.leagues import get_league_by_id
from pokerleague.sql.results import get_player_result_rows
from pokerleague.sql.seasons import get_season_by_id, get_seasons
from pokerleague.sql.series import get_series_for_season
from pokerleague.utils.types import assert_some

router = APIRouter(prefix=config.api_prefix)


async def get_series_standings_view(series: Series) -> SeriesStandingsView:
    results = await get_player_result_rows(series_id=series.id)
    return SeriesStandingsView(
        series_id=series.id,
        series_name=series.name,
        standings=build_standings(results),
    )


async def get_season_standings_view(season: Season) -> SeasonStandingsView:
    league = assert_some(await get_league_by_id(season.league_id))
    series_list = await get_series_for_season(season.id)
    series_views = await asyncio.gather(
        *(get_series_standings_view(series) for series in series_list)
    )
    return SeasonStandingsView(
        season_id=season.id,
        season_name=season.name,
        league_id=league.id,
        league_name=league.name,
        series=list(series_views),
    )


async def get_detailed_series_standings(series: Series) -> DetailedSeriesStandingsView:
    season = assert_some(await get_season_by_id(series.season_id))
    league = assert_some(await get_league_by_id(series.league_id))
    results = await get_player_result_rows(series_id=series.id)
    return DetailedSeriesStandingsView(
        series_id=series.id,
        series_name=series.name,
        season_id=season.id,
        season_name=season.name,
        league_id=league.id,
        league_name=league.name,
        standings=build_detailed_standings(results),
    )


@router.get("/standings", response_model=StandingsOverviewResponse)
async def get_standings_overview() -> StandingsOverviewResponse:
    seasons = await get_seasons(is_active=True)
    season_views = await asyncio.gather(
        *(get_season_standings_view(season) for season in seasons)
    )
    return StandingsOverviewResponse(data=StandingsOverview(seasons=list(season_views)))


@router.get("/seasons/{season_id}/standings", response_model=SeasonStandingsResponse)
async def get_season_standings(
    season: Season = Depends(season_dependency),
) -> SeasonStandingsResponse:
    results = await get_player_result_rows(season_id=season.id)
    return SeasonStandingsResponse(data=build_standings(results))


@router.get("/series/{series_id}/standings", response_model=SeriesStandingsResponse)
async def get_series_standings(
    series: Series = Depends(series_dependency),
) -> SeriesStandingsResponse:
    return SeriesStandingsResponse(data=await get_detailed_series_standings(series))


@router.get("/series/{series_id}/standings/export")
async def export_series_standings_csv(series: Series = Depends(series_dependency)) -> Response:
    view = await get_detailed_series_standings(series)

    output = io.StringIO()
    writer = csv.writer(output)
    writer.writerow(
        [
            "league_name",
            "season_name",
            "series_name",
            "rank",
            "player_name",
            "total_points",
            "regular_points",
            "bounty_points",
            "consolation_points",
            "tournaments_played",
            "wins",
            "top_three_finishes",
            "best_finish",
            "average_finish",
            "total_payout",
        ]
    )
    for row in view.standings:
        writer.writerow(
            [
                view.league_name,
                view.season_name,
                view.series_name,
                row.rank,
                row.player_name,
                row.total_points,
                row.regular_points,
                row.bounty_points,
                row.consolation_points,
                row.tournament_count,
                row.wins,
                row.top_three_finishes,
                row.best_finish if row.best_finish is not None else "",
                row.average_finish if row.average_finish is not None else "",
                row.total_payout,
            ]
        )

    return Response(
        content=output.getvalue(),
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="series-standings-{series.id}.csv"'},
    )
