from collections.abc import Iterable, Sequence

from pydantic import BaseModel, Field

from pokerleague.models.db.qualification import QualificationType
from pokerleague.models.standings import QualificationStatus, QualifiedPlayer, StandingsRow
from pokerleague.utils.id_types import PlayerId


class QualificationRules(BaseModel):
    max_players: int = Field(ge=1)
    min_tournaments: int = Field(default=3, ge=0)
    top_per_series: int = Field(default=10, ge=0)


def _qualified_from_row(row: StandingsRow, qualification_type: QualificationType) -> QualifiedPlayer:
    return QualifiedPlayer(
        player_id=row.player_id,
        player_name=row.player_name,
        qualification_type=qualification_type,
        tournament_count=row.tournament_count,
        season_points=row.total_points,
        total_chips=row.total_points,
    )


def determine_qualified_players(
    season_standings: Sequence[StandingsRow],
    series_standings: Iterable[Sequence[StandingsRow]],
    manual_qualifications: Sequence[tuple[PlayerId, str]],
    rules: QualificationRules,
) -> list[QualifiedPlayer]:
    """
    Fill the season finale field in priority order.

    Manually recorded qualifications come first, then tournament winners, then the top finishers
    of every series, and the remaining spots go to the highest season point totals. Apart from
    manual entries, a player needs `rules.min_tournaments` tournaments in the season to qualify.
    The field never exceeds `rules.max_players`.
    """
    season_rows = {row.player_id: row for row in season_standings}
    qualified: dict[PlayerId, QualifiedPlayer] = {}

    def is_eligible(row: StandingsRow) -> bool:
        return row.tournament_count >= rules.min_tournaments and row.player_id not in qualified

    def has_room() -> bool:
        return len(qualified) < rules.max_players

    for player_id, player_name in manual_qualifications:
        if not has_room():
            break
        if player_id in qualified:
            continue
        season_row = season_rows.get(player_id)
        qualified[player_id] = (
            _qualified_from_row(season_row, QualificationType.MANUAL)
            if season_row is not None
            else QualifiedPlayer(
                player_id=player_id,
                player_name=player_name,
                qualification_type=QualificationType.MANUAL,
            )
        )

    for row in season_standings:
        if has_room() and row.wins > 0 and is_eligible(row):
            qualified[row.player_id] = _qualified_from_row(row, QualificationType.TOURNAMENT_WINNER)

    for standings in series_standings:
        for series_row in standings:
            if series_row.rank > rules.top_per_series:
                break
            season_row = season_rows.get(series_row.player_id)
            if has_room() and season_row is not None and is_eligible(season_row):
                qualified[season_row.player_id] = _qualified_from_row(
                    season_row, QualificationType.SERIES_TOP_TEN
                )

    for row in season_standings:
        if has_room() and is_eligible(row):
            qualified[row.player_id] = _qualified_from_row(row, QualificationType.POINTS)

    return list(qualified.values())


def get_qualification_status(
    qualified_players: Sequence[QualifiedPlayer], max_players: int
) -> QualificationStatus:
    return QualificationStatus(
        total_qualified=len(qualified_players),
        max_players=max_players,
        tournament_winners=sum(
            1
            for player in qualified_players
            if player.qualification_type is QualificationType.TOURNAMENT_WINNER
        ),
        top_qualifiers=sum(
            1
            for player in qualified_players
            if player.qualification_type is QualificationType.SERIES_TOP_TEN
        ),
        remaining_spots=max(0, max_players - len(qualified_players)),
    )


def filter_qualified_players(
    qualified_players: Sequence[QualifiedPlayer], search_query: str | None
) -> list[QualifiedPlayer]:
    query = (search_query or "").strip().lower()
    if query == "":
        return list(qualified_players)
    return [player for player in qualified_players if query in player.player_name.lower()]
