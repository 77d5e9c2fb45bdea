from collections import defaultdict
from collections.abc import Iterable, Sequence

from pokerleague.models.db.result import PlayerResultRow
from pokerleague.models.standings import DetailedStandingsRow, StandingsRow
from pokerleague.utils.id_types import PlayerId

NO_FINISH = 2**31


def summarize_player_results(
    player_id: PlayerId, player_name: str, results: Sequence[PlayerResultRow]
) -> StandingsRow:
    finishes = [result.final_position for result in results if result.final_position is not None]
    regular_points = sum(result.points for result in results)
    bounty_points = sum(result.bounty_points for result in results)
    consolation_points = sum(result.consolation_points for result in results)

    return StandingsRow(
        player_id=player_id,
        player_name=player_name,
        total_points=regular_points + bounty_points + consolation_points,
        regular_points=regular_points,
        bounty_points=bounty_points,
        consolation_points=consolation_points,
        tournament_count=len({result.tournament_id for result in results}),
        best_finish=min(finishes) if finishes else None,
        average_finish=round(sum(finishes) / len(finishes), 1) if finishes else None,
        wins=sum(1 for finish in finishes if finish == 1),
        top_three_finishes=sum(1 for finish in finishes if finish <= 3),
        total_payout=sum(result.payout for result in results),
    )


def standings_sort_key(row: StandingsRow) -> tuple[int, int, int, str]:
    best_finish = row.best_finish if row.best_finish is not None else NO_FINISH
    return -row.total_points, -row.wins, best_finish, row.player_name.lower()


def assign_competition_ranks[RowT: StandingsRow](rows: Sequence[RowT]) -> list[RowT]:
    """
    Sort rows and number them with competition ranking ("1224").

    Rows with equal total points share a rank and the next distinct total skips the shared places.
    """
    ranked: list[RowT] = []
    previous_total: int | None = None
    current_rank = 0

    for index, row in enumerate(sorted(rows, key=standings_sort_key), start=1):
        if row.total_points != previous_total:
            current_rank = index
            previous_total = row.total_points
        ranked.append(row.model_copy(update={"rank": current_rank}))

    return ranked


def group_results_by_player(
    results: Iterable[PlayerResultRow],
) -> dict[PlayerId, list[PlayerResultRow]]:
    grouped: dict[PlayerId, list[PlayerResultRow]] = defaultdict(list)
    for result in results:
        grouped[result.player_id].append(result)
    return grouped


def build_standings(results: Iterable[PlayerResultRow]) -> list[StandingsRow]:
    rows = [
        summarize_player_results(player_id, player_results[0].player_name, player_results)
        for player_id, player_results in group_results_by_player(results).items()
    ]
    return assign_competition_ranks(rows)


def build_detailed_standings(results: Iterable[PlayerResultRow]) -> list[DetailedStandingsRow]:
    rows = []
    for player_id, player_results in group_results_by_player(results).items():
        summary = summarize_player_results(player_id, player_results[0].player_name, player_results)
        rows.append(
            DetailedStandingsRow(
                **summary.model_dump(),
                tournament_results=sorted(
                    player_results,
                    key=lambda result: (result.tournament_date, result.tournament_id),
                ),
            )
        )
    return assign_competition_ranks(rows)
