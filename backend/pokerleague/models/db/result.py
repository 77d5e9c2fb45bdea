import datetime

from heliclockter import datetime_utc
from pydantic import Field, computed_field, model_validator

from pokerleague.logic.scoring.game_result import GameType, default_field_size
from pokerleague.models.db.shared import BaseModelORM
from pokerleague.utils.id_types import PlayerId, TournamentId, TournamentPlayerId


class TournamentPlayerInsertable(BaseModelORM):
    tournament_id: TournamentId
    player_id: PlayerId
    final_position: int | None = None
    points: int = 0
    consolation_position: int | None = None
    consolation_points: int = 0
    bounty_count: int = 0
    bounty_points: int = 0
    payout: int = 0
    rebuy_count: int = 0
    notes: str | None = None
    created: datetime_utc
    updated: datetime_utc


class TournamentPlayer(TournamentPlayerInsertable):
    id: TournamentPlayerId


class TournamentResultView(TournamentPlayer):
    player_name: str

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total_points(self) -> int:
        return self.points + self.bounty_points + self.consolation_points


class PlayerResultRow(BaseModelORM):
    """A result joined with its tournament, the unit standings are aggregated from."""

    tournament_id: TournamentId
    tournament_name: str
    tournament_date: datetime.date
    series_id: int
    player_id: PlayerId
    player_name: str
    final_position: int | None = None
    points: int = 0
    consolation_position: int | None = None
    consolation_points: int = 0
    bounty_points: int = 0
    payout: int = 0


class ResultEntryBody(BaseModelORM):
    player_id: PlayerId
    rank: int = Field(ge=1)
    bounty_count: int = Field(default=0, ge=0)
    payout: int = Field(default=0, ge=0)
    rebuy_count: int = Field(default=0, ge=0)
    notes: str | None = None


class RecordResultsBody(BaseModelORM):
    game_type: GameType = GameType.TOURNAMENT
    total_players: int | None = Field(default=None, ge=1)
    bounty_point_value: int | None = Field(default=None, ge=0)
    results: list[ResultEntryBody] = Field(min_length=1)

    @model_validator(mode="after")
    def check_results_consistency(self) -> "RecordResultsBody":
        player_ids = [entry.player_id for entry in self.results]
        if len(player_ids) != len(set(player_ids)):
            raise ValueError("Each player can only appear once in the results")

        highest_rank = max(entry.rank for entry in self.results)
        if self.total_players is not None and self.total_players < highest_rank:
            raise ValueError("Total players cannot be smaller than the highest rank")
        return self

    def field_size(self) -> int:
        if self.total_players is not None:
            return self.total_players
        return default_field_size([entry.rank for entry in self.results])
