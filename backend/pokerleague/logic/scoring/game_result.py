from collections.abc import Sequence
from enum import auto

from pydantic import BaseModel, ConfigDict

from pokerleague.utils.types import EnumAutoStr


class GameType(EnumAutoStr):
    TOURNAMENT = auto()
    CONSOLATION = auto()


class PlayerResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    player_id: str
    rank: int


class GameResult(BaseModel):
    """
    Scoring input for a single completed game.

    Built by the results workflow from submitted finishing positions and thrown away once the
    points have been computed. Multiple results sharing a rank represent a tie.
    """

    model_config = ConfigDict(frozen=True)

    game_type: GameType
    total_players: int
    results: tuple[PlayerResult, ...]


def default_field_size(ranks: Sequence[int]) -> int:
    """Smallest field consistent with the recorded ranks when no player count was given."""
    return max(len(ranks), max(ranks, default=0))
