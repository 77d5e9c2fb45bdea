from typing import NewType

LeagueId = NewType("LeagueId", int)
SeasonId = NewType("SeasonId", int)
SeriesId = NewType("SeriesId", int)
TournamentId = NewType("TournamentId", int)
PlayerId = NewType("PlayerId", int)
TournamentPlayerId = NewType("TournamentPlayerId", int)
QualificationId = NewType("QualificationId", int)
SeasonEventId = NewType("SeasonEventId", int)
SeasonEventResultId = NewType("SeasonEventResultId", int)
