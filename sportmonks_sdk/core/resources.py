"""Resource wrappers for the SportMonks Football API.

Each resource holds an Endpoint and returns QueryBuilders for its paths.
Arguments are validated here, before anything is sent.
@see https://docs.sportmonks.com/football/endpoints-and-entities/endpoints
"""

from datetime import date
from typing import Sequence, Union

from sportmonks_sdk.core.endpoint import Endpoint
from sportmonks_sdk.core.query_builder import QueryBuilder
from sportmonks_sdk.utils.validators import (
    format_date,
    sanitize_url_param,
    validate_date_format,
    validate_date_range,
    validate_id,
    validate_ids,
    validate_search_query,
)

IdLike = Union[int, str]
DateLike = Union[date, str]


def _date_arg(value: DateLike) -> str:
    # Strings must already be YYYY-MM-DD; date objects are formatted
    if isinstance(value, str):
        return validate_date_format(value)
    return format_date(value)


class Resource:
    """Shared factory helpers; concrete resources compose an Endpoint."""

    def __init__(self, endpoint: Endpoint):
        self.endpoint = endpoint

    def _query(self, suffix: str = "") -> QueryBuilder:
        return self.endpoint.query(suffix)

    def _search(self, search_query: str) -> QueryBuilder:
        term = validate_search_query(search_query)
        return self._query(f"/search/{sanitize_url_param(term)}")

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.endpoint.base_path!r})"


class LeaguesResource(Resource):
    def all(self) -> QueryBuilder:
        return self._query()

    def by_id(self, league_id: IdLike) -> QueryBuilder:
        return self._query(f"/{validate_id(league_id, 'League ID')}")

    def by_country(self, country_id: IdLike) -> QueryBuilder:
        return self._query(f"/countries/{validate_id(country_id, 'Country ID')}")

    def search(self, search_query: str) -> QueryBuilder:
        return self._search(search_query)

    def live(self) -> QueryBuilder:
        """Leagues that currently have fixtures being played."""
        return self._query("/live")

    def by_date(self, day: DateLike) -> QueryBuilder:
        return self._query(f"/date/{_date_arg(day)}")

    def by_team(self, team_id: IdLike) -> QueryBuilder:
        return self._query(f"/teams/{validate_id(team_id, 'Team ID')}")

    def current_by_team(self, team_id: IdLike) -> QueryBuilder:
        return self._query(f"/teams/{validate_id(team_id, 'Team ID')}/current")


class TeamsResource(Resource):
    def all(self) -> QueryBuilder:
        return self._query()

    def by_id(self, team_id: IdLike) -> QueryBuilder:
        return self._query(f"/{validate_id(team_id, 'Team ID')}")

    def by_country(self, country_id: IdLike) -> QueryBuilder:
        return self._query(f"/countries/{validate_id(country_id, 'Country ID')}")

    def by_season(self, season_id: IdLike) -> QueryBuilder:
        return self._query(f"/seasons/{validate_id(season_id, 'Season ID')}")

    def search(self, search_query: str) -> QueryBuilder:
        return self._search(search_query)


class PlayersResource(Resource):
    def all(self) -> QueryBuilder:
        return self._query()

    def by_id(self, player_id: IdLike) -> QueryBuilder:
        return self._query(f"/{validate_id(player_id, 'Player ID')}")

    def by_country(self, country_id: IdLike) -> QueryBuilder:
        return self._query(f"/countries/{validate_id(country_id, 'Country ID')}")

    def search(self, search_query: str) -> QueryBuilder:
        return self._search(search_query)

    def latest(self) -> QueryBuilder:
        """Players updated most recently."""
        return self._query("/latest")


class StandingsResource(Resource):
    def all(self) -> QueryBuilder:
        return self._query()

    def by_season(self, season_id: IdLike) -> QueryBuilder:
        return self._query(f"/seasons/{validate_id(season_id, 'Season ID')}")

    def by_round(self, round_id: IdLike) -> QueryBuilder:
        return self._query(f"/rounds/{validate_id(round_id, 'Round ID')}")

    def corrections_by_season(self, season_id: IdLike) -> QueryBuilder:
        return self._query(f"/corrections/seasons/{validate_id(season_id, 'Season ID')}")

    def live_by_league(self, league_id: IdLike) -> QueryBuilder:
        return self._query(f"/live/leagues/{validate_id(league_id, 'League ID')}")


class LivescoresResource(Resource):
    def all(self) -> QueryBuilder:
        """Fixtures of the current day (15 minutes before kick-off onwards)."""
        return self._query()

    def inplay(self) -> QueryBuilder:
        return self._query("/inplay")

    def latest(self) -> QueryBuilder:
        """Fixtures updated within the last 10 seconds."""
        return self._query("/latest")


class CoachesResource(Resource):
    def all(self) -> QueryBuilder:
        return self._query()

    def by_id(self, coach_id: IdLike) -> QueryBuilder:
        return self._query(f"/{validate_id(coach_id, 'Coach ID')}")

    def by_country(self, country_id: IdLike) -> QueryBuilder:
        return self._query(f"/countries/{validate_id(country_id, 'Country ID')}")

    def search(self, search_query: str) -> QueryBuilder:
        return self._search(search_query)

    def latest(self) -> QueryBuilder:
        return self._query("/latest")


class RefereesResource(Resource):
    def all(self) -> QueryBuilder:
        return self._query()

    def by_id(self, referee_id: IdLike) -> QueryBuilder:
        return self._query(f"/{validate_id(referee_id, 'Referee ID')}")

    def by_country(self, country_id: IdLike) -> QueryBuilder:
        return self._query(f"/countries/{validate_id(country_id, 'Country ID')}")

    def by_season(self, season_id: IdLike) -> QueryBuilder:
        return self._query(f"/seasons/{validate_id(season_id, 'Season ID')}")

    def search(self, search_query: str) -> QueryBuilder:
        return self._search(search_query)


class TransfersResource(Resource):
    def all(self) -> QueryBuilder:
        return self._query()

    def by_id(self, transfer_id: IdLike) -> QueryBuilder:
        return self._query(f"/{validate_id(transfer_id, 'Transfer ID')}")

    def latest(self) -> QueryBuilder:
        return self._query("/latest")

    def between(self, start_date: DateLike, end_date: DateLike) -> QueryBuilder:
        start, end = _date_arg(start_date), _date_arg(end_date)
        validate_date_range(start, end)
        return self._query(f"/between/{start}/{end}")

    def by_player(self, player_id: IdLike) -> QueryBuilder:
        return self._query(f"/players/{validate_id(player_id, 'Player ID')}")

    def by_team(self, team_id: IdLike) -> QueryBuilder:
        return self._query(f"/teams/{validate_id(team_id, 'Team ID')}")


class VenuesResource(Resource):
    def all(self) -> QueryBuilder:
        return self._query()

    def by_id(self, venue_id: IdLike) -> QueryBuilder:
        return self._query(f"/{validate_id(venue_id, 'Venue ID')}")

    def by_season(self, season_id: IdLike) -> QueryBuilder:
        return self._query(f"/seasons/{validate_id(season_id, 'Season ID')}")

    def search(self, search_query: str) -> QueryBuilder:
        return self._search(search_query)


class FixturesResource(Resource):
    def all(self) -> QueryBuilder:
        return self._query()

    def by_id(self, fixture_id: IdLike) -> QueryBuilder:
        return self._query(f"/{validate_id(fixture_id, 'Fixture ID')}")

    def by_ids(self, fixture_ids: Sequence[IdLike]) -> QueryBuilder:
        ids = validate_ids(fixture_ids, "Fixture IDs")
        return self._query(f"/multi/{','.join(str(i) for i in ids)}")

    def by_date(self, day: DateLike) -> QueryBuilder:
        return self._query(f"/date/{_date_arg(day)}")

    def by_date_range(self, start_date: DateLike, end_date: DateLike) -> QueryBuilder:
        start, end = _date_arg(start_date), _date_arg(end_date)
        validate_date_range(start, end)
        return self._query(f"/between/{start}/{end}")

    def head_to_head(self, team1_id: IdLike, team2_id: IdLike) -> QueryBuilder:
        first = validate_id(team1_id, "Team ID")
        second = validate_id(team2_id, "Team ID")
        return self._query(f"/head-to-head/{first}/{second}")

    def search(self, search_query: str) -> QueryBuilder:
        return self._search(search_query)

    def upcoming_by_tv_station(self, tv_station_id: IdLike) -> QueryBuilder:
        return self._query(f"/upcoming/tv-stations/{validate_id(tv_station_id, 'TV Station ID')}")


class SchedulesResource(Resource):
    def by_season_id(self, season_id: IdLike) -> QueryBuilder:
        """Full schedule (stages, rounds, fixtures) of a season."""
        return self._query(f"/seasons/{validate_id(season_id, 'Season ID')}")
