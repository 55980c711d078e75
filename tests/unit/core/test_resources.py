from datetime import date

import pytest

from sportmonks_sdk.domain.errors import ValidationError


@pytest.fixture
def client(make_client):
    client, _ = make_client()
    return client


@pytest.mark.parametrize("build, expected", [
    (lambda c: c.leagues.all(), "/football/leagues"),
    (lambda c: c.leagues.by_id(8), "/football/leagues/8"),
    (lambda c: c.leagues.by_country("462"), "/football/leagues/countries/462"),
    (lambda c: c.leagues.live(), "/football/leagues/live"),
    (lambda c: c.leagues.by_date("2024-03-01"), "/football/leagues/date/2024-03-01"),
    (lambda c: c.leagues.current_by_team(1), "/football/leagues/teams/1/current"),
    (lambda c: c.teams.by_season(19735), "/football/teams/seasons/19735"),
    (lambda c: c.players.latest(), "/football/players/latest"),
    (lambda c: c.standings.by_round(274719), "/football/standings/rounds/274719"),
    (lambda c: c.standings.corrections_by_season(19735), "/football/standings/corrections/seasons/19735"),
    (lambda c: c.standings.live_by_league(8), "/football/standings/live/leagues/8"),
    (lambda c: c.livescores.all(), "/football/livescores"),
    (lambda c: c.livescores.inplay(), "/football/livescores/inplay"),
    (lambda c: c.coaches.latest(), "/football/coaches/latest"),
    (lambda c: c.referees.by_season(19735), "/football/referees/seasons/19735"),
    (lambda c: c.transfers.by_player(580), "/football/transfers/players/580"),
    (lambda c: c.venues.by_season(19735), "/football/venues/seasons/19735"),
    (lambda c: c.fixtures.by_date(date(2024, 3, 1)), "/football/fixtures/date/2024-03-01"),
    (lambda c: c.fixtures.head_to_head(1, 2), "/football/fixtures/head-to-head/1/2"),
    (lambda c: c.fixtures.by_ids([18535517, "18535518"]), "/football/fixtures/multi/18535517,18535518"),
    (lambda c: c.fixtures.upcoming_by_tv_station(3), "/football/fixtures/upcoming/tv-stations/3"),
    (lambda c: c.schedules.by_season_id(19735), "/football/schedules/seasons/19735"),
])
def test_resource_paths(client, build, expected):
    assert build(client).path == expected


def test_search_term_is_trimmed_and_encoded(client):
    assert client.teams.search("  Man Utd ").path == "/football/teams/search/Man%20Utd"


def test_date_ranges_are_validated(client):
    builder = client.fixtures.by_date_range("2024-01-01", "2024-01-31")
    assert builder.path == "/football/fixtures/between/2024-01-01/2024-01-31"
    assert client.transfers.between(date(2024, 1, 1), "2024-02-01").path == (
        "/football/transfers/between/2024-01-01/2024-02-01"
    )


@pytest.mark.parametrize("build, message", [
    (lambda c: c.teams.by_id(0), "Invalid Team ID"),
    (lambda c: c.players.by_id("abc"), "Invalid Player ID"),
    (lambda c: c.teams.search("ab"), "at least 3 characters"),
    (lambda c: c.fixtures.by_date("01-03-2024"), "Invalid date format"),
    (lambda c: c.fixtures.by_date("2024-02-30"), "Invalid date"),
    (lambda c: c.fixtures.by_date_range("2024-02-01", "2024-01-01"), "start date"),
    (lambda c: c.transfers.between("2023-01-01", "2024-06-01"), "cannot exceed 1 year"),
    (lambda c: c.fixtures.by_ids([]), "must be a non-empty list"),
    (lambda c: c.fixtures.by_ids([1, -2]), r"Invalid Fixture IDs\[1\]"),
])
def test_invalid_arguments_raise_before_any_request(make_client, build, message):
    client, api = make_client()
    with pytest.raises(ValidationError, match=message):
        build(client)
    assert api.call_count == 0
