"""Route tests through the Flask test client with a fake scores client."""

import pytest

from conftest import bucket, make_game
from nhl_results.config import AppConfig


def _final(home="TOR", away="BOS", scores=None, start="2025-02-24T00:00:00Z", **extra):
    return make_game(home=home, away=away, state="FINAL", scores=scores or {"TOR": 4, "BOS": 1}, start=start, **extra)


def test_index_serves_team_picker(make_client):
    client, fake = make_client()
    resp = client.get("/")
    assert resp.status_code == 200
    assert "Pick your team" in resp.get_data(as_text=True)
    assert fake.calls == []


def test_static_stylesheet_served(make_client):
    client, _ = make_client()
    resp = client.get("/styles.css")
    assert resp.status_code == 200


def test_health(make_client):
    client, _ = make_client()
    assert client.get("/health").get_json() == {"ok": True}


def test_home_win_shows_yes_and_summary(make_client):
    client, fake = make_client([bucket("2025-02-23", _final())])
    resp = client.get("/home?team=TOR")
    body = resp.get_data(as_text=True)

    assert resp.status_code == 200
    assert '<div class="status-line">Yes</div>' in body
    assert "View Summary" in body
    assert "/score?team=TOR&amp;date=2025-02-23" in body
    assert fake.calls == [("2025-02-22", "2025-02-24")]


def test_home_loss_shows_no(make_client):
    client, _ = make_client([bucket("2025-02-23", _final(scores={"TOR": 1, "BOS": 4}))])
    body = client.get("/home?team=TOR").get_data(as_text=True)
    assert '<div class="status-line">No</div>' in body
    assert "View Summary" in body


def test_home_rest_day_when_team_not_playing(make_client):
    client, _ = make_client([bucket("2025-02-23", make_game(home="MIN", away="DAL"))])
    body = client.get("/home?team=TOR").get_data(as_text=True)
    assert "- REST DAY -" in body
    assert "View Summary" not in body


def test_home_rest_day_when_only_neighbouring_days_have_games(make_client):
    other_day = _final(start="2025-02-23T00:00:00Z")  # 7pm ET on the 22nd
    client, _ = make_client([bucket("2025-02-22", other_day)])
    body = client.get("/home?team=TOR").get_data(as_text=True)
    assert "- REST DAY -" in body


def test_home_live_game(make_client):
    live = make_game(
        state="LIVE",
        status={
            "state": "LIVE",
            "progress": {"currentPeriodOrdinal": "2nd", "currentPeriodTimeRemaining": {"pretty": "05:13"}},
        },
    )
    client, _ = make_client([bucket("2025-02-23", live)])
    body = client.get("/home?team=TOR").get_data(as_text=True)
    assert "Live - 2nd Period: 05:13" in body
    assert "View Summary" not in body


def test_home_preview_game(make_client):
    client, _ = make_client([bucket("2025-02-23", make_game(state="PREVIEW"))])
    body = client.get("/home?team=TOR").get_data(as_text=True)
    assert '<div class="status-line">Bruins vs Maple Leafs</div>' in body
    assert '<div class="status-line">7:00 PM</div>' in body


def test_unknown_team_falls_back_to_default(make_client):
    client, _ = make_client([bucket("2025-02-23", _final())])
    body = client.get("/home?team=XYZ").get_data(as_text=True)
    assert "Toronto Maple Leafs" in body
    assert '<div class="status-line">Yes</div>' in body

    body = client.get("/home").get_data(as_text=True)
    assert "Toronto Maple Leafs" in body


def test_unknown_team_falls_back_on_yesterday(make_client):
    client, fake = make_client([bucket("2025-02-22", _final(start="2025-02-23T00:00:00Z"))])
    body = client.get("/yesterday?team=XYZ").get_data(as_text=True)
    assert "Toronto Maple Leafs" in body
    assert '<div class="status-line">Yes</div>' in body
    assert "/score?team=TOR&amp;date=2025-02-22" in body
    assert fake.calls == [("2025-02-21", "2025-02-23")]


def test_unknown_team_falls_back_on_score(make_client):
    client, _ = make_client([bucket("2025-02-23", _final())])
    body = client.get("/score?team=XYZ&date=2025-02-23").get_data(as_text=True)
    assert "Toronto Maple Leafs game summary" in body
    assert '<span class="team-selected">Maple Leafs</span>' in body
    assert 'href="/home?team=TOR"' in body


def test_home_fetch_failure_renders_message(make_client, fetch_error):
    client, _ = make_client(error=fetch_error)
    resp = client.get("/home?team=TOR")
    assert resp.status_code == 200
    assert "Error loading game data" in resp.get_data(as_text=True)


def test_yesterday_win(make_client):
    game = _final(start="2025-02-23T00:00:00Z")
    client, fake = make_client([bucket("2025-02-22", game)])
    body = client.get("/yesterday?team=TOR").get_data(as_text=True)
    assert '<div class="status-line">Yes</div>' in body
    assert "/score?team=TOR&amp;date=2025-02-22" in body
    assert fake.calls == [("2025-02-21", "2025-02-23")]


def test_yesterday_no_game(make_client):
    client, _ = make_client([])
    body = client.get("/yesterday?team=MIN").get_data(as_text=True)
    assert "- NO GAME YESTERDAY -" in body
    assert "Minnesota Wild" in body
    assert "View Summary" not in body


def test_yesterday_fetch_failure_renders_message(make_client, fetch_error):
    client, _ = make_client(error=fetch_error)
    resp = client.get("/yesterday?team=TOR")
    assert resp.status_code == 200
    assert "Error loading yesterday&#39;s data" in resp.get_data(as_text=True)


def test_test_mode_dates_drive_query_window(make_client):
    cfg = AppConfig(
        tz="America/New_York",
        default_team="TOR",
        use_test_dates=True,
        test_today_date="2025-04-10",
        test_yesterday_date="2025-04-09",
    )
    client, fake = make_client([], cfg=cfg)
    client.get("/home?team=TOR")
    client.get("/yesterday?team=TOR")
    assert fake.calls == [("2025-04-09", "2025-04-11"), ("2025-04-08", "2025-04-10")]


def test_score_page_renders_box_score(make_client):
    game = _final(
        scores={"TOR": 2, "BOS": 1},
        goals=[
            {"period": "1", "min": 5, "sec": 3, "scorer": {"player": "Auston Matthews"},
             "assists": [{"player": "Mitch Marner"}, {"player": "Morgan Rielly"}], "team": "TOR"},
            {"period": "2", "min": 10, "sec": 0, "scorer": {"player": "David Pastrnak"},
             "assists": [], "team": "BOS"},
        ],
        gameStats={"shots": {"TOR": 30, "BOS": 25}},
        links={"videoRecap": "https://www.nhl.com/video/recap"},
    )
    client, fake = make_client([bucket("2025-02-23", game)])
    resp = client.get("/score?team=TOR&date=2025-02-23")
    body = resp.get_data(as_text=True)

    assert resp.status_code == 200
    assert "Period 1 Goals" in body
    assert '<div class="game-state">Final</div>' in body
    assert "Period 2 Goals" in body
    assert "Auston Matthews" in body
    assert "(05:03) - Assists: Mitch Marner, Morgan Rielly" in body
    assert "Maple Leafs (TOR)" in body
    assert "<td>Giveaways</td>" in body
    assert "https://www.nhl.com/video/recap" in body
    assert fake.calls == [("2025-02-22", "2025-02-24")]


def test_score_page_defaults_to_today(make_client):
    client, fake = make_client([])
    client.get("/score?team=TOR")
    client.get("/score?team=TOR&date=not-a-date")
    assert fake.calls == [("2025-02-22", "2025-02-24"), ("2025-02-22", "2025-02-24")]


@pytest.mark.parametrize("raw", ["20250223", "2025-W09-1", "2025-2-23"])
def test_score_page_non_canonical_date_falls_back_to_today(make_client, raw):
    client, fake = make_client([bucket("2025-02-23", _final())])
    body = client.get(f"/score?team=TOR&date={raw}").get_data(as_text=True)

    assert fake.calls == [("2025-02-22", "2025-02-24")]
    assert '<p class="date">2025-02-23</p>' in body
    assert "Maple Leafs (TOR)" in body
    assert "No recent games found" not in body


def test_score_page_no_game(make_client):
    client, _ = make_client([bucket("2025-02-23", make_game(home="MIN", away="DAL"))])
    resp = client.get("/score?team=TOR&date=2025-02-23")
    assert resp.status_code == 200
    assert "No recent games found for Toronto Maple Leafs" in resp.get_data(as_text=True)


def test_score_page_fetch_failure(make_client, fetch_error):
    client, _ = make_client(error=fetch_error)
    resp = client.get("/score?team=BOS&date=2025-02-23")
    assert resp.status_code == 200
    assert "Unable to fetch game data for Boston Bruins. Please try again later." in resp.get_data(as_text=True)


def test_score_page_back_link_targets_yesterday(make_client):
    client, _ = make_client([])
    body = client.get("/score?team=TOR&date=2025-02-22").get_data(as_text=True)
    assert 'href="/yesterday?team=TOR"' in body

    body = client.get("/score?team=TOR&date=2025-02-23").get_data(as_text=True)
    assert 'href="/home?team=TOR"' in body
