from fastapi.testclient import TestClient

from pokerleague.app import app

# Without a `with` block the lifespan does not run, so no database is needed.
client = TestClient(app)


def test_ping() -> None:
    response = client.get("/ping")
    assert response.status_code == 200
    assert response.json() == "ping"


def test_calculate_points() -> None:
    response = client.get(
        "/scoring/calculate",
        params={"position": 2, "total_players": 10, "bounty_count": 3, "bounty_point_value": 2},
    )
    assert response.status_code == 200
    assert response.json() == {
        "data": {
            "base_points": 90,
            "bounty_points": 6,
            "total_points": 96,
            "points_system": "WEIGHTED",
        }
    }


def test_calculate_points_invalid_position_is_bad_request() -> None:
    response = client.get("/scoring/calculate", params={"position": 11, "total_players": 10})
    assert response.status_code == 400
    assert response.json() == {"detail": "Position cannot be greater than total players"}


def test_list_points_systems() -> None:
    response = client.get("/scoring/points_systems")
    assert response.status_code == 200
    assert [item["points_system"] for item in response.json()["data"]] == [
        "WEIGHTED",
        "FIXED",
        "PERCENTAGE",
        "WINNER_TAKES_ALL",
    ]

