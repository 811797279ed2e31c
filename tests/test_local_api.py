import inspect

from fastapi.testclient import TestClient

from api_proto.local_api import api_check, api_hint, api_solve, app

from conftest import DIAMOND_COLS, DIAMOND_ROWS, DIAMOND_SOLUTION, HEART_COLS, HEART_ROWS

client = TestClient(app)

DIAMOND = {"width": 5, "height": 5, "rowClues": DIAMOND_ROWS, "colClues": DIAMOND_COLS}


def test_check_endpoint():
    response = client.post("/api/check", json=DIAMOND)
    assert response.status_code == 200
    assert response.json() == {"consistent": True, "solved": False}

    response = client.post("/api/check", json={**DIAMOND, "grid": DIAMOND_SOLUTION})
    assert response.json() == {"consistent": True, "solved": True}


def test_hint_endpoint():
    response = client.post("/api/hint", json=DIAMOND)
    assert response.status_code == 200
    body = response.json()
    assert body["success"]
    assert body["changed"]
    assert body["status"] == "deduced"
    assert body["grid"] == DIAMOND_SOLUTION


def test_hint_endpoint_reports_contradiction():
    puzzle = {"rowClues": [[3]], "colClues": [[1], [1], [1]], "grid": [[0, -1, 0]]}
    body = client.post("/api/hint", json=puzzle).json()
    assert not body["success"]
    assert body["status"] == "contradiction"
    assert body["contradiction"] == "row 0"


def test_solve_endpoint():
    response = client.post("/api/solve", json={**DIAMOND, "limit": 2})
    assert response.status_code == 200
    body = response.json()
    assert body["found"]
    assert body["grid"] == DIAMOND_SOLUTION
    assert len(body["solutions"]) == 1
    assert body["solved"]


def test_solve_endpoint_without_solution():
    body = client.post("/api/solve", json={"rowClues": HEART_ROWS, "colClues": HEART_COLS}).json()
    assert not body["found"]
    assert body["solutions"] == []
    assert not body["aborted"]
    assert body["grid"] is None


def test_malformed_puzzles_are_rejected():
    response = client.post("/api/solve", json={**DIAMOND, "height": 4})
    assert response.status_code == 422

    response = client.post("/api/check", json={"rowClues": [[-2]], "colClues": [[1]]})
    assert response.status_code == 422

    response = client.post("/api/solve", json={**DIAMOND, "limit": 0})
    assert response.status_code == 422


def test_solve_endpoint_reports_budget_cutoff():
    puzzle = {"rowClues": [[1], [1]], "colClues": [[1], [1]], "max_nodes": 1}
    body = client.post("/api/solve", json=puzzle).json()
    assert body["aborted"]
    assert not body["found"]
    assert body["grid"] is None


def test_search_endpoints_run_off_the_event_loop():
    # plain def handlers are dispatched to the threadpool by FastAPI
    assert not inspect.iscoroutinefunction(api_hint)
    assert not inspect.iscoroutinefunction(api_solve)
    assert inspect.iscoroutinefunction(api_check)
