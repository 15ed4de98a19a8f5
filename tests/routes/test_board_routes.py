"""Tests for board API routes."""

import pytest
from fastapi.testclient import TestClient


class TestBoardEndpoints:
    """Test cases for /api/boards."""

    def test_create_board(self, client: TestClient):
        response = client.post("/api/boards", json={"title": "Sprint 1", "description": "first"})

        assert response.status_code == 201
        data = response.json()
        assert data["title"] == "Sprint 1"
        assert data["task_count"] == 0
        assert [s["status_key"] for s in data["statuses"]] == ["todo", "in_progress", "done"]

    def test_create_duplicate_title(self, client: TestClient):
        client.post("/api/boards", json={"title": "Sprint 1"})

        response = client.post("/api/boards", json={"title": " Sprint 1 "})

        assert response.status_code == 400
        assert "already exists" in response.json()["message"]

    def test_create_validation_errors(self, client: TestClient):
        response = client.post("/api/boards", json={"title": "", "description": "x" * 1001})

        assert response.status_code == 400
        body = response.json()
        assert body["message"] == "Validation failed"
        assert {error["field"] for error in body["errors"]} == {"title", "description"}

    def test_list_boards(self, client: TestClient):
        client.post("/api/boards", json={"title": "A"})
        client.post("/api/boards", json={"title": "B"})

        response = client.get("/api/boards")

        assert response.status_code == 200
        assert [b["title"] for b in response.json()] == ["B", "A"]
        assert all("task_count" in b for b in response.json())

    def test_get_board(self, client: TestClient):
        board_id = client.post("/api/boards", json={"title": "A"}).json()["id"]

        response = client.get(f"/api/boards/{board_id}")

        assert response.status_code == 200
        assert [s["position"] for s in response.json()["statuses"]] == [0, 1, 2]

    def test_get_missing_board(self, client: TestClient):
        response = client.get("/api/boards/999")

        assert response.status_code == 404
        assert response.json() == {"message": "Board with ID 999 not found"}

    def test_non_integer_id(self, client: TestClient):
        response = client.get("/api/boards/abc")

        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "board_id"

    @pytest.mark.parametrize("method", ["get", "delete"])
    def test_oversized_id(self, client: TestClient, method: str):
        response = getattr(client, method)("/api/boards/999999999999999999999")

        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "board_id"

    def test_update_board(self, client: TestClient):
        board_id = client.post("/api/boards", json={"title": "A"}).json()["id"]

        response = client.put(f"/api/boards/{board_id}", json={"title": "A2", "description": "d"})

        assert response.status_code == 200
        assert response.json()["title"] == "A2"
        assert response.json()["description"] == "d"

    def test_update_empty_body(self, client: TestClient):
        board_id = client.post("/api/boards", json={"title": "A"}).json()["id"]

        response = client.put(f"/api/boards/{board_id}", json={})

        assert response.status_code == 400
        assert client.get(f"/api/boards/{board_id}").json()["title"] == "A"

    def test_update_conflict(self, client: TestClient):
        client.post("/api/boards", json={"title": "A"})
        board_id = client.post("/api/boards", json={"title": "B"}).json()["id"]

        response = client.put(f"/api/boards/{board_id}", json={"title": "A"})

        assert response.status_code == 400

    def test_update_missing(self, client: TestClient):
        assert client.put("/api/boards/999", json={"title": "x"}).status_code == 404

    def test_delete_board(self, client: TestClient):
        board_id = client.post("/api/boards", json={"title": "A"}).json()["id"]
        client.post("/api/tasks", json={"title": "t", "board_id": board_id})

        response = client.delete(f"/api/boards/{board_id}")

        assert response.status_code == 200
        assert response.json() == {"message": "Board deleted successfully", "id": board_id}
        assert client.get(f"/api/boards/{board_id}").status_code == 404
        assert client.get(f"/api/tasks/board/{board_id}").json() == []
        assert client.get(f"/api/statuses/board/{board_id}").json() == []

    def test_delete_missing(self, client: TestClient):
        assert client.delete("/api/boards/999").status_code == 404
