"""Tests for winning-numbers API routes."""

from __future__ import annotations

from collections.abc import Iterator
from unittest.mock import MagicMock, patch

import pytest
from fastapi.testclient import TestClient

from lottodesk.core.exceptions import StorageError
from lottodesk.services.winning_numbers import WinningNumbersService
from tests.factories.in_memory import InMemoryWinningRepo


@pytest.fixture
def winning_service() -> Iterator[WinningNumbersService]:
    service = WinningNumbersService(winning_repo=InMemoryWinningRepo())
    with patch(
        "lottodesk.api.routes.winning_numbers._get_winning_service", return_value=service
    ):
        yield service


class TestSetWinningNumbers:
    def test_set_returns_draw(self, client: TestClient, winning_service: WinningNumbersService) -> None:
        resp = client.post(
            "/api/winning-numbers", json={"numbers": [3, 11, 27, 44], "drawDate": "2026-10-18"}
        )
        assert resp.status_code == 200
        assert resp.json() == {
            "success": True,
            "id": 1,
            "numbers": [3, 11, 27, 44],
            "draw_date": "2026-10-18",
            "draw_time": "20:00:00",
        }

    def test_set_with_draw_time(self, client: TestClient, winning_service: WinningNumbersService) -> None:
        resp = client.post(
            "/api/winning-numbers",
            json={"numbers": [1, 2, 3, 4], "drawDate": "2026-10-18", "drawTime": "21:15"},
        )
        assert resp.json()["draw_time"] == "21:15:00"

    def test_three_numbers_is_400(self, client: TestClient, winning_service: WinningNumbersService) -> None:
        resp = client.post(
            "/api/winning-numbers", json={"numbers": [1, 2, 3], "drawDate": "2026-10-18"}
        )
        assert resp.status_code == 400
        assert resp.json()["detail"] == "Must provide exactly 4 numbers"
        assert winning_service.winning_repo.row_count == 0

    @pytest.mark.parametrize("body", [{"numbers": [1, 2, 3, 4]}, {"numbers": [1, 2, 3, 4], "drawDate": ""}])
    def test_missing_date_is_400(
        self, client: TestClient, winning_service: WinningNumbersService, body: dict
    ) -> None:
        resp = client.post("/api/winning-numbers", json=body)
        assert resp.status_code == 400
        assert resp.json()["detail"] == "Must provide draw date"

    def test_bad_draw_time_is_400(self, client: TestClient, winning_service: WinningNumbersService) -> None:
        resp = client.post(
            "/api/winning-numbers",
            json={"numbers": [1, 2, 3, 4], "drawDate": "2026-10-18", "drawTime": "late"},
        )
        assert resp.status_code == 400

    def test_non_integer_numbers_is_422(self, client: TestClient, winning_service: WinningNumbersService) -> None:
        resp = client.post(
            "/api/winning-numbers",
            json={"numbers": ["a", "b", "c", "d"], "drawDate": "2026-10-18"},
        )
        assert resp.status_code == 422


class TestLatestAndClear:
    def test_latest_null_when_none(self, client: TestClient, winning_service: WinningNumbersService) -> None:
        resp = client.get("/api/winning-numbers/latest")
        assert resp.status_code == 200
        assert resp.json() is None

    def test_set_twice_then_latest(self, client: TestClient, winning_service: WinningNumbersService) -> None:
        client.post("/api/winning-numbers", json={"numbers": [1, 2, 3, 4], "drawDate": "2026-10-17"})
        client.post("/api/winning-numbers", json={"numbers": [5, 6, 7, 8], "drawDate": "2026-10-18"})
        latest = client.get("/api/winning-numbers/latest").json()
        assert latest["numbers"] == [5, 6, 7, 8]
        assert latest["draw_date"] == "2026-10-18"
        assert winning_service.winning_repo.active_count == 1

    def test_clear(self, client: TestClient, winning_service: WinningNumbersService) -> None:
        client.post("/api/winning-numbers", json={"numbers": [1, 2, 3, 4], "drawDate": "2026-10-18"})
        resp = client.delete("/api/winning-numbers/clear")
        assert resp.status_code == 200
        assert resp.json() == {"success": True, "message": "All winning numbers cleared"}
        assert client.get("/api/winning-numbers/latest").json() is None

    def test_clear_twice(self, client: TestClient, winning_service: WinningNumbersService) -> None:
        assert client.delete("/api/winning-numbers/clear").status_code == 200
        assert client.delete("/api/winning-numbers/clear").status_code == 200

    @patch("lottodesk.api.routes.winning_numbers._get_winning_service")
    def test_storage_error_is_500(self, mock_factory: MagicMock, client: TestClient) -> None:
        mock_svc = MagicMock()
        mock_svc.get_latest_active.side_effect = StorageError("ORA-12541: no listener")
        mock_factory.return_value = mock_svc
        resp = client.get("/api/winning-numbers/latest")
        assert resp.status_code == 500
        assert resp.json()["detail"] == "ORA-12541: no listener"
