"""HTTP 接口测试"""

import pytest
from fastapi.testclient import TestClient

from src.web.server import app


@pytest.fixture
def client():
    return TestClient(app)


class TestKinds:

    def test_kinds_in_order(self, client):
        resp = client.get("/api/kinds")
        assert resp.status_code == 200
        body = resp.json()
        assert [k["kind"] for k in body][0] == "HIGH_CARD"
        assert [k["kind"] for k in body][-1] == "STRAIGHT_FLUSH"
        assert [k["rank"] for k in body] == list(range(9))


class TestHand:

    def test_full_house(self, client):
        resp = client.get("/api/hand", params={"cards": "TD TC TH 7C 7D"})
        assert resp.status_code == 200
        body = resp.json()
        assert body["kind"] == "FULL_HOUSE"
        assert body["kind_name"] == "葫芦"
        assert body["cards"] == ["TD", "TC", "TH", "7C", "7D"]
        assert body["predicates"]["pair"] is True
        assert body["predicates"]["three_of_a_kind"] is True

    def test_bad_token_is_400(self, client):
        resp = client.get("/api/hand", params={"cards": "TD TC TH 7C 7X"})
        assert resp.status_code == 400
        assert "7X" in resp.json()["detail"]

    def test_wrong_count_is_400(self, client):
        resp = client.get("/api/hand", params={"cards": "TD TC TH"})
        assert resp.status_code == 400


class TestClassify:

    def test_batch(self, client):
        resp = client.post("/api/classify", json={"hands": ["6C 6D TH TS AD", "5C 2D 3H AS 4D"]})
        assert resp.status_code == 200
        assert [x["kind"] for x in resp.json()] == ["TWO_PAIR", "STRAIGHT"]

    def test_batch_rejects_any_bad_hand(self, client):
        resp = client.post("/api/classify", json={"hands": ["6C 6D TH TS AD", "nope"]})
        assert resp.status_code == 400


class TestCompare:

    def test_flush_beats_straight(self, client):
        resp = client.post("/api/compare", json={"left": "TD 2D 3D AD 4D", "right": "5C 2D 3H AS 4D"})
        assert resp.status_code == 200
        body = resp.json()
        assert body["result"] == 1
        assert body["left"]["kind"] == "FLUSH"
        assert body["right"]["kind"] == "STRAIGHT"

    def test_same_kind_is_zero(self, client):
        resp = client.post("/api/compare", json={"left": "2C 2D 5H 7S 9D", "right": "AC AD KH QS JD"})
        assert resp.json()["result"] == 0

    def test_missing_field_is_422(self, client):
        resp = client.post("/api/compare", json={"left": "2C 2D 5H 7S 9D"})
        assert resp.status_code == 422
