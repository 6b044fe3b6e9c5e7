from fastapi.testclient import TestClient

from main import app

client = TestClient(app)


def test_check_correct():
    r = client.post("/check", json={"answer": "55.123 amu", "correct_answer": "55.123"})
    assert r.status_code == 200
    b = r.json()
    assert b["ok"] is True and b["correct"] is True
    assert b["result"] == "correct" and b["status"] == "SUCCESS"
    assert "55.123 amu" in b["feedback"]


def test_check_missing_unit():
    r = client.post("/check", json={"answer": "55.123", "correct_answer": "55.123"})
    b = r.json()
    assert b["result"] == "missing_unit" and b["status"] == "MISSING_UNIT"
    assert b["correct"] is False
    assert "missing the unit" in b["feedback"]


def test_check_incorrect():
    r = client.post("/check", json={"answer": "55.200 amu", "correct_answer": "55.123"})
    b = r.json()
    assert b["result"] == "incorrect" and b["status"] == "ERROR"
    assert "percentages" in b["feedback"].lower()
    assert b["expected"] == "55.123"


def test_check_empty_answer():
    r = client.post("/check", json={"answer": "", "correct_answer": "12.345"})
    assert r.status_code == 200
    assert r.json()["result"] == "incorrect"


def test_check_against_generated_problem():
    p = client.get("/problems", params={"count": 1, "seed": 5}).json()[0]
    r = client.post(
        "/check", json={"answer": f"{p['correct_answer']} amu", "correct_answer": p["correct_answer"]}
    )
    assert r.json()["result"] == "correct"


def test_check_missing_field():
    r = client.post("/check", json={"answer": "1"})
    assert r.status_code == 422


def test_check_batch():
    r = client.post(
        "/check-batch",
        json={
            "items": [
                {"id": "problem-0", "answer": "55.123 amu", "correct_answer": "55.123"},
                {"id": "problem-1", "answer": "20", "correct_answer": "20.000"},
                {"id": "problem-2", "answer": "nope", "correct_answer": "87.310"},
            ]
        },
    )
    assert r.status_code == 200
    b = r.json()
    assert b["ok"] is True and b["total"] == 3 and b["correct"] == 1
    assert [i["id"] for i in b["results"]] == ["problem-0", "problem-1", "problem-2"]
    assert [i["response"]["result"] for i in b["results"]] == [
        "correct",
        "missing_unit",
        "incorrect",
    ]
    assert isinstance(b["duration_ms"], int) and b["duration_ms"] >= 0


def test_check_batch_client_duration():
    r = client.post("/check-batch", json={"items": [], "duration_ms": 1234})
    b = r.json()
    assert b["total"] == 0 and b["duration_ms"] == 1234
