import uuid


def test_review_flow(client, student, word):
    response = client.post(
        f"/api/v1/review/{student.id}/words/{word.id}", json={"outcome": "KNOWN"}
    )
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "MASTERED"
    assert data["is_stranger"] is False
    assert data["familiarity_score"] == 80

    response = client.post(
        f"/api/v1/review/{student.id}/words/{word.id}", json={"outcome": "UNKNOWN"}
    )
    assert response.status_code == 200
    assert response.json()["familiarity_score"] == 70

    response = client.get(f"/api/v1/students/{student.id}/profile")
    assert response.status_code == 200
    profile = response.json()
    assert profile["xp"] == 12
    assert profile["level"] == 1
    assert profile["total_words_learned"] == 1
    assert [e["points"] for e in profile["recent_xp_events"]] == [2, 10]

    response = client.get(f"/api/v1/students/{student.id}/strangers")
    assert response.status_code == 200
    strangers = response.json()
    assert len(strangers) == 1
    assert strangers[0]["word"]["text"] == "resilient"


def test_review_unknown_word_returns_404(client, student):
    response = client.post(f"/api/v1/review/{student.id}/words/424242", json={"outcome": "KNOWN"})
    assert response.status_code == 404
    assert "error" in response.json()

    response = client.get(f"/api/v1/students/{student.id}/xp-events")
    assert response.status_code == 200
    assert response.json() == []


def test_review_rejects_unknown_outcome(client, student, word):
    response = client.post(
        f"/api/v1/review/{student.id}/words/{word.id}", json={"outcome": "SORT_OF"}
    )
    assert response.status_code == 422


def test_review_with_request_id_is_deduplicated(client, student, word):
    body = {"outcome": "KNOWN", "request_id": uuid.uuid4().hex}
    first = client.post(f"/api/v1/review/{student.id}/words/{word.id}", json=body)
    second = client.post(f"/api/v1/review/{student.id}/words/{word.id}", json=body)

    assert first.status_code == second.status_code == 200
    assert second.json()["correct_count"] == 1
    events = client.get(f"/api/v1/students/{student.id}/xp-events").json()
    assert len(events) == 1


def test_review_rejects_request_id_reused_for_another_word(client, student, make_word):
    apple, banana = make_word("apple"), make_word("banana")
    body = {"outcome": "KNOWN", "request_id": uuid.uuid4().hex}
    first = client.post(f"/api/v1/review/{student.id}/words/{apple.id}", json=body)
    second = client.post(f"/api/v1/review/{student.id}/words/{banana.id}", json=body)

    assert first.status_code == 200
    assert second.status_code == 400
    assert "error" in second.json()
    progress = client.get(f"/api/v1/review/{student.id}/words/{banana.id}").json()
    assert progress["progress"] is None


def test_progress_lookup_without_history(client, student, word):
    response = client.get(f"/api/v1/review/{student.id}/words/{word.id}")
    assert response.status_code == 200
    assert response.json() == {"progress": None}

    response = client.get(f"/api/v1/review/9999/words/{word.id}")
    assert response.status_code == 404


def test_word_detail(client, student, word):
    response = client.get(f"/api/v1/words/{word.id}/detail", params={"student_id": student.id})
    assert response.status_code == 200
    data = response.json()
    assert data["syllables"] == ["re", "sil", "ient"]
    assert data["progress"] is None
    assert data["profile"]["level"] == 1
    assert data["stranger_count"] == 0


def test_current_student_is_stable(client):
    first = client.get("/api/v1/students/current").json()
    second = client.get("/api/v1/students/current").json()
    assert first["id"] == second["id"]
    assert first["role"] == "STUDENT"


def test_teacher_routes_require_login(client):
    response = client.post("/api/v1/words", json={"text": "apple"})
    assert response.status_code == 401
    response = client.get("/api/v1/stats/students")
    assert response.status_code == 401


def test_teacher_login_with_wrong_password(client, monkeypatch):
    from lexigrow.config.settings import settings
    monkeypatch.setattr(settings, "TEACHER_PASSWORD", "let-me-in")

    response = client.post("/api/v1/teacher/login", json={"password": "guess"})
    assert response.status_code == 401
    assert "lexigrow_teacher" not in response.cookies


def test_teacher_login_without_configured_password(client, monkeypatch):
    from lexigrow.config.settings import settings
    monkeypatch.setattr(settings, "TEACHER_PASSWORD", None)

    response = client.post("/api/v1/teacher/login", json={"password": "anything"})
    assert response.status_code == 500


def test_teacher_manages_content_and_reads_stats(teacher_client, student):
    response = teacher_client.post("/api/v1/words", json={"text": "apple", "meaning_zh": "苹果"})
    assert response.status_code == 201
    apple = response.json()

    response = teacher_client.post("/api/v1/wordsets", json={
        "name": "Fruits", "story_zh": "从前有一个苹果", "word_ids": [apple["id"]]
    })
    assert response.status_code == 201
    assert [w["text"] for w in response.json()["words"]] == ["apple"]

    teacher_client.post(f"/api/v1/review/{student.id}/words/{apple['id']}", json={"outcome": "KNOWN"})

    response = teacher_client.get("/api/v1/stats/students")
    assert response.status_code == 200
    rows = response.json()
    assert len(rows) == 1
    assert rows[0]["known_logs"] == 1
    assert rows[0]["xp"] == 10

    response = teacher_client.get(f"/api/v1/stats/students/{student.id}")
    assert response.json()["mastered_words"] == 1

    teacher_client.post("/api/v1/teacher/logout")
    response = teacher_client.get("/api/v1/stats/students")
    assert response.status_code == 401


def test_list_words(client, make_word):
    make_word("apple")
    make_word("banana")
    response = client.get("/api/v1/words", params={"limit": 1})
    assert response.status_code == 200
    assert [w["text"] for w in response.json()] == ["banana"]
