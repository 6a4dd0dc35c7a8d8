def _only_session(store):
    assert len(store.sessions) == 1
    return next(iter(store.sessions.values()))


def test_home_page_sets_cookie(client):
    response = client.get("/")
    assert response.status_code == 200
    assert "始めましょう" in response.text
    assert "kotoba_session_id" in response.cookies


def test_navigate_to_quiz_generates_question(client, store):
    response = client.post("/navigate", data={"section": "quiz"})
    assert response.status_code == 200
    assert "점수" in response.text

    user = _only_session(store)
    assert user.view.section.value == "quiz"
    assert user.quiz.current_question is not None
    assert user.quiz.current_question.term in response.text


def test_navigate_unknown_section(client):
    response = client.post("/navigate", data={"section": "settings"})
    assert response.status_code == 400
    assert "error" in response.json()


def test_toggle_card(client, store):
    client.post("/navigate", data={"section": "vocab"})
    response = client.post("/cards/2/toggle")
    assert response.status_code == 200
    assert "さくら" in response.text
    assert _only_session(store).view.selected_card == 2

    client.post("/cards/2/toggle")
    assert _only_session(store).view.selected_card is None

    assert client.post("/cards/999/toggle").status_code == 404


def test_answer_form_reveals_result(client, store):
    client.post("/navigate", data={"section": "quiz"})
    question = _only_session(store).quiz.current_question

    response = client.post("/quiz/answer", data={"answer": question.correct_answer})
    assert "정답입니다" in response.text

    response = client.post("/quiz/next")
    quiz = _only_session(store).quiz
    assert quiz.answered is False
    assert (quiz.score, quiz.total) == (1, 1)


def test_api_quiz_flow(client, store):
    data = client.post("/api/quiz/next").json()
    assert data["state"] == "unanswered"
    assert len(data["question"]["options"]) == 4
    assert "correct_answer" not in data["question"]

    correct = _only_session(store).quiz.current_question.correct_answer
    outcome = client.post("/api/quiz/answer", data={"answer": correct}).json()
    assert outcome == {
        "recorded": True,
        "is_correct": True,
        "correct_answer": correct,
        "user_answer": correct,
    }

    repeat = client.post("/api/quiz/answer", data={"answer": "없음"}).json()
    assert repeat["recorded"] is False

    state = client.get("/api/quiz").json()
    assert state["state"] == "answered"
    assert state["question"]["correct_answer"] == correct
    assert (state["score"], state["total"]) == (1, 1)
    assert state["score_percentage"] == 100


def test_api_answer_before_question(client):
    outcome = client.post("/api/quiz/answer", data={"answer": "사랑"}).json()
    assert outcome["recorded"] is False
    assert client.get("/api/quiz").json()["total"] == 0


def test_api_skip_keeps_score(client):
    client.post("/api/quiz/next")
    data = client.post("/api/quiz/next").json()
    assert data["skipped"] == 1
    assert data["total"] == 0


def test_small_deck_is_server_error(client, vocab_dir):
    (vocab_dir / "tiny.csv").write_text(
        "term,reading,translation\n水,みず,물\n米,こめ,쌀\n肉,にく,고기\n",
        encoding="utf-8",
    )
    response = client.post("/api/quiz/next", data={"deck": "tiny"})
    assert response.status_code == 500
    assert "error" in response.json()


def test_unknown_deck(client):
    assert client.post("/api/quiz/next", data={"deck": "nope"}).status_code == 404
    assert client.get("/api/vocabulary", params={"deck": "nope"}).status_code == 404


def test_content_endpoints(client):
    vocabulary = client.get("/api/vocabulary").json()
    assert vocabulary["deck"] == "core"
    assert len(vocabulary["entries"]) == 12
    assert "자연" in vocabulary["categories"]

    grammar = client.get("/api/grammar").json()
    assert grammar[0]["pattern"] == "~です"

    decks = client.get("/api/decks").json()
    assert decks == [{"id": "core", "name": "Core", "count": 12}]


def test_reset(client, store):
    client.post("/api/quiz/next")
    assert client.post("/api/reset").json() == {"status": "success"}
    assert store.sessions == {}


def test_failed_deck_switch_keeps_previous_deck(client, store, vocab_dir):
    (vocab_dir / "tiny.csv").write_text(
        "term,reading,translation\n水,みず,물\n米,こめ,쌀\n肉,にく,고기\n",
        encoding="utf-8",
    )
    client.get("/")
    assert client.post("/api/quiz/next", data={"deck": "tiny"}).status_code == 500

    user = _only_session(store)
    assert user.deck == "core"
    assert user.quiz.current_question is None

    data = client.post("/api/quiz/next").json()
    assert data["deck"] == "core"
    assert data["state"] == "unanswered"

    response = client.post("/navigate", data={"section": "quiz"})
    assert response.status_code == 200


def test_failed_quiz_navigation_keeps_section(client, store, vocab_dir):
    (vocab_dir / "tiny.csv").write_text(
        "term,reading,translation\n水,みず,물\n米,こめ,쌀\n肉,にく,고기\n",
        encoding="utf-8",
    )
    client.post("/navigate", data={"section": "grammar"})
    _only_session(store).deck = "tiny"

    assert client.post("/navigate", data={"section": "quiz"}).status_code == 500
    assert _only_session(store).view.section.value == "grammar"


def test_read_only_requests_do_not_create_sessions(client, store):
    for _ in range(50):
        client.cookies.clear()
        assert client.get("/api/quiz").json()["state"] == "no_question"
        outcome = client.post("/api/quiz/answer", data={"answer": "사랑"}).json()
        assert outcome["recorded"] is False
        client.post("/quiz/answer", data={"answer": "사랑"}, follow_redirects=False)

    assert store.sessions == {}
