import json

from app import app
from questions import get_questions_dir, load_questions, sample_questions


def write_questions(directory, name, questions):
    (directory / name).write_text(json.dumps(questions), encoding="utf-8")


def make_questions(start, count):
    return [{"id": i, "question": f"Question {i}?"} for i in range(start, start + count)]


def test_random20_from_large_corpus(client, questions_dir):
    write_questions(questions_dir, "a.json", make_questions(0, 15))
    write_questions(questions_dir, "b.json", make_questions(15, 15))

    for _ in range(2):
        response = client.get("/random20")
        assert response.status_code == 200
        questions = response.json()
        assert len(questions) == 20
        assert [q["questionNumber"] for q in questions] == list(range(1, 21))
        assert len({q["id"] for q in questions}) == 20
        assert all(q["question"] == f"Question {q['id']}?" for q in questions)


def test_random20_returns_whole_small_corpus(client, questions_dir):
    write_questions(questions_dir, "few.json", make_questions(0, 5))

    questions = client.get("/random20").json()

    assert [q["questionNumber"] for q in questions] == [1, 2, 3, 4, 5]
    assert sorted(q["id"] for q in questions) == [0, 1, 2, 3, 4]


def test_random20_empty_corpus(client):
    response = client.get("/random20")

    assert response.status_code == 200
    assert response.json() == []


def test_random20_bad_json(client, questions_dir):
    (questions_dir / "broken.json").write_text("[{", encoding="utf-8")

    response = client.get("/random20")

    assert response.status_code == 500
    assert response.json()["message"]


def test_random20_missing_directory(client, tmp_path):
    app.dependency_overrides[get_questions_dir] = lambda: str(tmp_path / "nowhere")

    response = client.get("/random20")

    assert response.status_code == 500
    assert "nowhere" in response.json()["message"]


def test_all_questions_in_file_order(client, questions_dir):
    write_questions(questions_dir, "b.json", make_questions(3, 2))
    write_questions(questions_dir, "a.json", make_questions(0, 3))

    response = client.get("/questions")

    assert response.status_code == 200
    assert [q["id"] for q in response.json()] == [0, 1, 2, 3, 4]


def test_random_question(client, questions_dir):
    corpus = make_questions(0, 4)
    write_questions(questions_dir, "all.json", corpus)

    response = client.get("/random")

    assert response.status_code == 200
    assert response.json() in corpus


def test_random_question_empty_corpus(client):
    response = client.get("/random")

    assert response.status_code == 404
    assert response.json() == {"message": "No questions found"}


def test_load_questions_skips_subdirectories_and_appends_objects(questions_dir):
    (questions_dir / "nested").mkdir()
    write_questions(questions_dir, "list.json", make_questions(0, 2))
    write_questions(questions_dir, "single.json", {"id": 99, "question": "Alone?"})

    questions = load_questions(str(questions_dir))

    assert [q["id"] for q in questions] == [0, 1, 99]


def test_sample_questions_does_not_mutate_records():
    corpus = make_questions(0, 3)

    sampled = sample_questions(corpus, count=2)

    assert [q["questionNumber"] for q in sampled] == [1, 2]
    assert all("questionNumber" not in q for q in corpus)
