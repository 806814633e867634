from types import SimpleNamespace

from apps.domains.results.services import grader


def key(n, qtype, *, option=None, answers=None, points=1.0):
    return SimpleNamespace(
        question_number=n,
        question_type=qtype,
        correct_option=option,
        correct_text_answers=answers,
        points_value=points,
    )


def answer(n, qtype, *, option=None, text=None):
    return SimpleNamespace(
        question_number=n,
        question_type=qtype,
        mcq_option=option,
        text_answer=text,
    )


def test_text_matching_ignores_case_and_whitespace():
    result = grader.grade(
        [key(1, "text", answers=["Paris"])],
        [answer(1, "text", text=" paris ")],
        max_score=1,
    )
    assert result.score == 1.0
    assert result.correct_count == 1


def test_text_matching_requires_membership():
    result = grader.grade(
        [key(1, "text", answers=["Paris", "파리"])],
        [answer(1, "text", text="London")],
        max_score=1,
    )
    assert result.score == 0.0


def test_mcq_matching_is_exact():
    keys = [key(1, "mcq", option=3), key(2, "mcq", option=3)]
    answers = [answer(1, "mcq", option=3), answer(2, "mcq", option=2)]

    result = grader.grade(keys, answers, max_score=2)

    assert result.score == 1.0
    assert [i.is_correct for i in result.items] == [True, False]


def test_unmatched_numbers_score_zero():
    keys = [key(1, "mcq", option=1, points=2.0)]
    answers = [answer(1, "mcq", option=1), answer(7, "mcq", option=1)]

    result = grader.grade(keys, answers, max_score=5)

    assert result.score == 2.0
    assert len(result.items) == 1


def test_max_score_comes_from_template_total():
    result = grader.grade([], [], max_score=20)
    assert result.score == 0.0
    assert result.max_score == 20.0


def test_points_value_is_awarded():
    keys = [key(1, "mcq", option=2, points=2.5), key(2, "text", answers=["blue"], points=4)]
    answers = [answer(1, "mcq", option=2), answer(2, "text", text="BLUE")]

    result = grader.grade(keys, answers, max_score=2)

    assert result.score == 6.5
    assert result.to_dict()["correct_count"] == 2


def test_wrong_answer_type_never_matches():
    result = grader.grade(
        [key(1, "mcq", option=2)],
        [answer(1, "text", text="2")],
        max_score=1,
    )
    assert result.score == 0.0


def test_blank_text_never_matches():
    assert grader.is_text_correct("   ", ["", "  "]) is False
    assert grader.is_text_correct(None, ["blue"]) is False
