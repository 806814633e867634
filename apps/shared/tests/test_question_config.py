import pytest

from apps.api.common.errors import OutOfRange, ValidationError
from apps.shared.contracts.question_config import (
    MCQ,
    TEXT,
    QuestionConfig,
    initialize,
    resize,
    set_type,
)


@pytest.mark.parametrize("mcq,text", [(0, 0), (1, 0), (0, 1), (20, 5), (3, 7)])
def test_initialize_layout(mcq, text):
    config = initialize(mcq, text)

    assert config.total == mcq + text
    assert config.mcq_count == mcq
    assert config.text_count == text
    assert [e.question_number for e in config.entries] == list(range(1, mcq + text + 1))
    assert all(e.type == MCQ for e in config.entries[:mcq])
    assert all(e.type == TEXT for e in config.entries[mcq:])


def test_initialize_rejects_negative_counts():
    with pytest.raises(ValidationError):
        initialize(-1, 2)


@pytest.mark.parametrize("new_total", [0, 1, 3, 5, 8, 12])
def test_resize_keeps_surviving_types(new_total):
    config = initialize(2, 3)
    set_type(config, 1, TEXT)
    set_type(config, 4, MCQ)
    before = {e.question_number: e.type for e in config.entries}

    resized = resize(config, new_total)

    assert resized.total == new_total
    assert [e.question_number for e in resized.entries] == list(range(1, new_total + 1))
    for entry in resized.entries:
        if entry.question_number in before:
            assert entry.type == before[entry.question_number]
        else:
            assert entry.type == MCQ


def test_resize_does_not_mutate_original():
    config = initialize(1, 1)
    resize(config, 5)
    assert config.total == 2


def test_set_type_updates_counts():
    config = initialize(3, 0)
    set_type(config, 2, TEXT)

    assert config.type_of(2) == TEXT
    assert config.mcq_count == 2
    assert config.text_count == 1


@pytest.mark.parametrize("number", [0, 4, -1, 100])
def test_set_type_out_of_range(number):
    config = initialize(2, 1)
    with pytest.raises(OutOfRange):
        set_type(config, number, TEXT)


def test_set_type_rejects_unknown_type():
    config = initialize(2, 1)
    with pytest.raises(ValidationError):
        set_type(config, 1, "essay")


def test_from_list_sorts_and_validates():
    config = QuestionConfig.from_list([
        {"question_number": 2, "type": "text"},
        {"question_number": 1, "type": "MCQ"},
    ])
    assert config.to_list() == [
        {"question_number": 1, "type": "mcq"},
        {"question_number": 2, "type": "text"},
    ]


@pytest.mark.parametrize("raw", [
    [{"question_number": 1, "type": "mcq"}, {"question_number": 3, "type": "mcq"}],
    [{"question_number": 1, "type": "mcq"}, {"question_number": 1, "type": "text"}],
    [{"question_number": 1, "type": "essay"}],
    [{"question_number": "x", "type": "mcq"}],
    ["not-an-object"],
])
def test_from_list_rejects_bad_configs(raw):
    with pytest.raises(ValidationError):
        QuestionConfig.from_list(raw)
