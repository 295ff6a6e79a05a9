"""
QuizFlow navigation: staging, advancing, going back, completion.
"""
from quiz import STATE_IN_PROGRESS, STATE_RESULTS, STATE_UNAVAILABLE, QuizFlow

from conftest import QUESTION_RECORDS


def new_flow():
    return QuizFlow.start(QUESTION_RECORDS)


def test_questions_start_sorted():
    flow = new_flow()
    assert [q.id for q in flow.questions] == ['q1', 'q2', 'q3']
    assert flow.state == STATE_IN_PROGRESS
    assert flow.position == 1 and flow.total == 3


def test_empty_question_list_is_unavailable():
    flow = QuizFlow.start([])
    assert flow.state == STATE_UNAVAILABLE
    assert flow.current_question is None
    assert flow.select_answer(3) is False
    assert flow.advance() is None
    assert flow.retreat() is False


def test_advance_without_selection_is_noop():
    flow = new_flow()
    assert flow.advance() is None
    assert flow.current_index == 0
    assert flow.answers == {}


def test_select_does_not_commit():
    flow = new_flow()
    assert flow.select_answer('4') is True
    assert flow.staged == 4
    assert flow.answers == {}


def test_select_rejects_values_outside_options():
    flow = new_flow()
    assert flow.select_answer(6) is False
    assert flow.select_answer('abc') is False
    assert flow.select_answer(None) is False
    assert flow.staged is None


def test_advance_commits_and_clears_staging():
    flow = new_flow()
    flow.select_answer(4)
    assert flow.advance() is None
    assert flow.answers == {'q1': 4}
    assert flow.current_index == 1
    assert flow.staged is None


def test_retreat_restores_recorded_answer():
    flow = new_flow()
    flow.select_answer(4)
    flow.advance()
    flow.select_answer(2)

    assert flow.retreat() is True
    assert flow.current_index == 0
    assert flow.staged == 4
    # staged-only value for q2 was not recorded
    assert 'q2' not in flow.answers


def test_retreat_at_first_question_is_noop():
    flow = new_flow()
    flow.select_answer(1)
    assert flow.retreat() is False
    assert flow.current_index == 0
    assert flow.staged == 1


def test_advance_restores_answer_after_going_back():
    flow = new_flow()
    flow.select_answer(4)
    flow.advance()
    flow.select_answer(2)
    flow.advance()
    flow.retreat()
    flow.retreat()

    flow.advance()
    assert flow.current_index == 1
    assert flow.staged == 2


def test_completion_happens_once():
    flow = new_flow()
    for value in (4, 2):
        flow.select_answer(value)
        assert flow.advance() is None
    flow.select_answer(5)

    completion = flow.advance()
    assert completion is not None
    assert completion.category == 'B'
    assert completion.mindset_score == 3.0
    assert completion.answers == {'q1': 4, 'q2': 2, 'q3': 5}
    assert flow.state == STATE_RESULTS

    assert flow.advance() is None
    assert flow.select_answer(1) is False
    assert flow.retreat() is False


def test_handoff_payload():
    flow = new_flow()
    for value in (5, 5, 1):
        flow.select_answer(value)
        completion = flow.advance()

    assert completion.to_handoff() == {
        'category': 'A',
        'mindset_score': 5.0,
        'answers': {'q1': 5, 'q2': 5, 'q3': 1},
    }


def test_flow_survives_session_serialisation():
    flow = new_flow()
    flow.select_answer(3)
    flow.advance()
    flow.select_answer(5)

    restored = QuizFlow.from_dict(flow.to_dict())
    assert restored.current_index == 1
    assert restored.staged == 5
    assert restored.answers == {'q1': 3}
    assert restored.questions == flow.questions
    assert restored.state == STATE_IN_PROGRESS


def test_select_rejects_bools_and_fractional_floats():
    flow = new_flow()
    assert flow.select_answer(True) is False
    assert flow.select_answer(3.9) is False
    assert flow.select_answer(float('nan')) is False
    assert flow.staged is None

    assert flow.select_answer(3.0) is True
    assert flow.staged == 3
