"""
pytest configuration shared by all tests
"""
import os

import pytest

os.environ.setdefault('FLASK_ENV', 'testing')

from app import app as flask_app  # noqa: E402
from cms import CrudService  # noqa: E402


def make_record(_id, order, category, weight=1, mindset=False):
    record = {
        '_id': _id,
        'questionText': f'Question {_id}',
        'questionOrder': order,
        'questionCategory': category,
        'questionWeight': weight,
        'isMindsetQuestion': mindset,
    }
    for n in range(1, 6):
        record[f'option{n}Text'] = f'Choice {n}'
        record[f'option{n}Value'] = n
    return record


QUESTION_RECORDS = [
    make_record('q3', 3, 'B', weight=2),
    make_record('q1', 1, 'A', mindset=True),
    make_record('q2', 2, 'A', mindset=True),
]

RESULT_RECORDS = [
    {'_id': 'r-a', 'resultCategory': 'A', 'resultTitle': 'ALPHA PATH', 'shortDescription': 'Alpha summary',
     'guidanceText': 'Alpha guidance', 'recommendationTitle': 'Alpha course',
     'recommendationUrl': 'https://example.com/alpha'},
    {'_id': 'r-b', 'resultCategory': 'B', 'resultTitle': 'BRAVO PATH', 'shortDescription': 'Bravo summary',
     'guidanceText': 'Bravo guidance', 'recommendationTitle': '', 'recommendationUrl': ''},
    {'_id': 'r-b2', 'resultCategory': 'B', 'resultTitle': 'DUPLICATE BRAVO'},
]


@pytest.fixture
def app():
    flask_app.config.update(TESTING=True, SECRET_KEY='testing')
    yield flask_app


@pytest.fixture
def use_cms(app, monkeypatch):
    """Swap the record store behind the app for the duration of a test"""
    def _use(service):
        monkeypatch.setitem(app.extensions, 'cms', service)
        return service
    return _use


@pytest.fixture
def client(app, use_cms):
    use_cms(CrudService(collections={
        'quizquestions': QUESTION_RECORDS,
        'quizresults': RESULT_RECORDS,
    }))
    return app.test_client()
