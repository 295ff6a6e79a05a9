# quiz.py
"""
Quiz model, scoring and navigation.

Everything here is independent of Flask: the web layer keeps a QuizFlow in
the user session (via to_dict/from_dict) and hands the records fetched from
the CMS to the functions below.
"""
from collections import OrderedDict
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

DEFAULT_CATEGORY = 'general'
OPTION_COUNT = 5
LIKERT_MAX = 5

STATE_UNAVAILABLE = 'unavailable'
STATE_IN_PROGRESS = 'in_progress'
STATE_RESULTS = 'results'


def _number(value, default):
    # bools are ints in Python but never a valid score or weight
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return default
    return value


def _order_key(value):
    # exports sometimes carry the order as text, e.g. "2"
    if isinstance(value, str):
        try:
            order = float(value)
        except ValueError:
            return 0
        # NaN would break the sort
        return order if order == order else 0
    return _number(value, 0)


# --- Data model ------------------------------------------------------------------
@dataclass
class Question:
    id: str
    text: str = ''
    order: float = 0
    category: str = ''
    weight: Optional[float] = None
    is_mindset: bool = False
    short_identifier: str = ''
    options: List[Tuple[str, int]] = field(default_factory=list)

    @classmethod
    def from_record(cls, record):
        """Build a Question from a 'quizquestions' CMS record."""
        options = []
        for n in range(1, OPTION_COUNT + 1):
            label = record.get(f'option{n}Text') or f'Option {n}'
            value = _number(record.get(f'option{n}Value'), n)
            options.append((label, int(value)))

        return cls(
            id=str(record.get('_id', '')),
            text=record.get('questionText') or '',
            order=_order_key(record.get('questionOrder')),
            category=record.get('questionCategory') or '',
            weight=record.get('questionWeight'),
            is_mindset=bool(record.get('isMindsetQuestion')),
            short_identifier=record.get('shortIdentifier') or '',
            options=options,
        )

    @classmethod
    def from_dict(cls, data):
        data = dict(data)
        data['options'] = [(label, int(value)) for label, value in data.get('options', [])]
        return cls(**data)

    def to_dict(self):
        return {
            'id': self.id,
            'text': self.text,
            'order': self.order,
            'category': self.category,
            'weight': self.weight,
            'is_mindset': self.is_mindset,
            'short_identifier': self.short_identifier,
            'options': [[label, value] for label, value in self.options],
        }

    @property
    def option_values(self):
        return [value for _, value in self.options]


def sort_questions(questions):
    """Ascending by order key; sorted() is stable so ties keep fetch order."""
    return sorted(questions, key=lambda q: q.order)


def load_questions(records):
    return sort_questions([Question.from_record(r) for r in records])


# --- Scoring ---------------------------------------------------------------------
def calculate_category_scores(questions, answers):
    """
    Weighted total per category, in order of first appearance.

    Unanswered questions still create their category entry with a zero
    contribution.
    """
    category_scores = OrderedDict()
    for question in questions:
        value = _number(answers.get(question.id), 0)
        weight = _number(question.weight, 0) or 1
        category = question.category or DEFAULT_CATEGORY
        category_scores[category] = category_scores.get(category, 0) + value * weight
    return category_scores


def calculate_mindset_score(questions, answers):
    total = 0
    count = 0
    for question in questions:
        if not question.is_mindset:
            continue
        value = _number(answers.get(question.id), 0)
        weight = _number(question.weight, 0) or 1
        total += value * weight
        count += 1
    return total / count if count else 0


def pick_category(category_scores):
    """Highest score wins; on a tie the category inserted first is kept."""
    winner = None
    best = None
    for category, score in category_scores.items():
        if best is None or score > best:
            winner, best = category, score
    return winner or DEFAULT_CATEGORY


def calculate_scores(questions, answers):
    """Reduce the answers to (result category, mindset score). Never raises."""
    category_scores = calculate_category_scores(questions, answers)
    return pick_category(category_scores), calculate_mindset_score(questions, answers)


# --- Result lookup ---------------------------------------------------------------
def find_result(records, category):
    """First 'quizresults' record whose category matches exactly, or None."""
    for record in records:
        if record.get('resultCategory') == category:
            return record
    return None


def mindset_level(score):
    if score >= 4:
        return 'Strong'
    if score >= 3:
        return 'Developing'
    return 'Needs Work'


def mindset_percent(score):
    percent = (_number(score, 0) / LIKERT_MAX) * 100
    return max(0, min(100, percent))


# --- Flow controller -------------------------------------------------------------
@dataclass
class Completion:
    category: str
    mindset_score: float
    answers: Dict[str, int]

    def to_handoff(self):
        return {
            'category': self.category,
            'mindset_score': self.mindset_score,
            'answers': dict(self.answers),
        }


class QuizFlow:
    """
    Steps through the questions one at a time.

    A value is first *staged* with select_answer() and only written to the
    answer record by advance(). Recorded answers are never removed, so going
    back and forth keeps every choice.
    """

    def __init__(self, questions, current_index=0, answers=None, staged=None, state=None):
        self.questions = list(questions)
        self.current_index = current_index
        self.answers = dict(answers or {})
        self.staged = staged
        if state is None:
            state = STATE_IN_PROGRESS if self.questions else STATE_UNAVAILABLE
        self.state = state

    @classmethod
    def start(cls, records):
        return cls(load_questions(records))

    @classmethod
    def from_dict(cls, data):
        return cls(
            [Question.from_dict(q) for q in data.get('questions', [])],
            current_index=data.get('current_index', 0),
            answers=data.get('answers'),
            staged=data.get('staged'),
            state=data.get('state'),
        )

    def to_dict(self):
        return {
            'questions': [q.to_dict() for q in self.questions],
            'current_index': self.current_index,
            'answers': dict(self.answers),
            'staged': self.staged,
            'state': self.state,
        }

    # -- read helpers --
    @property
    def total(self):
        return len(self.questions)

    @property
    def current_question(self):
        if not self.questions:
            return None
        return self.questions[self.current_index]

    @property
    def position(self):
        return self.current_index + 1

    @property
    def is_first(self):
        return self.current_index == 0

    @property
    def is_last(self):
        return self.current_index == self.total - 1

    # -- navigation --
    def select_answer(self, value):
        """Stage `value` for the current question. Returns False if rejected."""
        if self.state != STATE_IN_PROGRESS:
            return False
        if isinstance(value, bool):
            return False
        if isinstance(value, float):
            if not value.is_integer():
                return False
        try:
            value = int(value)
        except (TypeError, ValueError):
            return False
        if value not in self.current_question.option_values:
            return False
        self.staged = value
        return True

    def advance(self):
        """
        Commit the staged value and move on.

        Returns a Completion when the last question is committed, None
        otherwise (including when nothing is staged).
        """
        if self.state != STATE_IN_PROGRESS or self.staged is None:
            return None

        self.answers[self.current_question.id] = self.staged

        if not self.is_last:
            self.current_index += 1
            self.staged = self.answers.get(self.current_question.id)
            return None

        self.state = STATE_RESULTS
        self.staged = None
        category, mindset_score = calculate_scores(self.questions, self.answers)
        return Completion(category, mindset_score, dict(self.answers))

    def retreat(self):
        if self.state != STATE_IN_PROGRESS or self.is_first:
            return False
        self.current_index -= 1
        self.staged = self.answers.get(self.current_question.id)
        return True
