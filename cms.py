# cms.py
"""
Read-only record store standing in for the site CMS.

Records are plain dicts keyed by the CMS field names and grouped by
collection id ('quizquestions', 'quizresults').
"""
import json
import logging
from copy import deepcopy

from content.quiz_questions import QUIZ_QUESTIONS
from content.quiz_results import QUIZ_RESULTS

logger = logging.getLogger(__name__)

DEFAULT_COLLECTIONS = {
    'quizquestions': QUIZ_QUESTIONS,
    'quizresults': QUIZ_RESULTS,
}


class CrudServiceError(Exception):
    """Raised when a collection cannot be read."""


class CrudService:
    def __init__(self, collections=None, data_file=None):
        self._collections = collections
        self._data_file = data_file

    @classmethod
    def from_config(cls, app_config):
        data_file = app_config.get('CMS_DATA_FILE')
        if data_file:
            return cls(data_file=data_file)
        return cls(collections=DEFAULT_COLLECTIONS)

    def _load(self):
        if self._collections is not None:
            return self._collections

        # file is re-read on every call so edits show up without a restart
        try:
            with open(self._data_file, encoding='utf-8') as fh:
                data = json.load(fh)
        except (OSError, ValueError) as e:
            raise CrudServiceError(f"Cannot read CMS data file {self._data_file}: {e}") from e

        if not isinstance(data, dict):
            raise CrudServiceError(f"CMS data file {self._data_file} must hold an object of collections")
        return data

    def get_all(self, collection):
        """Return copies of every record in `collection`, in stored order."""
        collections = self._load()
        if collection not in collections:
            raise CrudServiceError(f"Unknown collection: {collection}")

        items = collections[collection]
        if not isinstance(items, list):
            raise CrudServiceError(f"Collection {collection} is not a list of records")
        if not all(isinstance(item, dict) for item in items):
            raise CrudServiceError(f"Collection {collection} holds a record that is not an object")

        logger.debug("Fetched %d records from %s", len(items), collection)
        return deepcopy(items)
