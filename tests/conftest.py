import pytest

from word_suggester.core.engine import SuggestionEngine


@pytest.fixture
def engine():
    return SuggestionEngine()


@pytest.fixture
def apples():
    e = SuggestionEngine()
    e.insert_many([("apple", 5), ("app", 3), ("apt", 1)])
    return e
