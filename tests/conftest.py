import os
import sys
from pathlib import Path
from typing import Dict, List

import pytest

# Qt widgets need a platform plugin; default to offscreen for headless runs
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

# Add src to sys.path so we can import composer_quiz
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from composer_quiz.core.models import Composer, PuzzleAnswer, QueryResult, Work
from composer_quiz.providers.base import AnswerOracle, CandidateProvider
from composer_quiz.providers.queries import QueryRunner


class FakeProvider(CandidateProvider):
    """In-memory candidate provider that records calls."""

    def __init__(self, composers: List[Composer], works: Dict[int, List[Work]], prefixes=None):
        self._composers = composers
        self._works = works
        self._prefixes = prefixes or {}
        self.calls: List[tuple] = []

    def list_composers(self) -> List[Composer]:
        self.calls.append(("composers",))
        return list(self._composers)

    def list_works_by_composer(self, composer_id: int) -> List[Work]:
        self.calls.append(("works", composer_id))
        if composer_id not in self._works:
            raise KeyError(f"no works for composer {composer_id}")
        return list(self._works[composer_id])

    @property
    def catalog_prefixes(self):
        return self._prefixes


class StaticOracle(AnswerOracle):
    """Answer oracle whose result is set directly by the test."""

    def __init__(self, result: QueryResult):
        self.result = result

    def current_answer(self) -> QueryResult:
        return self.result


class DeferredRunner(QueryRunner):
    """Query runner that holds requests until the test resolves them."""

    def __init__(self):
        super().__init__(threaded=False)
        self.pending: Dict[object, object] = {}

    def submit(self, key, fetch) -> None:
        self.pending[key] = fetch

    def resolve(self, key) -> None:
        fetch = self.pending.pop(key)
        self._run_inline(key, fetch)

    def fail(self, key, message: str = "boom") -> None:
        self.pending.pop(key)
        self.failed.emit(key, message)


# Common test fixtures
@pytest.fixture
def bach():
    return Composer(id=1, full_name="Bach")


@pytest.fixture
def mozart():
    return Composer(id=2, full_name="Mozart")


@pytest.fixture
def cello_suite():
    return Work(id=10, composer_id=1, opus="1007", work_title="Cello Suite")


@pytest.fixture
def brandenburg():
    return Work(id=11, composer_id=1, opus="1048", work_title="Brandenburg Concerto No. 3")


@pytest.fixture
def nachtmusik():
    return Work(id=20, composer_id=2, opus="525", work_title="Eine kleine Nachtmusik")


@pytest.fixture
def provider(bach, mozart, cello_suite, brandenburg, nachtmusik):
    """Mozart listed first to check the engine sorts composers."""
    return FakeProvider(
        composers=[mozart, bach],
        works={1: [cello_suite, brandenburg], 2: [nachtmusik]},
        prefixes={1: "BWV "},
    )


@pytest.fixture
def answer(cello_suite):
    return PuzzleAnswer(composer_id=1, work=cello_suite)


@pytest.fixture
def oracle(answer):
    return StaticOracle(QueryResult.success(answer))


@pytest.fixture
def inline_runner(qapp):
    return QueryRunner(threaded=False)


@pytest.fixture
def deferred_runner(qapp):
    return DeferredRunner()


@pytest.fixture
def make_provider():
    """Factory for in-memory providers with custom data."""
    return FakeProvider
