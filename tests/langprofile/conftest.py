"""
Shared fixtures for the language profile tests.

Real resources need model files, a Java runtime or downloaded spaCy
models, so profiles under test get fake loaders unless a test builds
the real handle over a temporary directory.
"""

import threading
import time

import pytest

from langprofile import config as lp_config
from langprofile.base import ResourceHandle
from langprofile.config import ProfileConfig
from langprofile.resources import ResourceLoaders


class FakeHandle(ResourceHandle):
    """Resource handle that records how it was built and closed."""

    RESOURCE_NAME = "fake"

    def __init__(self, *locator, **options):
        super().__init__()
        self.locator = locator
        self.options = options
        self.close_calls = 0

    def close(self):
        self.close_calls += 1
        super().close()

    def get_status(self):
        return {'resource': self.RESOURCE_NAME, 'closed': self.is_closed}


class FakeWord2VecModel(FakeHandle):
    RESOURCE_NAME = "fake word2vec model"

    def confusion_set_dirs(self):
        return []


class CountingLoader:
    """
    Loader that counts calls, optionally sleeps and fails the first N times.
    """

    def __init__(self, handle_cls=FakeHandle, delay: float = 0.0, failures: int = 0):
        self.handle_cls = handle_cls
        self.delay = delay
        self.failures = failures
        self.calls = 0
        self.handles = []
        self._lock = threading.Lock()

    def __call__(self, *locator, **options):
        with self._lock:
            self.calls += 1
            fail = self.calls <= self.failures
        if self.delay:
            time.sleep(self.delay)
        if fail:
            raise OSError("resource location not readable")
        handle = self.handle_cls(*locator, **options)
        self.handles.append(handle)
        return handle


def run_concurrently(func, count: int = 16):
    """Start count threads at the same time; return (results, errors)."""
    barrier = threading.Barrier(count)
    results = [None] * count
    errors = []

    def worker(i):
        barrier.wait()
        try:
            results[i] = func()
        except Exception as e:
            errors.append(e)

    threads = [threading.Thread(target=worker, args=(i,)) for i in range(count)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    return results, errors


@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    """Isolate every test from the environment and the global config."""
    for var in ('LANGPROFILE_CONFIG', 'LP_NGRAM_DIR', 'LP_WORD2VEC_DIR',
                'LP_COMPOUND_DICTIONARY', 'LP_LANGUAGETOOL_ENABLED',
                'LP_LANGUAGETOOL_SERVER', 'LP_LONG_SENTENCE_MAX_WORDS',
                'LP_LOG_LEVEL', 'LP_LOG_FORMAT'):
        monkeypatch.delenv(var, raising=False)
    lp_config.reset_config()
    yield
    lp_config.reset_config()


@pytest.fixture
def profile_config(tmp_path) -> ProfileConfig:
    """Configuration pointing every resource at a temporary directory."""
    config = ProfileConfig()
    config.resources.ngram_dir = str(tmp_path / "ngrams")
    config.resources.word2vec_dir = str(tmp_path / "word2vec")
    config.resources.compound_dictionary = str(tmp_path / "compounds.txt")
    return config


@pytest.fixture
def loaders():
    """Fake loaders with call counters, one per resource kind."""
    return ResourceLoaders(
        language_model=CountingLoader(),
        word2vec_model=CountingLoader(FakeWord2VecModel),
        compound_tokenizer=CountingLoader(),
        grammar_backend=CountingLoader(),
        spacy_pipeline=CountingLoader(),
    )


@pytest.fixture
def german(profile_config, loaders):
    """Plain German profile with fake resources."""
    from langprofile.profile import German
    profile = German(profile_config, loaders)
    yield profile
    profile.close()


@pytest.fixture
def context(german):
    return german.create_context()
