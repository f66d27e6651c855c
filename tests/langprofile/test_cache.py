"""
Tests for the Shared Resource Cache
===================================
Tests for initialize-once, retry-after-failure and release semantics of
ResourceCache and ComputeOnce.
"""

import pytest

from langprofile.cache import ComputeOnce, ResourceCache

from .conftest import CountingLoader, FakeHandle, run_concurrently


class TestResourceCache:
    """Tests for ResourceCache."""

    def test_lazy_construction(self):
        loader = CountingLoader()
        cache = ResourceCache('language_model', loader)
        assert not cache.is_loaded
        assert loader.calls == 0

        handle = cache.get('/data/ngrams/de')
        assert cache.is_loaded
        assert loader.calls == 1
        assert handle.locator == ('/data/ngrams/de',)

    def test_second_get_returns_same_handle(self):
        loader = CountingLoader()
        cache = ResourceCache('language_model', loader)
        assert cache.get('a') is cache.get('a')
        assert loader.calls == 1

    def test_locator_ignored_once_loaded(self):
        loader = CountingLoader()
        cache = ResourceCache('language_model', loader)
        first = cache.get('a')
        assert cache.get('b') is first
        assert first.locator == ('a',)

    def test_concurrent_first_access_constructs_once(self):
        loader = CountingLoader(delay=0.05)
        cache = ResourceCache('word2vec_model', loader)

        results, errors = run_concurrently(lambda: cache.get('/data/w2v/de'))

        assert errors == []
        assert loader.calls == 1
        assert all(r is results[0] for r in results)
        assert cache.get_status()['constructions'] == 1

    def test_failure_is_not_cached(self):
        loader = CountingLoader(failures=1)
        cache = ResourceCache('language_model', loader)

        with pytest.raises(OSError):
            cache.get('/missing')
        assert not cache.is_loaded

        handle = cache.get('/data/ngrams/de')
        assert isinstance(handle, FakeHandle)
        assert loader.calls == 2

    def test_concurrent_callers_after_failure(self):
        loader = CountingLoader(delay=0.01, failures=1)
        cache = ResourceCache('language_model', loader)

        results, errors = run_concurrently(lambda: cache.get('x'), count=8)

        # exactly one caller saw the failure; the rest share one handle
        assert len(errors) == 1
        handles = [r for r in results if r is not None]
        assert len(handles) == 7
        assert all(h is handles[0] for h in handles)
        assert loader.calls == 2

    def test_release_closes_handle(self):
        loader = CountingLoader()
        cache = ResourceCache('language_model', loader)
        handle = cache.get('a')

        cache.release()
        assert handle.is_closed
        assert handle.close_calls == 1
        assert not cache.is_loaded

    def test_release_is_idempotent(self):
        loader = CountingLoader()
        cache = ResourceCache('language_model', loader)
        handle = cache.get('a')

        cache.release()
        cache.release()
        assert handle.close_calls == 1

    def test_release_without_handle(self):
        cache = ResourceCache('language_model', CountingLoader())
        cache.release()
        assert not cache.is_loaded

    def test_get_after_release_reconstructs(self):
        loader = CountingLoader()
        cache = ResourceCache('language_model', loader)
        first = cache.get('a')
        cache.release()

        second = cache.get('a')
        assert second is not first
        assert loader.calls == 2
        assert not second.is_closed

    def test_custom_closer(self):
        closed = []
        cache = ResourceCache('tagger', lambda: object(), closer=closed.append)
        handle = cache.get()
        cache.release()
        assert closed == [handle]

    def test_get_status(self):
        cache = ResourceCache('tagger', CountingLoader())
        status = cache.get_status()
        assert status == {'kind': 'tagger', 'loaded': False, 'constructions': 0}


class TestComputeOnce:
    """Tests for ComputeOnce."""

    def test_computes_once(self):
        calls = []
        once = ComputeOnce('rules')

        def compute():
            calls.append(1)
            return ['rule']

        first = once.get_or_compute(compute)
        second = once.get_or_compute(compute)
        assert first is second
        assert len(calls) == 1
        assert once.is_computed

    def test_later_compute_function_is_ignored(self):
        once = ComputeOnce('rules')
        first = once.get_or_compute(lambda: ['a'])
        assert once.get_or_compute(lambda: ['b']) is first

    def test_failure_is_not_memoized(self):
        once = ComputeOnce('rules')

        def broken():
            raise ValueError("boom")

        with pytest.raises(ValueError):
            once.get_or_compute(broken)
        assert not once.is_computed
        assert once.get_or_compute(lambda: ['ok']) == ['ok']

    def test_concurrent_compute_once(self):
        once = ComputeOnce('rules')
        loader = CountingLoader(delay=0.05)

        results, errors = run_concurrently(lambda: once.get_or_compute(loader))

        assert errors == []
        assert loader.calls == 1
        assert all(r is results[0] for r in results)
