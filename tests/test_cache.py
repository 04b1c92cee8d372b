"""Tests for the transform cache."""

from concurrent.futures import ThreadPoolExecutor

from css_var_fallback.core.cache import TransformCache, memoized_transform_content
from css_var_fallback.core.transform import transform_content
from css_var_fallback.core.value_sources import MappingValueSource


class CountingTransform:
    def __init__(self):
        self.calls = 0

    def __call__(self, content, source):
        self.calls += 1
        return transform_content(content, source)


def test_identical_input_returns_identical_object():
    transform = CountingTransform()
    cache = TransformCache(transform=transform)
    content = "font-size: var( --font, 14px );"

    first = cache.get(content)
    second = cache.get(content)

    assert first == "font-size:14px;font-size: var( --font, 14px );"
    assert second is first
    assert transform.calls == 1
    assert (cache.hits, cache.misses) == (1, 1)


def test_changed_input_recomputes():
    transform = CountingTransform()
    cache = TransformCache(transform=transform)

    cache.get("font-size: var( --font, 14px );")
    cache.get("font-size: var( --font, 15px );")

    assert transform.calls == 2
    assert len(cache) == 2


def test_no_transform_results_are_cached_too():
    transform = CountingTransform()
    cache = TransformCache(transform=transform)

    assert cache.get("font-size:14px;") is None
    assert cache.get("font-size:14px;") is None
    assert transform.calls == 1
    assert "font-size:14px;" in cache


def test_root_scope_change_invalidates_entries():
    root = MappingValueSource()
    cache = TransformCache(root)
    content = "background: var( --bg, white );"

    assert cache.get(content) == "background:white;background: var( --bg, white );"

    root.set_property("--bg", "black")
    assert cache.get(content) == "background:black;background: var( --bg, white );"


def test_clear():
    cache = TransformCache()
    cache.get("color: var(--fg, red);")
    cache.clear()

    assert len(cache) == 0


def test_memoized_transform_content():
    content = "filter: var( --blur, blur(20px) );"

    result = memoized_transform_content(content)

    assert result == "filter:blur(20px);filter: var( --blur, blur(20px) );"
    assert memoized_transform_content(content) is result


def test_size_and_membership_during_concurrent_gets():
    cache = TransformCache()
    contents = [f"margin: var(--gap, {n}px);" for n in range(20)]

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(cache.get, contents * 5))
        sizes = list(pool.map(lambda _: len(cache), range(20)))

    assert results[0] == "margin:0px;margin: var(--gap, 0px);"
    assert len(cache) == 20
    assert all(0 <= size <= 20 for size in sizes)
    assert all(content in cache for content in contents)
    assert "margin: var(--gap, 99px);" not in cache
