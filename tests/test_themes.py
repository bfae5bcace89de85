import threading
import urllib.error

from monkeytype_cards.themes import (
    DEFAULT_THEME,
    ReadWriteLock,
    Theme,
    ThemeCache,
    ThemeResolver,
    normalize_theme_name,
    parse_theme_css,
)

from conftest import FakeBackend

SERIKA_CSS = """
:root {
  --bg-color: #323437;
  --main-color: #e2b714;
  --caret-color: #e2b714;
  --sub-color: #646669;
  --sub-alt-color: #2c2e31;
  --text-color: #d1d0c5;
  --error-color: #ca4754;
}
"""


def test_unreachable_theme_returns_default_palette():
    resolver = ThemeResolver(fetch=FakeBackend())
    theme = resolver.resolve('does not exist')
    assert theme == DEFAULT_THEME
    assert (theme.bg_color, theme.main_color, theme.sub_color, theme.text_color) == (
        '#2c2e31', '#e2b714', '#646669', '#d1d0c5'
    )


def test_failures_are_not_cached():
    backend = FakeBackend({'nord.css': urllib.error.URLError('timed out')})
    resolver = ThemeResolver(fetch=backend)
    resolver.resolve('nord')
    resolver.resolve('nord')
    assert len(backend.calls) == 2
    assert 'nord' not in resolver.cache


def test_non_200_falls_back_without_caching():
    backend = FakeBackend({'nord.css': (204, '')})
    resolver = ThemeResolver(fetch=backend)
    assert resolver.resolve('nord') == DEFAULT_THEME
    assert len(resolver.cache) == 0


def test_bg_declaration_overrides_only_background():
    theme = parse_theme_css('custom', ':root { --bg-color: #111111; }')
    assert theme.bg_color == '#111111'
    assert theme.main_color == DEFAULT_THEME.main_color
    assert theme.sub_color == DEFAULT_THEME.sub_color
    assert theme.text_color == DEFAULT_THEME.text_color
    assert theme.name == 'custom'


def test_parses_all_four_colors_and_ignores_other_keys():
    theme = parse_theme_css('serika', SERIKA_CSS)
    assert theme == Theme('serika', '#323437', '#e2b714', '#646669', '#d1d0c5')


def test_empty_or_malformed_css_yields_default_colors():
    theme = parse_theme_css('broken', '--bg-color: red; --main-color: #zz;')
    assert (theme.bg_color, theme.main_color) == (DEFAULT_THEME.bg_color, DEFAULT_THEME.main_color)


def test_short_and_alpha_hex_are_accepted():
    theme = parse_theme_css('x', '--main-color:#fff; --text-color: #11223344;')
    assert theme.main_color == '#fff'
    assert theme.text_color == '#11223344'


def test_second_resolve_is_served_from_cache():
    backend = FakeBackend({'/nord.css': (200, '--bg-color: #242933;')})
    resolver = ThemeResolver(fetch=backend)
    first = resolver.resolve('nord')
    second = resolver.resolve('nord')
    assert first is second
    assert first.bg_color == '#242933'
    assert len(backend.calls) == 1


def test_empty_stylesheet_is_still_cached():
    backend = FakeBackend({'/plain.css': (200, 'body { margin: 0; }')})
    resolver = ThemeResolver(fetch=backend)
    resolver.resolve('plain')
    resolver.resolve('plain')
    assert len(backend.calls) == 1
    assert resolver.cache.get('plain').bg_color == DEFAULT_THEME.bg_color


def test_spaces_are_normalized_to_underscores():
    backend = FakeBackend({'/serika_dark.css': (200, SERIKA_CSS)})
    resolver = ThemeResolver(fetch=backend)
    theme = resolver.resolve('serika dark')
    assert normalize_theme_name('Serika Dark') == 'Serika_Dark'
    assert theme.name == 'serika_dark'
    assert backend.calls[0].endswith('/themes/serika_dark.css')
    # both spellings share one cache entry
    resolver.resolve('serika_dark')
    assert len(backend.calls) == 1


def test_caches_are_independent_per_resolver():
    backend = FakeBackend({'/nord.css': (200, '--bg-color: #242933;')})
    ThemeResolver(fetch=backend).resolve('nord')
    ThemeResolver(fetch=backend).resolve('nord')
    assert len(backend.calls) == 2


def test_shared_cache_across_resolvers():
    cache = ThemeCache()
    backend = FakeBackend({'/nord.css': (200, '--bg-color: #242933;')})
    ThemeResolver(cache=cache, fetch=backend).resolve('nord')
    ThemeResolver(cache=cache, fetch=backend).resolve('nord')
    assert len(backend.calls) == 1


def test_timeout_is_passed_to_fetch():
    seen = []

    def fetch(url, timeout):
        seen.append(timeout)
        return 200, b''

    ThemeResolver(fetch=fetch, timeout=5).resolve('dark')
    assert seen == [5]


def test_concurrent_resolves_return_consistent_theme():
    backend = FakeBackend({'/nord.css': (200, '--bg-color: #242933;')})
    resolver = ThemeResolver(fetch=backend)
    results = []

    def worker():
        results.append(resolver.resolve('nord'))

    threads = [threading.Thread(target=worker) for _ in range(16)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(results) == 16
    assert {r.bg_color for r in results} == {'#242933'}
    assert resolver.cache.get('nord').bg_color == '#242933'


def test_read_write_lock_allows_concurrent_readers():
    lock = ReadWriteLock()
    inside = threading.Barrier(2, timeout=2)

    def reader():
        with lock.read():
            inside.wait()

    threads = [threading.Thread(target=reader) for _ in range(2)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert not inside.broken


def test_writer_waits_for_reader():
    lock = ReadWriteLock()
    order = []
    reading = threading.Event()
    release = threading.Event()

    def reader():
        with lock.read():
            reading.set()
            release.wait(2)
            order.append('read')

    def writer():
        with lock.write():
            order.append('write')

    r = threading.Thread(target=reader)
    r.start()
    reading.wait(2)
    w = threading.Thread(target=writer)
    w.start()
    release.set()
    r.join()
    w.join()
    assert order == ['read', 'write']
