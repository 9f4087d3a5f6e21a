import threading

import pytest

import identicon
import live_preview


def test_single_request_is_delivered(surface_factory):
    delivered = []
    renderer = live_preview.LatestOnlyRenderer(
        surface_factory, lambda surface, raw: delivered.append((surface, raw)))
    assert renderer.request("alice").result(timeout=5) is True
    renderer.shutdown()

    (surface, raw_string), = delivered
    assert raw_string == "alice"
    assert surface.calls[0] == ("clear",)
    assert len(surface.calls) > 1


def test_only_newest_request_is_delivered(surface_factory):
    release = threading.Event()
    first_started = threading.Event()
    made = []

    def blocking_factory():
        made.append(None)
        if len(made) == 1:
            first_started.set()
            release.wait(5)
        return surface_factory()

    delivered = []
    renderer = live_preview.LatestOnlyRenderer(
        blocking_factory, lambda surface, raw: delivered.append(raw))
    first = renderer.request("a")
    assert first_started.wait(5)
    second = renderer.request("b")
    third = renderer.request("c")
    release.set()

    results = [f.result(timeout=5) for f in (first, second, third)]
    renderer.shutdown()
    assert results == [False, False, True]
    assert delivered == ["c"]
    # "b" was superseded before it started, so it never got a surface.
    assert len(made) == 2


def test_errors_surface_through_the_future(surface_factory):
    delivered = []
    renderer = live_preview.LatestOnlyRenderer(
        lambda: surface_factory(300, 200), lambda surface, raw: delivered.append(raw))
    future = renderer.request("alice")
    with pytest.raises(identicon.ConfigError):
        future.result(timeout=5)
    renderer.shutdown()
    assert delivered == []


def test_grid_size_and_salt_are_passed_through(surface_factory):
    delivered = []
    renderer = live_preview.LatestOnlyRenderer(
        surface_factory, lambda surface, raw: delivered.append(surface),
        grid_size=3, salt="ali")
    renderer.request("ce").result(timeout=5)
    renderer.shutdown()

    expected = surface_factory()
    identicon.IdenticonGenerator(expected, grid_size=3).generate("alice")
    assert delivered[0].calls == expected.calls


def test_on_ready_can_queue_another_request(surface_factory):
    delivered = []
    follow_ups = []

    def on_ready(surface, raw_string):
        delivered.append(raw_string)
        if raw_string == "alice":
            follow_ups.append(renderer.request("alice2"))

    renderer = live_preview.LatestOnlyRenderer(surface_factory, on_ready)
    assert renderer.request("alice").result(timeout=5) is True
    assert follow_ups[0].result(timeout=5) is True
    renderer.shutdown()
    assert delivered == ["alice", "alice2"]
