import pytest

from const import PALETTE, RIPPLE_MAX_RADIUS
from engine.input.touch_registry import RippleMarker, TouchPointRegistry, color_for_id


def test_start_then_snapshot(registry):
    registry.on_contact_start(5, 10, 20)
    snap = registry.snapshot()
    assert len(snap) == 1
    p = snap[0]
    assert p.id == 5
    assert p.position == (10.0, 20.0)
    assert p.color == PALETTE[5 % len(PALETTE)]
    assert len(p.ripples) == 1
    assert p.ripples[0].alpha == 1.0
    assert p.ripples[0].radius == 0.0


def test_move_updates_position_only(registry, clock):
    registry.on_contact_start(5, 10, 20)
    clock.advance(100)
    assert registry.on_contact_move(5, 30, 40) is True
    p = registry.snapshot()[0]
    assert p.id == 5
    assert p.position == (30.0, 40.0)
    assert p.color == color_for_id(5)
    assert len(p.ripples) == 1


def test_move_for_unknown_id_is_noop(registry):
    registry.on_contact_start(1, 1, 1)
    before = registry.snapshot()
    assert registry.on_contact_move(99, 0, 0) is False
    assert registry.snapshot() == before


def test_end_removes_point(registry):
    registry.on_contact_start(5, 10, 20)
    registry.on_contact_start(6, 50, 60)
    assert registry.on_contact_end(5) == 1
    ids = [p.id for p in registry.snapshot()]
    assert ids == [6]
    assert 5 not in registry


def test_end_for_unknown_id_is_noop(registry):
    registry.on_contact_start(2, 0, 0)
    assert registry.on_contact_end(42) == 0
    assert len(registry) == 1


def test_snapshot_keeps_touch_down_order(registry, clock):
    for pid in (3, 0, 7):
        registry.on_contact_start(pid, pid, pid)
        clock.advance(5)
    assert [p.id for p in registry.snapshot()] == [3, 0, 7]


def test_duplicate_start_replaces_existing(registry, clock):
    registry.on_contact_start(4, 1, 1)
    registry.on_contact_start(8, 2, 2)
    clock.advance(50)
    registry.on_contact_start(4, 9, 9)
    snap = registry.snapshot()
    assert [p.id for p in snap] == [8, 4]
    assert snap[1].position == (9.0, 9.0)
    assert registry.get(4).start_time == clock.now


def test_id_can_be_reused_after_end(registry, clock):
    registry.on_contact_start(1, 0, 0)
    registry.on_contact_end(1)
    clock.advance(10)
    registry.on_contact_start(1, 5, 5)
    assert len(registry) == 1
    assert registry.get(1).position == (5.0, 5.0)


def test_color_wraps_palette():
    assert color_for_id(0) == PALETTE[0]
    assert color_for_id(len(PALETTE)) == PALETTE[0]
    assert color_for_id(len(PALETTE) + 2) == PALETTE[2]


def test_custom_palette(clock):
    reg = TouchPointRegistry(clock=clock, palette=[(1, 2, 3), (4, 5, 6)])
    assert reg.on_contact_start(3, 0, 0).color == (4, 5, 6)


def test_ripple_curve():
    r = RippleMarker(start_time=1000)
    assert r.radius(1000) == 0.0
    assert r.alpha(1000) == 1.0
    assert r.radius(1500) == pytest.approx(50.0)
    assert r.alpha(1500) == pytest.approx(0.5)
    assert r.alpha(2000) == pytest.approx(0.0)
    assert r.radius(2500) == pytest.approx(150.0)
    assert r.radius(4000) == RIPPLE_MAX_RADIUS
    assert r.radius(60_000) == RIPPLE_MAX_RADIUS
    assert r.alpha(60_000) == 0.0


def test_ripple_expiry_boundary():
    r = RippleMarker(start_time=0)
    assert not r.is_expired(1000)
    assert r.is_expired(1001)


def test_ripple_before_start_is_clamped():
    r = RippleMarker(start_time=500)
    assert r.radius(400) == 0.0
    assert r.alpha(400) == 1.0


def test_add_ripple_same_ms_overwrites(registry):
    registry.on_contact_start(2, 0, 0)
    registry.add_ripple(2)
    assert len(registry.get(2).ripples) == 1


def test_add_ripple_accumulates(registry, clock):
    registry.on_contact_start(2, 0, 0)
    clock.advance(200)
    marker = registry.add_ripple(2)
    assert marker.start_time == clock.now
    assert len(registry.get(2).ripples) == 2


def test_add_ripple_unknown_id(registry):
    assert registry.add_ripple(11) is None


def test_start_prunes_other_points(registry, clock):
    registry.on_contact_start(1, 0, 0)
    clock.advance(1500)
    registry.on_contact_start(2, 0, 0)
    # pruned as a side effect of the second touch-down
    assert registry.get(1).ripples == {}
    assert len(registry.get(2).ripples) == 1


def test_expired_ripples_linger_until_pruned(registry, clock):
    registry.on_contact_start(1, 0, 0)
    clock.advance(1200)
    assert len(registry.get(1).ripples) == 1
    assert registry.prune() == 1
    assert registry.get(1).ripples == {}


def test_snapshot_prunes(registry, clock):
    registry.on_contact_start(1, 0, 0)
    clock.advance(900)
    registry.add_ripple(1)
    clock.advance(200)
    snap = registry.snapshot()
    # point survives even with its first ripple gone
    assert len(snap) == 1
    assert len(snap[0].ripples) == 1
    assert snap[0].ripples[0].radius == pytest.approx(20.0)


def test_clear(registry):
    registry.on_contact_start(1, 0, 0)
    registry.on_contact_start(2, 0, 0)
    registry.clear()
    assert registry.snapshot() == []


def test_iteration_is_a_copy(registry):
    registry.on_contact_start(1, 0, 0)
    registry.on_contact_start(2, 0, 0)
    for p in registry:
        registry.on_contact_end(p.id)
    assert len(registry) == 0
