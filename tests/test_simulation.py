import random
from datetime import timedelta

import pytest

from agroclima.services import generate_current, generate_history
from conftest import FIXED_NOW, MidpointRandom, OffsetRandom, fixed_clock


@pytest.mark.parametrize('hours', [0, 1, 5, 24, 72])
def test_history_length_and_spacing(hours):
    readings = generate_history(hours, clock=fixed_clock)
    assert len(readings) == hours + 1
    assert readings[-1].timestamp == FIXED_NOW
    for older, newer in zip(readings, readings[1:]):
        assert newer.timestamp - older.timestamp == timedelta(hours=1)


def test_history_is_oldest_first_with_hour_offset_ids():
    readings = generate_history(3, clock=fixed_clock)
    assert [r.id for r in readings] == ['data-3', 'data-2', 'data-1', 'data-0']
    assert readings[0].timestamp == FIXED_NOW - timedelta(hours=3)


def test_history_rejects_negative_hours():
    with pytest.raises(ValueError):
        generate_history(-1)


def test_history_base_curves_without_noise():
    latest = generate_history(0, rng=MidpointRandom(), clock=fixed_clock)[0]
    assert latest.temperature == 20.0
    assert latest.humidity == 60.0
    assert latest.pressure == 1013.0
    assert latest.uv_index == 5.0
    assert latest.wind_speed == 10.0
    assert latest.wind_direction == 180
    assert latest.precipitation == 1.0
    assert latest.light_level == 500.0


def test_history_follows_sinusoid():
    readings = generate_history(5, rng=MidpointRandom(), clock=fixed_clock)
    # i = 5 hours back: 20 + 8 * sin(1.0)
    assert readings[0].temperature == 26.7
    assert readings[0].humidity == 73.6


def test_current_uses_live_constants():
    reading = generate_current(rng=MidpointRandom(), clock=fixed_clock)
    assert reading.timestamp == FIXED_NOW
    assert reading.id == f'current-{int(FIXED_NOW.timestamp() * 1000)}'
    assert reading.temperature == 22.0
    assert reading.humidity == 65.0
    assert reading.pressure == 1015.0
    assert reading.uv_index == 6.0
    assert reading.wind_speed == 12.0
    assert reading.precipitation == 0.5
    assert reading.light_level == 600.0


@pytest.mark.parametrize('seed', range(20))
def test_clamped_fields_never_negative(seed):
    rng = random.Random(seed)
    readings = generate_history(48, rng=rng) + [generate_current(rng=rng)]
    for r in readings:
        assert r.uv_index >= 0
        assert r.wind_speed >= 0
        assert r.precipitation >= 0
        assert r.light_level >= 0


def test_clamp_applies_to_extreme_low_noise():
    reading = generate_current(rng=OffsetRandom(-1000), clock=fixed_clock)
    assert reading.uv_index == 0
    assert reading.wind_speed == 0
    assert reading.precipitation == 0
    assert reading.light_level == 0


def test_humidity_and_pressure_are_left_unclamped():
    # Noise overshoot passes straight through for humidity and pressure
    reading = generate_history(0, rng=OffsetRandom(100), clock=fixed_clock)[0]
    assert reading.humidity > 100
    assert reading.pressure > 1013 + 100
    low = generate_history(0, rng=OffsetRandom(-100), clock=fixed_clock)[0]
    assert low.humidity < 0


def test_same_seed_gives_same_series():
    first = generate_history(10, rng=random.Random(3), clock=fixed_clock)
    second = generate_history(10, rng=random.Random(3), clock=fixed_clock)
    assert first == second


def test_values_are_rounded_to_one_decimal():
    for r in generate_history(24, rng=random.Random(11), clock=fixed_clock):
        assert round(r.temperature, 1) == r.temperature
        assert round(r.light_level, 1) == r.light_level
        assert r.wind_direction == int(r.wind_direction)
        assert 0 <= r.wind_direction <= 360
