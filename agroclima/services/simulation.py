"""
Weather Data Simulation Service

Generates synthetic station readings from sinusoidal base curves plus
bounded random noise.
"""

import math
import random
from datetime import datetime, timedelta, timezone
from agroclima.models import Reading


def utc_now():
    return datetime.now(timezone.utc)


def _sources(rng, clock):
    return (rng if rng is not None else random), (clock if clock is not None else utc_now)


def generate_current(rng=None, clock=None):
    """
    Simulate the live reading for "now".
    
    Args:
        rng: Object exposing uniform(a, b); defaults to the `random` module
        clock: Callable returning the current aware datetime
    """
    rng, clock = _sources(rng, clock)
    now = clock()
    
    return Reading(
        id=f'current-{int(now.timestamp() * 1000)}',
        timestamp=now,
        temperature=round(22 + rng.uniform(-2, 2), 1),
        humidity=round(65 + rng.uniform(-5, 5), 1),
        pressure=round(1015 + rng.uniform(-4, 4), 1),
        uv_index=round(max(0, 6 + rng.uniform(-1, 1)), 1),
        wind_speed=round(max(0, 12 + rng.uniform(-3, 3)), 1),
        wind_direction=round(rng.uniform(0, 360)),
        precipitation=round(max(0, rng.uniform(0, 1)), 1),
        light_level=round(max(0, 600 + rng.uniform(-100, 100)), 1),
    )


def generate_history(hours=24, rng=None, clock=None):
    """
    Simulate hourly readings for the last `hours` hours.
    
    Returns hours + 1 readings, oldest first, one hour apart and ending
    at the current instant. Humidity and pressure are not clamped.
    """
    if hours < 0:
        raise ValueError(f'hours must be >= 0, got {hours}')
    
    rng, clock = _sources(rng, clock)
    now = clock()
    readings = []
    
    for i in range(hours, -1, -1):
        base_temp = 20 + 8 * math.sin(0.2 * i)
        
        readings.append(Reading(
            id=f'data-{i}',
            timestamp=now - timedelta(hours=i),
            temperature=round(base_temp + rng.uniform(-2, 2), 1),
            humidity=round(60 + 20 * math.sin(0.15 * i) + rng.uniform(-5, 5), 1),
            pressure=round(1013 + 10 * math.sin(0.1 * i) + rng.uniform(-2.5, 2.5), 1),
            uv_index=round(max(0, 5 + 3 * math.sin(0.3 * i) + rng.uniform(-1, 1)), 1),
            wind_speed=round(max(0, 10 + 5 * math.sin(0.25 * i) + rng.uniform(-1.5, 1.5)), 1),
            wind_direction=round(rng.uniform(0, 360)),
            precipitation=round(max(0, rng.uniform(0, 2)), 1),
            light_level=round(max(0, 500 + 300 * math.sin(0.2 * i) + rng.uniform(-50, 50)), 1),
        ))
    
    return readings
