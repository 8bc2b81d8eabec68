from datetime import datetime, timezone

import pytest

from agroclima import create_app
from agroclima.config import TestConfig
from agroclima.models import Reading


FIXED_NOW = datetime(2025, 6, 1, 12, 0, tzinfo=timezone.utc)


class MidpointRandom:
    """uniform() always returns the middle of the range."""

    def uniform(self, a, b):
        return (a + b) / 2


class OffsetRandom:
    """uniform() returns a value `offset` beyond the requested range."""

    def __init__(self, offset):
        self.offset = offset

    def uniform(self, a, b):
        return b + self.offset if self.offset > 0 else a + self.offset


def fixed_clock():
    return FIXED_NOW


def make_reading(temperature, idx=0, humidity=60.0, uv_index=5.0):
    return Reading(
        id=f'test-{idx}',
        timestamp=FIXED_NOW,
        temperature=temperature,
        humidity=humidity,
        pressure=1013.0,
        uv_index=uv_index,
        wind_speed=10.0,
        wind_direction=180,
        precipitation=0.0,
        light_level=500.0,
    )


class FixedClockConfig(TestConfig):
    CLOCK = staticmethod(fixed_clock)


@pytest.fixture()
def app():
    app = create_app(FixedClockConfig)
    yield app
    app.extensions['telemetry'].scheduler.stop()


@pytest.fixture()
def client(app):
    return app.test_client()
