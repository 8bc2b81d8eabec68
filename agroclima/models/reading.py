"""
Weather Reading Model
"""

from dataclasses import dataclass
from datetime import datetime


METRIC_FIELDS = (
    'temperature',
    'humidity',
    'pressure',
    'uv_index',
    'wind_speed',
    'wind_direction',
    'precipitation',
    'light_level',
)

# Display-layer key for each metric field
FIELD_KEYS = {
    'temperature': 'temperature',
    'humidity': 'humidity',
    'pressure': 'pressure',
    'uv_index': 'uvIndex',
    'wind_speed': 'windSpeed',
    'wind_direction': 'windDirection',
    'precipitation': 'precipitation',
    'light_level': 'lightLevel',
}


@dataclass(frozen=True)
class Reading:
    """A single timestamped multi-metric telemetry sample"""
    id: str
    timestamp: datetime
    temperature: float
    humidity: float
    pressure: float
    uv_index: float
    wind_speed: float
    wind_direction: float
    precipitation: float
    light_level: float
    
    def to_dict(self):
        data = {'id': self.id, 'timestamp': self.timestamp.isoformat()}
        for field in METRIC_FIELDS:
            data[FIELD_KEYS[field]] = getattr(self, field)
        return data
    
    def __repr__(self):
        return f'<Reading {self.id} T:{self.temperature} H:{self.humidity}>'


def resolve_field(name):
    """Map a metric name in either spelling (uv_index / uvIndex) to the field name."""
    if name in METRIC_FIELDS:
        return name
    for field, key in FIELD_KEYS.items():
        if key == name:
            return field
    raise KeyError(name)
