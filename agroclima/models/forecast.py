"""
Forecast Model
"""

from dataclasses import dataclass
from datetime import datetime, timedelta


@dataclass(frozen=True)
class ForecastDay:
    """One day of the multi-day forecast"""
    date: datetime
    temperature_min: float
    temperature_max: float
    humidity: float
    precipitation: float
    description: str
    icon: str
    
    def to_dict(self):
        return {
            'date': self.date.isoformat(),
            'temperature': {'min': self.temperature_min, 'max': self.temperature_max},
            'humidity': self.humidity,
            'precipitation': self.precipitation,
            'description': self.description,
            'icon': self.icon,
        }


# (min, max, humidity, rain chance %, description, icon) for today and the next four days
FORECAST_TEMPLATE = [
    (18, 26, 68, 10, 'Partly cloudy', '⛅'),
    (20, 28, 65, 5, 'Sunny', '☀️'),
    (17, 24, 75, 60, 'Light rain', '🌧️'),
    (19, 27, 62, 15, 'Partly cloudy', '⛅'),
    (21, 29, 58, 0, 'Sunny', '☀️'),
]


def default_forecast(now):
    """Return the fixed 5-day forecast starting at `now`."""
    return [
        ForecastDay(
            date=now + timedelta(hours=24 * offset),
            temperature_min=t_min,
            temperature_max=t_max,
            humidity=humidity,
            precipitation=rain,
            description=description,
            icon=icon,
        )
        for offset, (t_min, t_max, humidity, rain, description, icon) in enumerate(FORECAST_TEMPLATE)
    ]
