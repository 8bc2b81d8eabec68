"""
Aggregate Statistics

Max/min/mean over a window of readings and the dashboard day summary.
"""

import math

from agroclima.models import resolve_field


RAINY_DAY_CHANCE = 50


class EmptyWindowError(ValueError):
    """Raised when an aggregate is requested over no readings."""


def round_half_up(value):
    """Round to the nearest integer with exact halves going up."""
    return int(math.floor(value + 0.5))


def _values(readings, field):
    name = resolve_field(field)
    values = [getattr(r, name) for r in readings]
    if not values:
        raise EmptyWindowError(f'No readings available to aggregate {field}')
    return values


def max_of(readings, field):
    return max(_values(readings, field))


def min_of(readings, field):
    return min(_values(readings, field))


def mean_of(readings, field):
    values = _values(readings, field)
    return sum(values) / len(values)


def field_statistics(readings, field):
    """Return max, min and mean of one field as a dict."""
    return {
        'field': field,
        'max': max_of(readings, field),
        'min': min_of(readings, field),
        'mean': round(mean_of(readings, field), 2),
        'count': len(readings),
    }


def daily_summary(readings):
    """Summary shown beside the KPI tiles for the whole window."""
    return {
        'maxTemperature': max_of(readings, 'temperature'),
        'minTemperature': min_of(readings, 'temperature'),
        'meanHumidity': round_half_up(mean_of(readings, 'humidity')),
        'maxUvIndex': max_of(readings, 'uv_index'),
        'samples': len(readings),
    }


def forecast_summary(days):
    """Rounded means of the daily maxima and humidity, and the count of rainy days.
    
    A day is rainy when its rain chance is strictly above RAINY_DAY_CHANCE.
    """
    if not days:
        raise EmptyWindowError('No forecast days to summarise')
    return {
        'averageMaxTemperature': round_half_up(sum(d.temperature_max for d in days) / len(days)),
        'averageHumidity': round_half_up(sum(d.humidity for d in days) / len(days)),
        'rainyDays': sum(1 for d in days if d.precipitation > RAINY_DAY_CHANCE),
        'days': len(days),
    }
