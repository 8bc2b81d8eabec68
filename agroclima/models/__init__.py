"""
Models Package

Exports all models for easy importing.
"""

from agroclima.models.reading import Reading, METRIC_FIELDS, FIELD_KEYS, resolve_field
from agroclima.models.station import Station
from agroclima.models.alert import Alert, ALERT_TYPES, SEVERITIES
from agroclima.models.forecast import ForecastDay, default_forecast

__all__ = [
    'Reading',
    'METRIC_FIELDS',
    'FIELD_KEYS',
    'resolve_field',
    'Station',
    'Alert',
    'ALERT_TYPES',
    'SEVERITIES',
    'ForecastDay',
    'default_forecast',
]
