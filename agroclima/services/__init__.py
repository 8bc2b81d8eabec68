"""
Services Package

Exports all services for easy importing.
"""

from agroclima.services.classify import (
    bucketize, trend_of, temperature_bucket, humidity_bucket, uv_bucket,
    precipitation_bucket, severity_rank, severity_label, classify_reading,
)
from agroclima.services.simulation import generate_current, generate_history
from agroclima.services.history import HistoryWindow
from agroclima.services.stats import (
    EmptyWindowError, max_of, min_of, mean_of, field_statistics, daily_summary, forecast_summary,
    round_half_up,
)
from agroclima.services.alerts import AlertBoard, default_alerts
from agroclima.services.engine import TelemetryEngine
from agroclima.services.scheduler import RefreshScheduler

__all__ = [
    'bucketize',
    'trend_of',
    'temperature_bucket',
    'humidity_bucket',
    'uv_bucket',
    'precipitation_bucket',
    'severity_rank',
    'severity_label',
    'classify_reading',
    'generate_current',
    'generate_history',
    'HistoryWindow',
    'EmptyWindowError',
    'max_of',
    'min_of',
    'mean_of',
    'field_statistics',
    'daily_summary',
    'forecast_summary',
    'round_half_up',
    'AlertBoard',
    'default_alerts',
    'TelemetryEngine',
    'RefreshScheduler',
]
