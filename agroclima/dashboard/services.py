"""
Dashboard Services

Aggregation of engine state into the payloads served by the dashboard.
"""

from agroclima.services import (
    EmptyWindowError, daily_summary, forecast_summary, precipitation_bucket, severity_label,
)
from agroclima.services.classify import BUCKET_COLORS


def reading_payload(reading):
    return reading.to_dict() if reading is not None else None


def alert_payload(alert):
    data = alert.to_dict()
    data['severityLabel'] = severity_label(alert.severity)
    return data


def alert_summary(board):
    """Active alerts (most severe first) and their per-severity tallies."""
    active = board.sorted_active()
    return {
        'active': [alert_payload(a) for a in active],
        'activeCount': len(active),
        'counts': board.severity_counts(),
    }


def forecast_payload(days):
    items = []
    for day in days:
        data = day.to_dict()
        bucket = precipitation_bucket(day.precipitation)
        data['precipitationBucket'] = bucket
        data['precipitationColor'] = BUCKET_COLORS['precipitation'][bucket]
        items.append(data)
    
    return {
        'days': items,
        'summary': forecast_summary(days) if days else None,
    }


def get_overview(state):
    """Everything the main dashboard view shows at once."""
    engine = state.engine
    current, _, kpis = engine.state()
    readings = engine.window.snapshot()
    
    try:
        summary = daily_summary(readings)
    except EmptyWindowError:
        summary = None
    
    return {
        'station': state.station.to_dict(),
        'current': reading_payload(current),
        'kpis': kpis,
        'alerts': alert_summary(state.alerts),
        'summary': summary,
        'scheduler': {
            'running': state.scheduler.running,
            'intervalSeconds': state.scheduler.interval,
        },
    }
