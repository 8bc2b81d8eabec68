"""
Alert Board Service

In-memory alert collection with dismissal and per-severity tallies.
"""

import logging
import threading
from datetime import timedelta
from agroclima.models import Alert, SEVERITIES
from agroclima.services.classify import severity_rank

logger = logging.getLogger(__name__)


def default_alerts(now):
    """Alerts the station starts with."""
    return [
        Alert(id='alert-1', type='temperature', severity='medium',
              message='High temperature detected: 28.5°C',
              timestamp=now - timedelta(hours=2)),
        Alert(id='alert-2', type='humidity', severity='low',
              message='Humidity below average: 45%',
              timestamp=now - timedelta(hours=4)),
        Alert(id='alert-3', type='uv', severity='high',
              message='Extreme UV index: 9.2',
              timestamp=now - timedelta(hours=1)),
    ]


class AlertBoard:
    """Ordered alert collection. Alerts are dismissed, never removed."""
    
    def __init__(self, alerts=None):
        self._alerts = list(alerts or [])
        self._lock = threading.Lock()
    
    def all(self):
        with self._lock:
            return list(self._alerts)
    
    def get(self, alert_id):
        with self._lock:
            for alert in self._alerts:
                if alert.id == alert_id:
                    return alert
        return None
    
    def dismiss(self, alert_id):
        """Mark the alert inactive. Unknown ids are ignored and return None."""
        alert = self.get(alert_id)
        if alert is None:
            logger.debug('Dismiss ignored, no alert with id %s', alert_id)
            return None
        with self._lock:
            alert.is_active = False
        logger.info('Alert %s dismissed', alert_id)
        return alert
    
    def active(self):
        return [a for a in self.all() if a.is_active]
    
    def sorted_active(self):
        """Active alerts, most severe first, newest first within a severity."""
        return sorted(
            self.active(),
            key=lambda a: (severity_rank(a.severity), a.timestamp),
            reverse=True,
        )
    
    def severity_counts(self):
        counts = {severity: 0 for severity in reversed(SEVERITIES)}
        for alert in self.active():
            counts[alert.severity] += 1
        return counts
    
    def __len__(self):
        return len(self.all())
