"""
Weather Alert Model
"""

from dataclasses import dataclass
from datetime import datetime


ALERT_TYPES = ('temperature', 'humidity', 'pressure', 'uv', 'wind')
SEVERITIES = ('low', 'medium', 'high')


@dataclass
class Alert:
    """Alert raised for a station metric; only ever dismissed, never removed"""
    id: str
    type: str
    severity: str
    message: str
    timestamp: datetime
    is_active: bool = True
    
    def __post_init__(self):
        if self.type not in ALERT_TYPES:
            raise ValueError(f'Unknown alert type: {self.type}')
        if self.severity not in SEVERITIES:
            raise ValueError(f'Unknown alert severity: {self.severity}')
    
    def to_dict(self):
        return {
            'id': self.id,
            'type': self.type,
            'severity': self.severity,
            'message': self.message,
            'timestamp': self.timestamp.isoformat(),
            'isActive': self.is_active,
        }
    
    def __repr__(self):
        return f'<Alert {self.id} {self.type}:{self.severity} active={self.is_active}>'
