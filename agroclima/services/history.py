"""
Sliding History Buffer

Fixed-capacity, oldest-first window of the most recent readings.
"""

import threading
from collections import deque


class HistoryWindow:
    """Rolling window of readings; pushing past capacity evicts the oldest."""
    
    def __init__(self, capacity=24):
        if capacity < 1:
            raise ValueError(f'capacity must be >= 1, got {capacity}')
        self._capacity = capacity
        self._readings = deque(maxlen=capacity)
        self._lock = threading.Lock()
    
    @property
    def capacity(self):
        return self._capacity
    
    def push(self, reading):
        """Append `reading`; drops exactly one head element when full."""
        with self._lock:
            self._readings.append(reading)
    
    def extend(self, readings):
        with self._lock:
            self._readings.extend(readings)
    
    def snapshot(self):
        """Return a copy of the current contents, oldest first."""
        with self._lock:
            return list(self._readings)
    
    def latest(self):
        with self._lock:
            return self._readings[-1] if self._readings else None
    
    def previous(self):
        with self._lock:
            return self._readings[-2] if len(self._readings) > 1 else None
    
    def __len__(self):
        with self._lock:
            return len(self._readings)
    
    def __repr__(self):
        return f'<HistoryWindow {len(self)}/{self._capacity}>'
