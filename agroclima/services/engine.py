"""
Telemetry Engine

Ties the sample generator, the history window and the classifier together.
"""

import logging
import threading
from agroclima.services.classify import classify_reading
from agroclima.services.history import HistoryWindow
from agroclima.services.simulation import generate_current, generate_history

logger = logging.getLogger(__name__)


class TelemetryEngine:
    """Holds the current reading, its predecessor and the rolling window."""
    
    def __init__(self, capacity=24, rng=None, clock=None):
        self.window = HistoryWindow(capacity)
        self.rng = rng
        self.clock = clock
        self.current = None
        self.previous = None
        self._lock = threading.Lock()
    
    def bootstrap(self):
        """Fill the window with `capacity` hourly readings ending now."""
        history = generate_history(self.window.capacity - 1, rng=self.rng, clock=self.clock)
        self.window.extend(history)
        with self._lock:
            self.current = history[-1]
            self.previous = history[-2] if len(history) > 1 else None
        logger.info('Telemetry engine bootstrapped with %d readings', len(history))
        return history
    
    def tick(self):
        """Generate a new current reading and push it into the window."""
        reading = generate_current(rng=self.rng, clock=self.clock)
        with self._lock:
            self.previous = self.current
            self.current = reading
            self.window.push(reading)
        logger.debug('Tick %s: %.1f°C %.1f%%', reading.id, reading.temperature, reading.humidity)
        return reading
    
    def kpis(self):
        return self.state()[2]
    
    def state(self):
        """Current reading, its predecessor and their KPI tiles from one consistent view."""
        with self._lock:
            current, previous = self.current, self.previous
        kpis = classify_reading(current, previous) if current is not None else {}
        return current, previous, kpis
    
    def history(self, hours):
        """Fresh synthetic series that does not touch the window."""
        return generate_history(hours, rng=self.rng, clock=self.clock)
