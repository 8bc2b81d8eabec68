"""
Refresh Scheduler

Periodic background ticker that drives the telemetry engine.
"""

import logging
import threading

logger = logging.getLogger(__name__)


class RefreshScheduler:
    """Calls `callback` every `interval` seconds on a daemon thread."""
    
    def __init__(self, interval, callback, name='telemetry-refresh'):
        if interval <= 0:
            raise ValueError(f'interval must be > 0, got {interval}')
        self.interval = interval
        self.callback = callback
        self.name = name
        self._stop = threading.Event()
        self._thread = None
        self._lock = threading.Lock()
    
    @property
    def running(self):
        return self._thread is not None and self._thread.is_alive()
    
    def start(self):
        with self._lock:
            if self.running:
                return False
            self._stop.clear()
            self._thread = threading.Thread(target=self._run, name=self.name, daemon=True)
            self._thread.start()
        logger.info('Refresh scheduler started (every %ss)', self.interval)
        return True
    
    def stop(self, timeout=None):
        """Halt further ticks. Safe to call more than once."""
        with self._lock:
            thread = self._thread
            self._thread = None
            self._stop.set()
        if thread is None:
            return False
        if thread is not threading.current_thread():
            thread.join(timeout)
        logger.info('Refresh scheduler stopped')
        return True
    
    def _run(self):
        while not self._stop.wait(self.interval):
            try:
                self.callback()
            except Exception:
                logger.exception('Refresh callback failed')
