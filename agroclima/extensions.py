"""
Flask Extensions

The telemetry extension keeps all station state in memory on the
application object; nothing is persisted.
"""

import atexit
import logging
import random
from flask import current_app
from agroclima.models import Station, default_forecast
from agroclima.services import AlertBoard, RefreshScheduler, TelemetryEngine, default_alerts
from agroclima.services.simulation import utc_now

logger = logging.getLogger(__name__)


class TelemetryState:
    """Per-application bundle of station, engine, alerts, forecast and scheduler."""
    
    def __init__(self, station, engine, alerts, forecast, scheduler):
        self.station = station
        self.engine = engine
        self.alerts = alerts
        self.forecast = forecast
        self.scheduler = scheduler


class Telemetry:
    """Flask extension that owns the synthetic telemetry engine."""
    
    def __init__(self, app=None):
        if app is not None:
            self.init_app(app)
    
    def init_app(self, app):
        seed = app.config.get('RANDOM_SEED')
        rng = random.Random(seed) if seed is not None else None
        clock = app.config.get('CLOCK') or utc_now
        now = clock()
        
        engine = TelemetryEngine(capacity=app.config['HISTORY_CAPACITY'], rng=rng, clock=clock)
        engine.bootstrap()
        
        scheduler = RefreshScheduler(app.config['REFRESH_INTERVAL_SECONDS'], engine.tick)
        
        state = TelemetryState(
            station=Station.from_config(app.config),
            engine=engine,
            alerts=AlertBoard(default_alerts(now)),
            forecast=default_forecast(now),
            scheduler=scheduler,
        )
        app.extensions['telemetry'] = state
        
        if app.config.get('START_SCHEDULER'):
            scheduler.start()
            atexit.register(scheduler.stop)
        
        logger.info('Telemetry ready for station %s', state.station.id)
    
    @property
    def state(self):
        return current_app.extensions['telemetry']


# Telemetry state for the active application
telemetry = Telemetry()
