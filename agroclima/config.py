"""
Configuration settings for the AgroClima weather station dashboard
"""
import os


class Config:
    """Flask application configuration"""
    
    # Station descriptor (reference data, not generated)
    STATION_ID = os.environ.get('STATION_ID') or 'station-001'
    STATION_NAME = os.environ.get('STATION_NAME') or 'AgroClima Vega - Viveros El Jardín'
    STATION_LAT = float(os.environ.get('STATION_LAT') or 19.2237)
    STATION_LNG = float(os.environ.get('STATION_LNG') or -70.5287)
    STATION_ACTIVE = os.environ.get('STATION_ACTIVE', 'true').lower() in ('1', 'true', 'yes')
    
    # Telemetry engine settings
    HISTORY_CAPACITY = int(os.environ.get('HISTORY_CAPACITY') or 24)
    REFRESH_INTERVAL_SECONDS = float(os.environ.get('REFRESH_INTERVAL_SECONDS') or 5)
    START_SCHEDULER = os.environ.get('START_SCHEDULER', 'true').lower() in ('1', 'true', 'yes')
    RANDOM_SEED = int(os.environ['RANDOM_SEED']) if os.environ.get('RANDOM_SEED') else None
    
    LOG_LEVEL = os.environ.get('LOG_LEVEL') or 'INFO'


class TestConfig(Config):
    """Testing configuration"""
    TESTING = True
    START_SCHEDULER = False
    RANDOM_SEED = 42
    HISTORY_CAPACITY = 24
