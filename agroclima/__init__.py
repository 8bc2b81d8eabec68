"""
AgroClima Weather Station - Application Factory

This module provides the Flask application factory pattern for creating
and configuring the application instance.
"""

from flask import Flask, jsonify
from agroclima.extensions import telemetry
from agroclima.config import Config
from agroclima.services import EmptyWindowError


def create_app(config_class=Config):
    """Create and configure the Flask application.
    
    Args:
        config_class: Configuration class to use (default: Config)
    
    Returns:
        Configured Flask application instance
    """
    app = Flask(__name__)
    app.config.from_object(config_class)
    app.json.sort_keys = False
    
    # Initialize extensions
    telemetry.init_app(app)
    
    # Register blueprints
    from agroclima.alerts import alerts_bp
    from agroclima.dashboard import dashboard_bp
    
    app.register_blueprint(alerts_bp, url_prefix='/api/alerts')
    app.register_blueprint(dashboard_bp)
    
    # JSON errors for aggregate queries on an empty window
    @app.errorhandler(EmptyWindowError)
    def empty_window(error):
        return jsonify({'error': True, 'message': str(error)}), 409
    
    return app
