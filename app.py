"""
AgroClima Weather Station Dashboard
Application Entry Point

This file serves as the entry point for the Flask application.
It uses the application factory pattern defined in the agroclima package.
"""

import logging
from agroclima import create_app
from agroclima.config import Config

logging.basicConfig(
    level=getattr(logging, Config.LOG_LEVEL.upper(), logging.INFO),
    format='%(asctime)s %(levelname)s %(name)s: %(message)s',
)

# Create the Flask application using the factory
app = create_app()

if __name__ == '__main__':
    # The reloader would start a second refresh scheduler
    app.run(debug=True, host='0.0.0.0', port=5000, use_reloader=False)
