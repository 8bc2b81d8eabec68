"""
Dashboard Blueprint

JSON endpoints consumed by the display layer.
"""

from flask import Blueprint

dashboard_bp = Blueprint('dashboard', __name__)

from agroclima.dashboard import routes  # noqa: E402, F401
