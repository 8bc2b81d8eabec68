"""
Alert Routes

Listing and dismissal of station alerts.
"""

from flask import jsonify
from agroclima.alerts import alerts_bp
from agroclima.dashboard.services import alert_payload, alert_summary
from agroclima.extensions import telemetry


@alerts_bp.route('')
def list_alerts():
    """All alerts plus the active summary"""
    board = telemetry.state.alerts
    data = alert_summary(board)
    data['alerts'] = [alert_payload(a) for a in board.all()]
    return jsonify(data)


@alerts_bp.route('/<alert_id>/dismiss', methods=['POST'])
def dismiss_alert(alert_id):
    """Dismiss an alert. Unknown ids are a no-op, not an error."""
    board = telemetry.state.alerts
    alert = board.dismiss(alert_id)
    return jsonify({
        'dismissed': alert is not None,
        'alert': alert_payload(alert) if alert is not None else None,
        'counts': board.severity_counts(),
    })
