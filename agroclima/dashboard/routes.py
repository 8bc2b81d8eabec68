"""
Dashboard Routes

Station telemetry, history, statistics and forecast endpoints.
"""

import logging
from flask import jsonify, redirect, request, url_for
from agroclima.dashboard import dashboard_bp
from agroclima.dashboard.services import forecast_payload, get_overview, reading_payload
from agroclima.extensions import telemetry
from agroclima.services import daily_summary, field_statistics

logger = logging.getLogger(__name__)

MAX_GENERATED_HOURS = 24 * 30


@dashboard_bp.route('/')
def index():
    """Redirect to the overview"""
    return redirect(url_for('dashboard.overview'))


@dashboard_bp.route('/api/overview')
def overview():
    """Station, KPI tiles, alert summary and day summary"""
    return jsonify(get_overview(telemetry.state))


@dashboard_bp.route('/api/current')
def current():
    """Latest reading with its KPI classification"""
    current, previous, kpis = telemetry.state.engine.state()
    return jsonify({
        'current': reading_payload(current),
        'previous': reading_payload(previous),
        'kpis': kpis,
    })


@dashboard_bp.route('/api/history')
def history():
    """Contents of the rolling window, oldest first"""
    window = telemetry.state.engine.window
    readings = window.snapshot()
    return jsonify({
        'capacity': window.capacity,
        'count': len(readings),
        'readings': [r.to_dict() for r in readings],
    })


@dashboard_bp.route('/api/history/generate')
def generate():
    """Fresh synthetic hourly series; does not touch the window"""
    try:
        hours = int(request.args.get('hours', 24))
    except ValueError:
        hours = None
    
    if hours is None or hours < 0 or hours > MAX_GENERATED_HOURS:
        return jsonify({
            'error': True,
            'message': f'hours must be an integer between 0 and {MAX_GENERATED_HOURS}',
        }), 400
    
    readings = telemetry.state.engine.history(hours)
    return jsonify({'hours': hours, 'readings': [r.to_dict() for r in readings]})


@dashboard_bp.route('/api/summary')
def summary():
    """Day summary over the rolling window"""
    return jsonify(daily_summary(telemetry.state.engine.window.snapshot()))


@dashboard_bp.route('/api/stats/<field>')
def stats(field):
    """Max, min and mean of one metric over the rolling window"""
    readings = telemetry.state.engine.window.snapshot()
    try:
        return jsonify(field_statistics(readings, field))
    except KeyError:
        return jsonify({'error': True, 'message': f'Unknown metric: {field}'}), 404


@dashboard_bp.route('/api/refresh', methods=['POST'])
def refresh():
    """Take one reading now, outside the scheduler"""
    engine = telemetry.state.engine
    reading = engine.tick()
    logger.info('Manual refresh produced %s', reading.id)
    current, _, kpis = engine.state()
    return jsonify({'current': reading_payload(current), 'kpis': kpis})


@dashboard_bp.route('/api/station')
def station():
    return jsonify(telemetry.state.station.to_dict())


@dashboard_bp.route('/api/forecast')
def forecast():
    """5-day forecast with rain-chance buckets"""
    return jsonify(forecast_payload(telemetry.state.forecast))
