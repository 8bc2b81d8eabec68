from datetime import timedelta

import pytest

from agroclima.models import Alert
from agroclima.services import AlertBoard, default_alerts
from conftest import FIXED_NOW


@pytest.fixture()
def board():
    return AlertBoard(default_alerts(FIXED_NOW))


def states(board):
    return {a.id: a.is_active for a in board.all()}


def test_default_alerts_are_active(board):
    assert states(board) == {'alert-1': True, 'alert-2': True, 'alert-3': True}


def test_dismiss_only_touches_that_alert(board):
    dismissed = board.dismiss('alert-1')
    assert dismissed.id == 'alert-1'
    assert states(board) == {'alert-1': False, 'alert-2': True, 'alert-3': True}
    assert len(board) == 3


def test_dismiss_unknown_is_a_noop(board):
    before = [a.to_dict() for a in board.all()]
    assert board.dismiss('nonexistent') is None
    assert [a.to_dict() for a in board.all()] == before


def test_dismiss_twice_keeps_alert_inactive(board):
    board.dismiss('alert-2')
    board.dismiss('alert-2')
    assert states(board)['alert-2'] is False


def test_severity_counts_track_active_alerts(board):
    assert board.severity_counts() == {'high': 1, 'medium': 1, 'low': 1}
    board.dismiss('alert-3')
    assert board.severity_counts() == {'high': 0, 'medium': 1, 'low': 1}


def test_sorted_active_most_severe_first(board):
    board_alerts = board.all() + [
        Alert(id='alert-4', type='wind', severity='medium', message='Gusts',
              timestamp=FIXED_NOW - timedelta(minutes=5)),
    ]
    ordered = AlertBoard(board_alerts).sorted_active()
    assert [a.id for a in ordered] == ['alert-3', 'alert-4', 'alert-1', 'alert-2']


@pytest.mark.parametrize('kwargs', [
    {'type': 'noise', 'severity': 'low'},
    {'type': 'wind', 'severity': 'severe'},
])
def test_alert_rejects_unknown_type_or_severity(kwargs):
    with pytest.raises(ValueError):
        Alert(id='bad', message='x', timestamp=FIXED_NOW, **kwargs)
