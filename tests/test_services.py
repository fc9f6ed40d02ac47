import pytest

from courseadmin.api import ApiError, UnauthorizedError
from courseadmin.models import Course, Payment, PayloadError, PlatformUser
from courseadmin.services import Fetch, FetchState, compute_dashboard_stats, fetch


def failing(error):
    def loader():
        raise error
    return loader


def test_fetch_lifecycle():
    f = Fetch(default=[])
    assert f.state is FetchState.IDLE
    assert f.data == []

    f.run(lambda: [1, 2])
    assert f.state is FetchState.OK
    assert f.ok
    assert f.data == [1, 2]
    assert f.error is None


def test_fetch_error_keeps_default_and_message():
    f = fetch(failing(ApiError(500, 'Database down')), default=[])
    assert f.state is FetchState.ERROR
    assert f.data == []
    assert f.error == 'Database down'

    f = fetch(failing(ApiError(502)), default=[])
    assert f.error == 'Request failed'


def test_fetch_reports_bad_payloads():
    f = fetch(failing(PayloadError('bad')), default=[])
    assert f.state is FetchState.ERROR
    assert 'unexpected format' in f.error


def test_fetch_lets_unauthorized_through():
    with pytest.raises(UnauthorizedError):
        fetch(failing(UnauthorizedError()), default=[])


def test_fetch_passes_arguments():
    f = fetch(lambda a, b=0: a + b, 1, b=2)
    assert f.data == 3


def test_dashboard_stats():
    users = fetch(lambda: [
        PlatformUser(id='u1', email='a@example.com', is_premium=True),
        PlatformUser(id='u2', email='b@example.com', status='suspended'),
    ])
    courses = fetch(lambda: [
        Course.from_dict({'_id': 'c1', 'title': 'Pack', 'type': 'pack',
                          'videos': [{'_id': 'v1', 'title': 'One'}, {'_id': 'v2', 'title': 'Two'}]}),
        Course(id='c2', title='Single', type='single'),
    ])
    payments = fetch(lambda: [
        Payment(id=f'p{i}', amount=100, status='completed', date=f'2024-01-0{i}') for i in range(1, 7)
    ] + [Payment(id='p9', amount=999, status='pending', date='2024-02-01')])

    stats = compute_dashboard_stats(users, courses, payments)
    assert stats['total_users'] == 2
    assert stats['premium_users'] == 1
    assert stats['active_users'] == 1
    assert stats['total_courses'] == 2
    assert stats['pack_courses'] == 1
    assert stats['total_videos'] == 2
    assert stats['completed_payments'] == 6
    assert stats['total_revenue'] == 600
    assert [p.id for p in stats['recent_payments']] == ['p9', 'p6', 'p5', 'p4', 'p3']


def test_dashboard_stats_leave_failed_figures_empty():
    users = fetch(failing(ApiError(500, 'down')), default=[])
    courses = fetch(lambda: [])
    payments = fetch(failing(ApiError(500, 'down')), default=[])

    stats = compute_dashboard_stats(users, courses, payments)
    assert stats['total_users'] is None
    assert stats['total_courses'] == 0
    assert stats['total_revenue'] is None
    assert stats['recent_payments'] == []
