import io
import json

from conftest import API, VIDEOS_API

from courseadmin.admin.payments import filter_payments
from courseadmin.admin.reviews import filter_reviews
from courseadmin.models import Payment, Review
from courseadmin.session import ADMIN_KEY, TOKEN_KEY


def test_dashboard_shows_totals(logged_in, api):
    api.add('GET', f'{API}/users', body=[{'_id': 'u1', 'email': 'a@example.com', 'isPremium': True}])
    api.add('GET', f'{API}/courses', body={'courses': [{'_id': 'c1', 'title': 'Python', 'type': 'single'}]})
    api.add('GET', f'{API}/payments', body=[{'_id': 'p1', 'amount': 250000, 'status': 'completed',
                                              'userName': 'Aziz', 'date': '2024-05-01'}])

    r = logged_in.get('/')
    body = r.get_data(as_text=True)
    assert r.status_code == 200
    assert '250,000 UZS' in body
    assert 'Aziz' in body
    assert 'Error:' not in body


def test_dashboard_reports_failed_list(logged_in, api):
    api.add('GET', f'{API}/users', status=500, body={'message': 'Users service unavailable'})
    api.add('GET', f'{API}/courses', body=[])
    api.add('GET', f'{API}/payments', body=[])

    r = logged_in.get('/')
    assert r.status_code == 200
    assert 'Users service unavailable' in r.get_data(as_text=True)


def test_user_list_failure_renders_error(logged_in, api):
    api.add('GET', f'{API}/users', status=500, body={'message': 'Failed to fetch users'})

    r = logged_in.get('/users')
    assert r.status_code == 200
    assert 'Error: Failed to fetch users' in r.get_data(as_text=True)
    assert api.calls(url=f'{API}/users/available-courses') == []


def test_user_filters_are_forwarded(logged_in, api):
    api.add('GET', f'{API}/users', body=[])
    api.add('GET', f'{API}/users/available-courses', body=[])

    logged_in.get('/users?search=aziz&plan=premium')
    sent = api.calls('GET', f'{API}/users')[0]
    assert 'search=aziz' in sent.url
    assert 'plan=premium' in sent.url
    assert 'gender' not in sent.url


def test_toggle_premium_keeps_filters(logged_in, api):
    api.add('PUT', f'{API}/users/u1/premium', body={'message': 'ok'})

    r = logged_in.post('/users/u1/premium?plan=free')
    assert r.status_code == 302
    assert r.headers['Location'].endswith('/users?plan=free')
    assert api.calls('PUT', f'{API}/users/u1/premium')[0].headers['Authorization'] == 'Bearer tok-123'


def test_assign_course_sends_course_id(logged_in, api):
    api.add('POST', f'{API}/users/u1/assign-course', body={})

    logged_in.post('/users/u1/assign-course', data={'course_id': 'c7'})
    sent = api.calls('POST', f'{API}/users/u1/assign-course')[0]
    assert json.loads(sent.body) == {'courseId': 'c7'}


def test_add_user_requires_fields(logged_in, api):
    r = logged_in.post('/users', data={'name': 'Aziz'}, follow_redirects=True)
    assert 'Name, email and password are required.' in r.get_data(as_text=True)
    assert api.calls('POST') == []


def test_failed_mutation_flashes_server_message(logged_in, api):
    api.add('DELETE', f'{API}/users/u1', status=403, body={'message': 'Cannot delete yourself'})
    api.add('GET', f'{API}/users', body=[])
    api.add('GET', f'{API}/users/available-courses', body=[])

    r = logged_in.post('/users/u1/delete', follow_redirects=True)
    assert 'Cannot delete yourself' in r.get_data(as_text=True)


def test_create_single_course_needs_thumbnail_and_video_url(logged_in, api):
    r = logged_in.post('/courses', data={'title': 'Python', 'description': 'Basics', 'type': 'single'},
                       follow_redirects=False)
    assert r.status_code == 302
    assert api.calls('POST') == []

    r = logged_in.post('/courses', data={
        'title': 'Python', 'description': 'Basics', 'type': 'single',
        'thumbnail': (io.BytesIO(b'img'), 'cover.png'),
    }, content_type='multipart/form-data')
    assert api.calls('POST') == []

    api.add('POST', f'{API}/courses', status=201, body={'data': {'_id': 'c1'}})
    logged_in.post('/courses', data={
        'title': 'Python', 'description': 'Basics', 'type': 'single',
        'videoUrl': 'https://cdn.example.com/intro.mp4',
        'thumbnail': (io.BytesIO(b'img'), 'cover.png'),
    }, content_type='multipart/form-data')

    sent = api.calls('POST', f'{API}/courses')[0]
    assert sent.headers['Content-Type'].startswith('multipart/form-data')
    assert b'name="videoTitle"' in sent.body
    assert b'filename="cover.png"' in sent.body


def test_course_editor_and_missing_course(logged_in, api):
    api.add('GET', f'{API}/courses/c1', body={'data': {
        '_id': 'c1', 'title': 'Data Pack', 'type': 'pack',
        'videos': [{'_id': 'v1', 'title': 'Lesson One', 'url': 'https://cdn.example.com/1.mp4'}],
    }})
    r = logged_in.get('/courses/c1')
    body = r.get_data(as_text=True)
    assert r.status_code == 200
    assert 'Lesson One' in body
    assert 'Add Video' in body

    api.add('GET', f'{API}/courses/c404', status=404, body={'message': 'Course not found'})
    r = logged_in.get('/courses/c404')
    assert r.status_code == 302
    assert r.headers['Location'].endswith('/courses')


def test_videos_come_from_catalogue(logged_in, api):
    api.add('GET', VIDEOS_API, body={'data': [{'_id': 'v1', 'title': 'Welcome', 'access': 'free'},
                                              {'_id': 'v2', 'title': 'Deep Dive', 'access': 'premium'}]})

    r = logged_in.get('/videos?search=deep')
    body = r.get_data(as_text=True)
    assert 'Deep Dive' in body
    assert 'Welcome' not in body


def test_upload_video(logged_in, api):
    api.add('POST', f'{API}/videos/upload', status=201, body={})

    logged_in.post('/videos', data={
        'title': 'Intro', 'access': 'premium', 'isPreview': 'on',
        'video': (io.BytesIO(b'\x00\x01'), 'intro.mp4'),
    }, content_type='multipart/form-data')

    sent = api.calls('POST', f'{API}/videos/upload')[0]
    assert b'filename="intro.mp4"' in sent.body
    assert b'name="isPreview"\r\n\r\ntrue' in sent.body


def test_category_playlist_selects_requested_video(logged_in, api):
    api.add('GET', f'{API}/videos/category/python', body=[
        {'_id': 'v1', 'title': 'First', 'videoUrl': 'https://cdn.example.com/1.mp4'},
        {'_id': 'v2', 'title': 'Second', 'videoUrl': 'https://cdn.example.com/2.mp4'},
    ])

    body = logged_in.get('/videos/category/python').get_data(as_text=True)
    assert 'src="https://cdn.example.com/1.mp4"' in body

    body = logged_in.get('/videos/category/python?video=v2').get_data(as_text=True)
    assert 'src="https://cdn.example.com/2.mp4"' in body


def test_category_playlist_error(logged_in, api):
    api.add('GET', f'{API}/videos/category/missing', status=500, body={'message': 'boom'})

    body = logged_in.get('/videos/category/missing').get_data(as_text=True)
    assert 'Failed to load videos.' in body


def test_payment_filters():
    payments = [
        Payment(id='p1', amount=10, status='completed', user_name='Aziz', course_slug='python'),
        Payment(id='p2', amount=20, status='pending', user_name='Bekzod', course_slug='python'),
        Payment(id='p3', amount=30, status='completed', user_name='Dilnoza', course_slug='design'),
    ]
    assert [p.id for p in filter_payments(payments, 'python')] == ['p1', 'p2']
    assert [p.id for p in filter_payments(payments, 'python', 'completed')] == ['p1']
    assert len(filter_payments(payments)) == 3


def test_payments_page_summary(logged_in, api):
    api.add('GET', f'{API}/payments', body=[
        {'_id': 'p1', 'amount': 1000, 'status': 'completed'},
        {'_id': 'p2', 'amount': 5000, 'status': 'failed'},
    ])
    body = logged_in.get('/payments').get_data(as_text=True)
    assert '1,000 UZS' in body


def test_review_filters():
    reviews = [
        Review(id='r1', rating=5, user='Ali', comment='Great course'),
        Review(id='r2', rating=1, user='Bot', comment='Buy now', is_spam=True),
        Review(id='r3', rating=3, user='Vali', comment='Okay', status='hidden'),
    ]
    assert [r.id for r in filter_reviews(reviews, kind='spam')] == ['r2']
    assert [r.id for r in filter_reviews(reviews, kind='hidden')] == ['r3']
    assert [r.id for r in filter_reviews(reviews, 'great')] == ['r1']


def test_review_moderation(logged_in, api):
    api.add('PATCH', f'{API}/reviews/r1/spam', body={})

    r = logged_in.post('/reviews/r1/spam?filter=spam')
    assert r.status_code == 302
    assert r.headers['Location'].endswith('/reviews?filter=spam')
    assert len(api.calls('PATCH', f'{API}/reviews/r1/spam')) == 1


def test_announcement_needs_a_recipient(logged_in, api):
    r = logged_in.post('/announcements', data={'title': 'Sale', 'content': 'Half price'})
    assert r.status_code == 302
    assert api.calls('POST') == []


def test_create_announcement(logged_in, api):
    api.add('POST', f'{API}/announcements', status=201, body={})

    logged_in.post('/announcements', data={
        'title': 'Sale', 'content': 'Half price', 'recipients': ['premium', 'free', 'bogus'],
    })
    sent = json.loads(api.calls('POST', f'{API}/announcements')[0].body)
    assert sent == {'title': 'Sale', 'content': 'Half price', 'recipients': ['premium', 'free'],
                    'expiryDate': None}


def test_company_admin_creation(logged_in, api):
    api.add('POST', f'{API}/companies/c1/admins', status=201, body={})

    r = logged_in.post('/companies/c1/admins', data={
        'name': 'Lola', 'email': 'lola@acme.example.com', 'password': 'secret1',
    }, follow_redirects=False)
    assert r.status_code == 302
    sent = json.loads(api.calls('POST', f'{API}/companies/c1/admins')[0].body)
    assert sent['email'] == 'lola@acme.example.com'


def test_profile_update_replaces_stored_admin(logged_in, api):
    api.add('PUT', f'{API}/auth/profile', body={'data': {
        '_id': 'a1', 'email': 'renamed@example.com', 'name': 'Renamed', 'adminRole': 'main',
    }})

    r = logged_in.post('/settings', data={'name': 'Renamed', 'email': 'renamed@example.com'})
    assert r.status_code == 302

    with logged_in.session_transaction() as sess:
        assert json.loads(sess[ADMIN_KEY])['email'] == 'renamed@example.com'
        assert sess[TOKEN_KEY] == 'tok-123'

    body = logged_in.get('/settings').get_data(as_text=True)
    assert 'Renamed' in body


def test_unknown_page_is_404(logged_in):
    r = logged_in.get('/no-such-page')
    assert r.status_code == 404
