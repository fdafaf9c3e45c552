"""
BeTS - Work API Tests
=====================
Tests for work/views.py (api/work/)
"""

import pytest

from work.models import WorkLog, WorkStatus


def _payload(project, contact, **overrides):
    body = {
        'project_id': project.pk,
        'contact_id': contact.pk,
        'work_start': '2025-03-10T09:00:00+09:00',
        'work_end': '2025-03-10T11:00:00+09:00',
        'work_type': '정기점검',
        'supprt_type': '방문',
        'service_type': 'DB',
        'product_type': 'Oracle',
        'product_version': '19c',
        'details': '정기점검 수행',
    }
    body.update(overrides)
    return body


INCIDENT = {
    'action_type': '영구',
    'start_time': '2025-03-10T08:00:00+09:00',
    'end_time': '2025-03-10T10:00:00+09:00',
    'severity': 'Critical',
    'cause_type': 'DB',
}


@pytest.mark.django_db
class TestAuthentication:

    def test_unauthenticated_request(self, api_client):
        response = api_client.get('/api/work/')

        assert response.status_code == 401
        assert response.data['success'] is False

    def test_login_returns_tokens_and_profile(self, api_client, engineer):
        response = api_client.post(
            '/api/auth/login/',
            {'email': 'engineer@bets.co.kr', 'password': 'password123'},
            format='json',
        )

        assert response.status_code == 200
        data = response.data['data']
        assert data['access']
        assert data['refresh']
        assert data['user']['user_id'] == engineer.pk
        assert data['user']['role'] == 'engineer'

        api_client.credentials(HTTP_AUTHORIZATION=f"Bearer {data['access']}")
        me = api_client.get('/api/auth/me/')
        assert me.status_code == 200
        assert me.data['data']['email'] == 'engineer@bets.co.kr'

    def test_wrong_password(self, api_client, engineer):
        response = api_client.post(
            '/api/auth/login/',
            {'email': 'engineer@bets.co.kr', 'password': 'wrong-password'},
            format='json',
        )

        assert response.status_code == 401
        assert response.data['message'] == '이메일 또는 비밀번호가 올바르지 않습니다.'

    def test_inactive_account(self, api_client, engineer):
        engineer.is_active = False
        engineer.save()

        response = api_client.post(
            '/api/auth/login/',
            {'email': 'engineer@bets.co.kr', 'password': 'password123'},
            format='json',
        )

        assert response.status_code == 403
        assert response.data['message'] == '비활성화된 계정입니다. 관리자에게 문의하세요.'

    def test_health_needs_no_auth(self, api_client):
        response = api_client.get('/api/health/')

        assert response.status_code == 200
        assert response.data['success'] is True


@pytest.mark.django_db
class TestCreateWorkLog:
    """POST /api/work/"""

    def test_create(self, engineer_client, engineer, other_engineer, project, contact):
        body = _payload(project, contact, user_id=other_engineer.pk, status='승인완료')

        response = engineer_client.post('/api/work/', body, format='json')

        assert response.status_code == 201
        assert response.data['success'] is True
        assert response.data['message'] == '작업 로그 생성 완료'
        data = response.data['data']
        assert data['user_id'] == engineer.pk
        assert data['status'] == '등록'
        assert data['project']['client']['client_name'] == '한빛은행'
        assert data['incident'] is None

    def test_create_incident_work(self, engineer_client, project, contact):
        body = _payload(project, contact, work_type='장애대응', incident=INCIDENT)

        response = engineer_client.post('/api/work/', body, format='json')

        assert response.status_code == 201
        data = response.data['data']
        assert data['incident_id'] == data['incident']['incident_id']
        assert data['incident']['log_id'] == data['log_id']
        assert data['incident']['is_recurrence'] == 'N'

    def test_incident_type_without_incident(self, engineer_client, project, contact):
        body = _payload(project, contact, work_type='장애지원')

        response = engineer_client.post('/api/work/', body, format='json')

        assert response.status_code == 400
        assert response.data == {
            'success': False,
            'message': '장애 관련 작업 유형에는 장애 상세 정보가 필수입니다.',
        }
        assert WorkLog.objects.count() == 0

    def test_field_errors(self, engineer_client, project, contact):
        body = _payload(project, contact)
        body.pop('details')
        body['incident'] = dict(INCIDENT, severity='Blocker')

        response = engineer_client.post('/api/work/', body, format='json')

        assert response.status_code == 400
        assert response.data['message'] == '입력값이 올바르지 않습니다.'
        assert 'details' in response.data['errors']
        assert 'incident' in response.data['errors']


@pytest.mark.django_db
class TestListAndDetail:

    def test_list_pagination(self, engineer_client, make_log, engineer):
        for _ in range(3):
            make_log(engineer)

        response = engineer_client.get('/api/work/', {'page': 1, 'limit': 2})

        assert response.status_code == 200
        assert len(response.data['data']) == 2
        assert response.data['pagination'] == {
            'total': 3, 'page': 1, 'limit': 2, 'totalPages': 2,
        }

    def test_limit_over_100_rejected(self, engineer_client):
        response = engineer_client.get('/api/work/', {'limit': 101})

        assert response.status_code == 400
        assert 'limit' in response.data['errors']

    def test_list_filters(self, engineer_client, make_log, engineer):
        make_log(engineer, status=WorkStatus.CHECKED)
        make_log(engineer)

        response = engineer_client.get('/api/work/', {'status': '관리자확인'})

        assert response.data['pagination']['total'] == 1
        assert response.data['data'][0]['status'] == '관리자확인'

    def test_detail_not_found(self, engineer_client):
        response = engineer_client.get('/api/work/999/')

        assert response.status_code == 404
        assert response.data == {'success': False, 'message': '작업 로그를 찾을 수 없습니다.'}

    def test_detail_includes_engineer_department(self, engineer_client, make_log, engineer):
        work_log = make_log(engineer)

        response = engineer_client.get(f'/api/work/{work_log.pk}/')

        assert response.status_code == 200
        assert response.data['data']['user']['department']['dept_name'] == '기술지원1팀'


@pytest.mark.django_db
class TestUpdateWorkLog:
    """PUT / PATCH /api/work/<id>/"""

    def test_owner_can_patch_registered_log(self, engineer_client, make_log, engineer):
        work_log = make_log(engineer)

        response = engineer_client.patch(
            f'/api/work/{work_log.pk}/', {'details': '점검 결과 이상 없음'}, format='json'
        )

        assert response.status_code == 200
        assert response.data['data']['details'] == '점검 결과 이상 없음'

    def test_other_engineer_forbidden(self, other_engineer_client, make_log, engineer):
        work_log = make_log(engineer)

        response = other_engineer_client.put(
            f'/api/work/{work_log.pk}/', {'details': '남의 로그'}, format='json'
        )

        assert response.status_code == 403
        assert response.data['success'] is False

    def test_owner_cannot_edit_after_review(self, engineer_client, make_log, engineer):
        work_log = make_log(engineer, status=WorkStatus.CHECKED)

        response = engineer_client.patch(
            f'/api/work/{work_log.pk}/', {'details': '수정'}, format='json'
        )

        assert response.status_code == 403

    def test_manager_can_edit_any_log(self, manager_client, make_log, engineer):
        work_log = make_log(engineer, status=WorkStatus.CHECKED)

        response = manager_client.put(
            f'/api/work/{work_log.pk}/', {'product_version': '21c'}, format='json'
        )

        assert response.status_code == 200
        assert response.data['data']['product_version'] == '21c'
        assert response.data['data']['user_id'] == engineer.pk

    def test_empty_body_rejected(self, engineer_client, make_log, engineer):
        work_log = make_log(engineer)

        response = engineer_client.patch(f'/api/work/{work_log.pk}/', {}, format='json')

        assert response.status_code == 400


@pytest.mark.django_db
class TestChangeStatus:
    """PATCH /api/work/<id>/status/"""

    def test_engineer_forbidden(self, engineer_client, make_log, engineer):
        work_log = make_log(engineer)

        response = engineer_client.patch(
            f'/api/work/{work_log.pk}/status/', {'status': '관리자확인'}, format='json'
        )

        assert response.status_code == 403
        work_log.refresh_from_db()
        assert work_log.status == WorkStatus.REGISTERED

    def test_manager_reviews(self, manager_client, make_log, engineer):
        work_log = make_log(engineer)

        response = manager_client.patch(
            f'/api/work/{work_log.pk}/status/', {'status': '관리자확인'}, format='json'
        )

        assert response.status_code == 200
        assert response.data['message'] == '상태 변경 완료'
        assert response.data['data']['status'] == '관리자확인'

    def test_invalid_transition(self, admin_client, make_log, engineer):
        work_log = make_log(engineer, status=WorkStatus.APPROVED)

        response = admin_client.patch(
            f'/api/work/{work_log.pk}/status/', {'status': '등록'}, format='json'
        )

        assert response.status_code == 400
        assert response.data['message'] == (
            "'승인완료' 상태에서 '등록' 상태로 변경할 수 없습니다. 허용 전이: [없음]"
        )

    def test_unknown_status_value(self, manager_client, make_log, engineer):
        work_log = make_log(engineer)

        response = manager_client.patch(
            f'/api/work/{work_log.pk}/status/', {'status': '보류'}, format='json'
        )

        assert response.status_code == 400
        assert 'status' in response.data['errors']


@pytest.mark.django_db
class TestDeleteWorkLog:
    """DELETE /api/work/<id>/"""

    def test_owner_deletes_registered_log(self, engineer_client, make_log, engineer):
        work_log = make_log(engineer)

        response = engineer_client.delete(f'/api/work/{work_log.pk}/')

        assert response.status_code == 200
        assert response.data == {'success': True, 'message': '작업 로그 삭제 완료', 'data': None}
        assert not WorkLog.objects.filter(pk=work_log.pk).exists()

    def test_other_engineer_forbidden(self, other_engineer_client, make_log, engineer):
        work_log = make_log(engineer)

        response = other_engineer_client.delete(f'/api/work/{work_log.pk}/')

        assert response.status_code == 403
        assert WorkLog.objects.filter(pk=work_log.pk).exists()

    def test_approved_log_not_deletable(self, manager_client, make_log, engineer):
        work_log = make_log(engineer, status=WorkStatus.APPROVED)

        response = manager_client.delete(f'/api/work/{work_log.pk}/')

        assert response.status_code == 400
        assert response.data['message'] == '등록 상태의 작업 로그만 삭제할 수 있습니다.'


@pytest.mark.django_db
class TestStatisticsApi:

    def test_engineer_forbidden(self, engineer_client):
        assert engineer_client.get('/api/work/statistics/').status_code == 403
        assert engineer_client.get('/api/work/statistics/detailed/').status_code == 403

    def test_manager_gets_statistics(self, manager_client, make_log, engineer):
        make_log(engineer)

        response = manager_client.get(
            '/api/work/statistics/', {'start_date': '2025-03-01', 'end_date': '2025-03-31'}
        )

        assert response.status_code == 200
        assert response.data['message'] == '통계 조회 성공'
        assert response.data['data']['totalCount'] == 1

    def test_detailed_statistics_keys(self, manager_client, make_log, engineer):
        make_log(engineer)

        response = manager_client.get('/api/work/statistics/detailed/')

        assert response.status_code == 200
        assert set(response.data['data']) == {
            'overview', 'byEngineer', 'byDepartment', 'byClient', 'clientIncidents', 'monthlyTrend',
        }

    def test_invalid_date(self, manager_client):
        response = manager_client.get('/api/work/statistics/', {'start_date': '2025-13-01'})

        assert response.status_code == 400
