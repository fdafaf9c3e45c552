"""
BeTS - Test Configuration
=========================
pytest fixtures for backend tests (pytest-django, sqlite, --nomigrations)
"""

from datetime import timedelta

import pytest
from rest_framework.test import APIClient

from account.models import Department, User, UserRole
from project.models import Client, Project, ManagerContact
from work.models import WorkLog, Incident, WorkStatus
from tests.helpers import kst

PASSWORD = 'password123'


# ----------------------------------------------------------------------
# 부서 / 사용자
# ----------------------------------------------------------------------
@pytest.fixture
def department(db):
    return Department.objects.create(dept_name='기술지원1팀')


@pytest.fixture
def other_department(db):
    return Department.objects.create(dept_name='기술지원2팀')


@pytest.fixture
def engineer(department):
    return User.objects.create_user(
        email='engineer@bets.co.kr', password=PASSWORD,
        name='김엔지', position='전임', department=department,
    )


@pytest.fixture
def other_engineer(other_department):
    return User.objects.create_user(
        email='engineer2@bets.co.kr', password=PASSWORD,
        name='이엔지', position='선임', department=other_department,
    )


@pytest.fixture
def manager(department):
    return User.objects.create_user(
        email='manager@bets.co.kr', password=PASSWORD,
        name='박매니저', position='책임', department=department, role=UserRole.MANAGER,
    )


@pytest.fixture
def admin_user(department):
    return User.objects.create_user(
        email='admin@bets.co.kr', password=PASSWORD,
        name='최관리', position='관리자', department=department, role=UserRole.ADMIN,
    )


# ----------------------------------------------------------------------
# 고객사 / 프로젝트 / 담당자
# ----------------------------------------------------------------------
@pytest.fixture
def client_company(db):
    return Client.objects.create(client_name='한빛은행')


@pytest.fixture
def project(client_company, department):
    return Project.objects.create(
        client=client_company, department=department,
        project_name='한빛은행 DB 유지보수', contract_period='2025.01 ~ 2025.12',
    )


@pytest.fixture
def contact(project):
    return ManagerContact.objects.create(
        project=project, name='정담당', email='owner@hanbit.co.kr', phone='010-1234-5678',
    )


# ----------------------------------------------------------------------
# 작업 로그 데이터
# ----------------------------------------------------------------------
@pytest.fixture
def work_data(project, contact):
    """WorkLogManager.create 에 전달하는 기본 작업 데이터 (정기점검, 2시간)"""
    return {
        'project_id': project.pk,
        'contact_id': contact.pk,
        'work_start': kst(2025, 3, 10, 9, 0),
        'work_end': kst(2025, 3, 10, 11, 0),
        'work_type': '정기점검',
        'supprt_type': '방문',
        'service_type': 'DB',
        'product_type': 'Oracle',
        'product_version': '19c',
        'details': '월간 정기점검 수행',
    }


@pytest.fixture
def incident_data():
    return {
        'action_type': '임시',
        'start_time': kst(2025, 3, 10, 8, 30),
        'end_time': kst(2025, 3, 10, 10, 30),
        'severity': 'Major',
        'cause_type': 'DB',
        'is_recurrence': 'N',
    }


@pytest.fixture
def make_log(project, contact):
    """
    ORM 으로 작업 로그를 직접 만드는 팩토리
    make_log(user, work_type='정기점검', start=..., minutes=60, status='등록', incident=None)
    """
    def _make(user, work_type='정기점검', start=None, minutes=60, status=WorkStatus.REGISTERED,
              incident=None, target_project=None, target_contact=None):
        start = start or kst(2025, 3, 10, 9, 0)
        log = WorkLog.objects.create(
            user=user,
            project=target_project or project,
            contact=target_contact or contact,
            work_start=start,
            work_end=start + timedelta(minutes=minutes),
            work_type=work_type,
            supprt_type='원격',
            service_type='DB',
            product_type='Oracle',
            product_version='19c',
            details=f'{work_type} 작업',
            status=status,
        )
        if incident is not None:
            created = Incident.objects.create(
                log=log,
                action_type=incident.get('action_type', '임시'),
                start_time=incident.get('start_time', start),
                end_time=incident.get('end_time', start + timedelta(minutes=minutes)),
                severity=incident.get('severity', 'Major'),
                cause_type=incident.get('cause_type', 'DB'),
                is_recurrence=incident.get('is_recurrence', 'N'),
            )
            log.incident = created
            log.save(update_fields=['incident'])
        return log

    return _make


# ----------------------------------------------------------------------
# API 클라이언트
# ----------------------------------------------------------------------
@pytest.fixture
def api_client():
    return APIClient()


def _authenticated(user):
    client = APIClient()
    client.force_authenticate(user=user)
    return client


@pytest.fixture
def engineer_client(engineer):
    return _authenticated(engineer)


@pytest.fixture
def other_engineer_client(other_engineer):
    return _authenticated(other_engineer)


@pytest.fixture
def manager_client(manager):
    return _authenticated(manager)


@pytest.fixture
def admin_client(admin_user):
    return _authenticated(admin_user)
