"""
BeTS - WorkLogManager Tests
===========================
Tests for work/utils/worklog_manager.py
"""

from datetime import date
from unittest import mock

import pytest
from django.db import DatabaseError
from rest_framework.exceptions import NotFound, ValidationError

from log_events.models import ProjectLogEntry, LogLevel
from work.models import WorkLog, Incident, FileUpload, WorkStatus
from work.utils.worklog_manager import WorkLogManager
from tests.helpers import kst, message_of


@pytest.mark.django_db
class TestCreate:
    """작업 로그 생성"""

    def test_create_regular_work_without_incident(self, work_data, engineer):
        """정기점검은 장애 상세 없이 등록 상태로 생성"""
        work_log = WorkLogManager.create(work_data, None, engineer)

        assert work_log.status == WorkStatus.REGISTERED
        assert work_log.user_id == engineer.pk
        assert work_log.incident_id is None
        assert work_log.project.client.client_name == '한빛은행'

    def test_actor_and_status_cannot_be_overridden(self, work_data, engineer, other_engineer):
        """요청 본문의 user_id, status 는 무시"""
        work_data['user_id'] = other_engineer.pk
        work_data['status'] = WorkStatus.APPROVED

        work_log = WorkLogManager.create(work_data, None, engineer)

        assert work_log.user_id == engineer.pk
        assert work_log.status == WorkStatus.REGISTERED

    def test_incident_work_links_both_directions(self, work_data, incident_data, engineer):
        """장애지원 + 장애 상세: 양방향 연결"""
        work_data['work_type'] = '장애지원'

        work_log = WorkLogManager.create(work_data, incident_data, engineer)

        incident = Incident.objects.get(log_id=work_log.pk)
        assert work_log.incident_id == incident.pk
        assert work_log.incident.severity == 'Major'
        assert incident.is_recurrence == 'N'

    @pytest.mark.parametrize('work_type', ['장애지원', '장애처리', '장애대응'])
    def test_incident_type_requires_incident(self, work_data, engineer, work_type):
        """장애 유형인데 장애 상세가 없으면 아무것도 기록하지 않음"""
        work_data['work_type'] = work_type

        with pytest.raises(ValidationError) as exc_info:
            WorkLogManager.create(work_data, None, engineer)

        assert message_of(exc_info) == '장애 관련 작업 유형에는 장애 상세 정보가 필수입니다.'
        assert WorkLog.objects.count() == 0
        assert Incident.objects.count() == 0

    def test_incident_requires_severity_and_cause(self, work_data, incident_data, engineer):
        """영향도/원인분류 누락"""
        work_data['work_type'] = '장애처리'
        incident_data.pop('severity')

        with pytest.raises(ValidationError) as exc_info:
            WorkLogManager.create(work_data, incident_data, engineer)

        assert message_of(exc_info) == '장애 상세의 영향도(severity)와 원인분류(cause_type)는 필수입니다.'
        assert WorkLog.objects.count() == 0

    def test_rollback_when_incident_insert_fails(self, work_data, incident_data, engineer):
        """Incident 저장 실패 시 WorkLog 도 남지 않음"""
        work_data['work_type'] = '장애대응'

        with mock.patch.object(Incident.objects, 'create', side_effect=DatabaseError('boom')):
            with pytest.raises(DatabaseError):
                WorkLogManager.create(work_data, incident_data, engineer)

        assert WorkLog.objects.count() == 0
        assert Incident.objects.count() == 0

    def test_deleted_project_is_rejected(self, work_data, project, engineer):
        """논리 삭제된 프로젝트"""
        project.is_deleted = True
        project.save()

        with pytest.raises(ValidationError) as exc_info:
            WorkLogManager.create(work_data, None, engineer)

        assert 'project_id' in exc_info.value.detail

    def test_unknown_contact_is_rejected(self, work_data, engineer):
        work_data['contact_id'] = 99999

        with pytest.raises(ValidationError) as exc_info:
            WorkLogManager.create(work_data, None, engineer)

        assert 'contact_id' in exc_info.value.detail

    def test_missing_required_field(self, work_data, engineer):
        work_data.pop('details')

        with pytest.raises(ValidationError) as exc_info:
            WorkLogManager.create(work_data, None, engineer)

        assert 'details' in exc_info.value.detail

    def test_work_end_before_start(self, work_data, engineer):
        work_data['work_end'] = kst(2025, 3, 10, 8, 0)

        with pytest.raises(ValidationError) as exc_info:
            WorkLogManager.create(work_data, None, engineer)

        assert 'work_end' in exc_info.value.detail


@pytest.mark.django_db
class TestFindAll:
    """목록 조회 (필터, 페이지, 정렬)"""

    def test_ordered_by_work_start_desc_with_paging(self, make_log, engineer):
        make_log(engineer, start=kst(2025, 3, 1, 9))
        newest = make_log(engineer, start=kst(2025, 3, 20, 9))
        make_log(engineer, start=kst(2025, 3, 10, 9))

        total, rows = WorkLogManager.find_all({}, page=1, limit=2)

        assert total == 3
        assert len(rows) == 2
        assert rows[0].pk == newest.pk

        total, rows = WorkLogManager.find_all({}, page=2, limit=2)
        assert total == 3
        assert len(rows) == 1

    def test_filters_are_anded(self, make_log, engineer, other_engineer):
        make_log(engineer, work_type='정기점검')
        target = make_log(engineer, work_type='기술지원')
        make_log(other_engineer, work_type='기술지원')

        total, rows = WorkLogManager.find_all({'user_id': engineer.pk, 'work_type': '기술지원'})

        assert total == 1
        assert rows[0].pk == target.pk

    def test_keyword_matches_details(self, make_log, engineer):
        make_log(engineer, work_type='교육')
        make_log(engineer, work_type='정기점검')

        total, rows = WorkLogManager.find_all({'keyword': '교육'})

        assert total == 1
        assert rows[0].work_type == '교육'

    def test_date_range_is_inclusive(self, make_log, engineer):
        """시작일 00:00:00.000 ~ 종료일 23:59:59.999 포함"""
        first = make_log(engineer, start=kst(2025, 3, 1, 0, 0, 0))
        last = make_log(engineer, start=kst(2025, 3, 31, 23, 59, 59, 999000))
        make_log(engineer, start=kst(2025, 4, 1, 0, 0, 0))
        make_log(engineer, start=kst(2025, 2, 28, 23, 59, 59))

        total, rows = WorkLogManager.find_all({
            'start_date': date(2025, 3, 1),
            'end_date': date(2025, 3, 31),
        })

        assert total == 2
        assert {row.pk for row in rows} == {first.pk, last.pk}

    def test_only_start_or_end_date(self, make_log, engineer):
        make_log(engineer, start=kst(2025, 3, 1, 9))
        make_log(engineer, start=kst(2025, 3, 15, 9))

        total, _ = WorkLogManager.find_all({'start_date': date(2025, 3, 15)})
        assert total == 1

        total, _ = WorkLogManager.find_all({'end_date': date(2025, 3, 1)})
        assert total == 1


@pytest.mark.django_db
class TestFindById:

    def test_not_found(self):
        with pytest.raises(NotFound):
            WorkLogManager.find_by_id(12345)


@pytest.mark.django_db
class TestUpdate:
    """부분 수정"""

    def test_only_supplied_fields_change(self, make_log, engineer):
        work_log = make_log(engineer, work_type='기술지원')

        updated = WorkLogManager.update(work_log.pk, {'details': '원격 지원 완료'}, None, engineer)

        assert updated.details == '원격 지원 완료'
        assert updated.work_type == '기술지원'
        assert updated.work_start == work_log.work_start

    def test_protected_fields_are_ignored(self, make_log, engineer, other_engineer):
        work_log = make_log(engineer)

        updated = WorkLogManager.update(
            work_log.pk,
            {'user_id': other_engineer.pk, 'status': WorkStatus.APPROVED, 'details': '수정'},
            None,
            engineer,
        )

        assert updated.user_id == engineer.pk
        assert updated.status == WorkStatus.REGISTERED

    def test_switch_to_incident_type_creates_incident(self, make_log, incident_data, engineer):
        work_log = make_log(engineer, work_type='기술지원')

        updated = WorkLogManager.update(work_log.pk, {'work_type': '장애지원'}, incident_data, engineer)

        assert updated.incident_id is not None
        assert Incident.objects.get(pk=updated.incident_id).log_id == work_log.pk

    def test_switch_to_incident_type_without_incident(self, make_log, engineer):
        work_log = make_log(engineer, work_type='기술지원')

        with pytest.raises(ValidationError) as exc_info:
            WorkLogManager.update(work_log.pk, {'work_type': '장애처리'}, None, engineer)

        assert message_of(exc_info) == '장애 관련 작업 유형에는 장애 상세 정보가 필수입니다.'
        work_log.refresh_from_db()
        assert work_log.work_type == '기술지원'

    def test_existing_incident_updated_in_place(self, make_log, engineer):
        work_log = make_log(engineer, work_type='장애지원', incident={'severity': 'Minor'})
        incident_id = work_log.incident_id

        updated = WorkLogManager.update(
            work_log.pk, {}, {'severity': 'Critical', 'cause_type': 'OS'}, engineer
        )

        assert updated.incident_id == incident_id
        assert updated.incident.severity == 'Critical'
        assert updated.incident.cause_type == 'OS'
        assert Incident.objects.count() == 1

    def test_merged_period_is_checked(self, make_log, engineer):
        work_log = make_log(engineer, start=kst(2025, 3, 10, 9), minutes=60)

        with pytest.raises(ValidationError):
            WorkLogManager.update(work_log.pk, {'work_start': kst(2025, 3, 10, 12)}, None, engineer)

    def test_rollback_when_incident_save_fails(self, make_log, engineer):
        """Incident 저장 실패 시 WorkLog 변경도 취소"""
        work_log = make_log(engineer, work_type='장애지원', incident={'severity': 'Minor'})

        with mock.patch.object(Incident, 'save', side_effect=DatabaseError('boom')):
            with pytest.raises(DatabaseError):
                WorkLogManager.update(
                    work_log.pk,
                    {'details': '변경된 내용', 'product_version': '21c'},
                    {'severity': 'Critical', 'cause_type': 'OS'},
                    engineer,
                )

        work_log.refresh_from_db()
        assert work_log.details == '장애지원 작업'
        assert work_log.product_version == '19c'
        assert Incident.objects.get(pk=work_log.incident_id).severity == 'Minor'

    def test_rollback_when_incident_create_fails(self, make_log, incident_data, engineer):
        work_log = make_log(engineer, work_type='기술지원')

        with mock.patch.object(Incident.objects, 'create', side_effect=DatabaseError('boom')):
            with pytest.raises(DatabaseError):
                WorkLogManager.update(work_log.pk, {'work_type': '장애지원'}, incident_data, engineer)

        work_log.refresh_from_db()
        assert work_log.work_type == '기술지원'
        assert work_log.incident_id is None

    def test_not_found(self, engineer):
        with pytest.raises(NotFound):
            WorkLogManager.update(999, {'details': 'x'}, None, engineer)


@pytest.mark.django_db
class TestChangeStatus:
    """상태 전이"""

    def test_review_reject_and_approve_path(self, make_log, engineer, manager):
        """등록 -> 관리자확인 -> 등록(반려) -> 관리자확인 -> 승인완료"""
        work_log = make_log(engineer)

        for target in ('관리자확인', '등록', '관리자확인', '승인완료'):
            work_log = WorkLogManager.change_status(work_log.pk, target, manager)
            assert work_log.status == target

    def test_skip_is_rejected(self, make_log, engineer, manager):
        work_log = make_log(engineer)

        with pytest.raises(ValidationError) as exc_info:
            WorkLogManager.change_status(work_log.pk, '승인완료', manager)

        assert message_of(exc_info) == (
            "'등록' 상태에서 '승인완료' 상태로 변경할 수 없습니다. 허용 전이: [관리자확인]"
        )
        work_log.refresh_from_db()
        assert work_log.status == WorkStatus.REGISTERED

    def test_approved_is_terminal(self, make_log, engineer, manager):
        work_log = make_log(engineer, status=WorkStatus.APPROVED)

        for target in ('등록', '관리자확인', '승인완료'):
            with pytest.raises(ValidationError) as exc_info:
                WorkLogManager.change_status(work_log.pk, target, manager)
            assert '허용 전이: [없음]' in message_of(exc_info)

    def test_only_status_changes(self, make_log, engineer, manager):
        work_log = make_log(engineer, work_type='교육')

        updated = WorkLogManager.change_status(work_log.pk, '관리자확인', manager)

        assert updated.work_type == '교육'
        assert updated.details == work_log.details
        assert updated.user_id == engineer.pk

    def test_transition_is_recorded(self, make_log, engineer, manager):
        work_log = make_log(engineer)

        WorkLogManager.change_status(work_log.pk, '관리자확인', manager)

        entry = ProjectLogEntry.objects.get(event_type='WORKLOG_STATUS_CHANGED')
        assert entry.level == LogLevel.INFO
        assert entry.user_id == manager.pk

    def test_not_found(self, manager):
        with pytest.raises(NotFound):
            WorkLogManager.change_status(999, '관리자확인', manager)


@pytest.mark.django_db
class TestDelete:
    """삭제 (등록 상태만)"""

    def test_cascade_incident_and_files(self, make_log, engineer):
        work_log = make_log(engineer, work_type='장애지원', incident={})
        FileUpload.objects.create(log=work_log, user=engineer, original_name='a.log', file_size=10)
        FileUpload.objects.create(log=work_log, user=engineer, original_name='b.log', file_size=20)

        WorkLogManager.delete(work_log.pk, user=engineer)

        assert not WorkLog.objects.filter(pk=work_log.pk).exists()
        assert Incident.objects.count() == 0
        assert FileUpload.objects.count() == 0
        assert ProjectLogEntry.objects.filter(event_type='WORKLOG_DELETED').exists()

    @pytest.mark.parametrize('status', [WorkStatus.CHECKED, WorkStatus.APPROVED])
    def test_reviewed_log_cannot_be_deleted(self, make_log, engineer, status):
        work_log = make_log(engineer, work_type='장애지원', incident={}, status=status)
        FileUpload.objects.create(log=work_log, user=engineer, original_name='a.log', file_size=10)

        with pytest.raises(ValidationError) as exc_info:
            WorkLogManager.delete(work_log.pk, user=engineer)

        assert message_of(exc_info) == '등록 상태의 작업 로그만 삭제할 수 있습니다.'
        assert WorkLog.objects.filter(pk=work_log.pk).exists()
        assert Incident.objects.count() == 1
        assert FileUpload.objects.filter(log=work_log).count() == 1

        entry = ProjectLogEntry.objects.get(event_type='WORKLOG_DELETE_REJECTED')
        assert entry.level == LogLevel.WARNING

    def test_status_is_checked_on_locked_row(self, make_log, engineer):
        """삭제 직전에 승인된 로그는 잠금 후 다시 읽은 상태로 거부"""
        work_log = make_log(engineer, work_type='장애지원', incident={})
        lock = WorkLog.objects.select_for_update

        def approve_then_lock(*args, **kwargs):
            WorkLog.objects.filter(pk=work_log.pk).update(status=WorkStatus.APPROVED)
            return lock(*args, **kwargs)

        with mock.patch.object(WorkLog.objects, 'select_for_update', side_effect=approve_then_lock):
            with pytest.raises(ValidationError):
                WorkLogManager.delete(work_log.pk, user=engineer)

        assert WorkLog.objects.filter(pk=work_log.pk, status=WorkStatus.APPROVED).exists()
        assert Incident.objects.count() == 1
        assert not ProjectLogEntry.objects.filter(event_type='WORKLOG_DELETED').exists()
        assert ProjectLogEntry.objects.filter(event_type='WORKLOG_DELETE_REJECTED').exists()

    def test_rollback_when_worklog_delete_fails(self, make_log, engineer):
        """WorkLog 삭제 실패 시 장애 상세와 첨부 파일도 남음"""
        work_log = make_log(engineer, work_type='장애지원', incident={})
        FileUpload.objects.create(log=work_log, user=engineer, original_name='a.log', file_size=10)
        failing = mock.Mock()
        failing.delete.side_effect = DatabaseError('boom')

        with mock.patch.object(WorkLog.objects, 'filter', return_value=failing):
            with pytest.raises(DatabaseError):
                WorkLogManager.delete(work_log.pk, user=engineer)

        assert WorkLog.objects.filter(pk=work_log.pk).exists()
        assert Incident.objects.filter(log=work_log).count() == 1
        assert FileUpload.objects.filter(log=work_log).count() == 1
        assert not ProjectLogEntry.objects.filter(event_type='WORKLOG_DELETED').exists()

    def test_not_found(self):
        with pytest.raises(NotFound):
            WorkLogManager.delete(999)
