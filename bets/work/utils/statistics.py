# utils/statistics.py

import calendar
from collections import defaultdict
from decimal import Decimal, ROUND_HALF_UP

from django.db.models import Count, F, Q
from django.db.models.functions import TruncMonth
from django.utils import timezone

from .period import work_start_q
from ..models import WorkLog, Incident, WorkStatus, Recurrence, INCIDENT_WORK_TYPES

# 작업 유형 집계 구분
WORK_TYPE_BUCKETS = {
    'regular_check': Q(work_type='정기점검'),
    'incident_support': Q(work_type__in=INCIDENT_WORK_TYPES),
    'tech_support': Q(work_type='기술지원'),
    'training': Q(work_type='교육'),
    'etc_work': Q(work_type='기타'),
}

# 월별 추이에 포함하는 구분
TREND_BUCKETS = ('regular_check', 'incident_support', 'tech_support')

TREND_MONTHS = 6


def _bucket_counts(names=None):
    names = names or WORK_TYPE_BUCKETS.keys()
    return {name: Count('log_id', filter=WORK_TYPE_BUCKETS[name]) for name in names}


def _minutes(work_start, work_end):
    # 분 단위 절사 (초 이하는 버림)
    return int((work_end - work_start).total_seconds() // 60)


def _to_hours(minutes):
    hours = (Decimal(minutes) / Decimal(60)).quantize(Decimal('0.1'), rounding=ROUND_HALF_UP)
    return float(hours)


def _months_ago(value, months):
    """value 에서 months 개월 전 같은 날짜/시각 (말일 보정)"""
    index = value.year * 12 + (value.month - 1) - months
    year, month = divmod(index, 12)
    month += 1
    day = min(value.day, calendar.monthrange(year, month)[1])
    return value.replace(year=year, month=month, day=day)


class WorkStatistics:
    """
    대시보드 / 통계 페이지용 집계를 전담하는 클래스입니다.
    모든 메서드는 읽기 전용이며 하위 리포트마다 별도 쿼리를 사용합니다.
    """

    @classmethod
    def _base(cls, start_date=None, end_date=None):
        return WorkLog.objects.filter(work_start_q(start_date, end_date))

    @classmethod
    def _hours_by(cls, queryset, key):
        """
        key 별 작업 시간 합계 (행마다 분 단위로 절사한 뒤 합산)
        """
        minutes = defaultdict(int)
        for group, work_start, work_end in queryset.values_list(key, 'work_start', 'work_end'):
            minutes[group] += _minutes(work_start, work_end)
        return {group: _to_hours(total) for group, total in minutes.items()}

    # --------------------------------------------------
    # 1. 기본 통계 (대시보드)
    # --------------------------------------------------
    @classmethod
    def get_statistics(cls, start_date=None, end_date=None):
        queryset = cls._base(start_date, end_date)

        by_status = list(
            queryset.values('status')
            .annotate(count=Count('log_id'))
            .order_by('status')
        )
        by_work_type = list(
            queryset.values('work_type')
            .annotate(count=Count('log_id'))
            .order_by('-count', 'work_type')
        )
        by_user = list(
            queryset.values('user_id', user_name=F('user__name'))
            .annotate(count=Count('log_id'))
            .order_by('-count', 'user_id')
        )

        return {
            'totalCount': queryset.count(),
            'byStatus': by_status,
            'byWorkType': by_work_type,
            'byUser': by_user,
        }

    # --------------------------------------------------
    # 2. 상세 통계 (통계 페이지)
    # --------------------------------------------------
    @classmethod
    def get_detailed_statistics(cls, start_date=None, end_date=None):
        return {
            'overview': cls._overview(start_date, end_date),
            'byEngineer': cls._by_engineer(start_date, end_date),
            'byDepartment': cls._by_department(start_date, end_date),
            'byClient': cls._by_client(start_date, end_date),
            'clientIncidents': cls._client_incidents(start_date, end_date),
            'monthlyTrend': cls._monthly_trend(),
        }

    @classmethod
    def _overview(cls, start_date, end_date):
        return cls._base(start_date, end_date).aggregate(
            total=Count('log_id'),
            status_registered=Count('log_id', filter=Q(status=WorkStatus.REGISTERED)),
            status_checked=Count('log_id', filter=Q(status=WorkStatus.CHECKED)),
            status_approved=Count('log_id', filter=Q(status=WorkStatus.APPROVED)),
            type_regular=Count('log_id', filter=WORK_TYPE_BUCKETS['regular_check']),
            type_incident=Count('log_id', filter=WORK_TYPE_BUCKETS['incident_support']),
            type_tech=Count('log_id', filter=WORK_TYPE_BUCKETS['tech_support']),
            type_training=Count('log_id', filter=WORK_TYPE_BUCKETS['training']),
            type_etc=Count('log_id', filter=WORK_TYPE_BUCKETS['etc_work']),
        )

    @classmethod
    def _by_engineer(cls, start_date, end_date):
        queryset = cls._base(start_date, end_date)
        hours = cls._hours_by(queryset, 'user')

        rows = (
            queryset
            .values(
                'user_id',
                user_name=F('user__name'),
                position=F('user__position'),
                dept_name=F('user__department__dept_name'),
            )
            .annotate(total=Count('log_id'), **_bucket_counts())
            .order_by('-total', 'user_id')
        )
        return [dict(row, total_hours=hours.get(row['user_id'], 0.0)) for row in rows]

    @classmethod
    def _by_department(cls, start_date, end_date):
        # 부서가 없는 사용자(초기 관리자 계정)의 작업은 제외
        queryset = cls._base(start_date, end_date).filter(user__department__isnull=False)
        hours = cls._hours_by(queryset, 'user__department')

        rows = (
            queryset
            .values(
                dept_id=F('user__department_id'),
                dept_name=F('user__department__dept_name'),
            )
            .annotate(
                total=Count('log_id'),
                engineer_count=Count('user', distinct=True),
                **_bucket_counts()
            )
            .order_by('-total', 'dept_id')
        )
        return [dict(row, total_hours=hours.get(row['dept_id'], 0.0)) for row in rows]

    @classmethod
    def _by_client(cls, start_date, end_date):
        queryset = cls._base(start_date, end_date)
        hours = cls._hours_by(queryset, 'project__client')

        rows = (
            queryset
            .values(
                client_id=F('project__client_id'),
                client_name=F('project__client__client_name'),
            )
            .annotate(total=Count('log_id'), **_bucket_counts())
            .order_by('-total', 'client_id')
        )
        return [dict(row, total_hours=hours.get(row['client_id'], 0.0)) for row in rows]

    @classmethod
    def _client_incidents(cls, start_date, end_date):
        """
        고객사별 (영향도, 원인분류) 장애 건수와 재발 건수
        기간 조건은 장애가 속한 작업 로그의 work_start 기준입니다.
        """
        rows = (
            Incident.objects
            .filter(work_start_q(start_date, end_date, prefix='log__'))
            .values(
                'severity',
                'cause_type',
                client_id=F('log__project__client_id'),
                client_name=F('log__project__client__client_name'),
            )
            .annotate(
                count=Count('incident_id'),
                recurrence_count=Count('incident_id', filter=Q(is_recurrence=Recurrence.YES)),
            )
            .order_by('client_name', 'client_id', '-count', 'severity', 'cause_type')
        )

        grouped = {}
        for row in rows:
            client = grouped.setdefault(row['client_id'], {
                'client_id': row['client_id'],
                'client_name': row['client_name'],
                'incidents': [],
            })
            client['incidents'].append({
                'severity': row['severity'],
                'cause_type': row['cause_type'],
                'count': row['count'],
                'recurrence_count': row['recurrence_count'],
            })
        return list(grouped.values())

    @classmethod
    def _monthly_trend(cls):
        """
        요청 기간과 무관하게 현재 시각 기준 최근 6개월
        """
        since = _months_ago(timezone.localtime(), TREND_MONTHS)

        rows = (
            WorkLog.objects
            .filter(work_start__gte=since)
            .annotate(month=TruncMonth('work_start'))
            .values('month')
            .annotate(total=Count('log_id'), **_bucket_counts(TREND_BUCKETS))
            .order_by('month')
        )
        return [
            {
                'month': timezone.localtime(row['month']).strftime('%Y-%m'),
                'total': row['total'],
                'regular_check': row['regular_check'],
                'incident_support': row['incident_support'],
                'tech_support': row['tech_support'],
            }
            for row in rows
        ]
