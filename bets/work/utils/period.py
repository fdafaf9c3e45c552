# utils/period.py
# start_date / end_date (달력 날짜) 를 settings.TIME_ZONE 기준 구간으로 변환합니다.

from datetime import date, datetime, time

from django.db.models import Q
from django.utils import timezone

DAY_START = time(0, 0, 0)
DAY_END = time(23, 59, 59, 999000)


def _as_date(value):
    if value is None or value == '':
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value))


def day_bounds(start_date=None, end_date=None):
    """
    (시작일 00:00:00.000, 종료일 23:59:59.999) aware datetime 쌍을 반환합니다.
    입력이 없는 쪽은 None 입니다.
    """
    tz = timezone.get_default_timezone()
    start_date = _as_date(start_date)
    end_date = _as_date(end_date)

    start = timezone.make_aware(datetime.combine(start_date, DAY_START), tz) if start_date else None
    end = timezone.make_aware(datetime.combine(end_date, DAY_END), tz) if end_date else None
    return start, end


def work_start_q(start_date=None, end_date=None, prefix=''):
    """
    work_start 에 대한 포함 구간 조건을 Q 로 반환합니다.
    prefix 는 Incident 처럼 작업 로그를 거쳐 조회할 때 사용합니다. (예: 'log__')
    """
    start, end = day_bounds(start_date, end_date)
    field = f'{prefix}work_start'

    if start and end:
        return Q(**{f'{field}__range': (start, end)})
    if start:
        return Q(**{f'{field}__gte': start})
    if end:
        return Q(**{f'{field}__lte': end})
    return Q()
