from datetime import datetime

from django.utils import timezone


def kst(year, month, day, hour=0, minute=0, second=0, microsecond=0):
    """settings.TIME_ZONE(Asia/Seoul) 기준 aware datetime"""
    return timezone.make_aware(
        datetime(year, month, day, hour, minute, second, microsecond),
        timezone.get_default_timezone(),
    )


def message_of(exc_info):
    """DRF 예외의 {'detail': ...} 메시지를 문자열로 반환"""
    detail = exc_info.value.detail
    if isinstance(detail, dict):
        detail = detail.get('detail', detail)
    if isinstance(detail, list):
        detail = detail[0]
    return str(detail)
