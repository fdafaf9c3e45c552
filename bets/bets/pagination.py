# bets/pagination.py

from rest_framework import serializers

DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100


class PageQuerySerializer(serializers.Serializer):
    """목록 조회 쿼리의 page(1부터 시작), limit 검증"""
    page = serializers.IntegerField(min_value=1, default=1)
    limit = serializers.IntegerField(min_value=1, max_value=MAX_PAGE_SIZE, default=DEFAULT_PAGE_SIZE)


def paginate(queryset, page, limit):
    """
    (전체 건수, 해당 페이지 객체 목록) 을 반환합니다.
    """
    total = queryset.count()
    offset = (page - 1) * limit
    return total, list(queryset[offset:offset + limit])
