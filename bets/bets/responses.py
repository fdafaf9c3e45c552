# bets/responses.py
# 모든 API 가 같은 응답 형식 {success, message, data} 을 사용하도록 하는 헬퍼

import math

from rest_framework import status
from rest_framework.response import Response


def success_response(data=None, message='성공', status_code=status.HTTP_200_OK):
    return Response(
        {
            'success': True,
            'message': message,
            'data': data,
        },
        status=status_code
    )


def created_response(data=None, message='생성 완료'):
    return success_response(data, message, status.HTTP_201_CREATED)


def paginated_response(rows, total, page, limit, message='조회 성공'):
    return Response(
        {
            'success': True,
            'message': message,
            'data': rows,
            'pagination': {
                'total': total,
                'page': page,
                'limit': limit,
                'totalPages': math.ceil(total / limit) if limit else 0,
            },
        },
        status=status.HTTP_200_OK
    )
