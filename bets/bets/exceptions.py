# bets/exceptions.py

import json
import logging

from django.conf import settings
from django.db import DatabaseError
from rest_framework import status
from rest_framework.exceptions import APIException, ParseError
from rest_framework.response import Response
from rest_framework.views import exception_handler

from log_events.models import ProjectLogEntry, LogLevel

logger = logging.getLogger('bets')

INTERNAL_ERROR_MESSAGE = '서버 내부 오류가 발생했습니다.'
INVALID_INPUT_MESSAGE = '입력값이 올바르지 않습니다.'


# 중복 데이터 (이메일, 제품 유형/제품명 등) 생성 시 사용하는 예외
class Conflict(APIException):
    status_code = status.HTTP_409_CONFLICT
    default_detail = '이미 존재하는 데이터입니다.'
    default_code = 'conflict'


def _first(value):
    if isinstance(value, (list, tuple)):
        return _first(value[0]) if value else ''
    return value


def _error_body(data):
    """
    DRF 예외 데이터를 {success, message, errors} 형태로 변환합니다.
    {'detail': ...} 은 message 로, 나머지 필드 키는 errors 로 보냅니다.
    """
    errors = {}
    if isinstance(data, dict):
        errors = {key: value for key, value in data.items() if key != 'detail'}
        if 'detail' in data:
            message = _first(data['detail'])
        else:
            message = INVALID_INPUT_MESSAGE
    elif isinstance(data, list):
        message = _first(data) or INVALID_INPUT_MESSAGE
    else:
        message = data

    body = {'success': False, 'message': str(message)}
    if errors:
        body['errors'] = errors
    return body


def _record_unexpected(exc, context):
    request = context.get('request')
    view = context.get('view')
    user = getattr(request, 'user', None)

    request_data = None
    if request is not None:
        try:
            request_data = json.dumps(request.data, ensure_ascii=False, default=str)
        except (ParseError, TypeError, ValueError):
            request_data = None

    logger.exception('처리되지 않은 예외 (%s): %s', view.__class__.__name__ if view else '-', exc)
    try:
        ProjectLogEntry.record(
            app_name='bets',
            event_type=exc.__class__.__name__,
            message=f'{request.method} {request.path} : {exc}' if request is not None else str(exc),
            level=LogLevel.ERROR,
            user=user,
            request_data=request_data,
        )
    except DatabaseError:
        logger.exception('ProjectLogEntry 기록 실패')


def custom_exception_handler(exc, context):
    """
    REST_FRAMEWORK['EXCEPTION_HANDLER']

    - NotFound(404), ValidationError(400), Conflict(409), PermissionDenied(403),
      NotAuthenticated/AuthenticationFailed(401) 는 메시지를 그대로 전달합니다.
    - 그 외 예외는 서버에 기록하고 일반 메시지로 응답합니다.
    """
    response = exception_handler(exc, context)

    if response is None:
        _record_unexpected(exc, context)
        body = {'success': False, 'message': INTERNAL_ERROR_MESSAGE}
        if settings.DEBUG:
            body['detail'] = str(exc)
        return Response(body, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

    response.data = _error_body(response.data)
    return response
