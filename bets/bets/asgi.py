"""
ASGI config for bets project.

gunicorn 의 uvicorn worker 가 이 application 을 사용합니다.
"""

import os

from django.core.asgi import get_asgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'bets.settings')

application = get_asgi_application()
