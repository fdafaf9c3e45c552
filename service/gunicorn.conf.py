# gunicorn.conf.py
# 실행: cd bets && gunicorn bets.asgi:application -c ../service/gunicorn.conf.py
from datetime import datetime
import os

LOG_DIR = os.getenv("BETS_LOG_DIR", "/bets/log/gunicorn")

# 폴더 생성
if not os.path.exists(LOG_DIR):
    os.makedirs(LOG_DIR)

bind = os.getenv("BETS_BIND", "0.0.0.0:3000")
workers = int(os.getenv("BETS_WORKERS", "2"))
worker_class = "uvicorn.workers.UvicornWorker"
accesslog = os.path.join(LOG_DIR, f"access_{datetime.now().strftime('%Y-%m-%d_%H')}.log")
errorlog = os.path.join(LOG_DIR, f"error_{datetime.now().strftime('%Y-%m-%d_%H')}.log")
loglevel = os.getenv("LOG_LEVEL", "info").lower()
