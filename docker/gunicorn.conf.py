# BS/docker/gunicorn.conf.py
# ─────────────────────────────────────────────────────────────────────────────
# Назначение: конфигурация gunicorn для Django-проекта BS (тема bear_skin)
# ─────────────────────────────────────────────────────────────────────────────

import multiprocessing  # модуль для определения числа CPU
import os               # переменные окружения

wsgi_app = "BS.wsgi:application"  # точка входа WSGI
bind = os.getenv("GUNICORN_BIND", "unix:/run/gunicorn/gunicorn.sock")  # unix-сокет для nginx
workers = int(os.getenv("GUNICORN_WORKERS", multiprocessing.cpu_count() * 2 + 1))  # число воркеров
timeout = int(os.getenv("GUNICORN_TIMEOUT", "30"))  # таймаут воркера (рендер страниц быстрый)
accesslog = "-"  # лог запросов в stdout (перехватит supervisor)
errorlog = "-"   # лог ошибок в stdout
worker_class = "sync"  # обычный sync-воркер
