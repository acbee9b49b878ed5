# gunicorn.conf.py
# Run with: gunicorn -c gunicorn.conf.py
import multiprocessing
import os

wsgi_app = "app:app"

# TCP "host:port" or "unix:/run/square-service/square-service.sock"
bind = os.getenv("GUNICORN_BIND", "127.0.0.1:8000")
workers = int(os.getenv("GUNICORN_WORKERS", multiprocessing.cpu_count() * 2 + 1))
timeout = int(os.getenv("GUNICORN_TIMEOUT", 30))

accesslog = os.getenv("GUNICORN_ACCESS_LOG", "-")
errorlog = os.getenv("GUNICORN_ERROR_LOG", "-")
loglevel = os.getenv("LOG_LEVEL", "info").lower()
