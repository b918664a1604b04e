"""
Gunicorn configuration for the Text Intelligence backend.

Usage:
    gunicorn -c gunicorn.conf.py "app:create_app('production')"
"""
import os
import multiprocessing

from config import Config

# Server Socket
bind = os.environ.get("GUNICORN_BIND", f"{Config.HOST}:{Config.PORT}")
backlog = 2048

# Worker Processes
# Each request blocks on one provider round-trip, so threads carry the load.
workers = int(os.environ.get("GUNICORN_WORKERS", multiprocessing.cpu_count() + 1))
worker_class = os.environ.get("GUNICORN_WORKER_CLASS", "gthread")
threads = int(os.environ.get("GUNICORN_THREADS", "4"))
timeout = 60
graceful_timeout = 30
keepalive = 5

# Logging
errorlog = "-"  # stderr
accesslog = "-"  # stdout
loglevel = os.environ.get("GUNICORN_LOG_LEVEL", "info")
access_log_format = '%(h)s %(l)s %(u)s %(t)s "%(r)s" %(s)s %(b)s "%(f)s" "%(a)s" %(D)s'

# Process Naming
proc_name = "text-intelligence-backend"


# Server Hooks
def on_starting(server):
    """Refuse to start without a provider key."""
    try:
        Config.validate()
    except ValueError as e:
        server.log.error(f"Configuration error: {e}")
        raise SystemExit(1)


def when_ready(server):
    """Called just after the server is started."""
    server.log.info(f"Text Intelligence backend ready. Listening on {bind}")


def worker_exit(server, worker):
    """Called just after a worker has been exited."""
    server.log.info(f"Worker {worker.pid} exited")


# Workers share the master's SESSION_SECRET.
preload_app = True
