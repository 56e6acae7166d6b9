# gunicorn.conf.py
# gunicorn -c gunicorn.conf.py
import os

from bloggen.config import getenv_int

wsgi_app = "wsgi:application"
bind = f"0.0.0.0:{getenv_int('PORT', 5000)}"
workers = getenv_int("WEB_CONCURRENCY", 2)
# one /generate request runs its items back to back against the inference API
timeout = getenv_int("GUNICORN_TIMEOUT", 300)
loglevel = os.getenv("GUNICORN_LOGLEVEL", "info")
accesslog = "-"
