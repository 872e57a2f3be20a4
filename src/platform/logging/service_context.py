"""Identifies which site instance wrote a log line: `<service>@<env>:<host>/<pid>`"""

from functools import lru_cache
import os
import socket

from src.platform.config.core_setting import settings


@lru_cache(maxsize=1)
def get_service_context() -> str:
    # Container hostnames are the container id; keep them short
    host = socket.gethostname().split('.')[0][:12] or 'local'
    return f'{settings.SERVICE_NAME}@{settings.DEPLOY_ENV}:{host}/{os.getpid()}'
