#!/usr/bin/env python
"""
Run the site API under granian

Usage:
    python -m script.serve
    WORKERS=4 PORT=8100 python -m script.serve
"""

import os

from granian import Granian
from granian.constants import Interfaces

from src.platform.logging.loguru_io import Logger


def main() -> None:
    host = os.getenv('HOST', '0.0.0.0')
    port = int(os.getenv('PORT', '8100'))
    workers = int(os.getenv('WORKERS', '1'))

    Logger.base.info(f'🚀 Starting granian on {host}:{port} with {workers} worker(s)')
    Granian(
        'src.main:app',
        address=host,
        port=port,
        interface=Interfaces.ASGI,
        workers=workers,
    ).serve()


if __name__ == '__main__':
    main()
