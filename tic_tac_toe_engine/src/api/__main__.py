"""
Development server: python -m src.api
"""

import uvicorn

from .config import HOST, LOG_LEVEL, PORT, configure_logging


def run():
    configure_logging()
    uvicorn.run("src.api.main:app", host=HOST, port=PORT, log_level=LOG_LEVEL.lower())


if __name__ == "__main__":
    run()
