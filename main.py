#!/usr/bin/env python3
# main.py
"""
Точка входа Orders API.
Поднимает HTTP-сервер uvicorn на HOST:PORT из конфигурации.
"""

from __future__ import annotations

import asyncio
import sys

import uvicorn

from orders_api.common.constants import TypeMsg
from orders_api.common.logger import log_error, log_info, setup_logging
from orders_api.config import settings


async def main() -> None:
    """Запуск сервера."""
    setup_logging()

    host, port = settings.server.HOST, settings.server.PORT
    await log_info(f"Запуск Orders API на http://{host}:{port}", type_msg=TypeMsg.INFO)
    await log_info(
        f"Документация: http://{host}:{port}{settings.server.DOCS_URL}",
        type_msg=TypeMsg.DEBUG,
    )

    config = uvicorn.Config(
        "orders_api.app:app",
        host=host,
        port=port,
        log_level=settings.logging.LOG_LEVEL.lower(),
    )
    server = uvicorn.Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        pass
    except Exception as e:
        asyncio.run(log_error(f"Не удалось запустить сервер: {e}", exc_info=True))
        sys.exit(1)
