from __future__ import annotations

import argparse
import logging
import signal
import sys

from superrifas.log_config import setup_logging
from superrifas.settings import Settings
from superrifas.web_server import create_app

logger = logging.getLogger("superrifas.server")


def _install_signal_handlers() -> None:
    def _shutdown(signum, _frame) -> None:
        logger.info("Recibida señal %s, cerrando servidor...", signal.Signals(signum).name)
        sys.exit(0)

    signal.signal(signal.SIGTERM, _shutdown)
    signal.signal(signal.SIGINT, _shutdown)


def main(argv: list[str] | None = None) -> int:
    settings = Settings()

    p = argparse.ArgumentParser(description=f"{settings.APP_NAME} - servidor HTTP (solo lectura)")
    p.add_argument("--host", default=settings.HOST, help="Bind host (0.0.0.0 para LAN)")
    p.add_argument("--port", type=int, default=settings.PORT, help="Port")
    p.add_argument("--debug", action="store_true", help="Flask debug mode")
    args = p.parse_args(argv)

    setup_logging("DEBUG" if args.debug else settings.LOG_LEVEL)
    _install_signal_handlers()

    app = create_app(settings)

    logger.info("Servidor %s ejecutándose en puerto %s", settings.APP_NAME, args.port)
    logger.info("Google Sheets ID: %s", settings.GOOGLE_SHEETS_SPREADSHEET_ID)
    logger.info("Hoja: %s", settings.GOOGLE_SHEETS_WORKSHEET_NAME)
    logger.info("Modo: %s", settings.APP_ENV or "production")

    app.run(host=args.host, port=args.port, debug=args.debug, threaded=True)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
