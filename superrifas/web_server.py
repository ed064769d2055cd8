from __future__ import annotations

import logging
import threading
import time

from flask import Flask, Response, jsonify, request

from superrifas.catalogo import CatalogoProductos, SinDatosError
from superrifas.estadisticas import calcular_estadisticas, resumen_validacion
from superrifas.google_sheets import GoogleSheetsSource
from superrifas.modelos import iso_utc, utc_now
from superrifas.settings import Settings

logger = logging.getLogger(__name__)

ERROR_INTERNO = "Error interno del servidor"
ERROR_RATE_LIMIT = "Demasiadas solicitudes desde esta IP. Inténtalo más tarde."

ENDPOINTS = [
    "GET /health",
    "GET /api/productos",
    "GET /api/productos/:id",
    "GET /api/stats",
]

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "SAMEORIGIN",
    "Referrer-Policy": "no-referrer",
    "Cross-Origin-Resource-Policy": "same-origin",
    "X-DNS-Prefetch-Control": "off",
}


class RateLimiter:
    """Fixed window counter per client key (IP)."""

    def __init__(self, max_requests: int, window_seconds: float, clock=time.monotonic):
        self.max_requests = int(max_requests)
        self.window_seconds = float(window_seconds)
        self._clock = clock
        self._lock = threading.Lock()
        self._hits: dict[str, tuple[float, int]] = {}

    def hit(self, key: str) -> bool:
        """Cuenta una solicitud. False si el cliente ya agotó su ventana."""
        if self.max_requests <= 0:
            return True

        now = self._clock()
        with self._lock:
            start, count = self._hits.get(key, (now, 0))
            if now - start >= self.window_seconds:
                start, count = now, 0
            count += 1
            self._hits[key] = (start, count)

            # Drop expired windows so the table doesn't grow forever.
            if len(self._hits) > 10_000:
                self._hits = {k: v for k, v in self._hits.items() if now - v[0] < self.window_seconds}

        return count <= self.max_requests


def create_app(settings: Settings | None = None, catalogo: CatalogoProductos | None = None) -> Flask:
    settings = settings or Settings()
    if catalogo is None:
        catalogo = CatalogoProductos(GoogleSheetsSource(settings))

    limiter = RateLimiter(settings.RATE_LIMIT_MAX_REQUESTS, settings.RATE_LIMIT_WINDOW_SECONDS)
    started = time.monotonic()

    app = Flask(__name__, static_folder=None)
    app.json.sort_keys = False
    app.json.ensure_ascii = False

    def _ok(payload, status: int = 200):
        return jsonify(payload), status

    # --- Middleware: rate limit, CORS, security headers ---
    @app.before_request
    def rate_limit():
        client = request.remote_addr or "unknown"
        if not limiter.hit(client):
            logger.warning("Rate limit excedido para %s", client)
            return _ok({"error": ERROR_RATE_LIMIT}, 429)
        if request.method == "OPTIONS":
            return Response(status=204)
        return None

    @app.after_request
    def add_headers(resp: Response) -> Response:
        resp.headers["Access-Control-Allow-Origin"] = settings.CORS_ALLOW_ORIGINS
        resp.headers["Access-Control-Allow-Methods"] = "GET"
        resp.headers["Access-Control-Allow-Headers"] = "Content-Type"
        if settings.CORS_ALLOW_ORIGINS != "*":
            resp.headers["Vary"] = "Origin"
        for name, value in SECURITY_HEADERS.items():
            resp.headers.setdefault(name, value)
        return resp

    # --- Routes ---
    @app.get("/health")
    def health() -> Response:
        return jsonify(
            {
                "status": "OK",
                "timestamp": iso_utc(utc_now()),
                "uptime": round(time.monotonic() - started, 3),
                "version": settings.APP_VERSION,
            }
        )

    @app.get("/api/productos")
    def api_productos():
        try:
            logger.info("Solicitando productos desde Google Sheets...")
            try:
                productos = catalogo.listar(requerir_datos=True)
            except SinDatosError as e:
                return _ok({"success": False, "error": str(e), "productos": [], "total": 0}, 404)

            # Advisory only: incomplete products are still listed.
            resumen = resumen_validacion(productos)
            if resumen.invalidos > 0:
                logger.warning("%s productos con datos incompletos", resumen.invalidos)

            return _ok(
                {
                    "success": True,
                    "productos": [p.to_dict() for p in productos],
                    "total": len(productos),
                    "metadata": {
                        "timestamp": iso_utc(utc_now()),
                        "sheetId": settings.GOOGLE_SHEETS_SPREADSHEET_ID,
                        "sheetName": settings.GOOGLE_SHEETS_WORKSHEET_NAME,
                        "productosValidos": resumen.validos,
                        "productosInvalidos": resumen.invalidos,
                    },
                }
            )
        except Exception as e:
            logger.exception("Error obteniendo productos")
            payload = {"success": False, "error": ERROR_INTERNO, "productos": [], "total": 0}
            if settings.is_development:
                payload["message"] = str(e)
            return _ok(payload, 500)

    @app.get("/api/productos/<producto_id>")
    def api_producto(producto_id: str):
        try:
            producto = catalogo.buscar_por_id(producto_id)
        except Exception:
            logger.exception("Error obteniendo producto %s", producto_id)
            return _ok({"success": False, "error": ERROR_INTERNO}, 500)

        if producto is None:
            return _ok({"success": False, "error": "Producto no encontrado"}, 404)
        return _ok({"success": True, "producto": producto.to_dict()})

    @app.get("/api/stats")
    def api_stats():
        try:
            productos = catalogo.listar()
        except Exception:
            logger.exception("Error obteniendo estadísticas")
            return _ok({"success": False, "error": ERROR_INTERNO}, 500)

        stats = calcular_estadisticas(productos).to_dict()
        stats["ultimaActualizacion"] = iso_utc(utc_now())
        return _ok({"success": True, "stats": stats})

    # --- Errors ---
    @app.errorhandler(404)
    def not_found(_e):
        return _ok({"success": False, "error": "Ruta no encontrada", "availableEndpoints": ENDPOINTS}, 404)

    @app.errorhandler(405)
    def method_not_allowed(_e):
        return _ok({"success": False, "error": "Método no permitido", "availableEndpoints": ENDPOINTS}, 405)

    @app.errorhandler(500)
    def internal_error(e):
        logger.error("Error no manejado: %s", getattr(e, "original_exception", e))
        return _ok({"success": False, "error": ERROR_INTERNO}, 500)

    return app
