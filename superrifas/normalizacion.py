from __future__ import annotations

import re
from collections.abc import Sequence
from typing import Any

from superrifas.modelos import Producto, utc_now

# "Vigencia del 01/01/2024 al 31/01/2024" (any case, anywhere in the text)
_VIGENCIA_RE = re.compile(
    r"del\s+([0-9]{2}/[0-9]{2}/[0-9]{4})\s+al\s+([0-9]{2}/[0-9]{2}/[0-9]{4})",
    re.IGNORECASE,
)
_NO_SLUG_RE = re.compile(r"[^a-z0-9\s]")
_ESPACIOS_RE = re.compile(r"\s+")

ID_MAX_LEN = 50

# Column order in the sheet range (A:D)
COLUMNAS = ("nombre", "vigencia", "compra_minima", "imagen")


def _texto(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


def generar_id_producto(nombre: str) -> str:
    """Slug del nombre: minúsculas, sin puntuación, espacios -> '-', máx. 50.

    No es inyectivo: nombres distintos pueden dar el mismo id.
    """
    s = _NO_SLUG_RE.sub("", str(nombre).lower())
    s = _ESPACIOS_RE.sub("-", s)
    return s[:ID_MAX_LEN]


def extraer_fechas_vigencia(vigencia: str) -> tuple[str, str]:
    """Devuelve (inicio, fin) en DD/MM/YYYY, o ("", "") si el texto no tiene el patrón."""
    match = _VIGENCIA_RE.search(vigencia or "")
    if not match:
        return "", ""
    return match.group(1), match.group(2)


def procesar_fila(row: Sequence[Any] | None) -> Producto | None:
    """Normaliza una fila de datos. None si la fila no tiene nombre usable."""
    cells = list(row or [])
    cells += [None] * (len(COLUMNAS) - len(cells))
    nombre_raw, vigencia_raw, compra_raw, imagen_raw = cells[: len(COLUMNAS)]

    nombre = _texto(nombre_raw).strip()
    if not nombre:
        return None

    vigencia = _texto(vigencia_raw)
    fecha_inicio, fecha_fin = extraer_fechas_vigencia(vigencia)

    return Producto(
        id=generar_id_producto(nombre),
        nombre=nombre,
        vigencia_completa=vigencia,
        fecha_inicio=fecha_inicio,
        fecha_fin=fecha_fin,
        compra_minima=_texto(compra_raw),
        imagen=_texto(imagen_raw).strip(),
        fecha_actualizacion=utc_now(),
    )


def procesar_productos(raw_data: Sequence[Sequence[Any]] | None) -> list[Producto]:
    """
    Convierte la tabla cruda del sheet en productos normalizados.

    La fila 0 son encabezados y se descarta. Las filas sin nombre se omiten;
    el resto conserva el orden de la hoja. Celdas mal formadas nunca abortan
    el proceso: quedan como campos vacíos.

    Args:
        raw_data: Filas tal como las devuelve la API (listas de strings), o None

    Returns:
        Lista de Producto (vacía si no hay filas de datos)
    """
    if not raw_data or len(raw_data) <= 1:
        return []

    productos: list[Producto] = []
    for row in raw_data[1:]:
        producto = procesar_fila(row)
        if producto is not None:
            productos.append(producto)
    return productos
