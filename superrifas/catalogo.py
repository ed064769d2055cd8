from __future__ import annotations

import logging
from typing import Any, Protocol

from superrifas.modelos import Producto
from superrifas.normalizacion import procesar_productos

logger = logging.getLogger(__name__)


class FuenteFilas(Protocol):
    def fetch_rows(self) -> list[list[Any]] | None: ...


class SinDatosError(LookupError):
    """La fuente no devolvió ninguna tabla (hoja vacía o rango sin valores)."""


class CatalogoProductos:
    """Consultas sobre los productos del sheet.

    No hay caché: cada llamada vuelve a leer la fuente y normalizar.
    """

    def __init__(self, fuente: FuenteFilas):
        self._fuente = fuente

    def listar(self, *, requerir_datos: bool = False) -> list[Producto]:
        raw = self._fuente.fetch_rows()
        if raw is None and requerir_datos:
            raise SinDatosError("No se encontraron datos en el sheet")

        productos = procesar_productos(raw)
        logger.info("Productos procesados: %s", len(productos))
        return productos

    def buscar_por_id(self, producto_id: str) -> Producto | None:
        # Ids can collide; the first row wins.
        for p in self.listar():
            if p.id == producto_id:
                return p
        return None
