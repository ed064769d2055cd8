from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from superrifas.modelos import Producto
from superrifas.validacion import validar_producto


@dataclass(frozen=True)
class Estadisticas:
    total_productos: int
    # All normalized products count as active; there is no inactive state.
    productos_activos: int
    con_imagen: int
    sin_imagen: int
    con_vigencia: int

    def to_dict(self) -> dict:
        return {
            "totalProductos": self.total_productos,
            "productosActivos": self.productos_activos,
            "categorias": {
                "conImagen": self.con_imagen,
                "sinImagen": self.sin_imagen,
                "conVigencia": self.con_vigencia,
            },
        }


@dataclass(frozen=True)
class ResumenValidacion:
    validos: int
    invalidos: int


def calcular_estadisticas(productos: Sequence[Producto]) -> Estadisticas:
    total = len(productos)
    con_imagen = sum(1 for p in productos if p.imagen)
    con_vigencia = sum(1 for p in productos if p.vigencia_completa)
    return Estadisticas(
        total_productos=total,
        productos_activos=total,
        con_imagen=con_imagen,
        sin_imagen=total - con_imagen,
        con_vigencia=con_vigencia,
    )


def resumen_validacion(productos: Sequence[Producto]) -> ResumenValidacion:
    """Cuántos productos pasan / no pasan validar_producto."""
    validos = sum(1 for p in productos if validar_producto(p).is_valid)
    return ResumenValidacion(validos=validos, invalidos=len(productos) - validos)
