"""Tests for the product query layer."""

import pytest

from superrifas.catalogo import CatalogoProductos, SinDatosError
from superrifas.normalizacion import generar_id_producto

from conftest import FakeSource

SCENARIO_A = [["Name", "Validity", "Min", "Img"], ["Widget A", "del 01/01/2024 al 31/01/2024", "$100", "img1.png"]]


def test_find_by_generated_id():
    catalogo = CatalogoProductos(FakeSource(rows=SCENARIO_A))

    p = catalogo.buscar_por_id(generar_id_producto("Widget A"))

    assert p is not None
    assert p.nombre == "Widget A"


@pytest.mark.parametrize("producto_id", ["widget-b", "", "Widget A", "widget-a-"])
def test_unknown_id_is_not_found(producto_id):
    catalogo = CatalogoProductos(FakeSource(rows=SCENARIO_A))
    assert catalogo.buscar_por_id(producto_id) is None


def test_first_match_wins_on_collision():
    rows = [["h"], ["Widget A", "", "$1"], ["WIDGET  A!", "", "$2"]]
    catalogo = CatalogoProductos(FakeSource(rows=rows))

    p = catalogo.buscar_por_id("widget-a")

    assert p.compra_minima == "$1"


def test_every_call_fetches_again(fake_source):
    catalogo = CatalogoProductos(fake_source)

    catalogo.listar()
    catalogo.listar()
    catalogo.buscar_por_id("widget-a")

    assert fake_source.calls == 3


def test_list_keeps_invalid_products(fake_source):
    nombres = [p.nombre for p in CatalogoProductos(fake_source).listar()]
    assert "Gadget B" in nombres


def test_missing_table_is_empty_by_default():
    assert CatalogoProductos(FakeSource(rows=None)).listar() == []


def test_missing_table_raises_when_data_required():
    with pytest.raises(SinDatosError):
        CatalogoProductos(FakeSource(rows=None)).listar(requerir_datos=True)


def test_header_only_table_is_not_missing_data():
    assert CatalogoProductos(FakeSource(rows=[["h"]])).listar(requerir_datos=True) == []


def test_fetch_errors_propagate():
    catalogo = CatalogoProductos(FakeSource(error=RuntimeError("boom")))
    with pytest.raises(RuntimeError, match="boom"):
        catalogo.listar()
