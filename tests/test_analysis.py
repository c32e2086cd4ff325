"""
Tests para los helpers de análisis en memoria (pandas).
Finalidad: Verificar el corte de tokens, la exclusión de "n/a", la deduplicación por documento, los montos y el orden del ranking.
"""

import pandas as pd
import pytest

from api.services import analysis as an


@pytest.mark.parametrize(
    "value, expected",
    [
        ("Ana, Luis ,  ,Eva", ["Ana", "Luis", "Eva"]),
        ("N/A", []),
        ("Ana, n/a", ["Ana"]),
        (["FCFM", " Ingeniería ", "", None], ["FCFM", "Ingeniería"]),
        (None, []),
        ("", []),
    ],
)
def test_split_tokens(value, expected):
    """
    Objetivo: Comprobar que strings y listas se cortan en tokens limpios sin vacíos ni "n/a".
    """
    assert an.split_tokens(value) == expected


def test_label_of_defaults_and_sentinel():
    """
    Objetivo: Verificar que un valor faltante usa la etiqueta por defecto y "n/a" se excluye.
    """
    assert an.label_of("  Agua ") == "Agua"
    assert an.label_of(None, "Sin temática") == "Sin temática"
    assert an.label_of("", "Sin temática") == "Sin temática"
    assert an.label_of("n/a", "Sin temática") is None
    assert an.label_of(None) is None


def test_count_labels_sum_equals_documents():
    """
    Objetivo: Comprobar que sobre un campo de valor único los conteos suman el total de documentos.
    """
    docs = [{"Estatus": "Postulado"}, {"Estatus": "Adjudicado"}, {"Estatus": "Postulado"}, {}]
    counts = an.count_labels(docs, "Estatus", "Sin estatus")
    assert counts.sum() == len(docs)
    assert counts["Postulado"] == 2
    assert counts["Sin estatus"] == 1


def test_count_tokens_dedupes_per_document():
    """
    Objetivo: Verificar que un profesor que es líder y partner en el mismo proyecto cuenta una sola vez.
    """
    docs = [
        {"L": "Ana Pérez", "P": "Ana Pérez, Luis Soto"},
        {"L": "Luis Soto", "P": "n/a"},
    ]
    counts = an.count_tokens(docs, ("L", "P"))
    assert counts.to_dict() == {"Ana Pérez": 1, "Luis Soto": 2}


def test_count_members_per_group():
    """
    Objetivo: Comprobar el conteo de profesores únicos por unidad, fusionando campos de unidad.
    """
    docs = [
        {"U": "FCFM", "U2": ["Medicina"], "L": "Ana", "P": "Luis"},
        {"U": "FCFM", "L": "Ana"},
        {"U": "Derecho", "L": "n/a"},
    ]
    counts = an.count_members_per_group(docs, ("U", "U2"), ("L", "P"))
    assert counts.to_dict() == {"FCFM": 2, "Medicina": 2}


def test_count_members_per_group_empty():
    """
    Objetivo: Verificar que sin documentos se obtiene una serie vacía.
    """
    assert an.count_members_per_group([], ("U",), ("L",)).empty


def test_parse_amounts_decimal_comma():
    """
    Objetivo: Comprobar que montos con coma decimal o sufijos se convierten y lo no numérico queda NaN.
    """
    parsed = an.parse_amounts(pd.Series(["12,5", "3.25 MM", 7, "sin monto"], dtype="object"))
    assert parsed.iloc[0] == pytest.approx(12.5)
    assert parsed.iloc[1] == pytest.approx(3.25)
    assert parsed.iloc[2] == pytest.approx(7.0)
    assert pd.isna(parsed.iloc[3])


def test_amounts_by_label():
    """
    Objetivo: Verificar el total y la suma por institución: faltante cuenta 0, no numérico se ignora, "n/a" no agrupa.
    """
    docs = [
        {"M": "1,5", "I": "ANID"},
        {"M": "2", "I": "ANID"},
        {"M": "abc", "I": "CORFO"},
        {"I": "CORFO"},
        {"M": "4"},
        {"M": "1", "I": "n/a"},
    ]
    total, per_label = an.amounts_by_label(docs, "M", "I", default="Sin Institución")
    assert total == pytest.approx(8.5)
    assert per_label.to_dict() == {"ANID": pytest.approx(3.5), "CORFO": 0.0, "Sin Institución": 4.0}


def test_amounts_by_label_empty():
    """
    Objetivo: Comprobar que sin documentos el total es 0 y no hay etiquetas.
    """
    total, per_label = an.amounts_by_label([], "M", "I")
    assert total == 0.0
    assert per_label.empty


def test_rank_orders_by_metric_then_name():
    """
    Objetivo: Verificar el orden del ranking: métrica descendente y, a igualdad, nombre ascendente.
    """
    series = pd.Series({"Zeta": 2, "Alfa": 2, "Beta": 5})
    assert an.rank(series) == [
        {"nombre": "Beta", "cantidad": 5},
        {"nombre": "Alfa", "cantidad": 2},
        {"nombre": "Zeta", "cantidad": 2},
    ]
    assert an.rank(pd.Series(dtype="int64")) == []


@pytest.mark.parametrize("empty", [0, 0.0, False, None, ""])
def test_empty_cells_use_default_label(empty):
    """
    Objetivo: Verificar que una celda vacía de la planilla (incluido el número 0) toma la etiqueta por defecto y no aporta tokens.
    """
    assert an.label_of(empty, "Sin temática") == "Sin temática"
    assert an.split_tokens(empty) == []


def test_count_labels_zero_counts_as_missing():
    """
    Objetivo: Comprobar que un 0 en un campo de valor único se cuenta bajo la etiqueta por defecto.
    """
    docs = [{"Temática": 0}, {"Temática": "Agua"}, {}]
    counts = an.count_labels(docs, "Temática", "Sin temática")
    assert counts.to_dict() == {"Sin temática": 2, "Agua": 1}
