"""
Conteos y sumas en memoria sobre documentos "crudos" importados de planillas
(colección EXCEL-BUN).

Receta común:
- cada campo de texto se parte por comas y se recortan los tokens
- se descartan vacíos y el centinela "n/a" (sin importar mayúsculas)
- los tokens se deduplican por documento antes de contar
- el resultado se ordena por métrica descendente y, a igualdad, por nombre
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, Mapping, Sequence

import pandas as pd

SENTINEL = "n/a"

# "12,5" / " 3.2 MM" / "1e3" -> prefijo numérico (mismo criterio que parseFloat)
_LEADING_NUMBER = r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)"

Doc = Mapping[str, Any]


def _is_missing(value: Any) -> bool:
    # celdas vacías de la planilla: None, "", False o 0
    if isinstance(value, (int, float)) and value == 0:
        return True
    return value is None or value == ""


def _excluded(token: str) -> bool:
    return not token or token.lower() == SENTINEL


def split_tokens(value: Any) -> list[str]:
    """String separado por comas o lista -> tokens recortados, sin vacíos ni 'n/a'."""
    if _is_missing(value):
        return []
    if isinstance(value, (list, tuple)):
        parts = [str(v) for v in value if v is not None]
    else:
        parts = str(value).split(",")
    return [t for t in (p.strip() for p in parts) if not _excluded(t)]


def label_of(value: Any, default: str | None = None) -> str | None:
    """
    Etiqueta de un campo de valor único. Si falta se usa `default`;
    devuelve None cuando la etiqueta queda vacía o es 'n/a'.
    """
    text = default if _is_missing(value) else str(value)
    if text is None:
        return None
    text = text.strip()
    return None if _excluded(text) else text


def tokens_of(doc: Doc, fields: Sequence[str]) -> list[str]:
    """Tokens únicos (en orden de aparición) de varios campos de un documento."""
    seen: dict[str, None] = {}
    for field in fields:
        for token in split_tokens(doc.get(field)):
            seen.setdefault(token, None)
    return list(seen)


# ---------- conteos ----------

def count_labels(docs: Iterable[Doc], field: str, default: str | None = None) -> pd.Series:
    labels = [label_of(doc.get(field), default) for doc in docs]
    return pd.Series([l for l in labels if l is not None], dtype="object").value_counts()


def count_tokens(docs: Iterable[Doc], fields: Sequence[str]) -> pd.Series:
    """Cuántos documentos mencionan cada token (un documento cuenta una vez por token)."""
    tokens = [token for doc in docs for token in tokens_of(doc, fields)]
    return pd.Series(tokens, dtype="object").value_counts()


def distinct_labels(docs: Iterable[Doc], field: str) -> set[str]:
    return {l for l in (label_of(doc.get(field)) for doc in docs) if l is not None}


def distinct_tokens(docs: Iterable[Doc], fields: Sequence[str]) -> set[str]:
    return {token for doc in docs for token in tokens_of(doc, fields)}


def count_members_per_group(
    docs: Iterable[Doc], group_fields: Sequence[str], member_fields: Sequence[str]
) -> pd.Series:
    """
    Miembros distintos por grupo (p. ej. profesores únicos por unidad académica).
    Documentos sin miembros no aportan grupos.
    """
    pairs = [
        (group, member)
        for doc in docs
        for member in tokens_of(doc, member_fields)
        for group in tokens_of(doc, group_fields)
    ]
    frame = pd.DataFrame(pairs, columns=["group", "member"])
    if frame.empty:
        return pd.Series(dtype="int64")
    return frame.drop_duplicates().groupby("group")["member"].nunique()


# ---------- montos ----------

def parse_amounts(raw: pd.Series) -> pd.Series:
    """
    Montos en texto con coma decimal ("12,5") -> float.
    Se toma el prefijo numérico; lo que no tiene número queda NaN.
    """
    text = raw.astype(str).str.replace(",", ".", n=1, regex=False)
    return pd.to_numeric(text.str.extract(_LEADING_NUMBER, expand=False), errors="coerce")


def amounts_by_label(
    docs: Sequence[Doc], amount_field: str, label_field: str, default: str | None = None
) -> tuple[float, pd.Series]:
    """
    Devuelve (total, suma por etiqueta). Un monto faltante cuenta como 0;
    uno no numérico se ignora. El total incluye documentos sin etiqueta válida.
    """
    frame = pd.DataFrame(
        {
            "label": [label_of(doc.get(label_field), default) for doc in docs],
            "raw": ["0" if _is_missing(doc.get(amount_field)) else doc.get(amount_field) for doc in docs],
        },
        dtype="object",
    )
    frame["amount"] = parse_amounts(frame["raw"]) if not frame.empty else pd.Series(dtype="float64")
    total = float(frame["amount"].sum(skipna=True)) if not frame.empty else 0.0

    valid = frame.dropna(subset=["label", "amount"])
    per_label = valid.groupby("label")["amount"].sum() if not valid.empty else pd.Series(dtype="float64")
    return total, per_label


# ---------- salida ----------

def rank(
    series: pd.Series,
    key: str = "nombre",
    value: str = "cantidad",
    cast: Callable[[Any], Any] = int,
) -> list[dict]:
    """Serie etiqueta->métrica a lista de dicts, métrica desc y nombre asc."""
    if series.empty:
        return []
    frame = series.rename_axis(key).reset_index(name=value)
    frame = frame.sort_values([value, key], ascending=[False, True], kind="mergesort")
    return [{key: str(k), value: cast(v)} for k, v in zip(frame[key], frame[value])]
