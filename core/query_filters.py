"""
Composición de consultas con filtros opcionales.

Un listado se define con una consulta base y un mapeo ordenado
``clave de filtro -> constructor de fragmento``. Solo se agregan (con AND) los
fragmentos cuyo valor está presente; luego se ordena (más reciente primero) y
al final se aplican LIMIT y OFFSET, en ese orden.

Reglas:

- Presente = no ``None`` y no cadena vacía. Un filtro ausente no altera el resultado.
- Claves que no están en el mapeo se ignoran.
- ``limit``/``offset`` se convierten a ``int``; ``0`` es un valor explícito y se
  aplica tal cual (``limit=0`` devuelve una lista vacía). Solo ``None`` significa
  "no enviado".
"""

from typing import Any, Callable, Mapping, Optional, Sequence

from sqlalchemy import func, or_
from sqlalchemy.orm import Query
from sqlalchemy.sql.elements import ColumnElement

from core.exceptions import ValidationException
from core.utils import enum_to_value

FragmentBuilder = Callable[[Any], ColumnElement]

LIKE_ESCAPE = "\\"


def is_present(value: Any) -> bool:
    """Indica si un valor de filtro debe producir un fragmento."""
    if value is None:
        return False
    if isinstance(value, str) and not value.strip():
        return False
    return True


def coerce_int(value: Any, field: str) -> Optional[int]:
    """Convierte limit/offset a int; None se conserva como 'no enviado'."""
    if value is None:
        return None
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ValidationException(f"{field} must be an integer", field=field)
    if number < 0:
        raise ValidationException(f"{field} must not be negative", field=field)
    return number


def equals(column) -> FragmentBuilder:
    """Fragmento de igualdad exacta sobre una columna."""
    return lambda value: column == enum_to_value(value)


def iequals(column) -> FragmentBuilder:
    """Igualdad sin distinguir mayúsculas (columnas de texto libre)."""
    return lambda value: func.lower(column) == str(enum_to_value(value)).strip().lower()


def _escape_like(term: str) -> str:
    return (
        term.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )


def search(*columns) -> FragmentBuilder:
    """Fragmento de búsqueda: subcadena sin distinguir mayúsculas, OR entre columnas."""

    def build(term: Any) -> ColumnElement:
        pattern = f"%{_escape_like(str(term).strip())}%"
        return or_(*(column.ilike(pattern, escape=LIKE_ESCAPE) for column in columns))

    return build


def apply_filters(
    query: Query,
    filters: Mapping[str, Any],
    fragments: Mapping[str, FragmentBuilder],
) -> Query:
    """Agrega los fragmentos presentes en el orden declarado en ``fragments``."""
    for key, build in fragments.items():
        value = filters.get(key)
        if is_present(value):
            query = query.filter(build(value))
    return query


def apply_pagination(query: Query, limit: Any = None, offset: Any = None) -> Query:
    """Aplica LIMIT y luego OFFSET solo si fueron enviados."""
    limit = coerce_int(limit, "limit")
    offset = coerce_int(offset, "offset")
    if limit is not None:
        query = query.limit(limit)
    if offset is not None:
        query = query.offset(offset)
    return query


def compose_filtered_query(
    query: Query,
    filters: Optional[Mapping[str, Any]],
    fragments: Mapping[str, FragmentBuilder],
    order_by: Sequence[Any],
) -> Query:
    """
    Construye la consulta final de un listado filtrado.

    Args:
        query: Consulta base (SELECT sin filtros)
        filters: Valores enviados por el llamador; puede incluir limit/offset
        fragments: Mapeo ordenado clave -> constructor de fragmento
        order_by: Criterios de orden determinista

    Returns:
        Consulta con filtros, orden y paginación aplicados
    """
    filters = filters or {}
    query = apply_filters(query, filters, fragments)
    query = query.order_by(*order_by)
    return apply_pagination(query, filters.get("limit"), filters.get("offset"))
