"""
Tests for the filtered-query composer.
"""

import pytest
from sqlalchemy import select
from sqlalchemy.orm import Session

from core.exceptions import ValidationException
from core.query_filters import (
    apply_pagination,
    coerce_int,
    compose_filtered_query,
    equals,
    iequals,
    is_present,
    search,
)
from database.models import PetORM


FRAGMENTS = {
    "status": equals(PetORM.status),
    "species": iequals(PetORM.species),
    "search": search(PetORM.name, PetORM.breed),
}


def compiled(query) -> str:
    return str(query.statement.compile(compile_kwargs={"literal_binds": True}))


class TestIsPresent:

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_absent_values(self, value):
        assert is_present(value) is False

    @pytest.mark.parametrize("value", ["dog", 0, False, "0"])
    def test_present_values(self, value):
        assert is_present(value) is True


class TestCoerceInt:

    def test_none_stays_none(self):
        assert coerce_int(None, "limit") is None

    @pytest.mark.parametrize("value, expected", [("5", 5), (3, 3), ("0", 0), (0, 0)])
    def test_converts(self, value, expected):
        assert coerce_int(value, "limit") == expected

    @pytest.mark.parametrize("value", ["abc", "1.5", -1, "-3"])
    def test_rejects(self, value):
        with pytest.raises(ValidationException) as exc:
            coerce_int(value, "offset")
        assert exc.value.status_code == 400
        assert "offset" in exc.value.message


class TestComposeFilteredQuery:

    def test_no_filters_only_orders(self, db_session: Session):
        query = compose_filtered_query(
            db_session.query(PetORM), {}, FRAGMENTS, (PetORM.id.desc(),)
        )
        sql = compiled(query)

        assert "WHERE" not in sql
        assert "ORDER BY pets.id DESC" in sql
        assert "LIMIT" not in sql

    def test_fragments_follow_declared_order(self, db_session: Session):
        # el orden del dict de filtros no importa, manda el de FRAGMENTS
        filters = {"search": "lab", "species": "Dog", "status": "available"}
        query = compose_filtered_query(
            db_session.query(PetORM), filters, FRAGMENTS, (PetORM.id.desc(),)
        )
        where = compiled(query).split("WHERE", 1)[1]

        status_at = where.index("pets.status = 'available'")
        species_at = where.index("lower(pets.species) = 'dog'")
        search_at = where.index("pets.name")
        assert status_at < species_at < search_at
        assert " OR " in where

    def test_limit_before_offset(self, db_session: Session):
        query = compose_filtered_query(
            db_session.query(PetORM), {"limit": "10", "offset": "20"}, FRAGMENTS, (PetORM.id,)
        )
        sql = compiled(query)

        assert sql.index("LIMIT 10") < sql.index("OFFSET 20")

    def test_limit_zero_is_applied(self, db_session: Session):
        query = apply_pagination(db_session.query(PetORM), limit=0)

        assert "LIMIT 0" in compiled(query)

    def test_search_escapes_like_wildcards(self):
        clause = search(PetORM.name)("50%_off")
        sql = str(clause.compile(compile_kwargs={"literal_binds": True}))

        assert "\\%" in sql
        assert "\\_off" in sql
        assert "ESCAPE" in sql

    def test_works_with_select_statements(self):
        stmt = select(PetORM).where(equals(PetORM.status)("adopted"))
        assert "pets.status = 'adopted'" in str(stmt.compile(compile_kwargs={"literal_binds": True}))
