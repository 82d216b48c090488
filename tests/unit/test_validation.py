"""
Unit tests for the vacancy, candidate and interview validation rules.

Run: pytest tests/unit/test_validation.py -v
"""

from datetime import date
from decimal import Decimal

import pytest

from repositories import ProspectoRepository, VacanteRepository
from services.validation import validate_entrevista, validate_prospecto, validate_vacante


# ---------------------------------------------------------------------------
# Vacante
# ---------------------------------------------------------------------------

class TestValidateVacante:

    def test_valid_payload_is_coerced(self):
        record, errors = validate_vacante({"area": "  Desarrollo ", "sueldo": "45000.50", "activo": "1"})
        assert errors == {}
        assert record == {"area": "Desarrollo", "sueldo": Decimal("45000.50"), "activo": True}

    def test_missing_fields_are_required(self):
        record, errors = validate_vacante({})
        assert record is None
        assert errors == {
            "area": ["The area field is required."],
            "sueldo": ["The sueldo field is required."],
            "activo": ["The activo field is required."],
        }

    def test_blank_area_is_required(self):
        _, errors = validate_vacante({"area": "   ", "sueldo": 1, "activo": True})
        assert errors == {"area": ["The area field is required."]}

    def test_area_longer_than_255_characters(self):
        _, errors = validate_vacante({"area": "a" * 256, "sueldo": 1, "activo": True})
        assert errors == {"area": ["The area field must not be greater than 255 characters."]}

    def test_area_must_be_a_string(self):
        _, errors = validate_vacante({"area": 123, "sueldo": 1, "activo": True})
        assert errors == {"area": ["The area field must be a string."]}

    @pytest.mark.parametrize("sueldo", ["abc", True, [1], "nan"])
    def test_sueldo_must_be_a_number(self, sueldo):
        _, errors = validate_vacante({"area": "Desarrollo", "sueldo": sueldo, "activo": True})
        assert errors == {"sueldo": ["The sueldo field must be a number."]}

    def test_negative_sueldo(self):
        _, errors = validate_vacante({"area": "Desarrollo", "sueldo": -1, "activo": True})
        assert errors == {"sueldo": ["The sueldo field must be at least 0."]}

    def test_zero_sueldo_is_allowed(self):
        record, errors = validate_vacante({"area": "Desarrollo", "sueldo": 0, "activo": False})
        assert errors == {}
        assert record["sueldo"] == Decimal("0")

    @pytest.mark.parametrize("activo,expected", [(True, True), (0, False), ("true", True), ("0", False)])
    def test_activo_accepts_boolean_forms(self, activo, expected):
        record, errors = validate_vacante({"area": "Desarrollo", "sueldo": 1, "activo": activo})
        assert errors == {}
        assert record["activo"] is expected

    @pytest.mark.parametrize("activo", ["yes", 2, 1.5])
    def test_activo_rejects_other_values(self, activo):
        _, errors = validate_vacante({"area": "Desarrollo", "sueldo": 1, "activo": activo})
        assert errors == {"activo": ["The activo field must be true or false."]}

    def test_unknown_fields_are_ignored(self):
        record, errors = validate_vacante({"area": "Desarrollo", "sueldo": 1, "activo": True, "id": 99})
        assert errors == {}
        assert "id" not in record


# ---------------------------------------------------------------------------
# Prospecto
# ---------------------------------------------------------------------------

class TestValidateProspecto:

    def test_valid_payload(self):
        record, errors = validate_prospecto(
            {"nombre": "Ana Torres", "correo": "ana.torres@empresa.com", "fecha_registro": "2024-01-10"}
        )
        assert errors == {}
        assert record["fecha_registro"] == date(2024, 1, 10)

    def test_invalid_email(self):
        _, errors = validate_prospecto(
            {"nombre": "Ana Torres", "correo": "not-an-email", "fecha_registro": "2024-01-10"}
        )
        assert errors == {"correo": ["The correo field must be a valid email address."]}

    def test_invalid_date(self):
        _, errors = validate_prospecto(
            {"nombre": "Ana Torres", "correo": "ana.torres@empresa.com", "fecha_registro": "10/01/2024"}
        )
        assert errors == {"fecha_registro": ["The fecha registro field must be a valid date."]}

    def test_date_objects_are_accepted(self):
        record, errors = validate_prospecto(
            {"nombre": "Ana Torres", "correo": "ana.torres@empresa.com", "fecha_registro": date(2024, 1, 10)}
        )
        assert errors == {}
        assert record["fecha_registro"] == date(2024, 1, 10)

    def test_taken_email(self, db_session, prospecto):
        _, errors = validate_prospecto(
            {"nombre": "Otra Persona", "correo": prospecto.correo, "fecha_registro": "2024-02-01"},
            prospectos=ProspectoRepository(db_session),
        )
        assert errors == {"correo": ["The correo has already been taken."]}

    def test_own_email_is_not_taken(self, db_session, prospecto):
        _, errors = validate_prospecto(
            {"nombre": "Ana T.", "correo": prospecto.correo, "fecha_registro": "2024-02-01"},
            prospectos=ProspectoRepository(db_session),
            ignore_id=prospecto.id,
        )
        assert errors == {}


# ---------------------------------------------------------------------------
# Entrevista
# ---------------------------------------------------------------------------

class TestValidateEntrevista:

    def test_valid_payload(self, db_session, entrevista_data):
        record, errors = validate_entrevista(
            entrevista_data,
            vacantes=VacanteRepository(db_session),
            prospectos=ProspectoRepository(db_session),
        )
        assert errors == {}
        assert record["fecha_entrevista"] == date(2024, 1, 15)
        assert record["reclutado"] is False

    def test_unknown_references(self, db_session):
        _, errors = validate_entrevista(
            {"vacante": 999, "prospecto": 998, "fecha_entrevista": "2024-01-15", "notas": "x", "reclutado": True},
            vacantes=VacanteRepository(db_session),
            prospectos=ProspectoRepository(db_session),
        )
        assert errors == {
            "vacante": ["The selected vacante is invalid."],
            "prospecto": ["The selected prospecto is invalid."],
        }

    def test_non_numeric_reference(self):
        _, errors = validate_entrevista(
            {"vacante": "abc", "prospecto": 1, "fecha_entrevista": "2024-01-15", "notas": "x", "reclutado": True}
        )
        assert errors == {"vacante": ["The selected vacante is invalid."]}

    def test_reference_beyond_integer_range(self, db_session):
        _, errors = validate_entrevista(
            {"vacante": 2**63, "prospecto": "0", "fecha_entrevista": "2024-01-15", "notas": "x", "reclutado": True},
            vacantes=VacanteRepository(db_session),
            prospectos=ProspectoRepository(db_session),
        )
        assert errors == {
            "vacante": ["The selected vacante is invalid."],
            "prospecto": ["The selected prospecto is invalid."],
        }

    def test_notas_longer_than_1000_characters(self):
        _, errors = validate_entrevista(
            {"vacante": 1, "prospecto": 1, "fecha_entrevista": "2024-01-15", "notas": "n" * 1001, "reclutado": True}
        )
        assert errors == {"notas": ["The notas field must not be greater than 1000 characters."]}

    def test_all_fields_required(self):
        _, errors = validate_entrevista({})
        assert set(errors) == {"vacante", "prospecto", "fecha_entrevista", "notas", "reclutado"}
        assert errors["fecha_entrevista"] == ["The fecha entrevista field is required."]
