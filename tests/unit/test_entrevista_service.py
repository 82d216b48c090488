"""
Unit tests for EntrevistaService.

Run: pytest tests/unit/test_entrevista_service.py -v
"""

from datetime import date

from sqlalchemy.exc import IntegrityError

from models.entrevista import EntrevistaDetail
from services.entrevista_service import DUPLICATE_MESSAGE
from services.result import Conflict, NotFound, Ok, SystemFailure, ValidationFailed


class TestCreate:

    def test_create_returns_detail(self, entrevista_service, entrevista_data):
        result = entrevista_service.create(entrevista_data)
        assert isinstance(result, Ok)
        assert isinstance(result.data, EntrevistaDetail)
        assert result.data.vacante.area == "Desarrollo"
        assert result.data.prospecto.nombre == "Ana Torres"
        assert result.data.entrevista.fecha_entrevista == date(2024, 1, 15)

    def test_duplicate_pair_is_a_conflict(self, entrevista_service, entrevista_data):
        entrevista_service.create(entrevista_data)
        result = entrevista_service.create({**entrevista_data, "notas": "Segunda"})
        assert isinstance(result, Conflict)
        assert result.message == DUPLICATE_MESSAGE
        assert entrevista_service.entrevistas.count() == 1

    def test_unknown_vacancy(self, entrevista_service, entrevista_data):
        result = entrevista_service.create({**entrevista_data, "vacante": 999})
        assert isinstance(result, ValidationFailed)
        assert result.errors == {"vacante": ["The selected vacante is invalid."]}

    def test_vacancy_beyond_integer_range(self, entrevista_service, entrevista_data):
        result = entrevista_service.create({**entrevista_data, "vacante": 2**63})
        assert isinstance(result, ValidationFailed)
        assert result.errors == {"vacante": ["The selected vacante is invalid."]}
        assert entrevista_service.entrevistas.count() == 0

    def test_integrity_error_on_duplicate_pair_is_a_conflict(self, entrevista_service, entrevista_data, monkeypatch):
        # Another request inserts the same pair between the check and the commit
        entrevista_service.create(entrevista_data)
        real_pair_exists = entrevista_service.entrevistas.pair_exists
        calls = []

        def stale_first_check(*args, **kwargs):
            calls.append(args)
            if len(calls) == 1:
                return False
            return real_pair_exists(*args, **kwargs)

        monkeypatch.setattr(entrevista_service.entrevistas, "pair_exists", stale_first_check)

        result = entrevista_service.create(entrevista_data)
        assert isinstance(result, Conflict)
        assert result.message == DUPLICATE_MESSAGE
        assert len(calls) == 2
        assert entrevista_service.entrevistas.count() == 1

    def test_other_integrity_errors_are_system_failures(self, entrevista_service, entrevista_data, monkeypatch):
        def broken(entity):
            raise IntegrityError("INSERT", {}, Exception("NOT NULL constraint failed"))

        monkeypatch.setattr(entrevista_service.entrevistas, "create", broken)
        result = entrevista_service.create(entrevista_data)
        assert isinstance(result, SystemFailure)
        assert result.message == "Error creating the interview"


class TestReads:

    def test_get_by_pair(self, entrevista_service, entrevista_data):
        entrevista_service.create(entrevista_data)
        result = entrevista_service.get(entrevista_data["vacante"], entrevista_data["prospecto"])
        assert isinstance(result, Ok)
        assert result.data.entrevista.notas == "Primera entrevista técnica"

    def test_get_missing_pair(self, entrevista_service):
        result = entrevista_service.get(1, 1)
        assert isinstance(result, NotFound)
        assert result.message == "Interview not found"

    def test_pair_beyond_integer_range(self, entrevista_service, entrevista_data):
        entrevista_service.create(entrevista_data)
        assert isinstance(entrevista_service.get(2**63, entrevista_data["prospecto"]), NotFound)
        assert isinstance(entrevista_service.delete(entrevista_data["vacante"], 2**63), NotFound)
        assert entrevista_service.get_by_vacante(2**63).data == []
        assert entrevista_service.get_by_prospecto(2**63).data == []

    def test_filters_by_vacancy_and_candidate(self, entrevista_service, vacante_service, entrevista_data):
        entrevista_service.create(entrevista_data)
        other = vacante_service.create({"area": "Marketing", "sueldo": 1, "activo": True}).data
        entrevista_service.create({**entrevista_data, "vacante": other.id})

        assert len(entrevista_service.get_all().data) == 2
        assert len(entrevista_service.get_by_vacante(other.id).data) == 1
        assert len(entrevista_service.get_by_prospecto(entrevista_data["prospecto"]).data) == 2
        assert entrevista_service.get_by_vacante(999).data == []

    def test_form_data(self, entrevista_service, vacante, prospecto):
        data = entrevista_service.get_form_data().data
        assert [v.id for v in data["vacantes"]] == [vacante.id]
        assert [p.id for p in data["prospectos"]] == [prospecto.id]


class TestUpdate:

    def test_update_fields(self, entrevista_service, entrevista_data):
        entrevista_service.create(entrevista_data)
        result = entrevista_service.update(
            entrevista_data["vacante"],
            entrevista_data["prospecto"],
            {**entrevista_data, "notas": "Contratado", "reclutado": True},
        )
        assert isinstance(result, Ok)

        stored = entrevista_service.get(entrevista_data["vacante"], entrevista_data["prospecto"]).data
        assert stored.entrevista.notas == "Contratado"
        assert stored.entrevista.reclutado is True

    def test_update_moves_to_free_pair(self, entrevista_service, vacante_service, entrevista_data):
        entrevista_service.create(entrevista_data)
        other = vacante_service.create({"area": "Marketing", "sueldo": 1, "activo": True}).data

        result = entrevista_service.update(
            entrevista_data["vacante"], entrevista_data["prospecto"], {**entrevista_data, "vacante": other.id}
        )
        assert isinstance(result, Ok)
        assert result.data.vacante.area == "Marketing"
        assert isinstance(entrevista_service.get(entrevista_data["vacante"], entrevista_data["prospecto"]), NotFound)

    def test_update_onto_taken_pair_is_a_conflict(self, entrevista_service, vacante_service, entrevista_data):
        entrevista_service.create(entrevista_data)
        other = vacante_service.create({"area": "Marketing", "sueldo": 1, "activo": True}).data
        entrevista_service.create({**entrevista_data, "vacante": other.id, "notas": "Otra"})

        result = entrevista_service.update(
            other.id, entrevista_data["prospecto"], {**entrevista_data, "notas": "Cambiada"}
        )
        assert isinstance(result, Conflict)
        assert result.message == DUPLICATE_MESSAGE

        unchanged = entrevista_service.get(other.id, entrevista_data["prospecto"]).data
        assert unchanged.entrevista.notas == "Otra"

    def test_update_missing_pair(self, entrevista_service, entrevista_data):
        assert isinstance(entrevista_service.update(999, 999, entrevista_data), NotFound)


class TestDelete:

    def test_delete(self, entrevista_service, entrevista_data):
        entrevista_service.create(entrevista_data)
        result = entrevista_service.delete(entrevista_data["vacante"], entrevista_data["prospecto"])
        assert isinstance(result, Ok)
        assert entrevista_service.entrevistas.count() == 0

    def test_delete_missing_pair(self, entrevista_service):
        assert isinstance(entrevista_service.delete(1, 2), NotFound)
