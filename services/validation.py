"""
Validation rules for vacancies, candidates and interviews.

Each entity has a pydantic model whose `before` validators implement the
rules; the model turns a raw mapping into a type-coerced record. Rules that
need the database (unique email, existing foreign keys) read repositories
handed in through the pydantic validation context, so the models stay usable
without a session for the purely static checks.

Only the first failing rule of a field is reported, and messages follow the
`The <field> field ...` wording shown to users.
"""

from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, List, Mapping, Optional, Tuple, Type

from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, ConfigDict, ValidationError, ValidationInfo, field_validator
from pydantic_core import PydanticCustomError

from repositories.base_repository import is_storable_id

FieldErrors = Dict[str, List[str]]

AREA_MAX_LENGTH = 255
NOMBRE_MAX_LENGTH = 255
CORREO_MAX_LENGTH = 255
NOTAS_MAX_LENGTH = 1000

_BOOLEAN_STRINGS = {"1": True, "0": False, "true": True, "false": False}


def _label(field: str) -> str:
    return field.replace("_", " ")


def _fail(error_type: str, template: str, field: str, **context: Any) -> PydanticCustomError:
    return PydanticCustomError(error_type, template, {"field": _label(field), **context})


def _required(value: Any, field: str) -> Any:
    if value is None or (isinstance(value, str) and not value.strip()):
        raise _fail("required", "The {field} field is required.", field)
    return value


def _string(value: Any, field: str, max_length: int) -> str:
    _required(value, field)
    if not isinstance(value, str):
        raise _fail("string", "The {field} field must be a string.", field)
    value = value.strip()
    if len(value) > max_length:
        raise _fail(
            "max",
            "The {field} field must not be greater than {max} characters.",
            field,
            max=max_length,
        )
    return value


def _numeric(value: Any, field: str, minimum: int = 0) -> Decimal:
    _required(value, field)
    number = None
    if isinstance(value, (int, float, Decimal)) and not isinstance(value, bool):
        number = Decimal(str(value))
    elif isinstance(value, str):
        try:
            number = Decimal(value.strip())
        except InvalidOperation:
            number = None
    if number is None or not number.is_finite():
        raise _fail("numeric", "The {field} field must be a number.", field)
    if number < minimum:
        raise _fail("min", "The {field} field must be at least {min}.", field, min=minimum)
    return number


def _boolean(value: Any, field: str) -> bool:
    _required(value, field)
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str) and value.strip().lower() in _BOOLEAN_STRINGS:
        return _BOOLEAN_STRINGS[value.strip().lower()]
    raise _fail("boolean", "The {field} field must be true or false.", field)


def _date(value: Any, field: str) -> date:
    _required(value, field)
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value.strip()).date()
        except ValueError:
            pass
    raise _fail("date", "The {field} field must be a valid date.", field)


def _email(value: Any, field: str) -> str:
    value = _string(value, field, CORREO_MAX_LENGTH)
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        raise _fail("email", "The {field} field must be a valid email address.", field)
    return value


def _identifier(value: Any, field: str) -> int:
    _required(value, field)
    if isinstance(value, str) and value.strip().isdigit():
        value = int(value.strip())
    if is_storable_id(value):
        return value
    raise _fail("exists", "The selected {field} is invalid.", field)


class VacanteRules(BaseModel):
    model_config = ConfigDict(extra="ignore")

    area: str
    sueldo: Decimal
    activo: bool

    @field_validator("area", mode="before")
    @classmethod
    def check_area(cls, value: Any, info: ValidationInfo) -> str:
        return _string(value, info.field_name, AREA_MAX_LENGTH)

    @field_validator("sueldo", mode="before")
    @classmethod
    def check_sueldo(cls, value: Any, info: ValidationInfo) -> Decimal:
        return _numeric(value, info.field_name, minimum=0)

    @field_validator("activo", mode="before")
    @classmethod
    def check_activo(cls, value: Any, info: ValidationInfo) -> bool:
        return _boolean(value, info.field_name)


class ProspectoRules(BaseModel):
    """
    Candidate rules.

    Validation context keys:
        prospectos: ProspectoRepository used for the unique email check
        ignore_id: id of the candidate being updated (its own email is allowed)
    """

    model_config = ConfigDict(extra="ignore")

    nombre: str
    correo: str
    fecha_registro: date

    @field_validator("nombre", mode="before")
    @classmethod
    def check_nombre(cls, value: Any, info: ValidationInfo) -> str:
        return _string(value, info.field_name, NOMBRE_MAX_LENGTH)

    @field_validator("correo", mode="before")
    @classmethod
    def check_correo(cls, value: Any, info: ValidationInfo) -> str:
        correo = _email(value, info.field_name)
        context = info.context or {}
        prospectos = context.get("prospectos")
        if prospectos is not None and prospectos.get_by_correo(correo, exclude_id=context.get("ignore_id")):
            raise _fail("unique", "The {field} has already been taken.", info.field_name)
        return correo

    @field_validator("fecha_registro", mode="before")
    @classmethod
    def check_fecha_registro(cls, value: Any, info: ValidationInfo) -> date:
        return _date(value, info.field_name)


class EntrevistaRules(BaseModel):
    """
    Interview rules.

    Validation context keys:
        vacantes: VacanteRepository used to check the vacancy exists
        prospectos: ProspectoRepository used to check the candidate exists
    """

    model_config = ConfigDict(extra="ignore")

    vacante: int
    prospecto: int
    fecha_entrevista: date
    notas: str
    reclutado: bool

    @field_validator("vacante", "prospecto", mode="before")
    @classmethod
    def check_reference(cls, value: Any, info: ValidationInfo) -> int:
        identifier = _identifier(value, info.field_name)
        repository = (info.context or {}).get(f"{info.field_name}s")
        if repository is not None and not repository.exists(identifier):
            raise _fail("exists", "The selected {field} is invalid.", info.field_name)
        return identifier

    @field_validator("fecha_entrevista", mode="before")
    @classmethod
    def check_fecha_entrevista(cls, value: Any, info: ValidationInfo) -> date:
        return _date(value, info.field_name)

    @field_validator("notas", mode="before")
    @classmethod
    def check_notas(cls, value: Any, info: ValidationInfo) -> str:
        return _string(value, info.field_name, NOTAS_MAX_LENGTH)

    @field_validator("reclutado", mode="before")
    @classmethod
    def check_reclutado(cls, value: Any, info: ValidationInfo) -> bool:
        return _boolean(value, info.field_name)


def collect_errors(exc: ValidationError) -> FieldErrors:
    """Flatten a pydantic ValidationError into a field -> messages map."""
    errors: FieldErrors = {}
    for error in exc.errors():
        field = str(error["loc"][0]) if error["loc"] else "general"
        if error["type"] == "missing":
            message = f"The {_label(field)} field is required."
        else:
            message = error["msg"]
        errors.setdefault(field, []).append(message)
    return errors


def _apply(
    rules: Type[BaseModel],
    data: Mapping[str, Any],
    context: Optional[Dict[str, Any]] = None
) -> Tuple[Optional[Dict[str, Any]], FieldErrors]:
    payload = dict(data) if isinstance(data, Mapping) else data
    try:
        record = rules.model_validate(payload, context=context)
    except ValidationError as exc:
        return None, collect_errors(exc)
    return record.model_dump(), {}


def validate_vacante(data: Mapping[str, Any]) -> Tuple[Optional[Dict[str, Any]], FieldErrors]:
    """
    Validate vacancy input.

    Returns:
        (record, {}) when valid, (None, errors) otherwise
    """
    return _apply(VacanteRules, data)


def validate_prospecto(
    data: Mapping[str, Any],
    prospectos=None,
    ignore_id: Optional[int] = None
) -> Tuple[Optional[Dict[str, Any]], FieldErrors]:
    """
    Validate candidate input.

    Args:
        data: Raw field mapping
        prospectos: ProspectoRepository for the unique email check (skipped when None)
        ignore_id: Candidate id excluded from the unique email check
    """
    return _apply(ProspectoRules, data, {"prospectos": prospectos, "ignore_id": ignore_id})


def validate_entrevista(
    data: Mapping[str, Any],
    vacantes=None,
    prospectos=None
) -> Tuple[Optional[Dict[str, Any]], FieldErrors]:
    """
    Validate interview input.

    Args:
        data: Raw field mapping
        vacantes: VacanteRepository for the vacancy existence check (skipped when None)
        prospectos: ProspectoRepository for the candidate existence check (skipped when None)
    """
    return _apply(EntrevistaRules, data, {"vacantes": vacantes, "prospectos": prospectos})
