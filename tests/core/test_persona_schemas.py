# tests/core/test_persona_schemas.py
import pytest
from pydantic import ValidationError

from personas_api.schemas.common import ErrorResponse
from personas_api.schemas.personas import PersonaCreate, PersonaRead


class TestPersonaCreate:
    def test_accepts_camel_case_body(self, sample_payload):
        payload = PersonaCreate.model_validate(sample_payload)
        assert payload.identity_number == "0012345678"
        assert payload.first_name == "Ana"
        assert payload.birth_date == "1990-04-12"

    def test_integer_identity_number_is_coerced_to_string(self):
        payload = PersonaCreate.model_validate({"identityNumber": 4567, "firstName": "Ana"})
        assert payload.identity_number == "4567"

    def test_integer_zero_identity_number_is_blank(self):
        payload = PersonaCreate.model_validate({"identityNumber": 0, "firstName": "Ana"})
        assert payload.identity_number is None

    def test_string_zero_identity_number_is_kept(self):
        payload = PersonaCreate.model_validate({"identityNumber": "0", "firstName": "Ana"})
        assert payload.identity_number == "0"

    def test_boolean_identity_number_is_rejected(self):
        with pytest.raises(ValidationError):
            PersonaCreate.model_validate({"identityNumber": True})

    def test_client_id_is_ignored(self):
        payload = PersonaCreate.model_validate({"id": 999, "firstName": "Ana"})
        assert "id" not in payload.model_dump()

    def test_all_fields_optional_at_schema_level(self):
        payload = PersonaCreate.model_validate({})
        assert payload.identity_number is None
        assert payload.first_name is None


class TestWireFormat:
    def test_read_dumps_camel_case(self):
        persona = PersonaRead(id=1, identity_number="1", first_name="Ana")
        dumped = persona.model_dump(by_alias=True)
        assert dumped["identityNumber"] == "1"
        assert dumped["firstName"] == "Ana"
        assert dumped["lastName"] is None

    def test_error_response_shape(self):
        body = ErrorResponse(error_type="Validaciones", description="boom")
        assert body.model_dump(by_alias=True) == {
            "errorType": "Validaciones",
            "description": "boom",
        }
