from datetime import date

import pytest
from pydantic import ValidationError as PydanticValidationError

from admin_resource_sqlalchemy import build_params_schema
from admin_resource_sqlalchemy.schema import errors_from_pydantic


def test_schema_covers_editable_columns_only(user_resource):
    schema = build_params_schema(user_resource.model)

    assert "email" in schema.model_fields
    assert "created_at" in schema.model_fields
    assert "id" not in schema.model_fields
    assert "updated_at" not in schema.model_fields
    assert "full_name" not in schema.model_fields


def test_schema_coerces_form_strings(user_resource):
    schema = build_params_schema(user_resource.model)

    validated = schema.model_validate(
        {"email": "a@b.io", "age": "42", "is_active": "false", "birthday": "1990-05-01"}
    )

    assert validated.model_dump(exclude_unset=True) == {
        "email": "a@b.io",
        "age": 42,
        "is_active": False,
        "birthday": date(1990, 5, 1),
    }


def test_create_schema_requires_non_nullable_columns(user_resource):
    schema = build_params_schema(user_resource.model)

    with pytest.raises(PydanticValidationError) as exc_info:
        schema.model_validate({"first_name": "John"})

    errors = errors_from_pydantic(exc_info.value)
    assert list(errors) == ["email"]
    assert errors["email"].kind == "missing"


def test_update_schema_is_partial(user_resource):
    schema = build_params_schema(user_resource.model, partial=True)

    assert schema.model_validate({"first_name": "John"}).model_dump(
        exclude_unset=True
    ) == {"first_name": "John"}


def test_schema_enforces_length_and_choices(user_resource):
    schema = build_params_schema(user_resource.model)

    with pytest.raises(PydanticValidationError) as exc_info:
        schema.model_validate({"email": "a@b.io", "first_name": "x" * 101, "role": "root"})

    errors = errors_from_pydantic(exc_info.value)
    assert set(errors) == {"first_name", "role"}


def test_empty_string_is_not_a_number(post_resource):
    schema = build_params_schema(post_resource.model)

    with pytest.raises(PydanticValidationError) as exc_info:
        schema.model_validate({"title": "Hello", "author_id": ""})

    assert list(errors_from_pydantic(exc_info.value)) == ["author_id"]


def test_schema_is_cached(user_resource):
    model = user_resource.model

    assert build_params_schema(model) is build_params_schema(model)
    assert build_params_schema(model) is not build_params_schema(model, partial=True)
