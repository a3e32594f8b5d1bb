import pytest
from sqlalchemy import Double, Float, Integer, Numeric
from sqlalchemy.ext.asyncio import async_sessionmaker
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from admin_resource_core.domain.property import PropertyType
from admin_resource_sqlalchemy import Resource


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("id", PropertyType.NUMBER),
        ("email", PropertyType.STRING),
        ("age", PropertyType.NUMBER),
        ("score", PropertyType.FLOAT),
        ("is_active", PropertyType.BOOLEAN),
        ("birthday", PropertyType.DATE),
        ("created_at", PropertyType.DATETIME),
        ("role", PropertyType.STRING),
        ("settings", PropertyType.OTHER),
        ("full_name", PropertyType.OTHER),
    ],
)
def test_property_types(user_resource, name, expected):
    assert user_resource.property(name).type() is expected


def test_floating_point_columns_are_float():
    class MeasureBase(DeclarativeBase):
        pass

    class Measure(MeasureBase):
        __tablename__ = "measures"

        id: Mapped[int] = mapped_column(Integer, primary_key=True)
        ratio: Mapped[float] = mapped_column(Float)
        precise: Mapped[float] = mapped_column(Double)
        amount: Mapped[float] = mapped_column(Numeric(10, 2))

    resource = Resource(Measure, async_sessionmaker())

    for name in ("ratio", "precise", "amount"):
        assert resource.property(name).type() is PropertyType.FLOAT
    assert resource.parse_params({"ratio": "", "precise": "", "amount": ""}) == {}


def test_foreign_key_is_reference(post_resource):
    author = post_resource.property("author_id")

    assert author.type() is PropertyType.REFERENCE
    assert author.reference() == "users"
    assert post_resource.property("title").reference() is None


def test_properties_follow_mapper_order_then_virtual(user_resource):
    names = [p.name() for p in user_resource.properties()]

    assert names[:3] == ["id", "email", "first_name"]
    assert names[-1] == "full_name"
    assert len(names) == 14


def test_editability(user_resource):
    assert user_resource.property("email").is_editable()
    assert user_resource.property("created_at").is_editable()
    assert not user_resource.property("id").is_editable()
    assert not user_resource.property("updated_at").is_editable()
    assert not user_resource.property("full_name").is_editable()


def test_sortability(user_resource):
    assert user_resource.property("email").is_sortable()
    assert not user_resource.property("settings").is_sortable()
    assert not user_resource.property("full_name").is_sortable()


def test_required_visibility_and_id(user_resource):
    assert user_resource.property("email").is_required()
    assert not user_resource.property("first_name").is_required()
    assert not user_resource.property("is_active").is_required()
    assert not user_resource.property("password_hash").is_visible()
    assert user_resource.property("id").is_id()
    assert user_resource.id_property().name() == "id"
    assert user_resource.title_property().name() == "email"


def test_available_values_for_enum(user_resource):
    assert user_resource.property("role").available_values() == ["admin", "editor"]
    assert user_resource.property("email").available_values() is None


def test_virtual_property_has_no_column(user_resource):
    full_name = user_resource.property("full_name")

    assert full_name.column is None
    assert full_name.is_virtual()


def test_unknown_property_is_none(user_resource):
    assert user_resource.property("nope") is None
