"""Shared models and fixtures for the SQLAlchemy adapter tests."""

from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Any

import pytest
from sqlalchemy import (
    JSON,
    Boolean,
    Date,
    DateTime,
    Enum,
    Float,
    ForeignKey,
    Integer,
    String,
    Text,
)
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, validates
from sqlalchemy.pool import StaticPool

from admin_resource_core.domain.filter import FilterElement
from admin_resource_sqlalchemy import Resource


def _now() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


class Base(DeclarativeBase):
    pass


class User(Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    first_name: Mapped[str | None] = mapped_column(String(100))
    last_name: Mapped[str | None] = mapped_column(String(100))
    age: Mapped[int | None] = mapped_column(Integer)
    score: Mapped[float | None] = mapped_column(Float)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)
    birthday: Mapped[date | None] = mapped_column(Date)
    role: Mapped[str] = mapped_column(
        Enum("admin", "editor", name="user_role"), default="editor"
    )
    password_hash: Mapped[str | None] = mapped_column(String(128))
    settings: Mapped[dict[str, Any] | None] = mapped_column(JSON)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=_now)
    updated_at: Mapped[datetime] = mapped_column(DateTime, default=_now, onupdate=_now)

    @validates("email")
    def validate_email(self, key: str, value: str) -> str:
        if value is not None and "@" not in value:
            raise ValueError("Validation isEmail on email failed")
        return value

    @property
    def full_name(self) -> str:
        return f"{self.first_name or ''} {self.last_name or ''}".strip()


class Post(Base):
    __tablename__ = "posts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    body: Mapped[str | None] = mapped_column(Text)
    author_id: Mapped[int | None] = mapped_column(ForeignKey("users.id"))
    published_at: Mapped[datetime | None] = mapped_column(DateTime)


@pytest.fixture()
def base() -> type[Base]:
    return Base


@pytest.fixture()
def user_resource() -> Resource:
    """Users resource without a database, for metadata and compile tests."""
    return Resource(User, async_sessionmaker())


@pytest.fixture()
def post_resource() -> Resource:
    return Resource(Post, async_sessionmaker())


@pytest.fixture()
def make_element():
    def _make(resource: Resource, path: str, value: Any) -> FilterElement:
        prop = resource.property(path)
        assert prop is not None
        return FilterElement(path=path, property=prop, value=value)

    return _make


@pytest.fixture()
async def session_factory():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield async_sessionmaker(engine, expire_on_commit=False)
    await engine.dispose()


@pytest.fixture()
def users(session_factory) -> Resource:
    return Resource(User, session_factory)


@pytest.fixture()
def posts(session_factory) -> Resource:
    return Resource(Post, session_factory)
