# personas_api/db/models.py

from __future__ import annotations

from typing import Optional

from sqlalchemy import Integer, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

# ---------------------------------------------------------------------------
# Base
# ---------------------------------------------------------------------------


class Base(DeclarativeBase):
    pass


# ---------------------------------------------------------------------------
# Personas
# ---------------------------------------------------------------------------


class Persona(Base):
    """
    A natural person managed through the Personas API.

    Only ``id`` is guaranteed; every other column is nullable at the storage
    level. The create-time rules in ``services.validation`` are what keep
    ``identity_number`` and ``first_name`` populated for new rows.
    """

    __tablename__ = "personas"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    # External identifier supplied by the client; not unique.
    identity_number: Mapped[Optional[str]] = mapped_column(String(64), nullable=True, index=True)

    first_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    last_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    email: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    phone: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)

    # Free text, never parsed as a date.
    birth_date: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)

    def __repr__(self) -> str:
        return (
            f"<Persona id={self.id!r} identity_number={self.identity_number!r} "
            f"first_name={self.first_name!r}>"
        )
