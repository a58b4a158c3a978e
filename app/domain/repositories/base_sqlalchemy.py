from __future__ import annotations

from typing import Generic, Sequence, Type

from sqlalchemy.orm import Session

from app.domain.repositories.base import ID, IRepository, T


class SQLAlchemyRepository(Generic[T, ID], IRepository[T, ID]):
    """Generic SQLAlchemy repository with basic CRUD."""

    def __init__(self, model: Type[T], db: Session):
        self.model = model
        self.db = db

    # ----- CRUD --------------------------------------------------------
    def add(self, obj: T) -> T:
        self.db.add(obj)
        return obj

    def get_all(self) -> Sequence[T]:
        pk = self.model.__mapper__.primary_key[0]
        return self.db.query(self.model).order_by(pk).all()

    def delete(self, obj: T) -> None:
        self.db.delete(obj)
