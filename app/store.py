from typing import Any, Generic, Optional, Type, TypeVar

from sqlalchemy.orm import Session

from app.database import Base

ModelT = TypeVar("ModelT", bound=Base)


class Store(Generic[ModelT]):
    """
    Keyed CRUD + equality lookups for one entity kind.

    Every write commits on its own, so a single save/delete is atomic;
    there are no multi-entity transactions.
    """

    def __init__(self, db: Session, model: Type[ModelT]):
        self.db = db
        self.model = model

    def get(self, key: Any) -> Optional[ModelT]:
        return self.db.get(self.model, key)

    def all(self) -> list[ModelT]:
        return self.db.query(self.model).all()

    def find_by(self, **equals: Any) -> list[ModelT]:
        return self.db.query(self.model).filter_by(**equals).all()

    def first_by(self, **equals: Any) -> Optional[ModelT]:
        return self.db.query(self.model).filter_by(**equals).first()

    def count(self) -> int:
        return self.db.query(self.model).count()

    def save(self, entity: ModelT) -> ModelT:
        self.db.add(entity)
        self.db.commit()
        self.db.refresh(entity)
        return entity

    def merge(self, entity: ModelT) -> ModelT:
        # insert, or overwrite the row that already has this identity
        merged = self.db.merge(entity)
        self.db.commit()
        self.db.refresh(merged)
        return merged

    def delete(self, entity: ModelT) -> None:
        self.db.delete(entity)
        self.db.commit()

    def rollback(self) -> None:
        self.db.rollback()
