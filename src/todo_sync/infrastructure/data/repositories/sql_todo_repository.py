from __future__ import annotations

from contextlib import contextmanager
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterator, Optional

from sqlalchemy import delete
from sqlalchemy.engine import Engine
from sqlmodel import Field, Session, SQLModel, create_engine, select

from todo_sync.application.contracts.todo_dtos import TodoItemDto
from todo_sync.domain.todo.exceptions.todo_exceptions import TodoNotFoundError
from todo_sync.domain.todo.repositories.todo_repository import TodoRepository


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TodoRecord(SQLModel, table=True):
    __tablename__ = "todos"

    id: Optional[int] = Field(default=None, primary_key=True)
    text: str
    created_at: datetime = Field(default_factory=_utcnow)
    updated_at: datetime = Field(default_factory=_utcnow)


def create_sqlite_engine(db_path: str | Path) -> Engine:
    path = Path(db_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    engine = create_engine(f"sqlite:///{path}", connect_args={"check_same_thread": False})
    SQLModel.metadata.create_all(engine)
    return engine


def _to_dto(record: TodoRecord) -> TodoItemDto:
    return TodoItemDto(
        id=int(record.id or 0),
        text=record.text,
        created_at=record.created_at,
        updated_at=record.updated_at,
    )


class SqlTodoRepository(TodoRepository):
    """Todo storage in a SQL database via sqlmodel."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    @contextmanager
    def _session(self) -> Iterator[Session]:
        with Session(self._engine) as session:
            yield session

    def add(self, text: str) -> TodoItemDto:
        with self._session() as session:
            record = TodoRecord(text=text)
            session.add(record)
            session.commit()
            session.refresh(record)
            return _to_dto(record)

    def get(self, todo_id: int) -> Optional[TodoItemDto]:
        with self._session() as session:
            record = session.get(TodoRecord, todo_id)
            return _to_dto(record) if record else None

    def list(self) -> list[TodoItemDto]:
        with self._session() as session:
            records = session.exec(select(TodoRecord).order_by(TodoRecord.id)).all()
            return [_to_dto(record) for record in records]

    def update(self, todo_id: int, text: str) -> TodoItemDto:
        with self._session() as session:
            record = session.get(TodoRecord, todo_id)
            if record is None:
                raise TodoNotFoundError(todo_id)
            record.text = text
            record.updated_at = _utcnow()
            session.add(record)
            session.commit()
            session.refresh(record)
            return _to_dto(record)

    def delete(self, todo_id: int) -> bool:
        with self._session() as session:
            record = session.get(TodoRecord, todo_id)
            if record is None:
                return False
            session.delete(record)
            session.commit()
            return True

    def truncate(self) -> None:
        with self._session() as session:
            session.execute(delete(TodoRecord))
            session.commit()
