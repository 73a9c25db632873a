from .database import get_db_context, make_session_factory, init_db, engine, SessionLocal, Base
from .exceptions import (
    ClinicError,
    InvalidDataError,
    NotFoundError,
    AppointmentNotFoundError,
    StorageError,
)
from .id_allocator import EntityKind, IdAllocator

__all__ = [
    "get_db_context",
    "make_session_factory",
    "init_db",
    "engine",
    "SessionLocal",
    "Base",
    "ClinicError",
    "InvalidDataError",
    "NotFoundError",
    "AppointmentNotFoundError",
    "StorageError",
    "EntityKind",
    "IdAllocator",
]
