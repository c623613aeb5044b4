"""Fixtures compartilhadas: banco SQLite em memória e TestClient."""
import os
import tempfile

# Precisa vir antes de importar o app
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("UPLOAD_DIR", tempfile.mkdtemp(prefix="inventory-uploads-"))

from datetime import date

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from main import app
from models.database import Base, get_db, register_sqlite_functions
from schemas.material_schemas import MaterialCreate
from services.auth_service import AuthService
from services.inspection_service import InspectionService
from services.material_service import MaterialService
from services.shelf_service import ShelfService


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    register_sqlite_functions(engine)
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def file_session_factory(tmp_path):
    """Banco em arquivo: uma conexão por sessão, para testes com threads."""
    engine = create_engine(
        f"sqlite:///{tmp_path / 'inventory.db'}",
        connect_args={"check_same_thread": False},
    )
    register_sqlite_functions(engine)
    Base.metadata.create_all(bind=engine)
    yield sessionmaker(autocommit=False, autoflush=False, bind=engine)
    engine.dispose()


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture(autouse=True)
def default_policies(monkeypatch):
    """Políticas padrão e hash rápido em todos os testes."""
    monkeypatch.setattr(MaterialService, "STRICT_OCCUPANCY", False)
    monkeypatch.setattr(InspectionService, "STRICT_INSPECTIONS", False)
    monkeypatch.setattr(AuthService, "BCRYPT_ROUNDS", 4)


@pytest.fixture
def shelf(db):
    return ShelfService.create_shelf(db, name="Prateleira A1", row="A", number=1, color="#10b981")


def make_material(db, shelf=None, position="A1-H1", condition=90, **overrides):
    fields = dict(
        name="Capacete",
        category="EPI",
        entry_date=date(2024, 1, 15),
        condition=condition,
        shelf=f"{shelf.row}{shelf.number}" if shelf else "A1",
        position=position,
        shelf_id=shelf.id if shelf else None,
    )
    fields.update(overrides)
    return MaterialService.create_material(db, MaterialCreate(**fields))
