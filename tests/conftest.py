import os
import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from fastapi.testclient import TestClient

# Set test environment variables before importing the app
os.environ['ENVIRONMENT'] = 'testing'
os.environ['DATABASE_URL'] = 'sqlite:///:memory:'

from main import app
from estoque.database import Base, get_db
from estoque.models.produto import Produto
from estoque.models.operacao import Operacao, TipoOperacao


@pytest.fixture
def engine():
    """In-memory SQLite engine shared by every connection of a test."""
    engine = create_engine(
        'sqlite://',
        connect_args={'check_same_thread': False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db_session(engine):
    """Create a database session for a test."""
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(db_session):
    """A test client whose requests use the test session."""
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def sample_produto(db_session):
    """Create a sample product with stock for testing."""
    return create_test_produto(db_session)


def create_test_produto(db_session, **kwargs):
    """Helper function to create test products."""
    defaults = {
        'nome': 'Caneta Azul',
        'descricao': 'Caneta esferográfica',
        'preco_compra': 8.0,
        'preco_venda': 12.0,
        'quantidade': 10,
        'status': True,
    }
    defaults.update(kwargs)

    produto = Produto(**defaults)
    db_session.add(produto)
    db_session.commit()
    db_session.refresh(produto)
    return produto


def create_test_operacao(db_session, produto, **kwargs):
    """Helper function to create test operations."""
    defaults = {
        'produto_id': produto.id,
        'tipo': TipoOperacao.COMPRA,
        'preco': 10.0,
        'quantidade': 2,
        'total': 20.0,
    }
    defaults.update(kwargs)

    operacao = Operacao(**defaults)
    db_session.add(operacao)
    db_session.commit()
    db_session.refresh(operacao)
    return operacao
