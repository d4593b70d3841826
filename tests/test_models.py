from datetime import datetime

from estoque.models.operacao import Operacao, TipoOperacao
from estoque.models.produto import Produto
from tests.conftest import create_test_produto, create_test_operacao


class TestProdutoModel:
    """Test Produto model."""

    def test_defaults(self, db_session):
        produto = Produto(nome='Tesoura')
        db_session.add(produto)
        db_session.commit()

        assert produto.status is True
        assert produto.preco_compra == 0.0
        assert produto.preco_venda == 0.0
        assert produto.quantidade == 0

    def test_repr(self, db_session):
        produto = create_test_produto(db_session, nome='Tesoura')

        assert repr(produto) == f'<Produto {produto.id} Tesoura>'

    def test_relacionamento_operacoes(self, db_session):
        produto = create_test_produto(db_session)
        operacao = create_test_operacao(db_session, produto)

        assert operacao.produto.id == produto.id
        assert produto.operacoes == [operacao]


class TestOperacaoModel:
    """Test Operacao model."""

    def test_data_preenchida_na_criacao(self, db_session):
        produto = create_test_produto(db_session)
        operacao = create_test_operacao(db_session, produto)

        assert isinstance(operacao.data, datetime)

    def test_tipo_armazenado_como_inteiro(self, db_session):
        produto = create_test_produto(db_session)
        create_test_operacao(db_session, produto, tipo=TipoOperacao.VENDA)

        operacao = db_session.query(Operacao).filter(Operacao.tipo == 2).one()

        assert operacao.tipo == TipoOperacao.VENDA
        assert TipoOperacao(operacao.tipo) is TipoOperacao.VENDA
