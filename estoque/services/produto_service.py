# -*- coding: utf-8 -*-
"""
Regras de negócio de produtos e operações de estoque (compra e venda).
"""

from typing import List, Optional
import logging

from sqlalchemy.orm import Session, joinedload
from sqlalchemy.exc import SQLAlchemyError

from estoque.exceptions import ErroCliente, ErroInterno, ProdutoNaoEncontrado, QuantidadeInsuficiente
from estoque.models.produto import Produto
from estoque.models.operacao import Operacao, TipoOperacao
from estoque.schemas.produto import CompraProduto, ProdutoCreate, ProdutoUpdate, VendaProduto

# Preço de venda mínimo após uma compra: preço de compra * MARGEM_VENDA
MARGEM_VENDA = 1.5


class ProdutoService:
    """Operações sobre Produto; cada método faz commit ou rollback da sessão."""

    def __init__(self, db: Session):
        self.db = db

    def listar_ativos(self, skip: int = 0, limit: int = 100, nome: Optional[str] = None) -> List[Produto]:
        """Retorna os produtos com status ativo, ordenados por nome."""
        try:
            query = self.db.query(Produto).filter(Produto.status.is_(True))
            if nome:
                query = query.filter(Produto.nome.ilike(f"%{nome}%"))
            return query.order_by(Produto.nome).offset(skip).limit(limit).all()
        except SQLAlchemyError as e:
            logging.error(f"Erro ao listar produtos: {e}")
            raise ErroInterno("Não foi possível buscar os produtos.") from e

    def criar(self, dados: ProdutoCreate) -> Produto:
        try:
            produto = Produto(**dados.dict())
            self.db.add(produto)
            self.db.commit()
            self.db.refresh(produto)
            return produto
        except SQLAlchemyError as e:
            self.db.rollback()
            logging.error(f"Erro ao criar produto: {e}")
            raise ErroInterno("Erro ao criar produto.") from e

    def buscar_por_id(self, produto_id: int) -> Produto:
        """
        Obtém um produto com suas operações.
        Lança ProdutoNaoEncontrado se o ID não existir.
        """
        try:
            produto = (
                self.db.query(Produto)
                .options(joinedload(Produto.operacoes))
                .filter(Produto.id == produto_id)
                .first()
            )
        except SQLAlchemyError as e:
            logging.error(f"Erro ao buscar produto {produto_id}: {e}")
            raise ErroInterno("Erro ao buscar produto pelo ID.") from e
        if produto is None:
            raise ProdutoNaoEncontrado()
        return produto

    def atualizar(self, produto_id: int, dados: ProdutoUpdate) -> Produto:
        """Atualiza apenas os campos enviados."""
        return self._atualizar_campos(produto_id, dados.dict(exclude_unset=True), "Erro ao atualizar produto.")

    def desativar(self, produto_id: int) -> Produto:
        """Exclusão lógica: status = False, demais campos intactos."""
        return self._atualizar_campos(produto_id, {"status": False}, "Erro ao desativar produto.")

    def comprar(self, produto_id: int, compra: CompraProduto) -> Operacao:
        """
        Registra uma compra: cria a operação, atualiza o preço de compra,
        eleva o preço de venda para no mínimo preco * MARGEM_VENDA e soma
        a quantidade ao estoque. Tudo em uma única transação.
        """
        preco, quantidade = compra.preco, compra.quantidade
        try:
            produto = self._carregar_para_alteracao(produto_id)

            preco_venda_atualizado = max(produto.preco_venda, preco * MARGEM_VENDA)
            operacao = Operacao(
                produto_id=produto_id,
                tipo=TipoOperacao.COMPRA,
                preco=preco,
                quantidade=quantidade,
                total=preco * quantidade,
            )
            self.db.add(operacao)

            produto.preco_compra = preco
            produto.preco_venda = preco_venda_atualizado
            produto.quantidade = produto.quantidade + quantidade

            self.db.commit()
            self.db.refresh(operacao)
        except ErroCliente:
            self.db.rollback()
            raise
        except Exception as e:
            self.db.rollback()
            logging.error(f"Erro ao realizar compra do produto {produto_id}: {e}")
            raise ErroInterno("Erro ao realizar compra.") from e

        logging.info(f"Compra registrada: produto={produto_id} quantidade={quantidade} preco={preco}")
        return operacao

    def vender(self, produto_id: int, venda: VendaProduto) -> Operacao:
        """
        Registra uma venda: baixa a quantidade do estoque e, se o estoque
        zerar, zera os preços de compra e venda.
        """
        preco, quantidade = venda.preco, venda.quantidade
        try:
            produto = self._carregar_para_alteracao(produto_id)
            if produto.quantidade < quantidade:
                raise QuantidadeInsuficiente()

            nova_quantidade = produto.quantidade - quantidade
            operacao = Operacao(
                produto_id=produto_id,
                tipo=TipoOperacao.VENDA,
                preco=preco,
                quantidade=quantidade,
                total=preco * quantidade,
            )
            self.db.add(operacao)

            produto.quantidade = nova_quantidade
            if nova_quantidade == 0:
                produto.preco_compra = 0
                produto.preco_venda = 0

            self.db.commit()
            self.db.refresh(operacao)
        except ErroCliente:
            self.db.rollback()
            raise
        except Exception as e:
            self.db.rollback()
            logging.error(f"Erro ao realizar venda do produto {produto_id}: {e}")
            raise ErroInterno("Erro ao realizar venda.") from e

        logging.info(f"Venda registrada: produto={produto_id} quantidade={quantidade} preco={preco}")
        return operacao

    # --- Auxiliares ---

    def _carregar_para_alteracao(self, produto_id: int) -> Produto:
        # FOR UPDATE serializa compras/vendas concorrentes no mesmo produto (ignorado pelo SQLite)
        produto = (
            self.db.query(Produto)
            .filter(Produto.id == produto_id)
            .with_for_update()
            .first()
        )
        if produto is None:
            raise ProdutoNaoEncontrado()
        return produto

    def _atualizar_campos(self, produto_id: int, campos: dict, mensagem_erro: str) -> Produto:
        try:
            produto = self.db.query(Produto).filter(Produto.id == produto_id).first()
            if produto is not None:
                for key, value in campos.items():
                    setattr(produto, key, value)
                self.db.commit()
                self.db.refresh(produto)
        except SQLAlchemyError as e:
            self.db.rollback()
            logging.error(f"{mensagem_erro} ID {produto_id}: {e}")
            raise ErroInterno(mensagem_erro) from e

        # ID inexistente é falha de persistência (500), não 404
        if produto is None:
            logging.error(f"{mensagem_erro} ID {produto_id} inexistente")
            raise ErroInterno(mensagem_erro)
        return produto
