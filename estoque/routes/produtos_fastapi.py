# -*- coding: utf-8 -*-
"""
Rotas FastAPI para Produtos e suas operações de compra e venda.
"""

from typing import List, Optional
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from estoque.database import get_db
from estoque.services.produto_service import ProdutoService
from estoque.schemas.produto import (ProdutoCreate, ProdutoRead, ProdutoUpdate, ProdutoDetalhe,
                                     CompraProduto, VendaProduto)
from estoque.schemas.operacao import OperacaoRead

router = APIRouter(
    tags=["Produtos"],
    responses={404: {"description": "Produto não encontrado"}},
)

def get_produto_service(db: Session = Depends(get_db)) -> ProdutoService:
    return ProdutoService(db)

# --- CRUD Endpoints --- 

@router.get("", response_model=List[ProdutoRead])
def read_produtos(
    skip: int = 0,
    limit: int = 100,
    nome: Optional[str] = None,
    service: ProdutoService = Depends(get_produto_service)
):
    """
    Lista os produtos ativos, com filtro opcional por nome.
    """
    return service.listar_ativos(skip=skip, limit=limit, nome=nome)

@router.post("", response_model=ProdutoRead, status_code=status.HTTP_201_CREATED)
def create_produto(produto: ProdutoCreate, service: ProdutoService = Depends(get_produto_service)):
    """
    Cria um novo produto.
    """
    return service.criar(produto)

@router.get("/{produto_id}", response_model=ProdutoDetalhe)
def read_produto(produto_id: int, service: ProdutoService = Depends(get_produto_service)):
    """
    Obtém um produto pelo ID, incluindo o histórico de operações.
    """
    return service.buscar_por_id(produto_id)

@router.put("/{produto_id}", response_model=ProdutoRead)
def update_produto(
    produto_id: int,
    produto_update: ProdutoUpdate,
    service: ProdutoService = Depends(get_produto_service)
):
    """
    Atualiza os campos enviados de um produto existente.
    """
    return service.atualizar(produto_id, produto_update)

@router.patch("/{produto_id}/desativar", response_model=ProdutoRead)
def desativar_produto(produto_id: int, service: ProdutoService = Depends(get_produto_service)):
    """
    Desativa um produto (exclusão lógica).
    """
    return service.desativar(produto_id)

# --- Operações de estoque ---

@router.post("/{produto_id}/comprar", response_model=OperacaoRead, status_code=status.HTTP_201_CREATED)
def comprar_produto(
    produto_id: int,
    compra: CompraProduto,
    service: ProdutoService = Depends(get_produto_service)
):
    """
    Registra a compra de unidades do produto.
    """
    return service.comprar(produto_id, compra)

@router.post("/{produto_id}/vender", response_model=OperacaoRead, status_code=status.HTTP_201_CREATED)
def vender_produto(
    produto_id: int,
    venda: VendaProduto,
    service: ProdutoService = Depends(get_produto_service)
):
    """
    Registra a venda de unidades do produto.
    """
    return service.vender(produto_id, venda)
