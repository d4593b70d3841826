# -*- coding: utf-8 -*-
"""
Schemas Pydantic para a entidade Produto.
"""

from pydantic import BaseModel, Field
from typing import List, Optional

from estoque.schemas.operacao import OperacaoRead

# Schema base para Produto
class ProdutoBase(BaseModel):
    nome: str = Field(..., max_length=100)
    descricao: Optional[str] = Field(None, max_length=255)
    preco_compra: float = Field(0.0, ge=0)
    preco_venda: float = Field(0.0, ge=0)
    quantidade: int = Field(0, ge=0)
    status: bool = True

# Schema para criação de Produto
class ProdutoCreate(ProdutoBase):
    pass

# Schema para atualização parcial de Produto
class ProdutoUpdate(BaseModel):
    nome: Optional[str] = Field(None, max_length=100)
    descricao: Optional[str] = Field(None, max_length=255)
    preco_compra: Optional[float] = Field(None, ge=0)
    preco_venda: Optional[float] = Field(None, ge=0)
    quantidade: Optional[int] = Field(None, ge=0)
    status: Optional[bool] = None

# Schema para leitura/retorno de Produto
class ProdutoRead(ProdutoBase):
    id: int

    class Config:
        from_attributes = True

# Produto com o histórico de operações (GET /{id})
class ProdutoDetalhe(ProdutoRead):
    operacoes: List[OperacaoRead] = []

    class Config:
        from_attributes = True

# Corpo das rotas de compra e venda
class CompraProduto(BaseModel):
    preco: float = Field(..., gt=0)
    quantidade: int = Field(..., gt=0)

class VendaProduto(BaseModel):
    preco: float = Field(..., gt=0)
    quantidade: int = Field(..., gt=0)
