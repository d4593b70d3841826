# -*- coding: utf-8 -*-
"""
Schemas Pydantic para a entidade Operacao.
"""

from pydantic import BaseModel
from datetime import datetime

from estoque.models.operacao import TipoOperacao

class OperacaoRead(BaseModel):
    id: int
    produto_id: int
    tipo: TipoOperacao
    preco: float
    quantidade: int
    total: float
    data: datetime

    class Config:
        from_attributes = True
