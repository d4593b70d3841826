# -*- coding: utf-8 -*-
"""
Modelo SQLAlchemy para a entidade Operacao (lançamento de compra ou venda).
"""
from enum import IntEnum
from sqlalchemy import Column, Integer, Float, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from estoque.database import Base
from datetime import datetime


class TipoOperacao(IntEnum):
    COMPRA = 1
    VENDA = 2


class Operacao(Base):
    __tablename__ = 'operacoes'

    id = Column(Integer, primary_key=True, index=True)
    produto_id = Column(Integer, ForeignKey("produtos.id"), nullable=False, index=True)
    tipo = Column(Integer, nullable=False)  # TipoOperacao
    preco = Column(Float, nullable=False)
    quantidade = Column(Integer, nullable=False)
    total = Column(Float, nullable=False)
    data = Column(DateTime, default=datetime.utcnow, nullable=False)

    produto = relationship("Produto", back_populates="operacoes")

    def __repr__(self):
        return f'<Operacao {self.id} tipo={self.tipo} produto={self.produto_id}>'
