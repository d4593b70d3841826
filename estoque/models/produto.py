# -*- coding: utf-8 -*-
"""
Modelo SQLAlchemy para a entidade Produto.
"""
from sqlalchemy import Column, Integer, String, Float, Boolean
from sqlalchemy.orm import relationship
from estoque.database import Base

class Produto(Base):
    __tablename__ = 'produtos'

    id = Column(Integer, primary_key=True, index=True)
    nome = Column(String(100), nullable=False)
    descricao = Column(String(255), nullable=True)
    status = Column(Boolean, nullable=False, default=True, index=True)  # False = desativado
    preco_compra = Column(Float, nullable=False, default=0.0)
    preco_venda = Column(Float, nullable=False, default=0.0)
    quantidade = Column(Integer, nullable=False, default=0)

    operacoes = relationship("Operacao", back_populates="produto", order_by="Operacao.id")

    def __repr__(self):
        return f'<Produto {self.id} {self.nome}>'
