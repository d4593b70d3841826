# -*- coding: utf-8 -*-
"""
Exceções de domínio da API de estoque.

Cada exceção carrega a mensagem devolvida ao cliente e o status HTTP
correspondente; o handler registrado em main.py converte para JSON.
"""


class EstoqueError(Exception):
    status_code = 500
    mensagem = "Erro interno."

    def __init__(self, mensagem=None):
        if mensagem is not None:
            self.mensagem = mensagem
        super().__init__(self.mensagem)


class ErroCliente(EstoqueError):
    """Erro causado pela requisição (4xx)."""
    status_code = 400
    mensagem = "Requisição inválida."


class ProdutoNaoEncontrado(ErroCliente):
    status_code = 404
    mensagem = "Produto não encontrado."


class QuantidadeInsuficiente(ErroCliente):
    mensagem = "Quantidade insuficiente."


class ErroInterno(EstoqueError):
    """Falha de persistência ou qualquer erro inesperado (500)."""
    status_code = 500
