# -*- coding: utf-8 -*-
"""
Arquivo principal da aplicação FastAPI para o controle de estoque de produtos.
"""

import os
import logging
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware

from estoque.config import Config
from estoque.database import engine, Base
from estoque.exceptions import EstoqueError
from estoque.models import produto, operacao  # registra as tabelas na Base
from estoque.routes import produtos_fastapi

logging.basicConfig(
    level=getattr(logging, Config.LOG_LEVEL.upper(), logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    filename=Config.LOG_FILE
)

# Cria as tabelas no banco de dados
try:
    Base.metadata.create_all(bind=engine)
    logging.info("Tabelas criadas com sucesso!")
except Exception as e:
    logging.error(f"Erro ao criar tabelas: {e}")
    if Config.is_production():
        raise

docs_url = "/docs" if not Config.is_production() else None
redoc_url = "/redoc" if not Config.is_production() else None

app = FastAPI(
    title="API Estoque",
    description="API para cadastro de produtos e registro de compras e vendas",
    version="1.0.0",
    docs_url=docs_url,
    redoc_url=redoc_url,
    openapi_url="/openapi.json" if not Config.is_production() else None
)

origins = [
    Config.FRONTEND_URL,
    "http://localhost",
    "http://localhost:8080",
    "http://127.0.0.1",
    "http://127.0.0.1:8080",
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Mesmo formato de corpo do HTTPException: {"detail": ...}
@app.exception_handler(EstoqueError)
async def estoque_error_handler(request: Request, exc: EstoqueError):
    if exc.status_code >= 500:
        logging.error(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.mensagem}")
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.mensagem})

app.include_router(produtos_fastapi.router, prefix="/api/v1/produtos")

@app.get("/", tags=["Root"])
async def root():
    return {
        "mensagem": "API Estoque - Produtos e Operações",
        "documentacao": docs_url,
        "endpoints": [
            {"produtos": "/api/v1/produtos"},
            {"comprar": "/api/v1/produtos/{produto_id}/comprar"},
            {"vender": "/api/v1/produtos/{produto_id}/vender"},
        ]
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host=os.environ.get("HOST", "0.0.0.0"),
        port=int(os.environ.get("PORT", 8000)),
        reload=not Config.is_production()
    )
