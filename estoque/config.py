# -*- coding: utf-8 -*-
"""
Configuração da aplicação lida das variáveis de ambiente (.env).
"""

import os
from dotenv import load_dotenv

load_dotenv()

class Config:
    DATABASE_URL = os.environ.get("DATABASE_URL", "sqlite:///./database/estoque.db")
    ENVIRONMENT = os.environ.get("ENVIRONMENT", "development")
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
    LOG_FILE = os.environ.get("LOG_FILE")  # None -> stderr
    FRONTEND_URL = os.environ.get("FRONTEND_URL", "http://localhost:5700")

    # Se for PostgreSQL no Render, ajusta o prefixo se necessário
    if DATABASE_URL.startswith("postgres://"):
        DATABASE_URL = DATABASE_URL.replace("postgres://", "postgresql://", 1)

    @classmethod
    def is_production(cls):
        return cls.ENVIRONMENT == "production"
