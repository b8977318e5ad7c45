"""Configuração de runtime: logging estruturado e settings."""
