"""Rotas de status."""
