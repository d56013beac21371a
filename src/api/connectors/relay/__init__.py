"""Conector de entrada do relay (webhook genérico de notificações)."""
