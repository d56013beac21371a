"""Rotas do relay HTTP → Telegram."""
