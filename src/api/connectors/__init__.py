"""Connectors — adapters de borda.

Estrutura:
- relay/: entrada HTTP do webhook de notificações
- telegram/: saída para a Telegram Bot API

Cada connector isola um lado da integração, garantindo SRP.
"""

__all__: list[str] = []
