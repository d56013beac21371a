"""API — camada de borda e adapters.

Responsabilidades:
- Receber o webhook de notificações e aplicar limites de request
- Normalizar payloads para modelos internos
- Construir payloads para a Telegram Bot API
- Enviar ao Telegram com retentativa

Subpastas:
- connectors/: adapters HTTP (entrada do relay, saída Telegram)
- normalizers/: conversão de payloads externos → modelos internos
- payload_builders/: construção de payloads para APIs externas
- routes/: endpoints HTTP (webhook, health)

NÃO PODE conter: regras de tenant, ledger, orquestração de use cases.
"""
