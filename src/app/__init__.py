"""App — coração do sistema: orquestração, casos de uso e infraestrutura.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- domain/: registro de tenants (API keys → chats)
- use_cases/: casos de uso (relay de notificações)
- infra/: implementações concretas de armazenamento
- protocols/: contratos/interfaces
- observability/: logs estruturados, correlation id, métricas

Padrão: app executa; api adapta; config configura; utils apoia.
"""
