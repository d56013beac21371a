"""Registro de tenants: API keys opacas mapeadas para chats de destino.

Construído uma vez no startup a partir de `API_KEYS` e somente lido depois.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping


@dataclass(frozen=True, slots=True)
class TenantRecord:
    """Tenant configurado.

    Atributos:
        key: API key (única, sensível a maiúsculas)
        chat_id: Destino próprio; None usa o chat padrão
    """

    key: str
    chat_id: str | None = None


@dataclass(frozen=True, slots=True)
class TenantResolution:
    """Resultado de `TenantRegistry.resolve`."""

    authorized: bool
    chat_id: str | None = None
    key: str | None = None


def parse_api_keys(raw: str | None) -> dict[str, TenantRecord]:
    """Interpreta a lista `key` / `key:chatId` separada por vírgulas.

    Entradas vazias ou com key vazia são descartadas; keys repetidas
    mantêm a última ocorrência.

    Exemplo:
        >>> parse_api_keys("a:1, b ,a:2")["a"].chat_id
        '2'
    """
    records: dict[str, TenantRecord] = {}
    if not raw:
        return records

    for item in raw.split(","):
        entry = item.strip()
        if not entry:
            continue
        key, _, chat_id = (part.strip() for part in entry.partition(":"))
        if not key:
            continue
        records[key] = TenantRecord(key=key, chat_id=chat_id or None)
    return records


class TenantRegistry:
    """Resolve autorização e destino de cada request."""

    def __init__(
        self,
        tenants: Mapping[str, TenantRecord] | None = None,
        default_chat_id: str | None = None,
    ) -> None:
        self._tenants = MappingProxyType(dict(tenants or {}))
        self._default_chat_id = default_chat_id or None

    @classmethod
    def from_config(cls, api_keys_raw: str | None, default_chat_id: str | None) -> TenantRegistry:
        return cls(parse_api_keys(api_keys_raw), default_chat_id)

    @property
    def protected(self) -> bool:
        """True quando há API keys configuradas (requests exigem key)."""
        return bool(self._tenants)

    @property
    def has_bound_destinations(self) -> bool:
        return any(record.chat_id for record in self._tenants.values())

    @property
    def can_route(self) -> bool:
        """Há destino padrão ou ao menos uma key com destino próprio."""
        return bool(self._default_chat_id) or self.has_bound_destinations

    def __len__(self) -> int:
        return len(self._tenants)

    def resolve(self, key: str | None) -> TenantResolution:
        """Resolve a key apresentada.

        Sem keys configuradas todo request é autorizado e usa o chat padrão.
        Com keys, key ausente ou desconhecida não é autorizada.
        """
        if not self._tenants:
            return TenantResolution(authorized=True, chat_id=self._default_chat_id)

        record = self._tenants.get(key or "")
        if record is None:
            return TenantResolution(authorized=False)

        return TenantResolution(
            authorized=True,
            chat_id=record.chat_id or self._default_chat_id,
            key=record.key,
        )
