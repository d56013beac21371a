"""Testes do registro de tenants (API keys → chats)."""

from __future__ import annotations

from app.domain.tenants import TenantRecord, TenantRegistry, parse_api_keys


class TestParseApiKeys:
    def test_empty_input(self) -> None:
        assert parse_api_keys("") == {}
        assert parse_api_keys(None) == {}

    def test_keys_with_and_without_chat(self) -> None:
        records = parse_api_keys("alpha:123, beta ,gamma:-100200")
        assert records == {
            "alpha": TenantRecord(key="alpha", chat_id="123"),
            "beta": TenantRecord(key="beta", chat_id=None),
            "gamma": TenantRecord(key="gamma", chat_id="-100200"),
        }

    def test_blank_entries_and_empty_keys_are_dropped(self) -> None:
        records = parse_api_keys(" , :555,,delta:")
        assert list(records) == ["delta"]
        assert records["delta"].chat_id is None

    def test_duplicate_key_keeps_last(self) -> None:
        assert parse_api_keys("a:1,a:2")["a"].chat_id == "2"

    def test_keys_are_case_sensitive(self) -> None:
        assert set(parse_api_keys("Key,key")) == {"Key", "key"}


class TestTenantRegistry:
    def test_open_mode_authorizes_everyone(self) -> None:
        registry = TenantRegistry.from_config("", "999")

        resolution = registry.resolve(None)

        assert registry.protected is False
        assert resolution.authorized is True
        assert resolution.chat_id == "999"
        assert resolution.key is None

    def test_open_mode_ignores_presented_key(self) -> None:
        resolution = TenantRegistry.from_config("", "999").resolve("whatever")
        assert resolution.authorized is True
        assert resolution.key is None

    def test_protected_mode_rejects_missing_or_unknown_key(self) -> None:
        registry = TenantRegistry.from_config("alpha:123", "999")
        assert registry.protected is True
        assert registry.resolve(None).authorized is False
        assert registry.resolve("").authorized is False
        assert registry.resolve("ALPHA").authorized is False

    def test_bound_key_uses_own_chat(self) -> None:
        resolution = TenantRegistry.from_config("alpha:123,beta", "999").resolve("alpha")
        assert resolution.authorized is True
        assert resolution.chat_id == "123"
        assert resolution.key == "alpha"

    def test_unbound_key_falls_back_to_default(self) -> None:
        resolution = TenantRegistry.from_config("alpha:123,beta", "999").resolve("beta")
        assert resolution.chat_id == "999"

    def test_unbound_key_without_default_has_no_destination(self) -> None:
        registry = TenantRegistry.from_config("alpha:123,beta", "")
        resolution = registry.resolve("beta")
        assert resolution.authorized is True
        assert resolution.chat_id is None
        assert registry.can_route is True

    def test_can_route(self) -> None:
        assert TenantRegistry.from_config("", "1").can_route is True
        assert TenantRegistry.from_config("a:1", "").can_route is True
        assert TenantRegistry.from_config("a,b", "").can_route is False
        assert TenantRegistry.from_config("", "").can_route is False

    def test_len_counts_tenants(self) -> None:
        assert len(TenantRegistry.from_config("a,b:2", None)) == 2
