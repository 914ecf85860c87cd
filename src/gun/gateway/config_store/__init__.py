"""Persisted configuration storage."""

from gun.gateway.config_store.abc import ConfigStore as ConfigStore
