"""Config – the configuration snapshot and its resource bindings.

Each snapshot field declares which remote resource supplies its value::

    @dataclasses.dataclass(frozen=True)
    class Config:
        key_vault_foo: str = secret("ze-kv-foo", name="KeyVaultFoo")
        app_config_foo: str = setting("ze-ac-foo", name="AppConfigFoo")

:func:`bindings` turns those declarations into the ordered list the loader
walks; :func:`render` turns a snapshot into its printable form.
"""
from __future__ import annotations

import dataclasses
import enum
from typing import Any

from config_watcher.config.validation import ConfigError

_BINDING_KEY = "config_watcher.binding"


class ResourceKind(str, enum.Enum):
    """Which remote store supplies a field."""

    SECRET = "secret"
    SETTING = "setting"


@dataclasses.dataclass(frozen=True)
class FieldBinding:
    """Declared source of one snapshot field."""

    attribute: str
    name: str
    kind: ResourceKind
    key: str


def _bound_field(kind: ResourceKind, key: str, name: str | None) -> Any:
    return dataclasses.field(
        default="",
        metadata={_BINDING_KEY: (kind, key, name)},
    )


def secret(key: str, *, name: str | None = None) -> Any:
    """Declare a field read from the secret store under *key*."""
    return _bound_field(ResourceKind.SECRET, key, name)


def setting(key: str, *, name: str | None = None) -> Any:
    """Declare a field read from the settings store under *key*."""
    return _bound_field(ResourceKind.SETTING, key, name)


def bindings(config_cls: type[Any]) -> tuple[FieldBinding, ...]:
    """Return the resource bindings of *config_cls* in declaration order."""
    if not dataclasses.is_dataclass(config_cls):
        raise ConfigError(f"{config_cls!r} is not a dataclass")
    result: list[FieldBinding] = []
    for field in dataclasses.fields(config_cls):
        declared = field.metadata.get(_BINDING_KEY)
        if declared is None:
            continue
        kind, key, name = declared
        result.append(FieldBinding(field.name, name or field.name, kind, key))
    return tuple(result)


def render(snapshot: Any) -> str:
    """Render *snapshot* as a header line plus one ``\\tName=Value`` line per field."""
    lines = ["Config:"]
    for binding in bindings(type(snapshot)):
        lines.append(f"\t{binding.name}={getattr(snapshot, binding.attribute)}")
    return "\n".join(lines)


@dataclasses.dataclass(frozen=True)
class Config:
    """Application configuration as of one successful fetch."""

    key_vault_foo: str = secret("ze-kv-foo", name="KeyVaultFoo")
    key_vault_bar: str = secret("ze-kv-bar", name="KeyVaultBar")

    app_config_foo: str = setting("ze-ac-foo", name="AppConfigFoo")
    app_config_bar: str = setting("ze-ac-bar", name="AppConfigBar")

    def __str__(self) -> str:
        return render(self)


__all__ = [
    "Config",
    "FieldBinding",
    "ResourceKind",
    "bindings",
    "render",
    "secret",
    "setting",
]
