"""Read-only registry over the wallet constants.

Why a registry on top of the typed constants:
- Code that already knows the namespace should use the models in
  `core.constants` directly.
- Tools that receive the name as data (the CLI, diagnostics, exporters) need
  a lookup by ``(namespace, key)`` with a clear failure for typos.
"""

from __future__ import annotations

import logging
from datetime import timedelta
from enum import Enum, unique
from typing import Union

from core import constants
from core.domain.models import (
    DomainVocabulary,
    ExplorerEndpoints,
    NamespaceModel,
    NetworkEndpoints,
    NetworkProfile,
    PollingIntervals,
)
from core.domain.network import NetworkType

logger = logging.getLogger(__name__)

Value = Union[str, timedelta]


@unique
class Namespace(str, Enum):
    NETWORK_ENDPOINTS = "network-endpoints"
    EXPLORER_ENDPOINTS = "explorer-endpoints"
    POLLING_INTERVALS = "polling-intervals"
    DOMAIN_VOCABULARY = "domain-vocabulary"

    def __str__(self) -> str:
        return self.value


_MODEL_BY_NAMESPACE: dict[Namespace, type[NamespaceModel]] = {
    Namespace.NETWORK_ENDPOINTS: NetworkEndpoints,
    Namespace.EXPLORER_ENDPOINTS: ExplorerEndpoints,
    Namespace.POLLING_INTERVALS: PollingIntervals,
    Namespace.DOMAIN_VOCABULARY: DomainVocabulary,
}

NamespaceRef = Union[Namespace, str, type[NamespaceModel]]


class UnknownKeyError(KeyError):
    """Raised when a namespace/key pair is not registered."""

    def __init__(self, namespace: str, key: str | None = None, valid: tuple[str, ...] = ()) -> None:
        self.namespace = namespace
        self.key = key
        self.valid = valid
        super().__init__(namespace if key is None else f"{namespace}.{key}")

    def __str__(self) -> str:
        if self.key is None:
            msg = f"Unknown namespace {self.namespace!r}"
        else:
            msg = f"Unknown key {self.key!r} in namespace {self.namespace!r}"
        if self.valid:
            msg += f" (valid: {', '.join(self.valid)})"
        return msg


def resolve_namespace(ref: NamespaceRef) -> Namespace:
    """Accept a `Namespace`, its string value, or the namespace model class."""

    if isinstance(ref, Namespace):
        return ref
    if isinstance(ref, type):
        for ns, model in _MODEL_BY_NAMESPACE.items():
            if model is ref:
                return ns
        raise UnknownKeyError(ref.__name__, valid=tuple(n.value for n in Namespace))
    normalized = str(ref).strip().lower().replace("_", "-")
    for ns in Namespace:
        if ns.value == normalized:
            return ns
    raise UnknownKeyError(str(ref), valid=tuple(n.value for n in Namespace))


class ConfigRegistry:
    """Immutable view over the four namespaces.

    Exposes no mutation methods; the namespace models are frozen.
    """

    def __init__(
        self,
        *,
        network_endpoints: NetworkEndpoints,
        explorer_endpoints: ExplorerEndpoints,
        polling_intervals: PollingIntervals,
        domain_vocabulary: DomainVocabulary,
    ) -> None:
        self._network_endpoints = network_endpoints
        self._explorer_endpoints = explorer_endpoints
        self._domain_vocabulary = domain_vocabulary
        self._namespaces: dict[Namespace, NamespaceModel] = {
            Namespace.NETWORK_ENDPOINTS: network_endpoints,
            Namespace.EXPLORER_ENDPOINTS: explorer_endpoints,
            Namespace.POLLING_INTERVALS: polling_intervals,
            Namespace.DOMAIN_VOCABULARY: domain_vocabulary,
        }
        self._fields: dict[Namespace, dict[str, str]] = {}
        for ns, model in self._namespaces.items():
            lookup: dict[str, str] = {}
            for name, info in type(model).model_fields.items():
                lookup[info.alias or name] = name
                lookup[name] = name
            self._fields[ns] = lookup
        logger.debug("Config registry ready with %d namespaces", len(self._namespaces))

    @classmethod
    def default(cls) -> "ConfigRegistry":
        return cls(
            network_endpoints=constants.NETWORK_ENDPOINTS,
            explorer_endpoints=constants.EXPLORER_ENDPOINTS,
            polling_intervals=constants.POLLING_INTERVALS,
            domain_vocabulary=constants.DOMAIN_VOCABULARY,
        )

    def namespace(self, ref: NamespaceRef) -> NamespaceModel:
        return self._namespaces[resolve_namespace(ref)]

    def keys(self, ref: NamespaceRef) -> tuple[str, ...]:
        """Public (camelCase) keys of a namespace, in declaration order."""

        model = type(self.namespace(ref))
        return tuple(info.alias or name for name, info in model.model_fields.items())

    def get(self, ref: NamespaceRef, key: str) -> Value:
        """Return the value stored under ``key`` (camelCase or snake_case)."""

        ns = resolve_namespace(ref)
        field_name = self._fields[ns].get(key)
        if field_name is None:
            raise UnknownKeyError(ns.value, key, self.keys(ns))
        return getattr(self._namespaces[ns], field_name)

    def items(self, ref: NamespaceRef) -> tuple[tuple[str, Value], ...]:
        return tuple((key, self.get(ref, key)) for key in self.keys(ref))

    def as_dict(self) -> dict[str, dict[str, Value]]:
        """Snapshot keyed by namespace, then by camelCase key."""

        return {ns.value: dict(self.items(ns)) for ns in Namespace}

    def to_json(self) -> dict[str, dict[str, str | float]]:
        """JSON-ready snapshot: durations become seconds."""

        out: dict[str, dict[str, str | float]] = {}
        for ns, values in self.as_dict().items():
            out[ns] = {
                k: v.total_seconds() if isinstance(v, timedelta) else v
                for k, v in values.items()
            }
        return out

    def endpoints_for(self, network: NetworkType | str) -> NetworkProfile:
        """API, explorer and faucet locations for one network."""

        net = NetworkType.parse(network)
        api = self._network_endpoints
        explorer = self._explorer_endpoints

        if net is NetworkType.MAINNET:
            return NetworkProfile(
                network=net,
                api_url=api.default_mainnet_url,
                explorer_url=explorer.mainnet_explorer_base_url,
            )
        return NetworkProfile(
            network=net,
            api_url=api.default_accumulate_testnet_url,
            explorer_url=explorer.testnet_explorer_base_url,
            faucet_address=self._domain_vocabulary.testnet_faucet_address,
        )


REGISTRY = ConfigRegistry.default()


def get(namespace: NamespaceRef, key: str) -> Value:
    """Shortcut for ``REGISTRY.get``."""

    return REGISTRY.get(namespace, key)
