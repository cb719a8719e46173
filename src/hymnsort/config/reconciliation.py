"""Reconciliation run configuration."""

from __future__ import annotations

from dataclasses import dataclass, field

from hymnsort.domain.model import Relation, Source
from hymnsort.domain.reconciliation import AuditPolicy
from hymnsort.domain.sources import DEFAULT_SOURCES

from .env import env_list
from .errors import ConfigurationError

SOURCES_ENV = "HYMNSORT_SOURCES"
SUPPRESS_DANGLING_ENV = "HYMNSORT_SUPPRESS_DANGLING_AFTER_EXCEPTION"


@dataclass(frozen=True, slots=True)
class ReconcileConfig:
    sources: tuple[Source, ...] = DEFAULT_SOURCES
    policy: AuditPolicy = field(default_factory=AuditPolicy)


def parse_sources(names: list[str]) -> tuple[Source, ...]:
    sources: list[Source] = []
    for name in names:
        try:
            source = Source(name.lower())
        except ValueError:
            known = ", ".join(source.value for source in Source)
            message = f"Unknown source {name!r}; expected one of: {known}"
            raise ConfigurationError(message) from None
        if source not in sources:
            sources.append(source)
    return tuple(sources)


def parse_policy(names: list[str]) -> AuditPolicy:
    suppressed: set[Relation] = set()
    for name in names:
        try:
            suppressed.add(Relation(name.lower()))
        except ValueError:
            message = f"Unknown relation {name!r} in {SUPPRESS_DANGLING_ENV}"
            raise ConfigurationError(message) from None
    return AuditPolicy(
        suppress_dangling_after_exception={
            relation: relation in suppressed for relation in Relation
        }
    )


def get_reconcile_config() -> ReconcileConfig:
    source_names = env_list(SOURCES_ENV)
    relation_names = env_list(SUPPRESS_DANGLING_ENV)
    return ReconcileConfig(
        sources=parse_sources(source_names) if source_names is not None else DEFAULT_SOURCES,
        policy=parse_policy(relation_names) if relation_names is not None else AuditPolicy(),
    )
