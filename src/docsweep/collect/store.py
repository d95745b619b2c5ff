"""Accumulation of extracted docstrings and metadata.

``docs`` and ``meta`` are always written together: an identity present in one
mapping is present in the other. Writing an identity again replaces both
entries (last write wins).
"""

from __future__ import annotations

import copy
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any

from docsweep.collect.models import IDENTITY_TYPES, Identity, IdentityTarget, Metadata
from docsweep.core.errors import InternalError
from docsweep.core.logging import get_logger

log = get_logger("collect.store")


@dataclass(frozen=True)
class ExtractedDocs:
    """Read-only result of an extraction run."""

    docs: Mapping[Identity, Any]
    meta: Mapping[Identity, Metadata]

    def __len__(self) -> int:
        return len(self.docs)

    def __contains__(self, identity: object) -> bool:
        return identity in self.docs


@dataclass
class OutputStore:
    """Mutable accumulator used while scanning."""

    docs: dict[Identity, Any] = field(default_factory=dict)
    meta: dict[Identity, Metadata] = field(default_factory=dict)

    def put(self, target: IdentityTarget, doc: Any, metadata: Metadata) -> None:
        """Store ``doc`` and ``metadata`` under every identity in ``target``.

        A frozenset target gives each member its own deep copy; a tuple of
        frozensets applies that to each group in turn.
        """
        if isinstance(target, tuple):
            for group in target:
                self.put(group, doc, metadata)
        elif isinstance(target, frozenset):
            for identity in target:
                self._put_one(identity, copy.deepcopy(doc), copy.deepcopy(metadata))
        elif isinstance(target, IDENTITY_TYPES):
            self._put_one(target, doc, metadata)
        else:
            raise InternalError.unexpected("unsupported identity target", target=repr(target))

    def _put_one(self, identity: Identity, doc: Any, metadata: Metadata) -> None:
        if identity in self.docs:
            # Later declarations win; an earlier entry for the same identity is replaced.
            log.debug(
                "doc_overwritten",
                identity=repr(identity),
                previous=self.meta[identity].source,
                current=metadata.source,
            )
        self.docs[identity] = doc
        self.meta[identity] = metadata

    def __len__(self) -> int:
        return len(self.docs)

    def snapshot(self) -> ExtractedDocs:
        """Hand-off value for downstream consumers.

        Each ``Metadata`` is copied, so later writes to the store never show
        through. The declaration node in ``code`` is shared with the input tree.
        """
        return ExtractedDocs(
            docs=MappingProxyType(dict(self.docs)),
            meta=MappingProxyType({ident: replace(m) for ident, m in self.meta.items()}),
        )
