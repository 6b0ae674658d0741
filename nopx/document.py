"""Document snapshots handed over by the host editor."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class DocumentSnapshot:
    """Immutable view of one document's text at one instant.

    `version` increases with every edit the host applies; `None` means the
    host does not track versions.
    """

    uri: str
    text: str
    version: int | None = None
