"""ProcessedSignatureLedger: idempotency record of handled signatures for one tracked account.

Ordered oldest first. The newest entry is the pagination stop-token for the
next run. Size is bounded by compaction: once the ledger grows past
max_size it keeps only the most recent `keep` signatures.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

DEFAULT_MAX_SIZE = 300
DEFAULT_KEEP = 10


@dataclass(frozen=True, slots=True)
class ProcessedSignatureLedger:
    """Immutable ledger; mark_processed returns an updated copy."""

    processed_signatures: tuple[str, ...] = ()

    @property
    def last_processed(self) -> str | None:
        """Most recently appended signature, or None for an empty ledger."""
        return self.processed_signatures[-1] if self.processed_signatures else None

    def contains(self, signature: str) -> bool:
        return signature in self.processed_signatures

    def __len__(self) -> int:
        return len(self.processed_signatures)

    def mark_processed(
        self,
        signature: str,
        *,
        max_size: int = DEFAULT_MAX_SIZE,
        keep: int = DEFAULT_KEEP,
    ) -> ProcessedSignatureLedger:
        """Append signature; compact to the newest `keep` entries when longer than max_size.

        Raises:
            ValueError: If keep is not smaller than max_size.
        """
        if keep >= max_size:
            raise ValueError(f"keep ({keep}) must be smaller than max_size ({max_size})")
        signatures = self.processed_signatures + (signature,)
        if len(signatures) > max_size:
            signatures = signatures[-keep:]
        return ProcessedSignatureLedger(processed_signatures=signatures)

    def to_dict(self) -> dict[str, Any]:
        return {"processedSignatures": list(self.processed_signatures)}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ProcessedSignatureLedger:
        raw = data.get("processedSignatures") or []
        return cls(processed_signatures=tuple(str(s) for s in raw if s))
