"""Stage results: let callers tell "not a sale" from "transient failure" from "fatal".

Transient upstream failures are carried in `error` instead of raised;
validation rejections are ordinary outcomes; configuration problems raise.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from solana_sales_tracker.models.mint_metadata import MintMetadata
from solana_sales_tracker.models.sale_event import SaleEvent


@dataclass(frozen=True, slots=True)
class FetchResult[T]:
    """Value of an upstream fetch; `error` is set when the value is a fallback."""

    value: T
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True, slots=True)
class SignatureBatch:
    """Signatures newer than the stop-token, oldest first."""

    signatures: tuple[str, ...] = ()
    reached_until: bool = False
    """True if the stop-token was seen (history between runs is complete)."""
    pages_fetched: int = 0
    error: str | None = None
    """Set when pagination was aborted by an upstream failure (partial batch)."""

    @property
    def partial(self) -> bool:
        return self.error is not None


ValidationStatus = Literal["verified", "rejected", "not_nft"]


@dataclass(frozen=True, slots=True)
class ValidationOutcome:
    """Result of the NFT authenticity check."""

    status: ValidationStatus
    metadata: MintMetadata | None = None
    reason: str | None = None

    @property
    def verified(self) -> bool:
        return self.status == "verified" and self.metadata is not None


DetectionStatus = Literal["sale", "not_qualifying", "not_nft", "unverified", "fetch_failed"]


@dataclass(frozen=True, slots=True)
class SaleDetection:
    """Outcome of running the detection pipeline for one signature."""

    signature: str
    status: DetectionStatus
    sale: SaleEvent | None = None
    reason: str | None = None


@dataclass(frozen=True, slots=True)
class CheckSalesResult:
    """Summary of one check_sales run."""

    candidates: int
    processed: int
    sales: tuple[SaleEvent, ...]
    failures: tuple[str, ...]
    """Signatures whose processing raised (logged and acknowledged)."""
    last_processed: str | None
    history_error: str | None = None
    ack_error: str | None = None
    """Set when the ledger could not be persisted; the batch stopped at that signature."""
