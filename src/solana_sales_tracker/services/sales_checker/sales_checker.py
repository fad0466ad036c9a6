"""Sales checker: one idempotent batch of sale detection for the tracked royalties account."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

import structlog
from structlog.contextvars import bound_contextvars

from solana_sales_tracker.exceptions import MissingRequiredConfigError
from solana_sales_tracker.models.results import CheckSalesResult, SaleDetection
from solana_sales_tracker.utils.validation import is_solana_address, mask_address

if TYPE_CHECKING:
    from solana_sales_tracker.config import Settings
    from solana_sales_tracker.models.processed_ledger import ProcessedSignatureLedger
    from solana_sales_tracker.models.sale_event import SaleEvent
    from solana_sales_tracker.notifications.dispatcher import SaleDispatcher
    from solana_sales_tracker.persistence.repositories.interfaces import (
        IProcessedSignatureRepository,
        ISalesRecordRepository,
    )
    from solana_sales_tracker.services.analysis import BalanceDiffAnalyzer
    from solana_sales_tracker.services.history import HistoryCursor
    from solana_sales_tracker.services.marketplace import MarketplaceResolver
    from solana_sales_tracker.services.nft_validation import NFTValidator
    from solana_sales_tracker.services.sale_info import SaleInfoBuilder
    from solana_sales_tracker.services.transactions import TransactionFetcher


class SalesChecker:
    """Runs the detection pipeline over signatures not yet in the processed ledger.

    Signatures are handled oldest first, one at a time. Each one is marked
    processed and the ledger persisted, whatever the detection outcome. With
    the "after_emit" ack policy the mark happens after the sale is dispatched
    (a crash in between re-emits it next run); with "before_emit" it happens
    first (a crash in between loses it).

    If the ledger cannot be persisted, under either policy, the batch stops at
    that signature and the error is reported in CheckSalesResult.ack_error.
    Later signatures are left for the next run, which resumes from the last
    persisted ledger.
    """

    def __init__(
        self,
        settings: Settings,
        history_cursor: HistoryCursor,
        transaction_fetcher: TransactionFetcher,
        balance_analyzer: BalanceDiffAnalyzer,
        nft_validator: NFTValidator,
        marketplace_resolver: MarketplaceResolver,
        sale_builder: SaleInfoBuilder,
        ledger_repository: IProcessedSignatureRepository,
        dispatcher: SaleDispatcher,
        *,
        sales_record_repository: ISalesRecordRepository | None = None,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: str | None = None,
    ) -> None:
        """Initialize the checker.

        Args:
            settings: Application settings (uses settings.tracking).
            history_cursor: Source of new signatures (injected).
            transaction_fetcher: Transaction detail source (injected).
            balance_analyzer: Balance-diff heuristic (injected).
            nft_validator: Collection authenticity check (injected).
            marketplace_resolver: Marketplace lookup (injected).
            sale_builder: SaleEvent assembly (injected).
            ledger_repository: Processed-signature ledger persistence.
            dispatcher: Output sinks for detected sales.
            sales_record_repository: Optional; used to log the recorded sales count.
            get_logger: Logger factory (injected).
            logger_name: Optional logger name (defaults to class name).
        """
        self._settings = settings
        self._cursor = history_cursor
        self._fetcher = transaction_fetcher
        self._analyzer = balance_analyzer
        self._validator = nft_validator
        self._marketplaces = marketplace_resolver
        self._builder = sale_builder
        self._ledger_repo = ledger_repository
        self._dispatcher = dispatcher
        self._sales_repo = sales_record_repository
        self._logger = get_logger(logger_name or self.__class__.__name__)

    def require_config(self) -> str:
        """Return the tracked account after checking the required tracking settings.

        Raises:
            MissingRequiredConfigError: If the royalties account or update authority
                is missing or not a Solana address.
        """
        tr = self._settings.tracking
        for field_name in ("primary_royalties_account", "update_authority"):
            value = getattr(tr, field_name)
            if not value:
                raise MissingRequiredConfigError(f"tracking.{field_name} is required")
            if not is_solana_address(value):
                raise MissingRequiredConfigError(f"tracking.{field_name} is not a valid Solana address")
        return tr.primary_royalties_account

    async def detect(self, signature: str) -> SaleDetection:
        """Run fetch, analysis, validation and sale assembly for one signature.

        Transient fetch failures and non-sales are returned as outcomes;
        metadata and asset failures raise.
        """
        fetched = await self._fetcher.fetch(signature)
        if not fetched.ok:
            return SaleDetection(signature, "fetch_failed", reason=fetched.error)
        record = fetched.value

        diff = self._analyzer.analyze(record)
        royalty_account = self._settings.tracking.primary_royalties_account
        if not self._analyzer.qualifies(diff, royalty_account):
            self._logger.info("sales_checker_not_qualifying", tx_signature=signature)
            return SaleDetection(signature, "not_qualifying")
        if not diff.mint_info:
            self._logger.info("sales_checker_not_nft", tx_signature=signature)
            return SaleDetection(signature, "not_nft")

        outcome = await self._validator.validate(diff.mint_info)
        if outcome.status == "not_nft":
            return SaleDetection(signature, "not_nft", reason=outcome.reason)
        if not outcome.verified or outcome.metadata is None:
            return SaleDetection(signature, "unverified", reason=outcome.reason)

        marketplace = self._marketplaces.resolve(diff.all_addresses)
        sale = await self._builder.build(
            signature, diff, outcome.metadata, marketplace, record.block_time
        )
        return SaleDetection(signature, "sale", sale=sale)

    async def check_sales(self) -> CheckSalesResult:
        """Process one batch of new signatures for the tracked account.

        Raises:
            MissingRequiredConfigError: If required tracking settings are missing.
        """
        account = self.require_config()
        account_masked = mask_address(account)
        ledger = await self._ledger_repo.load(account)
        sales_count = await self._sales_repo.count(account) if self._sales_repo is not None else None
        self._logger.info(
            "sales_checker_started",
            account_masked=account_masked,
            ledger_size=len(ledger),
            ledger_last_processed=ledger.last_processed,
            sales_recorded=sales_count,
        )

        batch = await self._cursor.fetch_new_signatures(account, ledger.last_processed)
        candidates = [s for s in batch.signatures if not ledger.contains(s)]
        ack_policy = self._settings.tracking.ack_policy

        sales: list[SaleEvent] = []
        failures: list[str] = []
        processed = 0
        ack_error: str | None = None
        for signature in candidates:
            with bound_contextvars(tx_signature=signature):
                if ack_policy == "before_emit":
                    try:
                        ledger = await self._acknowledge(account, ledger, signature)
                    except Exception as e:
                        ack_error = self._log_ack_failure(e)
                        break
                stage = "detect"
                try:
                    detection = await self.detect(signature)
                    if detection.sale is not None:
                        stage = "emit"
                        await self._dispatcher.dispatch(detection.sale)
                        sales.append(detection.sale)
                    self._logger.debug(
                        "sales_checker_signature_done",
                        detection_status=detection.status,
                        detection_reason=detection.reason,
                    )
                except Exception as e:
                    failures.append(signature)
                    self._logger.exception(
                        "sales_checker_signature_failed",
                        sales_checker_stage=stage,
                        error_type=type(e).__name__,
                        error_message=str(e),
                    )
                if ack_policy == "after_emit":
                    try:
                        ledger = await self._acknowledge(account, ledger, signature)
                    except Exception as e:
                        ack_error = self._log_ack_failure(e)
                        break
                processed += 1

        result = CheckSalesResult(
            candidates=len(candidates),
            processed=processed,
            sales=tuple(sales),
            failures=tuple(failures),
            last_processed=ledger.last_processed,
            history_error=batch.error,
            ack_error=ack_error,
        )
        self._logger.info(
            "sales_checker_completed",
            account_masked=account_masked,
            sales_checker_candidates=result.candidates,
            sales_checker_processed=result.processed,
            sales_checker_sales=len(result.sales),
            sales_checker_failures=len(result.failures),
            sales_checker_history_error=result.history_error,
            sales_checker_ack_error=result.ack_error,
            ledger_last_processed=result.last_processed,
        )
        return result

    def _log_ack_failure(self, error: Exception) -> str:
        self._logger.exception(
            "sales_checker_ack_failed",
            sales_checker_stage="ack",
            error_type=type(error).__name__,
            error_message=str(error),
        )
        return str(error) or type(error).__name__

    async def _acknowledge(
        self,
        account: str,
        ledger: ProcessedSignatureLedger,
        signature: str,
    ) -> ProcessedSignatureLedger:
        tr = self._settings.tracking
        updated = ledger.mark_processed(signature, max_size=tr.ledger_max_size, keep=tr.ledger_keep)
        await self._ledger_repo.save(account, updated)
        return updated
