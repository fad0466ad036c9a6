# -*- coding: utf-8 -*-
"""Dependency injection container (dependency-injector)."""

from __future__ import annotations

from dependency_injector import containers, providers

from solana_sales_tracker.config import Settings, get_settings
from solana_sales_tracker.clients.explorer_api import ExplorerApiClient
from solana_sales_tracker.clients.http import AsyncHttpClient
from solana_sales_tracker.clients.rpc_client import RpcClient
from solana_sales_tracker.notifications.dispatcher import SaleDispatcher
from solana_sales_tracker.notifications.strategies import (
    BaseSaleSink,
    ConsoleSink,
    DiscordSink,
    SalesRecordSink,
    TelegramSink,
    TwitterSink,
)
from solana_sales_tracker.notifications.stylers import SaleStyler
from solana_sales_tracker.persistence.repositories.interfaces import ISalesRecordRepository
from solana_sales_tracker.persistence.repositories.key_value import (
    KeyValueProcessedSignatureRepository,
    KeyValueSalesRecordRepository,
)
from solana_sales_tracker.persistence.storage import (
    CosKeyValueStore,
    FileKeyValueStore,
    IKeyValueStore,
    InMemoryKeyValueStore,
)
from solana_sales_tracker.services.analysis import BalanceDiffAnalyzer
from solana_sales_tracker.services.history import HistoryCursor
from solana_sales_tracker.services.marketplace import MarketplaceResolver
from solana_sales_tracker.services.nft_validation import MintMetadataResolver, NFTValidator
from solana_sales_tracker.services.sale_info import SaleInfoBuilder
from solana_sales_tracker.services.sales_checker import SalesChecker
from solana_sales_tracker.services.transactions import TransactionFetcher


def _build_store(settings: Settings) -> IKeyValueStore:
    """Build the key/value store selected by settings.storage.backend."""
    if settings.storage.backend == "memory":
        return InMemoryKeyValueStore()
    if settings.storage.backend == "cos":
        return CosKeyValueStore.from_settings(settings.storage)
    return FileKeyValueStore(settings.storage.root_dir)


def _build_marketplace_resolver(settings: Settings) -> MarketplaceResolver:
    return MarketplaceResolver(settings.tracking.marketplaces)


def _build_sinks(
    settings: Settings,
    styler: SaleStyler,
    http_client: AsyncHttpClient,
    sales_record_repository: ISalesRecordRepository,
) -> list[BaseSaleSink]:
    sinks: list[BaseSaleSink] = []
    if settings.console.enabled:
        sinks.append(ConsoleSink(settings=settings, styler=styler))
    if settings.sales_record.enabled:
        sinks.append(SalesRecordSink(settings=settings, repository=sales_record_repository))
    if settings.discord.enabled:
        sinks.append(DiscordSink(settings=settings, http_client=http_client, styler=styler))
    if settings.twitter.enabled:
        sinks.append(TwitterSink(settings=settings, styler=styler))
    if settings.telegram.enabled:
        sinks.append(TelegramSink(settings=settings, styler=styler))
    return sinks


class Container(containers.DeclarativeContainer):
    """Application container. Wires settings, HTTP client, API clients, storage, services and sinks."""

    config = providers.Callable(get_settings)

    http_client = providers.Singleton(
        AsyncHttpClient,
        settings=config,
    )

    explorer_api_client = providers.Singleton(
        ExplorerApiClient,
        http_client=http_client,
        settings=config,
    )

    rpc_client = providers.Singleton(
        RpcClient,
        http_client=http_client,
        settings=config,
    )

    key_value_store = providers.Singleton(_build_store, config)

    processed_signature_repository = providers.Singleton(
        KeyValueProcessedSignatureRepository,
        store=key_value_store,
    )

    sales_record_repository = providers.Singleton(
        KeyValueSalesRecordRepository,
        store=key_value_store,
    )

    sale_styler = providers.Singleton(SaleStyler, settings=config)

    sale_dispatcher = providers.Singleton(
        SaleDispatcher,
        sinks=providers.Callable(
            _build_sinks, config, sale_styler, http_client, sales_record_repository
        ),
    )

    history_cursor = providers.Singleton(
        HistoryCursor,
        explorer_api=explorer_api_client,
        settings=config,
    )

    transaction_fetcher = providers.Singleton(
        TransactionFetcher,
        explorer_api=explorer_api_client,
    )

    balance_analyzer = providers.Singleton(BalanceDiffAnalyzer)

    metadata_resolver = providers.Singleton(
        MintMetadataResolver,
        rpc_client=rpc_client,
    )

    nft_validator = providers.Singleton(
        NFTValidator,
        metadata_resolver=metadata_resolver,
        settings=config,
    )

    marketplace_resolver = providers.Singleton(_build_marketplace_resolver, config)

    sale_builder = providers.Singleton(
        SaleInfoBuilder,
        http_client=http_client,
    )

    sales_checker = providers.Singleton(
        SalesChecker,
        settings=config,
        history_cursor=history_cursor,
        transaction_fetcher=transaction_fetcher,
        balance_analyzer=balance_analyzer,
        nft_validator=nft_validator,
        marketplace_resolver=marketplace_resolver,
        sale_builder=sale_builder,
        ledger_repository=processed_signature_repository,
        dispatcher=sale_dispatcher,
        sales_record_repository=sales_record_repository,
    )
