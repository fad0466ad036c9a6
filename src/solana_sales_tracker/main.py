# -*- coding: utf-8 -*-
"""
Entry point for the sales tracker.

Runs one batch: logging, settings check, storage prepared, sinks up, check_sales,
sinks down, HTTP session closed. Schedule it externally (cron, systemd timer)
to poll periodically.

Run with: python -m solana_sales_tracker.main

Notebook usage:
    from solana_sales_tracker.main import run
    result = await run()
"""
from __future__ import annotations

import asyncio
import structlog

from solana_sales_tracker.DI import Container
from solana_sales_tracker.exceptions import MissingRequiredConfigError, StorageError
from solana_sales_tracker.logging.config import configure_logging
from solana_sales_tracker.models.results import CheckSalesResult
from solana_sales_tracker.utils import mask_address


async def run() -> CheckSalesResult:
    configure_logging()
    logger = structlog.get_logger("main")

    container = Container()
    checker = container.sales_checker()
    try:
        account = checker.require_config()
    except MissingRequiredConfigError as e:
        logger.error("main_missing_required_config", error_message=str(e))
        raise

    http_client = container.http_client()
    try:
        await container.key_value_store().prepare()
    except StorageError as e:
        logger.error("main_storage_unavailable", error_message=str(e))
        await http_client.aclose()
        raise

    dispatcher = container.sale_dispatcher()
    await dispatcher.initialize()
    logger.info("main_batch_started", account_masked=mask_address(account))
    try:
        result = await checker.check_sales()
    finally:
        await dispatcher.shutdown()
        await http_client.aclose()

    logger.info(
        "main_batch_complete",
        account_masked=mask_address(account),
        sales=len(result.sales),
        failures=len(result.failures),
    )
    return result


def main() -> None:
    asyncio.run(run())


__all__ = ["run", "main"]

if __name__ == "__main__":
    main()
