"""Transaction balance analysis."""

from solana_sales_tracker.services.analysis.balance_diff import (
    LAMPORTS_PER_SOL,
    BalanceDiffAnalyzer,
    lamports_to_sol,
)

__all__ = ["BalanceDiffAnalyzer", "LAMPORTS_PER_SOL", "lamports_to_sol"]
