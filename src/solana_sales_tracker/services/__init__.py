"""Services: history pagination, transaction analysis, NFT validation and orchestration."""
