"""Explorer API response types. Keys match the API response (camelCase)."""

from __future__ import annotations

from typing import Any, TypedDict


class AccountTransactionSchema(TypedDict, total=False):
    """GET /account/transactions item. Only txHash is consumed."""

    txHash: str
    blockTime: int
    slot: int
    status: str
    fee: int


class InputAccountSchema(TypedDict, total=False):
    """Entry of inputAccount in GET /transaction/<signature>."""

    account: str
    preBalance: int
    postBalance: int
    signer: bool
    writable: bool


class TokenInfoSchema(TypedDict, total=False):
    tokenAddress: str
    symbol: str


class TokenAmountSchema(TypedDict, total=False):
    preAmount: Any
    postAmount: Any


class TokenBalanceSchema(TypedDict, total=False):
    """Entry of tokenBalanes (sic, as spelled by the API)."""

    account: str
    token: TokenInfoSchema
    amount: TokenAmountSchema


class TransactionDetailSchema(TypedDict, total=False):
    """GET /transaction/<signature> response."""

    txHash: str
    blockTime: int
    slot: int
    inputAccount: list[InputAccountSchema]
    tokenBalanes: list[TokenBalanceSchema]
