"""Mint a single master-edition NFT on Solana."""

from nft_minter.config import MinterConfig, TokenInfo
from nft_minter.gateway import Confirmation, LedgerGateway, RpcGateway
from nft_minter.identity import get_identity
from nft_minter.pipeline import MintReceipt, run

__version__ = "0.1.0"

__all__ = [
    "MinterConfig",
    "TokenInfo",
    "Confirmation",
    "LedgerGateway",
    "RpcGateway",
    "get_identity",
    "MintReceipt",
    "run",
]
