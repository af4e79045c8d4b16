"""Run configuration passed explicitly into every pipeline stage."""

from dataclasses import dataclass, field, replace
from pathlib import Path

from solana.rpc.commitment import Commitment, Confirmed

from nft_minter import constants as C


@dataclass(frozen=True)
class TokenInfo:
    """Descriptive fields written into the metadata record."""

    name: str = C.TOKEN_NAME
    symbol: str = C.TOKEN_SYMBOL
    uri: str = C.TOKEN_URI
    seller_fee_basis_points: int = C.SELLER_FEE_BASIS_POINTS

    def __post_init__(self):
        for label, value, limit in (
            ("name", self.name, C.MAX_NAME_LENGTH),
            ("symbol", self.symbol, C.MAX_SYMBOL_LENGTH),
            ("uri", self.uri, C.MAX_URI_LENGTH),
        ):
            if len(value.encode("utf-8")) > limit:
                raise ValueError(f"{label} exceeds {limit} bytes: {value!r}")
        if not 0 <= self.seller_fee_basis_points <= 10_000:
            raise ValueError("seller_fee_basis_points must be within 0..10000")


@dataclass(frozen=True)
class MinterConfig:
    rpc_url: str = C.RPC_URL
    wallet_path: Path = C.WALLET_PATH
    commitment: Commitment = Confirmed
    rpc_timeout: float = C.RPC_TIMEOUT
    airdrop_lamports: int = C.AIRDROP_LAMPORTS
    poll_interval: float = C.POLL_INTERVAL
    max_polls: int = C.MAX_POLLS
    token: TokenInfo = field(default_factory=TokenInfo)
    # Re-fetch the metadata record after the edition upgrade before printing it.
    fresh_snapshot: bool = True

    def with_overrides(self, **changes) -> "MinterConfig":
        """Return a copy with every non-None value in ``changes`` applied."""
        changes = {k: v for k, v in changes.items() if v is not None}
        return replace(self, **changes)
