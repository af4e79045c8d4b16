"""Network, program and demo-token constants."""

from pathlib import Path

from solders.pubkey import Pubkey

# ─── Network ──────────────────────────────────────────────────────────────────

# Change this if you mint on a different cluster.
RPC_URL     = "https://api.devnet.solana.com"
RPC_TIMEOUT = 30  # seconds, per request

# Where the signing identity lives between runs.
WALLET_PATH = Path("wallet.keypair")

# ─── Programs ─────────────────────────────────────────────────────────────────

METADATA_PROGRAM_ID = Pubkey.from_string("metaqbxxUerdq28cj1RbAWkYQm3ybzjb6a8bt518x1s")

# Seeds for the metadata / master edition PDAs
METADATA_PREFIX = b"metadata"
EDITION_SUFFIX  = b"edition"

# ─── Funding ──────────────────────────────────────────────────────────────────

AIRDROP_LAMPORTS = 10_000_000_000
POLL_INTERVAL    = 1.0
MAX_POLLS        = 60

# ─── Token ────────────────────────────────────────────────────────────────────

DECIMALS                = 0
MINT_AMOUNT             = 1
MAX_SUPPLY              = 1
SELLER_FEE_BASIS_POINTS = 0

TOKEN_NAME   = "Will Coin"
TOKEN_SYMBOL = "W"
TOKEN_URI    = "https://solana.com"

# On-chain field widths; the program pads shorter values with NUL bytes.
MAX_NAME_LENGTH   = 32
MAX_SYMBOL_LENGTH = 10
MAX_URI_LENGTH    = 200

# ─── Sysvars ──────────────────────────────────────────────────────────────────

RENT_SYSVAR_ID = Pubkey.from_string("SysvarRent111111111111111111111111111111111")
