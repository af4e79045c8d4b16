"""
The mint pipeline, start to finish.

Stages run strictly in order and each consumes the address produced by the
one before it. A stage that fails raises, so nothing after it runs.
"""

import logging
import time
from dataclasses import dataclass
from typing import Callable

from solders.keypair import Keypair
from solders.pubkey import Pubkey
from solders.signature import Signature

from nft_minter.accounts import create_mint_account, create_token_account
from nft_minter.config import MinterConfig
from nft_minter.edition import MetadataSnapshot, upgrade_to_master_edition
from nft_minter.funding import ensure_funded
from nft_minter.gateway import LedgerGateway
from nft_minter.metadata import attach_metadata
from nft_minter.mint import mint_one
from nft_minter.pda import find_master_edition_address

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MintReceipt:
    mint: Pubkey
    token_account: Pubkey
    metadata: Pubkey
    master_edition: Pubkey
    mint_signature: Signature
    snapshot: MetadataSnapshot


def run(
    config: MinterConfig,
    identity: Keypair,
    gateway: LedgerGateway,
    sleep: Callable[[float], None] = time.sleep,
) -> MintReceipt:
    ensure_funded(
        identity,
        gateway,
        lamports=config.airdrop_lamports,
        poll_interval=config.poll_interval,
        max_polls=config.max_polls,
        sleep=sleep,
    )

    # Create the required prelim accounts
    mint = create_mint_account(identity, gateway)
    token_account = create_token_account(identity, mint, gateway)

    # Create the NFT, then describe it and lock its supply
    mint_sig = mint_one(identity, mint, token_account, gateway)
    metadata = attach_metadata(identity, mint, gateway, token=config.token)
    snapshot = upgrade_to_master_edition(
        identity, metadata, mint, gateway, fresh_snapshot=config.fresh_snapshot
    )

    receipt = MintReceipt(
        mint=mint,
        token_account=token_account,
        metadata=metadata,
        master_edition=find_master_edition_address(mint),
        mint_signature=mint_sig,
        snapshot=snapshot,
    )
    logger.info("minted %s (metadata %s)", mint, metadata)
    return receipt
