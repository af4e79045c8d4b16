import logging

from solders.keypair import Keypair
from solders.pubkey import Pubkey

from nft_minter.config import TokenInfo
from nft_minter.errors import MetadataCreationFailed
from nft_minter.gateway import LedgerGateway
from nft_minter.pda import find_metadata_address
from nft_minter.token_metadata import DataV2, create_metadata_account_v3
from nft_minter.transactions import submit

logger = logging.getLogger(__name__)


def attach_metadata(
    identity: Keypair,
    mint: Pubkey,
    gateway: LedgerGateway,
    *,
    token: TokenInfo = TokenInfo(),
) -> Pubkey:
    """
    Create the metadata record of ``mint`` at its derived address and
    return that address once the transaction is confirmed.

    The record is created immutable, with ``identity`` as mint authority,
    update authority and payer, and without creators, collection or uses.
    """
    wallet = identity.pubkey()
    metadata = find_metadata_address(mint)
    logger.debug("metadata PDA for %s = %s", mint, metadata)

    ix = create_metadata_account_v3(
        {
            "data": DataV2(
                name=token.name,
                symbol=token.symbol,
                uri=token.uri,
                seller_fee_basis_points=token.seller_fee_basis_points,
            ),
            "is_mutable": False,
        },
        {
            "metadata": metadata,
            "mint": mint,
            "mint_authority": wallet,
            "payer": wallet,
            "update_authority": wallet,
        },
    )
    result = submit(gateway, [ix], identity)
    if not result.ok:
        raise MetadataCreationFailed(f"could not create metadata account {metadata}", result)
    print("✓ Created Metadata Account:", metadata)
    return metadata
