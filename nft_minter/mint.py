from solders.keypair import Keypair
from solders.pubkey import Pubkey
from solders.signature import Signature
from spl.token.constants import TOKEN_PROGRAM_ID
from spl.token.instructions import MintToParams, mint_to

from nft_minter import constants as C
from nft_minter.errors import MintFailed
from nft_minter.gateway import LedgerGateway
from nft_minter.transactions import submit


def mint_one(
    identity: Keypair, mint: Pubkey, holding: Pubkey, gateway: LedgerGateway
) -> Signature:
    """Mint a single unit of ``mint`` into ``holding``; returns the signature."""
    ix = mint_to(
        MintToParams(
            program_id=TOKEN_PROGRAM_ID,
            mint=mint,
            dest=holding,
            mint_authority=identity.pubkey(),
            amount=C.MINT_AMOUNT,
        )
    )
    result = submit(gateway, [ix], identity)
    if not result.ok:
        raise MintFailed(f"could not mint {C.MINT_AMOUNT} of {mint} into {holding}", result)
    print("✓ Minted NFT to:", holding)
    return result.signature
