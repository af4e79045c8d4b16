"""Creation of the mint account and the token account that holds the NFT."""

from solders.keypair import Keypair
from solders.pubkey import Pubkey
from solders.system_program import CreateAccountParams, create_account
from spl.token.constants import ACCOUNT_LEN, MINT_LEN, TOKEN_PROGRAM_ID
from spl.token.instructions import (
    InitializeAccountParams,
    InitializeMintParams,
    initialize_account,
    initialize_mint,
)

from nft_minter import constants as C
from nft_minter.errors import AccountCreationFailed
from nft_minter.gateway import LedgerGateway
from nft_minter.transactions import submit


def _create_account_ix(gateway: LedgerGateway, payer: Pubkey, new_account: Pubkey, space: int):
    lamports = gateway.get_minimum_rent_exempt_balance(space)
    return create_account(
        CreateAccountParams(
            from_pubkey=payer,
            to_pubkey=new_account,
            lamports=lamports,
            space=space,
            owner=TOKEN_PROGRAM_ID,
        )
    )


def create_mint_account(identity: Keypair, gateway: LedgerGateway) -> Pubkey:
    """Create an indivisible mint with ``identity`` as mint authority."""
    wallet = identity.pubkey()
    mint_kp = Keypair()
    mint = mint_kp.pubkey()

    ixs = [
        _create_account_ix(gateway, wallet, mint, MINT_LEN),
        initialize_mint(
            InitializeMintParams(
                decimals=C.DECIMALS,
                program_id=TOKEN_PROGRAM_ID,
                mint=mint,
                mint_authority=wallet,
                freeze_authority=None,
            )
        ),
    ]
    result = submit(gateway, ixs, identity, [mint_kp])
    if not result.ok:
        raise AccountCreationFailed(f"could not create mint account {mint}", result)
    print("✓ Created Mint Account:", mint)
    return mint


def create_token_account(identity: Keypair, mint: Pubkey, gateway: LedgerGateway) -> Pubkey:
    """Create a token account for ``mint`` owned by ``identity``."""
    wallet = identity.pubkey()
    account_kp = Keypair()
    account = account_kp.pubkey()

    ixs = [
        _create_account_ix(gateway, wallet, account, ACCOUNT_LEN),
        initialize_account(
            InitializeAccountParams(
                program_id=TOKEN_PROGRAM_ID,
                account=account,
                mint=mint,
                owner=wallet,
            )
        ),
    ]
    result = submit(gateway, ixs, identity, [account_kp])
    if not result.ok:
        raise AccountCreationFailed(f"could not create token account {account}", result)
    print("✓ Created Token Account:", account)
    return account
