"""Program-derived addresses of the token-metadata program."""

from solders.pubkey import Pubkey

from nft_minter.constants import EDITION_SUFFIX, METADATA_PREFIX, METADATA_PROGRAM_ID


def metadata_seeds(mint: Pubkey, program_id: Pubkey = METADATA_PROGRAM_ID) -> list:
    return [METADATA_PREFIX, bytes(program_id), bytes(mint)]


def master_edition_seeds(mint: Pubkey, program_id: Pubkey = METADATA_PROGRAM_ID) -> list:
    return [*metadata_seeds(mint, program_id), EDITION_SUFFIX]


def find_metadata_address(mint: Pubkey, program_id: Pubkey = METADATA_PROGRAM_ID) -> Pubkey:
    """Derive the metadata record PDA for ``mint``."""
    (pda, _) = Pubkey.find_program_address(metadata_seeds(mint, program_id), program_id)
    return pda


def find_master_edition_address(mint: Pubkey, program_id: Pubkey = METADATA_PROGRAM_ID) -> Pubkey:
    """Derive the master edition PDA for ``mint``."""
    (pda, _) = Pubkey.find_program_address(master_edition_seeds(mint, program_id), program_id)
    return pda
