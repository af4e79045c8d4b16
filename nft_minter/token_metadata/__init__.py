"""Client for the subset of the token-metadata program the minter uses."""

from nft_minter.token_metadata.accounts import Key, MasterEdition, Metadata
from nft_minter.token_metadata.instructions import (
    create_master_edition_v3,
    create_metadata_account_v3,
)
from nft_minter.token_metadata.types import Data, DataV2

__all__ = [
    "Key",
    "MasterEdition",
    "Metadata",
    "create_master_edition_v3",
    "create_metadata_account_v3",
    "Data",
    "DataV2",
]
