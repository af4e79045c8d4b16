import logging
from dataclasses import dataclass
from typing import Optional

from solders.keypair import Keypair
from solders.pubkey import Pubkey

from nft_minter import constants as C
from nft_minter.errors import AddressMismatch, EditionUpgradeFailed
from nft_minter.gateway import LedgerGateway
from nft_minter.pda import find_master_edition_address, find_metadata_address
from nft_minter.token_metadata import MasterEdition, Metadata, create_master_edition_v3
from nft_minter.transactions import submit

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MetadataSnapshot:
    """Readable view of a metadata record, padding stripped."""

    key: str
    update_authority: Pubkey
    mint: Pubkey
    name: str
    symbol: str
    uri: str
    seller_fee_basis_points: int

    @classmethod
    def from_metadata(cls, md: Metadata) -> "MetadataSnapshot":
        return cls(
            key=md.key.name,
            update_authority=md.update_authority,
            mint=md.mint,
            name=md.data.name.rstrip("\x00"),
            symbol=md.data.symbol.rstrip("\x00"),
            uri=md.data.uri.rstrip("\x00"),
            seller_fee_basis_points=md.data.seller_fee_basis_points,
        )

    def render(self, title: str = "Snapshot of Master Edition Metadata") -> str:
        return "\n".join(
            [
                f"\n{title}\n",
                f"key: {self.key}",
                f"update_authority: {self.update_authority}",
                f"mint: {self.mint}",
                f"name: {self.name!r}",
                f"symbol: {self.symbol!r}",
                f"uri: {self.uri!r}",
                f"seller_fee_basis_points: {self.seller_fee_basis_points}",
            ]
        )


def _check_derivation(metadata_address: Pubkey, mint: Pubkey, md: Metadata):
    expected = find_metadata_address(mint)
    if metadata_address != expected:
        raise AddressMismatch(
            f"metadata address {metadata_address} is not the PDA of mint {mint} ({expected})"
        )
    if md.mint != mint:
        raise AddressMismatch(f"metadata record {metadata_address} belongs to mint {md.mint}, not {mint}")


def upgrade_to_master_edition(
    identity: Keypair,
    metadata_address: Pubkey,
    mint: Pubkey,
    gateway: LedgerGateway,
    *,
    fresh_snapshot: bool = True,
) -> MetadataSnapshot:
    """
    Turn the metadata record of ``mint`` into a master edition capped at a
    supply of one, then print and return a snapshot of the record.

    With ``fresh_snapshot`` the record is fetched again after the upgrade;
    otherwise the bytes read before the upgrade are decoded a second time.
    """
    wallet = identity.pubkey()
    account_data = gateway.get_account(metadata_address)
    md = Metadata.decode(account_data)
    _check_derivation(metadata_address, mint, md)

    edition = find_master_edition_address(md.mint)
    logger.debug("master edition PDA for %s = %s", md.mint, edition)

    ix = create_master_edition_v3(
        {"max_supply": C.MAX_SUPPLY},
        {
            "edition": edition,
            "mint": mint,
            "update_authority": wallet,
            "mint_authority": wallet,
            "payer": wallet,
            "metadata": metadata_address,
        },
    )
    result = submit(gateway, [ix], identity)
    if not result.ok:
        logger.error("master edition upgrade result: %s", result)
        raise EditionUpgradeFailed(f"could not create master edition {edition}", result)
    print("✓ Upgraded Metadata Account to Master Edition:", edition)

    if fresh_snapshot:
        account_data = gateway.get_account(metadata_address)
    snapshot = MetadataSnapshot.from_metadata(Metadata.decode(account_data))
    print(snapshot.render())
    return snapshot


def show_metadata(mint: Pubkey, gateway: LedgerGateway) -> MetadataSnapshot:
    """Print the metadata record (and master edition, if any) of an existing mint."""
    metadata_address = find_metadata_address(mint)
    print("metadata PDA:", metadata_address)
    md = Metadata.decode(gateway.get_account(metadata_address))
    snapshot = MetadataSnapshot.from_metadata(md)
    print(snapshot.render(title="Metadata"))

    edition_data: Optional[bytes] = gateway.get_account(find_master_edition_address(mint))
    if edition_data:
        me = MasterEdition.decode(edition_data)
        print(f"master edition: supply {me.supply}, max_supply {me.max_supply}")
    else:
        print("master edition: none")
    return snapshot
