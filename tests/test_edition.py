"""Tests for the master edition upgrade and the metadata snapshot."""

import pytest
from solders.keypair import Keypair

from nft_minter.accounts import create_mint_account, create_token_account
from nft_minter.edition import MetadataSnapshot, show_metadata, upgrade_to_master_edition
from nft_minter.errors import AddressMismatch, DecodeError, EditionUpgradeFailed
from nft_minter.metadata import attach_metadata
from nft_minter.mint import mint_one
from nft_minter.pda import find_master_edition_address, find_metadata_address
from nft_minter.token_metadata import MasterEdition


def _mint_with_metadata(identity, gateway):
    mint = create_mint_account(identity, gateway)
    holding = create_token_account(identity, mint, gateway)
    mint_one(identity, mint, holding, gateway)
    metadata = attach_metadata(identity, mint, gateway)
    return mint, holding, metadata


class TestUpgrade:
    def test_creates_capped_master_edition(self, identity, gateway):
        mint, _, metadata = _mint_with_metadata(identity, gateway)

        upgrade_to_master_edition(identity, metadata, mint, gateway)

        edition = find_master_edition_address(mint)
        me = MasterEdition.decode(gateway.get_account(edition))
        assert me.max_supply == 1
        assert me.supply == 0
        assert gateway.transactions[-1].kinds == ["create_master_edition_v3"]

    def test_snapshot(self, identity, gateway, capsys):
        mint, _, metadata = _mint_with_metadata(identity, gateway)

        snap = upgrade_to_master_edition(identity, metadata, mint, gateway)

        assert snap == MetadataSnapshot(
            key="MetadataV1",
            update_authority=identity.pubkey(),
            mint=mint,
            name="Will Coin",
            symbol="W",
            uri="https://solana.com",
            seller_fee_basis_points=0,
        )
        out = capsys.readouterr().out
        assert "Snapshot of Master Edition Metadata" in out
        assert "name: 'Will Coin'" in out
        assert "\x00" not in out

    def test_fresh_snapshot_refetches(self, identity, gateway):
        mint, _, metadata = _mint_with_metadata(identity, gateway)
        gateway.calls.clear()

        upgrade_to_master_edition(identity, metadata, mint, gateway, fresh_snapshot=True)

        assert gateway.call_names().count("get_account") == 2

    def test_stale_snapshot_reuses_first_read(self, identity, gateway):
        mint, _, metadata = _mint_with_metadata(identity, gateway)
        gateway.calls.clear()

        snap = upgrade_to_master_edition(identity, metadata, mint, gateway, fresh_snapshot=False)

        assert gateway.call_names().count("get_account") == 1
        assert snap.name == "Will Coin"

    def test_failure_prints_no_snapshot(self, identity, gateway, capsys):
        mint, _, metadata = _mint_with_metadata(identity, gateway)
        gateway.fail_on.add("create_master_edition_v3")
        capsys.readouterr()

        with pytest.raises(EditionUpgradeFailed) as exc:
            upgrade_to_master_edition(identity, metadata, mint, gateway)

        assert not exc.value.confirmation.ok
        assert "Snapshot" not in capsys.readouterr().out
        assert gateway.get_account(find_master_edition_address(mint)) is None

    def test_requires_exactly_one_minted_token(self, identity, gateway):
        mint = create_mint_account(identity, gateway)
        holding = create_token_account(identity, mint, gateway)
        mint_one(identity, mint, holding, gateway)
        metadata = attach_metadata(identity, mint, gateway)
        # a second unit before the upgrade
        mint_one(identity, mint, holding, gateway)

        with pytest.raises(EditionUpgradeFailed):
            upgrade_to_master_edition(identity, metadata, mint, gateway)


class TestOrdering:
    """The upgrade only accepts a metadata record that was attached to its mint."""

    def test_without_metadata(self, identity, gateway):
        mint = create_mint_account(identity, gateway)

        with pytest.raises(DecodeError):
            upgrade_to_master_edition(identity, find_metadata_address(mint), mint, gateway)

        assert not any(t.kinds == ["create_master_edition_v3"] for t in gateway.transactions)

    def test_metadata_of_another_mint(self, identity, gateway):
        mint, _, _ = _mint_with_metadata(identity, gateway)
        _, _, other_metadata = _mint_with_metadata(identity, gateway)

        with pytest.raises(AddressMismatch):
            upgrade_to_master_edition(identity, other_metadata, mint, gateway)

    def test_non_metadata_account(self, identity, gateway):
        """A token account handed in as metadata fails to decode."""
        mint, holding, _ = _mint_with_metadata(identity, gateway)

        with pytest.raises(DecodeError):
            upgrade_to_master_edition(identity, holding, mint, gateway)


class TestShowMetadata:
    def test_existing_nft(self, identity, gateway, capsys):
        mint, _, metadata = _mint_with_metadata(identity, gateway)
        upgrade_to_master_edition(identity, metadata, mint, gateway)
        capsys.readouterr()

        snap = show_metadata(mint, gateway)

        assert snap.name == "Will Coin"
        out = capsys.readouterr().out
        assert f"metadata PDA: {metadata}" in out
        assert "max_supply 1" in out

    def test_without_edition(self, identity, gateway, capsys):
        mint, _, _ = _mint_with_metadata(identity, gateway)
        show_metadata(mint, gateway)
        assert "master edition: none" in capsys.readouterr().out

    def test_unknown_mint(self, gateway):
        with pytest.raises(DecodeError):
            show_metadata(Keypair().pubkey(), gateway)
