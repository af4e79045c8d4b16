"""Tests for attaching the metadata record to a freshly minted token."""

import pytest

from nft_minter.accounts import create_mint_account, create_token_account
from nft_minter.config import TokenInfo
from nft_minter.constants import METADATA_PROGRAM_ID
from nft_minter.errors import MetadataCreationFailed
from nft_minter.metadata import attach_metadata
from nft_minter.mint import mint_one
from nft_minter.pda import find_metadata_address
from nft_minter.token_metadata import Key, Metadata

from tests.fake_gateway import FakeGateway


@pytest.fixture
def minted(identity, gateway):
    mint = create_mint_account(identity, gateway)
    holding = create_token_account(identity, mint, gateway)
    mint_one(identity, mint, holding, gateway)
    return mint


class TestAttachMetadata:
    def test_returns_derived_address(self, identity, gateway, minted):
        address = attach_metadata(identity, minted, gateway)
        assert address == find_metadata_address(minted)

    def test_record_contents(self, identity, gateway, minted):
        address = attach_metadata(identity, minted, gateway)

        acc = gateway.accounts[address]
        assert acc.owner == METADATA_PROGRAM_ID
        md = Metadata.decode(gateway.get_account(address))
        assert md.key is Key.MetadataV1
        assert md.mint == minted
        assert md.update_authority == identity.pubkey()
        assert md.data.name.rstrip("\x00") == "Will Coin"
        assert md.data.symbol.rstrip("\x00") == "W"
        assert md.data.uri.rstrip("\x00") == "https://solana.com"
        assert md.data.seller_fee_basis_points == 0
        assert md.data.creators is None
        assert md.is_mutable is False

    def test_custom_token_info(self, identity, gateway, minted):
        token = TokenInfo(name="Cal Coin", symbol="CAL", uri="https://example.com/cal.json")
        address = attach_metadata(identity, minted, gateway, token=token)

        md = Metadata.decode(gateway.get_account(address))
        assert md.data.name.rstrip("\x00") == "Cal Coin"
        assert md.data.symbol.rstrip("\x00") == "CAL"

    def test_one_instruction(self, identity, gateway, minted):
        attach_metadata(identity, minted, gateway)
        assert gateway.transactions[-1].kinds == ["create_metadata_account_v3"]

    def test_unconfirmed_raises_instead_of_returning(self, identity, minted, gateway):
        gateway.fail_on.add("create_metadata_account_v3")

        with pytest.raises(MetadataCreationFailed):
            attach_metadata(identity, minted, gateway)

        assert gateway.get_account(find_metadata_address(minted)) is None

    def test_second_attach_fails(self, identity, gateway, minted):
        attach_metadata(identity, minted, gateway)
        with pytest.raises(MetadataCreationFailed):
            attach_metadata(identity, minted, gateway)


class TestTokenInfo:
    def test_overlong_name_rejected(self):
        with pytest.raises(ValueError):
            TokenInfo(name="x" * 33)

    def test_royalty_range(self):
        with pytest.raises(ValueError):
            TokenInfo(seller_fee_basis_points=10_001)
