"""Tests for minting the single unit."""

import pytest
from solders.keypair import Keypair

from nft_minter.accounts import create_mint_account, create_token_account
from nft_minter.errors import MintFailed
from nft_minter.mint import mint_one


@pytest.fixture
def prepared(identity, gateway):
    mint = create_mint_account(identity, gateway)
    holding = create_token_account(identity, mint, gateway)
    return mint, holding


class TestMintOne:
    def test_mints_exactly_one(self, identity, gateway, prepared):
        mint, holding = prepared
        sig = mint_one(identity, mint, holding, gateway)

        assert gateway.mints[mint].supply == 1
        assert gateway.token_accounts[holding].amount == 1
        assert gateway.transactions[-1].confirmation.signature == sig

    def test_single_instruction_signed_by_identity(self, identity, gateway, prepared):
        mint, holding = prepared
        mint_one(identity, mint, holding, gateway)
        assert gateway.transactions[-1].kinds == ["mint_to"]

    def test_wrong_authority_fails(self, gateway, prepared):
        """Only the mint authority may mint."""
        mint, holding = prepared
        stranger = Keypair()
        gateway.balances[stranger.pubkey()] = 10**9

        with pytest.raises(MintFailed) as exc:
            mint_one(stranger, mint, holding, gateway)

        assert "owner does not match" in str(exc.value)
        assert gateway.mints[mint].supply == 0

    def test_token_account_of_other_mint_fails(self, identity, gateway, prepared):
        mint, _ = prepared
        other_mint = create_mint_account(identity, gateway)
        other_holding = create_token_account(identity, other_mint, gateway)

        with pytest.raises(MintFailed):
            mint_one(identity, mint, other_holding, gateway)
