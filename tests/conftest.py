"""
conftest.py - Shared pytest fixtures for minter tests

Provides:
- a fresh signing identity
- fake ledgers: funded, empty (airdrop lands on first poll)
- a sleep recorder so funding polls never block
- a config with no polling delay
"""

import pytest
from solders.keypair import Keypair

from nft_minter.config import MinterConfig

from tests.fake_gateway import FakeGateway

SOL = 1_000_000_000


class SleepRecorder:
    def __init__(self):
        self.calls = []

    def __call__(self, seconds):
        self.calls.append(seconds)


@pytest.fixture
def identity():
    return Keypair()


@pytest.fixture
def gateway(identity):
    """A ledger on which the identity already holds 10 SOL."""
    return FakeGateway(balances={identity.pubkey(): 10 * SOL})


@pytest.fixture
def empty_gateway():
    """A ledger on which nobody has funds yet."""
    return FakeGateway()


@pytest.fixture
def sleeper():
    return SleepRecorder()


@pytest.fixture
def config(tmp_path):
    return MinterConfig(wallet_path=tmp_path / "wallet.keypair", poll_interval=0, max_polls=5)
