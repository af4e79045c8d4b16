import logging
import time
from typing import Callable

from solders.keypair import Keypair

from nft_minter import constants as C
from nft_minter.errors import AirdropRejected, FundingTimeout, GatewayError
from nft_minter.gateway import LedgerGateway

logger = logging.getLogger(__name__)


def ensure_funded(
    identity: Keypair,
    gateway: LedgerGateway,
    *,
    lamports: int = C.AIRDROP_LAMPORTS,
    poll_interval: float = C.POLL_INTERVAL,
    max_polls: int = C.MAX_POLLS,
    sleep: Callable[[float], None] = time.sleep,
) -> int:
    """
    Make sure ``identity`` can pay for transactions and return its balance.

    A funded wallet is left alone. An empty one gets exactly one airdrop
    request, after which the balance is polled every ``poll_interval``
    seconds, at most ``max_polls`` times. A poll that finds the funds
    returns at once; every empty one prints a dot and sleeps.
    """
    pubkey = identity.pubkey()
    balance = gateway.get_balance(pubkey)
    print("Wallet Pubkey:", pubkey)
    print("Wallet Balance:", balance)
    if balance > 0:
        return balance

    try:
        sig = gateway.request_airdrop(pubkey, lamports)
    except GatewayError as e:
        print("Failed to Airdrop funds. Try again later.")
        raise AirdropRejected(f"airdrop of {lamports} lamports to {pubkey} was rejected") from e
    logger.debug("airdrop requested: %s", sig)

    print(f"Airdropping funds to {pubkey}", end="", flush=True)
    for _ in range(max_polls):
        balance = gateway.get_balance(pubkey)
        if balance > 0:
            print()
            return balance
        print(".", end="", flush=True)
        sleep(poll_interval)
    print()
    raise FundingTimeout(
        f"balance of {pubkey} still zero after {max_polls} polls "
        f"({max_polls * poll_interval:.0f}s)"
    )
