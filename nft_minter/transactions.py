import logging
from typing import Sequence

from solders.instruction import Instruction
from solders.keypair import Keypair
from solders.transaction import Transaction

from nft_minter.gateway import Confirmation, LedgerGateway

logger = logging.getLogger(__name__)


def submit(
    gateway: LedgerGateway,
    instructions: Sequence[Instruction],
    payer: Keypair,
    signers: Sequence[Keypair] = (),
) -> Confirmation:
    """
    Build, sign and send one transaction, blocking until it is confirmed
    or rejected. ``payer`` pays fees and always signs; ``signers`` are any
    fresh account keypairs the instructions also need.
    """
    blockhash = gateway.get_recent_blockhash()
    tx = Transaction.new_signed_with_payer(
        list(instructions),
        payer.pubkey(),
        [payer, *signers],
        blockhash,
    )
    result = gateway.send_and_confirm(tx)
    if result.ok:
        logger.debug("confirmed %s", result.signature)
    else:
        logger.error("transaction %s failed: %s", result.signature, result.error)
    return result
