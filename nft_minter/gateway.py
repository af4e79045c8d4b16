"""
The ledger as seen by the pipeline: a blocking RPC gateway.

``LedgerGateway`` is the seam the stages depend on; ``RpcGateway`` backs it
with solana-py's synchronous client. Tests substitute an in-memory ledger.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Protocol

from solana.exceptions import SolanaRpcException
from solana.rpc.api import Client
from solana.rpc.commitment import Commitment, Confirmed
from solana.rpc.core import RPCException, UnconfirmedTxError
from solana.rpc.types import TxOpts
from solders.hash import Hash
from solders.pubkey import Pubkey
from solders.signature import Signature
from solders.transaction import Transaction

from nft_minter import constants as C
from nft_minter.errors import GatewayError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Confirmation:
    """Outcome of submitting one transaction. Only ``ok`` means success."""

    signature: Optional[Signature]
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.signature is not None and self.error is None


class LedgerGateway(Protocol):
    def get_balance(self, address: Pubkey) -> int: ...

    def get_recent_blockhash(self) -> Hash: ...

    def request_airdrop(self, address: Pubkey, lamports: int) -> Signature: ...

    def get_minimum_rent_exempt_balance(self, size: int) -> int: ...

    def send_and_confirm(self, transaction: Transaction) -> Confirmation: ...

    def get_account(self, address: Pubkey) -> Optional[bytes]: ...


class RpcGateway:
    """``LedgerGateway`` over a JSON-RPC endpoint."""

    def __init__(
        self,
        rpc_url: str = C.RPC_URL,
        commitment: Commitment = Confirmed,
        timeout: float = C.RPC_TIMEOUT,
        client: Optional[Client] = None,
    ):
        self.commitment = commitment
        self.client = client or Client(rpc_url, commitment=commitment, timeout=timeout)
        # blockhash -> last block height at which it is still valid
        self._valid_until: dict[Hash, int] = {}

    def get_balance(self, address: Pubkey) -> int:
        try:
            return self.client.get_balance(address, commitment=self.commitment).value
        except (RPCException, SolanaRpcException) as e:
            raise GatewayError(f"get_balance({address}) failed: {e}") from e

    def get_recent_blockhash(self) -> Hash:
        try:
            latest = self.client.get_latest_blockhash(commitment=self.commitment).value
        except (RPCException, SolanaRpcException) as e:
            raise GatewayError(f"get_latest_blockhash failed: {e}") from e
        self._valid_until[latest.blockhash] = latest.last_valid_block_height
        logger.debug(
            "recent blockhash %s valid until height %s", latest.blockhash, latest.last_valid_block_height
        )
        return latest.blockhash

    def request_airdrop(self, address: Pubkey, lamports: int) -> Signature:
        try:
            return self.client.request_airdrop(address, lamports, commitment=self.commitment).value
        except (RPCException, SolanaRpcException) as e:
            raise GatewayError(f"request_airdrop({address}, {lamports}) failed: {e}") from e

    def get_minimum_rent_exempt_balance(self, size: int) -> int:
        try:
            return self.client.get_minimum_balance_for_rent_exemption(
                size, commitment=self.commitment
            ).value
        except (RPCException, SolanaRpcException) as e:
            raise GatewayError(f"get_minimum_balance_for_rent_exemption({size}) failed: {e}") from e

    def send_and_confirm(self, transaction: Transaction) -> Confirmation:
        """
        Send ``transaction`` and block until the cluster reports it at the
        gateway's commitment, giving up once the block height passes the
        blockhash's last valid height. Preflight rejections, confirmation
        timeouts and on-chain errors come back as a failed ``Confirmation``;
        transport failures raise ``GatewayError``.
        """
        opts = TxOpts(skip_confirmation=True, preflight_commitment=self.commitment)
        try:
            sig = self.client.send_transaction(transaction, opts=opts).value
        except RPCException as e:
            logger.debug("preflight rejected transaction: %s", e)
            return Confirmation(signature=transaction.signatures[0], error=str(e))
        except SolanaRpcException as e:
            raise GatewayError(f"send_transaction failed: {e}") from e

        logger.debug("sent %s, waiting for %s", sig, self.commitment)
        try:
            statuses = self.client.confirm_transaction(
                sig,
                commitment=self.commitment,
                last_valid_block_height=self._valid_until.get(transaction.message.recent_blockhash),
            ).value
        except UnconfirmedTxError as e:
            return Confirmation(signature=sig, error=str(e))
        except (RPCException, SolanaRpcException) as e:
            raise GatewayError(f"confirm_transaction({sig}) failed: {e}") from e

        status = statuses[0] if statuses else None
        if status is None:
            return Confirmation(signature=sig, error="no status reported")
        if status.err is not None:
            return Confirmation(signature=sig, error=str(status.err))
        return Confirmation(signature=sig)

    def get_account(self, address: Pubkey) -> Optional[bytes]:
        try:
            acc = self.client.get_account_info(address, commitment=self.commitment).value
        except (RPCException, SolanaRpcException) as e:
            raise GatewayError(f"get_account_info({address}) failed: {e}") from e
        if acc is None:
            return None
        return bytes(acc.data)
