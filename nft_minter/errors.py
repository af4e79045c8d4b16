"""Error taxonomy for the mint pipeline.

Every error carries the process exit code the CLI reports for it. Fatal
errors stop the run before anything is minted; stage errors mean a
transaction did not confirm and every later stage was skipped.
"""

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from nft_minter.gateway import Confirmation


class MinterError(Exception):
    exit_code = 1


class IdentityStorageError(MinterError):
    exit_code = 2


class GatewayError(MinterError):
    """The ledger could not be reached or answered with an RPC error."""

    exit_code = 3


class AirdropRejected(MinterError):
    exit_code = 4


class FundingTimeout(MinterError):
    exit_code = 5


class StageFailed(MinterError):
    """A transaction of a pipeline stage was not confirmed."""

    stage = "stage"

    def __init__(self, message: str, confirmation: Optional["Confirmation"] = None):
        super().__init__(message)
        self.confirmation = confirmation

    def __str__(self):
        msg = super().__str__()
        if self.confirmation is not None and self.confirmation.error:
            msg = f"{msg}: {self.confirmation.error}"
        return msg


class AccountCreationFailed(StageFailed):
    exit_code = 6
    stage = "account creation"


class MintFailed(StageFailed):
    exit_code = 7
    stage = "mint"


class MetadataCreationFailed(StageFailed):
    exit_code = 8
    stage = "metadata creation"


class EditionUpgradeFailed(StageFailed):
    exit_code = 9
    stage = "master edition upgrade"


class DecodeError(MinterError):
    exit_code = 10


class AddressMismatch(MinterError):
    """A derived address did not match when recomputed from its seeds."""

    exit_code = 11



class ConfigurationError(MinterError):
    """A command line value was rejected before anything was sent."""

    exit_code = 1
