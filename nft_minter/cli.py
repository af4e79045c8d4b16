import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from solders.pubkey import Pubkey

from nft_minter import constants as C
from nft_minter.config import MinterConfig, TokenInfo
from nft_minter.edition import show_metadata
from nft_minter.errors import ConfigurationError, MinterError
from nft_minter.gateway import RpcGateway
from nft_minter.identity import get_identity
from nft_minter.pipeline import run

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    # SUPPRESS keeps a sub-command's copy of a flag from clobbering one given
    # before the sub-command name.
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--rpc-url", default=argparse.SUPPRESS, help=f"RPC endpoint (default {C.RPC_URL})"
    )
    common.add_argument(
        "-v", "--verbose", action="store_true", default=argparse.SUPPRESS, help="Debug logging"
    )

    parser = argparse.ArgumentParser(
        prog="nft-minter",
        description="Mint a single master-edition NFT on Solana",
        parents=[common],
    )
    parser.set_defaults(
        command="mint",
        wallet=None,
        name=C.TOKEN_NAME,
        symbol=C.TOKEN_SYMBOL,
        uri=C.TOKEN_URI,
        max_polls=None,
        stale_snapshot=False,
    )
    sub = parser.add_subparsers(dest="command")

    mint = sub.add_parser("mint", parents=[common], help="Run the full mint pipeline (default)")
    mint.add_argument("--wallet", type=Path, help=f"Keypair file (default {C.WALLET_PATH})")
    mint.add_argument("--name", default=C.TOKEN_NAME)
    mint.add_argument("--symbol", default=C.TOKEN_SYMBOL)
    mint.add_argument("--uri", default=C.TOKEN_URI)
    mint.add_argument("--max-polls", type=int, help="Airdrop balance polls before giving up")
    mint.add_argument(
        "--stale-snapshot",
        action="store_true",
        help="Print the metadata as read before the edition upgrade",
    )

    show = sub.add_parser("show", parents=[common], help="Print the metadata of an existing mint")
    show.add_argument("mint", type=Pubkey.from_string)
    return parser


def _token(args) -> TokenInfo:
    try:
        return TokenInfo(name=args.name, symbol=args.symbol, uri=args.uri)
    except ValueError as e:
        raise ConfigurationError(str(e)) from e


def _mint(args, config: MinterConfig):
    config = config.with_overrides(
        wallet_path=args.wallet,
        max_polls=args.max_polls,
        token=_token(args),
        fresh_snapshot=False if args.stale_snapshot else None,
    )
    identity = get_identity(config.wallet_path)
    gateway = RpcGateway(config.rpc_url, config.commitment, config.rpc_timeout)
    print("Token Metadata Program:", C.METADATA_PROGRAM_ID)
    receipt = run(config, identity, gateway)
    print("\n✅  Mint complete.")
    print("   mint_address   =", receipt.mint)
    print("   token_account  =", receipt.token_account)
    print("   metadata       =", receipt.metadata)
    print("   master_edition =", receipt.master_edition)


def _show(args, config: MinterConfig):
    gateway = RpcGateway(config.rpc_url, config.commitment, config.rpc_timeout)
    show_metadata(args.mint, gateway)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if getattr(args, "verbose", False) else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    config = MinterConfig().with_overrides(rpc_url=getattr(args, "rpc_url", None))

    try:
        if args.command == "show":
            _show(args, config)
        else:
            _mint(args, config)
    except MinterError as e:
        logger.debug("run aborted", exc_info=True)
        print(f"✗ {e}")
        return e.exit_code
    return 0


if __name__ == "__main__":
    sys.exit(main())
