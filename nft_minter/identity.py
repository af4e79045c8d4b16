"""Persistent signing identity, stored in the Solana CLI keypair format."""

import json
import logging
from pathlib import Path
from typing import Union

from solders.keypair import Keypair

from nft_minter.errors import IdentityStorageError

logger = logging.getLogger(__name__)


def load_kp(json_path: Union[str, Path]) -> Keypair:
    """Read a Solana CLI keypair file: a JSON array of 64 byte values."""
    data = json.loads(Path(json_path).read_text())
    if not isinstance(data, list) or len(data) != 64:
        raise ValueError("expected a JSON array of 64 byte values")
    raw = bytes(data)
    keypair = Keypair.from_seed(raw[:32])
    if bytes(keypair.pubkey()) != raw[32:]:
        raise ValueError("public key half does not match the secret key")
    return keypair


def write_kp(json_path: Union[str, Path], keypair: Keypair):
    path = Path(json_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(list(bytes(keypair))))


def get_identity(path: Union[str, Path]) -> Keypair:
    """
    Return the keypair stored at ``path``, creating and persisting a fresh
    one first if the file does not exist yet.
    """
    path = Path(path)
    if path.exists():
        try:
            keypair = load_kp(path)
        except (OSError, ValueError, TypeError) as e:
            raise IdentityStorageError(f"cannot read keypair file {path}: {e}") from e
        logger.debug("loaded identity %s from %s", keypair.pubkey(), path)
        return keypair

    keypair = Keypair()
    try:
        write_kp(path, keypair)
    except OSError as e:
        raise IdentityStorageError(f"cannot write keypair file {path}: {e}") from e
    print(f"→ wrote {path}: {keypair.pubkey()}")
    return keypair
