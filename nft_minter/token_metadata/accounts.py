"""Decoders for token-metadata program accounts."""

import typing
from dataclasses import dataclass
from enum import IntEnum

import borsh_construct as borsh
from anchorpy.borsh_extension import BorshPubkey
from construct import ConstructError
from solders.pubkey import Pubkey

from nft_minter.errors import DecodeError
from nft_minter.token_metadata.types import Data

# Allocated size of a metadata account; fields are zero-padded up to it.
METADATA_ACCOUNT_SIZE = 679
MASTER_EDITION_ACCOUNT_SIZE = 282


class Key(IntEnum):
    Uninitialized = 0
    EditionV1 = 1
    MasterEditionV1 = 2
    ReservationListV1 = 3
    MetadataV1 = 4
    ReservationListV2 = 5
    MasterEditionV2 = 6
    EditionMarker = 7


def _decode(layout, data: typing.Optional[bytes], what: str):
    if not data:
        raise DecodeError(f"{what} account has no data")
    try:
        dec = layout.parse(data)
    except (ConstructError, UnicodeDecodeError) as e:
        raise DecodeError(f"malformed {what} account: {e}") from e
    try:
        key = Key(dec.key)
    except ValueError:
        raise DecodeError(f"unknown {what} account key {dec.key}") from None
    return key, dec


def _pad(raw: bytes, size: int) -> bytes:
    if len(raw) > size:
        raise ValueError(f"encoded account is {len(raw)} bytes, larger than {size}")
    return raw + bytes(size - len(raw))


@dataclass
class Metadata:
    layout: typing.ClassVar = borsh.CStruct(
        "key" / borsh.U8,
        "update_authority" / BorshPubkey,
        "mint" / BorshPubkey,
        "data" / Data.layout,
        "primary_sale_happened" / borsh.Bool,
        "is_mutable" / borsh.Bool,
        "edition_nonce" / borsh.Option(borsh.U8),
    )
    key: Key
    update_authority: Pubkey
    mint: Pubkey
    data: Data
    primary_sale_happened: bool
    is_mutable: bool
    edition_nonce: typing.Optional[int] = None

    @classmethod
    def decode(cls, data: typing.Optional[bytes]) -> "Metadata":
        """
        Decode raw account bytes. Trailing bytes past the known fields are
        ignored; anything missing, truncated or not tagged ``MetadataV1``
        raises ``DecodeError``.
        """
        key, dec = _decode(cls.layout, data, "metadata")
        if key is not Key.MetadataV1:
            raise DecodeError(f"expected a MetadataV1 account, found {key.name}")
        return cls(
            key=key,
            update_authority=dec.update_authority,
            mint=dec.mint,
            data=Data.from_decoded(dec.data),
            primary_sale_happened=dec.primary_sale_happened,
            is_mutable=dec.is_mutable,
            edition_nonce=dec.edition_nonce,
        )

    def encode(self, size: int = METADATA_ACCOUNT_SIZE) -> bytes:
        raw = self.layout.build(
            {
                "key": int(self.key),
                "update_authority": self.update_authority,
                "mint": self.mint,
                "data": self.data.to_encodable(),
                "primary_sale_happened": self.primary_sale_happened,
                "is_mutable": self.is_mutable,
                "edition_nonce": self.edition_nonce,
            }
        )
        return _pad(raw, size)


@dataclass
class MasterEdition:
    layout: typing.ClassVar = borsh.CStruct(
        "key" / borsh.U8,
        "supply" / borsh.U64,
        "max_supply" / borsh.Option(borsh.U64),
    )
    key: Key
    supply: int
    max_supply: typing.Optional[int]

    @classmethod
    def decode(cls, data: typing.Optional[bytes]) -> "MasterEdition":
        key, dec = _decode(cls.layout, data, "master edition")
        if key is not Key.MasterEditionV2:
            raise DecodeError(f"expected a MasterEditionV2 account, found {key.name}")
        return cls(key=key, supply=dec.supply, max_supply=dec.max_supply)

    def encode(self, size: int = MASTER_EDITION_ACCOUNT_SIZE) -> bytes:
        raw = self.layout.build(
            {"key": int(self.key), "supply": self.supply, "max_supply": self.max_supply}
        )
        return _pad(raw, size)
