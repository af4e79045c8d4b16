"""Borsh types shared by token-metadata instructions and accounts."""

import typing
from dataclasses import dataclass

import borsh_construct as borsh
from anchorpy.borsh_extension import BorshPubkey
from solders.pubkey import Pubkey


@dataclass
class Creator:
    layout: typing.ClassVar = borsh.CStruct(
        "address" / BorshPubkey, "verified" / borsh.Bool, "share" / borsh.U8
    )
    address: Pubkey
    verified: bool
    share: int

    @classmethod
    def from_decoded(cls, obj) -> "Creator":
        return cls(address=obj.address, verified=obj.verified, share=obj.share)

    def to_encodable(self) -> dict[str, typing.Any]:
        return {"address": self.address, "verified": self.verified, "share": self.share}


@dataclass
class Collection:
    layout: typing.ClassVar = borsh.CStruct("verified" / borsh.Bool, "key" / BorshPubkey)
    verified: bool
    key: Pubkey

    def to_encodable(self) -> dict[str, typing.Any]:
        return {"verified": self.verified, "key": self.key}


@dataclass
class Uses:
    # use_method is the UseMethod discriminant: 0 Burn, 1 Multiple, 2 Single
    layout: typing.ClassVar = borsh.CStruct(
        "use_method" / borsh.U8, "remaining" / borsh.U64, "total" / borsh.U64
    )
    use_method: int
    remaining: int
    total: int

    def to_encodable(self) -> dict[str, typing.Any]:
        return {"use_method": self.use_method, "remaining": self.remaining, "total": self.total}


CollectionDetails = borsh.Enum(
    "V1" / borsh.CStruct("size" / borsh.U64),
    enum_name="CollectionDetails",
)


def _creators_from_decoded(obj) -> typing.Optional[list[Creator]]:
    if obj is None:
        return None
    return [Creator.from_decoded(item) for item in obj]


def _creators_to_encodable(creators) -> typing.Optional[list[dict[str, typing.Any]]]:
    if creators is None:
        return None
    return [item.to_encodable() for item in creators]


@dataclass
class Data:
    """Descriptive fields as stored inside a metadata account."""

    layout: typing.ClassVar = borsh.CStruct(
        "name" / borsh.String,
        "symbol" / borsh.String,
        "uri" / borsh.String,
        "seller_fee_basis_points" / borsh.U16,
        "creators" / borsh.Option(borsh.Vec(Creator.layout)),
    )
    name: str
    symbol: str
    uri: str
    seller_fee_basis_points: int
    creators: typing.Optional[list[Creator]] = None

    @classmethod
    def from_decoded(cls, obj) -> "Data":
        return cls(
            name=obj.name,
            symbol=obj.symbol,
            uri=obj.uri,
            seller_fee_basis_points=obj.seller_fee_basis_points,
            creators=_creators_from_decoded(obj.creators),
        )

    def to_encodable(self) -> dict[str, typing.Any]:
        return {
            "name": self.name,
            "symbol": self.symbol,
            "uri": self.uri,
            "seller_fee_basis_points": self.seller_fee_basis_points,
            "creators": _creators_to_encodable(self.creators),
        }


@dataclass
class DataV2:
    """Instruction-side descriptive fields; adds collection and uses."""

    layout: typing.ClassVar = borsh.CStruct(
        "name" / borsh.String,
        "symbol" / borsh.String,
        "uri" / borsh.String,
        "seller_fee_basis_points" / borsh.U16,
        "creators" / borsh.Option(borsh.Vec(Creator.layout)),
        "collection" / borsh.Option(Collection.layout),
        "uses" / borsh.Option(Uses.layout),
    )
    name: str
    symbol: str
    uri: str
    seller_fee_basis_points: int
    creators: typing.Optional[list[Creator]] = None
    collection: typing.Optional[Collection] = None
    uses: typing.Optional[Uses] = None

    def to_encodable(self) -> dict[str, typing.Any]:
        return {
            "name": self.name,
            "symbol": self.symbol,
            "uri": self.uri,
            "seller_fee_basis_points": self.seller_fee_basis_points,
            "creators": _creators_to_encodable(self.creators),
            "collection": None if self.collection is None else self.collection.to_encodable(),
            "uses": None if self.uses is None else self.uses.to_encodable(),
        }
