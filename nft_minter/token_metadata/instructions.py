"""Instruction builders for the token-metadata program."""

import typing

import borsh_construct as borsh
from solders.instruction import AccountMeta, Instruction
from solders.pubkey import Pubkey
from solders.system_program import ID as SYS_PROGRAM_ID
from spl.token.constants import TOKEN_PROGRAM_ID

from nft_minter.constants import METADATA_PROGRAM_ID, RENT_SYSVAR_ID
from nft_minter.token_metadata.types import CollectionDetails, DataV2

# The program dispatches on a single leading discriminant byte.
CREATE_METADATA_ACCOUNT_V3 = 33
CREATE_MASTER_EDITION_V3 = 17


class CreateMetadataAccountV3Args(typing.TypedDict):
    data: DataV2
    is_mutable: bool


class CreateMetadataAccountV3Accounts(typing.TypedDict):
    metadata: Pubkey
    mint: Pubkey
    mint_authority: Pubkey
    payer: Pubkey
    update_authority: Pubkey


create_metadata_account_v3_layout = borsh.CStruct(
    "data" / DataV2.layout,
    "is_mutable" / borsh.Bool,
    "collection_details" / borsh.Option(CollectionDetails),
)


def create_metadata_account_v3(
    args: CreateMetadataAccountV3Args,
    accounts: CreateMetadataAccountV3Accounts,
    program_id: Pubkey = METADATA_PROGRAM_ID,
) -> Instruction:
    keys: list[AccountMeta] = [
        AccountMeta(pubkey=accounts["metadata"], is_signer=False, is_writable=True),
        AccountMeta(pubkey=accounts["mint"], is_signer=False, is_writable=False),
        AccountMeta(pubkey=accounts["mint_authority"], is_signer=True, is_writable=False),
        AccountMeta(pubkey=accounts["payer"], is_signer=True, is_writable=True),
        AccountMeta(pubkey=accounts["update_authority"], is_signer=True, is_writable=False),
        AccountMeta(pubkey=SYS_PROGRAM_ID, is_signer=False, is_writable=False),
        AccountMeta(pubkey=RENT_SYSVAR_ID, is_signer=False, is_writable=False),
    ]
    identifier = bytes([CREATE_METADATA_ACCOUNT_V3])
    encoded_args = create_metadata_account_v3_layout.build(
        {
            "data": args["data"].to_encodable(),
            "is_mutable": args["is_mutable"],
            "collection_details": None,
        }
    )
    data = identifier + encoded_args
    return Instruction(program_id, data, keys)


class CreateMasterEditionV3Args(typing.TypedDict):
    max_supply: typing.Optional[int]


class CreateMasterEditionV3Accounts(typing.TypedDict):
    edition: Pubkey
    mint: Pubkey
    update_authority: Pubkey
    mint_authority: Pubkey
    payer: Pubkey
    metadata: Pubkey


create_master_edition_v3_layout = borsh.CStruct("max_supply" / borsh.Option(borsh.U64))


def create_master_edition_v3(
    args: CreateMasterEditionV3Args,
    accounts: CreateMasterEditionV3Accounts,
    program_id: Pubkey = METADATA_PROGRAM_ID,
) -> Instruction:
    keys: list[AccountMeta] = [
        AccountMeta(pubkey=accounts["edition"], is_signer=False, is_writable=True),
        AccountMeta(pubkey=accounts["mint"], is_signer=False, is_writable=True),
        AccountMeta(pubkey=accounts["update_authority"], is_signer=True, is_writable=False),
        AccountMeta(pubkey=accounts["mint_authority"], is_signer=True, is_writable=False),
        AccountMeta(pubkey=accounts["payer"], is_signer=True, is_writable=True),
        AccountMeta(pubkey=accounts["metadata"], is_signer=False, is_writable=True),
        AccountMeta(pubkey=TOKEN_PROGRAM_ID, is_signer=False, is_writable=False),
        AccountMeta(pubkey=SYS_PROGRAM_ID, is_signer=False, is_writable=False),
        AccountMeta(pubkey=RENT_SYSVAR_ID, is_signer=False, is_writable=False),
    ]
    identifier = bytes([CREATE_MASTER_EDITION_V3])
    encoded_args = create_master_edition_v3_layout.build({"max_supply": args["max_supply"]})
    data = identifier + encoded_args
    return Instruction(program_id, data, keys)
