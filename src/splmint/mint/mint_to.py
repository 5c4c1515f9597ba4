from __future__ import annotations
from decimal import Decimal
from solders.instruction import Instruction
from solders.pubkey import Pubkey
from solders.transaction import Transaction
from solana.rpc.async_api import AsyncClient
from spl.token.constants import TOKEN_PROGRAM_ID
from spl.token.instructions import MintToParams, mint_to
from ..token import associated_account
from ..utils.logging import logger
from ..utils.solana import account_exists, wrap_instructions, send_and_confirm
from ..utils.units import make_integer
from ..wallet import Wallet
from . import get

def raw_instructions(mint: Pubkey, destination: Pubkey, authority: Pubkey, raw_amount: int) -> list[Instruction]:
    """Mint ``raw_amount`` base units of ``mint`` into the token account ``destination``."""
    if isinstance(raw_amount, bool) or not isinstance(raw_amount, int) or raw_amount < 0:
        raise ValueError(f"raw_amount must be a non-negative integer, got {raw_amount!r}")
    return [mint_to(MintToParams(
        program_id=TOKEN_PROGRAM_ID, mint=mint, dest=destination, mint_authority=authority, amount=raw_amount,
    ))]

async def tx(conn: AsyncClient, mint: Pubkey, destination_owner: Pubkey, authority: Pubkey,
             amount: float | int | str | Decimal) -> Transaction:
    """Mint ``amount`` tokens to the owner's associated account, creating it when missing."""
    dest = associated_account.address(mint, destination_owner)
    ixs: list[Instruction] = []
    if not await account_exists(conn, dest):
        logger.debug(f"Associated account {dest} for {destination_owner} missing, adding create instruction")
        ixs.append(associated_account.create_instruction(authority, destination_owner, mint))
    mint_decimals = await get.decimals(conn, mint)
    raw_amount = make_integer(amount, mint_decimals)
    ixs.extend(raw_instructions(mint, dest, authority, raw_amount))
    return await wrap_instructions(conn, ixs, authority)

async def signed(conn: AsyncClient, mint: Pubkey, destination_owner: Pubkey, wallet: Wallet,
                 amount: float | int | str | Decimal) -> Transaction:
    t = await tx(conn, mint, destination_owner, wallet.public_key, amount)
    return await wallet.sign_transaction(t)

async def send(conn: AsyncClient, mint: Pubkey, destination_owner: Pubkey, wallet: Wallet,
               amount: float | int | str | Decimal) -> str:
    t = await signed(conn, mint, destination_owner, wallet, amount)
    logger.info(f"Minting {amount} of {mint} to {destination_owner}")
    return await send_and_confirm(conn, t)
