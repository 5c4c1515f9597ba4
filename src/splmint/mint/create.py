"""
Mint creation: allocate an 82-byte account owned by the token program and
initialize it as a mint.

Each stage builds on the previous one so callers can stop early:
``instructions`` -> ``tx`` (unsigned) -> ``signed`` -> ``send`` (submitted).
"""
from __future__ import annotations
from solders.instruction import Instruction
from solders.keypair import Keypair
from solders.pubkey import Pubkey
from solders.system_program import CreateAccountParams, create_account
from solders.transaction import Transaction
from solana.rpc.async_api import AsyncClient
from spl.token.constants import TOKEN_PROGRAM_ID
from spl.token.instructions import InitializeMintParams, initialize_mint
from ..utils.logging import logger
from ..utils.solana import wrap_instructions, send_and_confirm
from ..wallet import Wallet

MINT_SIZE = 82

async def instructions(conn: AsyncClient, decimals: int, mint: Pubkey, mint_authority: Pubkey,
                       payer: Pubkey) -> list[Instruction]:
    lamports = (await conn.get_minimum_balance_for_rent_exemption(MINT_SIZE)).value
    return [
        create_account(CreateAccountParams(
            from_pubkey=payer, to_pubkey=mint, lamports=lamports, space=MINT_SIZE, owner=TOKEN_PROGRAM_ID,
        )),
        initialize_mint(InitializeMintParams(
            program_id=TOKEN_PROGRAM_ID, mint=mint, decimals=decimals,
            mint_authority=mint_authority, freeze_authority=None,
        )),
    ]

async def tx(conn: AsyncClient, decimals: int, mint: Pubkey, mint_authority: Pubkey, payer: Pubkey) -> Transaction:
    ixs = await instructions(conn, decimals, mint, mint_authority, payer)
    return await wrap_instructions(conn, ixs, payer)

async def signed(conn: AsyncClient, decimals: int, mint: Pubkey, mint_authority: Pubkey, wallet: Wallet) -> Transaction:
    t = await tx(conn, decimals, mint, mint_authority, wallet.public_key)
    return await wallet.sign_transaction(t)

async def send(conn: AsyncClient, decimals: int, mint_authority: Pubkey, wallet: Wallet,
               mint_keypair: Keypair | None = None) -> str:
    """Create a new mint and return the confirmed transaction signature.

    A fresh keypair is generated for the mint unless ``mint_keypair`` is given;
    pass one in to know the mint address ahead of time.
    """
    mint_keypair = mint_keypair or Keypair()
    mint = mint_keypair.pubkey()
    t = await tx(conn, decimals, mint, mint_authority, wallet.public_key)
    # the new account has to sign its own creation
    t.partial_sign([mint_keypair], t.message.recent_blockhash)
    t = await wallet.sign_transaction(t)
    logger.info(f"Creating mint {mint} (decimals={decimals}, authority={mint_authority})")
    return await send_and_confirm(conn, t)
