"""
Mint queries. Every function performs its own ``info`` round trip; nothing
is cached between calls.
"""
from solders.keypair import Keypair
from solders.pubkey import Pubkey
from solana.rpc.async_api import AsyncClient
from spl.token.async_client import AsyncToken
from spl.token.constants import TOKEN_PROGRAM_ID
from ..models import MintInfo
from ..utils.units import make_decimal

async def info(conn: AsyncClient, mint: Pubkey) -> MintInfo:
    # the payer is never used for reads
    token = AsyncToken(conn, mint, TOKEN_PROGRAM_ID, Keypair())
    return MintInfo.from_sdk(mint, await token.get_mint_info())

async def decimals(conn: AsyncClient, mint: Pubkey) -> int:
    return (await info(conn, mint)).decimals

async def supply_raw(conn: AsyncClient, mint: Pubkey) -> int:
    return (await info(conn, mint)).supply

async def supply(conn: AsyncClient, mint: Pubkey) -> float:
    mi = await info(conn, mint)
    return make_decimal(mi.supply, mi.decimals)
