from __future__ import annotations
from typing import Sequence
from solders.pubkey import Pubkey
from solders.instruction import Instruction
from solders.message import Message
from solders.transaction import Transaction
from solana.rpc.async_api import AsyncClient
from solana.rpc.commitment import Commitment
from solana.rpc.core import RPCException
from solana.rpc.types import TxOpts
from ..config import settings, SolanaConf
from .logging import logger, log_tx

def is_valid_mint(addr: str | None) -> bool:
    if not addr: return False
    try:
        _ = Pubkey.from_string(addr); return True
    except Exception:
        return False

def parse_pubkey(addr: str | Pubkey) -> Pubkey:
    if isinstance(addr, Pubkey): return addr
    if not is_valid_mint(addr):
        raise ValueError(f"invalid base58 address: {addr!r}")
    return Pubkey.from_string(addr)

def connect(conf: SolanaConf | None = None) -> AsyncClient:
    conf = conf or settings.solana
    return AsyncClient(conf.rpc_url, commitment=Commitment(conf.commitment), timeout=conf.timeout)

async def account_exists(conn: AsyncClient, address: Pubkey) -> bool:
    resp = await conn.get_account_info(address)
    return resp.value is not None

async def wrap_instructions(conn: AsyncClient, instructions: Sequence[Instruction], payer: Pubkey) -> Transaction:
    """Build an unsigned transaction paid by ``payer`` against the latest blockhash."""
    blockhash = (await conn.get_latest_blockhash()).value.blockhash
    msg = Message.new_with_blockhash(list(instructions), payer, blockhash)
    logger.debug(f"Wrapped {len(instructions)} instruction(s) for payer {payer} at {blockhash}")
    return Transaction.new_unsigned(msg)

async def send_and_confirm(conn: AsyncClient, tx: Transaction, commitment: str | None = None) -> str:
    commitment = Commitment(commitment or settings.solana.commitment)
    opts = TxOpts(skip_preflight=settings.solana.skip_preflight, preflight_commitment=commitment)
    sig = (await conn.send_raw_transaction(bytes(tx), opts=opts)).value
    logger.info(f"Submitted transaction {sig}, waiting for {commitment} confirmation")
    statuses = (await conn.confirm_transaction(sig, commitment)).value
    status = statuses[0] if statuses else None
    if status is not None and status.err is not None:
        raise RPCException(f"transaction {sig} failed: {status.err}")
    logger.info(f"Transaction {sig} confirmed")
    try:
        log_tx({"signature": str(sig), "payer": str(tx.message.account_keys[0]), "commitment": str(commitment)})
    except OSError as e:
        logger.warning(f"Failed to journal transaction {sig}: {e}")
    return str(sig)
