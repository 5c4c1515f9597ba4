"""
Tests for mint creation.
"""
import pytest
from solders.keypair import Keypair
from solders.signature import Signature
from solders.system_program import ID as SYSTEM_PROGRAM_ID, decode_create_account
from solders.transaction import Transaction
from spl.token.constants import TOKEN_PROGRAM_ID
from spl.token.instructions import decode_initialize_mint

from splmint.mint import create
from splmint.wallet import KeypairWallet
from conftest import RENT_LAMPORTS


@pytest.mark.asyncio
async def test_instructions_create_then_initialize(conn, payer):
    """Test that exactly two instructions come back: create account, then initialize mint."""
    mint, authority = Keypair().pubkey(), Keypair().pubkey()
    ixs = await create.instructions(conn, 6, mint, authority, payer.pubkey())

    assert len(ixs) == 2
    assert ixs[0].program_id == SYSTEM_PROGRAM_ID
    assert ixs[1].program_id == TOKEN_PROGRAM_ID

    params = decode_create_account(ixs[0])
    assert params["space"] == 82
    assert params["owner"] == TOKEN_PROGRAM_ID
    assert params["lamports"] == RENT_LAMPORTS
    assert params["from_pubkey"] == payer.pubkey()
    assert params["to_pubkey"] == mint

    init = decode_initialize_mint(ixs[1])
    assert init.decimals == 6
    assert init.mint == mint
    assert init.mint_authority == authority
    assert init.freeze_authority is None

    conn.get_minimum_balance_for_rent_exemption.assert_awaited_once_with(82)


@pytest.mark.asyncio
async def test_tx_is_unsigned_and_paid_by_payer(conn, payer):
    mint = Keypair().pubkey()
    tx = await create.tx(conn, 9, mint, payer.pubkey(), payer.pubkey())

    assert tx.message.account_keys[0] == payer.pubkey()
    assert len(tx.message.instructions) == 2
    assert all(sig == Signature.default() for sig in tx.signatures)
    conn.get_latest_blockhash.assert_awaited_once()


@pytest.mark.asyncio
async def test_signed_uses_wallet_as_payer(conn, payer):
    """Test that the wallet signs as fee payer and the mint slot stays open."""
    wallet = KeypairWallet(payer)
    mint = Keypair().pubkey()
    tx = await create.signed(conn, 6, mint, payer.pubkey(), wallet)

    assert tx.message.account_keys[0] == payer.pubkey()
    assert tx.signatures[0] != Signature.default()
    assert tx.signatures[1] == Signature.default()


@pytest.mark.asyncio
async def test_send_signs_with_payer_and_mint(conn, payer):
    """Test that the submitted transaction carries both signatures and the signature is returned."""
    wallet = KeypairWallet(payer)
    mint_kp = Keypair()
    sig = await create.send(conn, 6, payer.pubkey(), wallet, mint_keypair=mint_kp)

    sent = conn.send_raw_transaction.await_args.args[0]
    tx = Transaction.from_bytes(sent)
    tx.verify()
    assert mint_kp.pubkey() in tx.message.account_keys
    assert sig == str(conn.send_raw_transaction.return_value.value)
    conn.confirm_transaction.assert_awaited_once()


@pytest.mark.asyncio
async def test_send_generates_mint_keypair(conn, payer):
    wallet = KeypairWallet(payer)
    await create.send(conn, 0, payer.pubkey(), wallet)

    tx = Transaction.from_bytes(conn.send_raw_transaction.await_args.args[0])
    tx.verify()
    assert len(tx.signatures) == 2


@pytest.mark.asyncio
async def test_rpc_errors_propagate(conn, payer):
    """Test that failures from the connection reach the caller unchanged."""
    conn.get_minimum_balance_for_rent_exemption.side_effect = ConnectionError("rpc down")
    with pytest.raises(ConnectionError, match="rpc down"):
        await create.send(conn, 6, payer.pubkey(), KeypairWallet(payer))
    conn.send_raw_transaction.assert_not_awaited()
