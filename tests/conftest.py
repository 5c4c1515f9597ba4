import os
import sys
import tempfile
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock
import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from solders.hash import Hash
from solders.keypair import Keypair
from solders.signature import Signature
from splmint.config import settings

RENT_LAMPORTS = 1461600


def make_conn(*, account_exists: bool = True, err=None) -> MagicMock:
    """AsyncClient stand-in answering the RPC calls the helpers make."""
    conn = MagicMock()
    conn.get_minimum_balance_for_rent_exemption = AsyncMock(return_value=SimpleNamespace(value=RENT_LAMPORTS))
    conn.get_latest_blockhash = AsyncMock(return_value=SimpleNamespace(
        value=SimpleNamespace(blockhash=Hash.new_unique(), last_valid_block_height=1000)))
    conn.get_account_info = AsyncMock(return_value=SimpleNamespace(value=object() if account_exists else None))
    conn.send_raw_transaction = AsyncMock(return_value=SimpleNamespace(value=Signature.new_unique()))
    conn.confirm_transaction = AsyncMock(return_value=SimpleNamespace(value=[SimpleNamespace(err=err)]))
    return conn


@pytest.fixture
def conn():
    return make_conn()


@pytest.fixture
def payer():
    return Keypair()


@pytest.fixture
def temp_data_dir():
    """Redirect the transaction journal into a temporary directory."""
    with tempfile.TemporaryDirectory() as tmpdir:
        original_dir, original_journal = settings.logging.out_dir, settings.logging.journal
        settings.logging.out_dir = tmpdir
        settings.logging.journal = True
        yield tmpdir
        settings.logging.out_dir = original_dir
        settings.logging.journal = original_journal
