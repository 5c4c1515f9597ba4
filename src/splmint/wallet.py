from __future__ import annotations
from typing import Protocol, runtime_checkable
from solders.keypair import Keypair
from solders.pubkey import Pubkey
from solders.transaction import Transaction
from .utils.keys import load_keypair

@runtime_checkable
class Wallet(Protocol):
    """Signing capability bound to a public identity."""
    @property
    def public_key(self) -> Pubkey: ...

    async def sign_transaction(self, tx: Transaction) -> Transaction: ...

class KeypairWallet:
    def __init__(self, keypair: Keypair):
        self._keypair = keypair

    @classmethod
    def from_settings(cls) -> "KeypairWallet":
        return cls(load_keypair())

    @property
    def public_key(self) -> Pubkey:
        return self._keypair.pubkey()

    async def sign_transaction(self, tx: Transaction) -> Transaction:
        # partial_sign keeps signatures already placed by co-signers
        tx.partial_sign([self._keypair], tx.message.recent_blockhash)
        return tx

    def __repr__(self) -> str:
        return f"KeypairWallet({self.public_key})"
