import os, json
from solders.keypair import Keypair
from ..config import settings
KEYPAIR_PATH = os.environ.get("SOLANA_KEYPAIR_PATH", os.path.expanduser("~/.config/solana/id.json"))

def keypair_from_file(path: str) -> Keypair:
    """Read a Solana CLI key file (JSON array of 64 secret-key bytes)."""
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    return Keypair.from_bytes(bytes(data))

def load_keypair(private_key_b58: str | None = None, path: str | None = None) -> Keypair:
    """Resolve the signing keypair: explicit args first, then config, then the CLI default file."""
    secret = private_key_b58 or settings.solana.private_key_b58
    if secret:
        return Keypair.from_base58_string(secret)
    return keypair_from_file(path or settings.solana.keypair_path or KEYPAIR_PATH)
