from solders.instruction import Instruction
from solders.pubkey import Pubkey
from spl.token.constants import TOKEN_PROGRAM_ID
from spl.token.instructions import get_associated_token_address, create_associated_token_account

def address(mint: Pubkey, owner: Pubkey) -> Pubkey:
    """Deterministic token account holding ``mint`` for ``owner``."""
    return get_associated_token_address(owner, mint, TOKEN_PROGRAM_ID)

def create_instruction(payer: Pubkey, owner: Pubkey, mint: Pubkey) -> Instruction:
    return create_associated_token_account(payer=payer, owner=owner, mint=mint, token_program_id=TOKEN_PROGRAM_ID)
