from __future__ import annotations
from pydantic import BaseModel, Field
from typing import Optional

class MintInfo(BaseModel):
    address: str
    mint_authority: Optional[str] = None
    supply: int = Field(0, ge=0)
    decimals: int = Field(0, ge=0)
    is_initialized: bool = False
    freeze_authority: Optional[str] = None

    @classmethod
    def from_sdk(cls, address, info) -> "MintInfo":
        """Build from spl.token's decoded MintInfo tuple."""
        def _s(pk): return str(pk) if pk is not None else None
        return cls(address=str(address), mint_authority=_s(info.mint_authority), supply=int(info.supply),
                   decimals=int(info.decimals), is_initialized=bool(info.is_initialized),
                   freeze_authority=_s(info.freeze_authority))
