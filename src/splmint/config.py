from __future__ import annotations
import os, yaml
from pydantic import BaseModel, field_validator
DEFAULT_CFG = os.environ.get("CONFIG_PATH", "config/config.yaml")

COMMITMENTS = ("processed", "confirmed", "finalized")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

class SolanaConf(BaseModel):
    rpc_url: str = "https://api.devnet.solana.com"
    commitment: str = "confirmed"
    timeout: float = 30.0
    skip_preflight: bool = False
    private_key_b58: str | None = None
    keypair_path: str | None = None

    @field_validator('commitment')
    @classmethod
    def validate_commitment(cls, v: str) -> str:
        v = v.lower()
        if v not in COMMITMENTS:
            raise ValueError(f"commitment must be one of {', '.join(COMMITMENTS)}, got {v}")
        return v

    @field_validator('timeout')
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError(f"timeout must be positive, got {v}")
        return v

    @field_validator('rpc_url')
    @classmethod
    def validate_rpc_url(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"rpc_url must be an http(s) endpoint, got {v}")
        return v

class LoggingConf(BaseModel):
    level: str = "INFO"
    out_dir: str = "data"
    journal: bool = False  # append submitted signatures to out_dir/transactions.csv

    @field_validator('level')
    @classmethod
    def validate_level(cls, v: str) -> str:
        v = v.upper()
        if v not in LOG_LEVELS:
            raise ValueError(f"level must be one of {', '.join(LOG_LEVELS)}, got {v}")
        return v

class Settings(BaseModel):
    solana: SolanaConf = SolanaConf()
    logging: LoggingConf = LoggingConf()

    @staticmethod
    def load(path: str = DEFAULT_CFG) -> "Settings":
        if not os.path.exists(path):
            return Settings()
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        return Settings(**data)

settings = Settings.load()
