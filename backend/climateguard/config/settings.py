from typing import Optional
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # ── AWS / Bedrock ─────────────────────────────────────────────────────────
    AWS_REGION: str = "us-east-1"
    AWS_ACCESS_KEY_ID: Optional[str] = None
    AWS_SECRET_ACCESS_KEY: Optional[str] = None
    BEDROCK_MODEL_ID: str = "us.anthropic.claude-sonnet-4-6"
    BEDROCK_ANTHROPIC_VERSION: str = "bedrock-2023-05-31"

    # ── CORS ──────────────────────────────────────────────────────────────────
    ALLOW_ORIGINS: str = "*"

    @property
    def cors_origins(self) -> list[str]:
        if self.ALLOW_ORIGINS == "*":
            return ["*"]
        return [o.strip() for o in self.ALLOW_ORIGINS.split(",")]

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"


settings = Settings()
