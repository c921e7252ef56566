from pathlib import Path
from typing import Literal

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def _env_files() -> list[str]:
    """Load .env from the repo root (when running from services/order_notifier) then local .env."""
    base = Path(__file__).resolve().parent.parent.parent.parent  # repo root
    return [str(base / ".env"), ".env"]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=_env_files(),
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    env_name: str = "development"
    log_level: str = "INFO"

    # ── Firestore (document store the orders/users live in) ───────────────────
    firestore_project: str | None = None  # None = infer from ADC / emulator env
    firestore_database: str = "(default)"
    users_collection: str = "users"

    # ── Mail relay ─────────────────────────────────────────────────────────────
    mail_provider: Literal["smtp", "brevo"] = "smtp"
    mail_timeout_seconds: float = 15.0

    # SMTP (default provider). EMAIL_USER / EMAIL_PASSWORD are the names the
    # functions deployment config already uses.
    smtp_host: str = "smtp.gmail.com"
    smtp_port: int = 587
    smtp_username: str = Field(
        default="", validation_alias=AliasChoices("smtp_username", "email_user")
    )
    smtp_password: str = Field(
        default="", validation_alias=AliasChoices("smtp_password", "email_password")
    )
    smtp_start_tls: bool = True

    # Brevo transactional API
    brevo_api_key: str = ""

    # Empty = send from the authenticated SMTP account
    mail_from_email: str = ""
    mail_from_name: str = "VinTrade"

    # ── Email content ──────────────────────────────────────────────────────────
    brand_name: str = "VinTrade"
    brand_tagline: str = "Campus Marketplace"
    currency_prefix: str = "RM"

    @property
    def sender_address(self) -> str:
        return self.mail_from_email or self.smtp_username
