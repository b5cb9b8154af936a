from pydantic_settings import BaseSettings, SettingsConfigDict

from app.application.exceptions import ConfigError


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    TWILIO_ACCOUNT_SID: str | None = None
    TWILIO_AUTH_TOKEN: str | None = None
    TWILIO_PHONE_NUMBER: str | None = None

    DRIVER_PHONE_NUMBER: str | None = None

    UPI_ID: str = "your-upi-id@okhdfcbank"
    PAYMENT_SCHEME: str = "upi"
    CURRENCY_CODE: str = "INR"

    BUSINESS_NAME: str = "TrustnDrive"
    CHANNEL_PREFIX: str = "whatsapp:"

    MESSAGING_PROVIDER: str = "twilio"
    RIDE_STORE: str = "single"

    CORS_ORIGINS: list[str] = ["*"]

    LOG_LEVEL: str = "INFO"
    PORT: int = 3001

    def identity(self, phone: str) -> str:
        return f"{self.CHANNEL_PREFIX}{phone}"

    @property
    def sender_identity(self) -> str:
        return self.identity(self.TWILIO_PHONE_NUMBER or "")

    @property
    def driver_identity(self) -> str:
        return self.identity(self.DRIVER_PHONE_NUMBER or "")


def require_settings(settings: "Settings") -> None:
    """Raise ConfigError naming every required variable that is unset."""
    required = ["TWILIO_PHONE_NUMBER", "DRIVER_PHONE_NUMBER"]
    if settings.MESSAGING_PROVIDER.lower() == "twilio":
        required = ["TWILIO_ACCOUNT_SID", "TWILIO_AUTH_TOKEN", *required]

    missing = [name for name in required if not (getattr(settings, name) or "").strip()]
    if missing:
        raise ConfigError(f"Missing required configuration: {', '.join(missing)}")


settings = Settings()
