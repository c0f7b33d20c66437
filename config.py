# config.py
import logging
import os
from typing import Optional, Dict

from dotenv import load_dotenv

load_dotenv()


def log_level(value: Optional[str]) -> str:
    """Level name for basicConfig; unknown names fall back to INFO."""
    name = (value or "INFO").upper()
    if not isinstance(logging.getLevelName(name), int):
        return "INFO"
    return name


LOG_LEVEL = log_level(os.getenv("LOG_LEVEL"))


class Settings:
    """
    Central place for environment-configured settings.
    Values are kept raw; private key cleanup lives in sheets.py.
    """

    def __init__(
        self,
        service_account_email: Optional[str] = None,
        private_key: Optional[str] = None,
        sheet_id: Optional[str] = None,
    ):
        self.service_account_email = service_account_email
        self.private_key = private_key
        self.sheet_id = sheet_id

    @classmethod
    def from_env(cls) -> "Settings":
        # Read on every call so a redeploy with new env vars is picked up
        return cls(
            service_account_email=os.getenv("GOOGLE_SERVICE_ACCOUNT_EMAIL"),
            private_key=os.getenv("GOOGLE_PRIVATE_KEY"),
            sheet_id=os.getenv("GOOGLE_SHEET_ID"),
        )

    def presence(self) -> Dict[str, bool]:
        """Presence flags for logging. Never the values themselves."""
        return {
            "hasClientEmail": bool(self.service_account_email),
            "hasPrivateKey": bool(self.private_key),
            "hasSheetId": bool(self.sheet_id),
        }
