"""Settings helpers for the ledger application."""

from dataclasses import dataclass
import os

import dotenv

from src.domain.constants import DEFAULT_CURRENCY
from src.infrastructure.logging.logger import get_app_logger

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class LedgerSettings:
    """Runtime options for balance and settlement use cases.

    Attributes:
        default_currency: Currency reported for groups without expenses.
        exclude_unpaid: Leave expenses without a payer out of settlement.
    """

    default_currency: str = DEFAULT_CURRENCY
    exclude_unpaid: bool = True

    @classmethod
    def from_env(cls) -> "LedgerSettings":
        """Build settings from environment variables.

        Returns:
            LedgerSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        currency = cls._normalize_currency(
            os.getenv("LEDGER_DEFAULT_CURRENCY", DEFAULT_CURRENCY),
            logger=logger,
        )
        exclude_unpaid = cls._parse_flag(
            os.getenv("LEDGER_EXCLUDE_UNPAID", "true"),
            default=True,
            logger=logger,
        )
        return cls(default_currency=currency, exclude_unpaid=exclude_unpaid)

    @staticmethod
    def _normalize_currency(raw_currency: str, logger) -> str:
        """Normalize a currency code to three upper-case letters.

        Args:
            raw_currency: Raw currency code.
            logger: Logger used for warnings.

        Returns:
            str: Normalized code, or the default when invalid.
        """
        cleaned = raw_currency.strip().upper()
        if len(cleaned) == 3 and cleaned.isalpha():
            return cleaned
        logger.warning(
            f"Invalid LEDGER_DEFAULT_CURRENCY '{raw_currency}'. "
            f"Falling back to {DEFAULT_CURRENCY}."
        )
        return DEFAULT_CURRENCY

    @staticmethod
    def _parse_flag(raw_value: str, default: bool, logger) -> bool:
        cleaned = raw_value.strip().lower()
        if cleaned in _TRUE_VALUES:
            return True
        if cleaned in _FALSE_VALUES:
            return False
        logger.warning(
            f"Invalid boolean value '{raw_value}', using {default}."
        )
        return default


__all__ = ["LedgerSettings"]
