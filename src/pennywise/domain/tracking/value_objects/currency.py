"""Currency value object for representing monetary currencies."""

from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

# ISO 4217 codes the tracker lets users pick as a base currency
SUPPORTED_CURRENCIES: dict[str, tuple[str, str]] = {
    "USD": ("$", "US Dollar"),
    "EUR": ("€", "Euro"),
    "GBP": ("£", "British Pound"),
    "JPY": ("¥", "Japanese Yen"),
    "CAD": ("$", "Canadian Dollar"),
    "AUD": ("$", "Australian Dollar"),
    "CHF": ("Fr", "Swiss Franc"),
    "CNY": ("¥", "Chinese Yuan"),
    "INR": ("₹", "Indian Rupee"),
    "MXN": ("$", "Mexican Peso"),
    "BRL": ("R$", "Brazilian Real"),
    "KRW": ("₩", "South Korean Won"),
    "SGD": ("$", "Singapore Dollar"),
    "HKD": ("$", "Hong Kong Dollar"),
    "NZD": ("$", "New Zealand Dollar"),
}

DEFAULT_CURRENCY = "USD"


def ensure_supported_currency(code: str) -> str:
    """Return ``code`` upper-cased, or raise if it cannot be a base currency."""
    normalized_code = str(code).upper().strip()
    if normalized_code not in SUPPORTED_CURRENCIES:
        supported = sorted(SUPPORTED_CURRENCIES)
        msg = f"Unsupported currency code: {normalized_code}. Supported: {supported}"
        raise ValueError(msg)
    return normalized_code


class Currency(BaseModel):
    """Value object representing a monetary currency.

    Any well-formed ISO 4217 code is accepted so that records in other
    currencies can be loaded and then excluded by the calculations. Only the
    supported codes may be chosen as a base currency; see
    ``Currency.base``.
    """

    code: str

    model_config = ConfigDict(
        frozen=True,
        str_strip_whitespace=True,
    )

    # overriding pydantic init to allow positional arguments Currency("USD")
    def __init__(self, code: str | None = None, **data: Any):
        if "code" not in data:
            data["code"] = code
        super().__init__(**data)

    @field_validator("code")
    @classmethod
    def validate_and_normalize_code(cls, v: Any) -> str:
        if not v or len(str(v).strip()) == 0:
            msg = "Currency code cannot be empty"
            raise ValueError(msg)

        normalized_code = str(v).upper().strip()

        if len(normalized_code) != 3:
            msg = f"Currency code must be 3 characters long: {normalized_code}"
            raise ValueError(msg)

        if not normalized_code.isalpha():
            msg = f"Currency code must contain only letters: {normalized_code}"
            raise ValueError(msg)

        return normalized_code

    @classmethod
    def default(cls) -> "Currency":
        return cls(DEFAULT_CURRENCY)

    @classmethod
    def base(cls, code: str) -> "Currency":
        """Currency selectable for reports; raises ``ValueError`` otherwise."""
        return cls(ensure_supported_currency(code))

    @property
    def is_supported(self) -> bool:
        return self.code in SUPPORTED_CURRENCIES

    @property
    def symbol(self) -> str:
        if not self.is_supported:
            return self.code
        return SUPPORTED_CURRENCIES[self.code][0]

    @property
    def name(self) -> str:
        if not self.is_supported:
            return self.code
        return SUPPORTED_CURRENCIES[self.code][1]

    def format_amount(self, amount: Decimal) -> str:
        """Symbol followed by the amount with two decimals, e.g. ``$12.50``."""
        if not self.is_supported:
            return f"{amount:.2f} {self.code}"
        return f"{self.symbol}{amount:.2f}"

    def __str__(self) -> str:
        return self.code

    def __eq__(self, other) -> bool:
        if isinstance(other, Currency):
            return self.code == other.code
        if isinstance(other, str):
            return self.code == other.upper()
        return False

    def __hash__(self) -> int:
        return hash(self.code)
