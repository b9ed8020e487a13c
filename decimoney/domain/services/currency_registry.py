import threading
from collections.abc import Iterable

from decimoney.domain.exceptions import UnknownCurrencyError
from decimoney.domain.values.currency import Currency

# ISO 4217 codes most commonly traded, plus the crypto assets quoted against them.
DEFAULT_CURRENCY_CODES = (
    "AUD",
    "BRL",
    "CAD",
    "CHF",
    "CNY",
    "CZK",
    "DKK",
    "EUR",
    "GBP",
    "HKD",
    "HUF",
    "INR",
    "JPY",
    "KRW",
    "MXN",
    "NOK",
    "NZD",
    "PLN",
    "SEK",
    "SGD",
    "TRY",
    "USD",
    "ZAR",
    "BTC",
    "ETH",
    "USDT",
)


class CurrencyRegistry:
    """
    Resolves currency codes to Currency handles.
    """

    def __init__(self, codes: Iterable[str] = ()):
        self._lock = threading.Lock()
        self._currencies: dict[str, Currency] = {}

        for code in codes:
            self.register(Currency(code))

    def register(self, currency: Currency, overwrite: bool = False) -> Currency:
        """
        Add a currency to the registry.

        :param currency: Currency to register
        :param overwrite: Replace an already registered currency with the same code
        :return: The registered currency
        """
        with self._lock:
            if currency.code in self._currencies and not overwrite:
                return self._currencies[currency.code]

            self._currencies[currency.code] = currency
            return currency

    def get(self, code: str) -> Currency:
        key = code.strip().upper() if isinstance(code, str) else code
        currency = self._currencies.get(key)

        if currency is None:
            raise UnknownCurrencyError(code)

        return currency

    def codes(self) -> list[str]:
        return sorted(self._currencies)

    def __contains__(self, code: object) -> bool:
        return isinstance(code, str) and code.strip().upper() in self._currencies

    def __len__(self) -> int:
        return len(self._currencies)


DEFAULT_REGISTRY = CurrencyRegistry(DEFAULT_CURRENCY_CODES)


def get_currency(code: str) -> Currency:
    return DEFAULT_REGISTRY.get(code)
