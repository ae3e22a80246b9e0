"""
Currency reference data.

Supported currencies for display and approximate USD-based rates used when
the exchange rate provider is unavailable.

Dependencies: None
System role: Static data for the currency service
"""

SUPPORTED_CURRENCIES: list[dict[str, str]] = [
    {"code": "USD", "name": "US Dollar", "symbol": "$"},
    {"code": "EUR", "name": "Euro", "symbol": "€"},
    {"code": "GBP", "name": "British Pound", "symbol": "£"},
    {"code": "JPY", "name": "Japanese Yen", "symbol": "¥"},
    {"code": "CNY", "name": "Chinese Yuan", "symbol": "¥"},
    {"code": "AUD", "name": "Australian Dollar", "symbol": "A$"},
    {"code": "CAD", "name": "Canadian Dollar", "symbol": "C$"},
    {"code": "CHF", "name": "Swiss Franc", "symbol": "CHF"},
    {"code": "HKD", "name": "Hong Kong Dollar", "symbol": "HK$"},
    {"code": "SGD", "name": "Singapore Dollar", "symbol": "S$"},
    {"code": "SEK", "name": "Swedish Krona", "symbol": "kr"},
    {"code": "NOK", "name": "Norwegian Krone", "symbol": "kr"},
    {"code": "NZD", "name": "New Zealand Dollar", "symbol": "NZ$"},
    {"code": "MXN", "name": "Mexican Peso", "symbol": "$"},
    {"code": "INR", "name": "Indian Rupee", "symbol": "₹"},
    {"code": "RUB", "name": "Russian Ruble", "symbol": "₽"},
    {"code": "BRL", "name": "Brazilian Real", "symbol": "R$"},
    {"code": "ZAR", "name": "South African Rand", "symbol": "R"},
    {"code": "KRW", "name": "South Korean Won", "symbol": "₩"},
    {"code": "TRY", "name": "Turkish Lira", "symbol": "₺"},
    {"code": "AED", "name": "UAE Dirham", "symbol": "د.إ"},
    {"code": "SAR", "name": "Saudi Riyal", "symbol": "﷼"},
    {"code": "PLN", "name": "Polish Złoty", "symbol": "zł"},
    {"code": "THB", "name": "Thai Baht", "symbol": "฿"},
    {"code": "IDR", "name": "Indonesian Rupiah", "symbol": "Rp"},
    {"code": "MYR", "name": "Malaysian Ringgit", "symbol": "RM"},
    {"code": "PHP", "name": "Philippine Peso", "symbol": "₱"},
    {"code": "CZK", "name": "Czech Koruna", "symbol": "Kč"},
    {"code": "DKK", "name": "Danish Krone", "symbol": "kr"},
    {"code": "HUF", "name": "Hungarian Forint", "symbol": "Ft"},
    {"code": "ILS", "name": "Israeli Shekel", "symbol": "₪"},
    {"code": "CLP", "name": "Chilean Peso", "symbol": "$"},
    {"code": "EGP", "name": "Egyptian Pound", "symbol": "£"},
    {"code": "PKR", "name": "Pakistani Rupee", "symbol": "₨"},
    {"code": "VND", "name": "Vietnamese Dong", "symbol": "₫"},
    {"code": "NGN", "name": "Nigerian Naira", "symbol": "₦"},
    {"code": "BGN", "name": "Bulgarian Lev", "symbol": "лв"},
    {"code": "RON", "name": "Romanian Leu", "symbol": "lei"},
    {"code": "UAH", "name": "Ukrainian Hryvnia", "symbol": "₴"},
    {"code": "ARS", "name": "Argentine Peso", "symbol": "$"},
    {"code": "COP", "name": "Colombian Peso", "symbol": "$"},
]

# Approximate units per 1 USD
FALLBACK_USD_RATES: dict[str, float] = {
    "USD": 1.0,
    "EUR": 0.92,
    "GBP": 0.79,
    "JPY": 150.0,
    "CNY": 7.2,
    "AUD": 1.52,
    "CAD": 1.36,
    "CHF": 0.88,
    "HKD": 7.83,
    "SGD": 1.34,
    "SEK": 10.5,
    "NOK": 10.6,
    "NZD": 1.63,
    "MXN": 17.1,
    "INR": 83.2,
    "RUB": 92.5,
    "BRL": 4.97,
    "ZAR": 18.7,
    "KRW": 1325.0,
    "TRY": 32.5,
    "AED": 3.67,
    "SAR": 3.75,
    "PLN": 4.0,
    "THB": 35.5,
    "IDR": 15650.0,
    "MYR": 4.7,
    "PHP": 56.5,
    "CZK": 23.0,
    "DKK": 6.85,
    "HUF": 355.0,
    "ILS": 3.7,
    "CLP": 970.0,
    "EGP": 30.9,
    "PKR": 280.0,
    "VND": 24500.0,
    "NGN": 820.0,
    "BGN": 1.8,
    "RON": 4.57,
    "UAH": 38.5,
    "ARS": 850.0,
    "COP": 4000.0,
}


def fallback_rates(base_currency: str) -> dict[str, float]:
    """
    Approximate rates relative to an arbitrary base, derived from the USD table.

    Unknown bases are treated as USD.
    """
    base_rate = FALLBACK_USD_RATES.get(base_currency.upper(), 1.0)
    return {code: rate / base_rate for code, rate in FALLBACK_USD_RATES.items()}
