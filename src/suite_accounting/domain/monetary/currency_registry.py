from suite_accounting.domain.monetary.currency import Currency, CurrencyType


# ISO 4217 entries, one per observed minor-unit factor (1, 100, 1000, 10000)
# Source: https://www.iso.org/iso-4217-currency-codes.html

# Factor 1 (no minor unit)
JPY = Currency("JPY", 0, "Yen", CurrencyType.FIAT)
KRW = Currency("KRW", 0, "Won", CurrencyType.FIAT)
ISK = Currency("ISK", 0, "Iceland Krona", CurrencyType.FIAT)
CLP = Currency("CLP", 0, "Chilean Peso", CurrencyType.FIAT)
VND = Currency("VND", 0, "Dong", CurrencyType.FIAT)

# Factor 100
GBP = Currency("GBP", 2, "Pound Sterling", CurrencyType.FIAT)
USD = Currency("USD", 2, "US Dollar", CurrencyType.FIAT)
EUR = Currency("EUR", 2, "Euro", CurrencyType.FIAT)
CHF = Currency("CHF", 2, "Swiss Franc", CurrencyType.FIAT)
ZWL = Currency("ZWL", 2, "Zimbabwe Dollar", CurrencyType.FIAT)

# Factor 1000
TND = Currency("TND", 3, "Tunisian Dinar", CurrencyType.FIAT)
KWD = Currency("KWD", 3, "Kuwaiti Dinar", CurrencyType.FIAT)
BHD = Currency("BHD", 3, "Bahraini Dinar", CurrencyType.FIAT)
JOD = Currency("JOD", 3, "Jordanian Dinar", CurrencyType.FIAT)
OMR = Currency("OMR", 3, "Rial Omani", CurrencyType.FIAT)
IQD = Currency("IQD", 3, "Iraqi Dinar", CurrencyType.FIAT)
LYD = Currency("LYD", 3, "Libyan Dinar", CurrencyType.FIAT)

# Factor 10000 (units of account)
UYW = Currency("UYW", 4, "Unidad Previsional", CurrencyType.FUND)
CLF = Currency("CLF", 4, "Unidad de Fomento", CurrencyType.FUND)

PREDEFINED_CURRENCIES = (JPY, KRW, ISK, CLP, VND, GBP, USD, EUR, CHF, ZWL, TND, KWD, BHD, JOD, OMR, IQD, LYD, UYW, CLF)

# Register all predefined currencies
for _currency in PREDEFINED_CURRENCIES:
    Currency.register(_currency, overwrite=True)
