from decimal import Decimal
from typing import Union


Number = Union[int, float, Decimal]

_CURRENCY_SYMBOLS = {
    'BTN': 'Nu. ',
    'USD': '$',
    'EUR': '€',
}


def format_amount(amount: Number) -> str:
    # en-US grouping; whole amounts without decimals, others up to 2 places
    value = Decimal(str(amount))
    if value == value.to_integral_value():
        return f'{int(value):,}'
    return f'{value.quantize(Decimal("0.01")):,}'.rstrip('0').rstrip('.')


def format_price(amount: Number, currency: str) -> str:
    code = currency.upper()
    if symbol := _CURRENCY_SYMBOLS.get(code):
        return f'{symbol}{format_amount(amount)}'
    return f'{format_amount(amount)} {code}'
