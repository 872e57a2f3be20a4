import attrs


@attrs.frozen
class CheckoutPolicy:
    shipping_fee: float = 150  # flat rate for delivery within Bhutan, in the order currency
