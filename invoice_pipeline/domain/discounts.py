"""
Discount strategies - pure pricing rules applied before payment.

New discount policies are added as new classes with an apply_discount()
method and registered in infrastructure.factories; the processing service
is never touched to support them.
"""


class NoDiscount:
    """Charge the full amount"""

    def apply_discount(self, amount: float) -> float:
        return amount


class SeasonalDiscount:
    """10% off during seasonal promotions"""

    rate = 0.9

    def apply_discount(self, amount: float) -> float:
        return amount * self.rate


class LoyaltyDiscount:
    """20% off for loyal customers"""

    rate = 0.8

    def apply_discount(self, amount: float) -> float:
        return amount * self.rate
