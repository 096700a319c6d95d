from models.schemas import ChangeType, PriceChange


def _plain_number(value: float) -> str:
    """Two decimals at most, trailing zeros dropped: 5.0 -> '5', 24.5 -> '24.5'"""
    return f"{value:.2f}".rstrip("0").rstrip(".")


class PriceService:

    @staticmethod
    def get_change_type(new_price: float, old_price: float) -> ChangeType:
        if new_price > old_price:
            return ChangeType.INCREASE
        if new_price < old_price:
            return ChangeType.DECREASE
        return ChangeType.NO_CHANGE

    @staticmethod
    def price_change(new_price: float, old_price: float) -> PriceChange:
        """
        Change between two share prices with the dashboard's display text.
        Increases show the percentage with two decimals, decreases without
        trailing zeros (``+₹10.00 (+10.00%)`` vs ``-₹5.00 (-5%)``).
        """
        change_type = PriceService.get_change_type(new_price, old_price)
        difference = new_price - old_price
        change = round(difference, 2)
        percentage = round(difference / old_price * 100, 2) if old_price > 0 else 0.0

        if change_type == ChangeType.INCREASE:
            text = f"+₹{change:.2f} (+{percentage:.2f}%)"
        elif change_type == ChangeType.DECREASE:
            text = f"-₹{abs(change):.2f} (-{_plain_number(abs(percentage))}%)"
        else:
            text = "No change"

        return PriceChange(change_type=change_type, change=change, percentage=percentage, text=text)
