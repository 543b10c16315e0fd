"""Amount parsing utilities."""

from decimal import Decimal, InvalidOperation
import re


def _normalize_separators(amount_str: str) -> str:
    """Turn Brazilian or US style grouping into a plain decimal string."""
    has_comma = "," in amount_str
    has_dot = "." in amount_str

    if has_comma and has_dot:
        # Whichever separator comes last marks the decimals
        if amount_str.rfind(",") > amount_str.rfind("."):
            return amount_str.replace(".", "").replace(",", ".")
        return amount_str.replace(",", "")

    if has_comma:
        if amount_str.count(",") > 1:
            return amount_str.replace(",", "")
        return amount_str.replace(",", ".")

    if has_dot:
        # Dots followed by groups of exactly three digits are thousands
        if re.fullmatch(r"\d{1,3}(\.\d{3})+", amount_str):
            return amount_str.replace(".", "")
        if amount_str.count(".") > 1:
            raise ValueError(f"Could not parse amount '{amount_str}': misplaced thousands separator")

    return amount_str


def parse_amount(amount_str: str) -> Decimal:
    """Parse an amount string into a non-negative Decimal.

    Handles various formats:
    - "123.45"
    - "123,45"
    - "R$ 1.234,56"
    - "1,234.56"
    - "$90"

    Args:
        amount_str: Amount string

    Returns:
        Decimal amount

    Raises:
        ValueError: If amount string cannot be parsed or is negative
    """
    if not amount_str or not amount_str.strip():
        raise ValueError("Empty amount string")

    # Remove whitespace
    amount_str = amount_str.strip()

    # Remove currency symbols
    amount_str = re.sub(r"R\$|[$€£¥]", "", amount_str)
    amount_str = amount_str.replace(" ", "")

    amount_str = _normalize_separators(amount_str)

    try:
        amount = Decimal(amount_str)
    except InvalidOperation as e:
        raise ValueError(f"Could not parse amount '{amount_str}': {e!r}")

    if not amount.is_finite():
        raise ValueError(f"Could not parse amount '{amount_str}'")
    if amount < 0:
        raise ValueError(f"Amount cannot be negative: '{amount_str}'")
    return amount
