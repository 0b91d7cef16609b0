# Utils package
import logging
import math


# Placeholders shown in place of missing values
DASH = "--"
SHORT_DASH = "-"
EM_DASH = "—"


def num_or_none(value):
    """Coerce a raw JSON value to a finite float, or None when it has no numeric value."""
    if value is None or isinstance(value, bool):
        return None
    if not isinstance(value, (int, float)):
        value = str(value).strip()
        if not value:
            return None
    try:
        number = float(value)
    except (ValueError, TypeError, OverflowError):
        return None
    return number if math.isfinite(number) else None


def text_or_none(value):
    if value is None or value == "":
        return None
    return str(value)


def format_number(value):
    """Format a number the way the browser prints it: 78.0 -> '78', 78.5 -> '78.5'."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def value_or_dash(value, dash=DASH):
    if value is None or value == "":
        return dash
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return format_number(value)
    return str(value)


def setup_logging(log_file):
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(message)s",
        handlers=[logging.FileHandler(log_file, encoding="utf-8"), logging.StreamHandler()],
    )
