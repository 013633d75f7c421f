import math
import re
from datetime import date

from core.date_utils import calculate_age

MINIMUM_AGE = 18

EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
# Sri Lankan mobile numbers, local (07x) or international (+947x) form
PHONE_PATTERN = re.compile(r"(\+94|0)(7[0-9]|70|71|72|75|76|77|78|81|91)[0-9]{7}")
# Old NIC: 9 digits and a letter, new NIC: 12 digits
NIC_PATTERN = re.compile(r"[0-9]{9}[vVxX]|[0-9]{12}")
# Plain ASCII decimal, no sign, exponent or digit separators
INCOME_PATTERN = re.compile(r"\s*[0-9]+(\.[0-9]+)?\s*")

DISTRICTS = (
    "Colombo",
    "Gampaha",
    "Kalutara",
    "Kandy",
    "Matale",
    "Nuwara Eliya",
    "Galle",
    "Matara",
    "Hambantota",
    "Jaffna",
    "Kilinochchi",
    "Mannar",
    "Vavuniya",
    "Mullaitivu",
    "Batticaloa",
    "Ampara",
    "Trincomalee",
    "Kurunegala",
    "Puttalam",
    "Anuradhapura",
    "Polonnaruwa",
    "Badulla",
    "Monaragala",
    "Ratnapura",
    "Kegalle",
)


def is_valid_email(email: str) -> bool:
    return EMAIL_PATTERN.fullmatch(email) is not None


def is_valid_phone_number(phone: str) -> bool:
    return PHONE_PATTERN.fullmatch(phone) is not None


def is_valid_nic(nic: str) -> bool:
    return NIC_PATTERN.fullmatch(nic) is not None


def is_valid_monthly_income(value: str) -> bool:
    """Income must be a plain decimal amount greater than zero."""
    if INCOME_PATTERN.fullmatch(value) is None:
        return False
    income = float(value.strip())
    return math.isfinite(income) and income > 0


def is_adult(date_of_birth: date, today: date | None = None) -> bool:
    return calculate_age(date_of_birth, today=today) >= MINIMUM_AGE


def is_known_district(district: str) -> bool:
    return district in DISTRICTS
