"""
Rule-based transaction categorization.

Rules are an ordered table so the matching order is data, not control
flow. The first rule whose pattern matches the lower-cased description
wins. GrabFood sits under Food and is checked before the plain "grab"
ride-hailing rule under Transport.
"""

import re
from dataclasses import dataclass
from typing import Optional, Pattern, Tuple

from .models import Category


@dataclass(frozen=True)
class CategoryRule:
    category: Category
    pattern: Pattern[str]

    def matches(self, text: str) -> bool:
        return self.pattern.search(text) is not None


def _rule(category: Category, *keywords: str) -> CategoryRule:
    return CategoryRule(category, re.compile("|".join(keywords)))


CATEGORY_RULES: Tuple[CategoryRule, ...] = (
    _rule(
        Category.FOOD,
        r"grab\s*food",
        "foodpanda",
        "deliveroo",
        "mcdonald",
        "kfc",
        "starbucks",
        "kopitiam",
        "fairprice",
        "ntuc",
        "cold storage",
        "sheng siong",
        "restaurant",
        "cafe",
        "bakery",
    ),
    _rule(
        Category.TRANSPORT,
        "grab",
        "gojek",
        "comfort",
        "taxi",
        "mrt",
        "bus",
        r"ez-?link",
        "simplygo",
        "lta",
        "parking",
        "petrol",
        "shell",
        "esso",
        "caltex",
    ),
    _rule(
        Category.UTILITIES,
        "sp services",
        "singtel",
        "starhub",
        "m1",
        "circles",
        "power",
        "electricity",
        "water",
        "gas",
        "internet",
    ),
    _rule(
        Category.SUBSCRIPTION,
        "netflix",
        "spotify",
        "youtube",
        "apple",
        "google",
        "amazon prime",
        "disney",
        "hbo",
        "microsoft",
        "adobe",
    ),
    _rule(
        Category.SHOPPING,
        "shopee",
        "lazada",
        "amazon",
        "taobao",
        "uniqlo",
        "h&m",
        "zara",
        "courts",
        "best denki",
        "harvey norman",
        "ikea",
    ),
    _rule(
        Category.INCOME,
        "salary",
        "payroll",
        "bonus",
        "dividend",
        "interest",
        "refund",
        "cashback",
    ),
    _rule(
        Category.TRANSFER,
        "transfer",
        "paynow",
        "paylah",
        "dbs",
        "ocbc",
        "uob",
        "atm",
        "withdrawal",
        "deposit",
    ),
)


def match_rule(description: Optional[str]) -> Optional[CategoryRule]:
    """Return the first rule matching the description, if any."""
    if not description:
        return None

    text = description.lower()
    for rule in CATEGORY_RULES:
        if rule.matches(text):
            return rule
    return None


def categorize(description: Optional[str]) -> Category:
    rule = match_rule(description)
    return rule.category if rule else Category.OTHER
