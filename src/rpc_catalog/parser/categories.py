"""Category classifier: assigns each method to one category by name keywords."""

from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict, Field

from .base import Category


class CategoryRule(BaseModel):
    """Maps a lower-case keyword to the category it selects."""

    model_config = ConfigDict(frozen=True)

    keyword: str = Field(min_length=1)
    category: Category


# First match wins, so order decides ambiguous names:
# "getTokenAccountsByOwner" is Token because "token" precedes "account".
DEFAULT_RULES: tuple[CategoryRule, ...] = (
    CategoryRule(keyword="block", category=Category.BLOCK),
    CategoryRule(keyword="epoch", category=Category.EPOCH),
    CategoryRule(keyword="fee", category=Category.FEE),
    CategoryRule(keyword="transaction", category=Category.TRANSACTION),
    CategoryRule(keyword="program", category=Category.PROGRAM),
    CategoryRule(keyword="token", category=Category.TOKEN),
    CategoryRule(keyword="account", category=Category.ACCOUNTS),
    CategoryRule(keyword="balance", category=Category.ACCOUNTS),
    CategoryRule(keyword="inflation", category=Category.INFLATION),
    CategoryRule(keyword="stake", category=Category.STAKE),
    CategoryRule(keyword="slot", category=Category.SLOT),
)


def classify(method_name: str, rules: Iterable[CategoryRule] = DEFAULT_RULES) -> Category:
    """Return the category of the first rule whose keyword occurs in the name."""
    lowered = method_name.lower()
    for rule in rules:
        if rule.keyword.lower() in lowered:
            return rule.category
    return Category.MISC
