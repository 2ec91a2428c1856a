"""Aggregator: accumulates method records into a flat list and category buckets."""

from collections.abc import Iterable

from rpc_catalog.parser.base import Category, MethodRecord


class Catalogue:
    """Ordered, append-only collection of extracted methods."""

    def __init__(self):
        self.methods: list[MethodRecord] = []
        self.by_category: dict[Category, list[MethodRecord]] = {}
        self.names_by_category: dict[Category, list[str]] = {}

    @classmethod
    def from_records(cls, records: Iterable[MethodRecord]) -> "Catalogue":
        catalogue = cls()
        for record in records:
            catalogue.add(record)
        return catalogue

    def add(self, record: MethodRecord) -> None:
        self.methods.append(record)
        self.by_category.setdefault(record.category, []).append(record)
        self.names_by_category.setdefault(record.category, []).append(record.name)

    def __len__(self) -> int:
        return len(self.methods)

    def method_list(self) -> list[dict]:
        return [m.to_json_dict() for m in self.methods]

    def category_methods(self) -> dict[str, list[dict]]:
        """Category -> methods, in first-seen category order."""
        return {
            category.value: [m.to_json_dict() for m in records]
            for category, records in self.by_category.items()
        }

    def category_names(self) -> dict[str, list[str]]:
        """Category -> method names, in first-seen category order."""
        return {category.value: list(names) for category, names in self.names_by_category.items()}
