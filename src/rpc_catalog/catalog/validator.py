"""Validates a built catalogue for internal consistency."""

from rpc_catalog.catalog.aggregate import Catalogue


def validate_buckets(catalogue: Catalogue) -> dict[str, str]:
    """Check that every method sits in exactly one bucket, under its own category.

    Returns dict of {method_name: error_message} for inconsistent methods.
    """
    errors = {}
    for category, records in catalogue.by_category.items():
        for record in records:
            if record.category != category:
                errors[record.name] = (
                    f"filed under {category.value} but categorised as {record.category.value}"
                )

    flat_ids = {id(m) for m in catalogue.methods}
    bucket_ids = [id(m) for records in catalogue.by_category.values() for m in records]

    for record in catalogue.methods:
        count = bucket_ids.count(id(record))
        if count != 1:
            errors.setdefault(record.name, f"appears in {count} buckets")

    for records in catalogue.by_category.values():
        for record in records:
            if id(record) not in flat_ids:
                errors.setdefault(record.name, "in a bucket but missing from the method list")
    return errors


def validate_counts(catalogue: Catalogue) -> dict[str, str]:
    """Check bucket sizes against the flat list and the name index."""
    errors = {}
    bucket_total = sum(len(records) for records in catalogue.by_category.values())
    if bucket_total != len(catalogue.methods):
        errors["_counts"] = (
            f"buckets hold {bucket_total} methods, method list holds {len(catalogue.methods)}"
        )

    for category, records in catalogue.by_category.items():
        names = catalogue.names_by_category.get(category, [])
        if names != [r.name for r in records]:
            errors[f"_names:{category.value}"] = "name index disagrees with category bucket"
    extra = set(catalogue.names_by_category) - set(catalogue.by_category)
    for category in extra:
        errors[f"_names:{category.value}"] = "name index has a category with no methods"
    return errors


def validate_catalogue(catalogue: Catalogue) -> dict[str, str]:
    """Run all consistency checks.

    Returns dict of {method_or_check: error_message}; empty when consistent.
    """
    errors = {}
    errors.update(validate_buckets(catalogue))
    errors.update(validate_counts(catalogue))
    return errors
