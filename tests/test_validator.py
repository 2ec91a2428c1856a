from rpc_catalog.catalog.aggregate import Catalogue
from rpc_catalog.catalog.validator import validate_buckets, validate_catalogue, validate_counts
from rpc_catalog.parser.base import Category, MethodRecord, SampleBody


def _make_record(name: str, category: Category) -> MethodRecord:
    return MethodRecord(
        name=name,
        category=category,
        deprecated=False,
        params=(),
        sample_body=SampleBody(),
    )


def _catalogue() -> Catalogue:
    return Catalogue.from_records([
        _make_record("getBlock", Category.BLOCK),
        _make_record("getBalance", Category.ACCOUNTS),
    ])


class TestValidateBuckets:
    def test_consistent(self):
        assert validate_buckets(_catalogue()) == {}

    def test_wrong_bucket(self):
        catalogue = _catalogue()
        record = catalogue.by_category.pop(Category.BLOCK)[0]
        catalogue.by_category[Category.SLOT] = [record]
        errors = validate_buckets(catalogue)
        assert "getBlock" in errors
        assert "Slot" in errors["getBlock"]

    def test_orphaned_record(self):
        catalogue = _catalogue()
        catalogue.methods.append(_make_record("getSlot", Category.SLOT))
        errors = validate_buckets(catalogue)
        assert errors["getSlot"] == "appears in 0 buckets"

    def test_duplicated_across_buckets(self):
        catalogue = _catalogue()
        catalogue.by_category[Category.ACCOUNTS].append(catalogue.methods[0])
        errors = validate_buckets(catalogue)
        assert "getBlock" in errors

    def test_bucket_only_record(self):
        catalogue = _catalogue()
        catalogue.by_category[Category.SLOT] = [_make_record("getSlot", Category.SLOT)]
        errors = validate_buckets(catalogue)
        assert errors["getSlot"] == "in a bucket but missing from the method list"


class TestValidateCounts:
    def test_consistent(self):
        assert validate_counts(_catalogue()) == {}

    def test_count_mismatch(self):
        catalogue = _catalogue()
        catalogue.methods.pop()
        errors = validate_counts(catalogue)
        assert "_counts" in errors

    def test_name_index_mismatch(self):
        catalogue = _catalogue()
        catalogue.names_by_category[Category.BLOCK] = ["getBlocks"]
        errors = validate_counts(catalogue)
        assert "_names:Block" in errors


class TestValidateCatalogue:
    def test_all_valid(self):
        assert validate_catalogue(_catalogue()) == {}

    def test_pipeline_output_is_consistent(self, document):
        from rpc_catalog.pipeline import extract_catalogue

        assert validate_catalogue(extract_catalogue(document)) == {}
