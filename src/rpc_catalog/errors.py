"""Exception taxonomy.

Extraction errors are recoverable and are caught at the smallest unit
that produced them (field, parameter or method). Fetch and config errors
are fatal and stop the run.
"""


class RpcCatalogError(Exception):
    """Base class for all rpc-catalog errors."""


class ExtractionError(RpcCatalogError):
    """A unit of the document could not be extracted."""

    def __init__(self, method: str, message: str):
        super().__init__(f"{message} for method: {method}")
        self.method = method


class SectionMissingError(ExtractionError):
    """An expected sub-element of a method block is absent."""

    def __init__(self, method: str, section: str):
        super().__init__(method, f"{section} not found")
        self.section = section


class SampleParseError(ExtractionError):
    """A sample payload is present but is not valid JSON."""

    def __init__(self, method: str, payload: str):
        super().__init__(method, f"Sample payload is not valid JSON ({payload!r})")
        self.payload = payload


class FetchError(RpcCatalogError):
    """The reference document could not be obtained or parsed."""


class ConfigError(RpcCatalogError):
    """The settings file is missing, malformed or invalid."""
