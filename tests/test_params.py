import logging

from rpc_catalog.config import DocumentMarkers
from rpc_catalog.parser.params import extract_params
from rpc_catalog.parser.tree import parse_html

MARKERS = DocumentMarkers()


def _section(inner: str):
    doc = parse_html(f'<div class="CodeParams_B82f">{inner}</div>')
    return doc.find(MARKERS.params_section)


def _param(type_html: str, flag: str | None = None, body: str = "") -> str:
    flag_html = f'<span class="FlagItem_qZK_">{flag}</span>' if flag is not None else ""
    return (
        '<div class="Parameter_p8dk">'
        f'<div class="ParameterHeader_UUsJ">{type_html}{flag_html}</div>'
        f"{body}</div>"
    )


def _field(name: str | None, type_: str | None, flag: str | None = None) -> str:
    parts = []
    if name is not None:
        parts.append(f'<span class="ParameterName_c9Z4">{name}</span>')
    if type_ is not None:
        parts.append(f"<code>{type_}</code>")
    if flag is not None:
        parts.append(f'<span class="FlagItem_qZK_">{flag}</span>')
    return f'<div class="Field_MIDZ">{"".join(parts)}</div>'


class TestExtractParams:
    def test_single_required_string(self):
        section = _section(_param("<code>string</code>", "required"))
        params = extract_params(section, "getBalance", MARKERS)
        assert len(params) == 1
        assert params[0].type == "string"
        assert params[0].required is True
        assert params[0].fields == ()

    def test_missing_flag_means_optional(self):
        section = _section(_param("<code>u64</code>"))
        params = extract_params(section, "getBlock", MARKERS)
        assert params[0].required is False

    def test_flag_must_equal_required(self):
        section = _section(_param("<code>u64</code>", "optional"))
        assert extract_params(section, "getBlock", MARKERS)[0].required is False

    def test_type_is_trimmed_and_sanitized(self):
        section = _section(_param("<code>\n  str&#8203;ing \n</code>", "required"))
        assert extract_params(section, "getBalance", MARKERS)[0].type == "string"

    def test_preserves_document_order(self):
        section = _section(
            _param("<code>string</code>", "required")
            + _param("<code>object</code>")
            + _param("<code>u64</code>")
        )
        params = extract_params(section, "getX", MARKERS)
        assert [p.type for p in params] == ["string", "object", "u64"]

    def test_empty_section_yields_no_params(self):
        assert extract_params(_section(""), "getHealth", MARKERS) == []


class TestUnparseableParams:
    def test_missing_type_label_skips_param_only(self, caplog):
        section = _section(
            _param("", "required") + _param("<code>string</code>", "required")
        )
        with caplog.at_level(logging.WARNING):
            params = extract_params(section, "getFeeForMessage", MARKERS)
        assert [p.type for p in params] == ["string"]
        assert "getFeeForMessage" in caplog.text

    def test_missing_header_skips_param(self):
        section = _section(
            '<div class="Parameter_p8dk"><code>string</code></div>'
            + _param("<code>u64</code>")
        )
        params = extract_params(section, "getX", MARKERS)
        assert [p.type for p in params] == ["u64"]

    def test_blank_type_skips_param(self):
        section = _section(_param("<code>   </code>"))
        assert extract_params(section, "getX", MARKERS) == []


class TestObjectFields:
    def test_fields_in_document_order(self):
        body = (
            _field("commitment", "string")
            + _field("encoding", "string", "required")
            + _field("minContextSlot", "number", "optional")
        )
        section = _section(_param("<code>object</code>", "optional", body))
        param = extract_params(section, "getAccountInfo", MARKERS)[0]
        assert [(f.name, f.type, f.required) for f in param.fields] == [
            ("commitment", "string", False),
            ("encoding", "string", True),
            ("minContextSlot", "number", False),
        ]

    def test_malformed_fields_are_omitted(self, caplog):
        body = (
            _field("commitment", "string")
            + _field("dataSlice", None)
            + _field(None, "string")
            + _field("", "string")
            + _field("encoding", "string")
        )
        section = _section(_param("<code>object</code>", None, body))
        with caplog.at_level(logging.WARNING):
            params = extract_params(section, "getAccountInfo", MARKERS)
        assert len(params) == 1
        assert [f.name for f in params[0].fields] == ["commitment", "encoding"]
        assert "getAccountInfo" in caplog.text

    def test_non_object_param_ignores_field_nodes(self):
        body = _field("commitment", "string")
        section = _section(_param("<code>array</code>", None, body))
        assert extract_params(section, "getX", MARKERS)[0].fields == ()

    def test_field_name_sanitized(self):
        body = _field("enc&#8203;oding", "string")
        section = _section(_param("<code>object</code>", None, body))
        assert extract_params(section, "getX", MARKERS)[0].fields[0].name == "encoding"

    def test_field_name_and_type_trimmed(self):
        body = _field(" encoding\n", "\n  string ") + _field("   ", "string")
        section = _section(_param("<code>object</code>", None, body))
        fields = extract_params(section, "getX", MARKERS)[0].fields
        assert [(f.name, f.type) for f in fields] == [("encoding", "string")]
