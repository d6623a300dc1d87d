from datetime import datetime, timezone

import pytest

from blueprint_core.domain_models import (
    BLUEPRINT_VERSION,
    DEFAULT_BUSINESS_NAME,
    EMPTY_SUMMARY,
    BlueprintDocument,
)
from blueprint_core.engine import generate_blueprint, new_blueprint_id

FIXED_TIME = datetime(2024, 5, 1, 12, 30, 45, 123456, tzinfo=timezone.utc)


def fixed_clock():
    return FIXED_TIME


def fixed_id():
    return "bp_test"


def generate_fixed(description, meta=None):
    """Genera con reloj e ID fijos para poder comparar documentos completos."""
    return generate_blueprint(description, meta, clock=fixed_clock, id_factory=fixed_id)


@pytest.mark.parametrize(
    "description",
    ["Acme Repairs", "   padded text   ", "\n\tTabs and Newlines\n", "", "   "],
)
def test_input_description_is_trimmed(description):
    doc = generate_blueprint(description)
    assert doc.input.description == description.strip()


def test_empty_description_uses_fallback_summary():
    doc = generate_blueprint("")
    assert doc.business.summary == EMPTY_SUMMARY
    assert doc.business.summary == "No description provided."
    assert doc.business.name == DEFAULT_BUSINESS_NAME


def test_whitespace_only_description_is_empty():
    doc = generate_blueprint("    ")
    assert doc.input.description == ""
    assert doc.business.summary == EMPTY_SUMMARY


def test_summary_is_trimmed_text():
    doc = generate_blueprint("  Acme Repairs does on-site fixes  ")
    assert doc.business.summary == "Acme Repairs does on-site fixes"


def test_name_stops_at_disallowed_character():
    doc = generate_blueprint("Acme Repairs does on-site fixes")
    assert doc.business.name == "Acme Repairs does on"


def test_none_behaves_like_empty_string():
    from_none = generate_fixed(None)
    from_empty = generate_fixed("")
    assert from_none == from_empty
    assert from_none.to_dict() == from_empty.to_dict()


def test_non_string_description_is_coerced():
    doc = generate_blueprint(12345)
    assert doc.input.description == "12345"
    assert doc.business.summary == "12345"
    assert doc.business.name == DEFAULT_BUSINESS_NAME


@pytest.mark.parametrize(
    "description, expected",
    [
        (True, "true"),
        (False, "false"),
        (1.5, "1.5"),
        ({"a": 1}, '{"a": 1}'),
        ([1, "x"], '[1, "x"]'),
    ],
)
def test_json_values_are_coerced_to_their_json_text(description, expected):
    doc = generate_blueprint(description)
    assert doc.input.description == expected
    assert doc.business.name == DEFAULT_BUSINESS_NAME


def test_unserializable_description_does_not_raise():
    circular = []
    circular.append(circular)
    doc = generate_blueprint(circular)
    assert doc.input.description == "[[...]]"


def test_divisions_are_fixed_and_ordered():
    for description in ["", "Acme Repairs", "x" * 5000, None]:
        doc = generate_blueprint(description)
        divisions = doc.to_dict()["structure"]["divisions"]
        assert [d["id"] for d in divisions] == ["ops", "growth", "finance"]
        assert [d["label"] for d in divisions] == ["Operations", "Growth", "Finance"]
        assert all(d["engines"] == [] for d in divisions)


def test_extensibility_lists_are_present_and_empty():
    structure = generate_blueprint("Acme").to_dict()["structure"]
    assert structure["engines"] == []
    assert structure["modules"] == []
    assert structure["agents"] == []


def test_identical_input_differs_only_in_id_and_timestamp():
    first = generate_blueprint("Acme Repairs", {"source": "test"}).to_dict()
    second = generate_blueprint("Acme Repairs", {"source": "test"}).to_dict()

    assert first["id"] != second["id"]
    for key in ("id", "generatedAt"):
        first.pop(key)
        second.pop(key)
    assert first == second


def test_ids_are_unique_within_process():
    ids = {new_blueprint_id() for _ in range(1000)}
    assert len(ids) == 1000
    assert all(i.startswith("bp_") for i in ids)


def test_meta_is_passed_through_and_copied():
    meta = {"source": "client", "tags": ["a", "b"], "nested": {"n": 1}}
    doc = generate_blueprint("Acme", meta)
    meta["tags"].append("c")

    assert doc.input.meta == {"source": "client", "tags": ["a", "b"], "nested": {"n": 1}}
    assert doc.to_dict()["input"]["meta"] == doc.input.meta


@pytest.mark.parametrize("meta", [None, 42, "plain", [1, 2, 3], {"a": None}])
def test_meta_accepts_any_json_value(meta):
    assert generate_blueprint("Acme", meta).input.meta == meta


def test_to_dict_shape():
    data = generate_fixed("Acme Repairs", {"k": "v"}).to_dict()

    assert data["id"] == "bp_test"
    assert data["version"] == BLUEPRINT_VERSION == "1.0.0"
    assert data["generatedAt"] == "2024-05-01T12:30:45.123Z"
    assert data["input"] == {"description": "Acme Repairs", "meta": {"k": "v"}}
    assert data["business"] == {"name": "Acme Repairs", "summary": "Acme Repairs"}
    assert set(data["structure"]) == {"divisions", "engines", "modules", "agents"}


def test_document_is_immutable():
    doc = generate_blueprint("Acme")
    assert isinstance(doc, BlueprintDocument)
    with pytest.raises(AttributeError):
        doc.id = "other"


def test_custom_extractor_is_used():
    class UpperExtractor:
        def extract_name(self, text):
            return text.upper() or "NONE"

    doc = generate_blueprint("acme repairs", extractor=UpperExtractor())
    assert doc.business.name == "ACME REPAIRS"
