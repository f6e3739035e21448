"""Tests for the connector entry points (fetch is stubbed)."""
import pytest
import requests

from api.connector import DataRequest, get_config, get_data, get_schema, is_admin_user
from utils.config import AppConfig
from utils.errors import USER_ERROR_TEXT, FetchError, UserError

ALIGNMENT = ">a\nAC-\n>b\nAG-\n"


def _request(fields, config_params=None):
    return DataRequest.model_validate({
        "configParams": config_params,
        "fields": [{"name": f} for f in fields],
    })


def test_get_data_full_table(stub_source):
    source = stub_source(ALIGNMENT)
    out = get_data(_request(["position", "residue", "count"], {"accession": "PF00069"}),
                   source=source, config=AppConfig())
    assert source.accessions == ["PF00069"]
    assert [f["name"] for f in out["schema"]] == ["position", "residue", "count"]
    assert out["rows"] == [
        {"values": [1, "A", 2]},
        {"values": [2, "C", 1]},
        {"values": [2, "G", 1]},
        {"values": [3, "-", 2]},
    ]


def test_requested_field_order_is_preserved(stub_source):
    out = get_data(_request(["count", "position"]), source=stub_source(ALIGNMENT), config=AppConfig())
    assert [f["name"] for f in out["schema"]] == ["count", "position"]
    assert out["rows"][0] == {"values": [2, 1]}
    assert all(len(r["values"]) == 2 for r in out["rows"])


@pytest.mark.parametrize("params", [None, {}, {"accession": ""}, {"accession": None}])
def test_missing_accession_defaults(stub_source, params):
    source = stub_source(ALIGNMENT)
    get_data(_request(["position"], params), source=source, config=AppConfig())
    assert source.accessions == ["PF01352"]


def test_empty_response_gives_no_rows(stub_source):
    out = get_data(_request(["position", "count"]), source=stub_source(""), config=AppConfig())
    assert out["rows"] == []


@pytest.mark.parametrize("exc", [
    FetchError("Failed to download alignment PF01352: 503"),
    requests.ConnectionError("unreachable"),
    RuntimeError("boom"),
])
def test_fetch_failure_raises_user_error(stub_source, exc):
    with pytest.raises(UserError) as info:
        get_data(_request(["position"]), source=stub_source(exc=exc), config=AppConfig())
    err = info.value
    assert err.text == USER_ERROR_TEXT
    assert err.debug_text.startswith("Error fetching data. Exception details: ")
    assert not isinstance(err, type(exc))


def test_unknown_field_raises_user_error_without_fetching(stub_source):
    source = stub_source(ALIGNMENT)
    with pytest.raises(UserError):
        get_data(_request(["position", "entropy"]), source=source, config=AppConfig())
    assert source.accessions == []


def test_non_text_response_raises_user_error(stub_source):
    with pytest.raises(UserError):
        get_data(_request(["position"]), source=stub_source(text=None), config=AppConfig())


def test_get_config_form():
    params = get_config(AppConfig())["configParams"]
    assert [p["name"] for p in params] == ["instructions", "accession"]
    accession = params[1]
    assert accession["type"] == "TEXTINPUT"
    assert accession["placeholder"] == "PF01352"
    assert accession["helpText"] == "e.g. PF01352"
    assert accession["parameterControl"]["allowOverride"] is True


def test_get_schema_lists_all_fields():
    assert [f["name"] for f in get_schema()["schema"]] == ["position", "residue", "count"]


def test_is_admin_user_is_false():
    assert is_admin_user() is False


def test_numeric_accession_is_used_as_text(stub_source):
    source = stub_source(ALIGNMENT)
    out = get_data(_request(["position"], {"accession": 1352}), source=source, config=AppConfig())
    assert source.accessions == ["1352"]
    assert out["rows"][0] == {"values": [1]}


def test_parse_stage_is_timed(stub_source):
    from performance.timing import TIMINGS
    TIMINGS.clear()
    get_data(_request(["residue"]), source=stub_source(ALIGNMENT), config=AppConfig())
    snap = TIMINGS.snapshot()
    assert snap["parse_fasta"]["calls"] == 1
    assert snap["parse_fasta"]["total_items"] == 2
