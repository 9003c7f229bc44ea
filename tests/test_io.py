"""
Tests for the parameter model and JSON file IO.
"""

import json

import pytest
from pydantic import ValidationError

from braidpreflight.io import (
    SCHEMA_VERSION,
    BraidParams,
    check_computable,
    load_params_json,
    save_params_json,
)


class TestBraidParams:

    def test_camel_case_input(self):
        params = BraidParams.model_validate({
            "radius": 12, "length": 120, "strandCount": 24, "angleDeg": 55, "tension": 0.55,
        })
        assert params.strand_count == 24
        assert params.angle_deg == 55.0

    def test_snake_case_input(self, default_params):
        assert default_params.strand_count == 24

    def test_to_dict_uses_wire_names(self, default_params):
        assert default_params.to_dict() == {
            "radius": 12.0,
            "length": 120.0,
            "strandCount": 24,
            "angleDeg": 55.0,
            "tension": 0.55,
        }

    def test_frozen(self, default_params):
        with pytest.raises(ValidationError):
            default_params.radius = 5.0

    def test_equal_by_value(self, make_params):
        assert make_params() == make_params()
        assert hash(make_params()) == hash(make_params())
        assert make_params() != make_params(tension=0.6)

    def test_fractional_strand_count_rejected(self):
        with pytest.raises(ValidationError):
            BraidParams(radius=12, length=120, strand_count=24.5, angle_deg=55, tension=0.5)

    def test_missing_field_rejected(self):
        with pytest.raises(ValidationError):
            BraidParams.model_validate({"radius": 12})

    def test_ranges_not_enforced(self, make_params):
        params = make_params(strand_count=0, radius=-1)
        assert params.strand_count == 0

    def test_unknown_keys_ignored(self):
        params = BraidParams.model_validate({
            "radius": 12, "length": 120, "strandCount": 24, "angleDeg": 55, "tension": 0.55,
            "colour": "violet",
        })
        assert not hasattr(params, "colour")


class TestCheckComputable:

    def test_nominal_passes(self, default_params):
        check_computable(default_params)

    def test_out_of_range_finite_passes(self, make_params):
        check_computable(make_params(radius=0.5, tension=3.0))

    def test_zero_strands(self, make_params):
        with pytest.raises(ValueError, match="strand_count"):
            check_computable(make_params(strand_count=0))

    def test_nan(self, make_params):
        with pytest.raises(ValueError, match="length"):
            check_computable(make_params(length=float("nan")))


class TestParamsFiles:

    def test_round_trip(self, tmp_path, dense_params):
        path = tmp_path / "braid.json"
        save_params_json(dense_params, path)
        assert load_params_json(path) == dense_params

    def test_saved_document_format(self, tmp_path, default_params):
        path = tmp_path / "braid.json"
        save_params_json(default_params, str(path))
        data = json.loads(path.read_text())
        assert data["schema_version"] == SCHEMA_VERSION
        assert data["params"]["strandCount"] == 24

    def test_bare_params_object(self, tmp_path):
        path = tmp_path / "bare.json"
        path.write_text(json.dumps({
            "radius": 3, "length": 50, "strandCount": 60, "angleDeg": 30, "tension": 0.8,
        }))
        assert load_params_json(path).strand_count == 60

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_params_json(tmp_path / "nope.json")

    def test_not_an_object(self, tmp_path):
        path = tmp_path / "list.json"
        path.write_text("[1, 2, 3]")
        with pytest.raises(ValueError, match="object"):
            load_params_json(path)

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("not valid json {")
        with pytest.raises(json.JSONDecodeError):
            load_params_json(path)
