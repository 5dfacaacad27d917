"""Tests for concern derivation and analysis parsing."""
import pytest
from pydantic import ValidationError

from services.exceptions import InvalidArgumentError
from services.models import AnalysisSummary, SkinType
from services.skin_analyzer import derive_concerns, parse_analysis_result


class TestDeriveConcerns:

    def test_sebum_yields_both_labels_in_order(self):
        assert derive_concerns({"sebum": 7}) == ["Oily Skin", "Excess Oil"]

    def test_threshold_is_inclusive(self):
        assert derive_concerns({"acne": 5}) == ["Acne"]
        assert derive_concerns({"acne": 4}) == []

    def test_low_severities_never_produce_labels(self):
        severities = {name: 4 for name in
                      ["wrinkles", "spots", "acne", "texture", "hydration",
                       "sebum", "pores", "redness", "dark_circles"]}
        assert derive_concerns(severities) == []

    def test_follows_canonical_attribute_order(self):
        severities = {"dark_circles": 9, "sebum": 5, "wrinkles": 6, "hydration": 8}
        assert derive_concerns(severities) == [
            "Wrinkles", "Dryness", "Oily Skin", "Excess Oil", "Dark Circles",
        ]

    def test_all_attributes_severe(self):
        severities = {name: 10 for name in
                      ["dark_circles", "redness", "pores", "sebum", "hydration",
                       "texture", "acne", "spots", "wrinkles"]}
        assert derive_concerns(severities) == [
            "Wrinkles", "Dark Spots", "Acne", "Uneven Texture", "Dryness",
            "Oily Skin", "Excess Oil", "Large Pores", "Redness", "Dark Circles",
        ]

    def test_missing_attributes_are_skipped(self):
        assert derive_concerns({}) == []
        assert derive_concerns({"redness": None, "pores": 6}) == ["Large Pores"]

    def test_repeated_calls_are_identical(self):
        severities = {"spots": 6, "acne": 8, "texture": 2, "redness": 5}
        first = derive_concerns(severities)
        for _ in range(5):
            assert derive_concerns(severities) == first


class TestParseAnalysisResult:

    def test_gateway_response_shape(self):
        raw = {
            "analysis": {
                "wrinkles_score": 3,
                "spots_score": 6,
                "acne_score": 7,
                "sebum_score": None,
                "skin_age_estimate": 31,
                "skin_type": "combination",
                "overall_level": "Fair",
            },
            "detailed_analysis": {"concerns": ["acne"]},
        }
        summary = parse_analysis_result(raw)

        assert summary.skin_type == SkinType.COMBINATION
        assert summary.attribute_severities == {"wrinkles": 3, "spots": 6, "acne": 7}

    def test_flat_score_shape(self):
        summary = parse_analysis_result({"skin_type": "Oily", "pores_score": 8})
        assert summary.skin_type == SkinType.OILY
        assert summary.attribute_severities == {"pores": 8}

    def test_plain_severity_mapping(self):
        summary = parse_analysis_result({"skin_type": "dry", "attribute_severities": {"hydration": 9}})
        assert derive_concerns(summary.attribute_severities) == ["Dryness"]

    def test_passes_through_summary(self):
        summary = AnalysisSummary(skin_type=SkinType.NORMAL)
        assert parse_analysis_result(summary) is summary

    @pytest.mark.parametrize("severity", [0, 11, -3])
    def test_out_of_range_severity_is_rejected(self, severity):
        with pytest.raises(InvalidArgumentError):
            parse_analysis_result({"skin_type": "dry", "acne_score": severity})

    def test_missing_skin_type_is_rejected(self):
        with pytest.raises(InvalidArgumentError):
            parse_analysis_result({"acne_score": 5})

    def test_unknown_skin_type_is_rejected(self):
        with pytest.raises(InvalidArgumentError):
            parse_analysis_result({"skin_type": "greasy"})

    def test_unknown_attribute_is_rejected(self):
        with pytest.raises(InvalidArgumentError):
            parse_analysis_result({"skin_type": "dry", "attribute_severities": {"freckles": 6}})

    def test_non_mapping_is_rejected(self):
        with pytest.raises(InvalidArgumentError):
            parse_analysis_result(["oily"])

    def test_model_validates_directly(self):
        with pytest.raises(ValidationError):
            AnalysisSummary(skin_type="oily", attribute_severities={"acne": 12})
