"""Tests for request payload validation."""

import pytest

from core.errors import InvalidArgument
from core.validation import validate_career_ids, validate_profile_payload

VALID = {
    "education": "bachelor",
    "skills": ["Python"],
    "interests": ["coding"],
    "experience": [],
}


class TestValidateProfilePayload:
    def test_valid_payload_builds_profile(self):
        user = validate_profile_payload(VALID)

        assert user.education == "bachelor"
        assert user.skills == ["Python"]
        assert user.interests == ["coding"]
        assert user.experience == []

    @pytest.mark.parametrize("field", ["education", "skills", "interests", "experience"])
    def test_missing_field(self, field):
        payload = {k: v for k, v in VALID.items() if k != field}

        with pytest.raises(InvalidArgument) as exc_info:
            validate_profile_payload(payload)

        assert exc_info.value.code == "invalid-argument"
        assert "Missing required inputs" in exc_info.value.message
        assert field in exc_info.value.message.split("missing:")[1]

    def test_null_field_counts_as_missing(self):
        with pytest.raises(InvalidArgument, match="Missing required inputs"):
            validate_profile_payload({**VALID, "skills": None})

    def test_empty_education_counts_as_missing(self):
        with pytest.raises(InvalidArgument, match="missing: education"):
            validate_profile_payload({**VALID, "education": ""})

    @pytest.mark.parametrize("value", [0, 0.0, False, float("nan")])
    def test_falsy_education_counts_as_missing(self, value):
        with pytest.raises(InvalidArgument, match="missing: education"):
            validate_profile_payload({**VALID, "education": value})

    def test_falsy_list_field_reported_as_missing(self):
        with pytest.raises(InvalidArgument, match="missing: skills"):
            validate_profile_payload({**VALID, "skills": ""})

    def test_empty_lists_are_supplied(self):
        user = validate_profile_payload({**VALID, "skills": [], "interests": []})
        assert user.skills == [] and user.interests == []

    @pytest.mark.parametrize("field", ["skills", "interests", "experience"])
    def test_non_list_field(self, field):
        with pytest.raises(InvalidArgument, match="must be arrays") as exc_info:
            validate_profile_payload({**VALID, field: "python"})
        assert field in exc_info.value.message

    def test_element_types_are_not_checked(self):
        user = validate_profile_payload({**VALID, "skills": [1, None]})
        assert user.skills == [1, None]

    @pytest.mark.parametrize("payload", [None, {}])
    def test_empty_payload(self, payload):
        with pytest.raises(InvalidArgument):
            validate_profile_payload(payload)

    def test_non_object_payload(self):
        with pytest.raises(InvalidArgument, match="must be an object"):
            validate_profile_payload(["bachelor"])


class TestValidateCareerIds:
    def test_absent(self):
        assert validate_career_ids({}) is None
        assert validate_career_ids(None) is None
        assert validate_career_ids({"careerIds": None}) is None

    def test_list(self):
        assert validate_career_ids({"careerIds": ["c1"]}) == ["c1"]

    @pytest.mark.parametrize("value", ["c1", 5, {"c1": True}])
    def test_non_list(self, value):
        with pytest.raises(InvalidArgument, match="careerIds must be an array"):
            validate_career_ids({"careerIds": value})
