"""
Tests for parsed person info validation.
"""

from datetime import date

import pytest
from pydantic import ValidationError

from intake.schemas import ParsedPersonInfo, ValidationResult
from intake.speech_rules import extract
from intake.validation import validate


TODAY = date(2024, 6, 1)


class TestValidate:
    """Test per-field format checks."""

    def test_empty_record(self):
        """Nothing set means nothing to flag."""
        result = validate(extract(""))
        assert result == ValidationResult(is_valid=True, warnings=[], suggestions=[])

    def test_valid_phone(self):
        result = validate(ParsedPersonInfo(phone="0912345678"))
        assert result.is_valid
        assert result.warnings == []

    def test_bad_phone(self):
        result = validate(ParsedPersonInfo(phone="12345"))
        assert not result.is_valid
        assert len(result.warnings) == 1
        assert "手機號碼" in result.warnings[0]
        assert "09開頭" in result.suggestions[0]

    @pytest.mark.parametrize("value", ["a123456789", "A12345678", "AB12345678", "A1234567890"])
    def test_bad_id_number(self, value):
        result = validate(ParsedPersonInfo(id_number=value))
        assert result.warnings == ["身分證字號格式可能不正確"]

    def test_valid_id_number(self):
        assert validate(ParsedPersonInfo(id_number="A123456789")).is_valid

    def test_bad_email(self):
        result = validate(ParsedPersonInfo(email="not-an-email"))
        assert result.warnings == ["Email 格式可能不正確"]

    def test_valid_email(self):
        assert validate(ParsedPersonInfo(email="Someone.Else@Example.org")).is_valid

    def test_future_birthday(self):
        result = validate(ParsedPersonInfo(birthday="2999-01-01"))
        assert not result.is_valid
        assert result.warnings == ["生日日期可能不正確"]

    @pytest.mark.parametrize("value", ["2001-02-30", "2001-13-01", "20000503", "yesterday"])
    def test_unparseable_birthday(self, value):
        result = validate(ParsedPersonInfo(birthday=value), today=TODAY)
        assert result.warnings == ["生日日期可能不正確"]

    def test_birthday_relative_to_today(self):
        assert validate(ParsedPersonInfo(birthday="2024-06-01"), today=TODAY).is_valid
        assert not validate(ParsedPersonInfo(birthday="2024-06-02"), today=TODAY).is_valid

    def test_unchecked_fields_are_never_flagged(self):
        info = ParsedPersonInfo(name="小明", gender="Female", city="台北市", district="大安區")
        assert validate(info).is_valid

    def test_warnings_in_field_order(self):
        info = ParsedPersonInfo(
            birthday="2999-01-01", email="x", phone="1", id_number="1",
        )
        result = validate(info, today=TODAY)
        assert result.warnings == [
            "身分證字號格式可能不正確",
            "手機號碼格式可能不正確",
            "Email 格式可能不正確",
            "生日日期可能不正確",
        ]
        assert len(result.suggestions) == 4

    def test_extracted_transcript_is_valid(self):
        info = extract("我叫王小明，生日是1990年1月15日，手機0912345678，信箱是wang@example.com")
        assert validate(info, today=TODAY).is_valid


class TestParsedPersonInfo:
    """Test the record model."""

    def test_defaults_unset(self):
        info = ParsedPersonInfo()
        assert info.is_empty()
        assert info.filled_fields() == {}

    def test_filled_fields(self):
        info = ParsedPersonInfo(name="小明", phone="0912345678")
        assert info.filled_fields() == {"name": "小明", "phone": "0912345678"}
        assert not info.is_empty()

    def test_frozen(self):
        info = ParsedPersonInfo(name="小明")
        with pytest.raises(ValidationError):
            info.name = "小華"

    def test_unknown_gender_rejected(self):
        with pytest.raises(ValidationError):
            ParsedPersonInfo(gender="Other")
