"""Unit tests for resource identifiers."""

import pytest

from numbers_core.domain.sid import InvalidSidError, Sid, SidType


class TestSid:
    """Tests for Sid parsing and generation."""

    def test_generate_uses_type_prefix(self):
        sid = Sid.generate(SidType.PHONE_NUMBER)

        assert sid.prefix == "PN"
        assert len(str(sid)) == 34

    def test_generated_sids_are_unique(self):
        assert Sid.generate(SidType.ACCOUNT) != Sid.generate(SidType.ACCOUNT)

    def test_parse_round_trip(self):
        value = "AC" + "a" * 32

        assert str(Sid.parse(value)) == value
        assert Sid.parse(f"  {value} ") == Sid(value)

    @pytest.mark.parametrize(
        "value",
        ["", "AC123", "ac" + "a" * 32, "AC" + "z" * 32, "AC" + "a" * 33],
    )
    def test_invalid_sid_rejected(self, value):
        with pytest.raises(InvalidSidError):
            Sid(value)

    def test_invalid_sid_is_value_error(self):
        with pytest.raises(ValueError):
            Sid.parse("not-a-sid")

    def test_sids_are_hashable(self):
        sid = Sid.generate(SidType.ACCOUNT)

        assert {sid, Sid(str(sid))} == {sid}
