"""Tests for quota argument validation."""

import pytest

from core.domain.errors import InvalidFormat, MissingQuota, MissingUnit
from core.domain.models import QuotaKind, QuotaUnit
from core.services.quota_validator import is_dry_run, validate_quota


class TestValidateQuota:
    @pytest.mark.parametrize("raw", [None, ""])
    def test_missing_quota(self, raw):
        with pytest.raises(MissingQuota) as excinfo:
            validate_quota(raw)
        assert excinfo.value.exit_code == 1

    @pytest.mark.parametrize("raw", ["GB", "abc", "Default", "UNLIMITED", " 10GB", "-5GB", "x10GB"])
    def test_invalid_format(self, raw):
        with pytest.raises(InvalidFormat) as excinfo:
            validate_quota(raw)
        assert excinfo.value.exit_code == 2
        assert excinfo.value.value == raw

    @pytest.mark.parametrize("raw", ["5XX", "10", "10G", "5gb", "10KB", "10GBs", "5G"])
    def test_missing_unit(self, raw):
        with pytest.raises(MissingUnit) as excinfo:
            validate_quota(raw)
        assert excinfo.value.exit_code == 3

    @pytest.mark.parametrize("raw", ["default", "unlimited"])
    def test_sentinels_skip_unit_checks(self, raw):
        spec = validate_quota(raw)
        assert spec.literal == raw
        assert spec.kind is QuotaKind(raw)
        assert spec.unit is None

    def test_sized_quota(self):
        spec = validate_quota("100GB")
        assert spec.kind is QuotaKind.SIZED
        assert spec.magnitude == "100"
        assert spec.unit is QuotaUnit.GB
        assert str(spec) == "100GB"

    def test_only_last_three_characters_are_checked(self):
        spec = validate_quota("100XY5GB")
        assert spec.literal == "100XY5GB"
        assert spec.magnitude == "100XY5"

    @pytest.mark.parametrize("raw", ["0GB", "0MB"])
    def test_zero_quota_is_flagged(self, raw):
        assert validate_quota(raw).is_zero

    @pytest.mark.parametrize("raw", ["10GB", "00GB", "default"])
    def test_non_zero_quota(self, raw):
        assert not validate_quota(raw).is_zero


class TestDryRunFlag:
    def test_exact_flag(self):
        assert is_dry_run("-d")

    @pytest.mark.parametrize("flag", [None, "", "-D", "--dry-run", "-d ", "d"])
    def test_anything_else_is_a_real_run(self, flag):
        assert not is_dry_run(flag)
