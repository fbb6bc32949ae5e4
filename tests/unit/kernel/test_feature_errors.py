"""Unit tests for the feature-manifest error hierarchy."""

from __future__ import annotations

import json
from enum import Enum

import pytest

from feature_manifest.config.validation import ConfigError, MissingRequiredSettingError
from feature_manifest.kernel.errors import (
    BaseError,
    ConfigurationError,
    CycleError,
    InternalError,
    InvalidSettingError,
    LookupFailedError,
    ManifestSerializationError,
    MissingRuleError,
    OrderingInvariantError,
    UnknownFeatureError,
)


class Feature(str, Enum):
    SEARCH = "search"
    CHECKOUT = "checkout"


# ---------------------------------------------------------------------------
# BaseError
# ---------------------------------------------------------------------------


class TestBaseError:
    def test_message_and_default_code(self) -> None:
        err = BaseError("something went wrong")
        assert err.message == "something went wrong"
        assert err.code == "base_error"

    def test_custom_code(self) -> None:
        assert BaseError("m", code="custom").code == "custom"

    def test_to_dict_basic(self) -> None:
        err = BaseError("m", code="my_code", detail={"key": "val"})
        assert err.to_dict() == {"code": "my_code", "message": "m", "detail": {"key": "val"}}

    def test_cause_sets_dunder_cause(self) -> None:
        cause = RuntimeError("root")
        err = BaseError("wrap", cause=cause)
        assert err.__cause__ is cause
        assert "root" in err.to_dict()["cause"]

    def test_str_is_valid_json(self) -> None:
        parsed = json.loads(str(BaseError("oops", code="oops", detail={"x": 1})))
        assert parsed["code"] == "oops"
        assert parsed["detail"] == {"x": 1}

    def test_repr(self) -> None:
        assert repr(BaseError("m")) == "BaseError(code='base_error', message='m')"


# ---------------------------------------------------------------------------
# Feature errors
# ---------------------------------------------------------------------------


class TestFeatureErrors:
    def test_cycle_error_keeps_cycle(self) -> None:
        err = CycleError([Feature.SEARCH, Feature.CHECKOUT, Feature.SEARCH])
        assert err.cycle == [Feature.SEARCH, Feature.CHECKOUT, Feature.SEARCH]
        assert err.code == "dependency_cycle"
        assert "->" in err.message
        assert len(err.detail["cycle"]) == 3

    def test_missing_rule_error(self) -> None:
        err = MissingRuleError("beta")
        assert err.feature == "beta"
        assert err.detail == {"feature": "beta"}
        assert "beta" in err.message

    def test_unknown_feature_error(self) -> None:
        err = UnknownFeatureError("ghost")
        assert err.feature == "ghost"
        assert err.code == "unknown_feature"

    def test_ordering_invariant_error(self) -> None:
        err = OrderingInvariantError("b", "a")
        assert (err.feature, err.dependency) == ("b", "a")
        assert err.detail == {"feature": "b", "dependency": "a"}

    def test_invalid_setting_error_mentions_feature(self) -> None:
        err = InvalidSettingError("limit", object(), feature="search")
        assert "search" in err.message
        assert err.key == "limit"

    def test_serialization_error_payload_type(self) -> None:
        err = ManifestSerializationError("bad", payload_type="manifest")
        assert err.payload_type == "manifest"

    @pytest.mark.parametrize(
        ("error", "parent"),
        [
            (CycleError(["a", "a"]), ConfigurationError),
            (MissingRuleError("a"), ConfigurationError),
            (InvalidSettingError("k", object()), ConfigurationError),
            (ConfigError("bad"), ConfigurationError),
            (MissingRequiredSettingError("X"), ConfigError),
            (UnknownFeatureError("a"), LookupFailedError),
            (OrderingInvariantError("a", "b"), InternalError),
            (ManifestSerializationError("x"), BaseError),
        ],
    )
    def test_hierarchy(self, error: BaseError, parent: type[BaseError]) -> None:
        assert isinstance(error, parent)
        assert isinstance(error, BaseError)
