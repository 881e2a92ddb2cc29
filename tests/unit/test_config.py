"""Unit tests for configuration classes."""

import pytest

from url_builder.builder import Absolute, CrossOrigin, Relative
from url_builder.config import EndpointConfig, RootKind
from url_builder.exceptions import UrlConfigValidationError


class TestEndpointConfig:
    """Test EndpointConfig dataclass."""

    def test_default_config(self):
        """Test default endpoint configuration."""
        config = EndpointConfig()

        assert config.root == RootKind.ABSOLUTE
        assert config.pre_path is None
        assert config.segments == []
        assert config.params == {}
        assert config.fragment is None

    def test_root_from_string(self):
        """Test root names are converted to RootKind."""
        assert EndpointConfig(root="relative").root == RootKind.RELATIVE
        assert EndpointConfig(root="cross_origin", pre_path="https://a.io").root == (
            RootKind.CROSS_ORIGIN
        )

    @pytest.mark.parametrize(
        ("config", "expected"),
        [
            (EndpointConfig(), Absolute()),
            (EndpointConfig(root="relative"), Relative()),
            (
                EndpointConfig(root="cross_origin", pre_path="https://a.io"),
                CrossOrigin("https://a.io"),
            ),
        ],
    )
    def test_to_root(self, config, expected):
        """Test conversion to root selectors."""
        assert config.to_root() == expected

    def test_unknown_root(self):
        """Test unknown root names are rejected."""
        with pytest.raises(UrlConfigValidationError) as exc_info:
            EndpointConfig(root="sideways")

        assert exc_info.value.field_name == "root"
        assert exc_info.value.invalid_value == "sideways"

    def test_cross_origin_requires_pre_path(self):
        """Test cross-origin roots need a pre_path."""
        with pytest.raises(UrlConfigValidationError) as exc_info:
            EndpointConfig(root="cross_origin")

        assert exc_info.value.field_name == "pre_path"

    @pytest.mark.parametrize("segments", ["api/v2", ["api", 2], None])
    def test_invalid_segments(self, segments):
        """Test segments must be a list of strings."""
        with pytest.raises(UrlConfigValidationError):
            EndpointConfig(segments=segments)

    def test_tuple_segments_become_list(self):
        """Test tuple segments are accepted."""
        assert EndpointConfig(segments=("a", "b")).segments == ["a", "b"]

    def test_invalid_params(self):
        """Test params must be a mapping."""
        with pytest.raises(UrlConfigValidationError):
            EndpointConfig(params=["locale=en"])

    def test_from_dict(self):
        """Test creation from dictionary."""
        config = EndpointConfig.from_dict(
            {
                "root": "cross_origin",
                "pre_path": "https://shop.example.com",
                "segments": ["api", "v2"],
                "params": {"locale": "en"},
                "fragment": "top",
            }
        )

        assert config.root == RootKind.CROSS_ORIGIN
        assert config.segments == ["api", "v2"]
        assert config.params == {"locale": "en"}
        assert config.fragment == "top"

    def test_from_dict_null_collections(self):
        """Test null segments and params from YAML become empty."""
        config = EndpointConfig.from_dict({"segments": None, "params": None})

        assert config.segments == []
        assert config.params == {}

    def test_from_dict_unknown_keys(self):
        """Test unknown keys are rejected."""
        with pytest.raises(UrlConfigValidationError) as exc_info:
            EndpointConfig.from_dict({"root": "absolute", "path": "/x", "query": {}})

        assert exc_info.value.field_name == "path, query"

    def test_to_dict_round_trip(self):
        """Test to_dict output is accepted by from_dict."""
        config = EndpointConfig(
            root="cross_origin",
            pre_path="https://a.io",
            segments=["x"],
            params={"n": 1},
        )

        assert EndpointConfig.from_dict(config.to_dict()) == config
        assert config.to_dict()["root"] == "cross_origin"
