"""Tests for assman.routing.extract — class/method descriptor extraction."""

import pytest

from assman.config import ManagerConfig
from assman.errors import InvalidRequestShape
from assman.routing.extract import RequestDescriptor, extract_descriptor, scalar_token
from assman.routing.request import RoutingRequest


class TestDefaults:
    def test_empty_params(self) -> None:
        d = extract_descriptor(RoutingRequest())
        assert d == RequestDescriptor(class_token="Page", method_token="index")

    def test_none_counts_as_absent(self) -> None:
        d = extract_descriptor(RoutingRequest(params={"class": None, "method": None}))
        assert d == RequestDescriptor(class_token="Page", method_token="index")

    def test_configured_defaults(self) -> None:
        cfg = ManagerConfig(default_class="Dashboard", default_method="overview")
        d = extract_descriptor(RoutingRequest(), cfg)
        assert d.class_token == "Dashboard"
        assert d.method_token == "overview"

    def test_only_method_given(self) -> None:
        d = extract_descriptor(RoutingRequest(params={"method": "find"}))
        assert d.class_token == "Page"
        assert d.method_token == "find"


class TestTokens:
    def test_raw_tokens_not_normalized(self) -> None:
        d = extract_descriptor(RoutingRequest(params={"class": "PRODUCT", "method": "findAll"}))
        assert d.class_token == "PRODUCT"
        assert d.method_token == "findAll"

    def test_empty_string_kept(self) -> None:
        d = extract_descriptor(RoutingRequest(params={"class": ""}))
        assert d.class_token == ""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [("x", "x"), (7, "7"), (1.5, "1.5"), (True, "1"), (False, "")],
    )
    def test_scalars(self, value: object, expected: str) -> None:
        assert scalar_token("class", value) == expected


class TestInvalidShape:
    @pytest.mark.parametrize(
        "value",
        [["product"], ("product",), {"x": "product"}, {"product"}, b"product", object()],
    )
    def test_composite_class_rejected(self, value: object) -> None:
        with pytest.raises(InvalidRequestShape) as exc_info:
            extract_descriptor(RoutingRequest(params={"class": value}))
        assert exc_info.value.field == "class"

    def test_composite_method_rejected(self) -> None:
        with pytest.raises(InvalidRequestShape) as exc_info:
            extract_descriptor(RoutingRequest(params={"class": "product", "method": ["find"]}))
        assert exc_info.value.field == "method"
