from dataclasses import dataclass, field

import msgspec
import pytest

from paramscan.args import Args
from paramscan.errors import DecodeError, KeySyntaxError
from paramscan.nested import unmarshal_args


class Insight(msgspec.Struct):
    DisconnectedBy: str = ""
    DetailedStatus: str = ""
    RingingDuration: float = 0.0
    DialCallStatus: str = ""


class Leg(msgspec.Struct):
    Type: str = ""
    OnCallDuration: int = 0
    Insights: Insight = msgspec.field(default_factory=Insight)


class CallLog(msgspec.Struct):
    CallFrom: str = ""
    flow_id: int = 0
    direction: str = msgspec.field(default="", name="call_direction")
    Legs: dict[str, Leg] = {}
    Insights: Insight = msgspec.field(default_factory=Insight)


@dataclass
class Basket:
    items: list[int] = field(default_factory=list)
    owner: str = ""


def test_unmarshal_args_decodes_nested_keys_by_field_name() -> None:
    args = Args.parse(
        "Legs[1][Insights][Status]=completed"
        "&Legs[1][Insights][DetailedStatus]=CALL_COMPLETED"
        "&Legs[1][Insights][RingingDuration]=4.39"
        "&Insights[DialCallStatus]=completed"
        "&flow_id=12&call_direction=incoming&CallFrom=%2B9111"
    )

    log = unmarshal_args(args, CallLog)

    assert log.CallFrom == "+9111"
    assert log.flow_id == 12
    assert log.direction == "incoming"
    assert log.Legs["1"].Insights.DetailedStatus == "CALL_COMPLETED"
    assert log.Legs["1"].Insights.RingingDuration == 4.39
    assert log.Insights.DialCallStatus == "completed"


def test_unmarshal_args_array_markers_into_dataclass() -> None:
    basket = unmarshal_args(Args.parse("items[]=1&items[]=2&owner=bob"), Basket)
    assert basket == Basket(items=[1, 2], owner="bob")


def test_unmarshal_args_into_plain_dict() -> None:
    result = unmarshal_args(Args.parse("a[b]=1&a[c]=x"), dict[str, dict[str, object]])
    assert result == {"a": {"b": 1, "c": "x"}}


def test_unmarshal_args_empty_args_use_defaults() -> None:
    assert unmarshal_args(Args(), Basket) == Basket()


def test_unmarshal_args_shape_mismatch_raises_decode_error() -> None:
    with pytest.raises(DecodeError, match="Expected `str`, got `object`") as exc_info:
        _ = unmarshal_args(Args.parse("owner[name]=bob"), Basket)
    assert exc_info.value.path == "$.owner"


def test_unmarshal_args_numeric_text_into_str_field_is_strict() -> None:
    with pytest.raises(DecodeError) as exc_info:
        _ = unmarshal_args(Args.parse("owner=42"), Basket)
    assert exc_info.value.path == "$.owner"


def test_unmarshal_args_lax_mode_converts_strings() -> None:
    class Flags(msgspec.Struct):
        enabled: bool = False
        count: int = 0

    with pytest.raises(DecodeError):
        _ = unmarshal_args(Args.parse("enabled=True"), Flags)
    assert unmarshal_args(Args.parse("enabled=True"), Flags, strict=False).enabled is True


def test_unmarshal_args_propagates_key_syntax_errors() -> None:
    with pytest.raises(KeySyntaxError):
        _ = unmarshal_args(Args.parse("a]b[=1"), Basket)


class Count(msgspec.Struct):
    n: int = 0
    ratio: float = 0.0


def test_unmarshal_args_integral_floats_decode_into_int_fields() -> None:
    assert unmarshal_args(Args.parse("n=1e3&ratio=2"), Count) == Count(n=1000, ratio=2.0)
    assert unmarshal_args(Args.parse("n=2.0"), Count).n == 2
    with pytest.raises(DecodeError) as exc_info:
        _ = unmarshal_args(Args.parse("n=2.5"), Count)
    assert exc_info.value.path == "$.n"


def test_unmarshal_args_oversized_integer_stays_text() -> None:
    with pytest.raises(DecodeError) as exc_info:
        _ = unmarshal_args(Args([("n", "1" * 5000)]), Count)
    assert exc_info.value.path == "$.n"
