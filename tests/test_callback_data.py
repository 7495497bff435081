from dataclasses import dataclass

import pytest

from growbot.handlers.callback_data import (
    CallbackButton,
    CallbackData,
    HandlerImplResult,
    InvalidCallbackData,
)


@dataclass(frozen=True)
class SampleData(CallbackData):
    PREFIX = "sample"

    uid: int
    ratio: float
    label: str

    def _payload(self) -> str:
        return f"{self.uid}:{self.ratio}:{self.label}"

    @classmethod
    def _from_parts(cls, parts):
        uid = parts.uint("uid", 16)
        ratio = parts.float("ratio")
        label = parts.next("label")
        return cls(uid, ratio, label)


def test_round_trip():
    original = SampleData(42, 0.5, "abc")
    encoded = CallbackData.to_data_string(original)
    assert encoded == "sample:42:0.5:abc"
    assert SampleData.parse(encoded) == original


def test_data_string_starts_with_prefix():
    assert CallbackData.to_data_string(SampleData(7, 0.25, "x")).startswith("sample:")


def test_has_prefix():
    encoded = CallbackData.to_data_string(SampleData(1, 0.5, "x"))
    assert SampleData.has_prefix(encoded)
    assert not SampleData.has_prefix("other" + encoded[len("sample"):])
    assert not SampleData.has_prefix("samples")
    assert not SampleData.has_prefix(None)


def test_parse_wrong_prefix():
    encoded = CallbackData.to_data_string(SampleData(1, 0.5, "x"))
    with pytest.raises(InvalidCallbackData):
        SampleData.parse("other" + encoded[len("sample"):])


def test_parse_none():
    sample = SampleData(3, 0.5, "z")
    assert SampleData.parse(CallbackData.to_data_string(sample)) == sample
    with pytest.raises(InvalidCallbackData):
        SampleData.parse(None)


def test_missing_part_is_reported():
    encoded = CallbackData.to_data_string(SampleData(1, 0.5, "x"))
    truncated = encoded.rsplit(":", 1)[0]
    assert truncated == "sample:1:0.5"
    with pytest.raises(InvalidCallbackData) as info:
        SampleData.parse(truncated)
    assert info.value.missing_part == "label"


def test_out_of_range_integer():
    encoded = CallbackData.to_data_string(SampleData(65536, 0.5, "x"))
    with pytest.raises(InvalidCallbackData) as info:
        SampleData.parse(encoded)
    assert info.value.missing_part is None


@pytest.mark.parametrize("uid", ["-1", "1_0", " 1", "abc", ""])
def test_invalid_integer(uid):
    encoded = CallbackData.to_data_string(SampleData(uid, 0.5, "x"))
    with pytest.raises(InvalidCallbackData):
        SampleData.parse(encoded)


@pytest.mark.parametrize("ratio", ["abc", "1_0", " 1.5", ""])
def test_invalid_float(ratio):
    encoded = CallbackData.to_data_string(SampleData(1, ratio, "x"))
    with pytest.raises(InvalidCallbackData):
        SampleData.parse(encoded)


def test_error_keeps_data():
    encoded = CallbackData.to_data_string(SampleData("x", 0.5, "y"))
    with pytest.raises(InvalidCallbackData) as info:
        SampleData.parse(encoded)
    assert info.value.data == "sample:x:0.5:y"


def test_keyboard_with_buttons():
    first = SampleData(1, 0.5, "a")
    second = SampleData(2, 0.5, "b")
    result = HandlerImplResult("text", [CallbackButton("Yes", first), CallbackButton("No", second)])
    assert result.keyboard() == [[("Yes", first.to_data_string()), ("No", second.to_data_string())]]


def test_keyboard_only_text():
    assert HandlerImplResult("only text").keyboard() is None