"""Tests for QR payload encode/decode."""

import json

import pytest

from domain.records import StockRecord
from qr.codec import decode, encode


def test_encode_carries_exactly_three_fields():
    payload = json.loads(encode(StockRecord("CMC-0603", "L2407", 500, erp="E-1")))
    assert payload == {"model_name": "CMC-0603", "lot": "L2407", "quantity": 500}


def test_encode_is_compact_and_keeps_unicode():
    text = encode(StockRecord("ขดลวด", "L1", 3))
    assert text == '{"model_name":"ขดลวด","lot":"L1","quantity":3}'


@pytest.mark.parametrize(
    "record",
    [
        StockRecord("CMC-0603", "L2407", 500),
        StockRecord("A|B", 'lot "7"', 0),
        StockRecord("", "", 1),
        StockRecord("ขดลวด", "ล็อต-1", 47800),
    ],
)
def test_round_trip(record):
    assert decode(encode(record)) == record


def test_decode_legacy_pipe_format():
    assert decode("CMC-0603|L2407|500") == StockRecord("CMC-0603", "L2407", 500)


def test_decode_quantity_as_string():
    assert decode('{"model_name":"A","lot":"L","quantity":"12"}') == StockRecord("A", "L", 12)


@pytest.mark.parametrize(
    "text",
    [
        None,
        "",
        "hello",
        "A|B",
        "A|B|C|D",
        "A|B|many",
        "A|B|-3",
        '{"model_name":"A","lot":"L"}',
        '{"lot":"L","quantity":1}',
        '{"model_name":"A","lot":"L","quantity":1.5}',
        '["A","L",1]',
        "42",
    ],
)
def test_decode_unrecognised(text):
    assert decode(text) is None


def test_json_text_is_not_retried_as_legacy():
    # valid JSON that happens to contain pipes is still judged as JSON
    assert decode('"A|B|3"') is None


def test_decode_accepts_empty_model_and_lot_keys():
    assert decode('{"model_name":"","lot":"","quantity":1}') == StockRecord("", "", 1)
    assert decode('{"lot":"L1","quantity":1}') is None
