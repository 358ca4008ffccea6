"""Tests for the CSPRNG-backed hex generator."""
import re
import secrets
from unittest import mock

import pytest

from hexpass.generators import hex_generator
from hexpass.generators.hex_generator import (
    HexGenerator,
    bytes_used,
    generate_hex,
    generate_many,
)

HEX = re.compile(r"^[0-9a-f]+$")


@pytest.mark.parametrize("length", [1, 2, 3, 31, 32, 33, 64, 511, 1023, 1024])
def test_generate_hex_exact_length_and_charset(length):
    secret = generate_hex(length)
    assert len(secret) == length
    assert HEX.match(secret)


def test_every_length_up_to_maximum():
    for length in range(1, 1025):
        secret = generate_hex(length)
        assert len(secret) == length
        assert HEX.match(secret)


def test_default_source_is_secrets_token_bytes():
    assert HexGenerator().source is secrets.token_bytes


def test_module_helper_uses_default_generator():
    with mock.patch.object(
        hex_generator._default, "source", return_value=b"\xab\xcd"
    ) as source:
        assert generate_hex(3) == "abc"
    source.assert_called_once_with(2)


def test_odd_length_truncates_last_byte():
    gen = HexGenerator(lambda n: b"\xde\xad\xbe\xef"[:n])
    assert gen.generate(3) == "dea"
    assert gen.generate(4) == "dead"
    assert gen.generate(7) == "deadbee"


def test_requests_ceil_half_bytes():
    calls = []

    def source(n):
        calls.append(n)
        return b"\x00" * n

    gen = HexGenerator(source)
    gen.generate(1)
    gen.generate(2)
    gen.generate(33)
    assert calls == [1, 1, 17]


def test_uppercase_never_produced():
    gen = HexGenerator(lambda n: b"\xff" * n)
    assert gen.generate(6) == "ffffff"


def test_generate_many_draws_independently(counting_source):
    gen = HexGenerator(counting_source)
    assert gen.generate_many(4, 3) == ["0001", "0203", "0405"]


def test_generate_many_is_unique_over_large_sample():
    batch = generate_many(32, 100)
    assert len(batch) == 100
    assert len(set(batch)) == 100


@pytest.mark.parametrize("length", [0, -1])
def test_rejects_non_positive_length(length):
    with pytest.raises(ValueError):
        generate_hex(length)


def test_generate_many_rejects_zero_count():
    with pytest.raises(ValueError):
        generate_many(32, 0)


def test_bytes_used():
    assert bytes_used(32) == 16
    assert bytes_used(33) == 17
    assert bytes_used(1) == 1
    assert bytes_used(64, 32) == 32
