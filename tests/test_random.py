import pytest

from sealbox.random import NONCE_SIZE, generate_nonce, random_bytes


def test_nonce_size_is_24():
    assert NONCE_SIZE == 24
    assert len(generate_nonce()) == 24


def test_nonces_do_not_repeat():
    nonces = [generate_nonce() for _ in range(100)]
    assert len(set(nonces)) == 100


@pytest.mark.parametrize("size", [0, 1, 32, 1000])
def test_random_bytes_length(size):
    data = random_bytes(size)
    assert isinstance(data, bytes)
    assert len(data) == size


def test_random_bytes_distinct():
    values = {random_bytes(32) for _ in range(50)}
    assert len(values) == 50


def test_random_bytes_negative():
    with pytest.raises(ValueError):
        random_bytes(-1)