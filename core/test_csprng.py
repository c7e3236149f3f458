import pytest

from csprng import Csprng


def test_same_seed_same_stream():
    a = Csprng(b"seed")
    b = Csprng(b"seed")

    assert a.read(64) == b.read(64)
    assert a.next_u64() == b.next_u64()


def test_different_seeds_differ():
    assert Csprng(b"seed 1").read(32) != Csprng(b"seed 2").read(32)


def test_state_advances():
    csprng = Csprng(b"seed")
    assert csprng.read(32) != csprng.read(32)


def test_next_bits():
    csprng = Csprng(b"bits")
    for bits in (1, 7, 8, 9, 255, 256):
        for _ in range(20):
            assert 0 <= csprng.next_bits(bits) < 2 ** bits
    assert csprng.next_bits(0) == 0


def test_next_biguint_lt():
    csprng = Csprng(b"lt")
    for bound in (1, 2, 3, 1019, 2 ** 256 - 189):
        for _ in range(20):
            assert 0 <= csprng.next_biguint_lt(bound) < bound

    # Toutes les valeurs d'un petit intervalle finissent par sortir
    assert {csprng.next_biguint_lt(5) for _ in range(200)} == {0, 1, 2, 3, 4}


def test_next_biguint_range():
    csprng = Csprng(b"range")
    for _ in range(50):
        assert 10 <= csprng.next_biguint_range(10, 13) < 13

    with pytest.raises(ValueError):
        csprng.next_biguint_range(5, 5)


def test_invalid_arguments():
    with pytest.raises(ValueError):
        Csprng(b"x").next_biguint_lt(0)
    with pytest.raises(TypeError):
        Csprng("pas des octets")
