import pytest

from conftest import TOY_P, TOY_Q, make_toy_fixed_parameters
from errors import CodecError, ParameterCheck, ParameterValidationError
from fixed_parameters import FixedParameters, NumsNumber, is_probable_prime


def test_is_probable_prime(csprng):
    primes = [2, 3, 5, 7, 1019, 2039, 2 ** 127 - 1, 2 ** 256 - 189]
    composites = [0, 1, 4, 9, 561, 2037, 1017, 2 ** 128 + 1, (2 ** 127 - 1) * (2 ** 61 - 1)]

    for n in primes:
        assert is_probable_prime(n, csprng), n
    for n in composites:
        assert not is_probable_prime(n, csprng), n


def test_toy_parameters_validate(toy_fixed_parameters, csprng):
    toy_fixed_parameters.validate(csprng)


@pytest.mark.parametrize("overrides, check", [
    (dict(p=2037), ParameterCheck.P_NOT_PRIME),
    (dict(q=1017), ParameterCheck.Q_NOT_PRIME),
    (dict(generation=dict(p_bits_total=12)), ParameterCheck.P_BITS),
    (dict(generation=dict(q_bits_total=11)), ParameterCheck.Q_BITS),
    (dict(generation=dict(p_bits_lsb_fixed_1=4)), ParameterCheck.P_FIXED_BITS),
    (dict(generation=dict(p_bits_msb_fixed_1=8)), ParameterCheck.P_FIXED_BITS),
    (dict(g=1), ParameterCheck.G_RANGE),
    (dict(g=TOY_P - 1), ParameterCheck.G_RANGE),
    (dict(g=TOY_P - 2), ParameterCheck.G_ORDER),
    (dict(r=3), ParameterCheck.GROUP_RELATION),
])
def test_first_failing_check_is_reported(overrides, check, csprng):
    fixed_parameters = make_toy_fixed_parameters(**overrides)

    with pytest.raises(ParameterValidationError) as excinfo:
        fixed_parameters.validate(csprng)

    assert excinfo.value.kind is check


@pytest.mark.parametrize("generation", [
    dict(p_bits_lsb_fixed_1=2 ** 62),
    dict(p_bits_msb_fixed_1=2 ** 62),
    dict(p_bits_msb_fixed_1=12),
    dict(p_bits_lsb_fixed_1=12),
])
def test_fixed_bit_counts_larger_than_p_are_rejected(generation, csprng):
    fixed_parameters = make_toy_fixed_parameters(generation=generation)

    with pytest.raises(ParameterValidationError) as excinfo:
        fixed_parameters.validate(csprng)

    assert excinfo.value.kind is ParameterCheck.P_FIXED_BITS


def test_is_valid_modp(toy_fixed_parameters):
    assert toy_fixed_parameters.is_valid_modp(1)
    assert toy_fixed_parameters.is_valid_modp(4)
    assert toy_fixed_parameters.is_valid_modp(pow(4, 123, TOY_P))

    assert not toy_fixed_parameters.is_valid_modp(0)
    assert not toy_fixed_parameters.is_valid_modp(TOY_P - 1)
    assert not toy_fixed_parameters.is_valid_modp(TOY_P)
    assert not toy_fixed_parameters.is_valid_modp(TOY_P + 4)


def test_fixed_length_encoding(toy_fixed_parameters):
    assert toy_fixed_parameters.l_p_bytes == 2
    assert toy_fixed_parameters.biguint_to_be_bytes_len_p(4) == b"\x00\x04"
    assert toy_fixed_parameters.biguint_to_be_bytes_len_p(TOY_P - 1) == (TOY_P - 1).to_bytes(2, "big")
    assert toy_fixed_parameters.biguint_from_be_bytes_len_p(b"\x00\x04") == 4

    with pytest.raises(ValueError):
        toy_fixed_parameters.biguint_to_be_bytes_len_p(TOY_P)
    with pytest.raises(ValueError):
        toy_fixed_parameters.biguint_from_be_bytes_len_p(b"\xff\xff")
    with pytest.raises(ValueError):
        toy_fixed_parameters.biguint_from_be_bytes_len_p(b"\x04")


def test_json_round_trip(toy_fixed_parameters, csprng):
    data = toy_fixed_parameters.to_json()

    assert '"p": "base16:7F7"' in data
    assert '"p_middle_bits_source": "Ln2"' in data
    assert FixedParameters.from_json_validated(data, csprng) == toy_fixed_parameters


def test_json_round_trip_keeps_version(csprng):
    fixed_parameters = make_toy_fixed_parameters(opt_version=(1, 2))

    decoded = FixedParameters.from_json_validated(fixed_parameters.to_json(), csprng)

    assert decoded.opt_version == (1, 2)
    assert decoded == fixed_parameters


def test_from_json_validated_rejects_invalid(csprng):
    data = make_toy_fixed_parameters(r=3).to_json()

    # Bien formé : l'analyse seule passe
    assert FixedParameters._parse_json(data).r == 3

    with pytest.raises(ParameterValidationError) as excinfo:
        FixedParameters.from_json_validated(data, csprng)

    assert excinfo.value.kind is ParameterCheck.GROUP_RELATION
    assert "Lecture de FixedParameters" in str(excinfo.value)


def test_unknown_nums_source_is_rejected(toy_fixed_parameters):
    data = toy_fixed_parameters.to_json().replace('"Ln2"', '"Pi"')

    with pytest.raises(CodecError):
        FixedParameters._parse_json(data)

    assert NumsNumber("EulerMascheroniConstant") is NumsNumber.EULER_MASCHERONI_CONSTANT
    with pytest.raises(ValueError):
        NumsNumber("Pi")


def test_toy_constants_are_consistent():
    assert TOY_P == 2 * TOY_Q + 1
