import pytest

from csprng import Csprng
from errors import ParameterValidationError
from fixed_parameters import FixedParameters, NumsNumber
from standard_parameters import (
    LATEST_STANDARD_VERSION,
    STANDARD_PARAMETER_VERSIONS,
    make_standard_parameters,
    make_standard_parameters_v1_54,
    make_standard_parameters_v2_0,
)

VERSIONS = sorted(STANDARD_PARAMETER_VERSIONS)


@pytest.mark.parametrize("version", VERSIONS)
def test_standard_parameters_validate(version):
    fixed_parameters = STANDARD_PARAMETER_VERSIONS[version]()

    assert fixed_parameters.opt_version == version
    fixed_parameters.validate(Csprng(f"test::standard_parameters_v{version}".encode()))


def test_standard_parameter_sets_differ():
    v1_54 = make_standard_parameters_v1_54()
    v2_0 = make_standard_parameters_v2_0()

    assert v1_54.p != v2_0.p
    assert v1_54.g != v2_0.g
    assert v1_54.q == v2_0.q
    assert v1_54.q.bit_length() == 256
    assert v2_0.q.bit_length() == 256
    assert v1_54.p.bit_length() == 4096
    assert v2_0.p.bit_length() == 4096
    assert v1_54.generation_parameters.p_middle_bits_source is NumsNumber.EULER_MASCHERONI_CONSTANT
    assert v2_0.generation_parameters.p_middle_bits_source is NumsNumber.LN_2


def test_latest_is_v2_0():
    assert LATEST_STANDARD_VERSION == (2, 0)
    assert make_standard_parameters() == make_standard_parameters_v2_0()


@pytest.mark.parametrize("version", VERSIONS)
def test_golden_constants(version):
    fixed_parameters = STANDARD_PARAMETER_VERSIONS[version]()

    assert fixed_parameters.q == 2 ** 256 - 189
    assert fixed_parameters.p == fixed_parameters.q * fixed_parameters.r + 1
    # 256 bits de poids fort et 256 bits de poids faible à 1
    assert fixed_parameters.p >> (4096 - 256) == 2 ** 256 - 1
    assert fixed_parameters.p % 2 ** 256 == 2 ** 256 - 1
    assert fixed_parameters.l_p_bytes == 512


@pytest.mark.parametrize("version", VERSIONS)
def test_json_round_trip_is_exact(version):
    fixed_parameters = STANDARD_PARAMETER_VERSIONS[version]()
    data = fixed_parameters.to_json()

    decoded = FixedParameters._parse_json(data)

    assert decoded == fixed_parameters
    assert decoded.to_json() == data
    assert '"q": "base16:' + "F" * 62 + '43"' in data


def _flip(fixed_parameters, field, bit):
    value = getattr(fixed_parameters, field) ^ (1 << bit)
    return fixed_parameters.model_copy(update={field: value})


@pytest.mark.parametrize("version", VERSIONS)
@pytest.mark.parametrize("field, bit", [
    ("p", 0),
    ("p", 1),
    ("p", 300),
    ("p", 2048),
    ("p", 4095),
    ("q", 0),
    ("q", 255),
    ("g", 1),
])
def test_single_bit_flip_fails_validation(version, field, bit):
    flipped = _flip(STANDARD_PARAMETER_VERSIONS[version](), field, bit)

    with pytest.raises(ParameterValidationError):
        flipped.validate(Csprng(b"test::bit_flip"))
