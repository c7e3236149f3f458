import pytest

from csprng import Csprng
from election_parameters import ElectionParameters
from fixed_parameters import FixedParameterGenerationParameters, FixedParameters, NumsNumber
from varying_parameters import VaryingParameters

# Petit groupe de test : p = 2*q + 1 = 2039, q = 1019, g = 4 (un carré, donc d'ordre q)
TOY_P = 2039
TOY_Q = 1019
TOY_R = 2
TOY_G = 4


def make_toy_fixed_parameters(**overrides) -> FixedParameters:
    generation = dict(
        q_bits_total=10,
        p_bits_total=11,
        p_bits_msb_fixed_1=2,
        p_middle_bits_source=NumsNumber.LN_2,
        p_bits_lsb_fixed_1=2,
    )
    generation.update(overrides.pop("generation", {}))
    values = dict(p=TOY_P, q=TOY_Q, r=TOY_R, g=TOY_G)
    values.update(overrides)
    return FixedParameters(
        generation_parameters=FixedParameterGenerationParameters(**generation),
        **values,
    )


def make_toy_election_parameters(n: int = 3, k: int = 2) -> ElectionParameters:
    return ElectionParameters(
        fixed_parameters=make_toy_fixed_parameters(),
        varying_parameters=VaryingParameters(n=n, k=k, date="2026-11-03", info="Test"),
    )


@pytest.fixture
def csprng():
    return Csprng(b"test::csprng")


@pytest.fixture
def toy_fixed_parameters():
    return make_toy_fixed_parameters()


@pytest.fixture
def toy_election_parameters():
    return make_toy_election_parameters()
