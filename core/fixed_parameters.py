"""
Paramètres fixes du groupe : sous-groupe d'ordre premier q du groupe
multiplicatif modulo p, engendré par g, avec p = q*r + 1.
"""
import logging
from enum import Enum
from typing import Optional, Tuple, Union

from Crypto.Math.Primality import PROBABLY_PRIME, lucas_test, miller_rabin_test
from pydantic import NonNegativeInt

from codec import BigUint, CanonicalModel, biguint_from_be_bytes, biguint_to_be_bytes
from config import PRIMALITY_MR_ITERATIONS
from csprng import Csprng
from errors import ParameterCheck, ParameterValidationError

logger = logging.getLogger(__name__)


def is_probable_prime(n: int, csprng: Csprng) -> bool:
    """
    Test de primalité probabiliste

    Miller-Rabin avec PRIMALITY_MR_ITERATIONS bases tirées du CSPRNG
    (faux positif <= 2^-128), puis un test de Lucas.

    Args:
        n: Entier à tester
        csprng: Source des bases aléatoires

    Returns:
        bool: True si n est premier avec forte probabilité
    """
    if n < 2:
        return False
    if n in (2, 3):
        return True
    if n % 2 == 0:
        return False
    if miller_rabin_test(n, PRIMALITY_MR_ITERATIONS, randfunc=csprng.read) != PROBABLY_PRIME:
        return False
    return lucas_test(n) == PROBABLY_PRIME


class NumsNumber(Enum):
    """Source "nothing-up-my-sleeve" des bits du milieu de p"""
    LN_2 = "Ln2"
    EULER_MASCHERONI_CONSTANT = "EulerMascheroniConstant"


class FixedParameterGenerationParameters(CanonicalModel):
    q_bits_total: NonNegativeInt
    p_bits_total: NonNegativeInt
    p_bits_msb_fixed_1: NonNegativeInt
    p_middle_bits_source: NumsNumber
    p_bits_lsb_fixed_1: NonNegativeInt


class FixedParameters(CanonicalModel):
    opt_version: Optional[Tuple[int, int]] = None
    generation_parameters: FixedParameterGenerationParameters
    p: BigUint
    q: BigUint
    r: BigUint
    g: BigUint

    def validate(self, csprng: Csprng) -> None:
        """
        Vérifie les paramètres fixes, dans l'ordre : primalité de p puis de q,
        longueurs et bits fixés déclarés, 2 <= g <= p-2, g^q = 1 mod p, g != 1,
        p = q*r + 1.

        Args:
            csprng: Source d'aléa pour les tests de primalité

        Raises:
            ParameterValidationError: Au premier test qui échoue
        """
        gp = self.generation_parameters
        p, q, r, g = self.p, self.q, self.r, self.g

        if not is_probable_prime(p, csprng):
            raise ParameterValidationError(ParameterCheck.P_NOT_PRIME)

        if not is_probable_prime(q, csprng):
            raise ParameterValidationError(ParameterCheck.Q_NOT_PRIME)

        if p.bit_length() != gp.p_bits_total:
            raise ParameterValidationError(
                ParameterCheck.P_BITS,
                f"p a {p.bit_length()} bits, {gp.p_bits_total} attendus")

        if q.bit_length() != gp.q_bits_total:
            raise ParameterValidationError(
                ParameterCheck.Q_BITS,
                f"q a {q.bit_length()} bits, {gp.q_bits_total} attendus")

        if (gp.p_bits_msb_fixed_1 > gp.p_bits_total
                or gp.p_bits_lsb_fixed_1 > gp.p_bits_total):
            raise ParameterValidationError(
                ParameterCheck.P_FIXED_BITS,
                f"{gp.p_bits_msb_fixed_1} + {gp.p_bits_lsb_fixed_1} bits fixés déclarés pour p sur {gp.p_bits_total} bits")

        msb_ones = (1 << gp.p_bits_msb_fixed_1) - 1
        lsb_ones = (1 << gp.p_bits_lsb_fixed_1) - 1
        if (p >> (gp.p_bits_total - gp.p_bits_msb_fixed_1) != msb_ones
                or p & lsb_ones != lsb_ones):
            raise ParameterValidationError(ParameterCheck.P_FIXED_BITS)

        if not 2 <= g <= p - 2:
            raise ParameterValidationError(ParameterCheck.G_RANGE)

        if pow(g, q, p) != 1:
            raise ParameterValidationError(ParameterCheck.G_ORDER)

        if g == 1:
            raise ParameterValidationError(ParameterCheck.G_TRIVIAL)

        if q * r + 1 != p:
            raise ParameterValidationError(ParameterCheck.GROUP_RELATION)

        logger.debug("Paramètres fixes %s valides (p sur %d bits)", self.opt_version, p.bit_length())

    def is_valid_modp(self, x: int) -> bool:
        """Appartenance au sous-groupe d'ordre q : 0 <= x < p et x^q = 1 mod p"""
        return 0 <= x < self.p and pow(x, self.q, self.p) == 1

    @property
    def l_p_bytes(self) -> int:
        """Longueur en octets de p"""
        return (self.p.bit_length() + 7) // 8

    def biguint_to_be_bytes_len_p(self, x: int) -> bytes:
        """
        Encode x en big-endian sur exactement l_p_bytes octets

        Raises:
            ValueError: Si x n'est pas dans [0, p)
        """
        if not 0 <= x < self.p:
            raise ValueError("Élément hors de [0, p)")
        return biguint_to_be_bytes(x, self.l_p_bytes)

    def biguint_from_be_bytes_len_p(self, data: bytes) -> int:
        x = biguint_from_be_bytes(data, self.l_p_bytes)
        if x >= self.p:
            raise ValueError("Élément hors de [0, p)")
        return x

    @classmethod
    def from_json_validated(cls, data: Union[str, bytes], csprng: Csprng) -> "FixedParameters":
        """Relit des paramètres fixes et les valide entièrement"""
        fixed_parameters = cls._parse_json(data)
        try:
            fixed_parameters.validate(csprng)
        except ParameterValidationError as e:
            raise e.with_context("Lecture de FixedParameters")
        return fixed_parameters
