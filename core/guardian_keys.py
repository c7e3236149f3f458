"""
Clés des gardiens.

Un gardien i tire k coefficients secrets a_i,j dans [0, q) ; sa clé
publique est l'ensemble des engagements K_i,j = g^a_i,j mod p. K_i,0 est
la contribution du gardien à la clé publique conjointe.
"""
import logging
from typing import Optional, Tuple, Union

from pydantic import Field

from codec import BigUint, CanonicalModel
from csprng import Csprng
from election_parameters import ElectionParameters
from errors import KeyCheck, KeyIndexError, KeyValidationError
from varying_parameters import GuardianIndexField

logger = logging.getLogger(__name__)


def _check_guardian_i(i: int, election_parameters: ElectionParameters) -> None:
    varying_parameters = election_parameters.varying_parameters
    if not varying_parameters.is_valid_guardian_i(i):
        raise KeyIndexError(
            f"Le numéro de gardien {i} doit être dans 1..={varying_parameters.n} (paramètres de l'élection)", i=i)


def _check_commitments(i: int, coefficient_commitments: Tuple[int, ...],
                       election_parameters: ElectionParameters) -> None:
    fixed_parameters = election_parameters.fixed_parameters
    k = election_parameters.varying_parameters.k

    if len(coefficient_commitments) != k:
        raise KeyValidationError(
            KeyCheck.COMMITMENT_COUNT,
            f"Le gardien {i} a {len(coefficient_commitments)} engagements de coefficients, k = {k} attendus",
            i)

    for j, commitment in enumerate(coefficient_commitments):
        if not fixed_parameters.is_valid_modp(commitment):
            raise KeyValidationError(
                KeyCheck.NOT_IN_SUBGROUP,
                f"L'engagement {j} du gardien {i} n'est pas un élément valide mod p",
                i)


class GuardianPublicKey(CanonicalModel):
    """Clé publique d'un gardien"""

    # Numéro du gardien, 1 <= i <= n
    i: GuardianIndexField

    # Nom du gardien ou courte description
    opt_name: Optional[str] = None

    coefficient_commitments: Tuple[BigUint, ...] = Field(min_length=1)

    def validate(self, election_parameters: ElectionParameters) -> None:
        """
        Vérifie l'indice contre n, le nombre d'engagements (k) et
        l'appartenance de chacun au sous-groupe d'ordre q

        Raises:
            KeyIndexError: Si i n'est pas dans [1, n]
            KeyValidationError: Si un engagement est invalide
        """
        _check_guardian_i(self.i, election_parameters)
        _check_commitments(self.i, self.coefficient_commitments, election_parameters)

    def public_key_k0(self) -> int:
        """Engagement K_i,0, utilisé pour la clé publique conjointe"""
        return self.coefficient_commitments[0]

    @classmethod
    def from_json_validated(cls, data: Union[str, bytes],
                            election_parameters: ElectionParameters) -> "GuardianPublicKey":
        """Relit une clé publique et la valide systématiquement"""
        public_key = cls._parse_json(data)
        try:
            public_key.validate(election_parameters)
        except KeyValidationError as e:
            raise e.with_context("Lecture de GuardianPublicKey")
        return public_key


class GuardianSecretKey(CanonicalModel):
    """
    Clé secrète d'un gardien.
    Reste chez son gardien : seule la clé publique circule.
    """

    i: GuardianIndexField
    opt_name: Optional[str] = None
    secret_coefficients: Tuple[BigUint, ...] = Field(repr=False)
    coefficient_commitments: Tuple[BigUint, ...] = Field(min_length=1)

    @classmethod
    def generate(cls, csprng: Csprng, election_parameters: ElectionParameters,
                 i: int, opt_name: Optional[str] = None) -> "GuardianSecretKey":
        """
        Génère la clé secrète du gardien i

        Args:
            csprng: Générateur pseudo-aléatoire cryptographique
            election_parameters: Paramètres de l'élection (déjà validés)
            i: Numéro du gardien, 1 <= i <= n
            opt_name: Nom du gardien

        Returns:
            GuardianSecretKey: k coefficients secrets et leurs engagements

        Raises:
            KeyIndexError: Si i n'est pas dans [1, n]
        """
        fixed_parameters = election_parameters.fixed_parameters
        varying_parameters = election_parameters.varying_parameters
        i = varying_parameters.guardian_index(i)

        p, q, g = fixed_parameters.p, fixed_parameters.q, fixed_parameters.g

        secret_coefficients = tuple(csprng.next_biguint_lt(q) for _ in range(varying_parameters.k))
        coefficient_commitments = tuple(pow(g, a, p) for a in secret_coefficients)

        logger.info("Clé secrète générée pour le gardien %d", i)

        return cls(
            i=i,
            opt_name=opt_name,
            secret_coefficients=secret_coefficients,
            coefficient_commitments=coefficient_commitments,
        )

    def make_public_key(self) -> GuardianPublicKey:
        return GuardianPublicKey(
            i=self.i,
            opt_name=self.opt_name,
            coefficient_commitments=self.coefficient_commitments,
        )

    def validate(self, election_parameters: ElectionParameters) -> None:
        """
        Vérifie l'indice, les k coefficients secrets (< q) et que chaque
        engagement vaut g^a mod p

        Raises:
            KeyIndexError: Si i n'est pas dans [1, n]
            KeyValidationError: Si un coefficient ou un engagement est invalide
        """
        fixed_parameters = election_parameters.fixed_parameters
        k = election_parameters.varying_parameters.k

        _check_guardian_i(self.i, election_parameters)

        if len(self.secret_coefficients) != k:
            raise KeyValidationError(
                KeyCheck.COEFFICIENT_COUNT,
                f"Le gardien {self.i} a {len(self.secret_coefficients)} coefficients secrets, k = {k} attendus",
                self.i)

        _check_commitments(self.i, self.coefficient_commitments, election_parameters)

        for j, (a, commitment) in enumerate(zip(self.secret_coefficients, self.coefficient_commitments)):
            if not a < fixed_parameters.q:
                raise KeyValidationError(
                    KeyCheck.SECRET_OUT_OF_RANGE,
                    f"Le coefficient secret {j} du gardien {self.i} n'est pas inférieur à q",
                    self.i)
            if pow(fixed_parameters.g, a, fixed_parameters.p) != commitment:
                raise KeyValidationError(
                    KeyCheck.COMMITMENT_MISMATCH,
                    f"L'engagement {j} du gardien {self.i} ne correspond pas à son coefficient secret",
                    self.i)

    @classmethod
    def from_json_validated(cls, data: Union[str, bytes],
                            election_parameters: ElectionParameters) -> "GuardianSecretKey":
        secret_key = cls._parse_json(data)
        try:
            secret_key.validate(election_parameters)
        except KeyValidationError as e:
            raise e.with_context("Lecture de GuardianSecretKey")
        return secret_key
