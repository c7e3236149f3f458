import logging
from typing import Iterable, Union

from codec import BigUint, CanonicalModel
from election_parameters import ElectionParameters
from errors import AggregationCompletenessError, AggregationFailure, KeyCheck, KeyValidationError
from fixed_parameters import FixedParameters
from guardian_keys import GuardianPublicKey
from varying_parameters import GuardianIndex

logger = logging.getLogger(__name__)


class JointElectionPublicKey(CanonicalModel):
    """Clé publique conjointe de l'élection, K = produit des K_i,0 mod p"""

    joint_election_public_key: BigUint

    @classmethod
    def compute(cls, election_parameters: ElectionParameters,
                guardian_public_keys: Iterable[GuardianPublicKey]) -> "JointElectionPublicKey":
        """
        Combine les clés publiques des n gardiens

        Chaque clé est d'abord validée, puis on exige que l'ensemble des
        numéros soit exactement {1, ..., n}, sans doublon. La combinaison est
        le produit modulo p des K_i,0 : le résultat ne dépend pas de l'ordre
        et reste dans le sous-groupe d'ordre q par fermeture.

        Args:
            election_parameters: Paramètres de l'élection (déjà validés)
            guardian_public_keys: Les n clés publiques, dans n'importe quel ordre

        Returns:
            JointElectionPublicKey: La clé publique conjointe

        Raises:
            KeyValidationError: Si une clé ne valide pas
            AggregationCompletenessError: Si un numéro est en double ou manquant
        """
        fixed_parameters = election_parameters.fixed_parameters
        n = election_parameters.varying_parameters.n
        guardian_public_keys = list(guardian_public_keys)

        for guardian_public_key in guardian_public_keys:
            try:
                guardian_public_key.validate(election_parameters)
            except KeyValidationError as e:
                raise e.with_context(f"Clé publique du gardien {guardian_public_key.i}")

        # Chaque gardien doit apparaître exactement une fois
        seen = [False] * n
        for guardian_public_key in guardian_public_keys:
            ix = GuardianIndex(guardian_public_key.i).ix
            if seen[ix]:
                raise AggregationCompletenessError(AggregationFailure.DUPLICATE_INDEX, [guardian_public_key.i])
            seen[ix] = True

        missing = [ix + 1 for ix, present in enumerate(seen) if not present]
        if missing:
            raise AggregationCompletenessError(AggregationFailure.MISSING_INDICES, missing)

        p = fixed_parameters.p
        joint_public_key = 1
        for guardian_public_key in guardian_public_keys:
            joint_public_key = (joint_public_key * guardian_public_key.public_key_k0()) % p

        logger.info("Clé publique conjointe calculée à partir de %d gardiens", n)

        return cls(joint_election_public_key=joint_public_key)

    def validate(self, election_parameters: ElectionParameters) -> None:
        """
        Vérifie l'appartenance au sous-groupe d'ordre q (utile après relecture)

        Raises:
            KeyValidationError: Si la clé n'est pas un élément valide mod p
        """
        if not election_parameters.fixed_parameters.is_valid_modp(self.joint_election_public_key):
            raise KeyValidationError(KeyCheck.NOT_IN_SUBGROUP, "La clé publique conjointe n'est pas un élément valide mod p")

    def to_be_bytes_len_p(self, fixed_parameters: FixedParameters) -> bytes:
        """Forme big-endian de la longueur exacte de p"""
        return fixed_parameters.biguint_to_be_bytes_len_p(self.joint_election_public_key)

    @classmethod
    def from_json_validated(cls, data: Union[str, bytes],
                            election_parameters: ElectionParameters) -> "JointElectionPublicKey":
        joint_public_key = cls._parse_json(data)
        try:
            joint_public_key.validate(election_parameters)
        except KeyValidationError as e:
            raise e.with_context("Lecture de JointElectionPublicKey")
        return joint_public_key
