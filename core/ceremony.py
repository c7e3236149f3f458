import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

from Crypto.Random import get_random_bytes

from config import CSPRNG_SEED_BYTES
from csprng import Csprng
from election_parameters import ElectionParameters
from errors import ParameterCheck, ParameterValidationError
from fixed_parameters import FixedParameters
from guardian_keys import GuardianPublicKey, GuardianSecretKey
from joint_public_key import JointElectionPublicKey
from standard_parameters import LATEST_STANDARD_VERSION, STANDARD_PARAMETER_VERSIONS
from varying_parameters import VaryingParameters

logger = logging.getLogger(__name__)


@dataclass
class GuardianKeyPair:
    """Clés d'un gardien produites pendant la cérémonie"""
    secret_key: GuardianSecretKey
    public_key: GuardianPublicKey


@dataclass
class CeremonyResult:
    election_parameters: ElectionParameters
    guardian_key_pairs: List[GuardianKeyPair]
    joint_election_public_key: JointElectionPublicKey


class KeyCeremony:
    def __init__(self, csprng: Csprng):
        """
        Initialise la cérémonie

        Args:
            csprng: Générateur utilisé pour les tests de primalité et la
                génération des clés. Ne pas partager entre threads.
        """
        self.csprng = csprng
        # Jeux standard déjà validés, par version
        self._validated_standard_parameters: Dict[Tuple[int, int], FixedParameters] = {}

    def standard_parameters(self, version: Tuple[int, int] = LATEST_STANDARD_VERSION) -> FixedParameters:
        """
        Renvoie un jeu de paramètres standard, validé une seule fois par cérémonie

        Raises:
            ParameterValidationError: Si la version est inconnue ou si l'auto-test échoue
        """
        version = tuple(version)
        fixed_parameters = self._validated_standard_parameters.get(version)
        if fixed_parameters is None:
            make_fixed_parameters = STANDARD_PARAMETER_VERSIONS.get(version)
            if make_fixed_parameters is None:
                known = ", ".join("v%d.%d" % known_version for known_version in sorted(STANDARD_PARAMETER_VERSIONS))
                raise ParameterValidationError(
                    ParameterCheck.UNKNOWN_VERSION,
                    f"Pas de paramètres standard pour la version {version} (versions connues : {known})")
            fixed_parameters = make_fixed_parameters()
            logger.info("Auto-test des paramètres standard v%d.%d", *version)
            fixed_parameters.validate(self.csprng)
            self._validated_standard_parameters[version] = fixed_parameters
        return fixed_parameters

    def election_parameters(self, n: int, k: int, date: str, info: str,
                            version: Tuple[int, int] = LATEST_STANDARD_VERSION) -> ElectionParameters:
        """
        Construit des paramètres d'élection validés sur un jeu standard

        Raises:
            ParameterValidationError: Si n ou k sont invalides
        """
        varying_parameters = VaryingParameters(n=n, k=k, date=date, info=info)
        varying_parameters.validate()
        return ElectionParameters(
            fixed_parameters=self.standard_parameters(version),
            varying_parameters=varying_parameters,
        )

    def generate_guardian_key_pair(self, election_parameters: ElectionParameters, i: int,
                                   name: Optional[str] = None) -> GuardianKeyPair:
        secret_key = GuardianSecretKey.generate(self.csprng, election_parameters, i, name)
        public_key = secret_key.make_public_key()
        public_key.validate(election_parameters)
        return GuardianKeyPair(secret_key, public_key)

    def combine(self, election_parameters: ElectionParameters,
                public_keys: Sequence[GuardianPublicKey]) -> JointElectionPublicKey:
        return JointElectionPublicKey.compute(election_parameters, public_keys)


def run_key_ceremony(n: int, k: int, date: str = "", info: str = "",
                     seed: Optional[bytes] = None,
                     version: Tuple[int, int] = LATEST_STANDARD_VERSION) -> CeremonyResult:
    """
    Exécute une cérémonie complète en mémoire

    Args:
        n: Nombre de gardiens
        k: Seuil de quorum
        date: Date de l'élection
        info: Informations sur la juridiction
        seed: Graine du CSPRNG ; tirée de l'OS si absente
        version: Version des paramètres standard

    Returns:
        CeremonyResult: Paramètres, clés des gardiens et clé publique conjointe
    """
    if seed is None:
        seed = get_random_bytes(CSPRNG_SEED_BYTES)

    ceremony = KeyCeremony(Csprng(seed))
    election_parameters = ceremony.election_parameters(n, k, date, info, version)

    key_pairs = [
        ceremony.generate_guardian_key_pair(election_parameters, i, f"Gardien {int(i)}")
        for i in election_parameters.varying_parameters.each_guardian_i()
    ]

    joint_public_key = ceremony.combine(election_parameters, [pair.public_key for pair in key_pairs])

    return CeremonyResult(election_parameters, key_pairs, joint_public_key)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")

    result = run_key_ceremony(n=5, k=3, date="2026-11-03", info="Exemple de juridiction")

    print(f"Cérémonie terminée avec {len(result.guardian_key_pairs)} gardiens")
    print(f"Clé publique conjointe : {result.joint_election_public_key.to_json()}")
