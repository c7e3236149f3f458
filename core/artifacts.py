"""
Lecture et écriture des artefacts de la cérémonie sur disque.

Tout chargement valide l'objet relu. Toute sauvegarde valide avant
d'écrire, et l'écriture passe par un fichier temporaire renommé à la fin :
un échec ne laisse jamais d'artefact partiel.
"""
import logging
import os
import tempfile
from contextlib import contextmanager
from enum import Enum
from pathlib import Path
from typing import Iterable, List, Optional, Union

from csprng import Csprng
from election_parameters import ElectionParameters
from errors import CodecError, CodecFailure, ElectionGuardError, KeyCheck, KeyIndexError
from guardian_keys import GuardianPublicKey, GuardianSecretKey
from joint_public_key import JointElectionPublicKey

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class ArtifactKind(Enum):
    ELECTION_PARAMETERS = "paramètres d'élection"
    GUARDIAN_SECRET_KEY = "clé secrète de gardien"
    GUARDIAN_PUBLIC_KEY = "clé publique de gardien"
    JOINT_ELECTION_PUBLIC_KEY = "clé publique conjointe"


@contextmanager
def artifact_context(path: Path, kind: ArtifactKind):
    """Ajoute le type et le chemin de l'artefact aux erreurs qui remontent"""
    try:
        yield
    except CodecError as e:
        e.artifact = kind.value
        e.path = path
        raise e.with_context(f"{kind.value} ({path})")
    except ElectionGuardError as e:
        raise e.with_context(f"{kind.value} ({path})")


def read_artifact(path: PathLike, kind: ArtifactKind) -> bytes:
    """
    Lit le contenu brut d'un artefact

    Raises:
        CodecError: Si le fichier ne peut pas être lu
    """
    path = Path(path)
    try:
        return path.read_bytes()
    except OSError as e:
        raise CodecError(
            CodecFailure.IO, f"Impossible de lire le fichier ({kind.value}) : {e}", artifact=kind.value, path=path) from e


def write_artifact(path: PathLike, kind: ArtifactKind, data: bytes) -> None:
    """
    Écrit un artefact de façon atomique

    Raises:
        CodecError: Si l'écriture échoue (aucun fichier partiel n'est laissé)
    """
    path = Path(path)
    tmp_name = None
    try:
        with tempfile.NamedTemporaryFile(dir=path.parent, prefix=f".{path.name}.", delete=False) as tmp:
            tmp_name = tmp.name
            tmp.write(data)
        os.replace(tmp_name, path)
    except OSError as e:
        if tmp_name is not None and os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise CodecError(
            CodecFailure.IO, f"Impossible d'écrire le fichier ({kind.value}) : {e}", artifact=kind.value, path=path) from e
    logger.info("Fichier (%s) écrit : %s", kind.value, path)


def _check_expected_i(kind: ArtifactKind, expected_i: Optional[int], loaded_i: int, path: Path) -> None:
    if expected_i is not None and expected_i != loaded_i:
        raise KeyIndexError(
            f"Le numéro de gardien {expected_i} ne correspond pas au numéro {loaded_i} "
            f"lu dans le fichier ({kind.value}) : {path}",
            i=loaded_i,
            kind=KeyCheck.INDEX_MISMATCH,
        )


def _log_guardian_key_loaded(kind: ArtifactKind, key, path: Path) -> None:
    if key.opt_name is not None:
        logger.info("Gardien %d %r : %s chargée depuis %s", key.i, key.opt_name, kind.value, path)
    else:
        logger.info("Gardien %d : %s chargée depuis %s", key.i, kind.value, path)


def load_election_parameters(path: PathLike, csprng: Csprng) -> ElectionParameters:
    """
    Charge et valide les paramètres de l'élection

    Args:
        path: Chemin du fichier
        csprng: Source d'aléa pour les tests de primalité

    Returns:
        ElectionParameters: Paramètres validés
    """
    path = Path(path)
    kind = ArtifactKind.ELECTION_PARAMETERS
    with artifact_context(path, kind):
        election_parameters = ElectionParameters.from_bytes(read_artifact(path, kind))
        logger.info("Paramètres d'élection chargés depuis : %s", path)
        election_parameters.validate(csprng)
    return election_parameters


def load_guardian_secret_key(path: PathLike, election_parameters: ElectionParameters,
                             expected_i: Optional[int] = None) -> GuardianSecretKey:
    """
    Charge et valide la clé secrète d'un gardien

    Raises:
        KeyIndexError: Si expected_i diffère du numéro lu
    """
    path = Path(path)
    kind = ArtifactKind.GUARDIAN_SECRET_KEY
    with artifact_context(path, kind):
        secret_key = GuardianSecretKey.from_json_validated(read_artifact(path, kind), election_parameters)
        _check_expected_i(kind, expected_i, secret_key.i, path)
    _log_guardian_key_loaded(kind, secret_key, path)
    return secret_key


def load_guardian_public_key(path: PathLike, election_parameters: ElectionParameters,
                             expected_i: Optional[int] = None) -> GuardianPublicKey:
    """
    Charge et valide la clé publique d'un gardien

    Raises:
        KeyIndexError: Si expected_i diffère du numéro lu
    """
    path = Path(path)
    kind = ArtifactKind.GUARDIAN_PUBLIC_KEY
    with artifact_context(path, kind):
        public_key = GuardianPublicKey.from_json_validated(read_artifact(path, kind), election_parameters)
        _check_expected_i(kind, expected_i, public_key.i, path)
    _log_guardian_key_loaded(kind, public_key, path)
    return public_key


def load_guardian_public_keys(paths: Iterable[PathLike],
                              election_parameters: ElectionParameters) -> List[GuardianPublicKey]:
    return [load_guardian_public_key(path, election_parameters) for path in paths]


def load_joint_election_public_key(path: PathLike,
                                   election_parameters: ElectionParameters) -> JointElectionPublicKey:
    path = Path(path)
    kind = ArtifactKind.JOINT_ELECTION_PUBLIC_KEY
    with artifact_context(path, kind):
        joint_public_key = JointElectionPublicKey.from_json_validated(
            read_artifact(path, kind), election_parameters)
    logger.info("Clé publique conjointe chargée depuis : %s", path)
    return joint_public_key


def save_election_parameters(path: PathLike, election_parameters: ElectionParameters, csprng: Csprng) -> None:
    path = Path(path)
    kind = ArtifactKind.ELECTION_PARAMETERS
    with artifact_context(path, kind):
        election_parameters.validate(csprng)
        write_artifact(path, kind, election_parameters.to_bytes())


def save_guardian_secret_key(path: PathLike, secret_key: GuardianSecretKey,
                             election_parameters: ElectionParameters) -> None:
    path = Path(path)
    kind = ArtifactKind.GUARDIAN_SECRET_KEY
    with artifact_context(path, kind):
        secret_key.validate(election_parameters)
        write_artifact(path, kind, secret_key.to_bytes())


def save_guardian_public_key(path: PathLike, public_key: GuardianPublicKey,
                             election_parameters: ElectionParameters) -> None:
    path = Path(path)
    kind = ArtifactKind.GUARDIAN_PUBLIC_KEY
    with artifact_context(path, kind):
        public_key.validate(election_parameters)
        write_artifact(path, kind, public_key.to_bytes())


def save_joint_election_public_key(path: PathLike, joint_public_key: JointElectionPublicKey,
                                   election_parameters: ElectionParameters) -> None:
    path = Path(path)
    kind = ArtifactKind.JOINT_ELECTION_PUBLIC_KEY
    with artifact_context(path, kind):
        joint_public_key.validate(election_parameters)
        write_artifact(path, kind, joint_public_key.to_bytes())
