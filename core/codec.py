"""
Codec canonique des artefacts de la cérémonie.

Les grands entiers sont écrits sous une seule forme textuelle,
"base16:" suivi de l'hexadécimal majuscule sans zéros de tête, afin que
la relecture redonne exactement les mêmes octets quelle que soit la version
des bibliothèques. Les éléments de groupe ont aussi une forme binaire
big-endian de longueur fixe.
"""
import logging
from typing import Annotated, Any, BinaryIO, Union

from Crypto.Util.number import bytes_to_long, long_to_bytes
from pydantic import BaseModel, BeforeValidator, ConfigDict, PlainSerializer, ValidationError, ValidationInfo

from config import BIGUINT_TEXT_PREFIX, JSON_INDENT
from errors import CodecError, CodecFailure, KeyIndexError

logger = logging.getLogger(__name__)

_HEX_DIGITS = frozenset("0123456789ABCDEF")


def biguint_to_str(value: int) -> str:
    """
    Convertit un entier positif en sa forme textuelle canonique

    Args:
        value: Entier >= 0

    Returns:
        str: "base16:" suivi de l'hexadécimal majuscule
    """
    if value < 0:
        raise ValueError("Entier négatif")
    return f"{BIGUINT_TEXT_PREFIX}{value:X}"


def biguint_from_str(text: Any) -> int:
    """
    Relit la forme textuelle canonique d'un entier

    Raises:
        ValueError: Si le texte n'est pas exactement sous forme canonique
    """
    if not isinstance(text, str) or not text.startswith(BIGUINT_TEXT_PREFIX):
        raise ValueError(f"Chaîne commençant par {BIGUINT_TEXT_PREFIX!r} attendue")
    digits = text[len(BIGUINT_TEXT_PREFIX):]
    if not digits or not set(digits) <= _HEX_DIGITS:
        raise ValueError("Chiffres hexadécimaux majuscules attendus")
    if len(digits) > 1 and digits[0] == "0":
        raise ValueError("Zéros de tête non canoniques")
    return int(digits, 16)


def _validate_biguint(value: Any, info: ValidationInfo) -> int:
    # Construction directe en Python : on accepte un int positif
    if info.mode == "python" and isinstance(value, int) and not isinstance(value, bool):
        if value < 0:
            raise ValueError("Entier négatif")
        return value
    return biguint_from_str(value)


BigUint = Annotated[
    int,
    BeforeValidator(_validate_biguint),
    PlainSerializer(biguint_to_str, return_type=str, when_used="json"),
]


def biguint_to_be_bytes(value: int, length: int) -> bytes:
    """
    Encode un entier en big-endian, complété par des zéros à `length` octets

    Raises:
        ValueError: Si l'entier ne tient pas sur `length` octets
    """
    if value < 0 or value.bit_length() > 8 * length:
        raise ValueError(f"La valeur ne tient pas sur {length} octets")
    data = long_to_bytes(value, length)
    if len(data) != length:
        raise ValueError(f"La valeur ne tient pas sur {length} octets")
    return data


def biguint_from_be_bytes(data: bytes, length: int) -> int:
    """Décode la forme big-endian de longueur fixe"""
    if len(data) != length:
        raise ValueError(f"{length} octets attendus, {len(data)} reçus")
    return bytes_to_long(data)


class CanonicalModel(BaseModel):
    """
    Base des types persistés : immuables, champs inconnus refusés, rendu
    JSON déterministe (ordre des champs fixe, retour à la ligne final).

    `_parse_json` ne fait que l'analyse structurelle ; les types sensibles
    n'exposent que `from_json_validated`, qui appelle toujours leur `validate`.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    def to_json(self) -> str:
        return self.model_dump_json(indent=JSON_INDENT) + "\n"

    def to_bytes(self) -> bytes:
        return self.to_json().encode("utf-8")

    def write_to(self, stream: BinaryIO) -> None:
        """Écrit la forme canonique dans un flux binaire"""
        try:
            stream.write(self.to_bytes())
        except OSError as e:
            raise CodecError(
                CodecFailure.IO,
                f"Écriture de {type(self).__name__} : {e}",
                artifact=type(self).__name__,
            ) from e

    @classmethod
    def _parse_json(cls, data: Union[str, bytes]):
        """
        Analyse la forme canonique sans valider le contenu

        L'analyse est stricte : un entier écrit "5", 5.0 ou true est refusé.

        Raises:
            KeyIndexError: Si un numéro de gardien est hors de 1..=GUARDIAN_INDEX_MAX
            CodecError: Si l'entrée est mal formée
        """
        try:
            return cls.model_validate_json(data, strict=True)
        except ValidationError as e:
            logger.debug("Rejet d'un %s mal formé : %s", cls.__name__, e)
            for error in e.errors():
                cause = error.get("ctx", {}).get("error")
                if isinstance(cause, KeyIndexError):
                    raise cause.with_context(f"Lecture de {cls.__name__}") from e
            raise CodecError(
                CodecFailure.MALFORMED,
                f"Lecture de {cls.__name__} : {e}",
                artifact=cls.__name__,
            ) from e
