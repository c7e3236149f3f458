from enum import Enum
from pathlib import Path
from typing import Iterable, List, Optional


class ElectionGuardError(Exception):
    """
    Exception de base du noyau cryptographique.

    Chaque sous-classe garde un `kind` exploitable par programme. Le contexte
    (quel gardien, quel artefact) s'ajoute pendant la propagation avec
    `with_context` sans changer la classe ni le `kind`.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
        self.context: List[str] = []

    def with_context(self, context: str) -> "ElectionGuardError":
        """
        Ajoute un niveau de contexte (le plus externe en premier)

        Args:
            context: Description de l'opération en cours

        Returns:
            L'exception elle-même, prête à être relancée
        """
        self.context.insert(0, context)
        return self

    def __str__(self) -> str:
        return ": ".join(self.context + [self.message])


class ParameterCheck(Enum):
    P_NOT_PRIME = "p est premier"
    Q_NOT_PRIME = "q est premier"
    P_BITS = "taille de p en bits"
    Q_BITS = "taille de q en bits"
    P_FIXED_BITS = "bits fixés de p"
    G_RANGE = "2 <= g <= p - 2"
    G_ORDER = "g^q mod p == 1"
    G_TRIVIAL = "g != 1"
    GROUP_RELATION = "p == q*r + 1"
    N_MIN = "1 <= n"
    K_MIN = "1 <= k"
    K_MAX = "k <= n"
    UNKNOWN_VERSION = "version des paramètres standard connue"


class ParameterValidationError(ElectionGuardError):
    """Paramètres fixes ou variables invalides"""

    def __init__(self, kind: ParameterCheck, message: Optional[str] = None):
        super().__init__(message or f"Échec du test des paramètres : {kind.value}")
        self.kind = kind


class KeyCheck(Enum):
    INDEX_OUT_OF_RANGE = "numéro de gardien dans les bornes"
    INDEX_MISMATCH = "numéro de gardien attendu"
    COEFFICIENT_COUNT = "nombre de coefficients"
    COMMITMENT_COUNT = "nombre d'engagements"
    SECRET_OUT_OF_RANGE = "coefficient secret < q"
    COMMITMENT_MISMATCH = "engagement == g^a mod p"
    NOT_IN_SUBGROUP = "élément du sous-groupe d'ordre q"


class KeyValidationError(ElectionGuardError):
    """Matériel de clé qui ne respecte pas les paramètres de l'élection"""

    def __init__(self, kind: KeyCheck, message: str, i: Optional[int] = None):
        super().__init__(message)
        self.kind = kind
        self.i = i


class KeyIndexError(KeyValidationError, ValueError):
    """
    Indice de gardien hors de [1, n] ou différent de celui demandé.

    Hérite aussi de ValueError pour que les validateurs pydantic la
    convertissent en erreur de validation.
    """

    def __init__(self, message: str, i: Optional[int] = None,
                 kind: KeyCheck = KeyCheck.INDEX_OUT_OF_RANGE):
        super().__init__(kind, message, i)


class AggregationFailure(Enum):
    DUPLICATE_INDEX = "numéro de gardien en double"
    MISSING_INDICES = "numéros de gardiens manquants"


class AggregationCompletenessError(ElectionGuardError):
    """L'ensemble des clés publiques n'est pas exactement {1, ..., n}"""

    def __init__(self, kind: AggregationFailure, indices: Iterable[int]):
        self.kind = kind
        self.indices = [int(i) for i in indices]
        listed = ", ".join(str(i) for i in self.indices)
        if kind is AggregationFailure.DUPLICATE_INDEX:
            message = f"Le gardien {listed} apparaît plusieurs fois parmi les clés publiques des gardiens"
        else:
            message = f"Gardien(s) {listed} absent(s) des clés publiques des gardiens"
        super().__init__(message)


class CodecFailure(Enum):
    MALFORMED = "entrée mal formée"
    IO = "erreur d'entrée/sortie"


class CodecError(ElectionGuardError):
    """Erreur de lecture, d'écriture ou de format d'un artefact"""

    def __init__(self, kind: CodecFailure, message: str,
                 artifact: Optional[str] = None, path: Optional[Path] = None):
        super().__init__(message)
        self.kind = kind
        self.artifact = artifact
        self.path = path
