from typing import Annotated, Iterator

from pydantic import AfterValidator, Field, PlainSerializer

from codec import CanonicalModel
from config import GUARDIAN_INDEX_MAX
from errors import KeyIndexError, ParameterCheck, ParameterValidationError


class GuardianIndex(int):
    """
    Numéro de gardien, 1 <= i <= GUARDIAN_INDEX_MAX.

    La conversion vers un indice de tableau (0-based) passe uniquement par `ix`.
    """

    def __new__(cls, value: int):
        if isinstance(value, bool) or not isinstance(value, int):
            raise KeyIndexError(f"Le numéro de gardien doit être un entier, reçu {value!r}")
        if not 1 <= value <= GUARDIAN_INDEX_MAX:
            raise KeyIndexError(f"Le numéro de gardien {value} n'est pas dans 1..={GUARDIAN_INDEX_MAX}", i=value)
        return super().__new__(cls, value)

    @property
    def ix(self) -> int:
        return int(self) - 1

    def __repr__(self) -> str:
        return f"GuardianIndex({int(self)})"

    def __str__(self) -> str:
        return str(int(self))


GuardianIndexField = Annotated[
    int,
    AfterValidator(GuardianIndex),
    PlainSerializer(int, return_type=int),
]

U16 = Annotated[int, Field(ge=0, le=GUARDIAN_INDEX_MAX)]


class VaryingParameters(CanonicalModel):
    """Paramètres propres à une élection"""

    # Nombre de gardiens
    n: U16

    # Seuil de quorum pour le déchiffrement
    k: U16

    date: str

    # Informations sur la juridiction
    info: str

    def validate(self) -> None:
        """
        Vérifie 1 <= n, 1 <= k et k <= n

        Raises:
            ParameterValidationError: Au premier test qui échoue
        """
        if not 1 <= self.n:
            raise ParameterValidationError(ParameterCheck.N_MIN, "Échec du test des paramètres variables : 1 <= n")

        if not 1 <= self.k:
            raise ParameterValidationError(ParameterCheck.K_MIN, "Échec du test des paramètres variables : 1 <= k")

        if not self.k <= self.n:
            raise ParameterValidationError(ParameterCheck.K_MAX, "Échec du test des paramètres variables : k <= n")

    def is_valid_guardian_i(self, i: int) -> bool:
        return 1 <= i <= self.n

    def guardian_index(self, i: int) -> GuardianIndex:
        """
        Construit un GuardianIndex borné par n

        Raises:
            KeyIndexError: Si i n'est pas dans [1, n]
        """
        if isinstance(i, bool) or not isinstance(i, int) or not self.is_valid_guardian_i(i):
            raise KeyIndexError(f"Le numéro de gardien {i} n'est pas dans 1..={self.n}", i=i)
        return GuardianIndex(i)

    def each_guardian_i(self) -> Iterator[GuardianIndex]:
        """Parcourt les numéros de gardiens 1..=n"""
        for i in range(1, self.n + 1):
            yield GuardianIndex(i)
