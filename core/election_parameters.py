import logging
from typing import Union

from codec import CanonicalModel
from csprng import Csprng
from errors import ParameterValidationError
from fixed_parameters import FixedParameters
from varying_parameters import VaryingParameters

logger = logging.getLogger(__name__)


class ElectionParameters(CanonicalModel):
    """
    Paramètres complets d'une élection : le groupe fixe et les paramètres
    variables. C'est l'unité chargée, persistée et validée d'un bloc avant
    de faire confiance à la moindre clé.
    """

    fixed_parameters: FixedParameters
    varying_parameters: VaryingParameters

    def validate(self, csprng: Csprng) -> None:
        """
        Valide les paramètres fixes puis les paramètres variables

        Raises:
            ParameterValidationError: Avec le contexte "fixed" ou "varying"
        """
        try:
            self.fixed_parameters.validate(csprng)
        except ParameterValidationError as e:
            raise e.with_context("Validation des paramètres fixes")

        try:
            self.varying_parameters.validate()
        except ParameterValidationError as e:
            raise e.with_context("Validation des paramètres variables")

        logger.info(
            "Paramètres d'élection valides : n=%d, k=%d",
            self.varying_parameters.n,
            self.varying_parameters.k,
        )

    @classmethod
    def from_bytes(cls, data: Union[str, bytes]) -> "ElectionParameters":
        """
        Analyse des paramètres sérialisés SANS les valider.
        Tout chargeur externe doit appeler `validate` ensuite.
        """
        return cls._parse_json(data)

    @classmethod
    def from_json_validated(cls, data: Union[str, bytes], csprng: Csprng) -> "ElectionParameters":
        election_parameters = cls.from_bytes(data)
        try:
            election_parameters.validate(csprng)
        except ParameterValidationError as e:
            raise e.with_context("Lecture de ElectionParameters")
        return election_parameters
