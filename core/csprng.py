"""
Générateur pseudo-aléatoire cryptographique déterministe.

La graine (octets déjà collectés par l'appelant) est absorbée par SHAKE256
derrière un préfixe de séparation de domaine, puis la sortie est lue en
continu. Chaque tirage fait avancer l'état : une instance ne doit pas être
partagée entre threads sans synchronisation.
"""
from Crypto.Hash import SHAKE256

from config import CSPRNG_DOMAIN


class Csprng:
    def __init__(self, seed: bytes):
        """
        Initialise le générateur

        Args:
            seed: Graine, idéalement CSPRNG_SEED_BYTES octets tirés de l'OS

        Raises:
            TypeError: Si la graine n'est pas une suite d'octets
        """
        if not isinstance(seed, (bytes, bytearray)):
            raise TypeError("La graine doit être des octets")
        self._xof = SHAKE256.new()
        self._xof.update(CSPRNG_DOMAIN)
        self._xof.update(len(seed).to_bytes(8, "big"))
        self._xof.update(bytes(seed))

    def read(self, length: int) -> bytes:
        """Renvoie `length` octets (compatible avec les `randfunc` de pycryptodome)"""
        return self._xof.read(length)

    def next_u64(self) -> int:
        return int.from_bytes(self.read(8), "big")

    def next_bits(self, bits: int) -> int:
        """Entier uniforme dans [0, 2^bits)"""
        if bits <= 0:
            return 0
        value = int.from_bytes(self.read((bits + 7) // 8), "big")
        return value >> (-bits % 8)

    def next_biguint_lt(self, bound: int) -> int:
        """
        Entier uniforme dans [0, bound), par rejet

        Raises:
            ValueError: Si bound <= 0
        """
        if bound <= 0:
            raise ValueError("La borne doit être strictement positive")
        bits = (bound - 1).bit_length()
        while True:
            candidate = self.next_bits(bits)
            if candidate < bound:
                return candidate

    def next_biguint_range(self, start: int, stop: int) -> int:
        """Entier uniforme dans [start, stop)"""
        if not start < stop:
            raise ValueError("Intervalle vide")
        return start + self.next_biguint_lt(stop - start)
