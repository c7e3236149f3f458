# Paramètres globaux du noyau cryptographique de la cérémonie des clés

# Nombre de tours de Miller-Rabin : probabilité de faux positif <= 4^-64 = 2^-128
PRIMALITY_MR_ITERATIONS = 64

# Taille recommandée de la graine du CSPRNG (octets tirés de l'OS)
CSPRNG_SEED_BYTES = 64

# Séparation de domaine du CSPRNG
CSPRNG_DOMAIN = b"eg_core.csprng.v1"

# Les indices de gardiens, n et k tiennent sur 16 bits
GUARDIAN_INDEX_MAX = 0xFFFF

# Forme textuelle canonique des grands entiers
BIGUINT_TEXT_PREFIX = "base16:"

# Indentation du JSON canonique
JSON_INDENT = 2
