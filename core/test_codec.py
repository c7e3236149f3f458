import io

import pytest

from codec import biguint_from_be_bytes, biguint_from_str, biguint_to_be_bytes, biguint_to_str
from election_parameters import ElectionParameters
from errors import CodecError, CodecFailure
from guardian_keys import GuardianPublicKey, GuardianSecretKey
from joint_public_key import JointElectionPublicKey


def test_biguint_text_form():
    assert biguint_to_str(0) == "base16:0"
    assert biguint_to_str(255) == "base16:FF"
    assert biguint_to_str(2 ** 64) == "base16:10000000000000000"

    for value in (0, 1, 0xABCDEF, 2 ** 4096 - 1):
        assert biguint_from_str(biguint_to_str(value)) == value


@pytest.mark.parametrize("text", [
    "FF",             # préfixe manquant
    "base16:",        # pas de chiffres
    "base16:ff",      # minuscules
    "base16:00FF",    # zéros de tête
    "base16:-1",
    "base10:255",
])
def test_biguint_text_form_rejects_non_canonical(text):
    with pytest.raises(ValueError):
        biguint_from_str(text)


def test_biguint_to_str_rejects_negative():
    with pytest.raises(ValueError):
        biguint_to_str(-1)


def test_fixed_length_bytes():
    assert biguint_to_be_bytes(0, 4) == b"\x00\x00\x00\x00"
    assert biguint_to_be_bytes(0x0102, 4) == b"\x00\x00\x01\x02"
    assert biguint_from_be_bytes(b"\x00\x00\x01\x02", 4) == 0x0102

    with pytest.raises(ValueError):
        biguint_to_be_bytes(2 ** 32, 4)
    with pytest.raises(ValueError):
        biguint_from_be_bytes(b"\x01\x02", 4)


def test_canonical_json_has_trailing_newline():
    joint_public_key = JointElectionPublicKey(joint_election_public_key=0x1F)

    assert joint_public_key.to_json() == '{\n  "joint_election_public_key": "base16:1F"\n}\n'
    assert joint_public_key.to_bytes() == joint_public_key.to_json().encode("utf-8")


def test_write_to_stream():
    joint_public_key = JointElectionPublicKey(joint_election_public_key=4)
    stream = io.BytesIO()

    joint_public_key.write_to(stream)

    assert stream.getvalue() == joint_public_key.to_bytes()


@pytest.mark.parametrize("data", [
    "",
    "not json",
    '{"joint_election_public_key": 4}',
    '{"joint_election_public_key": "base16:4", "extra": 1}',
    '{}',
])
def test_decode_rejects_malformed(data, toy_election_parameters):
    with pytest.raises(CodecError) as excinfo:
        JointElectionPublicKey.from_json_validated(data, toy_election_parameters)

    assert excinfo.value.kind is CodecFailure.MALFORMED
    assert excinfo.value.artifact == "JointElectionPublicKey"


@pytest.mark.parametrize("replacement", [
    ('"n": 3', '"n": "3"'),
    ('"k": 2', '"k": true'),
    ('"k": 2', '"k": 2.0'),
    ('"p_bits_total": 11', '"p_bits_total": "11"'),
])
def test_plain_integers_must_be_json_integers(replacement, toy_election_parameters):
    data = toy_election_parameters.to_json()
    assert replacement[0] in data

    with pytest.raises(CodecError) as excinfo:
        ElectionParameters.from_bytes(data.replace(*replacement))

    assert excinfo.value.kind is CodecFailure.MALFORMED


def test_decoded_form_re_encodes_identically(toy_election_parameters):
    data = toy_election_parameters.to_json()

    assert ElectionParameters.from_bytes(data).to_json() == data


@pytest.mark.parametrize("model", [GuardianPublicKey, GuardianSecretKey, JointElectionPublicKey])
def test_key_types_are_only_read_through_validation(model):
    assert not hasattr(model, "parse_json")
    assert hasattr(model, "from_json_validated")
