# Python Imports
import pytest

# Project Imports
from near_utils.dataclasses import KeyPair
from near_utils.errors import InvalidKeyFormatError
from near_utils.keys import derive_public_key, public_key_from_private

# RFC 8032 section 7.1, TEST 1 and TEST 2, base58 encoded
SEED_1 = "BbMQkQYZspmkytduTWvXEtc4mMURjsekJDvty2WtKeSb"
SECRET_1 = "49W385L4rePHy6PAaQUovbD2aacgN4HsKXSMeUzRg4fmwXszN91JuMFrQRj3vMDpZuRF3ZknQBuRBoWQJEfXstMw"
PUBLIC_1 = "ed25519:FVen3X669xLzsi6N2V91DoiyzHzg1uAgqiT8jZ9nS96Z"
SECRET_2 = "2Y4QjyJVZf9tTmTPP1SY9ACpFYTo7brW9iCQ8SunQht5yQ2r1U9KsVv5aMsCGnzj3NR8KG9P3NY7FKBiYbbTJ2no"
PUBLIC_2 = "ed25519:586Z7H2vpX9qNhN2T4e9Utugie3ogjbxzGaMtM3E6HR5"
# Seed of TEST 1 followed by the public key of TEST 2
MISMATCHED_SECRET = "49W385L4rePHy6PAaQUovbD2aacgN4HsKXSMeUzRg4fmmAKmRtx9Zv4guQziLvixpzbwmuov52LhLMddT2YyY2gT"


@pytest.mark.parametrize("private_key, expected", [
    (f"ed25519:{SECRET_1}", KeyPair(PUBLIC_1, SECRET_1)),
    (f"ed25519:{SECRET_2}", KeyPair(PUBLIC_2, SECRET_2)),
    (f"ED25519:{SECRET_1}", KeyPair(PUBLIC_1, SECRET_1)),
    (SECRET_1, KeyPair(PUBLIC_1, SECRET_1)),
    (f"ed25519:{SEED_1}", KeyPair(PUBLIC_1, SECRET_1)),
])
def test_derive_public_key(private_key, expected):
    assert derive_public_key(private_key) == expected


def test_public_key_from_private():
    assert public_key_from_private(f"ed25519:{SECRET_2}") == PUBLIC_2


@pytest.mark.parametrize("private_key", [
    "",
    None,
    f"secp256k1:{SECRET_1}",
    f"ed25519:{SECRET_1}:extra",
    "ed25519:0OIl",
    "ed25519:3mJr7AoUXx2Wqd",
    f"ed25519:{MISMATCHED_SECRET}",
])
def test_invalid_private_key(private_key):
    with pytest.raises(InvalidKeyFormatError):
        derive_public_key(private_key)
