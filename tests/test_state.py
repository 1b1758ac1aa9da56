# Python Imports
import pytest

# Project Imports
from near_utils.state import format_near_amount, has_deployed_code, is_valid_account_id


class TestHasDeployedCode:
    def test_no_contract(self):
        assert has_deployed_code({"code_hash": "11111111111111111111111111111111"}) is False

    def test_contract_fingerprint(self):
        assert has_deployed_code({"code_hash": "abcdef0123456789"}) == "abcdef"

    def test_short_hash(self):
        assert has_deployed_code({"code_hash": "abc"}) == "abc"

    def test_missing_code_hash(self):
        with pytest.raises(KeyError):
            has_deployed_code({"amount": "0"})


@pytest.mark.parametrize("amount, frac_digits, expected", [
    ("0", 24, "0"),
    ("1", 24, "0.000000000000000000000001"),
    ("1000000000000000000000000", 24, "1"),
    ("1234500000000000000000000000", 24, "1,234.5"),
    (10 ** 30, 24, "1,000,000"),
    ("1500000000000000000000000", 0, "2"),
    ("1449999999999999999999999", 1, "1.4"),
    ("1450000000000000000000000", 1, "1.5"),
    ("999999999999999999999999", 5, "1"),
])
def test_format_near_amount(amount, frac_digits, expected):
    assert format_near_amount(amount, frac_digits) == expected


@pytest.mark.parametrize("amount, frac_digits", [("-1", 24), ("1", 25), ("1", -1)])
def test_format_near_amount_rejects(amount, frac_digits):
    with pytest.raises(ValueError):
        format_near_amount(amount, frac_digits)


@pytest.mark.parametrize("account_id, valid", [
    ("alice.testnet", True),
    ("app-1_beta.alice.near", True),
    ("ab", True),
    ("a" * 64, True),
    ("98793cd91a3f870fb126f66285808c7e094afcfc4eda8a970f6648cdf0dbd6de", True),
    ("a", False),
    ("a" * 65, False),
    ("Alice.testnet", False),
    ("alice..testnet", False),
    ("-alice", False),
    ("alice_", False),
    ("alice@near", False),
    (None, False),
])
def test_is_valid_account_id(account_id, valid):
    assert is_valid_account_id(account_id) is valid
