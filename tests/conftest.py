# Python Imports
import pytest

# Project Imports
from tests.helpers import write_key_file


@pytest.fixture
def credential_store(tmp_path):
    root = tmp_path / "near-credentials"
    write_key_file(root / "default" / "alice.json")
    write_key_file(root / "default" / "bob.json")
    write_key_file(root / "other" / "carol.json")
    return root
