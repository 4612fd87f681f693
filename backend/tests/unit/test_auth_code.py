import random

from netremote.services.auth_code import AUTH_CODE_MAX, default_auth_code


def test_default_code_in_range():
    for _ in range(500):
        assert 0 <= default_auth_code() <= AUTH_CODE_MAX


def test_default_code_uses_module_random():
    random.seed(1234)
    first = default_auth_code()
    random.seed(1234)
    assert default_auth_code() == first
