import random

AUTH_CODE_MAX = 99999


def default_auth_code() -> int:
    """Initial 5-digit code offered before the user has saved one."""
    return random.randint(0, AUTH_CODE_MAX)
