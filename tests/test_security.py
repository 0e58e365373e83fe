from messagely.core.security import get_password_hash, verify_password, pwd_context


def test_hash_is_not_plaintext():
    hashed = get_password_hash("pw123")
    assert hashed != "pw123"
    assert hashed.startswith("$2")


def test_hash_is_salted():
    assert get_password_hash("pw123") != get_password_hash("pw123")


def test_verify_password():
    hashed = get_password_hash("pw123")
    assert verify_password("pw123", hashed) is True
    assert verify_password("pw124", hashed) is False


def test_work_factor_from_settings():
    hashed = get_password_hash("pw123")
    # $2b$04$...  conftest 把 BCRYPT_WORK_FACTOR 设成 4
    assert hashed.split("$")[2] == "04"
    assert pwd_context.identify(hashed) == "bcrypt"
