import asyncio

from conduit import security


def test_hash_string_never_equals_plaintext():
    hashed = asyncio.run(security.hash_string("secret"))
    assert hashed != "secret"
    assert asyncio.run(security.string_is_a_match("secret", hashed))


def test_hash_string_is_salted():
    first = asyncio.run(security.hash_string("secret"))
    second = asyncio.run(security.hash_string("secret"))
    assert first != second


def test_string_is_a_match_rejects_wrong_password():
    hashed = asyncio.run(security.hash_string("secret"))
    assert not asyncio.run(security.string_is_a_match("Secret", hashed))


def test_string_is_a_match_handles_unknown_hash():
    assert not asyncio.run(security.string_is_a_match("secret", "plaintext-not-a-hash"))
    assert not asyncio.run(security.string_is_a_match("secret", ""))


def test_generate_token_is_opaque_and_unique():
    tokens = {asyncio.run(security.generate_token()) for _ in range(20)}
    assert len(tokens) == 20
    assert all(len(token) >= 32 for token in tokens)


def test_dummy_verify_never_matches():
    assert asyncio.run(security.dummy_verify()) is False
