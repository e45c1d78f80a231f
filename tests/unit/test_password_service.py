from __future__ import annotations

import logging

import pytest

from passhash.application.services.password_service import SALT_SIZE, PasswordService
from passhash.domain.errors import EntropyFailureError, MalformedHashError


class FakeHashPrimitive:
    def __init__(self, *, embedded_cost: int | None = 10, should_verify: bool = True) -> None:
        self.embedded_cost = embedded_cost
        self.should_verify = should_verify
        self.hash_calls: list[tuple[bytes, int]] = []
        self.verify_calls: list[tuple[bytes, bytes]] = []

    def hash(self, password: bytes, cost: int) -> bytes:
        self.hash_calls.append((password, cost))
        return b"hashed::" + password

    def verify(self, encoded: bytes, password: bytes) -> bool:
        self.verify_calls.append((encoded, password))
        return self.should_verify

    def extract_cost(self, encoded: bytes) -> int:
        _ = encoded
        if self.embedded_cost is None:
            raise MalformedHashError("unparseable")
        return self.embedded_cost


class FakeRandomSource:
    def __init__(self, *, payload: bytes | None = None) -> None:
        self.payload = payload
        self.sizes: list[int] = []

    def read(self, size: int) -> bytes:
        self.sizes.append(size)
        if self.payload is not None:
            return self.payload
        return bytes(range(size))


def _service(
    *,
    primitive: FakeHashPrimitive | None = None,
    random_source: FakeRandomSource | None = None,
    cost: int = 10,
) -> PasswordService:
    return PasswordService(
        primitive=primitive or FakeHashPrimitive(),
        random_source=random_source or FakeRandomSource(),
        cost=cost,
    )


def test_generate_salt_reads_sixteen_bytes_from_random_source() -> None:
    random_source = FakeRandomSource()
    service = _service(random_source=random_source)

    salt = service.generate_salt()

    assert len(salt) == SALT_SIZE == 16
    assert random_source.sizes == [16]


def test_generate_salt_rejects_short_reads() -> None:
    service = _service(random_source=FakeRandomSource(payload=b"short"))

    with pytest.raises(EntropyFailureError):
        service.generate_salt()


def test_hash_password_passes_configured_cost_to_primitive() -> None:
    primitive = FakeHashPrimitive()
    service = _service(primitive=primitive, cost=12)

    password_hash = service.hash_password(b"pw")

    assert password_hash == b"hashed::pw"
    assert primitive.hash_calls == [(b"pw", 12)]


def test_hash_password_from_string_encodes_utf8() -> None:
    primitive = FakeHashPrimitive()
    service = _service(primitive=primitive)

    service.hash_password_from_string("pässword")

    assert primitive.hash_calls == [("pässword".encode("utf-8"), 10)]


def test_hash_password_rejects_wrong_input_types() -> None:
    service = _service()

    with pytest.raises(TypeError):
        service.hash_password("text")  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        service.hash_password_from_string(b"bytes")  # type: ignore[arg-type]


def test_verify_password_delegates_to_primitive() -> None:
    primitive = FakeHashPrimitive(should_verify=False)
    service = _service(primitive=primitive)

    assert service.verify_password("$stored", b"pw") is False
    assert primitive.verify_calls == [(b"$stored", b"pw")]


def test_verify_password_returns_false_for_non_hash_input() -> None:
    primitive = FakeHashPrimitive(should_verify=True)
    service = _service(primitive=primitive)

    assert service.verify_password(None, b"pw") is False  # type: ignore[arg-type]
    assert service.verify_password("häsh", b"pw") is False
    assert primitive.verify_calls == []


@pytest.mark.parametrize(
    ("embedded_cost", "expected"),
    [(9, True), (10, False), (11, False)],
)
def test_needs_rehash_compares_embedded_cost_to_target(
    embedded_cost: int,
    expected: bool,
) -> None:
    service = _service(primitive=FakeHashPrimitive(embedded_cost=embedded_cost), cost=10)

    assert service.needs_rehash(b"stored") is expected


def test_needs_rehash_treats_unparseable_hash_as_stale(caplog: pytest.LogCaptureFixture) -> None:
    service = _service(primitive=FakeHashPrimitive(embedded_cost=None))

    with caplog.at_level(logging.WARNING, logger="passhash"):
        assert service.needs_rehash(b"garbage") is True

    assert "password_rehash_check_unparseable" in caplog.text


def test_services_with_different_costs_coexist() -> None:
    primitive = FakeHashPrimitive(embedded_cost=11)
    weak = _service(primitive=primitive, cost=10)
    strong = _service(primitive=primitive, cost=12)

    assert weak.cost == 10
    assert strong.cost == 12
    assert weak.needs_rehash(b"stored") is False
    assert strong.needs_rehash(b"stored") is True


def test_logs_never_contain_plaintext(caplog: pytest.LogCaptureFixture) -> None:
    service = _service(primitive=FakeHashPrimitive(embedded_cost=4), cost=10)

    with caplog.at_level(logging.DEBUG, logger="passhash"):
        service.hash_password(b"top-secret-value")
        service.verify_password(b"stored", b"top-secret-value")
        service.needs_rehash(b"stored")

    assert "top-secret-value" not in caplog.text
