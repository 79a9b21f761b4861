import re
import time

import pytest

from taskutil.app.core.uid import (
    RANDOM_MASK,
    RandomSourceUnavailable,
    UidGenerationError,
    UidGenerator,
    epoch_millis,
    get_uid_generator,
    random_suffix_value,
    to_base36,
)

UID_PATTERN = re.compile(r"^[0-9a-z]+$")


def _fixed_bytes(value: bytes):
    def source(n: int) -> bytes:
        assert n == 6
        return value

    return source


def test_pinned_clock_and_random_bytes_give_expected_identifier():
    generator = UidGenerator(
        random_source=_fixed_bytes(bytes([0, 0, 0, 0, 0, 1])),
        clock=lambda: 1700000000000,
    )
    assert generator.generate() == "loyw3v281"


def test_to_base36_known_values():
    assert to_base36(0) == "0"
    assert to_base36(35) == "z"
    assert to_base36(36) == "10"
    assert to_base36(1700000000000) == "loyw3v28"
    assert to_base36(2**48 - 1) == "2rrvthnxtr"


def test_to_base36_rejects_negative():
    with pytest.raises(ValueError):
        to_base36(-1)


def test_random_suffix_is_big_endian_and_masked():
    assert random_suffix_value(bytes([0, 0, 0, 0, 1, 0])) == 256
    assert random_suffix_value(bytes([0xFF] * 6)) == 2**48 - 1
    assert random_suffix_value(bytes([0xFF] * 8)) == RANDOM_MASK


def test_zero_random_bytes_encode_as_single_zero():
    generator = UidGenerator(
        random_source=_fixed_bytes(bytes(6)),
        clock=lambda: 36,
    )
    assert generator.generate() == "100"


def test_generated_identifiers_are_lowercase_base36():
    generator = UidGenerator()
    for _ in range(1000):
        assert UID_PATTERN.match(generator.generate())


def test_later_millisecond_never_sorts_before_earlier_prefix():
    ticks = iter([1700000000000, 1700000000001, 1700000035999, 1700000036000])
    generator = UidGenerator(clock=lambda: next(ticks))
    prefixes = [generator.generate()[:8] for _ in range(4)]
    assert prefixes == sorted(prefixes)


def test_tight_loop_yields_no_duplicates():
    generator = UidGenerator()
    ids = [generator.generate() for _ in range(10_000)]
    assert len(set(ids)) == len(ids)


def test_random_source_failure_is_chained():
    def broken(n: int) -> bytes:
        raise OSError("entropy pool exhausted")

    generator = UidGenerator(random_source=broken, clock=lambda: 1)
    with pytest.raises(RandomSourceUnavailable) as excinfo:
        generator.generate()
    assert isinstance(excinfo.value, UidGenerationError)
    assert isinstance(excinfo.value.__cause__, OSError)


def test_short_read_from_random_source_is_rejected():
    generator = UidGenerator(random_source=lambda n: b"\x01\x02", clock=lambda: 1)
    with pytest.raises(RandomSourceUnavailable):
        generator.generate()


def test_shared_generator_is_process_wide():
    assert get_uid_generator() is get_uid_generator()


def test_default_clock_is_epoch_millis():
    assert abs(epoch_millis() - int(time.time() * 1000)) < 1000

    generator = UidGenerator(random_source=lambda n: bytes(6))
    # a zero random value encodes as a single trailing "0"
    prefix = generator.generate()[:-1]
    assert abs(int(prefix, 36) - int(time.time() * 1000)) < 1000
