from junglecore.statics import UUIDGenerator, gen_uuid


def test_generator_starts_at_zero_and_counts_up():
    gen = UUIDGenerator()
    assert [gen.generate() for _ in range(4)] == [0, 1, 2, 3]


def test_generators_are_independent():
    first = UUIDGenerator()
    second = UUIDGenerator()
    first.generate()
    first.generate()
    assert second.generate() == 0
    assert first.next_uuid == 2


def test_custom_start():
    gen = UUIDGenerator(start=100)
    assert gen.generate() == 100
    assert gen.generate() == 101


def test_wraps_at_32_bits():
    gen = UUIDGenerator(start=0xFFFFFFFF)
    assert gen.generate() == 0xFFFFFFFF
    assert gen.generate() == 0


def test_shared_generator_is_sequential():
    a = gen_uuid()
    b = gen_uuid()
    assert b == (a + 1) & 0xFFFFFFFF


def test_shared_generator_yields_unique_ids():
    ids = [gen_uuid() for _ in range(50)]
    assert len(set(ids)) == len(ids)