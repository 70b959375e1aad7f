import pytest

from raytracer.bench import (
    add_arrays,
    cpu_count,
    describe_arrays,
    flatten,
    populate,
    populate_threaded,
    random_test_vector,
    time_function,
)
from raytracer.vec3 import Vec3


def test_time_function_without_result_returns_elapsed():
    calls = []
    elapsed = time_function(calls.append, 5)
    assert calls == [5]
    assert isinstance(elapsed, float) and elapsed >= 0.0


def test_time_function_with_result_returns_pair():
    result, elapsed = time_function(max, 3, 9)
    assert result == 9
    assert elapsed >= 0.0


def test_time_function_passes_keywords():
    result, _ = time_function(sorted, [3, 1, 2], reverse=True)
    assert result == [3, 2, 1]


def test_random_test_vector_components_are_whole_and_bounded():
    for _ in range(200):
        v = random_test_vector()
        for c in v:
            assert 0.0 <= c <= 101.0
            assert c == int(c)


def test_populate_fills_only_the_range():
    zero = Vec3()
    vectors = [zero] * 10
    sentinel = Vec3(-1, -1, -1)
    vectors[0] = sentinel
    vectors[9] = sentinel
    populate(vectors, 1, 9)
    assert vectors[0] == sentinel and vectors[9] == sentinel
    assert all(all(0 <= c <= 101 for c in v) for v in vectors[1:9])


@pytest.mark.parametrize("threads", [1, 3, 8])
def test_populate_threaded_fills_everything(threads):
    marker = Vec3(-5, -5, -5)
    vectors = [marker] * 25
    populate_threaded(25, threads, vectors)
    assert marker not in vectors
    assert len(vectors) == 25


def test_populate_threaded_rejects_zero_threads():
    with pytest.raises(ValueError):
        populate_threaded(10, 0, [Vec3()] * 10)


def test_cpu_count_is_positive():
    assert cpu_count() >= 1


def test_flatten_orders_components():
    assert flatten([Vec3(1, 2, 3), Vec3(4, 5, 6)]) == [1, 2, 3, 4, 5, 6]
    assert flatten([]) == []


def test_add_arrays_sums_elementwise():
    a = [Vec3(1, 2, 3), Vec3(0.5, 0, -1)]
    b = [Vec3(10, 20, 30), Vec3(0.5, 1, 1)]
    assert add_arrays(a, b) == [Vec3(11, 22, 33), Vec3(1, 1, 0)]


def test_add_arrays_is_commutative():
    a = [random_test_vector() for _ in range(7)]
    b = [random_test_vector() for _ in range(7)]
    assert add_arrays(a, b) == add_arrays(b, a)


def test_add_arrays_length_mismatch():
    with pytest.raises(ValueError):
        add_arrays([Vec3()], [])


def test_describe_arrays_skips_zero_c():
    a = [Vec3(1, 2, 3)] * 12
    b = [Vec3(4, 5, 6)] * 12
    c = [Vec3()] * 12
    text = describe_arrays(a, b, c)
    assert "First 10 elements: A" in text
    assert "A0[1, 2, 3]" in text
    assert "B10[4, 5, 6]" in text
    assert "A11" not in text
    assert "C0" not in text


def test_describe_arrays_includes_nonzero_c():
    a = [Vec3(1, 2, 3)] * 3
    b = [Vec3(4, 5, 6)] * 3
    c = add_arrays(a, b)
    text = describe_arrays(a, b, c)
    assert "C2[5, 7, 9]" in text
    assert text.count("First 10 elements") == 3