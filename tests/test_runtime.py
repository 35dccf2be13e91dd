import pytest

from riyalex.runtime import Arena, run_main


def test_alloc_returns_zeroed_bytes():
    arena = Arena()
    buf = arena.alloc(10)
    assert len(buf) == 10
    assert all(b == 0 for b in buf)


@pytest.mark.parametrize(
    "method, itemsize",
    [("alloc_i8", 1), ("alloc_i16", 2), ("alloc_i32", 4), ("alloc_i64", 8)],
)
def test_typed_allocations(method, itemsize):
    arena = Arena()
    buf = getattr(arena, method)(5)
    assert len(buf) == 5
    assert buf.itemsize == itemsize
    assert list(buf) == [0] * 5


def test_arena_counts_allocations():
    arena = Arena()
    arena.alloc(1)
    arena.alloc_i32(2)
    assert len(arena) == 2


def test_destroy_releases_buffers():
    arena = Arena()
    buf = arena.alloc_i16(4)
    arena.destroy()
    assert len(buf) == 0
    assert len(arena) == 0


def test_alloc_after_destroy_fails():
    arena = Arena()
    arena.destroy()
    with pytest.raises(RuntimeError):
        arena.alloc(1)


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        Arena().alloc_i64(-1)


def test_context_manager_destroys():
    with Arena() as arena:
        buf = arena.alloc(3)
        assert len(buf) == 3
    assert len(buf) == 0


def test_run_main_passes_arguments_and_returns_code():
    seen = {}

    def entry(argv, argc, arena):
        seen["argv"] = list(argv)
        seen["argc"] = argc
        seen["buf"] = arena.alloc(4)
        return argc

    code = run_main(entry, ["prog", "x"])
    assert code == len(["prog", "x"])
    assert seen["argv"] == ["prog", "x"]
    assert len(seen["buf"]) == 0