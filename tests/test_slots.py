"""Tests for slot usage in pyoseq classes."""

import pyoseq as ps


def _check_slots(obj: object) -> bool:
    try:
        _x = obj.__dict__
        return False  # noqa: TRY300
    except AttributeError:
        return True


def test_slots() -> None:  # noqa: D103
    source = ps.into_seq([1, 2, 3])
    assert _check_slots(source)
    assert _check_slots(ps.into_seq(iter([1])))
    assert _check_slots(ps.count())
    assert _check_slots(ps.repeated(1))
    assert _check_slots(ps.repeated(1, 2))
    assert _check_slots(ps.repeatedly(int))
    assert _check_slots(ps.repeatedly(int, 2))
    assert _check_slots(ps.iterate(abs, 1))
    assert _check_slots(source.take(1))
    assert _check_slots(source.takestrict(1))
    assert _check_slots(source.drop(1))
    assert _check_slots(source.cycle())
    assert _check_slots(source.chain(source))
    assert _check_slots(source.product(source))
    assert _check_slots(source.distinct())
    assert _check_slots(source.partition(2))
    assert _check_slots(source.groupby(bool))
    assert _check_slots(source.imap(abs))
    assert _check_slots(ps.subsets(source))
    assert _check_slots(ps.SeenMemo())
    assert _check_slots(ps.Some(42))
    assert _check_slots(ps.NONE)
    assert _check_slots(ps.get_config())
