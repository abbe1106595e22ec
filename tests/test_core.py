"""Tests for the shared helpers: options, element types, configuration and deprecations."""

import warnings
from collections.abc import Iterator

import pytest

import pyoseq as ps
from pyoseq._core import deprecated, eltype_of, seq_repr


class TestOption:
    """Tests for `Option`."""

    def test_some(self) -> None:  # noqa: D102
        value = ps.Some(3)
        assert value.is_some()
        assert not value.is_none()
        assert value.unwrap() == 3
        assert value.map(str) == ps.Some("3")
        assert value.and_then(lambda n: ps.NONE if n else ps.Some(n)) is ps.NONE

    def test_none(self) -> None:  # noqa: D102
        assert ps.NONE.is_none()
        assert ps.NONE.unwrap_or(0) == 0
        assert ps.NONE.unwrap_or_else(lambda: 5) == 5
        assert ps.NONE.map(str) is ps.NONE
        assert repr(ps.NONE) == "NONE"
        with pytest.raises(ps.OptionUnwrapError):
            ps.NONE.unwrap()
        with pytest.raises(ps.OptionUnwrapError, match="no length"):
            ps.NONE.expect("no length")


class TestTypeJoin:
    """Tests for element type joins."""

    class Base: ...

    class Left(Base): ...

    class Right(Base): ...

    def test_classes(self) -> None:
        """The join is the closest common base class."""
        assert ps.typejoin(self.Left, self.Right) is self.Base
        assert ps.typejoin(self.Left, self.Left) is self.Left
        assert ps.typejoin(bool, int) is int
        assert ps.typejoin(int, str) is object

    def test_tuples(self) -> None:
        """Tuples of the same arity are joined position-wise."""
        assert ps.typejoin((bool, self.Left), (int, self.Right)) == (int, self.Base)
        assert ps.typejoin((int,), (int, int)) is tuple
        assert ps.typejoin((int,), int) is tuple
        assert ps.typejoin(int, (int,)) is object

    def test_runtime_values(self) -> None:
        """Element types of plain data come from the runtime types of the values."""
        assert eltype_of([1, True]) is int
        assert eltype_of([]) is object


class TestConfig:
    """Tests for the display configuration."""

    @pytest.fixture(autouse=True)
    def restore(self) -> Iterator[None]:  # noqa: D102
        previous = ps.get_config()
        yield
        ps.set_config(
            preview_items=previous.preview_items,
            preview_width=previous.preview_width,
            preview_depth=previous.preview_depth,
        )

    def test_set_returns_previous(self) -> None:
        """Changing the config hands back the old one."""
        before = ps.get_config()
        previous = ps.set_config(preview_items=2)
        assert previous == before
        assert ps.get_config().preview_items == 2
        assert ps.count().preview() == "[0, 1, ...]"

    def test_zero_items(self) -> None:
        """With no item allowed, only the truncation marker remains."""
        ps.set_config(preview_items=0)
        assert ps.count().preview() == "[...]"
        assert ps.into_seq([]).preview() == "[]"

    def test_invalid_values_are_rejected(self) -> None:
        """Invalid values leave the active config untouched."""
        before = ps.get_config()
        with pytest.raises(ValueError, match="preview_items"):
            ps.set_config(preview_items=-1)
        with pytest.raises(TypeError):
            ps.set_config(unknown=1)
        assert ps.get_config() == before

    def test_width_wraps_long_previews(self) -> None:
        """The width is forwarded to pprint."""
        ps.set_config(preview_width=20)
        assert "\n" in ps.repeated("abcdef").preview()


def test_seq_repr() -> None:
    """Formatting marks truncated previews."""
    assert seq_repr([1, 2], truncated=False) == "[1, 2]"
    assert seq_repr([1, 2], truncated=True) == "[1, 2, ...]"
    assert seq_repr([], truncated=True) == "[...]"


def test_deprecated_decorator() -> None:
    """The decorator warns with the replacement name and keeps the behaviour."""

    @deprecated("new_name")
    def old_name(x: int) -> int:
        return x + 1

    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        assert old_name(1) == 2
    assert len(caught) == 1
    assert caught[0].category is DeprecationWarning
    assert "`old_name` is deprecated, use `new_name` instead." in str(caught[0].message)
    assert old_name.__name__ == "old_name"


def test_structural_repr() -> None:
    """Descriptors show their configuration without traversing anything."""
    assert repr(ps.take(ps.count(), 2)) == "Take(seq=Count(start_at=0, step_by=1), n=2)"
    assert repr(ps.cycle([])) == "Cycle(seq=Items(data=[]))"


def test_descriptors_are_frozen() -> None:
    """Descriptors cannot be reconfigured after construction."""
    seq = ps.take([1, 2, 3], 2)
    with pytest.raises(AttributeError):
        seq.n = 3  # type: ignore[misc]


def test_public_names_are_sorted_and_exported() -> None:
    """`__all__` lists constants, then classes, then functions, each sorted, and every name is importable."""

    def _kind(name: str) -> tuple[int, str]:
        if name.isupper():
            return 0, name
        return (1 if name[0].isupper() else 2), name

    assert ps.__all__ == sorted(ps.__all__, key=_kind)
    assert all(hasattr(ps, name) for name in ps.__all__)
