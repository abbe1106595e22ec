"""Benchmarks comparing pyoseq adapters to their itertools counterparts."""

import itertools
import operator

import more_itertools as mit

import pyoseq as ps

from ._registery import bench


class Take:
    """Bounding an infinite counter."""

    @bench
    @staticmethod
    def pyoseq(size: int) -> object:
        """Take from `ps.count`."""
        return ps.count().take(size).collect()

    @bench
    @staticmethod
    def stdlib(size: int) -> object:
        """Take from `itertools.count`."""
        return list(itertools.islice(itertools.count(), size))


class Product:
    """Cartesian product of two ranges."""

    @bench
    @staticmethod
    def pyoseq(size: int) -> object:
        """First factor fastest."""
        side = range(int(size**0.5))
        return ps.product(side, side).collect()

    @bench
    @staticmethod
    def stdlib(size: int) -> object:
        """Last factor fastest."""
        side = range(int(size**0.5))
        return list(itertools.product(side, side))


class Partition:
    """Overlapping windows."""

    @bench
    @staticmethod
    def pyoseq(size: int) -> object:
        """Windows of 3, step 1."""
        return ps.partition(range(size), 3, 1).collect()

    @bench
    @staticmethod
    def stdlib(size: int) -> object:
        """`more_itertools.windowed`."""
        return list(mit.windowed(range(size), 3))


class GroupBy:
    """Runs of equal keys."""

    @bench
    @staticmethod
    def pyoseq(size: int) -> object:
        """Runs of 4."""
        return ps.groupby(range(size), lambda n: n // 4).collect()

    @bench
    @staticmethod
    def stdlib(size: int) -> object:
        """`itertools.groupby`."""
        return [list(g) for _, g in itertools.groupby(range(size), lambda n: n // 4)]


class IMap:
    """Lockstep mapping."""

    @bench
    @staticmethod
    def pyoseq(size: int) -> object:
        """Infinite left side, bounded right side."""
        return ps.imap(operator.add, ps.count(), range(size)).collect()

    @bench
    @staticmethod
    def stdlib(size: int) -> object:
        """Builtin `map` over two iterables."""
        return list(map(operator.add, itertools.count(), range(size)))
