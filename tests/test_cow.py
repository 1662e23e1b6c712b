"""Tests for kernel/cow.py"""

import copy
import gc

from kernel import CowPtr, HashPointSet, HyperRectDomain


class TestCowPtr:
    def test_adopts_without_copy(self):
        value = [1, 2]
        handle = CowPtr(value)
        assert handle.read() is value
        assert handle.is_unique()

    def test_copy_shares_storage(self):
        a = CowPtr([1, 2])
        b = a.copy()
        assert b.read() is a.read()
        assert a.shares_storage_with(b)
        assert a.use_count() == 2
        assert b.use_count() == 2

    def test_shallow_copy_module_shares_storage(self):
        a = CowPtr([1, 2])
        b = copy.copy(a)
        assert b.read() is a.read()
        assert a.use_count() == 2

    def test_read_never_duplicates(self):
        a = CowPtr([1, 2])
        b = a.copy()
        for _ in range(3):
            a.read()
            b.read()
        assert a.shares_storage_with(b)

    def test_write_duplicates_shared_storage(self):
        a = CowPtr([1, 2])
        b = a.copy()
        b.write().append(3)
        assert a.read() == [1, 2]
        assert b.read() == [1, 2, 3]
        assert not a.shares_storage_with(b)
        assert a.is_unique()
        assert b.is_unique()

    def test_write_on_unique_storage_does_not_copy(self):
        value = [1, 2]
        a = CowPtr(value)
        assert a.write() is value
        a.write().append(3)
        assert value == [1, 2, 3]

    def test_clones_once_per_divergence(self):
        a = CowPtr([1])
        b = a.copy()
        first = b.write()
        second = b.write()
        assert first is second

    def test_three_owners(self):
        a = CowPtr([0])
        b = a.copy()
        c = b.copy()
        assert a.use_count() == 3
        c.write().append(1)
        assert a.use_count() == 2
        assert a.shares_storage_with(b)
        assert a.read() == [0]
        assert c.read() == [0, 1]

    def test_release_on_collection(self):
        a = CowPtr([0])
        b = a.copy()
        assert a.use_count() == 2
        del b
        gc.collect()
        assert a.use_count() == 1
        # Sole owner again: writing does not duplicate
        value = a.read()
        assert a.write() is value

    def test_deepcopy_is_private(self):
        a = CowPtr([1, 2])
        b = copy.deepcopy(a)
        assert b.read() == a.read()
        assert b.read() is not a.read()
        assert a.is_unique() and b.is_unique()

    def test_point_set_storage(self):
        domain = HyperRectDomain((0, 0), (4, 4))
        a = CowPtr(HashPointSet(domain, [(0, 0), (1, 1)]))
        b = a.copy()
        b.write().erase((0, 0))
        assert a.read().contains((0, 0))
        assert not b.read().contains((0, 0))
        a.write().insert((2, 2))
        assert not b.read().contains((2, 2))
