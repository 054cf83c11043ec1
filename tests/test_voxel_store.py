import unittest

from core.voxel_store import VoxelGridStore
from domain.models import GridCoordinate


class TestMembership(unittest.TestCase):
    def setUp(self):
        self.store = VoxelGridStore(34, 22)

    def test_add_is_idempotent(self):
        self.assertTrue(self.store.add((3, 4)))
        version = self.store.version
        snapshot = self.store.voxels
        self.assertFalse(self.store.add((3, 4)))
        self.assertEqual(self.store.voxels, snapshot)
        self.assertEqual(self.store.version, version)

    def test_remove(self):
        self.store.add((3, 4))
        self.assertTrue(self.store.remove(GridCoordinate(3, 4)))
        self.assertFalse(self.store.remove((3, 4)))
        self.assertNotIn((3, 4), self.store)
        self.assertEqual(len(self.store), 0)

    def test_clear(self):
        self.assertFalse(self.store.clear())
        self.store.add((1, 1))
        self.store.add((2, 2))
        self.assertTrue(self.store.clear())
        self.assertEqual(self.store.voxels, frozenset())

    def test_voxels_is_a_copy(self):
        self.store.add((1, 1))
        view = self.store.voxels
        self.store.add((2, 2))
        self.assertEqual(view, {(1, 1)})


class TestDrag(unittest.TestCase):
    def setUp(self):
        self.store = VoxelGridStore(34, 22)

    def test_begin_does_not_touch_voxels(self):
        self.store.add((5, 5))
        version = self.store.version
        self.store.drag_begin((0.3, 0.3))
        self.assertTrue(self.store.is_dragging)
        self.assertEqual(self.store.version, version)
        self.assertEqual(self.store.voxels, {(5, 5)})

    def test_update_is_incremental(self):
        self.store.drag_begin((0.3, 0.3))
        self.assertTrue(self.store.drag_update((0.4, 0.3)))
        self.assertTrue(self.store.drag_update((0.4, 0.5)))
        dx, dy = self.store.drag_offset
        self.assertAlmostEqual(dx, 0.1)
        self.assertAlmostEqual(dy, 0.2)

    def test_update_signals_change_even_without_motion(self):
        self.store.drag_begin((0.3, 0.3))
        version = self.store.version
        self.assertTrue(self.store.drag_update((0.3, 0.3)))
        self.assertEqual(self.store.version, version + 1)

    def test_update_without_session_is_ignored(self):
        self.assertFalse(self.store.drag_update((0.5, 0.5)))
        self.assertEqual(self.store.drag_offset, (0.0, 0.0))

    def test_commit_telescopes_to_net_displacement(self):
        self.store.add((10, 10))
        p0, p1, p2 = (0.2, 0.2), (0.35, 0.1), (0.3, 0.3)
        self.store.drag_begin(p0)
        self.store.drag_update(p1)
        self.store.drag_update(p2)
        self.assertTrue(self.store.drag_commit())
        # round(0.1 * 34) = 3, round(0.1 * 22) = 2
        self.assertEqual(self.store.voxels, {(13, 12)})
        self.assertFalse(self.store.is_dragging)
        self.assertEqual(self.store.drag_offset, (0.0, 0.0))

    def test_commit_drops_cells_pushed_off_grid(self):
        self.store.add((32, 5))
        self.store.add((0, 5))
        self.store.drag_begin((0.5, 0.5))
        self.store.drag_update((0.5 + 2 / 34, 0.5))
        self.store.drag_commit()
        self.assertEqual(self.store.voxels, {(2, 5)})

    def test_commit_with_sub_cell_offset_keeps_set_but_flushes(self):
        self.store.add((5, 5))
        self.store.drag_begin((0.5, 0.5))
        self.store.drag_update((0.5 + 0.01, 0.5))
        version = self.store.version
        self.assertTrue(self.store.drag_commit())
        self.assertEqual(self.store.voxels, {(5, 5)})
        self.assertEqual(self.store.version, version + 1)
        self.assertEqual(self.store.drag_offset, (0.0, 0.0))

    def test_commit_without_session(self):
        self.assertFalse(self.store.drag_commit())

    def test_discard(self):
        self.store.add((5, 5))
        self.store.drag_begin((0.5, 0.5))
        self.assertFalse(self.store.drag_discard())  # no preview shown yet

        self.store.drag_begin((0.5, 0.5))
        self.store.drag_update((0.9, 0.5))
        self.assertTrue(self.store.drag_discard())
        self.assertEqual(self.store.voxels, {(5, 5)})
        self.assertFalse(self.store.is_dragging)
        self.assertEqual(self.store.drag_offset, (0.0, 0.0))


if __name__ == '__main__':
    unittest.main()
