import unittest

from classweek.remap import RAMADAN_SLOTS, SlotMapping, remap


class TestRemap(unittest.TestCase):
    def test_standard_slots_are_compressed(self) -> None:
        self.assertEqual(remap(8, 0, 10, 0), (8, 0, 9, 15))
        self.assertEqual(remap(10, 0, 12, 0), (9, 15, 10, 30))
        self.assertEqual(remap(12, 0, 14, 0), (10, 30, 11, 45))
        self.assertEqual(remap(14, 0, 16, 0), (11, 45, 13, 0))
        self.assertEqual(remap(16, 0, 18, 0), (13, 0, 14, 15))

    def test_unknown_range_passes_through(self) -> None:
        self.assertEqual(remap(7, 0, 9, 0), (7, 0, 9, 0))
        # same start as a slot but different length
        self.assertEqual(remap(8, 0, 11, 0), (8, 0, 11, 0))

    def test_compressed_grid_has_no_gaps(self) -> None:
        self.assertEqual(len(RAMADAN_SLOTS), 5)
        for prev, nxt in zip(RAMADAN_SLOTS, RAMADAN_SLOTS[1:]):
            self.assertEqual(prev.to_end, nxt.to_start)
            self.assertEqual(prev.from_end, nxt.from_start)

    def test_custom_table_first_match_wins(self) -> None:
        table = [
            SlotMapping((9, 0), (10, 0), (9, 0), (9, 30)),
            SlotMapping((9, 0), (10, 0), (9, 0), (9, 45)),
        ]
        self.assertEqual(remap(9, 0, 10, 0, table=table), (9, 0, 9, 30))


if __name__ == "__main__":
    unittest.main()
