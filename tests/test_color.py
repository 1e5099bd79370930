import os
import random
import sys
import threading
import unittest
from dataclasses import FrozenInstanceError

# Ensure src is in path
sys.path.append(os.path.join(os.path.dirname(__file__), "../src"))

from PySide6.QtGui import QColor

from color import BLACK, WHITE, Color, ColorAllocator, ColorSpaceExhaustedError


class TestColor(unittest.TestCase):
    def test_initialization(self):
        c = Color(1, 2, 3)
        self.assertEqual(c.rgb, (1, 2, 3))
        self.assertEqual(c.a, 255)

    def test_immutability(self):
        c = Color(1, 2, 3)
        with self.assertRaises(FrozenInstanceError):
            c.r = 4

    def test_equality_includes_alpha(self):
        self.assertEqual(Color(1, 2, 3, 4), Color(1, 2, 3, 4))
        self.assertNotEqual(Color(1, 2, 3, 4), Color(1, 2, 3, 5))

    def test_invalid_channels(self):
        with self.assertRaises(ValueError):
            Color(256, 0, 0)
        with self.assertRaises(ValueError):
            Color(0, -1, 0)
        with self.assertRaises(ValueError):
            Color(0, 0, 0, 300)

    def test_bool_channels_rejected(self):
        with self.assertRaises(ValueError):
            Color(True, 0, 0)
        with self.assertRaises(ValueError):
            Color(0, 0, 0, False)

    def test_to_hex(self):
        self.assertEqual(Color(255, 0, 16, 128).to_hex(), "#ff001080")
        self.assertEqual(WHITE.to_hex(), "#ffffffff")
        self.assertEqual(BLACK.to_hex(), "#000000ff")

    def test_from_string(self):
        self.assertEqual(Color.from_string("red"), Color(255, 0, 0))
        self.assertEqual(Color.from_string("#00ff00"), Color(0, 255, 0))
        self.assertEqual(Color.from_string("#0000ff80"), Color(0, 0, 255, 128))

    def test_from_string_invalid(self):
        with self.assertRaises(ValueError):
            Color.from_string("not-a-color")

    def test_from_string_none_channels(self):
        self.assertEqual(Color.from_string("rgb(none 0 0)"), Color(0, 0, 0))

    def test_qcolor_conversion(self):
        c = Color(10, 20, 30, 40)
        qc = c.to_qcolor()
        self.assertEqual((qc.red(), qc.green(), qc.blue(), qc.alpha()), (10, 20, 30, 40))
        self.assertEqual(Color.from_qcolor(QColor(10, 20, 30, 40)), c)


class TestColorAllocator(unittest.TestCase):
    def test_allocate_unique(self):
        allocator = ColorAllocator(rng=random.Random(1234))
        colors = [allocator.allocate() for _ in range(2000)]
        self.assertEqual(len({c.rgb for c in colors}), 2000)
        self.assertEqual(len(allocator), 2000)

    def test_alpha_is_fixed(self):
        allocator = ColorAllocator(alpha=100)
        self.assertEqual(allocator.alpha, 100)
        for _ in range(10):
            self.assertEqual(allocator.allocate().a, 100)

    def test_invalid_alpha(self):
        with self.assertRaises(ValueError):
            ColorAllocator(alpha=256)

    def test_resamples_on_collision(self):
        class ScriptedRandom(random.Random):
            def __init__(self, values):
                super().__init__()
                self._values = list(values)

            def randrange(self, *args, **kwargs):
                return self._values.pop(0)

        # Same triple twice, then a new one
        rng = ScriptedRandom([1, 2, 3, 1, 2, 3, 4, 5, 6])
        allocator = ColorAllocator(rng=rng)
        self.assertEqual(allocator.allocate().rgb, (1, 2, 3))
        self.assertEqual(allocator.allocate().rgb, (4, 5, 6))

    def test_reserve(self):
        allocator = ColorAllocator()
        red = Color(255, 0, 0)
        self.assertTrue(allocator.reserve(red))
        self.assertFalse(allocator.reserve(red))
        # Alpha is not part of the uniqueness
        self.assertFalse(allocator.reserve(Color(255, 0, 0, 10)))
        self.assertIn(red, allocator)
        self.assertEqual(allocator.used_colors(), {(255, 0, 0)})

    def test_exhaustion(self):
        class TinyAllocator(ColorAllocator):
            COLOR_SPACE_SIZE = 3

        allocator = TinyAllocator()
        for _ in range(3):
            allocator.allocate()
        with self.assertRaises(ColorSpaceExhaustedError):
            allocator.allocate()
        self.assertEqual(len(allocator), 3)

    def test_fresh_allocators_are_independent(self):
        a1 = ColorAllocator(rng=random.Random(7))
        a2 = ColorAllocator(rng=random.Random(7))
        self.assertEqual(a1.allocate(), a2.allocate())

    def test_concurrent_allocations(self):
        allocator = ColorAllocator()
        threads_count = 8
        per_thread = 500
        results = [[] for _ in range(threads_count)]
        barrier = threading.Barrier(threads_count)

        def worker(idx):
            barrier.wait()
            for _ in range(per_thread):
                results[idx].append(allocator.allocate())

        threads = [threading.Thread(target=worker, args=(i,)) for i in range(threads_count)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        colors = [c.rgb for r in results for c in r]
        self.assertEqual(len(colors), threads_count * per_thread)
        self.assertEqual(len(set(colors)), threads_count * per_thread)
        self.assertEqual(len(allocator), threads_count * per_thread)


if __name__ == "__main__":
    unittest.main()
