"""CurveStore: tope de una curva, click degenerado, punto pendiente y clear."""

from __future__ import annotations

import unittest

from rce.core.curve_store import CurveStore
from rce.core.models import AwaitingSecondPoint, ControlPointId, CurveEditing, EditorPhase, Idle
from rce.geom import Point
from rce.utils.errors import RceStateError


class TestCurveStore(unittest.TestCase):
    def setUp(self) -> None:
        self.store = CurveStore()

    def test_starts_idle(self) -> None:
        self.assertIsInstance(self.store.state, Idle)
        self.assertEqual(self.store.phase, EditorPhase.IDLE)
        self.assertFalse(self.store.has_pending_point())
        self.assertIsNone(self.store.get_curve())

    def test_commit_derives_mid(self) -> None:
        curve = self.store.commit_curve(Point(0, 0), Point(10, 0))
        self.assertIsNotNone(curve)
        self.assertEqual(curve.mid, Point(5, 0))
        self.assertIs(self.store.get_curve(), curve)
        self.assertEqual(self.store.phase, EditorPhase.CURVE_EDITING)

    def test_degenerate_commit(self) -> None:
        self.assertIsNone(self.store.commit_curve(Point(5, 5), Point(5, 5)))
        self.assertIsNone(self.store.get_curve())

    def test_second_commit_is_rejected(self) -> None:
        first = self.store.commit_curve(Point(0, 0), Point(10, 0))
        self.assertIsNone(self.store.commit_curve(Point(100, 100), Point(200, 50)))
        self.assertIs(self.store.get_curve(), first)
        self.assertEqual(first.start, Point(0, 0))
        self.assertEqual(first.end, Point(10, 0))

    def test_pending_point_lifecycle(self) -> None:
        self.store.set_pending_point(Point(2, 2))
        self.assertTrue(self.store.has_pending_point())
        self.assertEqual(self.store.pending_point(), Point(2, 2))
        self.assertIsInstance(self.store.state, AwaitingSecondPoint)

        self.store.clear_pending_point()
        self.store.clear_pending_point()
        self.assertFalse(self.store.has_pending_point())
        self.assertIsNone(self.store.pending_point())

    def test_commit_replaces_pending_point(self) -> None:
        self.store.set_pending_point(Point(2, 2))
        self.store.commit_curve(Point(2, 2), Point(8, 2))
        self.assertIsInstance(self.store.state, CurveEditing)
        self.assertFalse(self.store.has_pending_point())

    def test_set_pending_point_outside_idle_raises(self) -> None:
        self.store.set_pending_point(Point(1, 1))
        with self.assertRaises(RceStateError):
            self.store.set_pending_point(Point(2, 2))

        self.store.clear()
        self.store.commit_curve(Point(0, 0), Point(4, 4))
        with self.assertRaises(RceStateError):
            self.store.set_pending_point(Point(2, 2))

    def test_clear_after_any_sequence(self) -> None:
        sequences = [
            [],
            [("pending", Point(1, 1))],
            [("commit", (Point(0, 0), Point(6, 6)))],
            [("commit", (Point(0, 0), Point(6, 6))), ("move", Point(9, 9))],
        ]
        for seq in sequences:
            store = CurveStore()
            for op, arg in seq:
                if op == "pending":
                    store.set_pending_point(arg)
                elif op == "commit":
                    store.commit_curve(*arg)
                elif op == "move":
                    store.get_curve().move(ControlPointId.END, arg)
            store.clear()
            self.assertIsNone(store.get_curve())
            self.assertFalse(store.has_pending_point())


class TestCurveModel(unittest.TestCase):
    def test_move_is_in_place(self) -> None:
        store = CurveStore()
        curve = store.commit_curve(Point(0, 0), Point(10, 0))
        curve.move(ControlPointId.END, Point(20, 5))
        self.assertIs(store.get_curve(), curve)
        self.assertEqual(curve.start, Point(0, 0))
        self.assertEqual(curve.mid, Point(5, 0))
        self.assertEqual(curve.end, Point(20, 5))

    def test_control_points_order(self) -> None:
        curve = CurveStore().commit_curve(Point(0, 0), Point(10, 0))
        ids = [cp for cp, _p in curve.control_points()]
        self.assertEqual(ids, [ControlPointId.START, ControlPointId.MID, ControlPointId.END])


if __name__ == "__main__":
    unittest.main()
