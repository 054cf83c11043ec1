import unittest

from core.rate_gate import RateGate
from domain.enums import ActionKind


class TestRateGate(unittest.TestCase):
    def setUp(self):
        self.gate = RateGate()

    def test_first_call_fires(self):
        self.assertTrue(self.gate.try_fire(ActionKind.PLACE, 0.0, 35))

    def test_within_interval_is_refused(self):
        self.assertTrue(self.gate.try_fire(ActionKind.PLACE, 1000.0, 35))
        self.assertFalse(self.gate.try_fire(ActionKind.PLACE, 1034.0, 35))
        # refusal leaves the timestamp alone
        self.assertTrue(self.gate.try_fire(ActionKind.PLACE, 1035.0, 35))

    def test_interval_boundary_fires(self):
        self.assertTrue(self.gate.try_fire(ActionKind.PLACE, 1000.0, 35))
        self.assertTrue(self.gate.try_fire(ActionKind.PLACE, 1035.0, 35))

    def test_actions_are_independent(self):
        self.assertTrue(self.gate.try_fire(ActionKind.PLACE, 1000.0, 35))
        self.assertTrue(self.gate.try_fire(ActionKind.ERASE, 1001.0, 50))
        self.assertFalse(self.gate.try_fire(ActionKind.ERASE, 1040.0, 50))
        self.assertTrue(self.gate.try_fire(ActionKind.PLACE, 1040.0, 35))

    def test_reset(self):
        self.gate.try_fire(ActionKind.CLEAR, 1000.0, 900)
        self.gate.reset(ActionKind.CLEAR)
        self.assertTrue(self.gate.try_fire(ActionKind.CLEAR, 1001.0, 900))
        self.gate.reset_all()
        self.assertTrue(self.gate.try_fire(ActionKind.CLEAR, 1002.0, 900))


if __name__ == '__main__':
    unittest.main()
