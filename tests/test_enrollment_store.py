import threading
import unittest
from datetime import timezone

from enrollment_store import EnrollmentStore


def _fields(name="Ana", program="X"):
    return {
        "nombres": name,
        "apellidos": "Lopez",
        "documento": "123",
        "email": "a@b.co",
        "telefono": "",
        "programa": program,
        "modalidad": "Virtual",
        "inicio": "2026-01-15",
    }


class EnrollmentStoreTests(unittest.TestCase):
    def setUp(self):
        self.store = EnrollmentStore()

    def test_append_assigns_id_and_timestamp(self):
        record = self.store.append(_fields())
        self.assertTrue(record.id)
        self.assertEqual(len(record.id), 16)
        self.assertEqual(record.ts.tzinfo, timezone.utc)
        self.assertEqual(record.program, "X")
        self.assertEqual(record.full_name, "Ana Lopez")

    def test_list_preserves_insertion_order(self):
        first = self.store.append(_fields(name="A"))
        second = self.store.append(_fields(name="B"))
        total, items = self.store.list()
        self.assertEqual(total, 2)
        self.assertEqual([r.id for r in items], [first.id, second.id])

    def test_list_is_a_snapshot(self):
        self.store.append(_fields())
        _, before = self.store.list()
        self.store.append(_fields(name="B"))
        self.assertEqual(len(before), 1)
        self.assertIsInstance(before, tuple)

    def test_records_are_immutable(self):
        record = self.store.append(_fields())
        with self.assertRaises(AttributeError):
            record.program = "Y"

    def test_to_dict_uses_form_field_names(self):
        record = self.store.append(_fields())
        data = record.to_dict()
        self.assertEqual(data["id"], record.id)
        self.assertEqual(data["programa"], "X")
        self.assertEqual(data["nombres"], "Ana")
        self.assertEqual(data["ts"], record.ts.isoformat())

    def test_concurrent_appends_are_not_lost(self):
        def worker():
            for _ in range(50):
                self.store.append(_fields())

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        total, items = self.store.list()
        self.assertEqual(total, 400)
        self.assertEqual(len(self.store), 400)
        self.assertEqual(len({r.id for r in items}), 400)


if __name__ == "__main__":
    unittest.main()
