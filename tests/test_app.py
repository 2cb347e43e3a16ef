import json
import random
import threading
import unittest

from app import create_app
from fakes import FakeClient, GatedClient, make_pool
from game import BoardController, ViewState


class TestFlaskAPI(unittest.TestCase):
    def setUp(self):
        self.fake = FakeClient(pool=make_pool(8))
        self.controller = BoardController(self.fake, ViewState(), rng=random.Random(5))
        self.client = create_app(self.controller).test_client()

    def _post(self, url, payload=None):
        return self.client.post(url, data=json.dumps(payload or {}), content_type="application/json")

    def test_given_index_and_static_assets_when_requested_then_html_and_correct_mime(self):
        r = self.client.get("/")
        self.assertEqual(r.status_code, 200)
        self.assertIn(b"Jeopardy", r.data)

        rjs = self.client.get("/main.js")
        self.assertEqual(rjs.status_code, 200)
        self.assertIn("application/javascript", rjs.headers.get("Content-Type", ""))

        rcss = self.client.get("/styles.css")
        self.assertEqual(rcss.status_code, 200)
        self.assertIn("text/css", rcss.headers.get("Content-Type", ""))

    def test_given_health_when_requested_then_ok(self):
        r = self.client.get("/health")
        self.assertEqual(r.get_json(), {"status": "ok"})

    def test_given_fresh_app_when_board_requested_then_idle_view(self):
        r = self.client.get("/api/board")
        self.assertEqual(r.status_code, 200)
        view = r.get_json()["view"]
        self.assertEqual(view["button"], "start")
        self.assertEqual(view["headers"], [])
        self.assertFalse(view["loading"])

    def test_given_start_when_posted_then_six_columns_of_placeholders(self):
        r = self._post("/api/start")
        self.assertEqual(r.status_code, 200)
        data = r.get_json()
        self.assertTrue(data["ok"])
        view = data["view"]
        self.assertEqual(len(view["headers"]), 6)
        self.assertEqual(len(view["cells"]), 5)
        self.assertTrue(all(len(row) == 6 for row in view["cells"]))
        self.assertTrue(all(cell == {"text": "?", "style": None} for row in view["cells"] for cell in row))
        self.assertEqual(view["button"], "restart")

    def test_given_board_when_same_cell_revealed_three_times_then_question_answer_answer(self):
        self._post("/api/start")
        clue = self.controller.board.clue_at(3, 2)
        seen = []
        for _ in range(3):
            r = self._post("/api/reveal", {"col": 3, "row": 2})
            self.assertEqual(r.status_code, 200)
            seen.append(r.get_json())
        self.assertEqual([d["text"] for d in seen], [clue.question, clue.answer, clue.answer])
        self.assertEqual([d["state"] for d in seen], ["question", "answer", "answer"])
        self.assertEqual(seen[1]["style"], "answered")
        self.assertEqual(seen[2]["view"]["cells"][2][3]["text"], clue.answer)

    def test_given_no_board_when_revealing_then_409(self):
        r = self._post("/api/reveal", {"col": 0, "row": 0})
        self.assertEqual(r.status_code, 409)
        self.assertFalse(r.get_json()["ok"])

    def test_given_bad_payload_or_out_of_range_cell_then_400(self):
        self._post("/api/start")
        self.assertEqual(self._post("/api/reveal", {"col": "x", "row": 0}).status_code, 400)
        self.assertEqual(self._post("/api/reveal", {"row": 0}).status_code, 400)
        self.assertEqual(self._post("/api/reveal", {"col": 6, "row": 0}).status_code, 400)
        self.assertEqual(self._post("/api/reveal", {"col": 0, "row": 99}).status_code, 400)

    def test_given_category_fetch_failure_when_starting_then_502_and_no_board(self):
        self.fake.fail_ids = {p["id"] for p in make_pool(8)}
        r = self._post("/api/start")
        self.assertEqual(r.status_code, 502)
        data = r.get_json()
        self.assertFalse(data["ok"])
        self.assertEqual(data["view"]["headers"], [])
        self.assertEqual(data["view"]["button"], "start")
        self.assertIsNotNone(data["view"]["error"])
        self.assertIsNone(self.controller.board)
        self.assertEqual(self._post("/api/reveal", {"col": 0, "row": 0}).status_code, 409)

    def test_given_small_pool_when_starting_then_500(self):
        self.fake.pool = make_pool(3)
        r = self._post("/api/start")
        self.assertEqual(r.status_code, 500)
        self.assertIn("pool", r.get_json()["error"])

    def test_given_failure_then_retry_when_service_recovers_then_board(self):
        self.fake.fail_pool = True
        self.assertEqual(self._post("/api/start").status_code, 502)
        self.fake.fail_pool = False
        r = self._post("/api/start")
        self.assertEqual(r.status_code, 200)
        self.assertIsNone(r.get_json()["view"]["error"])

    def test_given_unexpected_error_when_starting_then_500_and_idle_view(self):
        self.controller.num_categories = -1
        r = self._post("/api/start")
        self.assertEqual(r.status_code, 500)
        data = r.get_json()
        self.assertFalse(data["ok"])
        self.assertFalse(data["view"]["loading"])
        self.assertEqual(data["view"]["button"], "start")
        self.assertIsNotNone(data["view"]["error"])

        self.controller.num_categories = 6
        self.assertEqual(self._post("/api/start").status_code, 200)

    def test_given_main_js_then_failed_start_falls_back_to_idle_error_view(self):
        body = self.client.get("/main.js").get_data(as_text=True)
        self.assertIn("idleErrorView", body)
        self.assertIn("catch (err)", body)


class TestFlaskAPIOverlappingStarts(unittest.TestCase):
    def test_given_two_overlapping_starts_then_older_request_gets_409(self):
        fake = GatedClient(pool=make_pool(8))
        controller = BoardController(fake, ViewState(), rng=random.Random(5))
        app = create_app(controller)
        responses = {}

        def older_start():
            r = app.test_client().post("/api/start", data="{}", content_type="application/json")
            responses["older"] = (r.status_code, r.get_json())

        worker = threading.Thread(target=older_start)
        worker.start()
        self.assertTrue(fake.entered.wait(5))

        newer = app.test_client().post("/api/start", data="{}", content_type="application/json")
        self.assertEqual(newer.status_code, 200)
        headers = newer.get_json()["view"]["headers"]

        fake.release.set()
        worker.join(5)
        self.assertFalse(worker.is_alive())
        status, data = responses["older"]
        self.assertEqual(status, 409)
        self.assertFalse(data["ok"])
        self.assertIn("superseded", data["error"])
        self.assertEqual(data["view"]["headers"], headers)
        self.assertIsNotNone(controller.board)


if __name__ == "__main__":
    unittest.main(verbosity=2)
