import json
import tempfile
import unittest
from pathlib import Path

from app import create_app
from models.permission import IdentifiedBy, Permission


class TestHostApp(unittest.TestCase):
    def setUp(self) -> None:
        self.permissions = [
            Permission("home", IdentifiedBy.ID, "loginBtn", False),
            Permission("home", IdentifiedBy.CLASS_NAME, "admin-panel", True),
            Permission("payroll", IdentifiedBy.NAME, "salary", False),
        ]
        self.app = create_app(permissions=self.permissions)
        self.app.testing = True
        self.client = self.app.test_client()

    def test_page_renders_script_for_its_resource(self) -> None:
        rv = self.client.get("/pages/home")
        self.assertEqual(rv.status_code, 200)
        body = rv.get_data(as_text=True)
        self.assertIn("<script>\ndocument.getElementById('loginBtn').style.visibility = 'hidden';\n</script>", body)
        self.assertNotIn("getElementsByName('salary')", body)
        self.assertNotIn("getElementsByClassName", body)

    def test_page_without_denials_has_no_script(self) -> None:
        rv = self.client.get("/pages/reports")
        self.assertEqual(rv.status_code, 200)
        self.assertNotIn("<script>", rv.get_data(as_text=True))

    def test_index_hides_every_denied_element(self) -> None:
        body = self.client.get("/").get_data(as_text=True)
        self.assertIn("getElementById('loginBtn')", body)
        self.assertIn("getElementsByName('salary')", body)

    def test_script_route_returns_raw_script(self) -> None:
        rv = self.client.get("/pages/payroll/script")
        self.assertEqual(rv.status_code, 200)
        self.assertEqual(rv.mimetype, "text/html")
        self.assertEqual(
            rv.get_data(as_text=True),
            "<script>\nArray.prototype.forEach.call(document.getElementsByName('salary'), "
            "element => {element.style.visibility = 'hidden'});\n</script>",
        )
        self.assertEqual(self.client.get("/pages/reports/script").get_data(as_text=True), "")

    def test_status_counts(self) -> None:
        data = self.client.get("/status").get_json()
        self.assertTrue(data["success"])
        self.assertEqual(data["permissions"], 3)
        self.assertEqual(data["denied"], 2)
        self.assertEqual(data["resources"], {"home": 2, "payroll": 1})

    def test_loads_permissions_file(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            p = Path(td) / "permissions.json"
            p.write_text(
                json.dumps([{"resourceName": "home", "identifiedBy": "Selector", "identifier": "#nav", "hasAccess": False}]),
                encoding="utf-8",
            )
            app = create_app(permissions_file=str(p))
        body = app.test_client().get("/pages/home/script").get_data(as_text=True)
        self.assertIn("document.querySelectorAll('#nav')", body)

    def test_bad_permissions_file_starts_with_no_permissions(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            p = Path(td) / "permissions.json"
            p.write_text("[{broken", encoding="utf-8")
            app = create_app(permissions_file=str(p))
        self.assertEqual(app.test_client().get("/status").get_json()["permissions"], 0)

    def test_unreadable_permissions_file_starts_with_no_permissions(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            p = Path(td) / "permissions.json"
            p.write_bytes(b"\xff\xfe")
            undecodable = create_app(permissions_file=str(p))
            directory = create_app(permissions_file=td)
        self.assertEqual(undecodable.test_client().get("/status").get_json()["permissions"], 0)
        self.assertEqual(directory.test_client().get("/status").get_json()["permissions"], 0)


if __name__ == "__main__":
    unittest.main()
