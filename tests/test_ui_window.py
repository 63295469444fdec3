import os
import tempfile
import unittest
from pathlib import Path

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PySide6.QtWidgets import QApplication
from PySide6.QtTest import QTest
from PySide6.QtCore import Qt

from etta_scaffold.ui.main_window import MainWindow


def _wait_until(predicate, timeout_ms=5000):
    waited = 0
    while not predicate() and waited < timeout_ms:
        QTest.qWait(50)
        waited += 50
    return predicate()


class TestMainWindowUI(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        # Ensure one QApplication exists
        cls.app = QApplication.instance() or QApplication([])

    def setUp(self):
        self.window = MainWindow()
        self.window.show()
        QTest.qWaitForWindowExposed(self.window)

    def tearDown(self):
        self.window.close()

    def test_preview_lists_paths_without_writing(self):
        with tempfile.TemporaryDirectory() as output_dir:
            out = Path(output_dir)

            self.window.output_edit.setText(str(out))
            self.window.description_edit.setText("My Pack")
            self.window.item_path_edit.setText("weapons/sword")

            btn_preview = self.window.findChild(type(self.window.btn_preview), "btn_preview")
            QTest.mouseClick(btn_preview, Qt.LeftButton)

            results = self.window.results_list
            texts = [results.item(i).text() for i in range(results.count())]
            self.assertTrue(any("sword.mcmetax" in t for t in texts))
            self.assertTrue(any("Preview OK" in t for t in texts))
            self.assertEqual(list(out.iterdir()), [])

            log_box = self.window.findChild(type(self.window.log_box), "log_box")
            self.assertIn("PREVIEW DONE", log_box.toPlainText())

    def test_preview_blocked_on_bad_item_path(self):
        self.window.description_edit.setText("abc")
        self.window.item_path_edit.setText("../escape")

        QTest.mouseClick(self.window.btn_preview, Qt.LeftButton)

        results = self.window.results_list
        texts = [results.item(i).text() for i in range(results.count())]
        self.assertTrue(any("ITEM_PATH_TRAVERSAL" in t for t in texts))
        self.assertIn("PREVIEW BLOCKED", self.window.log_box.toPlainText())

    def test_generate_writes_scaffold(self):
        with tempfile.TemporaryDirectory() as output_dir:
            out = Path(output_dir)

            self.window.output_edit.setText(str(out))
            self.window.description_edit.setText("abc")
            self.window.item_path_edit.setText("diamond_sword")

            btn_generate = self.window.findChild(type(self.window.btn_generate), "btn_generate")
            QTest.mouseClick(btn_generate, Qt.LeftButton)

            done = _wait_until(lambda: "GENERATE DONE" in self.window.log_box.toPlainText())
            self.assertTrue(done)
            self.assertTrue((out / "abc" / "pack.mcmeta").is_file())
            self.assertTrue((out / "abc" / "diamond_sword.etta" / "diamond_sword.mcmetax").is_file())
            self.assertTrue((out / "abc" / "diamond_sword.etta" / "frames").is_dir())
            self.assertEqual(self.window.progress.value(), 100)
            self.assertTrue(self.window.btn_generate.isEnabled())
            self.assertTrue(_wait_until(lambda: self.window._gen_thread is None))


    def test_item_path_taken_verbatim(self):
        self.window.description_edit.setText("abc")
        self.window.item_path_edit.setText("sword ")

        QTest.mouseClick(self.window.btn_preview, Qt.LeftButton)

        paths = self.window._last_paths
        self.assertIsNotNone(paths)
        self.assertEqual(paths.item_name, "sword ")
        self.assertEqual(paths.scaffold_dir, Path("abc") / "sword .etta")


if __name__ == "__main__":
    unittest.main()
