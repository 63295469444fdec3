import os

from PySide6.QtCore import Qt, QObject, QThread, Signal
from PySide6.QtWidgets import (
    QMainWindow,
    QWidget,
    QVBoxLayout,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QFileDialog,
    QListWidget,
    QListWidgetItem,
    QPlainTextEdit,
    QSplitter,
    QProgressBar,
)

from etta_scaffold.core.resolver import resolve_scaffold_paths, validate_scaffold_inputs
from etta_scaffold.core.writer import write_scaffold
from etta_scaffold.errors import InvalidItemPath, ScaffoldError
from etta_scaffold.config import APP_NAME, APP_VERSION


class ScaffoldWorker(QObject):
    progress = Signal(int, int, str)   # current, total, message
    finished = Signal(object)          # ScaffoldSummary
    failed = Signal(str)

    def __init__(self, paths):
        super().__init__()
        self.paths = paths

    def run(self):
        try:
            summary = write_scaffold(self.paths, progress_cb=self.progress.emit)
        except ScaffoldError as e:
            self.failed.emit(str(e))
            return
        self.finished.emit(summary)


class MainWindow(QMainWindow):
    def __init__(self):
        super().__init__()
        self.setWindowTitle(f"{APP_NAME} (v{APP_VERSION})")
        self.setMinimumSize(900, 560)

        # State
        self._last_paths = None
        self._gen_thread = None
        self._gen_worker = None

        root = QWidget()
        self.setCentralWidget(root)

        main_layout = QVBoxLayout(root)
        main_layout.setContentsMargins(12, 12, 12, 12)
        main_layout.setSpacing(10)

        # -------------------------
        # Output folder
        # -------------------------
        self.output_edit = QLineEdit()
        self.output_edit.setPlaceholderText("Folder the pack is created in (default: current directory)...")

        btn_output = QPushButton("Browse...")
        btn_output.clicked.connect(self.pick_output_folder)

        output_row = QHBoxLayout()
        output_row.addWidget(QLabel("Output:"))
        output_row.addWidget(self.output_edit, 1)
        output_row.addWidget(btn_output)

        main_layout.addLayout(output_row)

        # -------------------------
        # Description / Item path
        # -------------------------
        item_row = QHBoxLayout()

        self.description_edit = QLineEdit()
        self.description_edit.setPlaceholderText("Pack description (also the pack folder name)")

        self.item_path_edit = QLineEdit()
        self.item_path_edit.setPlaceholderText("Item path (e.g. weapons/sword)")

        item_row.addWidget(QLabel("Description:"))
        item_row.addWidget(self.description_edit, 1)
        item_row.addWidget(QLabel("Item:"))
        item_row.addWidget(self.item_path_edit, 1)

        main_layout.addLayout(item_row)

        # -------------------------
        # Buttons + progress
        # -------------------------
        btn_row = QHBoxLayout()

        self.progress = QProgressBar()
        self.progress.setRange(0, 100)
        self.progress.setValue(0)

        self.btn_preview = QPushButton("Preview")
        self.btn_preview.clicked.connect(self.on_preview_clicked)

        self.btn_generate = QPushButton("Generate")
        self.btn_generate.clicked.connect(self.on_generate_clicked)

        btn_row.addWidget(QLabel("Progress:"))
        btn_row.addWidget(self.progress, 1)
        btn_row.addWidget(self.btn_preview)
        btn_row.addWidget(self.btn_generate)

        main_layout.addLayout(btn_row)

        # -------------------------
        # Bottom: Results + Logs
        # -------------------------
        splitter = QSplitter(Qt.Horizontal)

        results_panel = QWidget()
        results_layout = QVBoxLayout(results_panel)
        results_layout.setContentsMargins(0, 0, 0, 0)

        results_layout.addWidget(QLabel("Results"))
        self.results_list = QListWidget()
        results_layout.addWidget(self.results_list, 1)

        logs_panel = QWidget()
        logs_layout = QVBoxLayout(logs_panel)
        logs_layout.setContentsMargins(0, 0, 0, 0)

        logs_layout.addWidget(QLabel("Log"))
        self.log_box = QPlainTextEdit()
        self.log_box.setReadOnly(True)
        self.log_box.setPlaceholderText("Logs will appear here...")
        logs_layout.addWidget(self.log_box, 1)

        splitter.addWidget(results_panel)
        splitter.addWidget(logs_panel)
        splitter.setSizes([520, 380])

        main_layout.addWidget(splitter, 1)

        self.log("Ready. Enter a description and an item path, then Preview / Generate.")

        self.output_edit.setObjectName("output_edit")
        self.description_edit.setObjectName("description_edit")
        self.item_path_edit.setObjectName("item_path_edit")
        self.btn_preview.setObjectName("btn_preview")
        self.btn_generate.setObjectName("btn_generate")
        self.results_list.setObjectName("results_list")
        self.log_box.setObjectName("log_box")
        self.progress.setObjectName("progress")

    # -------------------------
    # UI Helpers
    # -------------------------
    def log(self, msg: str):
        self.log_box.appendPlainText(msg)

    def add_result(self, level: str, message: str):
        text = f"[{level}] {message}"
        item = QListWidgetItem(text)

        lvl = level.upper().strip()
        if lvl == "ERROR":
            item.setForeground(Qt.red)
        elif lvl == "WARNING":
            item.setForeground(Qt.darkYellow)
        else:
            item.setForeground(Qt.darkGreen)

        self.results_list.addItem(item)

    def pick_output_folder(self):
        folder = QFileDialog.getExistingDirectory(self, "Select Output Folder")
        if folder:
            self.output_edit.setText(os.path.normpath(folder))
            self.log(f"Output folder set: {folder}")

    def _resolve_current(self):
        """
        Validates the form and resolves the scaffold paths. Reports problems in
        the results list and returns None when resolution is blocked.
        """
        description = self.description_edit.text()
        item_path = self.item_path_edit.text()
        base_dir = self.output_edit.text().strip() or None

        for r in validate_scaffold_inputs(description, item_path):
            suffix = f" ({r.relpath})" if r.relpath else ""
            self.add_result(r.level, f"{r.code}: {r.message}{suffix}")

        try:
            return resolve_scaffold_paths(description, item_path, base_dir=base_dir)
        except InvalidItemPath as e:
            self.log(f"ERROR: {e}")
            return None

    # -------------------------
    # Preview
    # -------------------------
    def on_preview_clicked(self):
        self.results_list.clear()
        self._last_paths = None

        self.log("---- PREVIEW START ----")
        paths = self._resolve_current()
        if paths is None:
            self.add_result("ERROR", "Preview blocked due to errors.")
            self.log("---- PREVIEW BLOCKED ----")
            return

        self.add_result("INFO", f"Item: {paths.item_name}")
        self.add_result("INFO", f"Pack root:      {paths.root_dir}")
        self.add_result("INFO", f"Pack metadata:  {paths.pack_meta_file}")
        self.add_result("INFO", f"Scaffold dir:   {paths.scaffold_dir}")
        self.add_result("INFO", f"Item metadata:  {paths.item_meta_file}")
        self.add_result("INFO", f"Frames dir:     {paths.frames_dir}")

        for p in (paths.pack_meta_file, paths.item_meta_file):
            if p.exists():
                self.add_result("WARNING", f"Will overwrite: {p}")

        self._last_paths = paths
        self.add_result("INFO", "Preview OK. Click Generate to write the scaffold.")
        self.log("---- PREVIEW DONE ----")

    # -------------------------
    # Generate
    # -------------------------
    def on_generate_clicked(self):
        # Always re-run Preview so edits made after the last Preview are picked up
        self.on_preview_clicked()
        if self._last_paths is None:
            return

        self.progress.setValue(0)
        self.btn_preview.setEnabled(False)
        self.btn_generate.setEnabled(False)

        self.log("---- GENERATE START ----")

        self._gen_thread = QThread(self)
        self._gen_worker = ScaffoldWorker(self._last_paths)
        self._gen_worker.moveToThread(self._gen_thread)

        self._gen_thread.started.connect(self._gen_worker.run)
        self._gen_worker.progress.connect(self._on_generate_progress)
        self._gen_worker.finished.connect(self._on_generate_finished)
        self._gen_worker.failed.connect(self._on_generate_failed)

        self._gen_worker.finished.connect(self._gen_thread.quit)
        self._gen_worker.failed.connect(self._gen_thread.quit)
        self._gen_worker.finished.connect(self._gen_worker.deleteLater)
        self._gen_worker.failed.connect(self._gen_worker.deleteLater)
        self._gen_thread.finished.connect(self._on_thread_finished)
        self._gen_thread.finished.connect(self._gen_thread.deleteLater)

        self._gen_thread.start()

    def _on_generate_progress(self, current: int, total: int, message: str):
        pct = int((current / max(total, 1)) * 100)
        self.progress.setValue(pct)
        self.log(message)

    def _on_thread_finished(self):
        self._gen_thread = None

    def _unlock_buttons(self):
        self.btn_preview.setEnabled(True)
        self.btn_generate.setEnabled(True)

    def _on_generate_finished(self, summary):
        self._unlock_buttons()

        for path in summary.written:
            note = " (overwritten)" if path in summary.overwritten else ""
            self.add_result("INFO", f"Written: {path}{note}")
        self.add_result("INFO", f"Scaffold ready: {summary.paths.scaffold_dir}")

        self.progress.setValue(100)
        self.log("---- GENERATE DONE ----")

    def _on_generate_failed(self, message: str):
        self._unlock_buttons()
        self.add_result("ERROR", f"GENERATE_FAILED: {message}")
        self.log(f"ERROR: {message}")
        self.log("---- GENERATE FAILED ----")

    def closeEvent(self, event):
        # QThread must not be destroyed while running
        if self._gen_thread is not None:
            self._gen_thread.quit()
            self._gen_thread.wait()
        super().closeEvent(event)
