import argparse
import logging
import sys

from PySide6.QtCore import Qt
from PySide6.QtGui import QColor, QPalette
from PySide6.QtWidgets import QApplication, QMainWindow

from components.image_surface import save_snapshot
from services.settings import APP_MODE, animate_from_env, bucket_options_from_env
from views.bucket_view import BucketView


class MainWindow(QMainWindow):
    """The main application window."""

    def __init__(self, options: dict, animate: bool = True):
        super().__init__()
        self.setWindowTitle("Liquid Bucket")

        self.view = BucketView(options=options, animate=animate)
        self.setCentralWidget(self.view)
        self.view.on_enter()

    def closeEvent(self, event):
        self.view.on_leave()
        super().closeEvent(event)


def setup_app_style() -> QPalette:
    QApplication.setStyle("Fusion")
    palette = QPalette()
    palette.setColor(QPalette.ColorRole.Window, QColor(240, 240, 240))
    palette.setColor(QPalette.ColorRole.WindowText, Qt.GlobalColor.black)
    palette.setColor(QPalette.ColorRole.Base, Qt.GlobalColor.white)
    palette.setColor(QPalette.ColorRole.Text, Qt.GlobalColor.black)
    palette.setColor(QPalette.ColorRole.Button, QColor(240, 240, 240))
    palette.setColor(QPalette.ColorRole.ButtonText, Qt.GlobalColor.black)
    return palette


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Animated liquid level bucket.")
    parser.add_argument("--level", type=float, help="fill level, 0-100")
    parser.add_argument("--static", action="store_true", help="draw once, no wave animation")
    parser.add_argument("--snapshot", metavar="PATH", help="write a PNG and exit (no window)")
    parser.add_argument("--debug", action="store_true", help="verbose logging")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)

    level = logging.DEBUG if args.debug or APP_MODE == "development" else logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s - %(levelname)s - %(message)s")

    options = bucket_options_from_env()
    if args.level is not None:
        options["level"] = args.level
    animate = animate_from_env() and not args.static

    if args.snapshot:
        save_snapshot(args.snapshot, **options)
        return 0

    app = QApplication(sys.argv[:1])
    app.setPalette(setup_app_style())

    window = MainWindow(options, animate=animate)
    window.show()

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
