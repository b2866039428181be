import argparse
import os
import sys

from PySide6.QtCore import QUrl
from PySide6.QtQml import QQmlApplicationEngine
from PySide6.QtWidgets import QApplication

from tauview.app.backend import BackendFacade
from tauview.app.session import Session
from tauview.logger import get_logger
from tauview.path_utils import abs_path_str
from tauview.settings_manager import SettingsManager

# --- CLI logging options -----------------------------------------------------
# To prevent Qt from exiting due to unknown options, we parse our own logging
# options first, reflect them in environment variables (TAUVIEW_LOG_LEVEL,
# TAUVIEW_LOG_CATS), and drop them from the argv handed to Qt.


def _apply_cli_logging_options(args: list[str]) -> list[str]:
    parser = argparse.ArgumentParser(description="tauview", add_help=False)
    parser.add_argument("--log-level", help="Set log level")
    parser.add_argument("--log-cats", help="Set log categories")
    known, remaining = parser.parse_known_args(args)
    if known.log_level:
        os.environ["TAUVIEW_LOG_LEVEL"] = known.log_level
    if known.log_cats:
        os.environ["TAUVIEW_LOG_CATS"] = known.log_cats
    return remaining


def _parse_args(args: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="tauview", description="Browse the images of one folder")
    parser.add_argument("start_path", nargs="?", help="Image file or folder to open")
    parser.add_argument("--shell", help="QML file of the UI shell")
    parser.add_argument("--list", action="store_true", help="Print the images of start_path in order and exit")
    # Anything else (e.g. -platform offscreen) is left for Qt.
    known, _ = parser.parse_known_args(args)
    return known


def list_images(start_path: str) -> int:
    session = Session.open_explicit(start_path)
    for path in session.gallery:
        print(path)
    return 0


def run(argv: list[str] | None = None) -> int:
    """Application entrypoint (packaging-friendly)."""
    if argv is None:
        argv = sys.argv

    qt_argv = [argv[0] if argv else "tauview", *_apply_cli_logging_options(argv[1:])]
    args = _parse_args(qt_argv[1:])
    logger = get_logger("main")

    if args.list:
        if not args.start_path:
            logger.error("--list needs a start path")
            return 2
        return list_images(args.start_path)

    app = QApplication.instance() or QApplication(qt_argv)
    settings = SettingsManager()
    backend = BackendFacade(settings=settings)
    app.aboutToQuit.connect(backend.shutdown)

    # The path is held back until the shell sends appReady.
    backend.set_startup_path(args.start_path)

    shell = args.shell or settings.get("shell_qml")
    if not shell:
        logger.error("no UI shell configured: pass --shell or set shell_qml in %s", settings.settings_path)
        backend.shutdown()
        return 1

    qml = QQmlApplicationEngine()
    qml.rootContext().setContextProperty("backend", backend)
    qml.load(QUrl.fromLocalFile(abs_path_str(shell)))
    if not qml.rootObjects():
        logger.error("failed to load UI shell: %s", shell)
        backend.shutdown()
        return 1

    logger.debug("shell loaded: %s", shell)
    return app.exec()


if __name__ == "__main__":
    sys.exit(run())
