"""
Application Initialization
==========================
This module wires the Model and the View together and starts the Qt Event
Loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Sets up logging.
2. Configures pyqtgraph before any plot widget exists.
3. Creates the Main Window, which owns the DiffractionCalculator.
"""
import argparse
import logging
import sys

import pyqtgraph as pg
from PySide6.QtWidgets import QApplication

from slitdiffraction.config import VISIBLE_APP_NAME
from slitdiffraction.logging_config import setup_logging
from slitdiffraction.view.main_window import MainWindow


def main() -> None:
    parser = argparse.ArgumentParser(prog="slitdiffraction", description=VISIBLE_APP_NAME)
    parser.add_argument("--debug", action="store_true", help="log at DEBUG level")
    parser.add_argument("--log-file", default=None, help="also write the log to this file")
    args, qt_args = parser.parse_known_args()

    # 1. Setup Logging (Console + Optional File)
    setup_logging(level=logging.DEBUG if args.debug else logging.INFO, log_file=args.log_file)

    # 2. Create the Qt Application (leftover arguments belong to Qt)
    app = QApplication([sys.argv[0], *qt_args])
    app.setApplicationName(VISIBLE_APP_NAME)

    pg.setConfigOption("background", "w")
    pg.setConfigOption("foreground", "k")
    pg.setConfigOption("antialias", True)

    # 3. Initialize the Main Window (it creates the model from its default inputs)
    window = MainWindow()
    window.show()

    # 4. Start Event Loop
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
