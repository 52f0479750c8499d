"""Allow running Countdown as a module: python -m countdown."""

import logging
import sys

from PyQt6.QtWidgets import QApplication

from .app import CountdownApp
from .logger import setup_logging
from .settings import load_settings


def main() -> None:
    settings = load_settings()
    setup_logging(settings.log_level)
    logging.getLogger(__name__).info("Countdown ready!")

    app = QApplication(sys.argv)
    app.setApplicationName("Countdown")
    app.setOrganizationName("Countdown")

    window = CountdownApp(settings)
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
