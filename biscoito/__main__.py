"""Entry point for Biscoito."""

import logging

from biscoito.app import BiscoitoApp
from biscoito.engine.save import SAVE_DIR

LOG_FILE = SAVE_DIR / "biscoito.log"


def main() -> None:
    SAVE_DIR.mkdir(parents=True, exist_ok=True)
    # The terminal belongs to Textual; logs go to a file
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        handlers=[logging.FileHandler(LOG_FILE, encoding="utf-8")],
    )
    app = BiscoitoApp()
    app.run()


if __name__ == "__main__":
    main()
