"""
Application Initialization
==========================
This module constructs the Store / Window pair and starts the Qt Event Loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Sets up logging.
2. Instantiates the Global Store (playback controller + QTimer task).
3. Instantiates the Main Window (View) and passes the Store into it.
4. Prevents circular import errors by being the orchestrator.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
import sys

from chaosgame import config
from chaosgame.logging_config import setup_logging
from chaosgame.model.render import RenderMode


@dataclass
class AppConfig:
    """Runtime settings collected from the command line."""
    iterations: int = config.DEFAULT_ITERATIONS
    max_iterations: int = config.MAX_ITERATIONS
    interval_ms: int = config.TICK_INTERVAL_MS
    render_mode: RenderMode = RenderMode.HIGHLIGHTED_LATEST
    log_level: int = logging.INFO
    log_file: str | None = None


def main(app_config: AppConfig | None = None) -> int:
    from chaosgame.app.application import create_app
    from chaosgame.app.state import Store
    from chaosgame.app.ui.main_window import MainWindow

    app_config = app_config or AppConfig()

    # 1. Setup Logging (Console + Optional File)
    setup_logging(level=app_config.log_level, log_file=app_config.log_file)

    # 2. Create the Qt Application
    app = create_app()

    # 3. Initialize the Store
    store = Store(
        max_iterations=app_config.max_iterations,
        interval_ms=app_config.interval_ms,
        render_mode=app_config.render_mode,
    )

    # 4. Initialize the Main Window, passing the store
    window = MainWindow(store)
    store.setParent(window)
    window.panel.spin_iterations.setValue(app_config.iterations)
    window.show()

    # 5. Start Event Loop
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
