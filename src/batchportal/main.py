"""Application entry point for the batch portal backend server."""

from batchportal.app import App
from batchportal.config import Config
from batchportal.logging import setup_logging
from batchportal.web.runner import run_server


def main() -> None:
    config = Config()  # type: ignore[call-arg]
    setup_logging(config.debug)
    app = App(config)
    run_server(app, config)


if __name__ == "__main__":
    main()
