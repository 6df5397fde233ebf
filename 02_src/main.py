"""Demo server: starts simulated components under the startup recorder."""

import os
from pathlib import Path

import uvicorn
from dotenv import load_dotenv

from sim import build_sim_components
from startup_recorder.api import create_fastapi_app
from startup_recorder.app import Application
from startup_recorder.config import RecorderConfig
from startup_recorder.logging_config import setup_logging
from startup_recorder.recorder import StepRecorder


def main():
    """Run the demo server."""
    project_root = Path(__file__).resolve().parent.parent
    load_dotenv(project_root / ".env")

    config = RecorderConfig.from_env()
    setup_logging(log_level=config.log_level, log_file=config.log_file)

    api_host = os.getenv("API_HOST", "localhost")
    api_port = int(os.getenv("API_PORT", "8000"))

    recorder = StepRecorder.from_config(config)
    application = Application(recorder, build_sim_components(recorder), name="demo")
    app = create_fastapi_app(application)

    # uvicorn's own logging config would replace ours
    uvicorn.run(
        app,
        host=api_host,
        port=api_port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
