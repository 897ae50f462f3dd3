#!/usr/bin/env python
"""Entry script for the feedback designer web app."""

import sys

from feedback_designer.shared.config import AppConfig
from feedback_designer.shared.logging_config import setup_logging

if __name__ == "__main__":
    # Headless mode: run.py --cli TLV62578 1.2 40
    if "--cli" in sys.argv:
        from feedback_designer.presentation.cli import main
        sys.exit(main([arg for arg in sys.argv[1:] if arg != "--cli"]))
    else:
        from feedback_designer.presentation.gradio_app import create_app
        config = AppConfig.from_env()
        setup_logging(config.logging.level, config.logging.log_file)
        print(f"🚀 Starting web interface at http://localhost:{config.server.port}")
        app = create_app(config)
        app.launch(
            server_name=config.server.host,
            server_port=config.server.port,
            share=config.server.share,
        )
