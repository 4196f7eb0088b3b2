#!/usr/bin/env python3
"""
SubnetDrill - IPv4 VLSM Subnetting Practice Trainer
Hugging Face Space Entry Point
"""

import logging
import os
from subnetdrill.config import APP_NAME, VERSION
from subnetdrill.ui import create_interface

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

logger = logging.getLogger(__name__)

def main():
    """Main application entry point for Hugging Face Space."""
    logger.info(f"Starting {APP_NAME} v{VERSION} for Hugging Face Space")

    app = create_interface()

    port = int(os.getenv("GRADIO_SERVER_PORT", 7860))
    launch_config = {
        "server_name": "0.0.0.0",
        "server_port": port,
        "share": False,
        "show_error": True,
        "mcp_server": True,
        "quiet": False
    }

    logger.info(f"🌐 Web Interface: Starting on port {port}")
    logger.info("🤖 MCP Server: Enabled for Hugging Face Space")

    try:
        app.launch(**launch_config)
    except Exception as e:
        logger.error(f"❌ Error launching app: {e}")
        raise

if __name__ == "__main__":
    main()
