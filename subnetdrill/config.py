"""
Simple configuration for SubnetDrill.
"""

import os
from dotenv import load_dotenv

load_dotenv()

# Basic settings
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", 7861))
DEBUG = os.getenv("DEBUG", "false").lower() == "true"
MCP_ENABLED = os.getenv("MCP_ENABLED", "true").lower() == "true"

# Puzzle generation
MAX_GENERATION_ATTEMPTS = int(os.getenv("MAX_GENERATION_ATTEMPTS", 250))
RANDOM_SEED = int(os.getenv("RANDOM_SEED")) if os.getenv("RANDOM_SEED") else None

# App info
APP_NAME = "SubnetDrill"
VERSION = "1.0.0"
DESCRIPTION = "IPv4 VLSM subnetting practice trainer"
