"""Global configuration values."""

import os
from pathlib import Path

# Character name of the hosting agent; prefixes per-user cache keys
AGENT_NAME = os.environ.get("AGENT_NAME", "Matchmaker")

# Agent id exposed by the HTTP message endpoint
AGENT_ID = os.environ.get("AGENT_ID", "34595365-cab6-0d4e-80be-4e590a7ffc71")

# LLM provider for extraction and matchmaking ("gemini" or "openai")
LLM_PROVIDER = os.environ.get("LLM_PROVIDER", "gemini").lower()

# Default Gemini model (can be overridden via env)
DEFAULT_MODEL = os.environ.get("GEMINI_MODEL", "gemini-2.0-flash")

# Model classes: SMALL for quick judgements, LARGE for extraction
SMALL_MODEL = os.environ.get("MATCHMAKER_SMALL_MODEL", "gemini-2.0-flash-lite")
LARGE_MODEL = os.environ.get("MATCHMAKER_LARGE_MODEL", DEFAULT_MODEL)

OPENAI_SMALL_MODEL = os.environ.get("OPENAI_SMALL_MODEL", "gpt-4o-mini")
OPENAI_LARGE_MODEL = os.environ.get("OPENAI_LARGE_MODEL", "gpt-4o")

# Cache backend ("memory" or "file")
CACHE_BACKEND = os.environ.get("CACHE_BACKEND", "memory").lower()

# Root directory for file-backed data
DATA_DIR = Path(os.environ.get("DATA_DIR", Path(__file__).resolve().parent / "data"))

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

# Base URL the conversation simulator posts to
SERVER_URL = os.environ.get("MATCHMAKER_SERVER_URL", "http://localhost:3000")

# Platforms whose accounts are recorded on a user's profile
CLIENTS = [c.strip().lower() for c in os.environ.get("MATCHMAKER_CLIENTS", "direct,telegram").split(",") if c.strip()]

# Port for the HTTP message endpoint
PORT = int(os.environ.get("PORT", 3000))

# OriginTrail DKG publishing of interest graphs; disabled unless both keys are set
OT_ENVIRONMENT = os.environ.get("OT_ENVIRONMENT", "testnet")
OT_NODE_HOSTNAME = os.environ.get("OT_NODE_HOSTNAME", "https://v6-pegasus-node-02.origin-trail.network")
OT_NODE_PORT = int(os.environ.get("OT_NODE_PORT", 8900))
OT_BLOCKCHAIN_NAME = os.environ.get("OT_BLOCKCHAIN_NAME", "gnosis:10200")
OT_PUBLIC_KEY = os.environ.get("OT_PUBLIC_KEY")
OT_PRIVATE_KEY = os.environ.get("OT_PRIVATE_KEY")
DKG_EPOCHS = int(os.environ.get("DKG_EPOCHS", 12))
