"""DKG Service - Publishes interest graphs to the OriginTrail DKG.

Publishing is optional: it only happens when the blockchain keypair
(OT_PUBLIC_KEY / OT_PRIVATE_KEY) is configured. The published asset's
UAL is returned so callers can keep it next to the cached graph.

Interface Contract:
- enabled -> bool
- publish(graph) -> str (UAL)
- explorer_link(ual) -> str
- publish() raises DKGServiceError on failure
"""

from __future__ import annotations

import logging
from typing import Any

from dkg import DKG
from dkg.providers import BlockchainProvider, NodeHTTPProvider

from config import (
    DKG_EPOCHS,
    OT_BLOCKCHAIN_NAME,
    OT_ENVIRONMENT,
    OT_NODE_HOSTNAME,
    OT_NODE_PORT,
    OT_PRIVATE_KEY,
    OT_PUBLIC_KEY,
)

logger = logging.getLogger(__name__)

MAINNET_EXPLORER = "https://dkg.origintrail.io/explore?ual="
TESTNET_EXPLORER = "https://dkg-testnet.origintrail.io/explore?ual="


class DKGServiceError(Exception):
    """Raised when publishing to the DKG fails."""
    pass


class DKGService:
    """Thin wrapper over the dkg.py client."""

    def __init__(
        self,
        client=None,
        *,
        environment: str = OT_ENVIRONMENT,
        endpoint: str = OT_NODE_HOSTNAME,
        port: int = OT_NODE_PORT,
        blockchain: str = OT_BLOCKCHAIN_NAME,
        public_key: str | None = OT_PUBLIC_KEY,
        private_key: str | None = OT_PRIVATE_KEY,
        epochs: int = DKG_EPOCHS,
    ):
        """Initialize DKGService.

        Args:
            client: Pre-built DKG client. If None, one is created on first publish.
            epochs: Number of epochs the asset is kept on the network
        """
        self._client = client
        self.environment = environment
        self.endpoint = endpoint
        self.port = port
        self.blockchain = blockchain
        self.public_key = public_key
        self.private_key = private_key
        self.epochs = epochs

    @property
    def enabled(self) -> bool:
        return self._client is not None or bool(self.public_key and self.private_key)

    @property
    def client(self):
        if self._client is None:
            if not (self.public_key and self.private_key):
                raise DKGServiceError("Missing DKG blockchain credentials (OT_PUBLIC_KEY and/or OT_PRIVATE_KEY)")
            logger.info(
                "Connecting to DKG node %s:%s (%s, %s)",
                self.endpoint, self.port, self.environment, self.blockchain,
            )
            node_provider = NodeHTTPProvider(f"{self.endpoint}:{self.port}")
            blockchain_provider = BlockchainProvider(
                self.environment,
                self.blockchain,
                private_key=self.private_key,
            )
            self._client = DKG(node_provider, blockchain_provider)
        return self._client

    def explorer_link(self, ual: str) -> str:
        base = MAINNET_EXPLORER if self.environment == "mainnet" else TESTNET_EXPLORER
        return f"{base}{ual}"

    def publish(self, graph: dict[str, Any]) -> str:
        """Create a public knowledge asset from ``graph`` and return its UAL."""
        try:
            result = self.client.asset.create({"public": graph}, self.epochs)
        except DKGServiceError:
            raise
        except Exception as e:
            raise DKGServiceError(f"DKG asset creation failed: {e}") from e

        ual = result.get("UAL") if isinstance(result, dict) else None
        if not ual:
            raise DKGServiceError("DKG asset created but no UAL returned")
        logger.info("Knowledge graph published to DKG: %s (%s)", ual, self.explorer_link(ual))
        return ual
