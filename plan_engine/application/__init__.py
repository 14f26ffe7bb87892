"""Application layer: ports and exceptions shared by services and adapters."""
