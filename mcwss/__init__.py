"""Websocket server for Minecraft Bedrock Edition clients: players, agents, worlds and events."""

__version__ = "0.1.0"