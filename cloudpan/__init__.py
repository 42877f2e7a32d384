"""Defines the common interface for the cloudpan Python API."""

__version__ = "0.1.0"

from cloudpan.web.clients.client import PanClient
