"""Defines a unified client for the Cloud189 web API."""

from cloudpan.web.clients.base import BaseClient
from cloudpan.web.clients.user import UserClient


class PanClient(
    UserClient,
    BaseClient,
):
    pass
