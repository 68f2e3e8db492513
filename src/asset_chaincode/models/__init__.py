"""Data models for asset_chaincode."""

from .asset import MyAsset
from .response import Response, Status

__all__ = ["MyAsset", "Response", "Status"]
