"""
Test helpers for the DynamoDB table factory.

Sample annotated models shared across the unit tests.
"""

from .models import Order, PipelineRun, Shipment, UnmarkedModel

__all__ = [
    "Order",
    "PipelineRun",
    "Shipment",
    "UnmarkedModel",
]
