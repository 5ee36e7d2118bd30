"""Clipping showcase custom node package."""

"""
@title: ClippingShowcase
@nickname: ClippingShowcase
@description: Canvas clipping examples laid out as a grid of panels.
"""

from .node_mappings import NODE_CLASS_MAPPINGS, NODE_DISPLAY_NAME_MAPPINGS

print("-------------------------------")
print("\033[34mClippingShowcase\033[0m : \033[92m1 node loaded\033[0m")
print("-------------------------------")

__all__ = ["NODE_CLASS_MAPPINGS", "NODE_DISPLAY_NAME_MAPPINGS"]
