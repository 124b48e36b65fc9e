"""
3D Renderer Module - Wolfenstein3D style grid raycasting
"""

from .raycaster import Raycaster, Intersection, RayHit, Column
from .graphics import Graphics

__all__ = ['Raycaster', 'Intersection', 'RayHit', 'Column', 'Graphics']
