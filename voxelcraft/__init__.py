"""Voxel world core: blocks, chunks, terrain, ray picking, movement, images, assets and save files."""

__version__ = "0.1.0"

__all__ = [
    "aabb",
    "assets",
    "axis_plane",
    "block_vertex",
    "blocks",
    "camera",
    "chunk",
    "image",
    "movement",
    "persistence",
    "player",
    "ray",
    "util",
    "world",
    "world_generator",
]