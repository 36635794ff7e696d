# voxelcraft

The core of a block-based voxel game world, without any rendering. It contains these modules:

- `voxelcraft.blocks` defines `BlockType`, `BlockClass` and `BlockData`. It also provides `type_to_class` and, for the list of placeable blocks, `block_names()`, `block_type_to_index` and `block_type_to_name`.
- `voxelcraft.chunk` defines `Chunk`. A chunk holds 16 × 256 × 16 blocks in a numpy array, `Chunk.blocks`, indexed `[x, y, z]`. `Chunk.build_mesh(world)` builds the vertices of the visible block faces, with ambient occlusion. It returns them as a `(solid, translucent)` pair.
- `voxelcraft.block_vertex` defines `BlockVertex`, a face vertex packed into 32 bits. `vertices_from_direction` returns the six vertices of one face of a unit block.
- `voxelcraft.world_generator` defines `WorldGenerator`, which fills chunks with noise-driven terrain: stone, dirt, grass, sand, water and bedrock. It also provides the helpers `terrain_height` and `column_block`. You can pass your own noise function as `noise(x, z) -> float` in `[-1, 1]`.
- `voxelcraft.world` defines `World`. A world loads chunks around a position and drops distant ones (`update`), reads and places blocks (`block_at`, `block_at_if_loaded`, `place_block`), and lists loaded chunks farthest first (`render_order`).
- `voxelcraft.ray` defines `Ray` and `HitTarget`. A ray walks through the block grid and finds the first non-air block within reach, along with the empty cell in front of it. `voxelcraft.axis_plane` provides the plane stepping that the ray uses.
- `voxelcraft.movement` provides `can_move(start, end, world)`. It tests the player's box (`voxelcraft.aabb.AABB`) against the blocks around it.
- `voxelcraft.camera` defines `Camera`, which holds the position, orientation, movement flags and view matrix. `pack`/`unpack` convert it to and from a fixed-size binary record.
- `voxelcraft.player` defines `Player`. It handles keyboard, mouse-button and cursor events and moves the camera, in free-flight mode or with gravity and jumping. Mouse clicks break, place and pick blocks.
- `voxelcraft.persistence` defines `Persistence`, which keeps the camera and every generated chunk in one binary save file.
- `voxelcraft.image` defines `Image`, an RGBA image held in memory. `split_tiles` cuts an atlas into tiles.
- `voxelcraft.assets` defines `AssetRegistry`, which caches loaded assets by name while they are alive. It also defines `TextRegistry`, which caches raw file contents.
- `voxelcraft.util` provides `positive_mod` and `read_binary_file`.

## Installation

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Example

```python
from voxelcraft.blocks import BlockType
from voxelcraft.persistence import Persistence
from voxelcraft.player import Player
from voxelcraft.ray import Ray
from voxelcraft.world import World

with Persistence("savefile.glc") as persistence:
    world = World(persistence)
    world.view_distance = 2
    player = Player(world, persistence)

    world.update(player.camera.position, 0.016)
    player.update(0.016)

    ray = Ray(player.camera.position, player.camera.look_direction, world, 4.5)
    if ray:
        world.place_block(BlockType.AIR, ray.hit_target.position)

    player.close()
# leaving the block writes the camera and every chunk back to savefile.glc
```

When you create a `Persistence`, it reads the save file if it can. If the file cannot be opened, it logs a warning and starts with a default camera and no chunks. A file too short to hold a camera raises `ValueError`. The file is written when you call `save()`, and again when the `with` block ends.

A chunk position is the world x/z coordinate of the chunk's corner, so both values are multiples of 16. `World.chunk_index` maps any block position to the position of the chunk that contains it.

## What it does not do

The package has no window, screen, renderer or GUI. It has no shaders and no GPU textures, and it has no command-line program. `Chunk.build_mesh` and `World.render_order` produce data for a renderer but draw nothing themselves. `Image` works on RGBA bytes you supply; the package does not decode image files such as PNG.