"""Save files holding the camera and every generated chunk."""

from __future__ import annotations

import copy
import logging
import os
import struct
from pathlib import Path
from typing import Optional, Sequence

import numpy as np

from .blocks import BlockClass, BlockType, type_to_class
from .camera import CAMERA_SIZE, Camera
from .chunk import BLOCK_COUNT, HORIZONTAL_SIZE, VERTICAL_SIZE, Chunk

logger = logging.getLogger(__name__)

_POSITION = struct.Struct("<2i")
_BLOCK_FIELDS = 2  # type and class, each a little-endian int32
CHUNK_BLOCK_BYTES = BLOCK_COUNT * _BLOCK_FIELDS * 4
CHUNK_RECORD_SIZE = _POSITION.size + CHUNK_BLOCK_BYTES

_CLASS_ORDER = list(BlockClass)
_CLASS_CODES = np.array([_CLASS_ORDER.index(type_to_class(t)) for t in BlockType], dtype="<i4")
_MAX_TYPE = max(int(t) for t in BlockType)


def _encode_blocks(chunk: Chunk) -> bytes:
    types = chunk.blocks.astype("<i4")
    record = np.empty((HORIZONTAL_SIZE, VERTICAL_SIZE, HORIZONTAL_SIZE, _BLOCK_FIELDS), dtype="<i4")
    record[..., 0] = types
    record[..., 1] = _CLASS_CODES[types]
    return record.tobytes()


def _decode_blocks(data: bytes, offset: int) -> np.ndarray:
    record = np.frombuffer(data, dtype="<i4", count=BLOCK_COUNT * _BLOCK_FIELDS, offset=offset)
    types = record.reshape(HORIZONTAL_SIZE, VERTICAL_SIZE, HORIZONTAL_SIZE, _BLOCK_FIELDS)[..., 0]
    if types.min() < 0 or types.max() > _MAX_TYPE:
        raise ValueError("save file holds an unknown block type")
    return types.astype(np.uint8)


class Persistence:
    """Chunks and camera of one save file; written back by save or on leaving a with block."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = Path(path)
        self._camera = Camera()
        self._chunks: dict[tuple[int, int], Chunk] = {}

        try:
            data = self.path.read_bytes()
        except OSError as error:
            logger.warning("Failed to open the file: %s (%s)", self.path, error)
            return
        self._load(data)

    def _load(self, data: bytes) -> None:
        if len(data) < CAMERA_SIZE:
            raise ValueError(f"save file {self.path} is too short to hold a camera")
        self._camera = Camera.unpack(data[:CAMERA_SIZE])

        chunk_count = (len(data) - CAMERA_SIZE) // CHUNK_RECORD_SIZE
        for index in range(chunk_count):
            start = CAMERA_SIZE + index * CHUNK_RECORD_SIZE
            position = _POSITION.unpack_from(data, start)
            chunk = Chunk(position)
            chunk.blocks[...] = _decode_blocks(data, start + _POSITION.size)
            chunk.set_dirty()
            self._chunks[chunk.position] = chunk

    @property
    def camera(self) -> Camera:
        return self._camera

    def commit_chunk(self, chunk: Chunk) -> None:
        self._chunks[chunk.position] = chunk

    def get_chunk(self, position: Sequence[int]) -> Optional[Chunk]:
        x, z = position
        return self._chunks.get((x, z))

    def commit_camera(self, camera: Camera) -> None:
        """Store a copy of the camera."""
        self._camera = copy.deepcopy(camera)

    def save(self) -> None:
        """Write the camera and all committed chunks to the save file."""
        with open(self.path, "wb") as file:
            file.write(self._camera.pack())
            for chunk in self._chunks.values():
                file.write(_POSITION.pack(*chunk.position))
                file.write(_encode_blocks(chunk))

    def __enter__(self) -> Persistence:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.save()