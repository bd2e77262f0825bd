"""Native build primitives: hashing, write-time probing and resource embedding."""

from .hasher import fnv1a_32, hash_file, FNV1A_32_OFFSET_BASIS, FNV1A_32_PRIME, HASH_SENTINEL
from .filetime import get_file_write_time, select_backend, TIME_SENTINEL
from .embedder import embed_file, render_resource, parse_resource

__all__ = [
    'fnv1a_32',
    'hash_file',
    'FNV1A_32_OFFSET_BASIS',
    'FNV1A_32_PRIME',
    'HASH_SENTINEL',
    'get_file_write_time',
    'select_backend',
    'TIME_SENTINEL',
    'embed_file',
    'render_resource',
    'parse_resource'
]
