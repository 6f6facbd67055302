"""Channel implementations for byte sources.

Each channel module exports a `Channel` alias for its main channel class.

Available channels:
- memory: in-memory buffers
- file: binary file-like objects (files, pipes, socket files)
- s3: AWS S3 / MinIO objects via boto3 (requires the `s3` extra, import directly)
"""

from nvisy_stream.channels import file, memory

__all__ = [
    "file",
    "memory",
]
