"""S3 object channel using boto3."""

import logging
from typing import TYPE_CHECKING, ClassVar, Self

from pydantic import BaseModel, Field

from nvisy_stream.errors import ErrorKind, StreamError
from nvisy_stream.protocols import EOF, ByteSink

if TYPE_CHECKING:
    from mypy_boto3_s3 import S3Client

try:
    import boto3
    from botocore.exceptions import ClientError
except ImportError as e:
    _msg = "boto3 is required for S3 support. Install with: uv add 'nvisy-stream[s3]'"
    raise ImportError(_msg) from e

logger = logging.getLogger(__name__)


class S3Credentials(BaseModel, frozen=True):
    """Credentials for S3 connection."""

    access_key_id: str
    secret_access_key: str
    region: str = "us-east-1"
    endpoint_url: str | None = None


class S3ObjectParams(BaseModel, frozen=True):
    """Parameters for reading a single S3 object."""

    bucket: str
    """Bucket name."""

    key: str
    """Object key."""

    chunk_size: int = Field(default=8 * 1024 * 1024, gt=0)
    """Largest byte range requested per `get_object` call."""


class S3ObjectChannel:
    """Channel reading one S3 object through ranged GET requests."""

    __slots__: ClassVar[tuple[str, ...]] = ("_client", "_open", "_params", "_position", "_size")

    _client: "S3Client"
    _open: bool
    _params: S3ObjectParams
    _position: int
    _size: int

    def __init__(self, client: "S3Client", params: S3ObjectParams, size: int) -> None:
        self._client = client
        self._params = params
        self._size = size
        self._position = 0
        self._open = True

    @classmethod
    def connect(cls, credentials: S3Credentials, params: S3ObjectParams) -> Self:
        """Create an S3 client and resolve the object size."""
        try:
            client: S3Client = boto3.client(  # pyright: ignore[reportUnknownMemberType]
                "s3",
                aws_access_key_id=credentials.access_key_id,
                aws_secret_access_key=credentials.secret_access_key,
                region_name=credentials.region,
                endpoint_url=credentials.endpoint_url,
            )
        except Exception as e:
            msg = f"Failed to connect to S3: {e}"
            raise StreamError(msg, kind=ErrorKind.CONNECTION, source=e) from e

        return cls.from_client(client, params)

    @classmethod
    def from_client(cls, client: "S3Client", params: S3ObjectParams) -> Self:
        """Wrap an existing client, resolving the object size with HEAD."""
        try:
            head = client.head_object(Bucket=params.bucket, Key=params.key)
        except ClientError as e:
            error_code = e.response.get("Error", {}).get("Code", "Unknown")
            if error_code in ("404", "NoSuchKey"):
                msg = f"Object '{params.key}' not found in bucket '{params.bucket}'"
                raise StreamError(msg, kind=ErrorKind.NOT_FOUND, source=e) from e
            msg = f"Failed to connect to S3: {e}"
            raise StreamError(msg, kind=ErrorKind.CONNECTION, source=e) from e

        size = int(head["ContentLength"])
        logger.debug("Opened s3://%s/%s (%d bytes)", params.bucket, params.key, size)
        return cls(client, params, size)

    @property
    def size(self) -> int:
        return self._size

    def read(self, sink: ByteSink) -> int:
        """Fetch the next byte range into `sink`."""
        if not self._open:
            msg = "Read attempted on a closed channel"
            raise StreamError(msg, kind=ErrorKind.CLOSED)
        if self._position >= self._size:
            return EOF

        count = min(sink.remaining, self._params.chunk_size, self._size - self._position)
        first = self._position
        last = first + count - 1
        try:
            response = self._client.get_object(
                Bucket=self._params.bucket,
                Key=self._params.key,
                Range=f"bytes={first}-{last}",
            )
            body = response["Body"]
            try:
                data = body.read()
            finally:
                body.close()
        except ClientError as e:
            msg = f"Failed to read bytes {first}-{last} from S3: {e}"
            raise StreamError(msg, kind=ErrorKind.TRANSPORT, source=e) from e

        if len(data) != count:
            msg = f"Expected {count} bytes for range {first}-{last} from S3, got {len(data)}"
            raise StreamError(msg, kind=ErrorKind.TRANSPORT)

        written = sink.write(data)
        self._position += written
        return written

    def close(self) -> None:
        """Mark the channel closed (the boto3 client is left to its owner)."""
        self._open = False


Channel = S3ObjectChannel
