"""Aggregation of paginated ``ListObjectsV2`` calls into one entry sequence."""

from typing import TYPE_CHECKING, Optional

from s3_explorer.core import get_logger, get_tracer
from s3_explorer.core.exceptions import S3ExplorerError, StorageError
from s3_explorer.objectstorage.listing.models import CommonPrefix, RawEntry

if TYPE_CHECKING:
    from s3_explorer.objectstorage.clients import StorageClient

logger = get_logger(__name__)
tracer = get_tracer(__name__)

DELIMITER = "/"


def fetch_all(
    client: "StorageClient",
    bucket: str,
    prefix: str,
    *,
    max_pages: Optional[int] = None,
    page_size: Optional[int] = None,
) -> list[RawEntry]:
    """Fetch every page under ``prefix`` and return the combined raw entries.

    Each page is requested with the ``/`` delimiter so only immediate children
    come back; deeper keys collapse into a single common prefix. Within a page
    the common prefixes come first, then the objects, each in provider order.
    Pages are concatenated in the order the continuation tokens produced them.

    Args:
        client: Bound storage client
        bucket: Bucket name
        prefix: Listing prefix, empty or ending with ``/``
        max_pages: Abort after this many pages; ``None`` means unbounded
        page_size: ``MaxKeys`` to request per page; provider default when unset

    Returns:
        All raw entries from all pages

    Raises:
        StorageError: If any page fails or the page cap is exceeded. Pages
            already fetched are discarded.
    """
    entries: list[RawEntry] = []
    folder_count = 0
    file_count = 0
    page_count = 0
    continuation_token: Optional[str] = None

    with tracer.start_as_current_span("listing.fetch_all") as span:
        span.set_attribute("s3.bucket", bucket)
        span.set_attribute("s3.prefix", prefix)

        while True:
            if max_pages is not None and page_count >= max_pages:
                logger.error(
                    "Listing page limit exceeded",
                    bucket=bucket,
                    prefix=prefix,
                    max_pages=max_pages,
                )
                raise StorageError(
                    f"Listing s3://{bucket}/{prefix} exceeded {max_pages} pages",
                    bucket=bucket,
                    prefix=prefix,
                )

            try:
                page = client.list_page(
                    bucket,
                    prefix,
                    delimiter=DELIMITER,
                    continuation_token=continuation_token,
                    max_keys=page_size,
                )
            except S3ExplorerError:
                raise
            except Exception as e:
                logger.error(
                    "Failed to list objects",
                    bucket=bucket,
                    prefix=prefix,
                    page=page_count + 1,
                    error=str(e),
                )
                raise StorageError("Failed to list objects", cause=e, bucket=bucket, prefix=prefix) from e

            page_count += 1
            entries.extend(CommonPrefix(prefix=p) for p in page.common_prefixes)
            entries.extend(page.objects)
            folder_count += len(page.common_prefixes)
            file_count += len(page.objects)

            continuation_token = page.next_continuation_token
            if not continuation_token:
                break

            logger.info(
                "Fetched listing page",
                bucket=bucket,
                prefix=prefix,
                page=page_count,
                folders_so_far=folder_count,
                files_so_far=file_count,
            )

        span.set_attribute("listing.pages", page_count)

    logger.info(
        "Listing fetched",
        bucket=bucket,
        prefix=prefix,
        pages=page_count,
        folder_count=folder_count,
        file_count=file_count,
    )
    return entries
